"""Exception hierarchy for promptcode.

Every error raised by the library derives from :class:`PromptCodeError`, so
callers (the CLI included) can catch one type at the boundary.

Hierarchy::

    PromptCodeError (base)
    ├── ConfigurationError   missing credential, unknown provider type
    ├── ProviderError        transport failure, bad status, malformed payload
    └── GenerationError      any failure inside CodeGenerator.generate
"""
from __future__ import annotations

from typing import Any, Optional


class PromptCodeError(Exception):
    """Base exception for all promptcode errors.

    Attributes:
        message: Human-readable error message
        details: Additional error details (optional)
    """

    default_message: str = "An error occurred"

    def __init__(self, message: Optional[str] = None, details: Optional[str] = None) -> None:
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        result = {"error": self.__class__.__name__, "message": self.message}
        if self.details:
            result["details"] = self.details
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r})"


class ConfigurationError(PromptCodeError):
    """Raised when configuration is invalid or missing.

    Examples:
        - Empty or missing API token
        - Unsupported provider type
    """

    default_message = "Configuration error"


class ProviderError(PromptCodeError):
    """Raised when a provider backend call fails.

    ``provider`` names the backend and ``status_code`` holds the HTTP status
    when the backend answered at all.
    """

    default_message = "Provider error"

    def __init__(
        self,
        message: Optional[str] = None,
        details: Optional[str] = None,
        provider: Optional[str] = None,
        status_code: Optional[int] = None,
    ) -> None:
        super().__init__(message, details)
        self.provider = provider
        self.status_code = status_code

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        if self.provider:
            result["provider"] = self.provider
        if self.status_code is not None:
            result["status_code"] = self.status_code
        return result


class GenerationError(PromptCodeError):
    """Raised when CodeGenerator.generate fails; wraps the underlying cause."""

    default_message = "Failed to generate code"
