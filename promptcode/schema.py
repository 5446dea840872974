"""Value objects shared by providers and the generator."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Union

from promptcode.exceptions import ConfigurationError

DEFAULT_LANGUAGE = "typescript"


class AIProviderType(str, Enum):
    CURSOR = "CURSOR"
    CLAUDE_CODE = "CLAUDE_CODE"

    @classmethod
    def parse(cls, token: Union["AIProviderType", str]) -> "AIProviderType":
        """Return the member for *token*, matching names case-insensitively."""
        if isinstance(token, cls):
            return token
        key = str(token or "").strip().upper()
        try:
            return cls(key)
        except ValueError:
            supported = ", ".join(t.value for t in cls)
            raise ConfigurationError(
                f"Unsupported AI provider type: {token}",
                details=f"Supported: {supported}",
            ) from None


@dataclass(frozen=True)
class GeneratorConfig:
    language: Optional[str] = None
    framework: Optional[str] = None
    context: Any = None

    def effective_language(self) -> str:
        return self.language or DEFAULT_LANGUAGE


@dataclass(frozen=True)
class GeneratedCode:
    code: str
    language: str = DEFAULT_LANGUAGE
    file_path: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "language": self.language,
            "file_path": self.file_path,
        }
