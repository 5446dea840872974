"""Abstract base class for code-generation providers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from promptcode.schema import GeneratorConfig


class AIProvider(ABC):
    """Interface that all code-generation backends must implement."""

    name: str = "provider"

    @abstractmethod
    def generate_code(self, prompt: str, config: Optional[GeneratorConfig] = None) -> str:
        """Send a prompt and return the generated source text verbatim.

        Raises ProviderError when the backend is unreachable, answers with a
        non-success status, or omits the generated code.
        """
        ...

    @abstractmethod
    def validate_connection(self) -> bool:
        """Return True when the backend answers its health probe. Never raises."""
        ...

    def close(self) -> None:
        """Release held resources. Nothing to do by default."""

    def __enter__(self):
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
