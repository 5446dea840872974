"""Code-generation provider package."""
from promptcode.providers.base import AIProvider
from promptcode.providers.claude_code_provider import ClaudeCodeProvider
from promptcode.providers.cursor_provider import CursorProvider
from promptcode.providers.factory import AIProviderFactory
from promptcode.providers.mock_provider import MockProvider

__all__ = [
    "AIProvider",
    "AIProviderFactory",
    "ClaudeCodeProvider",
    "CursorProvider",
    "MockProvider",
]
