"""promptcode: route code-generation prompts to interchangeable AI backends."""

__version__ = "0.1.0"

from promptcode.exceptions import (  # noqa: E402
    ConfigurationError,
    GenerationError,
    PromptCodeError,
    ProviderError,
)
from promptcode.generator import CodeGenerator, suggest_file_path  # noqa: E402
from promptcode.providers import (  # noqa: E402
    AIProvider,
    AIProviderFactory,
    ClaudeCodeProvider,
    CursorProvider,
    MockProvider,
)
from promptcode.schema import AIProviderType, GeneratedCode, GeneratorConfig  # noqa: E402

__all__ = [
    "AIProvider",
    "AIProviderFactory",
    "AIProviderType",
    "ClaudeCodeProvider",
    "CodeGenerator",
    "ConfigurationError",
    "CursorProvider",
    "GeneratedCode",
    "GenerationError",
    "GeneratorConfig",
    "MockProvider",
    "PromptCodeError",
    "ProviderError",
    "suggest_file_path",
]
