"""Code generator façade: one provider, one call per prompt.

Usage::

    from promptcode import CodeGenerator, GeneratorConfig

    gen = CodeGenerator.from_environment()
    result = gen.generate("Build me a login component", GeneratorConfig(framework="react"))
    print(result.file_path)   # src/components/GeneratedComponent.tsx
"""
from __future__ import annotations

import logging
from typing import Optional

from promptcode.config import ProviderEnv
from promptcode.exceptions import ConfigurationError, GenerationError
from promptcode.providers.base import AIProvider
from promptcode.providers.factory import AIProviderFactory
from promptcode.schema import GeneratedCode, GeneratorConfig

logger = logging.getLogger(__name__)

COMPONENT_PATH = "src/components/GeneratedComponent.tsx"
ROUTES_PATH = "src/api/routes.ts"
GENERIC_PATH = "src/generated.ts"

_UI_FRAMEWORKS = {"react"}


def suggest_file_path(prompt: str, config: Optional[GeneratorConfig] = None) -> Optional[str]:
    """Guess where the generated code should live from the prompt and config."""
    text = (prompt or "").lower()
    framework = ((config.framework if config else None) or "").lower()

    if framework in _UI_FRAMEWORKS or "component" in text:
        return COMPONENT_PATH
    if "api" in text or "route" in text:
        return ROUTES_PATH
    return GENERIC_PATH


class CodeGenerator:
    """Forwards prompts to a single provider, fixed at construction."""

    def __init__(self, provider: AIProvider) -> None:
        if not isinstance(provider, AIProvider):
            raise ConfigurationError(
                f"Expected an AIProvider instance, got {type(provider).__name__}"
            )
        self._provider = provider

    # ── Construction ──────────────────────────────────────────────────────────

    @classmethod
    def from_environment(
        cls, api_url: Optional[str] = None, env: Optional[ProviderEnv] = None
    ) -> "CodeGenerator":
        """Resolve provider type, key and URL from the environment."""
        return cls(AIProviderFactory.create_from_env(api_url, env=env))

    @classmethod
    def with_provider(cls, provider: AIProvider) -> "CodeGenerator":
        return cls(provider)

    @classmethod
    def from_token(
        cls,
        api_key: str,
        api_url: Optional[str] = None,
        env: Optional[ProviderEnv] = None,
    ) -> "CodeGenerator":
        """Legacy path: explicit key, provider type still taken from PROMPT_AI_TYPE."""
        env = env if env is not None else ProviderEnv.from_environ()
        return cls(AIProviderFactory.create(env.provider_type, api_key, api_url, env=env))

    @property
    def provider(self) -> AIProvider:
        return self._provider

    # ── Public interface ──────────────────────────────────────────────────────

    def generate(self, prompt: str, config: Optional[GeneratorConfig] = None) -> GeneratedCode:
        """Generate code for *prompt*.

        Raises
        ------
        GenerationError
            Wrapping whatever the provider raised.
        """
        config = config or GeneratorConfig()
        try:
            code = self._provider.generate_code(prompt, config)
        except Exception as exc:
            reason = getattr(exc, "message", None) or str(exc) or "Unknown error"
            raise GenerationError(f"Failed to generate code: {reason}") from exc

        file_path = suggest_file_path(prompt, config)
        logger.info(
            "Generated %d chars via %s -> %s", len(code), self._provider.name, file_path
        )
        return GeneratedCode(
            code=code,
            language=config.effective_language(),
            file_path=file_path,
        )
