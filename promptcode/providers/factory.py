"""Factory that maps a provider type to a constructed provider."""

from __future__ import annotations

import logging
from typing import FrozenSet, Optional, Union

from promptcode.config import ProviderEnv
from promptcode.exceptions import ConfigurationError
from promptcode.providers.base import AIProvider
from promptcode.providers.claude_code_provider import ClaudeCodeProvider
from promptcode.providers.cursor_provider import CursorProvider
from promptcode.schema import AIProviderType

logger = logging.getLogger(__name__)

_PROVIDERS = {
    AIProviderType.CURSOR: CursorProvider,
    AIProviderType.CLAUDE_CODE: ClaudeCodeProvider,
}


class AIProviderFactory:
    """Stateless dispatcher over :class:`AIProviderType`."""

    @staticmethod
    def create(
        type: Union[AIProviderType, str],
        api_key: Optional[str],
        api_url: Optional[str] = None,
        env: Optional[ProviderEnv] = None,
    ) -> AIProvider:
        """Create a provider of *type*.

        *api_url* overrides any URL taken from *env* or the provider default.
        Raises ConfigurationError for an unknown type or an empty key.
        """
        provider_type = AIProviderType.parse(type)
        provider_cls = _PROVIDERS[provider_type]
        provider = provider_cls(api_key, api_url, env=env)
        logger.debug("Created %s provider (%s)", provider.name, provider.base_url)
        return provider

    @staticmethod
    def create_from_env(
        api_url: Optional[str] = None, env: Optional[ProviderEnv] = None
    ) -> AIProvider:
        """Create a provider from PROMPT_AI_TYPE / PROMPT_AI_KEY in *env*."""
        env = env if env is not None else ProviderEnv.from_environ()
        if not env.api_key:
            raise ConfigurationError(
                "PROMPT_AI_KEY environment variable is required. "
                "Set PROMPT_AI_TYPE to CURSOR or CLAUDE_CODE and provide "
                "PROMPT_AI_KEY with the API key/token."
            )
        return AIProviderFactory.create(env.provider_type, env.api_key, api_url, env=env)

    @staticmethod
    def get_available_types() -> FrozenSet[AIProviderType]:
        return frozenset(AIProviderType)
