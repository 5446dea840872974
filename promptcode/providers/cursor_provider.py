"""Cursor AI provider."""
from __future__ import annotations

from promptcode.config import ProviderEnv
from promptcode.providers.http_provider import HttpProvider


class CursorProvider(HttpProvider):
    name = "cursor"
    display_name = "Cursor"
    default_url = "https://api.cursor.sh/v1"

    @classmethod
    def env_url(cls, env: ProviderEnv) -> str:
        return env.cursor_api_url
