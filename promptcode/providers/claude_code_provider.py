"""Claude Code provider.

Talks to a Claude Code generation gateway that exposes the same
``/generate`` + ``/health`` protocol as the Cursor backend.
"""
from __future__ import annotations

from promptcode.config import ProviderEnv
from promptcode.providers.http_provider import HttpProvider


class ClaudeCodeProvider(HttpProvider):
    name = "claude_code"
    display_name = "Claude Code"
    default_url = "https://api.anthropic.com/v1/claude-code"

    @classmethod
    def env_url(cls, env: ProviderEnv) -> str:
        return env.claude_code_api_url
