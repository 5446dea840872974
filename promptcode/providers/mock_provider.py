"""Mock provider for dry-run mode: no network calls, deterministic output."""

from __future__ import annotations

import threading
from typing import List, Optional

from promptcode.providers.base import AIProvider
from promptcode.schema import GeneratorConfig

# Line-comment prefix per language; anything unknown falls back to "//"
_COMMENT_PREFIX = {
    "python": "#",
    "ruby": "#",
    "shell": "#",
    "bash": "#",
    "yaml": "#",
    "sql": "--",
    "lua": "--",
    "haskell": "--",
}

_BODY = {
    "python": "def generated():\n    return None\n",
    "typescript": "export function generated(): void {}\n",
    "javascript": "export function generated() {}\n",
    "go": "package generated\n\nfunc Generated() {}\n",
}


class MockProvider(AIProvider):
    """Returns a small stub for the requested language with the prompt as a comment.

    Extra keyword arguments (token, URL, env) are silently ignored so that
    callers can pass the same kwargs used for a real provider.
    """

    name = "mock"

    def __init__(self, healthy: bool = True, **kwargs):
        self.healthy = healthy
        # Track prompts for test assertions
        self._call_log: List[str] = []
        self._lock = threading.Lock()

    def generate_code(self, prompt: str, config: Optional[GeneratorConfig] = None) -> str:
        config = config or GeneratorConfig()
        language = config.effective_language().lower()
        with self._lock:
            self._call_log.append(prompt)

        prefix = _COMMENT_PREFIX.get(language, "//")
        header = "\n".join(f"{prefix} {line}".rstrip() for line in prompt.splitlines() or [""])
        if config.framework:
            header += f"\n{prefix} framework: {config.framework}"
        body = _BODY.get(language, f"{prefix} generated stub\n")
        return f"{header}\n{body}"

    def validate_connection(self) -> bool:
        return self.healthy

    @property
    def call_log(self) -> List[str]:
        with self._lock:
            return list(self._call_log)
