"""Environment snapshot and promptcode.yaml loader."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Mapping, Optional

import yaml
from dotenv import find_dotenv, load_dotenv

from promptcode.exceptions import ConfigurationError


def _clean(v) -> str:
    return str(v or "").strip()


@dataclass(frozen=True)
class ProviderEnv:
    """Provider-related environment keys, read once and passed by injection.

    ``PROMPT_AI_KEY`` wins over the legacy ``CURSOR_API_TOKEN``; the generic
    ``PROMPT_API_URL`` wins over the provider-specific URL keys.
    """

    ai_type: str = ""
    ai_key: str = ""
    cursor_api_token: str = ""
    prompt_api_url: str = ""
    cursor_api_url: str = ""
    claude_code_api_url: str = ""

    @classmethod
    def from_environ(cls, environ: Optional[Mapping[str, str]] = None) -> "ProviderEnv":
        env = os.environ if environ is None else environ
        return cls(
            ai_type=_clean(env.get("PROMPT_AI_TYPE")),
            ai_key=_clean(env.get("PROMPT_AI_KEY")),
            cursor_api_token=_clean(env.get("CURSOR_API_TOKEN")),
            prompt_api_url=_clean(env.get("PROMPT_API_URL")),
            cursor_api_url=_clean(env.get("CURSOR_API_URL")),
            claude_code_api_url=_clean(env.get("CLAUDE_CODE_API_URL")),
        )

    @property
    def provider_type(self) -> str:
        return (self.ai_type or "CURSOR").upper()

    @property
    def api_key(self) -> str:
        return self.ai_key or self.cursor_api_token


def load_env(dotenv_path: str | Path | None = None) -> ProviderEnv:
    """Load ``.env`` into the process environment, then snapshot it.

    Without *dotenv_path* the search starts from the working directory.
    """
    load_dotenv(dotenv_path or find_dotenv(usecwd=True))
    return ProviderEnv.from_environ()


# ─────────────────────────────────────────────────────────────────────────────
# promptcode.yaml
# ─────────────────────────────────────────────────────────────────────────────


@dataclass
class ProviderConfig:
    type: Optional[str] = None  # None = take PROMPT_AI_TYPE
    api_url: Optional[str] = None


@dataclass
class GenerationDefaults:
    language: Optional[str] = None
    framework: Optional[str] = None


@dataclass
class OutputConfig:
    dir: Optional[str] = None  # None = print to stdout
    overwrite: bool = False


@dataclass
class AppConfig:
    provider: ProviderConfig = field(default_factory=ProviderConfig)
    generation: GenerationDefaults = field(default_factory=GenerationDefaults)
    output: OutputConfig = field(default_factory=OutputConfig)


def _section(raw: dict, name: str, cls):
    """Build dataclass *cls* from ``raw[name]``; bad shapes become ConfigurationError."""
    values = raw.get(name) or {}
    if not isinstance(values, dict):
        raise ConfigurationError(f"promptcode.yaml: section '{name}' must be a mapping")
    known = {f.name for f in fields(cls)}
    unknown = sorted(set(values) - known)
    if unknown:
        raise ConfigurationError(
            f"promptcode.yaml: unknown key(s) in '{name}': {', '.join(map(str, unknown))}"
        )
    return cls(**values)


def load_config(path: str | Path = "promptcode.yaml") -> AppConfig:
    """Load config from YAML file, falling back to defaults."""
    p = Path(path)
    raw: dict = {}
    if p.exists():
        with open(p, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    if not isinstance(raw, dict):
        raise ConfigurationError(f"{p}: top level must be a mapping")

    return AppConfig(
        provider=_section(raw, "provider", ProviderConfig),
        generation=_section(raw, "generation", GenerationDefaults),
        output=_section(raw, "output", OutputConfig),
    )
