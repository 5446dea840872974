"""Tests for CodeGenerator and the file-path heuristic."""
from __future__ import annotations

import time
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

import pytest

from promptcode.config import ProviderEnv
from promptcode.exceptions import ConfigurationError, GenerationError, ProviderError
from promptcode.generator import (
    COMPONENT_PATH,
    GENERIC_PATH,
    ROUTES_PATH,
    CodeGenerator,
    suggest_file_path,
)
from promptcode.providers.base import AIProvider
from promptcode.providers.claude_code_provider import ClaudeCodeProvider
from promptcode.providers.cursor_provider import CursorProvider
from promptcode.providers.mock_provider import MockProvider
from promptcode.schema import GeneratedCode, GeneratorConfig


class _StaticProvider(AIProvider):
    """Returns a fixed snippet and records the config it was given."""

    name = "static"

    def __init__(self, code: str = "const x = 1;"):
        self.code = code
        self.last_config: Optional[GeneratorConfig] = None

    def generate_code(self, prompt, config=None):
        self.last_config = config
        return self.code

    def validate_connection(self):
        return True


class _FailingProvider(AIProvider):
    name = "failing"

    def __init__(self, exc: Exception):
        self.exc = exc

    def generate_code(self, prompt, config=None):
        raise self.exc

    def validate_connection(self):
        return False


class _EchoProvider(AIProvider):
    """Echoes prompt and language after a short sleep to interleave threads."""

    name = "echo"

    def generate_code(self, prompt, config=None):
        time.sleep(0.01)
        return f"{prompt}|{config.effective_language()}"

    def validate_connection(self):
        return True


# ─────────────────────────────────────────────────────────────────────────────
# suggest_file_path
# ─────────────────────────────────────────────────────────────────────────────

class TestSuggestFilePath:
    def test_component_prompt(self):
        assert suggest_file_path("Build me a login component", GeneratorConfig()) == COMPONENT_PATH

    def test_component_is_case_insensitive(self):
        assert suggest_file_path("A COMPONENT please") == COMPONENT_PATH

    def test_api_route_prompt(self):
        assert suggest_file_path("create an api route for users", GeneratorConfig()) == ROUTES_PATH

    def test_route_only(self):
        assert suggest_file_path("add a Route for orders") == ROUTES_PATH

    def test_generic(self):
        assert suggest_file_path("hello world", GeneratorConfig()) == GENERIC_PATH

    def test_react_framework_wins_over_prompt(self):
        assert suggest_file_path("x", GeneratorConfig(framework="react")) == COMPONENT_PATH
        assert suggest_file_path("an api route", GeneratorConfig(framework="React")) == COMPONENT_PATH

    def test_other_framework_does_not_force_component(self):
        assert suggest_file_path("hello", GeneratorConfig(framework="express")) == GENERIC_PATH

    def test_paths_are_concrete(self):
        assert COMPONENT_PATH == "src/components/GeneratedComponent.tsx"
        assert ROUTES_PATH == "src/api/routes.ts"
        assert GENERIC_PATH == "src/generated.ts"

    def test_total_on_empty_input(self):
        assert suggest_file_path("", None) == GENERIC_PATH


# ─────────────────────────────────────────────────────────────────────────────
# generate
# ─────────────────────────────────────────────────────────────────────────────

class TestGenerate:
    def test_wraps_provider_output(self):
        gen = CodeGenerator.with_provider(_StaticProvider("const x = 1;"))
        result = gen.generate("hello world")
        assert result == GeneratedCode(
            code="const x = 1;", language="typescript", file_path=GENERIC_PATH
        )

    def test_uses_configured_language(self):
        gen = CodeGenerator(_StaticProvider("x = 1"))
        result = gen.generate("an api route", GeneratorConfig(language="python"))
        assert result.language == "python"
        assert result.file_path == ROUTES_PATH

    def test_config_passed_through(self):
        provider = _StaticProvider()
        cfg = GeneratorConfig(language="go", framework="gin", context="ctx")
        CodeGenerator(provider).generate("p", cfg)
        assert provider.last_config == cfg

    def test_provider_error_wrapped(self):
        cause = ProviderError("Cursor API error: connection refused")
        gen = CodeGenerator(_FailingProvider(cause))
        with pytest.raises(GenerationError) as exc_info:
            gen.generate("p")
        assert str(exc_info.value) == (
            "Failed to generate code: Cursor API error: connection refused"
        )
        assert exc_info.value.__cause__ is cause

    def test_arbitrary_exception_wrapped(self):
        gen = CodeGenerator(_FailingProvider(RuntimeError("socket closed")))
        with pytest.raises(GenerationError, match="socket closed"):
            gen.generate("p")

    def test_exception_without_message_uses_fallback(self):
        gen = CodeGenerator(_FailingProvider(RuntimeError()))
        with pytest.raises(GenerationError, match="Unknown error"):
            gen.generate("p")

    def test_concurrent_calls_are_independent(self):
        gen = CodeGenerator(_EchoProvider())
        langs = ["python", "go", "rust", "typescript"]
        jobs = [(f"prompt-{i}", langs[i % len(langs)]) for i in range(40)]

        def run(job):
            prompt, lang = job
            return gen.generate(prompt, GeneratorConfig(language=lang))

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(run, jobs))

        for (prompt, lang), result in zip(jobs, results):
            assert result.code == f"{prompt}|{lang}"
            assert result.language == lang

    def test_with_mock_provider(self):
        gen = CodeGenerator(MockProvider())
        result = gen.generate("Build a button component", GeneratorConfig(language="python"))
        assert "# Build a button component" in result.code
        assert result.file_path == COMPONENT_PATH


# ─────────────────────────────────────────────────────────────────────────────
# Construction
# ─────────────────────────────────────────────────────────────────────────────

class TestConstruction:
    def test_rejects_non_provider(self):
        with pytest.raises(ConfigurationError):
            CodeGenerator("not-a-provider")

    def test_with_provider_keeps_instance(self):
        provider = _StaticProvider()
        assert CodeGenerator.with_provider(provider).provider is provider

    def test_from_environment(self):
        env = ProviderEnv(ai_type="CLAUDE_CODE", ai_key="key")
        gen = CodeGenerator.from_environment(env=env)
        assert isinstance(gen.provider, ClaudeCodeProvider)

    def test_from_environment_without_key_raises(self):
        with pytest.raises(ConfigurationError):
            CodeGenerator.from_environment(env=ProviderEnv())

    def test_from_environment_api_url(self):
        gen = CodeGenerator.from_environment("https://explicit.test", env=ProviderEnv(ai_key="k"))
        assert gen.provider.base_url == "https://explicit.test"

    def test_from_token_defaults_to_cursor(self):
        gen = CodeGenerator.from_token("legacy-token", env=ProviderEnv())
        assert isinstance(gen.provider, CursorProvider)
        assert gen.provider.session.headers["Authorization"] == "Bearer legacy-token"

    def test_from_token_honours_env_type(self):
        gen = CodeGenerator.from_token("tok", env=ProviderEnv(ai_type="claude_code"))
        assert isinstance(gen.provider, ClaudeCodeProvider)

    def test_from_token_empty_raises(self):
        with pytest.raises(ConfigurationError):
            CodeGenerator.from_token("", env=ProviderEnv())

    def test_provider_is_read_only(self):
        gen = CodeGenerator(_StaticProvider())
        with pytest.raises(AttributeError):
            gen.provider = _StaticProvider()
