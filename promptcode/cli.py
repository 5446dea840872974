"""CLI entry point for promptcode."""

from __future__ import annotations

import json
import logging
import os
import sys
from typing import Optional

import click

from promptcode import __version__
from promptcode.config import ProviderEnv, load_config, load_env
from promptcode.exceptions import PromptCodeError
from promptcode.generator import CodeGenerator
from promptcode.providers.base import AIProvider
from promptcode.providers.factory import AIProviderFactory
from promptcode.schema import GeneratorConfig
from promptcode.writer import write_generated


def _get_provider(
    env: ProviderEnv,
    mode: str,
    provider_type: Optional[str],
    api_url: Optional[str],
) -> AIProvider:
    """Return the appropriate provider based on mode."""
    if mode == "dry":
        from promptcode.providers.mock_provider import MockProvider

        return MockProvider()
    if provider_type:
        return AIProviderFactory.create(provider_type, env.api_key, api_url, env=env)
    return AIProviderFactory.create_from_env(api_url, env=env)


def _parse_context(raw: Optional[str]):
    """JSON objects and arrays are passed through parsed; anything else as plain text."""
    if raw is None:
        return None
    try:
        value = json.loads(raw)
    except json.JSONDecodeError:
        return raw
    return value if isinstance(value, (dict, list)) else raw


@click.group()
@click.version_option(version=__version__, prog_name="promptcode")
@click.option(
    "--log-level",
    default=lambda: os.environ.get("PROMPTCODE_LOG_LEVEL", "WARNING"),
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging verbosity (env: PROMPTCODE_LOG_LEVEL)",
)
def cli(log_level: str):
    """promptcode: route code-generation prompts to an AI backend."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.argument("prompt")
@click.option("--language", default=None, help="Target language (default: typescript)")
@click.option("--framework", default=None, help="Framework hint, e.g. react")
@click.option("--context", "context_raw", default=None, help="Extra context (JSON or text)")
@click.option(
    "--provider",
    "provider_type",
    type=click.Choice(["CURSOR", "CLAUDE_CODE"], case_sensitive=False),
    default=None,
    help="Provider type (env: PROMPT_AI_TYPE)",
)
@click.option("--api-url", default=None, help="Override the provider base URL")
@click.option(
    "--mode",
    type=click.Choice(["live", "dry"]),
    default="live",
    help="live = call API; dry = mock",
)
@click.option("--out", "output_dir", default=None, help="Write the file under this directory")
@click.option("--overwrite", is_flag=True, help="Replace an existing file")
@click.option("--config", "config_path", default="promptcode.yaml", help="Config file path")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
def generate(
    prompt: str,
    language: Optional[str],
    framework: Optional[str],
    context_raw: Optional[str],
    provider_type: Optional[str],
    api_url: Optional[str],
    mode: str,
    output_dir: Optional[str],
    overwrite: bool,
    config_path: str,
    as_json: bool,
):
    """Generate code for PROMPT."""
    try:
        cfg = load_config(config_path)
    except PromptCodeError as exc:
        raise click.ClickException(str(exc))
    env = load_env()

    gen_config = GeneratorConfig(
        language=language or cfg.generation.language,
        framework=framework or cfg.generation.framework,
        context=_parse_context(context_raw),
    )
    output_dir = output_dir or cfg.output.dir
    overwrite = overwrite or cfg.output.overwrite

    try:
        provider = _get_provider(
            env,
            mode,
            provider_type or cfg.provider.type,
            api_url or cfg.provider.api_url,
        )
        with provider:
            result = CodeGenerator.with_provider(provider).generate(prompt, gen_config)
    except PromptCodeError as exc:
        raise click.ClickException(str(exc))

    if output_dir:
        try:
            path = write_generated(result, output_dir, overwrite=overwrite)
        except (FileExistsError, ValueError) as exc:
            raise click.ClickException(str(exc))
        click.echo(f"✅ Wrote {result.language} code to {path}", err=True)

    if as_json:
        click.echo(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    elif not output_dir:
        click.echo(result.code)


@cli.command()
@click.option(
    "--provider",
    "provider_type",
    type=click.Choice(["CURSOR", "CLAUDE_CODE"], case_sensitive=False),
    default=None,
    help="Provider type (env: PROMPT_AI_TYPE)",
)
@click.option("--api-url", default=None, help="Override the provider base URL")
@click.option("--config", "config_path", default="promptcode.yaml", help="Config file path")
def check(provider_type: Optional[str], api_url: Optional[str], config_path: str):
    """Probe the provider's health endpoint."""
    env = load_env()
    try:
        cfg = load_config(config_path)
        provider = _get_provider(
            env, "live", provider_type or cfg.provider.type, api_url or cfg.provider.api_url
        )
    except PromptCodeError as exc:
        raise click.ClickException(str(exc))

    with provider:
        healthy = provider.validate_connection()
    label = getattr(provider, "base_url", provider.name)
    if healthy:
        click.echo(f"✅ {provider.name} reachable at {label}")
        return
    click.echo(f"❌ {provider.name} not reachable at {label}", err=True)
    sys.exit(1)


@cli.command()
def providers():
    """List supported provider types."""
    for t in sorted(AIProviderFactory.get_available_types(), key=lambda t: t.value):
        click.echo(t.value)


if __name__ == "__main__":
    cli()
