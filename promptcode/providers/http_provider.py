"""Shared HTTP plumbing for providers that speak the /generate + /health protocol.

Wire protocol::

    POST <base>/generate   {"prompt", "language", "framework"?, "context"?}
                           -> {"code": "..."}
    GET  <base>/health     any 2xx = healthy

Every request carries ``Authorization: Bearer <token>`` and the fixed
:data:`REQUEST_TIMEOUT_SECONDS` timeout. There are no retries: one failed
call is one failed generation.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

from promptcode.config import ProviderEnv
from promptcode.exceptions import ConfigurationError, ProviderError
from promptcode.providers.base import AIProvider
from promptcode.schema import DEFAULT_LANGUAGE, GeneratorConfig

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT_SECONDS = 60
GENERATE_PATH = "/generate"
HEALTH_PATH = "/health"


def _backend_message(response: Optional[requests.Response]) -> Optional[str]:
    """Pull the backend's own error message out of an error response, if any."""
    if response is None:
        return None
    try:
        body = response.json()
    except ValueError:
        return None
    if not isinstance(body, dict):
        return None
    for key in ("error", "message", "detail"):
        value = body.get(key)
        if isinstance(value, dict):
            value = value.get("message")
        if isinstance(value, str) and value.strip():
            return value.strip()
    return None


class HttpProvider(AIProvider):
    """Base for HTTP backends. Subclasses set the class attributes below.

    Base URL priority: explicit ``api_url`` > ``PROMPT_API_URL`` >
    the provider's own env key > :attr:`default_url`.
    """

    name = "http"
    display_name = "HTTP"
    default_url = ""

    def __init__(
        self,
        api_token: Optional[str],
        api_url: Optional[str] = None,
        env: Optional[ProviderEnv] = None,
    ) -> None:
        token = (api_token or "").strip()
        if not token:
            raise ConfigurationError(f"{self.display_name} API token is required")

        env = env if env is not None else ProviderEnv.from_environ()
        self.base_url = self.resolve_base_url(api_url, env)

        self.session = requests.Session()
        self.session.headers.update(
            {
                "Authorization": f"Bearer {token}",
                "Content-Type": "application/json",
            }
        )
        self.timeout = REQUEST_TIMEOUT_SECONDS

    # ── URL resolution ────────────────────────────────────────────────────────

    @classmethod
    def env_url(cls, env: ProviderEnv) -> str:
        """Provider-specific URL override from *env*; empty when unset."""
        return ""

    @classmethod
    def resolve_base_url(cls, api_url: Optional[str], env: ProviderEnv) -> str:
        url = (
            (api_url or "").strip()
            or env.prompt_api_url
            or cls.env_url(env)
            or cls.default_url
        )
        return url.rstrip("/")

    # ── Public interface ──────────────────────────────────────────────────────

    def build_payload(self, prompt: str, config: Optional[GeneratorConfig]) -> Dict[str, Any]:
        config = config or GeneratorConfig()
        payload: Dict[str, Any] = {
            "prompt": prompt,
            "language": config.language or DEFAULT_LANGUAGE,
        }
        if config.framework is not None:
            payload["framework"] = config.framework
        if config.context is not None:
            payload["context"] = config.context
        return payload

    def generate_code(self, prompt: str, config: Optional[GeneratorConfig] = None) -> str:
        url = self.base_url + GENERATE_PATH
        logger.debug("%s: POST %s", self.name, url)
        try:
            response = self.session.post(
                url, json=self.build_payload(prompt, config), timeout=self.timeout
            )
            response.raise_for_status()
        except requests.RequestException as exc:
            resp = getattr(exc, "response", None)
            status = resp.status_code if resp is not None else None
            message = _backend_message(resp) or str(exc)
            logger.warning("%s request failed: %s", self.name, message)
            raise ProviderError(
                f"{self.display_name} API error: {message}",
                provider=self.name,
                status_code=status,
            ) from exc

        try:
            data = response.json()
        except ValueError:
            data = None

        code = data.get("code") if isinstance(data, dict) else None
        if not isinstance(code, str) or not code:
            raise ProviderError(
                f"Invalid response from {self.display_name} API",
                details="response body has no 'code' field",
                provider=self.name,
                status_code=response.status_code,
            )
        return code

    def validate_connection(self) -> bool:
        try:
            response = self.session.get(self.base_url + HEALTH_PATH, timeout=self.timeout)
            response.raise_for_status()
        except Exception as exc:
            logger.debug("%s health check failed: %s", self.name, exc)
            return False
        return True

    def close(self) -> None:
        self.session.close()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(base_url={self.base_url!r})"
