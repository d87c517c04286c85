from __future__ import annotations

import os
from typing import Mapping

from .config_types import ClientConfig, TokenProvider

ENV_API_BASE_URL = "AICP_API_BASE_URL"
DEFAULT_API_BASE_URL = "http://localhost:8080/api/v1"


def env_base_url(environ: Mapping[str, str] | None = None) -> str | None:
    """Base URL override from the environment; an empty value counts as unset."""
    env = os.environ if environ is None else environ
    return env.get(ENV_API_BASE_URL) or None


def resolve_base_url(environ: Mapping[str, str] | None = None) -> str:
    return env_base_url(environ) or DEFAULT_API_BASE_URL


def client_config_from_env(
        token_provider: TokenProvider | None = None,
        *,
        environ: Mapping[str, str] | None = None,
) -> ClientConfig:
    """Build a config whose base URL is resolved once, right now."""
    return ClientConfig(base_url=resolve_base_url(environ), token_provider=token_provider)
