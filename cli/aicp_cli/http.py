from __future__ import annotations

from importlib import metadata

from aicp_client import AicpClient
from aicp_client.config_types import ClientConfig
from aicp_client.token_store import TokenStore, store_token_provider

from .config import AppConfig, resolve_base_url, session_path


def cli_version() -> str:
    try:
        return metadata.version("aicp-cli")
    except metadata.PackageNotFoundError:
        return "0.0.0"


def session_store() -> TokenStore:
    return TokenStore(session_path())


def make_client(cfg: AppConfig, *, base_url_override: str | None) -> AicpClient:
    return AicpClient(
        ClientConfig(
            base_url=resolve_base_url(cfg, base_url_override),
            token_provider=store_token_provider(session_store()),
            timeout_s=cfg.timeout_s,
            client_version=cli_version(),
        )
    )
