from __future__ import annotations

import os
import sys
import tomllib
from dataclasses import dataclass
from typing import Any

import tomli_w
from platformdirs import user_config_dir

from aicp_client import ConfigError
from aicp_client.settings import DEFAULT_API_BASE_URL, env_base_url

from . import console

APP_NAME = "aicp"
CONFIG_FILENAME = "config.toml"
SESSION_FILENAME = "session.toml"
DEFAULT_TIMEOUT_S = 15.0

_PLAIN_HTTP_HOSTS = frozenset({"localhost", "127.0.0.1", "0.0.0.0"})
_scheme_warning_shown = False


@dataclass
class AppConfig:
    base_url: str = ""
    timeout_s: float = DEFAULT_TIMEOUT_S


def config_path() -> str:
    return f"{user_config_dir(APP_NAME)}/{CONFIG_FILENAME}"


def session_path() -> str:
    return f"{user_config_dir(APP_NAME)}/{SESSION_FILENAME}"


def default_config() -> AppConfig:
    return AppConfig(base_url="", timeout_s=DEFAULT_TIMEOUT_S)


def normalize_base_url(raw: str | None, *, warn: bool = False) -> str:
    """Strip a user-entered URL and give it a scheme when it has none.

    Loopback hosts get ``http://``; everything else gets ``https://``.
    """
    value = (raw or "").strip().rstrip("/")
    if not value:
        return ""
    if value.lower().startswith(("http://", "https://")):
        return value

    host = value.partition("/")[0].partition(":")[0].lower()
    scheme = "http" if host in _PLAIN_HTTP_HOSTS else "https"
    normalized = f"{scheme}://{value}"
    if warn:
        _warn_missing_scheme(normalized)
    return normalized


def _warn_missing_scheme(normalized: str) -> None:
    # once per process, and only when someone is watching
    global _scheme_warning_shown
    if _scheme_warning_shown or not (sys.stdout.isatty() or sys.stderr.isatty()):
        return
    _scheme_warning_shown = True
    console.warn(f"base_url has no scheme, using {normalized}")


def to_toml(cfg: AppConfig) -> dict[str, Any]:
    data: dict[str, Any] = {"timeout_s": float(cfg.timeout_s)}
    if cfg.base_url:
        data["base_url"] = cfg.base_url
    return data


def from_toml(data: dict[str, Any]) -> AppConfig:
    base_url = normalize_base_url(str(data.get("base_url") or ""), warn=True)
    timeout_s = DEFAULT_TIMEOUT_S
    raw_timeout = data.get("timeout_s")
    if raw_timeout is not None:
        try:
            timeout_s = float(raw_timeout)
        except (TypeError, ValueError):
            timeout_s = DEFAULT_TIMEOUT_S
        if timeout_s <= 0:
            timeout_s = DEFAULT_TIMEOUT_S
    return AppConfig(base_url=base_url, timeout_s=timeout_s)


def load_config() -> AppConfig:
    path = config_path()
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        return default_config()
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"cannot read {path}: {e}") from e
    return from_toml(data)


def resolve_base_url(cfg: AppConfig, override: str | None = None) -> str:
    if override and override.strip():
        return normalize_base_url(override, warn=True)
    return env_base_url() or cfg.base_url or DEFAULT_API_BASE_URL


def save_config(cfg: AppConfig) -> str:
    path = config_path()
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, "wb") as f:
        f.write(tomli_w.dumps(to_toml(cfg)).encode("utf-8"))
    os.chmod(path, 0o600)
    return path
