from __future__ import annotations

import os
import tomllib
from typing import Any

import tomli_w

from .config_types import TokenProvider
from .errors import TokenStoreError

TOKEN_KEY = "token"


class TokenStore:
    """Small TOML key-value file holding session values such as the API token.

    The file is read on every lookup so a token written by another process
    is picked up by the next request.
    """

    def __init__(self, path: str):
        self.path = path

    def _load(self) -> dict[str, Any]:
        try:
            with open(self.path, "rb") as f:
                return tomllib.load(f)
        except FileNotFoundError:
            return {}
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise TokenStoreError(f"cannot read {self.path}: {e}") from e

    def _dump(self, data: dict[str, Any]) -> None:
        parent = os.path.dirname(self.path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        try:
            with open(self.path, "wb") as f:
                f.write(tomli_w.dumps(data).encode("utf-8"))
            os.chmod(self.path, 0o600)
        except OSError as e:
            raise TokenStoreError(f"cannot write {self.path}: {e}") from e

    def get(self, key: str) -> str | None:
        value = self._load().get(key)
        if isinstance(value, str) and value:
            return value
        return None

    def set(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        self._dump(data)

    def delete(self, key: str) -> bool:
        data = self._load()
        if key not in data:
            return False
        del data[key]
        self._dump(data)
        return True


def store_token_provider(store: TokenStore, key: str = TOKEN_KEY) -> TokenProvider:
    def _provider() -> str | None:
        return store.get(key)

    return _provider


def static_token(token: str | None) -> TokenProvider:
    return lambda: token or None
