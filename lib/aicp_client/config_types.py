from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

TokenProvider = Callable[[], str | None]


@dataclass(frozen=True)
class ClientConfig:
    base_url: str
    token_provider: TokenProvider | None = None
    timeout_s: float = 15.0
    client_version: str | None = None
