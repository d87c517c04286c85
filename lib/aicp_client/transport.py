from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import httpx

from .config_types import ClientConfig

log = logging.getLogger(__name__)

USER_AGENT = "aicp-client/0.1.0"


def path_segment(value: Any) -> str:
    return quote(str(value), safe="")


class Transport:
    def __init__(self, cfg: ClientConfig, *, http_transport: httpx.AsyncBaseTransport | None = None):
        self._token_provider = cfg.token_provider
        headers = {
            "User-Agent": USER_AGENT,
            "Content-Type": "application/json",
        }
        if cfg.client_version:
            headers["X-Client-Version"] = cfg.client_version

        self._client = httpx.AsyncClient(
            base_url=cfg.base_url,
            timeout=cfg.timeout_s,
            headers=headers,
            follow_redirects=True,
            transport=http_transport,
        )

    @property
    def base_url(self) -> str:
        return str(self._client.base_url)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def request(
            self,
            method: str,
            path: str,
            *,
            params: dict[str, Any] | None = None,
            json_body: Any | None = None,
    ) -> httpx.Response:
        query = {k: v for k, v in (params or {}).items() if v is not None}
        request = self._client.build_request(method, path, params=query or None, json=json_body)

        # Applied to this request only; client defaults stay untouched.
        token = self._token_provider() if self._token_provider else None
        if token:
            request.headers["Authorization"] = f"Bearer {token}"

        log.debug("%s %s", method, request.url)
        response = await self._client.send(request)
        log.debug("%s %s -> %s", method, request.url, response.status_code)
        response.raise_for_status()
        return response
