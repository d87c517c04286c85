from __future__ import annotations

import httpx

from .competitor import CompetitorService
from .config_types import ClientConfig
from .content import ContentService
from .strategy import StrategyService
from .transport import Transport
from .trends import TrendService


class AicpClient:
    """Async client for the AI Content Platform API.

    Service groups share one transport::

        async with AicpClient(cfg) as client:
            resp = await client.trends.get_predicted_trends("retail", "Q1")
    """

    def __init__(self, cfg: ClientConfig, *, http_transport: httpx.AsyncBaseTransport | None = None):
        self._t = Transport(cfg, http_transport=http_transport)
        self.content = ContentService(self._t)
        self.competitor = CompetitorService(self._t)
        self.strategy = StrategyService(self._t)
        self.trends = TrendService(self._t)

    @property
    def base_url(self) -> str:
        return self._t.base_url

    async def aclose(self) -> None:
        await self._t.aclose()

    async def __aenter__(self) -> "AicpClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
