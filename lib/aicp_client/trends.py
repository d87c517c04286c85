from __future__ import annotations

from typing import Any

import httpx

from .transport import Transport, path_segment


class TrendService:
    def __init__(self, transport: Transport):
        self._t = transport

    async def get_industry_trends(self, industry: Any) -> httpx.Response:
        return await self._t.request("GET", f"/trends/industry/{path_segment(industry)}")

    async def get_regional_trends(self, region: Any) -> httpx.Response:
        return await self._t.request("GET", f"/trends/region/{path_segment(region)}")

    async def get_predicted_trends(self, industry: Any, timeframe: Any) -> httpx.Response:
        return await self._t.request(
            "GET",
            "/trends/predicted",
            params={"industry": industry, "timeframe": timeframe},
        )
