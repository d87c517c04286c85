from __future__ import annotations

from typing import Any

import httpx

from .transport import Transport, path_segment


class StrategyService:
    """Industry-specific strategy endpoints."""

    def __init__(self, transport: Transport):
        self._t = transport

    async def generate_strategy(self, industry: Any) -> httpx.Response:
        return await self._t.request("GET", f"/industry/strategy/{path_segment(industry)}")

    async def get_niche_strategy(self, industry: Any, niche: Any) -> httpx.Response:
        return await self._t.request(
            "GET",
            "/industry/niche-strategy",
            params={"industry": industry, "niche": niche},
        )

    async def optimize_content(self, industry: Any, content: Any) -> httpx.Response:
        body = {"industry": industry, "content": content}
        return await self._t.request("POST", "/industry/optimize", json_body=body)
