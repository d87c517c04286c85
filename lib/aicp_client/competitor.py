from __future__ import annotations

from typing import Any

import httpx

from .transport import Transport, path_segment


class CompetitorService:
    def __init__(self, transport: Transport):
        self._t = transport

    async def analyze_competitors(self, industry: Any, competitors: Any) -> httpx.Response:
        # competitors is the whole body, not wrapped in a field
        return await self._t.request(
            "POST",
            "/competitor-analysis/analyze",
            params={"industry": industry},
            json_body=competitors,
        )

    async def get_competitive_advantage(self, industry: Any) -> httpx.Response:
        return await self._t.request("GET", f"/competitor-analysis/competitive-advantage/{path_segment(industry)}")

    async def predict_competitor_moves(self, competitor: Any, industry: Any) -> httpx.Response:
        return await self._t.request(
            "GET",
            f"/competitor-analysis/predict/{path_segment(competitor)}",
            params={"industry": industry},
        )
