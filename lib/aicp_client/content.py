from __future__ import annotations

from typing import Any

import httpx

from .transport import Transport, path_segment


class ContentService:
    """Content localization endpoints."""

    def __init__(self, transport: Transport):
        self._t = transport

    async def localize_content(self, content: Any, target_regions: Any) -> httpx.Response:
        body = {"content": content, "targetRegions": target_regions}
        return await self._t.request("POST", "/localization/localize", json_body=body)

    async def get_regional_performance(self, content_id: Any, regions: Any) -> httpx.Response:
        return await self._t.request(
            "GET",
            f"/localization/performance/{path_segment(content_id)}",
            params={"regions": regions},
        )

    async def get_regional_strategy(self, region: Any, industry: Any) -> httpx.Response:
        return await self._t.request(
            "GET",
            f"/localization/strategy/{path_segment(region)}",
            params={"industry": industry},
        )

    # --- analytics and real-time monitoring ---
    async def get_engagement_analytics(self, region: Any) -> httpx.Response:
        return await self._t.request("GET", f"/localization/analytics/engagement/{path_segment(region)}")

    async def get_content_effectiveness(self, content_id: Any, region: Any) -> httpx.Response:
        return await self._t.request(
            "GET",
            f"/localization/analytics/effectiveness/{path_segment(content_id)}",
            params={"region": region},
        )

    async def get_optimization_recommendations(self, content_id: Any, region: Any) -> httpx.Response:
        return await self._t.request(
            "GET",
            f"/localization/analytics/recommendations/{path_segment(content_id)}",
            params={"region": region},
        )

    async def start_realtime_monitoring(self, content_id: Any, regions: Any) -> httpx.Response:
        return await self._t.request(
            "POST",
            f"/localization/monitor/{path_segment(content_id)}",
            params={"regions": regions},
        )

    async def get_update_timing(self, content_id: Any, region: Any) -> httpx.Response:
        return await self._t.request(
            "GET",
            f"/localization/monitor/timing/{path_segment(content_id)}",
            params={"region": region},
        )
