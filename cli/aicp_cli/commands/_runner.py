from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Callable

import httpx
import typer

from aicp_client import AicpClient, AicpClientError
from aicp_client.errors_utils import describe_http_error

from .. import console
from ..config import AppConfig, load_config
from ..http import make_client

log = logging.getLogger(__name__)

ApiCall = Callable[[AicpClient], Awaitable[httpx.Response]]


def response_payload(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


def run_call(call: ApiCall, *, base_url: str | None) -> Any:
    async def _run(cfg: AppConfig) -> httpx.Response:
        client = make_client(cfg, base_url_override=base_url)
        try:
            return await call(client)
        finally:
            await client.aclose()

    try:
        response = asyncio.run(_run(load_config()))
    except httpx.HTTPStatusError as e:
        if e.response.status_code in (401, 403):
            console.err("Unauthorized. Store a token with `aicp auth set-token`.")
        else:
            console.err(describe_http_error(e))
        raise typer.Exit(code=2)
    except httpx.RequestError as e:
        log.debug("request failed", exc_info=True)
        console.err(f"Network error: {e}")
        raise typer.Exit(code=2)
    except AicpClientError as e:
        console.err(str(e))
        raise typer.Exit(code=2)
    return response_payload(response)


def emit(data: Any) -> None:
    if data is None:
        console.ok("Done.")
    elif isinstance(data, (dict, list)):
        console.print_json(data)
    else:
        console.print(str(data), markup=False)
