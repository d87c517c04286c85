from __future__ import annotations

import httpx

_MESSAGE_KEYS = ("message", "detail", "error")


def parse_api_error_detail(response: httpx.Response) -> dict | None:
    try:
        data = response.json()
    except ValueError:
        return None
    return data if isinstance(data, dict) else None


def describe_http_error(exc: httpx.HTTPStatusError) -> str:
    response = exc.response
    request = exc.request
    msg = f"{request.method} {request.url.path} failed with {response.status_code}"
    data = parse_api_error_detail(response)
    if data:
        for key in _MESSAGE_KEYS:
            value = data.get(key)
            if isinstance(value, str) and value.strip():
                return f"{msg}: {value.strip()}"
    text = response.text.strip()
    if text:
        return f"{msg}: {text[:200]}"
    return msg
