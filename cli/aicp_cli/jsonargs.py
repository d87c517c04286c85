from __future__ import annotations

import json
from typing import Any


def parse_json_arg(value: str) -> Any:
    """Decode a JSON option value; anything that isn't JSON is passed through as text."""
    text = value.strip()
    if not text:
        return value
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return value
