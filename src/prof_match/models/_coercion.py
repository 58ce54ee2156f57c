"""Input coercion helpers shared by the boundary models.

Upstream payloads come from an LLM extractor and a key-value directory, so
values arrive as nulls, JSON strings or comma-separated strings as often as
well-typed lists.
"""

import json
from typing import Any

from pydantic import ConfigDict
from pydantic.alias_generators import to_camel

# Accept both snake_case and the camelCase keys used on the wire
CAMEL_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def coerce_to_list(v: Any) -> list[str]:
    """Coerce various inputs to a list of strings."""
    if v is None:
        return []
    if isinstance(v, (list, tuple)):
        return [str(item) for item in v if item is not None]
    if isinstance(v, str):
        v = v.strip()
        if v.startswith("["):
            try:
                parsed = json.loads(v)
                if isinstance(parsed, list):
                    return [str(item) for item in parsed if item is not None]
            except json.JSONDecodeError:
                pass
        if "," in v:
            return [item.strip() for item in v.split(",") if item.strip()]
        return [v] if v else []
    return [str(v)]


def coerce_to_text(v: Any) -> str:
    """Coerce a nullable scalar to a string, ``None`` becoming empty."""
    if v is None:
        return ""
    return v if isinstance(v, str) else str(v)


def coerce_to_number(v: Any) -> float | None:
    """Coerce to a number, treating missing, zero and non-numeric as unknown."""
    if v is None or isinstance(v, bool):
        return None
    try:
        number = float(v)
    except (TypeError, ValueError):
        return None
    if number != number or number == 0:  # NaN or zero
        return None
    return number
