"""Locate the list of raw records inside an API payload."""

from typing import Any, List

DEFAULT_EMBEDDED_RESOURCE = "benefits"


def extract_records(payload: Any, embedded_resource: str = DEFAULT_EMBEDDED_RESOURCE) -> List[Any]:
    """Return the raw record list from a payload of unknown envelope shape.

    Shapes are probed in priority order:
    1. A bare JSON array
    2. ``{"items": [...]}``
    3. ``{"data": [...]}``
    4. ``{"_embedded": {"<embedded_resource>": [...]}}`` (HAL collection)

    Args:
        payload: Decoded JSON payload
        embedded_resource: Collection name under ``_embedded``

    Returns:
        The first list found, or an empty list when no shape matches.
        Elements are returned as-is; non-mapping elements are rejected later
        by the normaliser.
    """
    if isinstance(payload, list):
        return payload

    if not isinstance(payload, dict):
        return []

    for key in ("items", "data"):
        if isinstance(payload.get(key), list):
            return payload[key]

    embedded = payload.get("_embedded")
    if isinstance(embedded, dict):
        records = embedded.get(embedded_resource)
        if isinstance(records, list):
            return records

    return []
