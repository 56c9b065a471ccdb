"""
Shared utilities for payload ingestion: null-safe access to decoded JSON.
"""

import logging
from collections.abc import Mapping
from typing import Any

logger = logging.getLogger(__name__)


def get_path(obj: Any, *keys: str) -> Any:
    """Walk nested mappings, returning None as soon as a key is missing.

    ``get_path(payload, "data", "table")`` is ``payload["data"]["table"]``
    when every level is a mapping, else None.
    """
    for key in keys:
        if not isinstance(obj, Mapping):
            return None
        obj = obj.get(key)
    return obj


def as_list(val: Any) -> list:
    """Return ``val`` as a list if it is a JSON array, else an empty list."""
    if isinstance(val, (list, tuple)):
        return list(val)
    if val is not None:
        logger.warning("Expected a list, got %s; treating as empty", type(val).__name__)
    return []


def pad_to_length(items: list, length: int) -> list:
    """Pad with None or truncate so the list has exactly ``length`` entries.

    Existing entries keep their positions.
    """
    if len(items) != length:
        logger.warning("Month list has %d entries, expected %d", len(items), length)
    return (items + [None] * length)[:length]
