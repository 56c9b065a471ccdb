"""
Payload normaliser: raw decoded JSON -> typed managers and aggregate total.

The payload shape is
    {"data": {"table": [manager, ...], "total": [month | null, ...]}}
Only null-safety is enforced. Field values are passed through untouched so
that malformed metrics reach the formatting layer, which renders them empty.
"""

import logging
from collections.abc import Mapping
from typing import Any

from ..config import MONTHS_IN_YEAR
from ..models import Manager, MonthData, Payload, Value
from .utils import as_list, get_path, pad_to_length

logger = logging.getLogger(__name__)


def parse_value(raw: Any) -> Value | None:
    """Convert a ``{"income", "activePartners"}`` object, or None if absent."""
    if not isinstance(raw, Mapping):
        return None
    return Value(income=raw.get("income"), active_partners=raw.get("activePartners"))


def parse_month(raw: Any) -> MonthData | None:
    """Convert a ``{"plan", "fact"}`` object, or None if absent."""
    if not isinstance(raw, Mapping):
        return None
    return MonthData(plan=parse_value(raw.get("plan")), fact=parse_value(raw.get("fact")))


def parse_manager(raw: Mapping) -> Manager:
    """Convert one ``data.table`` entry.

    ``months`` is padded or truncated to twelve entries so that index ``i``
    is always calendar month ``i``.
    """
    months = pad_to_length(as_list(raw.get("months")), MONTHS_IN_YEAR)
    return Manager(
        id=raw.get("id"),
        admin_id=raw.get("adminId"),
        admin_name="" if raw.get("adminName") is None else str(raw.get("adminName")),
        year=raw.get("year"),
        months=tuple(parse_month(m) for m in months),
    )


def normalise_payload(raw: Any, keep_total_alignment: bool = False) -> Payload:
    """Normalise a decoded API response.

    Parameters
    ----------
    raw : Anything ``json.loads`` may return.
    keep_total_alignment : If False (default), absent entries are dropped
        from ``data.total``, so a total entry's position may no longer match
        its calendar month. If True, the total keeps twelve slots with None
        for absent months.

    Returns
    -------
    Payload with ``managers`` and ``total``. Missing ``data.table`` or
    ``data.total`` give empty sequences.
    """
    managers = []
    for i, entry in enumerate(as_list(get_path(raw, "data", "table"))):
        if not isinstance(entry, Mapping):
            logger.warning("Skipping table entry %d: not an object", i)
            continue
        managers.append(parse_manager(entry))

    raw_total = as_list(get_path(raw, "data", "total"))
    if keep_total_alignment:
        total = [parse_month(m) for m in pad_to_length(raw_total, MONTHS_IN_YEAR)]
    else:
        parsed = (parse_month(m) for m in raw_total)
        total = [m for m in parsed if m is not None]
        dropped = len(raw_total) - len(total)
        if dropped:
            logger.info("Dropped %d absent entries from total", dropped)

    logger.info("Normalised payload: %d managers, %d total months", len(managers), len(total))
    return Payload(managers=tuple(managers), total=tuple(total))
