"""Data ingestion for the plan/fact feed: HTTP fetch and normalisation."""

from .api import DataSourceError, FetchError, ParseError
from .api import fetch_payload, load_payload
from .normalise import normalise_payload

__all__ = [
    "DataSourceError",
    "FetchError",
    "ParseError",
    "fetch_payload",
    "load_payload",
    "normalise_payload",
]
