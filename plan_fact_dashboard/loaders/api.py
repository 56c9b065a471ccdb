"""
Loader for the remote plan/fact JSON feed.

One GET per application lifetime. Transport errors, non-2xx statuses and
undecodable bodies are raised by fetch_payload(); load_payload() collapses
them into a single logged failure so the caller keeps its previous state.
"""

import logging
from typing import Any

import requests

from ..config import API_URL, REQUEST_TIMEOUT_S
from ..models import Payload
from .normalise import normalise_payload

logger = logging.getLogger(__name__)


class DataSourceError(Exception):
    """The feed could not be read."""


class FetchError(DataSourceError):
    """Transport failure or non-2xx HTTP status."""


class ParseError(DataSourceError):
    """Response body is not valid JSON."""


def fetch_payload(url: str = API_URL, timeout: float | None = REQUEST_TIMEOUT_S) -> Any:
    """GET ``url`` and return the decoded JSON body.

    Raises
    ------
    FetchError : connection failure, timeout, or non-2xx status.
    ParseError : the body cannot be decoded as JSON.
    """
    try:
        response = requests.get(url, timeout=timeout)
    except requests.RequestException as exc:
        raise FetchError(f"Request to {url} failed: {exc}") from exc

    if not response.ok:
        raise FetchError(f"HTTP error! Status: {response.status_code}")

    try:
        return response.json()
    except ValueError as exc:
        raise ParseError(f"Response from {url} is not valid JSON") from exc


def load_payload(
    url: str = API_URL,
    timeout: float | None = REQUEST_TIMEOUT_S,
    keep_total_alignment: bool = False,
) -> Payload | None:
    """Fetch and normalise the feed.

    Returns None on any data-source failure; the error is logged and never
    raised, so the caller simply keeps whatever state it already had.
    """
    try:
        raw = fetch_payload(url, timeout=timeout)
    except DataSourceError:
        logger.exception("Error fetching data from %s", url)
        return None

    payload = normalise_payload(raw, keep_total_alignment=keep_total_alignment)
    logger.info("Loaded %d managers from %s", len(payload.managers), url)
    return payload
