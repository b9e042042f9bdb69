"""
One-shot dataset fetch from a URL, file:// URL, or local path.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from urllib.parse import unquote, urlparse

import httpx

from travel_recs.config import DATA_SOURCE, FETCH_TIMEOUT
from travel_recs.data.normalize import parse_dataset
from travel_recs.data.schemas import Dataset
from travel_recs.errors import LoadError

logger = logging.getLogger(__name__)


def is_remote(source: str) -> bool:
    return urlparse(source).scheme in ("http", "https")


def _local_path(source: str) -> Path:
    parsed = urlparse(source)
    if parsed.scheme == "file":
        return Path(unquote(parsed.path))
    return Path(source)


# ---------------------------------------------------------------------------
# Raw document retrieval
# ---------------------------------------------------------------------------

async def _fetch_remote(
    source: str,
    client: httpx.AsyncClient | None,
    timeout: float | None,
) -> str:
    """GET the document body. Non-2xx responses become LoadError with the status."""
    try:
        if client is None:
            async with httpx.AsyncClient(timeout=timeout) as own_client:
                response = await own_client.get(source)
        else:
            response = await client.get(source)
    except httpx.HTTPError as exc:
        raise LoadError(f"Request to {source} failed: {exc}") from exc

    if not response.is_success:
        raise LoadError(f"Check if '{source}' exists.", status=response.status_code)
    return response.text


def _read_local(source: str) -> str:
    path = _local_path(source)
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise LoadError(f"Could not read '{path}': {exc}") from exc


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

async def fetch_dataset(
    source: str = DATA_SOURCE,
    client: httpx.AsyncClient | None = None,
    timeout: float | None = FETCH_TIMEOUT,
) -> Dataset:
    """Fetch and parse the dataset once. No retries.

    Any transport, status, decode or shape failure is raised as LoadError.
    """
    logger.info("Fetching travel data from %s", source)
    if is_remote(source):
        body = await _fetch_remote(source, client, timeout)
    else:
        body = _read_local(source)

    try:
        dataset = parse_dataset(json.loads(body))
    except json.JSONDecodeError as exc:
        raise LoadError(f"Invalid JSON in '{source}': {exc}") from exc
    except (KeyError, TypeError, ValueError) as exc:
        raise LoadError(f"Unexpected data shape in '{source}': {exc!r}") from exc

    logger.info("Loaded travel data: %s", dataset.summary())
    return dataset
