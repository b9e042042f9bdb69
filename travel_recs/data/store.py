"""
TravelSession — owns the loaded dataset and its lifecycle.

uninitialized → loading → ready, or → failed (the next load starts over).
Concurrent callers share one in-flight fetch and its outcome.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Optional

import httpx

from travel_recs.config import DATA_SOURCE, FETCH_TIMEOUT
from travel_recs.data.loader import fetch_dataset
from travel_recs.data.schemas import Dataset, LoadState, SearchResult
from travel_recs.errors import LoadError
from travel_recs.search.engine import search

logger = logging.getLogger(__name__)


class TravelSession:
    """Session-scoped dataset holder with a memoized, single-flight loader."""

    def __init__(
        self,
        source: str = DATA_SOURCE,
        client: httpx.AsyncClient | None = None,
        timeout: float | None = FETCH_TIMEOUT,
    ) -> None:
        self.source = source
        self._client = client
        self._timeout = timeout
        self._dataset: Optional[Dataset] = None
        self._pending: Optional[asyncio.Future] = None
        self._state = LoadState.UNINITIALIZED
        self.last_error: Optional[LoadError] = None
        self.fetch_count = 0

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def state(self) -> LoadState:
        return self._state

    @property
    def is_ready(self) -> bool:
        return self._state == LoadState.READY

    @property
    def dataset(self) -> Optional[Dataset]:
        return self._dataset

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    async def _fetch(self) -> Dataset:
        self._state = LoadState.LOADING
        self.fetch_count += 1
        try:
            dataset = await fetch_dataset(self.source, client=self._client, timeout=self._timeout)
        except LoadError as exc:
            self._fail(exc)
            raise
        except asyncio.CancelledError:
            self._state = LoadState.UNINITIALIZED
            logger.warning("Data load cancelled")
            raise
        except Exception as exc:
            error = LoadError(f"Unexpected error loading '{self.source}': {exc!r}")
            self._fail(error)
            raise error from exc
        finally:
            self._pending = None

        self._dataset = dataset
        self._state = LoadState.READY
        self.last_error = None
        return dataset

    def _fail(self, error: LoadError) -> None:
        self._state = LoadState.FAILED
        self.last_error = error
        logger.error("Error fetching data: %s", error)

    async def load(self) -> Dataset:
        """Return the dataset, fetching it only if no load has succeeded yet.

        A call made while a fetch is in flight awaits that same fetch.
        Cancelling one caller leaves the fetch running for the others.
        Raises LoadError if the fetch fails.
        """
        if self._dataset is not None:
            return self._dataset

        if self._pending is None or self._pending.done():
            self._pending = asyncio.ensure_future(self._fetch())
        return await asyncio.shield(self._pending)

    async def preload(self) -> None:
        """Startup load. Failure is kept in last_error for the render surface."""
        try:
            await self.load()
        except LoadError:
            logger.warning("Initial data load failed; searches will retry the load")

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    async def search(self, raw: str) -> SearchResult:
        """Search once the dataset is available. Raises LoadError if it cannot be loaded."""
        if self._dataset is None:
            logger.info("Attempting to load data...")
        dataset = await self.load()
        return search(dataset, raw)
