"""
FastAPI dependencies — session lookup, dataset availability.
"""
from __future__ import annotations

from fastapi import HTTPException, Request

from travel_recs.data.schemas import Dataset
from travel_recs.data.store import TravelSession
from travel_recs.errors import LoadError


def get_session(request: Request) -> TravelSession:
    """The session owned by the app (created in the lifespan)."""
    session = getattr(request.app.state, "session", None)
    if session is None:
        raise HTTPException(503, "Server not initialized yet")
    return session


async def require_dataset(request: Request) -> Dataset:
    """Load on demand; a failed load becomes 503 with the error detail."""
    session = get_session(request)
    try:
        return await session.load()
    except LoadError as exc:
        raise HTTPException(503, str(exc)) from exc
