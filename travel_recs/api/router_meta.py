"""
Meta endpoints: health.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends

from travel_recs.api.dependencies import get_session
from travel_recs.api.response_models import HealthResponse
from travel_recs.data.store import TravelSession

router = APIRouter(prefix="/api", tags=["meta"])


@router.get("/health", response_model=HealthResponse)
def health(session: TravelSession = Depends(get_session)):
    """Load state and dataset counts. Never triggers a load."""
    counts = session.dataset.summary() if session.dataset else {}
    return HealthResponse(
        status="ok" if session.is_ready else "degraded",
        state=session.state.value,
        countries=counts.get("countries", 0),
        cities=counts.get("cities", 0),
        beaches=counts.get("beaches", 0),
        temples=counts.get("temples", 0),
        fetches=session.fetch_count,
        error=str(session.last_error) if session.last_error else None,
    )
