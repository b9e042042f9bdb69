"""
Search endpoints: HTML search page, JSON search, local time lookup.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from fastapi.responses import HTMLResponse

from travel_recs.api.dependencies import get_session, require_dataset
from travel_recs.api.response_models import CardResponse, SearchResponse, TimeResponse
from travel_recs.data.schemas import Dataset
from travel_recs.data.store import TravelSession
from travel_recs.errors import LoadError
from travel_recs.render.base import Renderer
from travel_recs.render.html import HtmlRenderer, render_page
from travel_recs.render.views import build_error_view, build_results_view
from travel_recs.search.clock import current_time, timezone_for
from travel_recs.search.engine import search

page_router = APIRouter(tags=["page"])
router = APIRouter(prefix="/api", tags=["search"])

_html: Renderer = HtmlRenderer()


@page_router.get("/", response_class=HTMLResponse)
async def search_page(
    q: str | None = Query(None, description="Search term; omit for the cleared page"),
    session: TravelSession = Depends(get_session),
):
    """Search page. Without q it is the empty/default state (also the Clear target)."""
    if q is None:
        # Startup load already failed and nothing has recovered it since
        if session.last_error is not None and not session.is_ready:
            return HTMLResponse(render_page("", _html.render_error(build_error_view(session.last_error))))
        return HTMLResponse(render_page())

    try:
        result = await session.search(q)
    except LoadError as exc:
        return HTMLResponse(render_page(q, _html.render_error(build_error_view(exc))))

    return HTMLResponse(render_page(q, _html.render(build_results_view(result))))


@router.get("/search", response_model=SearchResponse)
def search_json(
    q: str = Query("", description="beach | temple | country | a country name"),
    dataset: Dataset = Depends(require_dataset),
):
    """Search results as card view records."""
    result = search(dataset, q)
    view = build_results_view(result)
    return SearchResponse(
        query=result.query,
        normalized=result.normalized,
        category=result.category_label,
        count=result.count,
        notice=view.notice,
        items=[CardResponse(**card.to_dict()) for card in view.cards],
    )


@router.get("/time", response_model=TimeResponse)
def local_time(place: str = Query(..., description='Place name, e.g. "Tokyo, Japan"')):
    """Current local time for a known place; empty when the place has no timezone."""
    return TimeResponse(place=place, timezone=timezone_for(place), current_time=current_time(place))
