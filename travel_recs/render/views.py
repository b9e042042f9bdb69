"""
Pure view builders — SearchResult / LoadError → render-ready records.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Callable, Optional

from travel_recs.config import (
    BOOK_TRIP_LABEL,
    BROKEN_IMAGE_URL,
    DEFAULT_IMAGE_URL,
    LOAD_ERROR_MESSAGE,
    NO_RESULTS_MESSAGE,
    PLACEHOLDER_SENTINEL,
)
from travel_recs.data.schemas import Category, DisplayItem, SearchResult
from travel_recs.errors import LoadError
from travel_recs.search.clock import current_time


@dataclass(frozen=True)
class CardView:
    name: str
    description: str
    image_url: str
    fallback_image_url: str = BROKEN_IMAGE_URL   # used if image_url fails to load
    current_time: str = ""                       # empty → no time line
    cta_label: str = BOOK_TRIP_LABEL

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class ResultsView:
    category: Optional[Category]
    cards: tuple[CardView, ...] = ()
    notice: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return not self.cards


@dataclass(frozen=True)
class ErrorView:
    message: str
    detail: str


def resolve_image_url(url: str | None) -> str:
    """Supplied URL, or the default image when it is absent or a placeholder."""
    if url and PLACEHOLDER_SENTINEL not in url:
        return url
    return DEFAULT_IMAGE_URL


def build_card(
    item: DisplayItem,
    category: Optional[Category],
    clock: Callable[[str], str] = current_time,
) -> CardView:
    # Only city results carry a local time
    time_display = clock(item.name) if category is Category.COUNTRIES else ""
    return CardView(
        name=item.name,
        description=item.description,
        image_url=resolve_image_url(item.image_url),
        current_time=time_display,
    )


def build_results_view(
    result: SearchResult,
    clock: Callable[[str], str] = current_time,
) -> ResultsView:
    """Cards for every result, or a single no-results notice."""
    if not result.items:
        return ResultsView(category=result.category, notice=NO_RESULTS_MESSAGE)
    cards = tuple(build_card(item, result.category, clock) for item in result.items)
    return ResultsView(category=result.category, cards=cards)


def build_error_view(error: LoadError) -> ErrorView:
    return ErrorView(message=LOAD_ERROR_MESSAGE, detail=str(error))
