"""
Search filter — category selection and country/city matching.
"""
from __future__ import annotations

import logging

import pandas as pd

from travel_recs.data.normalize import normalize_input
from travel_recs.data.schemas import Category, Dataset, DisplayItem, Place, SearchResult

logger = logging.getLogger(__name__)


def _from_place(place: Place) -> DisplayItem:
    return DisplayItem(name=place.name, description=place.description, image_url=place.image_url)


def _from_city_rows(rows: pd.DataFrame) -> tuple[DisplayItem, ...]:
    return tuple(
        DisplayItem(name=r["name"], description=r["description"], image_url=r["imageUrl"])
        for r in rows.to_dict("records")
    )


def _token(normalized: Category | str) -> str:
    return normalized.value if isinstance(normalized, Category) else normalized


def match_cities(dataset: Dataset, country_term: str, all_countries: bool = False) -> pd.DataFrame:
    """Cities of every country whose name contains country_term (or every country).

    Returns a filtered view in stored order; callers must not mutate it.
    """
    cities = dataset.cities
    if all_countries:
        return cities
    mask = cities["country_clean"].str.contains(country_term, regex=False)
    return cities[mask]


def search(dataset: Dataset, raw: str) -> SearchResult:
    """Run one search over the loaded dataset.

    beaches/temples return their stored sequence verbatim. Anything else that
    is non-empty (or the "country" keyword) searches country names and
    returns their cities. Empty input matches nothing and has no category.
    """
    normalized = normalize_input(raw)
    logger.info("Searching for: %s (normalized: %s)", raw, _token(normalized))

    if normalized in (Category.BEACHES, Category.TEMPLES):
        items = tuple(_from_place(p) for p in dataset.places(normalized))
        return SearchResult(items=items, category=normalized, query=raw, normalized=normalized.value)

    if normalized == Category.COUNTRIES or raw.strip() != "":
        country_term = raw.lower().strip()
        rows = match_cities(dataset, country_term, all_countries=normalized == Category.COUNTRIES)
        return SearchResult(
            items=_from_city_rows(rows),
            category=Category.COUNTRIES,
            query=raw,
            normalized=_token(normalized),
        )

    return SearchResult(query=raw, normalized=_token(normalized))
