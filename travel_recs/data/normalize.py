"""
Search-term normalization and raw-document → Dataset conversion.
"""
from __future__ import annotations

from typing import Any

import pandas as pd

from travel_recs.config import CATEGORY_KEYWORDS
from travel_recs.data.schemas import CITY_COLUMNS, Category, Country, Dataset, Place


# ---------------------------------------------------------------------------
# Search input
# ---------------------------------------------------------------------------

def normalize_input(raw: str) -> Category | str:
    """Map raw search input to a category, or return the cleaned free-text term.

    Plain substring checks against CATEGORY_KEYWORDS in order, so
    "beach temple" resolves to beaches.
    """
    term = raw.lower().strip()
    for keyword, category in CATEGORY_KEYWORDS:
        if keyword in term:
            return Category(category)
    return term


# ---------------------------------------------------------------------------
# Dataset parsing
# ---------------------------------------------------------------------------

def _text(value: Any) -> str:
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return ""
    return str(value)


def parse_place(record: dict) -> Place:
    """Build a Place from a raw record; extra keys (id, ...) are ignored."""
    return Place(
        name=_text(record["name"]),
        description=_text(record.get("description")),
        image_url=_text(record.get("imageUrl")),
    )


def flatten_cities(countries: list[dict]) -> pd.DataFrame:
    """One row per city in stored order, tagged with its country."""
    if not countries:
        return pd.DataFrame(columns=CITY_COLUMNS)

    df = pd.json_normalize(countries, record_path="cities", meta=["name"], meta_prefix="country_")
    df = df.rename(columns={"country_name": "country"})
    df = df.reindex(columns=["country", "name", "description", "imageUrl"])
    df = df.fillna("").astype(str)

    # Lowercase key for case-insensitive containment matching
    df["country_clean"] = df["country"].str.lower()
    return df.reset_index(drop=True)


def parse_dataset(payload: Any) -> Dataset:
    """Convert the decoded JSON document into a Dataset.

    Missing top-level sequences are treated as empty. Raises ValueError,
    KeyError or TypeError when the document has the wrong shape.
    """
    if not isinstance(payload, dict):
        raise ValueError(f"Expected a JSON object, got {type(payload).__name__}")

    raw_countries = payload.get("countries") or []
    countries = tuple(
        Country(
            name=_text(c["name"]),
            cities=tuple(parse_place(city) for city in c["cities"]),
        )
        for c in raw_countries
    )

    return Dataset(
        countries=countries,
        beaches=tuple(parse_place(p) for p in payload.get("beaches") or []),
        temples=tuple(parse_place(p) for p in payload.get("temples") or []),
        cities=flatten_cities(raw_countries),
    )
