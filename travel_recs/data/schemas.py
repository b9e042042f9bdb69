"""
Dataset, search result, and session-state schemas.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

import pandas as pd


class Category(str, Enum):
    COUNTRIES = "countries"
    BEACHES = "beaches"
    TEMPLES = "temples"


class LoadState(str, Enum):
    UNINITIALIZED = "uninitialized"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


@dataclass(frozen=True)
class Place:
    """A beach, temple or city as stored in the dataset."""
    name: str
    description: str = ""
    image_url: str = ""


@dataclass(frozen=True)
class Country:
    name: str
    cities: tuple[Place, ...] = ()


CITY_COLUMNS = ["country", "name", "description", "imageUrl", "country_clean"]


def _empty_cities() -> pd.DataFrame:
    return pd.DataFrame(columns=CITY_COLUMNS)


@dataclass(frozen=True)
class Dataset:
    """The loaded search universe. Never mutated after load.

    ``cities`` is the flattened city table (one row per city, in country then
    city order) that the country search filters on.
    """
    countries: tuple[Country, ...] = ()
    beaches: tuple[Place, ...] = ()
    temples: tuple[Place, ...] = ()
    cities: pd.DataFrame = field(default_factory=_empty_cities, compare=False, repr=False)

    def places(self, category: Category) -> tuple[Place, ...]:
        """Stored sequence for the beaches/temples categories."""
        if category == Category.BEACHES:
            return self.beaches
        if category == Category.TEMPLES:
            return self.temples
        raise ValueError(f"No flat place list for category: {category.value}")

    def summary(self) -> dict[str, int]:
        return {
            "countries": len(self.countries),
            "cities": len(self.cities),
            "beaches": len(self.beaches),
            "temples": len(self.temples),
        }


@dataclass(frozen=True)
class DisplayItem:
    """Render-bound shape shared by every category."""
    name: str
    description: str
    image_url: str


@dataclass(frozen=True)
class SearchResult:
    """Outcome of one search.

    ``category`` is None when the input was empty and matched no keyword.
    """
    items: tuple[DisplayItem, ...] = ()
    category: Optional[Category] = None
    query: str = ""
    normalized: str = ""

    @property
    def count(self) -> int:
        return len(self.items)

    @property
    def category_label(self) -> str:
        return self.category.value if self.category else ""
