"""
Pydantic response schemas for the API.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    state: str
    countries: int
    cities: int
    beaches: int
    temples: int
    fetches: int
    error: Optional[str] = None


class CardResponse(BaseModel):
    name: str
    description: str
    image_url: str
    fallback_image_url: str
    current_time: str = ""
    cta_label: str


class SearchResponse(BaseModel):
    query: str
    normalized: str
    category: str          # "" when the input matched nothing
    count: int
    notice: Optional[str] = None
    items: list[CardResponse]


class TimeResponse(BaseModel):
    place: str
    timezone: Optional[str] = None
    current_time: str
