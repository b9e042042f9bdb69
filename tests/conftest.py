"""
Shared fixtures: a small dataset document, parsed Dataset, and on-disk copy.
"""
import json
from datetime import datetime, timezone

import pytest

from travel_recs.data.normalize import parse_dataset

# 2026-01-15 12:00:00 UTC → 11:00 PM in Sydney, 9:00 PM in Tokyo, 9:00 AM in São Paulo
FIXED_NOW = datetime(2026, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


def make_payload() -> dict:
    return {
        "countries": [
            {
                "id": 1,
                "name": "Japan",
                "cities": [
                    {"name": "Tokyo, Japan", "imageUrl": "tokyo.jpg", "description": "Capital city."},
                    {"name": "Kyoto, Japan", "imageUrl": "enter_your_image_for_kyoto.jpg", "description": "Temples and gardens."},
                ],
            },
            {
                "id": 2,
                "name": "Brazil",
                "cities": [
                    {"name": "Rio de Janeiro, Brazil", "imageUrl": "rio.jpg", "description": "Carnival city."},
                ],
            },
        ],
        "temples": [
            {"id": 1, "name": "Angkor Wat, Cambodia", "imageUrl": "angkor.jpg", "description": "Largest religious monument."},
            {"id": 2, "name": "Taj Mahal, India", "imageUrl": "", "description": "Mughal architecture."},
        ],
        "beaches": [
            {"id": 1, "name": "Bora Bora, French Polynesia", "imageUrl": "bora.jpg", "description": "Turquoise waters."},
            {"id": 2, "name": "Copacabana Beach, Brazil", "imageUrl": "copa.jpg", "description": "Rio's famous beach."},
        ],
    }


@pytest.fixture
def payload() -> dict:
    return make_payload()


@pytest.fixture
def dataset(payload):
    return parse_dataset(payload)


@pytest.fixture
def data_file(tmp_path, payload):
    path = tmp_path / "travel_recommendation_api.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW
