"""
Travel Recs — Configuration: data source, keywords, timezone table, display constants.
"""
import os
from pathlib import Path

# ---------------------------------------------------------------------------
# Data source: override with TRAVEL_DATA_SOURCE (URL, file:// URL or path)
# ---------------------------------------------------------------------------
PACKAGE_DIR = Path(__file__).resolve().parent
BUNDLED_DATA_FILE = PACKAGE_DIR / "static" / "travel_recommendation_api.json"
DATA_SOURCE = os.environ.get("TRAVEL_DATA_SOURCE", str(BUNDLED_DATA_FILE))

# Seconds; unset means a hung fetch waits forever
_timeout = os.environ.get("TRAVEL_FETCH_TIMEOUT")
FETCH_TIMEOUT = float(_timeout) if _timeout else None

LOG_LEVEL = os.environ.get("TRAVEL_LOG_LEVEL", "INFO").upper()

# ---------------------------------------------------------------------------
# Search keywords (first match wins)
# ---------------------------------------------------------------------------
CATEGORY_KEYWORDS = [
    ("beach", "beaches"),
    ("temple", "temples"),
    ("country", "countries"),
]

# ---------------------------------------------------------------------------
# Timezone table for city results (place name → IANA zone)
# ---------------------------------------------------------------------------
TIMEZONE_MAP = {
    "Sydney, Australia": "Australia/Sydney",
    "Melbourne, Australia": "Australia/Melbourne",
    "Tokyo, Japan": "Asia/Tokyo",
    "Kyoto, Japan": "Asia/Tokyo",
    "Rio de Janeiro, Brazil": "America/Sao_Paulo",
    "São Paulo, Brazil": "America/Sao_Paulo",
}

# ---------------------------------------------------------------------------
# Card display
# ---------------------------------------------------------------------------
# Marker left in imageUrl by the dataset template when no image was supplied
PLACEHOLDER_SENTINEL = "enter_your_image"
DEFAULT_IMAGE_URL = "https://placehold.co/400x250/A0B9E8/333333?text=Travel+Destination"
BROKEN_IMAGE_URL = "https://placehold.co/400x250/F0F0F0/888888?text=No+Image"
BOOK_TRIP_LABEL = "Book This Trip →"

NO_RESULTS_MESSAGE = (
    "Sorry, no recommendations found for your search. "
    "Try searching for 'beach', 'temple', or a country name (e.g., 'Japan')."
)
LOAD_ERROR_MESSAGE = (
    "Could not load travel data. Please ensure the data source "
    "is correctly placed and accessible."
)
