"""Dataset schemas, loading, and search-term normalization."""
from .schemas import Category, Dataset, DisplayItem, LoadState, Place, SearchResult
from .normalize import normalize_input, parse_dataset
from .loader import fetch_dataset
