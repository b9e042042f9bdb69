"""Keyword search over the dataset and local-time annotation for cities."""
from .engine import search
from .clock import current_time, format_local_time, timezone_for
