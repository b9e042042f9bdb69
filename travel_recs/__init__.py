"""Travel recommendation search: dataset loading, keyword search, local-time cards."""

__version__ = "1.0.0"
