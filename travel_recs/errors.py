"""
Error types raised by the loader and surfaced by the app and CLI.
"""
from __future__ import annotations


class TravelRecsError(Exception):
    """Base error for the package."""


class LoadError(TravelRecsError):
    """The dataset could not be fetched or parsed.

    ``status`` carries the HTTP status code when the source answered with a
    non-success response; it is None for transport, file and parse failures.
    """

    def __init__(self, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status = status

    def __str__(self) -> str:
        if self.status is not None:
            return f"HTTP error! Status: {self.status}. {self.message}"
        return self.message
