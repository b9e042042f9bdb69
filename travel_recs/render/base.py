"""
Renderer interface: every output surface consumes the same view records.
"""
from __future__ import annotations

from typing import Any, Protocol

from travel_recs.render.views import ErrorView, ResultsView


class Renderer(Protocol):
    def render(self, view: ResultsView) -> Any:
        """Render a results view (cards or the no-results notice)."""

    def render_error(self, view: ErrorView) -> Any:
        """Render the terminal load-failure message."""
