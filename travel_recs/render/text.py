"""
Plain-text renderer for the CLI.
"""
from __future__ import annotations

import textwrap

from travel_recs.render.views import CardView, ErrorView, ResultsView

RULE = "-" * 70


class TextRenderer:
    def __init__(self, width: int = 70) -> None:
        self.width = width

    def _card(self, card: CardView) -> str:
        lines = [card.name]
        if card.current_time:
            lines.append(f"  Current Time: {card.current_time}")
        lines.extend(textwrap.wrap(card.description, self.width, initial_indent="  ", subsequent_indent="  "))
        lines.append(f"  Image: {card.image_url}")
        return "\n".join(lines)

    def render(self, view: ResultsView) -> str:
        if view.is_empty:
            return view.notice or ""
        header = f"{len(view.cards)} result(s) in {view.category.value if view.category else '-'}"
        blocks = [header, RULE]
        for card in view.cards:
            blocks.append(self._card(card))
            blocks.append(RULE)
        return "\n".join(blocks)

    def render_error(self, view: ErrorView) -> str:
        return f"{view.message}\nDetails: {view.detail}"
