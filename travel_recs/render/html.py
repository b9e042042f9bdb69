"""
HTML renderer — card grid, no-results notice, load-error banner, search page.
"""
from __future__ import annotations

from html import escape

from travel_recs.render.views import CardView, ErrorView, ResultsView

# ---------------------------------------------------------------------------
# Styles
# ---------------------------------------------------------------------------
PAGE_CSS = """
body { font-family: Arial, sans-serif; margin: 0; background: #f7f9fc; color: #333; }
header { background: #007bff; color: #fff; padding: 20px 40px; }
form.search { display: flex; gap: 10px; margin: 30px 40px 0; }
form.search input { flex: 1; padding: 10px; font-size: 1em; border: 1px solid #ccc; border-radius: 6px; }
form.search button, form.search a { padding: 10px 20px; border-radius: 6px; border: none;
  font-size: 1em; cursor: pointer; text-decoration: none; }
form.search button { background: #007bff; color: #fff; }
form.search a.reset { background: #e0e0e0; color: #333; }
#recommendationResults { margin: 0 40px 40px; }
.results-grid { display: grid; grid-template-columns: repeat(auto-fit, minmax(300px, 1fr));
  gap: 30px; margin-top: 40px; }
.recommendation-card { border: 1px solid #e0e0e0; border-radius: 12px; overflow: hidden;
  background: #fff; box-shadow: 0 8px 20px rgba(0, 0, 0, 0.1); transition: transform 0.3s; }
.recommendation-card:hover { transform: translateY(-8px); }
.recommendation-card img { width: 100%; height: 200px; object-fit: cover; }
.recommendation-card .body { padding: 20px; }
.recommendation-card h3 { margin-top: 0; color: #007bff; font-size: 1.5em; }
.recommendation-card .time { font-size: 0.9em; font-weight: bold; color: #ff5722; margin-top: 10px; }
.recommendation-card .book { display: block; text-align: right; color: #ff5722;
  text-decoration: none; font-weight: 600; margin-top: 15px; }
.no-results { padding: 20px; text-align: center; color: #555; font-size: 1.1em; margin-top: 30px; }
.load-error { color: red; padding: 20px; text-align: center; background: #ffebeb;
  border-radius: 8px; margin-top: 30px; }
"""


def _attr(value: str) -> str:
    return escape(value, quote=True)


class HtmlRenderer:
    """Produces HTML fragments for the results area."""

    def card(self, card: CardView) -> str:
        time_line = ""
        if card.current_time:
            time_line = f'<p class="time">Current Time: {escape(card.current_time)}</p>'
        # onerror swaps in the fallback once if the image itself fails to load
        return (
            '<div class="recommendation-card">'
            f'<img src="{_attr(card.image_url)}" alt="{_attr(card.name)}" '
            f"onerror=\"this.onerror=null; this.src='{_attr(card.fallback_image_url)}';\">"
            '<div class="body">'
            f"<h3>{escape(card.name)}</h3>"
            f"{time_line}"
            f"<p>{escape(card.description)}</p>"
            f'<a class="book" href="#">{escape(card.cta_label)}</a>'
            "</div></div>"
        )

    def render(self, view: ResultsView) -> str:
        if view.is_empty:
            return f'<div class="no-results">{escape(view.notice or "")}</div>'
        cards = "".join(self.card(c) for c in view.cards)
        return f'<div class="results-grid">{cards}</div>'

    def render_error(self, view: ErrorView) -> str:
        return (
            '<div class="load-error">'
            f"<p>{escape(view.message)}</p>"
            f"<p>Details: {escape(view.detail)}</p>"
            "</div>"
        )


def render_page(query: str = "", results_html: str = "") -> str:
    """Full search page. An empty results_html is the cleared/default state."""
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>Travel Recommendations</title>
<style>{PAGE_CSS}</style>
</head>
<body>
<header><h1>Travel Recommendations</h1></header>
<form class="search" method="get" action="/">
  <input id="searchInput" type="text" name="q" value="{_attr(query)}"
         placeholder="Enter a destination or keyword (beach, temple, country)">
  <button id="searchButton" type="submit">Search</button>
  <a id="resetButton" class="reset" href="/">Clear</a>
</form>
<div id="recommendationResults">{results_html}</div>
</body>
</html>
"""
