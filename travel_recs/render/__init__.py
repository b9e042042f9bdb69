"""View records and the renderers that turn them into HTML, text, or Excel."""
from .views import (
    CardView, ErrorView, ResultsView,
    build_card, build_error_view, build_results_view, resolve_image_url,
)
from .html import HtmlRenderer, render_page
from .text import TextRenderer
from .base import Renderer
