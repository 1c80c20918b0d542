from .base import SnapshotDocument, SwatchDocument, SwatchElement
from .browser_playwright import render_browser_document, snapshot_page
from .html_static import StaticHtmlDocument, inline_background_color

__all__ = [
    "SwatchDocument",
    "SwatchElement",
    "SnapshotDocument",
    "StaticHtmlDocument",
    "inline_background_color",
    "render_browser_document",
    "snapshot_page",
]
