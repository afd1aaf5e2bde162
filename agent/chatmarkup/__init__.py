"""Chat message markup: URL highlighting and lightweight markdown styling."""

from chatmarkup.formatting import apply_markdown, highlight_url, is_tag_intersection
from chatmarkup.models import MarkdownStyle, RenderOptions
from chatmarkup.render import render_message

__all__ = [
    "apply_markdown",
    "highlight_url",
    "is_tag_intersection",
    "MarkdownStyle",
    "RenderOptions",
    "render_message",
]
