"""Message rendering pipeline used by the chat view."""

from __future__ import annotations

import html
from typing import Optional

import structlog

from chatmarkup.formatting import apply_markdown, highlight_url
from chatmarkup.models import MarkdownStyle, RenderOptions

logger = structlog.get_logger(__name__)


def render_message(text: str, options: Optional[RenderOptions] = None) -> str:
    """Turn raw message text into display HTML.

    Escapes the text, wraps URLs in anchors, then applies markdown styling,
    each step controlled by ``options``. Without options the defaults come
    from the CHATMARKUP_* environment.
    """
    if options is None:
        options = RenderOptions.from_settings()

    result = text
    if options.escape_html:
        result = html.escape(result)
    if options.highlight_urls:
        result = highlight_url(result)
    if options.style != MarkdownStyle.NONE:
        result = apply_markdown(result, options.style == MarkdownStyle.WITH_CHARS)

    logger.debug(
        "Rendered message",
        style=options.style.value,
        highlight_urls=options.highlight_urls,
        escape_html=options.escape_html,
        input_length=len(text),
        output_length=len(result),
    )
    return result
