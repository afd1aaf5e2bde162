"""Pydantic models for render options."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel

from chatmarkup.settings import settings


class MarkdownStyle(str, Enum):
    """How markdown delimiters are rendered."""
    NONE = "none"
    WITH_CHARS = "with_chars"
    WITHOUT_CHARS = "without_chars"


class RenderOptions(BaseModel):
    """Steps applied by render_message."""
    style: MarkdownStyle = MarkdownStyle.WITHOUT_CHARS
    highlight_urls: bool = True
    escape_html: bool = True

    @classmethod
    def from_settings(cls) -> "RenderOptions":
        """Build options from the CHATMARKUP_* environment."""
        return cls(
            style=MarkdownStyle(settings.style()),
            highlight_urls=settings.highlight_urls(),
            escape_html=settings.escape_html(),
        )
