"""Chat message formatting: URL highlighting and markdown styling."""

from __future__ import annotations

import re
from typing import Callable, Optional

import structlog

from chatmarkup.rules import HREF_WRAPPER, MARKDOWN_RULES, TAG_PATTERN, URL_PATTERNS

logger = structlog.get_logger(__name__)


def _rewrite(text: str, pattern: re.Pattern, replace: Callable[[re.Match], Optional[str]]) -> str:
    """Replace every match of ``pattern`` found in ``text``.

    Matches come from a single scan of ``text`` and are applied left to right
    to a working copy. ``offset`` tracks how far the copy has drifted from the
    scanned string so later positions stay aligned. A ``None`` replacement
    leaves the match in place.
    """
    result = text
    offset = 0
    for match in pattern.finditer(text):
        replacement = replace(match)
        if replacement is None:
            continue
        start = match.start() + offset
        length = match.end() - match.start()
        result = result[:start] + replacement + result[start + length:]
        offset += len(replacement) - length
    return result


def highlight_url(message: str) -> str:
    """Wrap URL-like substrings of a message in anchor tags.

    Each URL syntax gets its own pass over the output of the previous one, so
    text already wrapped by a stricter pattern is seen by the looser ones as
    part of the markup. Running this twice over the same text can double-wrap.
    """
    result = message
    for pattern in URL_PATTERNS:
        result = _rewrite(result, pattern, lambda match: HREF_WRAPPER.format(match.group(0)))
    return result


def is_tag_intersection(text: str) -> bool:
    """Return True if ``text`` has unequal counts of opening and closing tags.

    Only tag names directly enclosed by angle brackets are counted, so
    ``<b>`` and ``</b>`` count but ``<a href="...">`` does not. Nesting and
    tag names are not checked.
    """
    opening = 0
    closing = 0
    for token in TAG_PATTERN.findall(text):
        if token.startswith("/"):
            closing += 1
        else:
            opening += 1
    return opening != closing


def apply_markdown(message: str, show_formatting_symbols: bool) -> str:
    """Apply lightweight markdown styling to a message.

    Args:
        message: Text to style. Callers escape user HTML beforehand.
        show_formatting_symbols: Keep the delimiter characters inside the
            generated tags instead of stripping them.

    Returns:
        The styled text. Spans that would cross tags inserted by an earlier
        rule are left as they are.
    """
    result = message
    for rule in MARKDOWN_RULES:

        def _wrap(match: re.Match, rule=rule) -> Optional[str]:
            captured = match.group(0) if show_formatting_symbols else match.group(1)
            if is_tag_intersection(captured):
                logger.debug(
                    "Skipped markdown match on tag intersection",
                    rule=rule.name,
                    start=match.start(),
                )
                return None
            return rule.wrap(captured)

        result = _rewrite(result, rule.pattern, _wrap)
    return result
