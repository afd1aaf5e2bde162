"""Pattern tables for URL highlighting and markdown styling.

The tables are built once at import and never mutated. Order matters: each
rule runs over the output of the previous one, and the first rule to claim a
span wins.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

CODE_COLOR = "#595959"

HREF_WRAPPER = '<a href="{0}">{0}</a>'

# Python's re has no variable-width lookbehind, so "start or whitespace"
# is spelled as an alternation around a fixed-width lookbehind.
_OPEN = r"(?:^|(?<=\s))"
_CLOSE = r"(?=$|\s)"

_SINGLE_SIGN_PATTERN = _OPEN + r"[{0}](?!\s)([^{0}\n]+?)(?<!\s)[{0}]" + _CLOSE
_DOUBLE_SIGN_PATTERN = _OPEN + r"[{0}][{0}](?!\s)([^\n]+?)(?<!\s)[{0}][{0}]" + _CLOSE
_MULTILINE_CODE_PATTERN = _OPEN + r"```(?!`)(.+?)(?<!`)```" + _CLOSE

_CODE_WRAPPER = f"<font color={CODE_COLOR}><code>{{}}</code></font>"


@dataclass(frozen=True)
class MarkdownRule:
    """A delimiter syntax and the HTML fragment its inner text is wrapped in."""

    name: str
    pattern: re.Pattern
    wrapper: str

    def wrap(self, text: str) -> str:
        return self.wrapper.format(text)


def _single(sign: str) -> re.Pattern:
    return re.compile(_SINGLE_SIGN_PATTERN.format(re.escape(sign)))


def _double(sign: str) -> re.Pattern:
    return re.compile(_DOUBLE_SIGN_PATTERN.format(re.escape(sign)))


MARKDOWN_RULES: tuple[MarkdownRule, ...] = (
    MarkdownRule("italic", _single("/"), "<i>{}</i>"),
    MarkdownRule("bold", _single("*"), "<b>{}</b>"),
    MarkdownRule("underline", _single("_"), "<u>{}</u>"),
    MarkdownRule("strikethrough", _single("~"), "<s>{}</s>"),
    MarkdownRule("code", _single("`"), _CODE_WRAPPER),
    MarkdownRule("double_bold", _double("*"), "<b>{}</b>"),
    MarkdownRule("double_italic", _double("/"), "<i>{}</i>"),
    MarkdownRule("double_underline", _double("_"), "<u>{}</u>"),
    MarkdownRule("double_strikethrough", _double("~"), "<s>{}</s>"),
    MarkdownRule("code_block", re.compile(_MULTILINE_CODE_PATTERN, re.DOTALL), _CODE_WRAPPER),
)

# Path characters allowed by RFC 3986 section 2.
_URL_PATH_PATTERN = r"[\w:/?#\[\]@!$&'{}*+,;.~%=-]+"

URL_PATTERNS: tuple[re.Pattern, ...] = (
    re.compile(r"\b(?:www\.|(?:https?|ftp)://)" + _URL_PATH_PATTERN, re.ASCII),
    re.compile(r"\b(?:file|smb)://[\S| ]*", re.ASCII),
    re.compile(r"\btox:[a-zA-Z0-9]{76}", re.ASCII),
    re.compile(r"\bmailto:\S+@\S+\.\S+", re.ASCII),
    re.compile(r"\btox:\S+@\S+", re.ASCII),
)

# Tag names between angle brackets; the brackets themselves are not captured.
TAG_PATTERN = re.compile(r"(?<=<)/?[a-zA-Z0-9]+(?=>)")
