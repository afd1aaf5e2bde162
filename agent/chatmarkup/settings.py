"""Environment-backed settings for message rendering and logging."""

from __future__ import annotations

import os

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")
_STYLES = ("none", "with_chars", "without_chars")
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_LOG_FORMATS = ("console", "json")


def _flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean for {name}: {raw}")


def _choice(name: str, default: str, choices: tuple[str, ...], *, upper: bool = False) -> str:
    value = os.environ.get(name, "").strip()
    if not value:
        return default
    value = value.upper() if upper else value.lower()
    if value not in choices:
        raise ValueError(f"Invalid value for {name}: {value} (expected one of {', '.join(choices)})")
    return value


class Settings:
    """Accessors for CHATMARKUP_* environment variables.

    Values are read on every call so changes to the environment take effect
    without a restart.
    """

    def style(self) -> str:
        return _choice("CHATMARKUP_STYLE", "without_chars", _STYLES)

    def highlight_urls(self) -> bool:
        return _flag("CHATMARKUP_HIGHLIGHT_URLS", True)

    def escape_html(self) -> bool:
        return _flag("CHATMARKUP_ESCAPE_HTML", True)

    def log_level(self) -> str:
        return _choice("CHATMARKUP_LOG_LEVEL", "INFO", _LOG_LEVELS, upper=True)

    def log_format(self) -> str:
        return _choice("CHATMARKUP_LOG_FORMAT", "console", _LOG_FORMATS)


settings = Settings()
