"""Tests for structlog configuration."""

from __future__ import annotations

import json

import pytest
import structlog

from chatmarkup.logging import configure_logging


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()


def test_json_output(monkeypatch, capsys) -> None:
    monkeypatch.setenv("CHATMARKUP_LOG_FORMAT", "json")
    monkeypatch.setenv("CHATMARKUP_LOG_LEVEL", "INFO")
    configure_logging()

    structlog.get_logger("test").info("Rendered", length=3)

    line = capsys.readouterr().err.strip()
    payload = json.loads(line)
    assert payload["event"] == "Rendered"
    assert payload["length"] == 3
    assert payload["level"] == "info"
    assert "timestamp" in payload


def test_level_filtering(monkeypatch, capsys) -> None:
    monkeypatch.setenv("CHATMARKUP_LOG_FORMAT", "console")
    monkeypatch.setenv("CHATMARKUP_LOG_LEVEL", "WARNING")
    configure_logging()

    logger = structlog.get_logger("test")
    logger.info("hidden")
    logger.warning("shown")

    err = capsys.readouterr().err
    assert "hidden" not in err
    assert "shown" in err


def test_invalid_level(monkeypatch) -> None:
    monkeypatch.setenv("CHATMARKUP_LOG_LEVEL", "LOUD")
    with pytest.raises(ValueError):
        configure_logging()
