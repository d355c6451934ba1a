"""Unit tests for observability logging."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator

import pytest
import structlog
from structlog.testing import capture_logs

from infinilist.observability.logging import LoggingConfigurator, get_logger


@pytest.fixture
def restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


# ---------------------------------------------------------------------------
# get_logger
# ---------------------------------------------------------------------------


class TestGetLogger:
    def test_debug_is_quiet_without_configuration(self, capsys: pytest.CaptureFixture[str]) -> None:
        get_logger("infinilist.test").debug("hidden")
        captured = capsys.readouterr()
        assert "hidden" not in captured.out
        assert "hidden" not in captured.err

    def test_events_reach_capture(self) -> None:
        with capture_logs() as logs:
            get_logger("infinilist.test", component="unit").info("visible", n=1)
        assert logs == [{"component": "unit", "event": "visible", "n": 1, "log_level": "info"}]


# ---------------------------------------------------------------------------
# LoggingConfigurator
# ---------------------------------------------------------------------------


class TestLoggingConfigurator:
    def test_configure_json(self, restore_logging: None, capsys: pytest.CaptureFixture[str]) -> None:
        LoggingConfigurator.configure(logging.DEBUG, json=True)
        get_logger("infinilist.json").debug("forced", op="head")
        line = capsys.readouterr().err.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["event"] == "forced"
        assert payload["op"] == "head"
        assert payload["level"] == "debug"
        assert payload["logger"] == "infinilist.json"
        assert "timestamp" in payload

    def test_configure_filters_by_level(self, restore_logging: None, capsys: pytest.CaptureFixture[str]) -> None:
        LoggingConfigurator.configure(logging.WARNING)
        get_logger("infinilist.level").info("too-quiet")
        get_logger("infinilist.level").warning("loud")
        err = capsys.readouterr().err
        assert "too-quiet" not in err
        assert "loud" in err

    def test_configure_sets_root_level(self, restore_logging: None) -> None:
        LoggingConfigurator.configure("INFO")
        assert logging.getLogger().level == logging.INFO
        assert len(logging.getLogger().handlers) == 1
