# tests/test_logging.py
"""Tests for the loguru setup and error tracking helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from axisrot.utils.error_tracker import ErrorTracker, error_scope
from axisrot.utils.logger import configure, current_log_file, get_logger


def test_console_sink_format(capsys: pytest.CaptureFixture[str]) -> None:
    """One line per record: time | level | module | message."""
    configure(level="INFO")
    get_logger("axisrot.test").info("hello")
    line = capsys.readouterr().err.strip().splitlines()[-1]
    _, level, module, message = [part.strip() for part in line.split("|")]
    assert level == "INF"
    assert module == "axisrot.test"
    assert message == "hello"


def test_level_filters_debug(capsys: pytest.CaptureFixture[str]) -> None:
    configure(level="INFO")
    get_logger("axisrot.test").debug("hidden")
    assert "hidden" not in capsys.readouterr().err
    configure(level="DEBUG")
    get_logger("axisrot.test").debug("shown")
    assert "shown" in capsys.readouterr().err


def test_tag_helper(capsys: pytest.CaptureFixture[str]) -> None:
    configure(level="INFO")
    get_logger("axisrot.test").tag("ROTATE", "angle={}", 1.5)
    assert "[ROTATE] angle=1.5" in capsys.readouterr().err


def test_file_sink(tmp_path: Path) -> None:
    """AXISROT_LOG_FILE style sink writes ISO timestamps and full level names."""
    log_path = tmp_path / "logs" / "run.log"
    configure(level="INFO", file=str(log_path))
    assert current_log_file() == log_path
    get_logger("axisrot.test").warning("to file")
    configure(level="INFO", file=None)
    assert current_log_file() is None

    text = log_path.read_text(encoding="utf-8")
    assert "| WARNING | axisrot.test | to file" in text


def test_error_tracker_records_and_summarises() -> None:
    tracker = ErrorTracker(context="axisrot.test")
    assert not tracker.has_errors()
    assert tracker.summary() == {}
    tracker.record("rotate", "first")
    tracker.record("rotate", "second")
    assert tracker.has_errors()
    assert tracker.summary() == {"rotate": ["first", "second"]}


def test_error_scope_reraises_and_records() -> None:
    tracker = ErrorTracker()
    with pytest.raises(ValueError):
        with error_scope("parse", tracker):
            raise ValueError("bad vector")
    assert tracker.errors == {"parse": ["ValueError: bad vector"]}


def test_error_scope_can_swallow(capsys: pytest.CaptureFixture[str]) -> None:
    configure(level="INFO")
    with error_scope("quiet", reraise=False):
        raise KeyError("missing")
    assert "KeyError" in capsys.readouterr().err
