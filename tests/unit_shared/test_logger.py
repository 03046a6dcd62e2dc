"""Tests for the LensLogger facade."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from shared.config import GlobalConfig
from shared.logger import LensLogger


def _close(log: LensLogger) -> None:
    for handler in log.underlying.handlers:
        handler.close()


def test_json_file_records(tmp_path: Path) -> None:
    path = tmp_path / "logs" / "meter.jsonl"
    log = LensLogger(
        "test.json",
        log_level="DEBUG",
        log_file=path,
        json_logs=True,
        console_output=False,
    )
    with log.operation("generate"):
        log.info("Generated password of length %d", 18, attempts=2)
    log.warning("outside")
    _close(log)

    first, second = (json.loads(line) for line in path.read_text().splitlines())
    assert first["logger"] == "passlens.test.json"
    assert first["message"] == "Generated password of length 18"
    assert first["tool_name"] == "test.json"
    assert first["operation"] == "generate"
    assert first["extra"] == {"attempts": 2}
    assert second["level"] == "WARNING"
    assert "operation" not in second


def test_level_filtering(tmp_path: Path) -> None:
    path = tmp_path / "plain.log"
    log = LensLogger(
        "test.plain", log_level="WARNING", log_file=path, console_output=False
    )
    log.debug("hidden")
    log.info("hidden")
    log.error("shown")
    _close(log)

    lines = path.read_text().splitlines()
    assert len(lines) == 1
    assert "ERROR" in lines[0] and "shown" in lines[0]


def test_reinstantiation_replaces_handlers() -> None:
    LensLogger("test.dup")
    log = LensLogger("test.dup")
    assert len(log.underlying.handlers) == 1
    assert log.underlying.propagate is False
    assert log.underlying.level == logging.INFO
    assert log.tool_name == "test.dup"


def test_timed_context(tmp_path: Path) -> None:
    path = tmp_path / "timed.log"
    log = LensLogger(
        "test.timed", log_level="DEBUG", log_file=path, console_output=False
    )
    with log.timed("work") as timer:
        pass
    _close(log)
    assert timer.elapsed >= 0
    text = path.read_text()
    assert "Started: work" in text and "Completed: work" in text


def test_from_settings(tmp_path: Path) -> None:
    settings = GlobalConfig(log_level="DEBUG", log_file=str(tmp_path / "s.log"))
    log = LensLogger.from_settings("test.settings", settings)
    log.debug("configured")
    _close(log)
    assert "configured" in (tmp_path / "s.log").read_text()
