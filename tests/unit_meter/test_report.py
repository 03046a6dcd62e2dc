"""Tests for the JSON report generator."""

from __future__ import annotations

import json
from pathlib import Path

from meter import __version__
from meter.core.engine import MeterEngine
from meter.output.report import MeterReportGenerator


def test_build_structure(engine: MeterEngine) -> None:
    result = engine.analyze_password("abc123")
    report = MeterReportGenerator().build([result])

    meta = report["report_metadata"]
    assert meta["tool"] == "meter"
    assert meta["version"] == __version__

    (entry,) = report["results"]
    assert report["analyzed"] is True
    assert entry["evaluation"] == result.metadata
    assert entry["duration_seconds"] is not None
    assert [f["severity"] for f in entry["findings"]][0] == "CRITICAL"
    assert entry["findings"][1]["title"] == "Advisory: too short"


def test_generated_passwords_attached(engine: MeterEngine) -> None:
    passwords = [engine.generate_password() for _ in range(2)]
    results = [engine.analyze_password(p) for p in passwords]
    report = MeterReportGenerator().build(results, passwords)
    assert [e["password"] for e in report["results"]] == passwords


def test_render_is_valid_json(engine: MeterEngine, strong_password: str) -> None:
    text = MeterReportGenerator().render([engine.analyze_password(strong_password)])
    assert strong_password not in text
    data = json.loads(text)
    assert data["results"][0]["evaluation"]["level"] == "unbreakable"


def test_generate_json_creates_parents(
    engine: MeterEngine, tmp_path: Path
) -> None:
    target = tmp_path / "nested" / "out.json"
    written = MeterReportGenerator().generate_json(
        [engine.analyze_password("abc123")], target
    )
    assert written == target
    assert json.loads(target.read_text(encoding="utf-8"))["results"]


def test_empty_report_marks_not_analyzed() -> None:
    report = MeterReportGenerator().build([])
    assert report["analyzed"] is False
    assert report["results"] == []
