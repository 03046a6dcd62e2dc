"""Tests for the Meter click CLI."""

from __future__ import annotations

import json
from pathlib import Path
from unittest import mock

import pytest
from click.testing import CliRunner

from meter import __version__
from meter.cli import cli
from meter.core.engine import MeterEngine


def _invoke(args: list[str], **kwargs):
    return CliRunner().invoke(cli, args, obj={}, catch_exceptions=False, **kwargs)


def test_version() -> None:
    result = _invoke(["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_evaluate_json(strong_password: str) -> None:
    result = _invoke(["-q", "-o", "json", "evaluate", "abc123"])
    assert result.exit_code == 0

    report = json.loads(result.stdout)
    assert report["report_metadata"]["tool"] == "meter"
    (entry,) = report["results"]
    assert entry["target"] == "[password]"
    assert entry["evaluation"]["score"] == 0
    assert entry["evaluation"]["entropy_bits"] == 31
    assert "password" not in entry
    assert report["analyzed"] is True
    assert "abc123" not in result.stdout


def test_evaluate_console_masks_password(strong_password: str) -> None:
    result = _invoke(["evaluate", strong_password])
    assert result.exit_code == 0
    assert "UNBREAKABLE" in result.output
    assert "Centuries" in result.output
    assert strong_password not in result.output


def test_evaluate_prompts_when_argument_missing() -> None:
    result = _invoke(["-q", "-o", "json", "evaluate"], input="aaaAAA111!!!\n")
    assert result.exit_code == 0
    report = json.loads(result.stdout[result.stdout.index("{"):])
    assert report["results"][0]["evaluation"]["score"] == 60


def test_evaluate_empty_input_exits_nonzero() -> None:
    result = _invoke(["-q", "evaluate"], input="\n")
    assert result.exit_code == 1


def test_generate_json() -> None:
    result = _invoke(["-o", "json", "generate", "-n", "3"])
    assert result.exit_code == 0

    entries = json.loads(result.stdout)["results"]
    passwords = [e["password"] for e in entries]
    assert len(passwords) == 3
    assert all(a != b for a, b in zip(passwords, passwords[1:]))
    for entry, password in zip(entries, passwords):
        assert 16 <= len(password) <= 24
        assert entry["evaluation"]["length"] == len(password)


def test_generate_rejects_zero_count() -> None:
    result = CliRunner().invoke(cli, ["generate", "-n", "0"], obj={})
    assert result.exit_code == 2


def test_output_file(tmp_path: Path) -> None:
    target = tmp_path / "reports" / "meter.json"
    result = _invoke(["-o", "json", "-f", str(target), "evaluate", "abc123"])
    assert result.exit_code == 0
    assert target.exists()
    assert json.loads(target.read_text(encoding="utf-8"))["results"]


def test_config_file_sets_defaults(tmp_path: Path) -> None:
    config = tmp_path / "config.toml"
    config.write_text(
        '[global]\noutput_format = "json"\n\n'
        "[meter]\nmin_length = 20\nmax_length = 20\n",
        encoding="utf-8",
    )
    result = _invoke(["-c", str(config), "generate"])
    assert result.exit_code == 0
    (entry,) = json.loads(result.stdout)["results"]
    assert len(entry["password"]) == 20


def test_interactive_session(tmp_path: Path) -> None:
    config = tmp_path / "config.toml"
    config.write_text("[global]\nmask_passwords = false\n", encoding="utf-8")
    result = _invoke(
        ["-q", "-c", str(config), "interactive"],
        input="abc123\n:gen\n:quit\n",
    )
    assert result.exit_code == 0


def test_malformed_config_file(tmp_path: Path) -> None:
    config = tmp_path / "config.toml"
    config.write_text("[global\nlog_level = ", encoding="utf-8")
    result = _invoke(["-c", str(config), "evaluate", "abc123"])
    assert result.exit_code == 2
    assert "Invalid configuration" in result.output


@pytest.mark.parametrize(
    "meter_table",
    [
        "min_length = 2\n",
        "min_length = 20\nmax_length = 16\n",
        'symbols = ""\n',
        'symbols = "abc"\n',
    ],
)
def test_rejected_generator_settings(tmp_path: Path, meter_table: str) -> None:
    config = tmp_path / "config.toml"
    config.write_text("[meter]\n" + meter_table, encoding="utf-8")
    result = CliRunner().invoke(cli, ["-c", str(config), "generate"], obj={})
    assert result.exit_code == 2
    assert not isinstance(result.exception, ValueError)
    assert "Invalid configuration" in result.output


def test_evaluate_empty_input_json_document() -> None:
    result = _invoke(["-o", "json", "evaluate"], input="\n")
    assert result.exit_code == 1
    report = json.loads(result.stdout[result.stdout.index("{"):])
    assert report["analyzed"] is False
    assert report["results"] == []


def test_evaluate_analyses_once(strong_password: str) -> None:
    with mock.patch.object(
        MeterEngine, "evaluate", autospec=True, side_effect=MeterEngine.evaluate
    ) as evaluate:
        result = _invoke(["evaluate", strong_password])
    assert result.exit_code == 0
    assert evaluate.call_count == 1
