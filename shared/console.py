"""
PassLens Console
=================

Thin layer over :class:`rich.console.Console` so every PassLens screen
shares one palette: banner, section rules, tagged status lines, the
findings table and line prompts (optionally with hidden input).

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

from datetime import datetime
from typing import Iterable

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

from shared.models import Finding, Severity

_THEME = Theme(
    {
        "lens.accent": "bright_cyan",
        "lens.section": "bold bright_magenta",
        "lens.success": "bold green",
        "lens.warning": "bold yellow",
        "lens.error": "bold red",
        "lens.info": "bold bright_blue",
        "lens.dim": "dim white",
        "lens.highlight": "bold bright_white",
        "severity.critical": "bold white on red",
        "severity.high": "bold red",
        "severity.medium": "bold yellow",
        "severity.low": "bold bright_cyan",
        "severity.info": "bold bright_blue",
    }
)

_LOGO = r"""
  ___               _
 | _ \__ _ ______ _| |   ___ _ _  ___
 |  _/ _` (_-<_-<| |__/ -_) ' \(_-<
 |_| \__,_/__/__/|____\___|_||_/__/
"""

_TAGLINE = "Local Password Strength Meter & Generator"

# (style, glyph, tag) per status line kind
_STATUS = {
    "success": ("lens.success", "✔", "SUCCESS"),
    "warning": ("lens.warning", "⚠", "WARNING"),
    "error": ("lens.error", "✘", "ERROR"),
    "info": ("lens.info", "ℹ", "INFO"),
}


def severity_style(severity: Severity) -> str:
    """Theme style name for *severity*."""
    return f"severity.{severity.value.lower()}"


class LensConsole:
    """Styled console shared by PassLens commands.

    Args:
        quiet:  Swallow all output (JSON mode, tests).
        record: Keep a recording for :meth:`rich.console.Console.export_text`.
    """

    def __init__(self, *, quiet: bool = False, record: bool = False) -> None:
        self._console = Console(theme=_THEME, quiet=quiet, record=record, highlight=False)

    @property
    def rich(self) -> Console:
        """The wrapped Rich console."""
        return self._console

    def banner(self, version: str) -> None:
        stamp = datetime.now().strftime("%Y-%m-%d %H:%M")
        body = Text(_LOGO, style="lens.accent")
        body.append(f"\n{_TAGLINE}\n", style="lens.highlight")
        body.append(f"v{version}  |  {stamp}", style="lens.dim")
        self._console.print(
            Panel(Align.center(body), border_style="lens.accent", padding=(0, 2))
        )

    def section(self, title: str) -> None:
        self._console.rule(f" {title} ", style="lens.section")

    def _status(self, kind: str, message: str) -> None:
        style, glyph, tag = _STATUS[kind]
        line = Text(f"[{glyph}] {tag}: ", style=style)
        line.append(message)
        self._console.print(line)

    def success(self, message: str) -> None:
        self._status("success", message)

    def warning(self, message: str) -> None:
        self._status("warning", message)

    def error(self, message: str) -> None:
        self._status("error", message)

    def info(self, message: str) -> None:
        self._status("info", message)

    def findings_table(self, findings: Iterable[Finding]) -> None:
        """Numbered table of findings with severity colouring."""
        table = Table(
            title="Findings",
            border_style="lens.accent",
            header_style="lens.section",
            show_lines=True,
        )
        table.add_column("#", style="dim", justify="right", width=3)
        table.add_column("Severity", width=10)
        table.add_column("Title")
        table.add_column("Description", ratio=2)

        for number, finding in enumerate(findings, start=1):
            table.add_row(
                str(number),
                Text(finding.severity.value, style=severity_style(finding.severity)),
                Text(finding.title),
                Text(finding.description),
            )
        self._console.print(table)

    def prompt(self, message: str, *, password: bool = False) -> str:
        """Read one line; ``password=True`` disables echo."""
        return Prompt.ask(
            Text(message, style="lens.info"),
            console=self._console,
            password=password,
            default="",
            show_default=False,
        )

    def blank(self) -> None:
        self._console.print()
