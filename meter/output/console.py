"""
Meter Console Output
=====================

Rich-based renderers for Meter results: a colour-coded strength meter,
metrics table, character-class checklist, advisory list and a panel for
freshly generated passwords.

Colours are chosen here from the display tier carried by each
evaluation; the engine itself never deals in colours.

References:
    - Rich Library Documentation. https://rich.readthedocs.io/
"""

from __future__ import annotations

from typing import Optional

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from shared.console import LensConsole
from meter.core.models import PasswordEvaluation


# Tier (0-4) -> Rich colour
_TIER_COLOURS: tuple[str, ...] = (
    "bright_red",
    "dark_orange",
    "yellow",
    "bright_green",
    "medium_purple1",
)

_METER_WIDTH = 40


def mask_password(password: str) -> str:
    """Show first and last character with asterisks in between."""
    if len(password) <= 2:
        return "*" * len(password)
    return password[0] + "*" * (len(password) - 2) + password[-1]


class MeterConsoleOutput:
    """Console output formatters for Meter results.

    Usage::

        console = LensConsole()
        output = MeterConsoleOutput(console)
        output.display_evaluation(evaluation, password="hunter2")
    """

    def __init__(
        self,
        console: Optional[LensConsole] = None,
        *,
        mask: bool = True,
    ) -> None:
        """Initialise the console output formatter.

        Args:
            console: LensConsole instance. Creates one if not provided.
            mask:    Mask passwords when echoing them back.
        """
        self.console = console or LensConsole()
        self.mask = mask
        self._rich = self.console.rich

    # ------------------------------------------------------------------ #
    #  Evaluation Display
    # ------------------------------------------------------------------ #

    def display_not_analyzed(self) -> None:
        """Show the idle meter used when there is no text to analyse."""
        meter = Text()
        meter.append("Not Analyzed", style="dim")
        self._rich.print(Panel(meter, title="Strength Meter", border_style="cyan"))

    def display_evaluation(
        self,
        evaluation: PasswordEvaluation,
        password: Optional[str] = None,
    ) -> None:
        """Display a full evaluation: meter, metrics, classes and warnings.

        Args:
            evaluation: Result from the strength evaluator.
            password:   The evaluated text, shown (masked unless disabled)
                        in the metrics table when given.
        """
        self.console.section("Password Analysis")
        self._display_meter(evaluation)
        self._display_metrics(evaluation, password)
        self._display_classes(evaluation)
        self._display_warnings(evaluation)

    def _display_meter(self, evaluation: PasswordEvaluation) -> None:
        colour = _TIER_COLOURS[evaluation.strength.color_hint]
        filled = max(0, min(_METER_WIDTH, evaluation.score * _METER_WIDTH // 100))

        meter = Text()
        meter.append("Score: ", style="bold")
        meter.append(f"{evaluation.score}/100  ")
        meter.append("[", style="dim")
        meter.append("█" * filled, style=colour)
        meter.append("░" * (_METER_WIDTH - filled), style="dim")
        meter.append("]", style="dim")
        meter.append(f"  {evaluation.level.label.upper()}", style=f"bold {colour}")

        self._rich.print(Panel(meter, title="Strength Meter", border_style="cyan"))

    def _display_metrics(
        self,
        evaluation: PasswordEvaluation,
        password: Optional[str],
    ) -> None:
        tbl = Table(
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
        )
        tbl.add_column("Property", style="bold")
        tbl.add_column("Value")

        if password is not None:
            shown = mask_password(password) if self.mask else password
            tbl.add_row("Password", Text(shown))
        tbl.add_row("Length", str(evaluation.metrics.length))
        tbl.add_row("Entropy", f"{evaluation.metrics.entropy_bits} bits")
        tbl.add_row("Crack Time", evaluation.metrics.crack_time_label)

        self._rich.print(tbl)

    def _display_classes(self, evaluation: PasswordEvaluation) -> None:
        classes = evaluation.classes
        line = Text()
        for label, present in (
            ("Uppercase", classes.has_upper),
            ("Lowercase", classes.has_lower),
            ("Numbers", classes.has_digit),
            ("Symbols", classes.has_symbol),
        ):
            if present:
                line.append(f"✔ {label}   ", style="bold green")
            else:
                line.append(f"✘ {label}   ", style="dim")
        self._rich.print(line)

    def _display_warnings(self, evaluation: PasswordEvaluation) -> None:
        if not evaluation.warnings:
            return
        self._rich.print()
        self._rich.print("[bold]Warnings:[/bold]")
        for advisory in evaluation.warnings:
            self._rich.print(f"  [yellow]⚠[/yellow] {advisory.message}")

    # ------------------------------------------------------------------ #
    #  Generator Display
    # ------------------------------------------------------------------ #

    def display_generated(self, password: str) -> None:
        """Show a freshly generated password (never masked)."""
        self._rich.print(
            Panel(
                Text(password, style="bold bright_white"),
                title="Generated Password",
                border_style="bright_green",
            )
        )
