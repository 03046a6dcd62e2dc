"""
Meter CLI
==========

Click-based command-line interface for the PassLens password strength
meter and generator.

Usage::

    python -m meter evaluate "MyP@ssw0rd!"
    python -m meter evaluate                # prompts with hidden input
    python -m meter -o json generate --count 3
    python -m meter interactive

References:
    - Click Documentation. https://click.palletsprojects.com/
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from shared.config import LensConfig
from shared.console import LensConsole
from shared.models import ScanResult

from meter import __version__
from meter.core.engine import MeterEngine
from meter.output.console import MeterConsoleOutput
from meter.output.report import MeterReportGenerator
from meter.session import InteractiveSession


# ===================================================================== #
#  CLI Group
# ===================================================================== #

@click.group()
@click.version_option(__version__, prog_name="passlens")
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to PassLens configuration file (TOML).",
)
@click.option(
    "--output", "-o",
    type=click.Choice(["console", "json"]),
    default=None,
    help="Output format (defaults to the configured format).",
)
@click.option(
    "--output-file", "-f",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write the JSON report to this file instead of stdout.",
)
@click.option(
    "--quiet", "-q",
    is_flag=True,
    default=False,
    help="Suppress banner and informational output.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[str],
    output: Optional[str],
    output_file: Optional[str],
    quiet: bool,
) -> None:
    """PassLens -- local password strength meter and generator.

    Scores passwords, estimates entropy and crack time, and generates
    strong random replacements.  Nothing leaves this machine.
    """
    ctx.ensure_object(dict)

    try:
        lens_config = LensConfig.load(config)
        engine = MeterEngine(lens_config)
    except ValueError as exc:
        # malformed TOML or generator settings the engine rejects
        LensConsole().error(f"Invalid configuration: {exc}")
        ctx.exit(2)

    output_format = output or lens_config.global_settings.output_format
    ctx.obj["config"] = lens_config
    ctx.obj["output_format"] = output_format
    ctx.obj["output_file"] = output_file
    ctx.obj["quiet"] = quiet

    console = LensConsole(quiet=quiet or output_format == "json")
    ctx.obj["console"] = console
    ctx.obj["engine"] = engine
    ctx.obj["display"] = MeterConsoleOutput(
        console, mask=lens_config.global_settings.mask_passwords
    )
    ctx.obj["reporter"] = MeterReportGenerator()

    if not quiet and output_format == "console":
        console.banner(version=__version__)


def _handle_json(
    ctx: click.Context,
    results: list[ScanResult],
    generated: Optional[list[str]] = None,
) -> None:
    """Emit JSON output to the requested file or to stdout."""
    reporter: MeterReportGenerator = ctx.obj["reporter"]
    output_file = ctx.obj["output_file"]

    if output_file:
        path = reporter.generate_json(results, Path(output_file), generated)
        click.echo(f"JSON report saved to: {path}", err=True)
    else:
        click.echo(reporter.render(results, generated))


# ===================================================================== #
#  Subcommands
# ===================================================================== #

@cli.command()
@click.argument("password", required=False)
@click.pass_context
def evaluate(ctx: click.Context, password: Optional[str]) -> None:
    """Analyse password strength, entropy and crack time.

    When PASSWORD is omitted it is read from a hidden prompt, which keeps
    it out of the shell history.
    """
    engine: MeterEngine = ctx.obj["engine"]
    display: MeterConsoleOutput = ctx.obj["display"]
    console: LensConsole = ctx.obj["console"]

    if password is None:
        password = click.prompt(
            "Password", hide_input=True, default="", show_default=False
        )

    if not password:
        if ctx.obj["output_format"] == "console":
            display.display_not_analyzed()
            console.warning("Nothing to analyse: the password is empty.")
        else:
            _handle_json(ctx, [])
        ctx.exit(1)

    evaluation, result = engine.analyze(password)

    if ctx.obj["output_format"] == "console":
        if evaluation is not None:
            display.display_evaluation(evaluation, password=password)
        console.findings_table(result.findings)
    else:
        _handle_json(ctx, [result])


@cli.command()
@click.option(
    "--count", "-n",
    type=click.IntRange(min=1),
    default=1,
    show_default=True,
    help="How many passwords to generate; each differs from the one before.",
)
@click.pass_context
def generate(ctx: click.Context, count: int) -> None:
    """Generate strong random passwords and analyse each one."""
    engine: MeterEngine = ctx.obj["engine"]
    display: MeterConsoleOutput = ctx.obj["display"]
    console: LensConsole = ctx.obj["console"]

    passwords: list[str] = []
    results: list[ScanResult] = []
    for _ in range(count):
        password = engine.generate_password()
        passwords.append(password)
        evaluation, result = engine.analyze(password)
        results.append(result)

        if ctx.obj["output_format"] == "console":
            display.display_generated(password)
            if evaluation is not None:
                display.display_evaluation(evaluation)

    if ctx.obj["output_format"] == "console":
        console.success(f"Generated {count} password(s).")
    else:
        _handle_json(ctx, results, passwords)


@cli.command()
@click.pass_context
def interactive(ctx: click.Context) -> None:
    """Analyse passwords as you type them, with on-demand generation."""
    session = InteractiveSession(
        ctx.obj["engine"],
        ctx.obj["console"],
        mask=ctx.obj["config"].global_settings.mask_passwords,
    )
    session.run()


# ===================================================================== #
#  Entry Point
# ===================================================================== #

def main() -> None:
    """Main entry point for the Meter CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
