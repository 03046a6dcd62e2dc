"""
Interactive Meter Session
==========================

Terminal counterpart of a live password-strength widget: every line the
user types is evaluated immediately, and a command generates a strong
replacement which then becomes the current text.

The session only marshals strings between the prompt, the engine and
the renderer.  It holds two pieces of state: the current text and
whether the text is shown in the clear.

Commands::

    :gen    generate a new password and analyse it
    :show   toggle masked / plain display of the current text
    :quit   leave the session (Ctrl-D / Ctrl-C work too)
"""

from __future__ import annotations

from typing import Optional

from shared.console import LensConsole

from meter.core.engine import MeterEngine
from meter.core.models import PasswordEvaluation
from meter.output.console import MeterConsoleOutput

CMD_GENERATE = ":gen"
CMD_TOGGLE = ":show"
CMD_QUIT = ":quit"


class InteractiveSession:
    """Prompt loop wiring user input to the engine and the renderer.

    Args:
        engine:  Engine used for evaluation and generation.
        console: Console used for prompts and output.
        mask:    Start with the current text masked.
    """

    def __init__(
        self,
        engine: Optional[MeterEngine] = None,
        console: Optional[LensConsole] = None,
        *,
        mask: bool = True,
    ) -> None:
        self.engine = engine or MeterEngine()
        self.console = console or LensConsole()
        self.display = MeterConsoleOutput(self.console, mask=mask)
        self.current: str = ""

    @property
    def masked(self) -> bool:
        return self.display.mask

    # ------------------------------------------------------------------ #
    #  Actions
    # ------------------------------------------------------------------ #

    def submit(self, text: str) -> Optional[PasswordEvaluation]:
        """Make *text* the current text and analyse it.

        Returns ``None`` (and shows the idle meter) for empty text, which
        is never passed to the evaluator.
        """
        self.current = text
        if not text:
            self.display.display_not_analyzed()
            return None
        return self._show(text)

    def regenerate(self) -> tuple[str, PasswordEvaluation]:
        """Generate a password different from the last one and analyse it."""
        password = self.engine.generate_password()
        self.display.display_generated(password)
        self.current = password
        evaluation = self._show(password)
        self.console.success("Strong password generated successfully!")
        return password, evaluation

    def _show(self, text: str) -> PasswordEvaluation:
        evaluation = self.engine.evaluate(text)
        self.display.display_evaluation(evaluation, password=text)
        return evaluation

    def toggle_visibility(self) -> bool:
        """Flip masked/plain display; returns ``True`` when now masked."""
        self.display.mask = not self.display.mask
        if self.current:
            self.submit(self.current)
        return self.display.mask

    # ------------------------------------------------------------------ #
    #  Loop
    # ------------------------------------------------------------------ #

    def handle(self, line: str) -> bool:
        """Dispatch one input line; returns ``False`` when the session ends."""
        command = line.strip()
        if command == CMD_QUIT:
            return False
        if command == CMD_GENERATE:
            self.regenerate()
        elif command == CMD_TOGGLE:
            self.toggle_visibility()
        else:
            self.submit(line)
        return True

    def run(self) -> None:
        """Prompt until :quit, end of input or interrupt."""
        self.console.info(
            f"Type a password to analyse it. "
            f"{CMD_GENERATE} generates one, {CMD_TOGGLE} toggles visibility, "
            f"{CMD_QUIT} exits."
        )
        while True:
            try:
                line = self.console.prompt("Password", password=self.masked)
            except (EOFError, KeyboardInterrupt):
                self.console.blank()
                break
            if not self.handle(line):
                break
        self.current = ""
