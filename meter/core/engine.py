"""
Meter Analysis Engine
======================

Facade over the strength evaluator and the password generator.  The
engine owns no scoring logic: it builds both components from the
configuration, threads the previously generated password between
generator calls, and wraps evaluations into the shared
:class:`~shared.models.ScanResult` format used by the console and
report layers.

Every call runs to completion synchronously; there is no background
work and no I/O besides logging.
"""

from __future__ import annotations

import random
import secrets
from datetime import datetime, timezone
from typing import Optional

from shared.config import LensConfig, get_config
from shared.logger import LensLogger
from shared.models import Finding, ScanResult, Severity

from meter.analyzers.strength import StrengthEvaluator
from meter.core.models import Advisory, PasswordEvaluation, StrengthLevel
from meter.generators.password import PasswordGenerator

_LEVEL_SEVERITY: dict[StrengthLevel, Severity] = {
    StrengthLevel.VERY_WEAK: Severity.CRITICAL,
    StrengthLevel.WEAK: Severity.HIGH,
    StrengthLevel.MEDIUM: Severity.MEDIUM,
    StrengthLevel.STRONG: Severity.LOW,
    StrengthLevel.UNBREAKABLE: Severity.INFO,
}

_ADVISORY_SEVERITY: dict[Advisory, Severity] = {
    Advisory.TOO_SHORT: Severity.MEDIUM,
    Advisory.NO_UPPERCASE: Severity.LOW,
    Advisory.NO_LOWERCASE: Severity.LOW,
    Advisory.NO_DIGIT: Severity.LOW,
    Advisory.NO_SYMBOL: Severity.LOW,
    Advisory.COMMON_PATTERN: Severity.MEDIUM,
    Advisory.REPEATING_CHARS: Severity.LOW,
    Advisory.SEQUENTIAL_CHARS: Severity.LOW,
}

_REFERENCES: list[str] = [
    "NIST SP 800-63B (2017). Digital Identity Guidelines.",
]


class MeterEngine:
    """Coordinates strength evaluation and password generation.

    Usage::

        engine = MeterEngine()
        result = engine.analyze_password("P@ssw0rd!")
        new_pw = engine.generate_password()
        again = engine.generate_password()      # != new_pw

    Attributes:
        config: PassLens configuration instance.
        logger: Logger for the meter engine.
    """

    def __init__(
        self,
        config: Optional[LensConfig] = None,
        *,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.config = config or get_config()
        settings = self.config.global_settings
        self.logger = LensLogger.from_settings("meter.engine", settings)

        meter_cfg = self.config.meter
        if rng is None:
            rng = secrets.SystemRandom() if meter_cfg.secure_random else random.Random()

        self._evaluator = StrengthEvaluator(
            guesses_per_second=meter_cfg.guesses_per_second,
            symbol_pool_size=meter_cfg.symbol_pool_size,
        )
        self._generator = PasswordGenerator(
            rng,
            min_length=meter_cfg.min_length,
            max_length=meter_cfg.max_length,
            symbols=meter_cfg.symbols,
            logger=self.logger,
        )

    @property
    def last_generated(self) -> Optional[str]:
        """The most recently generated password, if any."""
        return self._generator.last

    # ------------------------------------------------------------------ #
    #  Core passthroughs
    # ------------------------------------------------------------------ #

    def evaluate(self, password: str) -> PasswordEvaluation:
        """Evaluate *password* with the configured attacker model."""
        return self._evaluator.evaluate(password)

    def generate_password(self, previous: Optional[str] = None) -> str:
        """Generate a password differing from *previous*.

        When *previous* is omitted the engine's own last generated password
        is avoided.
        """
        with self.logger.operation("generate"):
            password = self._generator.generate(previous)
            self.logger.debug("Generated password of length %d", len(password))
        return password

    # ------------------------------------------------------------------ #
    #  Password Analysis
    # ------------------------------------------------------------------ #

    def analyze_password(self, password: str) -> ScanResult:
        """Evaluate *password* and wrap the outcome in a ScanResult."""
        return self.analyze(password)[1]

    def analyze(
        self, password: str
    ) -> tuple[Optional[PasswordEvaluation], ScanResult]:
        """Evaluate *password*; return the evaluation and its ScanResult.

        The result carries one finding for the overall strength plus one
        per advisory; ``metadata`` holds the flat evaluation dictionary.
        The password itself is never stored in the result.
        The evaluation is ``None`` when the analysis failed.
        """
        outcome: Optional[PasswordEvaluation] = None
        result = ScanResult(
            tool_name="meter",
            target="[password]",
            start_time=datetime.now(timezone.utc),
        )

        with self.logger.operation("analyze"), self.logger.timed("password analysis"):
            try:
                evaluation = self.evaluate(password)
                result.metadata = evaluation.as_dict()

                result.add_finding(self._strength_finding(evaluation))
                for advisory in evaluation.warnings:
                    result.add_finding(Finding(
                        title=f"Advisory: {advisory.value.replace('_', ' ')}",
                        description=advisory.message,
                        severity=_ADVISORY_SEVERITY[advisory],
                    ))

                self.logger.debug(
                    "Evaluated password: length=%d score=%d level=%s",
                    evaluation.metrics.length,
                    evaluation.score,
                    evaluation.level.value,
                )
                result.finalize(
                    f"Password analysis: {evaluation.level.label}, "
                    f"score={evaluation.score}/100, "
                    f"entropy={evaluation.metrics.entropy_bits} bits, "
                    f"crack time={evaluation.metrics.crack_time_label}"
                )
                outcome = evaluation

            except Exception as exc:
                self.logger.exception("Password analysis failed: %s", exc)
                result.add_finding(Finding(
                    title="Password Analysis Error",
                    description=f"Error during password analysis: {exc}",
                    severity=Severity.HIGH,
                ))
                result.finalize(f"Error: {exc}")

        return outcome, result

    # ------------------------------------------------------------------ #
    #  Private Helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _strength_finding(evaluation: PasswordEvaluation) -> Finding:
        metrics = evaluation.metrics
        return Finding(
            title=f"Password Strength: {evaluation.level.label}",
            description=(
                f"Score: {evaluation.score}/100. "
                f"Entropy: {metrics.entropy_bits} bits. "
                f"Length: {metrics.length}. "
                f"Estimated crack time: {metrics.crack_time_label}."
            ),
            severity=_LEVEL_SEVERITY[evaluation.level],
            evidence={
                "score": evaluation.score,
                "level": evaluation.level.value,
                "entropy_bits": metrics.entropy_bits,
                "length": metrics.length,
                "crack_time": metrics.crack_time_label,
            },
            references=list(_REFERENCES),
        )
