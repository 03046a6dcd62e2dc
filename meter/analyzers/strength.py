"""
Password Strength Evaluator
============================

Heuristic password scoring.  A password earns points for length and
character variety and loses points for guessable patterns:

    +20  per length threshold reached (8, 12, 16, 20)
    +10  per character class present (lower, upper, digit, symbol)
    -30  contains a common substring (denylist)
    -20  contains a run of 3+ identical characters
    -20  contains a 3-character window of the alphabet, digits or a
         keyboard row

The sum is clamped to [0, 100] and mapped onto five levels.  The same
pass also yields entropy, a crack-time label and ordered advisories.

Evaluation is a pure function of the input text: no randomness, no
clock, no I/O, and no input (the empty string included) raises.

References:
    - NIST SP 800-63B (2017). Digital Identity Guidelines.
    - Weir, M. et al. (2010). Testing Metrics for Password Creation
      Policies by Attacking Large Sets of Revealed Passwords. CCS.
"""

from __future__ import annotations

from meter.analyzers import entropy as _entropy
from meter.analyzers.patterns import (
    character_classes,
    has_common_pattern,
    has_repeating_chars,
    has_sequential_chars,
)
from meter.core.models import (
    Advisory,
    CharacterClassFlags,
    Metrics,
    PasswordEvaluation,
    StrengthLevel,
    StrengthResult,
)

LENGTH_THRESHOLDS: tuple[int, ...] = (8, 12, 16, 20)
LENGTH_BONUS: int = 20
CLASS_BONUS: int = 10
COMMON_PATTERN_PENALTY: int = 30
REPEATING_PENALTY: int = 20
SEQUENTIAL_PENALTY: int = 20
RECOMMENDED_LENGTH: int = 12

MIN_SCORE: int = 0
MAX_SCORE: int = 100


class StrengthEvaluator:
    """Scores passwords and explains the score.

    Usage::

        evaluator = StrengthEvaluator()
        result = evaluator.evaluate("Tr0ub4dor&3")
        print(result.level.label, result.metrics.entropy_bits)

    Args:
        guesses_per_second: Attacker speed used for the crack-time label.
        symbol_pool_size:   Pool size credited for symbols in the entropy
                            estimate.
    """

    def __init__(
        self,
        *,
        guesses_per_second: float = _entropy.GUESSES_PER_SECOND,
        symbol_pool_size: int = _entropy.SYMBOL_POOL,
    ) -> None:
        self.guesses_per_second = guesses_per_second
        self.symbol_pool_size = symbol_pool_size

    def evaluate(self, password: str) -> PasswordEvaluation:
        """Evaluate *password*.

        An empty password yields score 0, entropy 0, ``"Instant"`` and only
        the length advisory.
        """
        classes = character_classes(password)
        common = has_common_pattern(password)
        repeating = has_repeating_chars(password)
        sequential = has_sequential_chars(password)

        score = self._score(len(password), classes, common, repeating, sequential)
        level = StrengthLevel.from_score(score)

        bits = _entropy.entropy_bits(
            len(password),
            _entropy.charset_size(classes, self.symbol_pool_size),
        )
        metrics = Metrics(
            length=len(password),
            entropy_bits=bits,
            crack_time_label=_entropy.estimate_crack_time(
                bits, self.guesses_per_second
            ),
        )

        if password:
            warnings = self._warnings(
                len(password), classes, common, repeating, sequential
            )
        else:
            warnings = (Advisory.TOO_SHORT,)

        return PasswordEvaluation(
            strength=StrengthResult(score=score, level=level, color_hint=level.tier),
            metrics=metrics,
            warnings=warnings,
            classes=classes,
        )

    # ------------------------------------------------------------------ #
    #  Scoring
    # ------------------------------------------------------------------ #

    @staticmethod
    def _score(
        length: int,
        classes: CharacterClassFlags,
        common: bool,
        repeating: bool,
        sequential: bool,
    ) -> int:
        score = LENGTH_BONUS * sum(1 for t in LENGTH_THRESHOLDS if length >= t)
        score += CLASS_BONUS * sum(
            (classes.has_lower, classes.has_upper, classes.has_digit, classes.has_symbol)
        )

        if common:
            score -= COMMON_PATTERN_PENALTY
        if repeating:
            score -= REPEATING_PENALTY
        if sequential:
            score -= SEQUENTIAL_PENALTY

        return max(MIN_SCORE, min(MAX_SCORE, score))

    @staticmethod
    def _warnings(
        length: int,
        classes: CharacterClassFlags,
        common: bool,
        repeating: bool,
        sequential: bool,
    ) -> tuple[Advisory, ...]:
        """Collect advisories; the checks run in priority order."""
        checks = (
            (length < RECOMMENDED_LENGTH, Advisory.TOO_SHORT),
            (not classes.has_upper, Advisory.NO_UPPERCASE),
            (not classes.has_lower, Advisory.NO_LOWERCASE),
            (not classes.has_digit, Advisory.NO_DIGIT),
            (not classes.has_symbol, Advisory.NO_SYMBOL),
            (common, Advisory.COMMON_PATTERN),
            (repeating, Advisory.REPEATING_CHARS),
            (sequential, Advisory.SEQUENTIAL_CHARS),
        )
        return tuple(advisory for triggered, advisory in checks if triggered)


_DEFAULT_EVALUATOR = StrengthEvaluator()


def evaluate(password: str) -> PasswordEvaluation:
    """Evaluate *password* with the default attacker model."""
    return _DEFAULT_EVALUATOR.evaluate(password)
