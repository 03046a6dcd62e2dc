"""
Meter Core Data Models
=======================

Pydantic models for the Meter password strength engine.  Every model is
frozen: an evaluation is produced fresh for each input and never
mutated afterwards, so two evaluations of the same text compare equal.

References:
    - NIST SP 800-63B (2017). Digital Identity Guidelines --
      Authentication and Lifecycle Management.
"""

from __future__ import annotations

import enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# ===================================================================== #
#  Enumerations
# ===================================================================== #


class StrengthLevel(str, enum.Enum):
    """Qualitative strength level, weakest first.

    Score boundaries belong to the higher level (a score of exactly 20
    is ``WEAK``).
    """

    VERY_WEAK = "very_weak"        # score in [0, 20)
    WEAK = "weak"                  # score in [20, 40)
    MEDIUM = "medium"              # score in [40, 60)
    STRONG = "strong"              # score in [60, 80)
    UNBREAKABLE = "unbreakable"    # score in [80, 100]

    @property
    def label(self) -> str:
        """Display label, e.g. ``"Very Weak"``."""
        return self.value.replace("_", " ").title()

    @property
    def tier(self) -> int:
        """Display-agnostic ordinal tier, 0 (weakest) to 4 (strongest)."""
        return list(StrengthLevel).index(self)

    @classmethod
    def from_score(cls, score: int) -> StrengthLevel:
        """Map a 0-100 score onto a level using strict less-than thresholds."""
        if score < 20:
            return cls.VERY_WEAK
        if score < 40:
            return cls.WEAK
        if score < 60:
            return cls.MEDIUM
        if score < 80:
            return cls.STRONG
        return cls.UNBREAKABLE


_ADVISORY_MESSAGES: dict[str, str] = {
    "too_short": "Password should be at least 12 characters long",
    "no_uppercase": "Add uppercase letters for better security",
    "no_lowercase": "Add lowercase letters for better security",
    "no_digit": "Include numbers to increase strength",
    "no_symbol": "Add special characters for maximum security",
    "common_pattern": "Avoid common patterns and dictionary words",
    "repeating_chars": "Avoid repeating characters",
    "sequential_chars": "Avoid sequential characters",
}


class Advisory(str, enum.Enum):
    """Advisory warning identifiers.

    Declaration order is the priority order in which warnings are
    reported.
    """

    TOO_SHORT = "too_short"
    NO_UPPERCASE = "no_uppercase"
    NO_LOWERCASE = "no_lowercase"
    NO_DIGIT = "no_digit"
    NO_SYMBOL = "no_symbol"
    COMMON_PATTERN = "common_pattern"
    REPEATING_CHARS = "repeating_chars"
    SEQUENTIAL_CHARS = "sequential_chars"

    @property
    def message(self) -> str:
        """The fixed advisory text for this warning."""
        return _ADVISORY_MESSAGES[self.value]


# ===================================================================== #
#  Evaluation Models
# ===================================================================== #


class CharacterClassFlags(BaseModel):
    """Which ASCII character classes occur in the password.

    Attributes:
        has_lower: At least one ``a-z``.
        has_upper: At least one ``A-Z``.
        has_digit: At least one ``0-9``.
        has_symbol: At least one character outside ``[a-zA-Z0-9]``.
    """

    model_config = ConfigDict(frozen=True)

    has_lower: bool = False
    has_upper: bool = False
    has_digit: bool = False
    has_symbol: bool = False


class StrengthResult(BaseModel):
    """Score, level and display tier of a password.

    Attributes:
        score: Integer score clamped to [0, 100].
        level: Qualitative level derived from the score.
        color_hint: Display tier (0-4); renderers pick the actual colour.
    """

    model_config = ConfigDict(frozen=True)

    score: int = Field(..., ge=0, le=100)
    level: StrengthLevel
    color_hint: int = Field(..., ge=0, le=4)


class Metrics(BaseModel):
    """Length, entropy and crack-time estimate of a password."""

    model_config = ConfigDict(frozen=True)

    length: int = Field(..., ge=0)
    entropy_bits: int = Field(..., ge=0)
    crack_time_label: str


class PasswordEvaluation(BaseModel):
    """Complete output of one strength evaluation.

    Attributes:
        strength: Score, level and tier.
        metrics: Length, entropy and crack-time label.
        warnings: Advisories in priority order (0-8 entries).
        classes: Character class flags.
    """

    model_config = ConfigDict(frozen=True)

    strength: StrengthResult
    metrics: Metrics
    warnings: tuple[Advisory, ...] = ()
    classes: CharacterClassFlags = Field(default_factory=CharacterClassFlags)

    @property
    def score(self) -> int:
        return self.strength.score

    @property
    def level(self) -> StrengthLevel:
        return self.strength.level

    def as_dict(self) -> dict[str, Any]:
        """Flatten into the plain-data shape handed to presentation layers."""
        return {
            "score": self.strength.score,
            "level": self.strength.level.value,
            "color_hint": self.strength.color_hint,
            "entropy_bits": self.metrics.entropy_bits,
            "crack_time_label": self.metrics.crack_time_label,
            "length": self.metrics.length,
            "class_flags": {
                "lower": self.classes.has_lower,
                "upper": self.classes.has_upper,
                "digit": self.classes.has_digit,
                "symbol": self.classes.has_symbol,
            },
            "warnings": [w.value for w in self.warnings],
        }
