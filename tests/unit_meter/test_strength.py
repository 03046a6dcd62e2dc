"""Tests for the strength evaluator: score, level, metrics and advisories."""

from __future__ import annotations

import random
import string

import pytest

from meter.analyzers.strength import StrengthEvaluator, evaluate
from meter.core.models import Advisory, StrengthLevel


class TestEmptyPassword:
    def test_zero_everything(self) -> None:
        result = evaluate("")
        assert result.score == 0
        assert result.level is StrengthLevel.VERY_WEAK
        assert result.metrics.length == 0
        assert result.metrics.entropy_bits == 0
        assert result.metrics.crack_time_label == "Instant"

    def test_only_length_advisory(self) -> None:
        result = evaluate("")
        assert result.warnings == (Advisory.TOO_SHORT,)
        assert not result.classes.has_lower


class TestScore:
    def test_abc123(self) -> None:
        result = evaluate("abc123")
        # 20 (lower + digit) - 30 (denylist) - 20 (sequential), clamped
        assert result.score == 0
        assert result.warnings == (
            Advisory.TOO_SHORT,
            Advisory.NO_UPPERCASE,
            Advisory.NO_SYMBOL,
            Advisory.COMMON_PATTERN,
            Advisory.SEQUENTIAL_CHARS,
        )

    def test_repeating_run_penalised(self) -> None:
        result = evaluate("aaaAAA111!!!")
        # 40 (length 8, 12) + 40 (classes) - 20 (repeats)
        assert result.score == 60
        assert result.level is StrengthLevel.STRONG
        assert result.warnings == (Advisory.REPEATING_CHARS,)

    def test_strong_password(self, strong_password: str) -> None:
        result = evaluate(strong_password)
        assert result.score == 100
        assert result.level is StrengthLevel.UNBREAKABLE
        assert result.strength.color_hint == 4
        assert result.warnings == ()

    def test_score_clamped_to_hundred(self, strong_password: str) -> None:
        assert evaluate(strong_password + "zT8%Wn").score == 100

    def test_class_bonus(self) -> None:
        # length < 8 so only class bonuses count
        assert evaluate("x").score == 10
        assert evaluate("xQ").score == 20
        assert evaluate("xQ7").score == 30
        assert evaluate("xQ7^").score == 40

    def test_length_thresholds(self) -> None:
        # lowercase only, no patterns: "mpmpmp..." has no window or run
        assert evaluate("mp" * 3 + "m").score == 10          # 7 chars
        assert evaluate("mp" * 4).score == 30                 # 8 chars
        assert evaluate("mp" * 6).score == 50                 # 12 chars
        assert evaluate("mp" * 8).score == 70                 # 16 chars
        assert evaluate("mp" * 10).score == 90                # 20 chars

    def test_monotonic_length_bonus(self, strong_password: str) -> None:
        prefixes = [strong_password[:8], strong_password[:12], strong_password]
        extended = prefixes + [strong_password + "zT8%"]
        scores = [evaluate(p).score for p in extended]
        assert scores == sorted(scores)
        assert scores == [60, 80, 100, 100]

    def test_penalties_stack(self) -> None:
        # 12 chars: 40 length + 20 classes - 30 - 20 - 20
        result = evaluate("qwerty111zzz")
        assert result.score == 0
        assert Advisory.COMMON_PATTERN in result.warnings
        assert Advisory.REPEATING_CHARS in result.warnings
        assert Advisory.SEQUENTIAL_CHARS in result.warnings


class TestLevels:
    @pytest.mark.parametrize(
        "score, level",
        [
            (0, StrengthLevel.VERY_WEAK),
            (19, StrengthLevel.VERY_WEAK),
            (20, StrengthLevel.WEAK),
            (39, StrengthLevel.WEAK),
            (40, StrengthLevel.MEDIUM),
            (59, StrengthLevel.MEDIUM),
            (60, StrengthLevel.STRONG),
            (79, StrengthLevel.STRONG),
            (80, StrengthLevel.UNBREAKABLE),
            (100, StrengthLevel.UNBREAKABLE),
        ],
    )
    def test_from_score(self, score: int, level: StrengthLevel) -> None:
        assert StrengthLevel.from_score(score) is level

    def test_labels_and_tiers(self) -> None:
        assert [lvl.label for lvl in StrengthLevel] == [
            "Very Weak", "Weak", "Medium", "Strong", "Unbreakable",
        ]
        assert [lvl.tier for lvl in StrengthLevel] == [0, 1, 2, 3, 4]


class TestMetrics:
    def test_entropy_example(self) -> None:
        result = evaluate("abcdefgh")
        assert result.metrics.entropy_bits == 37
        assert result.metrics.crack_time_label == "Instant"

    def test_strong_password_metrics(self, strong_password: str) -> None:
        metrics = evaluate(strong_password).metrics
        assert metrics.length == 16
        assert metrics.entropy_bits == 104
        assert metrics.crack_time_label == "Centuries"

    def test_very_long_password(self) -> None:
        result = evaluate("Xk9#mP2$vL7@qR4!" * 100)
        assert 0 <= result.score <= 100
        assert result.metrics.crack_time_label == "Centuries"

    def test_custom_attacker_model(self) -> None:
        slow = StrengthEvaluator(guesses_per_second=1e3)
        assert slow.evaluate("abcdefgh").metrics.crack_time_label != "Instant"


class TestWarnings:
    def test_priority_order(self) -> None:
        result = evaluate("aaa")
        assert result.warnings == (
            Advisory.TOO_SHORT,
            Advisory.NO_UPPERCASE,
            Advisory.NO_DIGIT,
            Advisory.NO_SYMBOL,
            Advisory.REPEATING_CHARS,
        )

    def test_symbols_only(self) -> None:
        result = evaluate("#%&")
        assert Advisory.NO_UPPERCASE in result.warnings
        assert Advisory.NO_LOWERCASE in result.warnings
        assert Advisory.NO_DIGIT in result.warnings
        assert Advisory.NO_SYMBOL not in result.warnings

    def test_repeating_advisory_needs_three(self) -> None:
        assert Advisory.REPEATING_CHARS in evaluate("aaa").warnings
        assert Advisory.REPEATING_CHARS not in evaluate("aa").warnings

    def test_messages(self) -> None:
        assert Advisory.REPEATING_CHARS.message == "Avoid repeating characters"
        assert Advisory.TOO_SHORT.message == (
            "Password should be at least 12 characters long"
        )


class TestPurity:
    def test_deterministic(self) -> None:
        rng = random.Random(42)
        alphabet = string.printable + "éß€"
        for _ in range(200):
            password = "".join(
                rng.choice(alphabet) for _ in range(rng.randint(0, 40))
            )
            first = evaluate(password)
            assert first == evaluate(password)
            assert 0 <= first.score <= 100
            assert len(first.warnings) <= 8

    def test_as_dict_shape(self) -> None:
        data = evaluate("abc123").as_dict()
        assert data == {
            "score": 0,
            "level": "very_weak",
            "color_hint": 0,
            "entropy_bits": 31,
            "crack_time_label": "Instant",
            "length": 6,
            "class_flags": {
                "lower": True,
                "upper": False,
                "digit": True,
                "symbol": False,
            },
            "warnings": [
                "too_short",
                "no_uppercase",
                "no_symbol",
                "common_pattern",
                "sequential_chars",
            ],
        }
