"""
Password Pattern Detection
===========================

Character-class detection and the three weakening-pattern checks used by
the strength evaluator:

- common substrings (a fixed denylist, case-insensitive containment);
- runs of three or more identical consecutive characters;
- three-character windows of natural orderings (alphabet, digits and
  keyboard rows).

Classes are ASCII only: anything outside ``[a-zA-Z0-9]`` counts as a
symbol, including whitespace and non-ASCII letters.
"""

from __future__ import annotations

import string

from meter.core.models import CharacterClassFlags

# Fixed denylist of common substrings, matched against the lower-cased password
COMMON_PATTERNS: tuple[str, ...] = (
    "123", "abc", "qwerty", "password", "admin", "user",
    "login", "welcome", "letmein", "master", "super",
    "iloveyou", "123456", "123456789", "qwertyuiop",
    "asdfghjkl", "zxcvbnm", "111111", "000000",
)

# Reference orderings for the sequential-window check
SEQUENCES: tuple[str, ...] = (
    string.ascii_lowercase,
    string.ascii_uppercase,
    string.digits,
    "qwertyuiop",
    "asdfghjkl",
    "zxcvbnm",
)

MAX_REPEATS: int = 3
WINDOW_SIZE: int = 3

_ALPHANUMERIC = frozenset(string.ascii_letters + string.digits)


def character_classes(password: str) -> CharacterClassFlags:
    """Return which of the four ASCII character classes occur in *password*."""
    return CharacterClassFlags(
        has_lower=any(c in string.ascii_lowercase for c in password),
        has_upper=any(c in string.ascii_uppercase for c in password),
        has_digit=any(c in string.digits for c in password),
        has_symbol=any(c not in _ALPHANUMERIC for c in password),
    )


def has_common_pattern(password: str) -> bool:
    """True if the password contains any denylisted substring, ignoring case."""
    lowered = password.lower()
    return any(pattern in lowered for pattern in COMMON_PATTERNS)


def has_repeating_chars(password: str, max_repeats: int = MAX_REPEATS) -> bool:
    """True if some character repeats *max_repeats* or more times in a row.

    The scan stops at the first run that reaches the limit.
    """
    run = 1
    for prev, cur in zip(password, password[1:]):
        if cur == prev:
            run += 1
            if run >= max_repeats:
                return True
        else:
            run = 1
    return False


def sequence_windows(size: int = WINDOW_SIZE) -> list[str]:
    """All sliding windows of *size* characters over the reference orderings."""
    return [
        seq[i:i + size]
        for seq in SEQUENCES
        for i in range(len(seq) - size + 1)
    ]


_WINDOWS: tuple[str, ...] = tuple(sequence_windows())


def has_sequential_chars(password: str) -> bool:
    """True if the lower-cased password contains a three-character window
    of the alphabet, the digits or a keyboard row.

    The upper-case alphabet windows are kept alongside the lower-case ones;
    since the password is lower-cased before matching they never add a hit.
    """
    lowered = password.lower()
    return any(window in lowered for window in _WINDOWS)
