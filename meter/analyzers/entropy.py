"""
Entropy and Crack-Time Estimation
==================================

Combinatorial entropy of a password and a bucketed, human-readable
estimate of how long an average-case brute-force search would take.

Entropy uses the size of the character pool implied by the classes
present, not the characters actually used:

    H = floor(L * log2(N)),  N = 26 (a-z) + 26 (A-Z) + 10 (0-9) + 32 (symbols)

The symbol pool of 32 is a fixed approximation of printable ASCII
punctuation.  It intentionally differs from the 26-symbol alphabet the
generator draws from.

Crack time assumes an attacker testing 10^12 guesses per second who
finds the password after searching half the keyspace:

    T = 2^H / (2 * rate)

References:
    - NIST SP 800-63B (2017), Appendix A -- Strength of Memorized Secrets.
    - Bonneau, J. (2012). The Science of Guessing. IEEE S&P.
"""

from __future__ import annotations

import math

from meter.core.models import CharacterClassFlags

LOWER_POOL: int = 26
UPPER_POOL: int = 26
DIGIT_POOL: int = 10
SYMBOL_POOL: int = 32

GUESSES_PER_SECOND: float = 1e12

INSTANT = "Instant"
UNDER_A_MINUTE = "< 1 minute"
CENTURIES = "Centuries"

MINUTE = 60
HOUR = 3_600
DAY = 86_400
MONTH = 2_592_000          # 30 days
YEAR = 31_536_000          # 365 days
CENTURY = 3_153_600_000    # 100 years

# (exclusive upper bound in seconds, unit in seconds, unit name)
_BUCKETS: tuple[tuple[int, int, str], ...] = (
    (HOUR, MINUTE, "minutes"),
    (DAY, HOUR, "hours"),
    (MONTH, DAY, "days"),
    (YEAR, MONTH, "months"),
    (CENTURY, YEAR, "years"),
)


def charset_size(
    classes: CharacterClassFlags,
    symbol_pool_size: int = SYMBOL_POOL,
) -> int:
    """Size of the character pool implied by the classes present (0 if none)."""
    size = 0
    if classes.has_lower:
        size += LOWER_POOL
    if classes.has_upper:
        size += UPPER_POOL
    if classes.has_digit:
        size += DIGIT_POOL
    if classes.has_symbol:
        size += symbol_pool_size
    return size


def entropy_bits(length: int, pool_size: int) -> int:
    """Combinatorial entropy ``floor(length * log2(pool_size))`` in whole bits."""
    if length <= 0 or pool_size <= 0:
        return 0
    return math.floor(length * math.log2(pool_size))


def crack_time_label(seconds: float) -> str:
    """Bucket a duration in seconds into a coarse human-readable label.

    Thresholds are checked lowest first with strict less-than, so a value
    sitting exactly on an edge falls into the larger bucket (60 seconds is
    ``"1 minutes"``, 59 seconds is ``"< 1 minute"``).
    """
    if seconds < 1:
        return INSTANT
    if seconds < MINUTE:
        return UNDER_A_MINUTE
    for upper, unit, name in _BUCKETS:
        if seconds < upper:
            return f"{math.floor(seconds / unit)} {name}"
    return CENTURIES


def crack_seconds(
    bits: int,
    guesses_per_second: float = GUESSES_PER_SECOND,
) -> float:
    """Average-case brute-force time for a keyspace of ``2**bits``.

    Raises:
        OverflowError: If the keyspace does not fit in a float.
    """
    return 2 ** bits / (2 * guesses_per_second)


def estimate_crack_time(
    bits: int,
    guesses_per_second: float = GUESSES_PER_SECOND,
) -> str:
    """Crack-time label for a password with *bits* of entropy."""
    if bits <= 0:
        return INSTANT
    try:
        seconds = crack_seconds(bits, guesses_per_second)
    except OverflowError:
        # 2**1024 and up; far past the last bucket
        return CENTURIES
    return crack_time_label(seconds)
