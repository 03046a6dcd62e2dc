"""
Random Password Generator
==========================

Generates passwords of random length that always contain at least one
uppercase letter, lowercase letter, digit and symbol:

1. pick a length uniformly from [min_length, max_length];
2. take one random character from each class, in class order;
3. fill the remaining positions from the union of all classes;
4. shuffle everything (Fisher-Yates, via ``Random.shuffle``);
5. start over if the result equals the previous password.

The random source defaults to :class:`secrets.SystemRandom` (the OS
CSPRNG).  Any object with ``randint``, ``choice`` and ``shuffle``
(e.g. a seeded :class:`random.Random`) can be injected instead.

References:
    - Knuth, D. E. (1997). The Art of Computer Programming, Vol. 2,
      Algorithm 3.4.2P (random permutation).
    - Python ``secrets`` module. https://docs.python.org/3/library/secrets.html
"""

from __future__ import annotations

import random
import secrets
import string
from typing import Optional

from shared.config import DEFAULT_SYMBOLS
from shared.logger import LensLogger

UPPERCASE: str = string.ascii_uppercase
LOWERCASE: str = string.ascii_lowercase
DIGITS: str = string.digits
SYMBOLS: str = DEFAULT_SYMBOLS

MIN_LENGTH: int = 16
MAX_LENGTH: int = 24


class PasswordGenerator:
    """Generates class-complete random passwords that never repeat the
    previous one.

    A generator instance remembers its last output in :attr:`last`; when
    :meth:`generate` is called without *previous*, that value is used.

    Usage::

        gen = PasswordGenerator()
        first = gen.generate()
        second = gen.generate()          # guaranteed != first

    Args:
        rng:        Random source. Defaults to ``secrets.SystemRandom()``.
        min_length: Shortest password produced (at least 4).
        max_length: Longest password produced.
        symbols:    Symbol alphabet.

    Raises:
        ValueError: On an empty symbol set, a symbol set containing letters
            or digits, or an impossible length range.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        *,
        min_length: int = MIN_LENGTH,
        max_length: int = MAX_LENGTH,
        symbols: str = SYMBOLS,
        logger: Optional[LensLogger] = None,
    ) -> None:
        if not symbols:
            raise ValueError("Symbol set must not be empty")
        overlap = sorted(set(symbols) & set(UPPERCASE + LOWERCASE + DIGITS))
        if overlap:
            raise ValueError(
                f"Symbol set must not contain letters or digits, got {''.join(overlap)!r}"
            )
        if min_length < 4:
            raise ValueError(
                f"min_length must be at least 4 to fit every class, got {min_length}"
            )
        if min_length > max_length:
            raise ValueError(
                f"min_length ({min_length}) exceeds max_length ({max_length})"
            )

        self._rng = rng if rng is not None else secrets.SystemRandom()
        self.min_length = min_length
        self.max_length = max_length
        self._classes: tuple[str, ...] = (UPPERCASE, LOWERCASE, DIGITS, symbols)
        self._alphabet = "".join(self._classes)
        self._logger = logger or LensLogger("meter.generator", console_output=False)
        self.last: Optional[str] = None

    @property
    def symbols(self) -> str:
        return self._classes[-1]

    def generate(self, previous: Optional[str] = None) -> str:
        """Return a new password that differs from *previous*.

        Args:
            previous: The password to avoid.  Defaults to this generator's
                      last output.

        Returns:
            A password of length in [min_length, max_length] containing at
            least one character of every class.
        """
        avoid = previous if previous is not None else self.last

        password = self._build()
        attempts = 1
        while password == avoid:
            attempts += 1
            password = self._build()

        if attempts > 1:
            self._logger.info(
                "Regenerated after %d collision(s) with previous password",
                attempts - 1,
            )

        self.last = password
        return password

    def _build(self) -> str:
        """Build one candidate password (no collision check)."""
        length = self._rng.randint(self.min_length, self.max_length)

        chars = [self._rng.choice(cls) for cls in self._classes]
        chars.extend(
            self._rng.choice(self._alphabet) for _ in range(length - len(chars))
        )
        self._rng.shuffle(chars)

        return "".join(chars)


def generate_password(
    previous: Optional[str] = None,
    rng: Optional[random.Random] = None,
) -> str:
    """Generate one password with default settings, avoiding *previous*."""
    return PasswordGenerator(rng).generate(previous)
