"""Shared pytest fixtures for the PassLens test suite."""

from __future__ import annotations

import random

import pytest

from shared.config import LensConfig
from shared.console import LensConsole

from meter.analyzers.strength import StrengthEvaluator
from meter.core.engine import MeterEngine

# A 16-character password with every class and no weakening pattern
STRONG_PASSWORD = "Xk9#mP2$vL7@qR4!"


@pytest.fixture
def evaluator() -> StrengthEvaluator:
    return StrengthEvaluator()


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(1337)


@pytest.fixture
def quiet_console() -> LensConsole:
    return LensConsole(quiet=True)


@pytest.fixture
def engine(seeded_rng: random.Random) -> MeterEngine:
    return MeterEngine(LensConfig(), rng=seeded_rng)


@pytest.fixture
def strong_password() -> str:
    return STRONG_PASSWORD
