"""
Meter Core Module
==================

Data models for the Meter tool.  The engine facade lives in
:mod:`meter.core.engine` and is imported from there directly, which keeps
the analyzers free to import these models without a cycle.
"""

from meter.core.models import (
    Advisory,
    CharacterClassFlags,
    Metrics,
    PasswordEvaluation,
    StrengthLevel,
    StrengthResult,
)

__all__ = [
    "Advisory",
    "CharacterClassFlags",
    "Metrics",
    "PasswordEvaluation",
    "StrengthLevel",
    "StrengthResult",
]
