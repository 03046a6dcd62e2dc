"""
Meter Analyzers
================

The strength evaluator and the entropy and pattern checks it is built on.
"""

from meter.analyzers.strength import StrengthEvaluator, evaluate

__all__ = [
    "StrengthEvaluator",
    "evaluate",
]
