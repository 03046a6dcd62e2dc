"""
Meter Output Module
====================

Console display and JSON report generation for Meter results.
"""

from meter.output.console import MeterConsoleOutput
from meter.output.report import MeterReportGenerator

__all__ = [
    "MeterConsoleOutput",
    "MeterReportGenerator",
]
