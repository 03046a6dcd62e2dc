"""
Meter Report Generator
=======================

Builds machine-readable JSON reports from Meter results, either written
to a file or echoed to stdout by the CLI.  Reports never contain the
analysed password; generated passwords are included only when the
caller passes them explicitly.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional, Sequence

from shared.models import ScanResult

from meter import __version__


class MeterReportGenerator:
    """Generates JSON reports from one or more ScanResults.

    Usage::

        generator = MeterReportGenerator()
        generator.generate_json([scan_result], Path("report.json"))
    """

    def build(
        self,
        results: Sequence[ScanResult],
        generated: Optional[Sequence[str]] = None,
    ) -> dict[str, Any]:
        """Assemble the report structure.

        Args:
            results:   Analysis results, in order.  An empty sequence marks
                       input that was not analysed (``"analyzed": false``).
            generated: Generated passwords matching *results* one-to-one.

        Returns:
            A JSON-serialisable dictionary.
        """
        report: dict[str, Any] = {
            "report_metadata": {
                "generated_at": datetime.now(timezone.utc).isoformat(),
                "tool": "meter",
                "version": __version__,
            },
            "analyzed": bool(results),
            "results": [self._result_entry(r) for r in results],
        }
        if generated is not None:
            for entry, password in zip(report["results"], generated):
                entry["password"] = password
        return report

    def render(
        self,
        results: Sequence[ScanResult],
        generated: Optional[Sequence[str]] = None,
    ) -> str:
        """Render the report as an indented JSON string."""
        return json.dumps(
            self.build(results, generated),
            indent=2,
            ensure_ascii=False,
            default=str,
        )

    def generate_json(
        self,
        results: Sequence[ScanResult],
        output_path: Path,
        generated: Optional[Sequence[str]] = None,
    ) -> Path:
        """Write the JSON report to *output_path* and return the path."""
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.render(results, generated), encoding="utf-8")
        return output_path

    @staticmethod
    def _result_entry(result: ScanResult) -> dict[str, Any]:
        return {
            "target": result.target,
            "summary": result.summary,
            "duration_seconds": result.duration_seconds,
            "evaluation": result.metadata,
            "findings": [
                {
                    "title": f.title,
                    "description": f.description,
                    "severity": f.severity.value,
                    "evidence": f.evidence,
                    "recommendation": f.recommendation,
                    "references": f.references,
                }
                for f in result.findings
            ],
        }
