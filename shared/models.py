"""
PassLens Result Models
=======================

Tool-agnostic result envelope.  An analysis run produces one
:class:`ScanResult` made of :class:`Finding` objects plus free-form
``metadata``; the console renderer and the JSON report only ever see
this envelope, never tool-specific types.

Findings loosely follow SARIF result objects and the CVSS v3.1
qualitative severity scale.

References:
    - OASIS SARIF v2.1.0 (2020), section 3.27 "result object".
    - FIRST (2019). CVSS v3.1 Specification, section 5.
    - Pydantic v2. https://docs.pydantic.dev/latest/
"""

from __future__ import annotations

import json
from collections import Counter
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Severity(str, Enum):
    """Qualitative severity, declared most severe first."""

    CRITICAL = "CRITICAL"
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"
    INFO = "INFO"

    @property
    def rank(self) -> int:
        """0 for CRITICAL up to 4 for INFO."""
        return list(Severity).index(self)

    @property
    def label(self) -> str:
        return "Informational" if self is Severity.INFO else self.value.title()


class Finding(BaseModel):
    """One observation about the analysed target.

    ``evidence`` never holds a secret; structured evidence is stored as
    a JSON string so every finding serialises the same way.
    """

    model_config = ConfigDict(
        str_strip_whitespace=True,
        validate_assignment=True,
        extra="ignore",
    )

    severity: Severity
    title: str = Field(..., min_length=1, max_length=256)
    description: str = Field(..., min_length=1)
    evidence: str = ""
    recommendation: str = ""
    references: list[str] = Field(default_factory=list)

    @field_validator("evidence", mode="before")
    @classmethod
    def _evidence_as_text(cls, value: Any) -> str:
        if isinstance(value, (dict, list)):
            return json.dumps(value, ensure_ascii=False, default=str)
        return value if isinstance(value, str) else str(value)


class ScanResult(BaseModel):
    """Findings, summary and raw data of one analysis run.

    ``target`` names what was analysed; for secrets it is a placeholder
    such as ``"[password]"``, never the secret itself.
    """

    model_config = ConfigDict(validate_assignment=True, extra="ignore")

    tool_name: str = Field(..., min_length=1)
    target: str = Field(..., min_length=1)
    start_time: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    end_time: Optional[datetime] = None
    findings: list[Finding] = Field(default_factory=list)
    summary: str = ""
    metadata: dict[str, Any] = Field(default_factory=dict)

    @property
    def duration_seconds(self) -> Optional[float]:
        """Seconds between start and end, ``None`` while still running."""
        if self.end_time is None:
            return None
        return (self.end_time - self.start_time).total_seconds()

    @property
    def severity_counts(self) -> dict[str, int]:
        """Findings per severity, every severity present (possibly 0)."""
        tally = Counter(f.severity for f in self.findings)
        return {sev.value: tally[sev] for sev in Severity}

    @property
    def highest_severity(self) -> Optional[Severity]:
        if not self.findings:
            return None
        return min((f.severity for f in self.findings), key=lambda s: s.rank)

    @property
    def finding_count(self) -> int:
        return len(self.findings)

    def add_finding(self, finding: Finding) -> None:
        self.findings.append(finding)

    def finalize(self, summary: Optional[str] = None) -> ScanResult:
        """Stamp ``end_time`` and set the summary; returns ``self``.

        Without an explicit *summary* one is derived from the severity
        counts, e.g. ``"Analysis complete. Findings: 2 (HIGH: 1, LOW: 1)"``.
        """
        self.end_time = datetime.now(timezone.utc)
        if summary is None:
            counted = [f"{sev}: {n}" for sev, n in self.severity_counts.items() if n]
            summary = (
                f"Analysis complete. Findings: {self.finding_count} "
                f"({', '.join(counted) or 'none'})"
            )
        self.summary = summary
        return self
