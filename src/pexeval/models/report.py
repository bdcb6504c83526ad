"""Report models for a complete evaluation run.

An EvaluationReport bundles the ordered result records of every
handler with the per-descriptor outcome summary. Designed for JSON
serialization and lossless round-trip deserialization.
"""

from __future__ import annotations

from datetime import datetime, timezone
from uuid import uuid4

from pydantic import BaseModel, Field

from pexeval.models.result import HandlerCheckResult


class DescriptorOutcome(BaseModel):
    """Which credentials satisfied every check for one input descriptor."""

    input_descriptor_path: str
    descriptor_id: str
    satisfied_by: list[str] = Field(default_factory=list)
    failed: list[str] = Field(default_factory=list)

    @property
    def satisfied(self) -> bool:
        return len(self.satisfied_by) > 0


class EvaluationReport(BaseModel):
    """Complete result of evaluating one credential set against one definition."""

    run_id: str
    timestamp: datetime
    definition_id: str
    definition_file: str | None = None
    credentials_file: str | None = None
    credential_count: int
    pexeval_version: str
    results: list[HandlerCheckResult] = Field(default_factory=list)
    outcomes: list[DescriptorOutcome] = Field(default_factory=list)
    passed: bool

    @property
    def error_count(self) -> int:
        return sum(1 for r in self.results if not r.valid)


def new_run_id(now: datetime | None = None) -> str:
    """Generate a run ID that sorts chronologically as a string."""
    now = now or datetime.now(timezone.utc)
    return f"{now.strftime('%Y%m%dT%H%M%S%f')}-{uuid4().hex[:8]}"
