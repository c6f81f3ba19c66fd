"""Execution statuses and status details of tests and steps."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping


class Status(str, Enum):
    """Outcome of a test or step."""

    PASSED = "passed"
    FAILED = "failed"
    SKIPPED = "skipped"
    BROKEN = "broken"
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value


@dataclass
class StatusDetail:
    """Short message and full trace explaining a status."""

    message: str = ""
    trace: str = ""

    def to_dict(self) -> dict[str, str]:
        """Return the report representation; both keys are always present."""
        return {"message": self.message, "trace": self.trace}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "StatusDetail":
        """Build a detail from its report representation."""
        data = data or {}
        return cls(message=data.get("message", "") or "", trace=data.get("trace", "") or "")