"""Steps: the nested units of work recorded inside a test."""

from __future__ import annotations

from contextlib import suppress
from dataclasses import dataclass, field
from typing import Any, Mapping

from .attachment import Attachment
from .clock import get_now
from .parameter import Parameter, new_parameters
from .status import Status, StatusDetail


def _coerce_status(value: Any) -> Status | str:
    try:
        return Status(value)
    except ValueError:
        return value or ""


@dataclass
class Step:
    """A named, timed action with its own status, attachments, parameters and sub-steps."""

    name: str = ""
    status: Status | str = ""
    start: int = 0
    stop: int = 0
    parameters: list[Parameter] = field(default_factory=list)
    status_details: StatusDetail = field(default_factory=StatusDetail)
    attachments: list[Attachment] = field(default_factory=list)
    steps: list["Step"] = field(default_factory=list)
    parent: "Step | None" = field(default=None, repr=False, compare=False)

    def with_attachments(self, *attachments: Attachment) -> "Step":
        """Add attachments to the step."""
        self.attachments.extend(attachments)
        return self

    def with_parameters(self, *params: Parameter) -> "Step":
        """Add parameters to the step."""
        self.parameters.extend(params)
        return self

    def with_new_parameters(self, *kv: Any) -> "Step":
        """Add parameters built from alternating names and values; a trailing name is dropped."""
        self.parameters.extend(new_parameters(*kv))
        return self

    def with_status_details(self, message: str, trace: str) -> "Step":
        """Set the status message and trace."""
        self.status_details = StatusDetail(message=message, trace=trace)
        return self

    def passed(self) -> "Step":
        self.status = Status.PASSED
        return self

    def failed(self) -> "Step":
        self.status = Status.FAILED
        return self

    def skipped(self) -> "Step":
        self.status = Status.SKIPPED
        return self

    def broken(self) -> "Step":
        self.status = Status.BROKEN
        return self

    def begin(self) -> "Step":
        """Set the start time to now."""
        self.start = get_now()
        return self

    def finish(self) -> "Step":
        """Set the stop time to now."""
        self.stop = get_now()
        return self

    def with_parent(self, parent: "Step") -> "Step":
        """Make this step a sub-step of ``parent``."""
        parent.steps.append(self)
        self.parent = parent
        return self

    def with_child(self, child: "Step") -> "Step":
        """Make ``child`` a sub-step of this step."""
        child.with_parent(self)
        return self

    def write_attachments(self) -> None:
        """Write the attachments of this step and of all its sub-steps."""
        for attachment in self.attachments:
            with suppress(OSError):
                attachment.write()
        for step in self.steps:
            step.write_attachments()

    def to_dict(self) -> dict[str, Any]:
        """Return the report representation, leaving out empty fields."""
        data: dict[str, Any] = {}
        if self.name:
            data["name"] = self.name
        if self.status:
            data["status"] = str(self.status)
        data["statusDetails"] = self.status_details.to_dict()
        if self.attachments:
            data["attachments"] = [a.to_dict() for a in self.attachments]
        if self.start:
            data["start"] = self.start
        if self.stop:
            data["stop"] = self.stop
        if self.steps:
            data["steps"] = [s.to_dict() for s in self.steps]
        if self.parameters:
            data["parameters"] = [p.to_dict() for p in self.parameters]
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Step":
        """Build a step tree from its report representation."""
        step = cls(
            name=data.get("name", "") or "",
            status=_coerce_status(data.get("status", "")),
            start=data.get("start", 0) or 0,
            stop=data.get("stop", 0) or 0,
            parameters=[Parameter.from_dict(p) for p in data.get("parameters") or []],
            status_details=StatusDetail.from_dict(data.get("statusDetails")),
            attachments=[Attachment.from_dict(a) for a in data.get("attachments") or []],
        )
        for child in data.get("steps") or []:
            cls.from_dict(child).with_parent(step)
        return step


def new_simple_step(name: str, *parameters: Parameter) -> Step:
    """Build a passed step that starts and stops now."""
    return Step(
        name=name,
        status=Status.PASSED,
        start=get_now(),
        stop=get_now(),
        parameters=list(parameters),
    )