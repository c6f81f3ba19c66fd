"""Containers that hold the setup and teardown steps of tests."""

from __future__ import annotations

import json
import uuid as _uuid
from contextlib import suppress
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

from .clock import get_now, new_uuid
from .files import FileManager
from .step import Step


@dataclass
class Container:
    """Setup (``befores``) and teardown (``afters``) steps shared by the child tests."""

    uuid: _uuid.UUID = field(default_factory=new_uuid)
    children: list[_uuid.UUID] = field(default_factory=list)
    befores: list[Step] = field(default_factory=list)
    afters: list[Step] = field(default_factory=list)
    start: int = 0
    stop: int = 0

    def add_child(self, child_uuid: _uuid.UUID) -> None:
        """Record a test that depends on this container."""
        self.children.append(child_uuid)

    def is_empty(self) -> bool:
        """Return True when there are neither setup nor teardown steps."""
        return not self.befores and not self.afters

    def write(self) -> Path | None:
        """Write attachments and the container file unless the container is empty."""
        if self.is_empty():
            return None
        self.write_attachments()
        return FileManager().create_file(f"{self.uuid}-container.json", self.to_json())

    def write_attachments(self) -> None:
        """Write the attachments of all setup and teardown steps."""
        for step in (*self.befores, *self.afters):
            with suppress(OSError):
                step.write_attachments()

    def begin(self) -> None:
        """Set the start time to now."""
        self.start = get_now()

    def finish(self) -> None:
        """Set the stop time to now."""
        self.stop = get_now()

    def done(self) -> Path | None:
        """Finish the container and write it."""
        self.finish()
        return self.write()

    def to_dict(self) -> dict[str, Any]:
        """Return the report representation, leaving out empty fields."""
        data: dict[str, Any] = {"uuid": str(self.uuid)}
        if self.children:
            data["children"] = [str(child) for child in self.children]
        if self.befores:
            data["befores"] = [step.to_dict() for step in self.befores]
        if self.afters:
            data["afters"] = [step.to_dict() for step in self.afters]
        if self.start:
            data["start"] = self.start
        if self.stop:
            data["stop"] = self.stop
        return data

    def to_json(self) -> bytes:
        """Return the report representation as JSON bytes."""
        return json.dumps(self.to_dict(), ensure_ascii=False).encode("utf-8")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Container":
        """Build a container from its report representation."""
        raw_uuid = data.get("uuid")
        return cls(
            uuid=_uuid.UUID(raw_uuid) if raw_uuid else _uuid.UUID(int=0),
            children=[_uuid.UUID(child) for child in data.get("children") or []],
            befores=[Step.from_dict(step) for step in data.get("befores") or []],
            afters=[Step.from_dict(step) for step in data.get("afters") or []],
            start=data.get("start", 0) or 0,
            stop=data.get("stop", 0) or 0,
        )