"""Test results: the main record of a test in a report."""

from __future__ import annotations

import hashlib
import json
import os
import platform
import threading
import uuid as _uuid
from contextlib import suppress
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

from .attachment import Attachment
from .clock import get_now, new_uuid
from .files import LAUNCH_TAGS_ENV, FileManager
from .label import Label, LabelType, language_label, new_label, tag_label
from .link import Link
from .parameter import Parameter
from .status import Status, StatusDetail
from .step import Step


def md5_hash(text: str) -> str:
    """Return the hexadecimal MD5 digest of ``text``."""
    return hashlib.md5(text.encode("utf-8")).hexdigest()


def _language() -> str:
    return f"python{platform.python_version()}"


def _coerce_status(value: Any) -> Status | str:
    try:
        return Status(value)
    except ValueError:
        return value or ""


@dataclass
class Result:
    """Name, status, labels, links, steps and timing of one test."""

    name: str = ""
    full_name: str = ""
    stage: str = ""
    status: Status | str = ""
    status_details: StatusDetail = field(default_factory=StatusDetail)
    start: int = 0
    stop: int = 0
    uuid: _uuid.UUID = field(default_factory=new_uuid)
    history_id: str = ""
    test_case_id: str = ""
    description: str = ""
    attachments: list[Attachment] = field(default_factory=list)
    parameters: list[Parameter] = field(default_factory=list)
    labels: list[Label] = field(default_factory=list)
    links: list[Link] = field(default_factory=list)
    steps: list[Step] = field(default_factory=list)
    to_print: bool = False
    _lock: threading.RLock = field(
        default_factory=threading.RLock, init=False, repr=False, compare=False
    )

    @property
    def status_message(self) -> str:
        return self.status_details.message

    @status_message.setter
    def status_message(self, message: str) -> None:
        self.status_details.message = message

    @property
    def status_trace(self) -> str:
        return self.status_details.trace

    @status_trace.setter
    def status_trace(self, trace: str) -> None:
        self.status_details.trace = trace

    def add_label(self, *labels: Label) -> None:
        """Append the given labels."""
        with self._lock:
            self.labels.extend(labels)

    def first_label(self, label_type: LabelType | str) -> Label | None:
        """Return the first label of the given type, or None if there is none."""
        found = self.get_labels(label_type)
        return found[0] if found else None

    def get_labels(self, label_type: LabelType | str) -> list[Label]:
        """Return all labels of the given type, in the order they were added."""
        name = str(label_type)
        with self._lock:
            return [label for label in self.labels if label.name == name]

    def set_new_label_map(self, kv: Mapping[LabelType | str, str]) -> None:
        """Add one label per entry of the mapping."""
        self.add_label(*(new_label(key, value) for key, value in kv.items()))

    def with_stage(self, stage: str) -> "Result":
        self.stage = stage
        return self

    def with_parent_suite(self, parent_name: str) -> "Result":
        """Set the parent suite label; an empty name changes nothing."""
        if parent_name:
            self.replace_new_label(LabelType.PARENT_SUITE, parent_name)
        return self

    def with_suite(self, suite_name: str) -> "Result":
        self.replace_new_label(LabelType.SUITE, suite_name)
        return self

    def with_host(self, host_name: str) -> "Result":
        self.replace_new_label(LabelType.HOST, host_name)
        return self

    def with_sub_suites(self, *children: str) -> "Result":
        """Add one sub-suite label per name."""
        self.add_label(*(new_label(LabelType.SUB_SUITE, child) for child in children))
        return self

    def with_framework(self, framework: str) -> "Result":
        self.replace_new_label(LabelType.FRAMEWORK, framework)
        return self

    def with_language(self, language: str) -> "Result":
        self.replace_new_label(LabelType.LANGUAGE, language)
        return self

    def with_thread(self, thread: str) -> "Result":
        self.replace_new_label(LabelType.THREAD, thread)
        return self

    def with_package(self, package: str) -> "Result":
        self.replace_new_label(LabelType.PACKAGE, package)
        return self

    def with_labels(self, *labels: Label) -> "Result":
        self.add_label(*labels)
        return self

    def with_launch_tags(self) -> "Result":
        """Add a tag label for each comma-separated tag in the launch tags variable."""
        tags = os.environ.get(LAUNCH_TAGS_ENV, "")
        if tags:
            with self._lock:
                self.labels.extend(tag_label(tag.strip(" ")) for tag in tags.split(","))
        return self

    def begin(self) -> "Result":
        """Set the start time to now."""
        self.start = get_now()
        return self

    def finish(self) -> "Result":
        """Set the stop time to now."""
        self.stop = get_now()
        return self

    def skip_on_print(self) -> None:
        """Keep the result from being written."""
        self.to_print = False

    def write(self) -> Path | None:
        """Write attachments and the result file, unless printing is switched off."""
        if not self.to_print:
            return None
        self.write_attachments()
        return FileManager().create_file(f"{self.uuid}-result.json", self.to_json())

    def write_attachments(self) -> None:
        """Write the attachments of all steps and of the result itself."""
        with self._lock:
            for step in self.steps:
                step.write_attachments()
            for attachment in self.attachments:
                with suppress(OSError):
                    attachment.write()

    def done(self) -> Path | None:
        """Mark the result passed if no status is set, finish it and write it."""
        if not self.status:
            self.status = Status.PASSED
        self.finish()
        return self.write()

    def replace_new_label(self, name: LabelType | str, value: str) -> None:
        """Set the value of the label with this name, adding it if missing."""
        self.replace_label(new_label(name, value))

    def replace_label(self, label: Label) -> None:
        """Replace the value of the first label with the same name, or append the label."""
        with self._lock:
            for existing in self.labels:
                if existing.name == label.name:
                    existing.value = label.value
                    return
            self.labels.append(label)

    def to_dict(self) -> dict[str, Any]:
        """Return the report representation, leaving out empty fields."""
        data: dict[str, Any] = {}
        if self.name:
            data["name"] = self.name
        if self.full_name:
            data["fullName"] = self.full_name
        if self.stage:
            data["stage"] = self.stage
        if self.status:
            data["status"] = str(self.status)
        data["statusDetails"] = self.status_details.to_dict()
        if self.start:
            data["start"] = self.start
        if self.stop:
            data["stop"] = self.stop
        data["uuid"] = str(self.uuid)
        if self.history_id:
            data["historyId"] = self.history_id
        if self.test_case_id:
            data["testCaseId"] = self.test_case_id
        if self.description:
            data["description"] = self.description
        with self._lock:
            if self.attachments:
                data["attachments"] = [a.to_dict() for a in self.attachments]
            if self.parameters:
                data["parameters"] = [p.to_dict() for p in self.parameters]
            if self.labels:
                data["labels"] = [label.to_dict() for label in self.labels]
            if self.links:
                data["links"] = [link.to_dict() for link in self.links]
            if self.steps:
                data["steps"] = [s.to_dict() for s in self.steps]
        return data

    def to_json(self) -> bytes:
        """Return the report representation as JSON bytes."""
        return json.dumps(self.to_dict(), ensure_ascii=False).encode("utf-8")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Result":
        """Build a result from its report representation."""
        raw_uuid = data.get("uuid")
        return cls(
            name=data.get("name", "") or "",
            full_name=data.get("fullName", "") or "",
            stage=data.get("stage", "") or "",
            status=_coerce_status(data.get("status", "")),
            status_details=StatusDetail.from_dict(data.get("statusDetails")),
            start=data.get("start", 0) or 0,
            stop=data.get("stop", 0) or 0,
            uuid=_uuid.UUID(raw_uuid) if raw_uuid else _uuid.UUID(int=0),
            history_id=data.get("historyId", "") or "",
            test_case_id=data.get("testCaseId", "") or "",
            description=data.get("description", "") or "",
            attachments=[Attachment.from_dict(a) for a in data.get("attachments") or []],
            parameters=[Parameter.from_dict(p) for p in data.get("parameters") or []],
            labels=[Label.from_dict(label) for label in data.get("labels") or []],
            links=[Link.from_dict(link) for link in data.get("links") or []],
            steps=[Step.from_dict(s) for s in data.get("steps") or []],
        )


def new_result(test_name: str, full_name: str) -> Result:
    """Build a result with fresh identifiers, a language label and a start time of now."""
    test_case_id = md5_hash(full_name)
    result = Result(
        name=test_name,
        full_name=full_name,
        test_case_id=test_case_id,
        history_id=md5_hash(test_case_id),
        to_print=True,
    )
    result.add_label(language_label(_language()))
    result.begin()
    return result