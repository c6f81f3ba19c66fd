"""Labels used to group and measure tests."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping


class LabelType(str, Enum):
    """Kind of a label."""

    EPIC = "epic"
    LAYER = "layer"
    FEATURE = "feature"
    STORY = "story"
    ID = "as_id"
    SEVERITY = "severity"
    PARENT_SUITE = "parentSuite"
    SUITE = "suite"
    SUB_SUITE = "subSuite"
    PACKAGE = "package"
    THREAD = "thread"
    HOST = "host"
    TAG = "tag"
    FRAMEWORK = "framework"
    LANGUAGE = "language"
    OWNER = "owner"
    LEAD = "lead"
    ALLURE_ID = "ALLURE_ID"

    def __str__(self) -> str:
        return self.value


class SeverityType(str, Enum):
    """Severity of a test."""

    BLOCKER = "blocker"
    CRITICAL = "critical"
    NORMAL = "normal"
    MINOR = "minor"
    TRIVIAL = "trivial"

    def __str__(self) -> str:
        return self.value


@dataclass
class Label:
    """A name and value attached to a test result."""

    name: str
    value: Any

    def as_text(self) -> str:
        """Return the value as text without surrounding double quotes."""
        value = self.value
        if isinstance(value, (bytes, bytearray)):
            text = bytes(value).decode("utf-8", errors="replace")
        elif isinstance(value, str):
            text = str.__str__(value)
        else:
            text = str(value)
        return text.strip('"')

    def to_dict(self) -> dict[str, Any]:
        """Return the report representation."""
        return {"name": self.name, "value": self.value}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Label":
        """Build a label from its report representation."""
        return cls(name=data.get("name", ""), value=data.get("value"))


def new_label(label_type: LabelType | str, value: str) -> Label:
    """Build a label whose name is the given label type."""
    return Label(name=str(label_type), value=value)


def language_label(language: str) -> Label:
    return new_label(LabelType.LANGUAGE, language)


def framework_label(framework: str) -> Label:
    return new_label(LabelType.FRAMEWORK, framework)


def id_label(test_id: str) -> Label:
    return new_label(LabelType.ID, test_id)


def tag_label(tag: str) -> Label:
    return new_label(LabelType.TAG, tag)


def tag_labels(*tags: str) -> list[Label]:
    """Build one tag label per tag."""
    return [tag_label(tag) for tag in tags]


def host_label(host: str) -> Label:
    return new_label(LabelType.HOST, host)


def thread_label(thread: str) -> Label:
    return new_label(LabelType.THREAD, thread)


def severity_label(severity: SeverityType | str) -> Label:
    return new_label(LabelType.SEVERITY, str(severity))


def sub_suite_label(sub_suite: str) -> Label:
    return new_label(LabelType.SUB_SUITE, sub_suite)


def epic_label(epic: str) -> Label:
    return new_label(LabelType.EPIC, epic)


def layer_label(layer: str) -> Label:
    return new_label(LabelType.LAYER, layer)


def story_label(story: str) -> Label:
    return new_label(LabelType.STORY, story)


def feature_label(feature: str) -> Label:
    return new_label(LabelType.FEATURE, feature)


def parent_suite_label(parent: str) -> Label:
    return new_label(LabelType.PARENT_SUITE, parent)


def suite_label(suite: str) -> Label:
    return new_label(LabelType.SUITE, suite)


def package_label(package_name: str) -> Label:
    return new_label(LabelType.PACKAGE, package_name)


def owner_label(owner_name: str) -> Label:
    return new_label(LabelType.OWNER, owner_name)


def lead_label(lead_name: str) -> Label:
    return new_label(LabelType.LEAD, lead_name)


def allure_id_label(allure_id: str) -> Label:
    return new_label(LabelType.ALLURE_ID, allure_id)