"""Links from reports to issues, test cases and other resources."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

from .files import ISSUE_PATTERN_ENV, TEST_CASE_PATTERN_ENV, TMS_LINK_PATTERN_ENV

logger = logging.getLogger(__name__)

_DEFAULT_PATTERN = "%s"


class LinkType(str, Enum):
    """Kind of a link."""

    LINK = "link"
    ISSUE = "issue"
    TEST_CASE = "test_case"
    TMS = "tms"

    def __str__(self) -> str:
        return self.value


@dataclass
class Link:
    """A named URL of a given type."""

    name: str
    type: str
    url: str

    def to_dict(self) -> dict[str, str]:
        """Return the report representation."""
        return {"name": self.name, "type": self.type, "url": self.url}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Link":
        """Build a link from its report representation."""
        return cls(name=data.get("name", ""), type=data.get("type", ""), url=data.get("url", ""))


def new_link(name: str, link_type: LinkType | str, url: str) -> Link:
    """Build a link of the given type."""
    return Link(name=name, type=str(link_type), url=url)


def _pattern(env_key: str) -> str:
    pattern = os.environ.get(env_key, "")
    if not pattern:
        logger.warning(
            "Provided pattern (%s) not contains '%%s' or empty. Please provide correct one. "
            "Use %s environment variable. Until this default pattern will be used (%s).",
            pattern,
            env_key,
            _DEFAULT_PATTERN,
        )
        return _DEFAULT_PATTERN
    return pattern


def _apply(pattern: str, value: str) -> str:
    return pattern.replace("%s", value, 1)


def test_case_link(test_case: str) -> Link:
    """Build a test case link using the test case URL pattern."""
    url = _apply(_pattern(TEST_CASE_PATTERN_ENV), test_case)
    return new_link(f"TestCase[{test_case}]", LinkType.TEST_CASE, url)


def issue_link(issue: str) -> Link:
    """Build an issue link using the issue URL pattern."""
    url = _apply(_pattern(ISSUE_PATTERN_ENV), issue)
    return new_link(f"Issue[{issue}]", LinkType.ISSUE, url)


def link_link(name: str, url: str) -> Link:
    """Build a plain link."""
    return new_link(name, LinkType.LINK, url)


def tms_link(test_case: str) -> Link:
    """Build a TMS link using the TMS URL pattern."""
    return new_link(test_case, LinkType.TMS, _apply(_pattern(TMS_LINK_PATTERN_ENV), test_case))


def tms_links(*test_cases: str) -> list[Link]:
    """Build one TMS link per test case."""
    return [tms_link(test_case) for test_case in test_cases]