"""Step and test parameters."""

from __future__ import annotations

import base64
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


def _go_text(value: Any) -> str:
    """Render a value the way the report format expects for parameter values."""
    if value is None:
        return "<nil>"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return str.__str__(value)
    if isinstance(value, (bytes, bytearray)):
        return "[" + " ".join(str(byte) for byte in value) + "]"
    if isinstance(value, Mapping):
        pairs = sorted(((_go_text(k), _go_text(v)) for k, v in value.items()))
        return "map[" + " ".join(f"{k}:{v}" for k, v in pairs) + "]"
    if isinstance(value, (list, tuple, set, frozenset)):
        return "[" + " ".join(_go_text(item) for item in value) + "]"
    return str(value)


def _trim_brackets(text: str) -> str:
    if text.startswith("[") and text.endswith("]"):
        return text[1:-1]
    return text


@dataclass
class Parameter:
    """A named value describing a test or step."""

    name: str
    value: Any = ""

    def as_text(self) -> str:
        """Return the value as text without surrounding double quotes."""
        value = self.value
        if isinstance(value, (bytes, bytearray)):
            text = bytes(value).decode("utf-8", errors="replace")
        else:
            text = _go_text(value)
        return text.strip('"')

    def to_dict(self) -> dict[str, Any]:
        """Return the report representation."""
        value = self.value
        if isinstance(value, (bytes, bytearray)):
            value = base64.b64encode(bytes(value)).decode("ascii")
        return {"name": self.name, "value": value}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Parameter":
        """Build a parameter from its report representation."""
        return cls(name=data.get("name", ""), value=data.get("value"))


def new_parameter(name: str, *args: Any) -> Parameter:
    """Build a parameter whose value is all ``args`` joined by spaces."""
    return Parameter(name=name, value=_trim_brackets(_go_text(list(args))))


def new_parameters(*args: Any) -> list[Parameter]:
    """Build parameters from alternating names and values; a trailing name is dropped."""
    names = args[0::2]
    values = args[1::2]
    return [
        new_parameter(_go_text(name), _trim_brackets(_go_text(value)))
        for name, value in zip(names, values)
    ]