"""Attachments added to reports: screenshots, responses, files."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Mapping

from .clock import new_uuid
from .files import FileManager


class MimeType(str, Enum):
    """Media type of an attachment."""

    TEXT = "text/plain"
    CSV = "text/csv"
    TSV = "text/tab-separated-values"
    URI_LIST = "text/uri-list"

    HTML = "text/html"
    XML = "application/xml"
    JSON = "application/json"
    YAML = "application/yaml"
    PCAP = "application/vnd.tcpdump.pcap"

    PNG = "image/png"
    JPG = "image/jpg"
    SVG = "image/svg-xml"
    GIF = "image/gif"
    BMP = "image/bmp"
    TIFF = "image/tiff"

    MP4 = "video/mp4"
    OGG = "video/ogg"
    WEBM = "video/webm"
    MPEG = "video/mpeg"

    PDF = "application/pdf"
    XLSX = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

    def __str__(self) -> str:
        return self.value

    @property
    def extension(self) -> str:
        """File extension used for attachments of this type."""
        return _EXTENSIONS[self]


_EXTENSIONS: dict[MimeType, str] = {
    MimeType.TEXT: "txt",
    MimeType.CSV: "csv",
    MimeType.TSV: "tsv",
    MimeType.URI_LIST: "uri",
    MimeType.HTML: "html",
    MimeType.XML: "xml",
    MimeType.JSON: "json",
    MimeType.YAML: "yaml",
    MimeType.PCAP: "pcap",
    MimeType.PNG: "png",
    MimeType.JPG: "jpg",
    MimeType.SVG: "svg",
    MimeType.GIF: "gif",
    MimeType.BMP: "bmp",
    MimeType.TIFF: "tiff",
    MimeType.MP4: "mp4",
    MimeType.OGG: "ogg",
    MimeType.WEBM: "webm",
    MimeType.MPEG: "mpeg",
    MimeType.PDF: "pdf",
    MimeType.XLSX: "xlsx",
}


def _coerce_mime(value: Any) -> Any:
    try:
        return MimeType(value)
    except ValueError:
        return value


@dataclass
class Attachment:
    """A named piece of content stored next to the report as its own file."""

    name: str = ""
    mime_type: MimeType | str = ""
    content: bytes = b""
    uuid: str = field(default_factory=lambda: str(new_uuid()))
    source: str = ""

    def __post_init__(self) -> None:
        if isinstance(self.content, str):
            self.content = self.content.encode("utf-8")
        self.mime_type = _coerce_mime(self.mime_type)
        if not self.source:
            extension = _EXTENSIONS.get(self.mime_type, "")
            self.source = f"{self.uuid}-attachment.{extension}"

    def write(self) -> Path:
        """Write the content to the results folder under ``source``."""
        return FileManager().create_file(self.source, self.content)

    def to_dict(self) -> dict[str, str]:
        """Return the report representation, leaving out empty fields."""
        data = {"name": self.name, "source": self.source, "type": str(self.mime_type)}
        return {key: value for key, value in data.items() if value}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Attachment":
        """Build an attachment from its report representation; content is not restored."""
        return cls(
            name=data.get("name", ""),
            mime_type=data.get("type", ""),
            content=b"",
            uuid="",
            source=data.get("source", ""),
        )