import pytest

from allure_model.attachment import Attachment, MimeType

EXPECTED_EXTENSIONS = {
    "text/plain": "txt",
    "text/csv": "csv",
    "text/tab-separated-values": "tsv",
    "text/uri-list": "uri",
    "text/html": "html",
    "application/xml": "xml",
    "application/json": "json",
    "application/yaml": "yaml",
    "application/vnd.tcpdump.pcap": "pcap",
    "image/png": "png",
    "image/jpg": "jpg",
    "image/svg-xml": "svg",
    "image/gif": "gif",
    "image/bmp": "bmp",
    "image/tiff": "tiff",
    "video/mp4": "mp4",
    "video/ogg": "ogg",
    "video/webm": "webm",
    "video/mpeg": "mpeg",
    "application/pdf": "pdf",
    "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet": "xlsx",
}


@pytest.fixture
def in_tmp(monkeypatch, tmp_path):
    monkeypatch.delenv("ALLURE_OUTPUT_PATH", raising=False)
    monkeypatch.delenv("ALLURE_OUTPUT_FOLDER", raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_mime_type_table_unchanged():
    assert len(MimeType) == len(EXPECTED_EXTENSIONS)
    for value, extension in EXPECTED_EXTENSIONS.items():
        assert MimeType(value).extension == extension


def test_mime_type_values():
    assert MimeType("text/plain") is MimeType.TEXT
    assert MimeType("image/svg-xml") is MimeType.SVG
    assert MimeType("text/uri-list") is MimeType.URI_LIST
    assert str(MimeType.PDF) == "application/pdf"


@pytest.mark.parametrize("mime_type", list(MimeType))
def test_new_attachment(mime_type):
    name = f"Test init fileType: {mime_type}"
    content = b"some content"
    attachment = Attachment(name, mime_type, content)
    assert attachment.uuid
    assert attachment.mime_type is mime_type
    assert attachment.name == name
    assert attachment.content == content
    assert attachment.source == f"{attachment.uuid}-attachment.{mime_type.extension}"


def test_plain_string_mime_type_is_coerced():
    attachment = Attachment("a", "text/csv", b"x")
    assert attachment.mime_type is MimeType.CSV
    assert attachment.source.endswith("-attachment.csv")


def test_unknown_mime_type_has_empty_extension():
    attachment = Attachment("a", "application/x-custom", b"x")
    assert attachment.source == f"{attachment.uuid}-attachment."


def test_uuids_are_distinct():
    first = Attachment("a", MimeType.TEXT, b"x")
    second = Attachment("a", MimeType.TEXT, b"x")
    assert first.uuid != second.uuid


def test_content_is_kept():
    attachment = Attachment("a", MimeType.TEXT, b"some content")
    assert attachment.content == b"some content"


@pytest.mark.parametrize("mime_type", list(MimeType))
def test_attachment_write(in_tmp, mime_type):
    attachment = Attachment(f"Test init fileType: {mime_type}", mime_type, b"some content")
    path = attachment.write()
    expected = in_tmp / "allure-results" / attachment.source
    assert expected.is_file()
    assert path.resolve() == expected.resolve()
    assert expected.read_bytes() == b"some content"


def test_to_dict_and_back():
    attachment = Attachment("text!", MimeType.TEXT, b"Some text!")
    data = attachment.to_dict()
    assert data == {"name": "text!", "source": attachment.source, "type": "text/plain"}
    restored = Attachment.from_dict(data)
    assert restored.name == "text!"
    assert restored.source == attachment.source
    assert restored.mime_type is MimeType.TEXT


def test_to_dict_omits_empty_name():
    attachment = Attachment("", MimeType.PNG, b"")
    assert "name" not in attachment.to_dict()