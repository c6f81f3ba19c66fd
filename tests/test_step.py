import pytest

from allure_model.attachment import Attachment, MimeType
from allure_model.clock import get_now
from allure_model.parameter import Parameter, new_parameter
from allure_model.status import Status
from allure_model.step import Step, new_simple_step

ALLURE_DIR = "allure-results"


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("ALLURE_OUTPUT_PATH", raising=False)
    monkeypatch.delenv("ALLURE_OUTPUT_FOLDER", raising=False)
    return tmp_path


def test_new_step():
    start = get_now()
    stop = start + 1
    parameters = [Parameter("Param1", b"val1"), Parameter("Param2", b"val2")]
    step = Step("Step A", Status.PASSED, start, stop, parameters)
    assert step.name == "Step A"
    assert step.status == Status.PASSED
    assert step.start == start
    assert step.stop == stop
    assert len(step.parameters) == 2
    assert step.parameters[0].name == "Param1"
    assert step.parameters[0].as_text() == "val1"
    assert step.parameters[1].name == "Param2"
    assert step.parameters[1].as_text() == "val2"
    assert step.parent is None
    assert step.attachments == []


def test_new_simple_step():
    step = new_simple_step("Step A")
    assert step.name == "Step A"
    assert step.status == Status.PASSED
    assert step.start > 0
    assert step.stop > 0
    assert step.parent is None
    assert step.parameters == []
    assert step.attachments == []


def test_begin():
    step = Step()
    before = get_now()
    step.begin()
    assert before <= step.start <= get_now()


def test_finish():
    step = Step()
    before = get_now()
    step.finish()
    assert before <= step.stop <= get_now()


@pytest.mark.parametrize(
    "method, expected",
    [
        ("passed", Status.PASSED),
        ("failed", Status.FAILED),
        ("skipped", Status.SKIPPED),
        ("broken", Status.BROKEN),
    ],
)
def test_status_setters(method, expected):
    step = Step()
    returned = getattr(step, method)()
    assert returned is step
    assert step.status == expected


def test_write_attachments(workdir):
    text = "THIS IS A TEXT ATTACHMENT"
    attachment = Attachment("Text Attachment", MimeType.TEXT, text.encode())
    step = Step()
    step.attachments.append(attachment)
    step.write_attachments()
    files = list((workdir / ALLURE_DIR).iterdir())
    assert [f.name for f in files] == [attachment.source]
    assert files[0].read_bytes() == attachment.content
    assert files[0].read_text() == text


def test_write_attachments_of_sub_steps(workdir):
    attachment = Attachment("a", MimeType.TEXT, b"inner")
    parent = Step("parent")
    child = Step("child").with_attachments(attachment)
    parent.with_child(child)
    parent.write_attachments()
    files = list((workdir / ALLURE_DIR).iterdir())
    assert [f.name for f in files] == [attachment.source]
    assert [f.read_bytes() for f in files] == [attachment.content]
    assert attachment.content == b"inner"


def test_with_attachments():
    attachment = Attachment("Text Attachment", MimeType.TEXT, b"THIS IS A TEXT ATTACHMENT")
    step = Step()
    step.with_attachments(attachment)
    assert len(step.attachments) == 1
    att = step.attachments[0]
    assert att.name == attachment.name
    assert att.mime_type == attachment.mime_type
    assert att.source == attachment.source
    assert att.content == attachment.content


def test_with_child():
    child = new_simple_step("Child Step")
    step = Step()
    step.with_child(child)
    assert len(step.steps) == 1
    assert step.steps[0] is child
    assert child.parent is step


def test_with_new_parameters_even():
    step = Step()
    step.with_new_parameters("param1", "val1", "param2", "val2")
    assert len(step.parameters) == 2
    assert step.parameters[0].name == "param1"
    assert step.parameters[0].as_text() == "val1"
    assert step.parameters[1].name == "param2"
    assert step.parameters[1].as_text() == "val2"


def test_with_new_parameters_odd():
    step = Step()
    step.with_new_parameters("param1", "val1", "param2")
    assert len(step.parameters) == 1
    assert step.parameters[0].name == "param1"
    assert step.parameters[0].as_text() == "val1"


def test_with_parameters():
    step = Step()
    step.with_parameters(new_parameter("param1", "val1"), new_parameter("param2", "val2"))
    assert [p.name for p in step.parameters] == ["param1", "param2"]
    assert [p.as_text() for p in step.parameters] == ["val1", "val2"]


def test_with_parent():
    child = new_simple_step("Parent Step")
    step = Step()
    child.with_parent(step)
    assert len(step.steps) == 1
    assert step.steps[0] is child


def test_get_parent():
    child = new_simple_step("Parent Step")
    step = Step()
    child.with_parent(step)
    assert len(step.steps) == 1
    assert child.parent is step


def test_with_status_details():
    step = Step().with_status_details("msg", "trace")
    assert step.status_details.message == "msg"
    assert step.status_details.trace == "trace"


def test_to_dict_omits_empty_fields_but_keeps_status_details():
    assert Step().to_dict() == {"statusDetails": {"message": "", "trace": ""}}


def test_dict_round_trip():
    step = new_simple_step("outer", new_parameter("host", "localhost"))
    step.with_child(Step("inner", Status.FAILED, 1, 2))
    restored = Step.from_dict(step.to_dict())
    assert restored == step
    assert restored.steps[0].parent is restored
    assert restored.to_dict()["steps"][0]["status"] == "failed"