# allure-model

Build Allure test reports from Python. The package models the entities Allure
reads: results, steps, containers, labels, links, parameters and attachments.
It writes them as JSON and attachment files into a results directory that the
Allure command-line tool can render.

## Install

    pip install allure-model

## Quick look

```python
from allure_model.result import new_result
from allure_model.step import new_simple_step
from allure_model.attachment import Attachment, MimeType
from allure_model.label import epic_label, SeverityType, severity_label
from allure_model.link import issue_link
from allure_model.parameter import new_parameter

result = new_result("test_login", "suite.test_login")
result.with_suite("Auth").with_host("localhost").with_labels(
    epic_label("Accounts"),
    severity_label(SeverityType.CRITICAL),
)
result.links.append(issue_link("AUTH-42"))

step = new_simple_step("open page", new_parameter("host", "localhost"))
step.with_attachments(Attachment("page", MimeType.TEXT, b"<html>...</html>"))
result.steps.append(step)

result.done()   # marks it passed if no status was set, then writes files
```

`new_result` sets a fresh UUID. It sets `test_case_id` to the MD5 hash of the
full name and `history_id` to the MD5 hash of `test_case_id`. It adds a
`language` label that holds the Python version and sets the start time to now.

`Result.done()` sets the status to passed if none is set and records the stop
time. It then writes every attachment of the result and its steps, and writes
`<uuid>-result.json`. `Result.skip_on_print()` keeps a result from being
written.

## Modules

| Module                    | What it holds                                                                 |
|---------------------------|-------------------------------------------------------------------------------|
| `allure_model.result`     | `Result`, `new_result`, `md5_hash`                                            |
| `allure_model.step`       | `Step`, `new_simple_step`                                                     |
| `allure_model.container`  | `Container` for setup (`befores`) and teardown (`afters`) steps               |
| `allure_model.label`      | `Label`, `LabelType`, `SeverityType` and helpers such as `suite_label`, `tag_labels` |
| `allure_model.link`       | `Link`, `LinkType`, `new_link`, `issue_link`, `test_case_link`, `tms_link`, `tms_links`, `link_link` |
| `allure_model.parameter`  | `Parameter`, `new_parameter`, `new_parameters`                                |
| `allure_model.attachment` | `Attachment`, `MimeType` (each type has a file `extension`)                   |
| `allure_model.status`     | `Status`, `StatusDetail`                                                      |
| `allure_model.files`      | `FileManager`, `result_path`, `output_folder_name`                            |
| `allure_model.clock`      | `get_now` (milliseconds since the epoch), `new_uuid`                          |

Every entity has `to_dict()` and `from_dict()`. `Result` and `Container` also
have `to_json()`, which returns UTF-8 JSON bytes. Empty fields are left out of
the output, as Allure expects.

A `Container` writes `<uuid>-container.json` only when it holds steps. Its
`write()` and `done()` return `None` when it is empty.

`new_parameters("a", 1, "b", 2)` builds parameters from alternating names and
values. It drops a trailing name that has no value. `Step.with_new_parameters`
does the same on a step.

## Where files go

The environment chooses the results directory:

| Variable               | Effect                                                 |
|------------------------|--------------------------------------------------------|
| `ALLURE_OUTPUT_PATH`   | Parent directory of the results folder (default: `.`)  |
| `ALLURE_OUTPUT_FOLDER` | Name of the results folder (default: `allure-results`) |

`allure_model.files.result_path()` returns the resulting path. A `FileManager`
creates the directory when it is built. `FileManager` also accepts an explicit
directory. Files are written with mode `0644`.

## Link patterns and launch tags

| Variable                  | Effect                                                    |
|---------------------------|-----------------------------------------------------------|
| `ALLURE_ISSUE_PATTERN`    | URL pattern for `issue_link`, with one `%s` for the id    |
| `ALLURE_TESTCASE_PATTERN` | URL pattern for `test_case_link`                          |
| `ALLURE_LINK_TMS_PATTERN` | URL pattern for `tms_link` and `tms_links`                |
| `ALLURE_LAUNCH_TAGS`      | Comma-separated tags added by `Result.with_launch_tags()` |

If a pattern is not set, the bare id is used as the URL and a warning is logged.

## What it does not do

This package only builds and writes report files. It does not run tests, hook
into a test runner, or provide assertion helpers that record steps. It does not
render reports. Use the Allure command-line tool on the results directory for
that.

## Running the tests

    pip install -e .[test]
    pytest