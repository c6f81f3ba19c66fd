"""Output location and writing of report files."""

from __future__ import annotations

import os
from pathlib import Path

RESULTS_PATH_ENV = "ALLURE_OUTPUT_PATH"
OUTPUT_FOLDER_ENV = "ALLURE_OUTPUT_FOLDER"
ISSUE_PATTERN_ENV = "ALLURE_ISSUE_PATTERN"
TEST_CASE_PATTERN_ENV = "ALLURE_TESTCASE_PATTERN"
TMS_LINK_PATTERN_ENV = "ALLURE_LINK_TMS_PATTERN"
LAUNCH_TAGS_ENV = "ALLURE_LAUNCH_TAGS"

FILE_PERMISSION = 0o644
DEFAULT_OUTPUT_FOLDER = "allure-results"


def output_folder_name() -> str:
    """Return the name of the results folder, from the environment or the default."""
    return os.environ.get(OUTPUT_FOLDER_ENV) or DEFAULT_OUTPUT_FOLDER


def result_path() -> str:
    """Return the path of the results folder."""
    base = os.environ.get(RESULTS_PATH_ENV, "")
    folder = output_folder_name()
    if base:
        return f"{base}/{folder}"
    return f"./{folder}"


class FileManager:
    """Writes report files into the results folder, creating it if needed."""

    def __init__(self, results_path: str | os.PathLike[str] | None = None) -> None:
        self.results_path = Path(results_path if results_path is not None else result_path())
        if not self.results_path.exists():
            self.results_path.mkdir(parents=True, exist_ok=True)

    def create_file(self, name: str, content: bytes | str) -> Path:
        """Write ``content`` to ``name`` in the results folder and return its path."""
        data = content.encode("utf-8") if isinstance(content, str) else bytes(content)
        path = self.results_path / name
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, FILE_PERMISSION)
        with os.fdopen(fd, "wb") as handle:
            handle.write(data)
        return path