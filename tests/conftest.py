from __future__ import annotations

from pathlib import Path

import pytest

from core.services.interfaces import ITerminal
from infrastructure.local_filesystem import LocalFileSystem


class FakeTerminal(ITerminal):
    """Scripted answers; records everything shown."""

    def __init__(self, answers: list[str] | None = None) -> None:
        self.answers = list(answers or [])
        self.questions: list[str] = []
        self.infos: list[str] = []
        self.warnings: list[str] = []

    def ask(self, question: str) -> str:
        self.questions.append(question)
        return self.answers.pop(0) if self.answers else ""

    def info(self, message: str) -> None:
        self.infos.append(message)

    def warn(self, message: str) -> None:
        self.warnings.append(message)


class FlakyFileSystem(LocalFileSystem):
    """Real file system whose copy/remove can be made to fail for chosen paths."""

    def __init__(self) -> None:
        self.fail_copy: set[str] = set()
        self.fail_remove: set[str] = set()

    def copy(self, path: str, dest: str) -> bool:
        if path in self.fail_copy:
            return False
        return super().copy(path, dest)

    def remove_tree(self, path: str) -> bool:
        if path in self.fail_remove:
            return False
        return super().remove_tree(path)

    def remove_file(self, path: str) -> bool:
        if path in self.fail_remove:
            return False
        return super().remove_file(path)


@pytest.fixture
def terminal() -> FakeTerminal:
    return FakeTerminal()


@pytest.fixture
def fs() -> FlakyFileSystem:
    return FlakyFileSystem()


@pytest.fixture
def trash_dir(tmp_path: Path) -> Path:
    path = tmp_path / "Trash"
    path.mkdir()
    return path


@pytest.fixture
def workdir(tmp_path: Path) -> Path:
    path = tmp_path / "work"
    path.mkdir()
    return path


@pytest.fixture
def make_terminal():
    return FakeTerminal
