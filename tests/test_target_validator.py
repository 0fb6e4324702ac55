from pathlib import Path

import pytest

from core.models import Outcome, Policy
from core.services.target_validator import validate_target

ALL_POLICIES = [
    Policy(),
    Policy(recursive=True),
    Policy(force=True),
    Policy(recursive=True, force=True, allow_empty_dir_delete=True),
    Policy(prompt_each=True, verbose=True),
]


@pytest.mark.parametrize("path", ["/", ".", "..", "./", "../", "/.", "//", "sub/..", "sub/./"])
@pytest.mark.parametrize("policy", ALL_POLICIES)
def test_protected_paths_always_skipped(path, policy, fs):
    result = validate_target(path, policy, fs)

    assert result.outcome is Outcome.SKIPPED_PROTECTED
    assert path in result.message


@pytest.mark.parametrize("policy", ALL_POLICIES)
def test_missing_target_skipped_regardless_of_flags(policy, workdir: Path, fs):
    missing = str(workdir / "nope.txt")

    result = validate_target(missing, policy, fs)

    assert result.outcome is Outcome.SKIPPED_MISSING
    assert "No such file or directory" in result.message


def test_dangling_symlink_is_valid(workdir: Path, fs):
    link = workdir / "dangling"
    link.symlink_to(workdir / "gone")

    assert validate_target(str(link), Policy(), fs) is None


def test_link_to_directory_is_treated_as_file(workdir: Path, fs):
    (workdir / "real").mkdir()
    link = workdir / "link"
    link.symlink_to(workdir / "real")

    assert validate_target(str(link), Policy(), fs) is None


def test_regular_file_is_valid(workdir: Path, fs):
    target = workdir / "a.txt"
    target.write_text("a")

    assert validate_target(str(target), Policy(), fs) is None


def test_directory_needs_recursive_or_dir_flag(workdir: Path, fs):
    (workdir / "d").mkdir()

    result = validate_target(str(workdir / "d"), Policy(force=True), fs)

    assert result.outcome is Outcome.SKIPPED_IS_DIRECTORY
    assert "Is a folder" in result.message


def test_non_empty_directory_rejected_with_dir_flag_only(workdir: Path, fs):
    (workdir / "d").mkdir()
    (workdir / "d" / "child").write_text("c")

    result = validate_target(str(workdir / "d"), Policy(allow_empty_dir_delete=True), fs)

    assert result.outcome is Outcome.SKIPPED_NOT_EMPTY


def test_directory_with_only_subdirectory_is_not_empty(workdir: Path, fs):
    (workdir / "d" / "sub").mkdir(parents=True)

    result = validate_target(str(workdir / "d"), Policy(allow_empty_dir_delete=True), fs)

    assert result.outcome is Outcome.SKIPPED_NOT_EMPTY


def test_empty_directory_accepted_with_dir_flag(workdir: Path, fs):
    (workdir / "d").mkdir()

    assert validate_target(str(workdir / "d"), Policy(allow_empty_dir_delete=True), fs) is None


def test_non_empty_directory_accepted_when_recursive(workdir: Path, fs):
    (workdir / "d").mkdir()
    (workdir / "d" / "child").write_text("c")

    assert validate_target(str(workdir / "d"), Policy(recursive=True), fs) is None


def test_trash_directory_itself_is_protected(trash_dir: Path, fs):
    (trash_dir / "precious.txt").write_text("p")

    result = validate_target(str(trash_dir), Policy(recursive=True), fs, str(trash_dir))

    assert result.outcome is Outcome.SKIPPED_PROTECTED
    assert "trash directory" in result.message


@pytest.mark.parametrize("spelling", ["{trash}/", "{trash}/../Trash", "{parent}", "{parent}/"])
def test_trash_directory_and_ancestors_are_protected(spelling, trash_dir: Path, fs):
    path = spelling.format(trash=trash_dir, parent=trash_dir.parent)

    result = validate_target(path, Policy(recursive=True), fs, str(trash_dir))

    assert result.outcome is Outcome.SKIPPED_PROTECTED


def test_items_inside_trash_and_siblings_are_not_protected(trash_dir: Path, workdir: Path, fs):
    (trash_dir / "old.txt").write_text("o")
    (workdir / "a.txt").write_text("a")

    assert validate_target(str(trash_dir / "old.txt"), Policy(), fs, str(trash_dir)) is None
    assert validate_target(str(workdir / "a.txt"), Policy(), fs, str(trash_dir)) is None


def test_link_to_trash_directory_is_not_protected(trash_dir: Path, workdir: Path, fs):
    link = workdir / "shortcut"
    link.symlink_to(trash_dir)

    assert validate_target(str(link), Policy(), fs, str(trash_dir)) is None
