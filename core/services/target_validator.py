"""Removal preconditions checked for each target before anything is copied."""

from __future__ import annotations

import os

from loguru import logger

from core.models import Outcome, Policy, TargetResult
from core.services.interfaces import IFileSystem

PROTECTED_NAMES = frozenset({".", ".."})


def validate_target(
    path: str, policy: Policy, fs: IFileSystem, trash_dir: str | None = None
) -> TargetResult | None:
    """Return a skip result when `path` must not be removed, else None.

    Missing targets are skipped with a warning whatever the flags, including
    `-f`. Dangling symbolic links are valid targets. A symbolic link to a
    directory is treated as a file: the link is trashed, not its target.
    The trash directory itself and every directory holding it are protected,
    since trashing them would delete their own copy.
    """
    if is_protected_path(path):
        return _skip(path, Outcome.SKIPPED_PROTECTED, f"refusing to remove protected path '{path}'")

    if trash_dir is not None and holds_trash(path, trash_dir, fs):
        return _skip(
            path,
            Outcome.SKIPPED_PROTECTED,
            f"refusing to remove '{path}': it holds the trash directory '{trash_dir}'",
        )

    if not fs.exists(path) and not fs.is_symlink(path):
        return _skip(path, Outcome.SKIPPED_MISSING, "No such file or directory")

    if not fs.is_directory(path):
        return None

    if not policy.allows_directories:
        return _skip(path, Outcome.SKIPPED_IS_DIRECTORY, "Is a folder")

    if not policy.recursive and fs.list_direct_children(path):
        return _skip(path, Outcome.SKIPPED_NOT_EMPTY, "Folder not empty")

    return None


def is_protected_path(path: str) -> bool:
    """True for the root and for any path ending in `.` or `..` (`./`, `a/..`, `/.`)."""
    if os.path.basename(path.rstrip(os.sep)) in PROTECTED_NAMES:
        return True
    return os.path.realpath(path) == os.sep


def holds_trash(path: str, trash_dir: str, fs: IFileSystem) -> bool:
    """True when `path` is the trash directory or one of its ancestors."""
    target = _resolve(path, fs)
    trash = os.path.realpath(trash_dir)
    try:
        return os.path.commonpath([target, trash]) == target
    except ValueError:
        # Different drives
        return False


def _resolve(path: str, fs: IFileSystem) -> str:
    # A link is trashed as a link, so only its parent is resolved
    if fs.is_symlink(path):
        absolute = os.path.abspath(path)
        return os.path.join(
            os.path.realpath(os.path.dirname(absolute)), os.path.basename(absolute)
        )
    return os.path.realpath(path)


def _skip(path: str, outcome: Outcome, reason: str) -> TargetResult:
    logger.warning("Skipping {}: {}", path, outcome.value)
    if outcome is not Outcome.SKIPPED_PROTECTED:
        reason = f"cannot remove '{path}': {reason}"
    return TargetResult(path=path, outcome=outcome, message=reason)
