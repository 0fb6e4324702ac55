"""Collision-free names inside the trash directory.

An item whose name is already taken gets a `[vN]` marker before its final
extension: `report.txt`, `report [v1].txt`, `report [v2].txt`, ... Names with
no extension get the marker appended: `README`, `README [v1]`.
"""

from __future__ import annotations

import os

from core.services.interfaces import IFileSystem


def split_extension(name: str) -> tuple[str, str]:
    """Split `name` on its final dot into (stem, extension).

    A dot at position 0 does not start an extension, so hidden files such as
    `.gitignore` are extensionless while `.config.json` splits normally.
    """
    dot = name.rfind(".")
    if dot <= 0:
        return name, ""
    return name[:dot], name[dot:]


def format_versioned(name: str, version: int) -> str:
    stem, ext = split_extension(name)
    return f"{stem} [v{version}]{ext}"


def trash_name_for(path: str) -> str:
    """Base name an item keeps in the trash (trailing separators ignored)."""
    return os.path.basename(os.path.normpath(path))


def versioned_name(base: str, trash_dir: str, fs: IFileSystem) -> str:
    """Return the first name derived from `base` that is free in `trash_dir`.

    The directory is probed on every call because its contents change while
    a batch runs. Concurrent invocations can still race for the same name.
    """
    candidate = base
    version = 0
    while _taken(os.path.join(trash_dir, candidate), fs):
        version += 1
        candidate = format_versioned(base, version)
    return candidate


def _taken(path: str, fs: IFileSystem) -> bool:
    return fs.exists(path) or fs.is_symlink(path)
