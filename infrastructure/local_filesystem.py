"""File-system capability backed by `os` and `shutil`.

Every mutating primitive catches the OS error, logs it and returns False, so
the engine can turn failures into per-target outcomes.
"""

from __future__ import annotations

import os
import shutil

from loguru import logger

from core.services.interfaces import IFileSystem


class LocalFileSystem(IFileSystem):
    """Real file system; symbolic links are handled as links, never followed."""

    def exists(self, path: str) -> bool:
        return os.path.exists(path)

    def is_symlink(self, path: str) -> bool:
        return os.path.islink(path)

    def is_directory(self, path: str) -> bool:
        return os.path.isdir(path) and not os.path.islink(path)

    def list_direct_children(self, path: str) -> list[str]:
        try:
            return sorted(os.path.join(path, name) for name in os.listdir(path))
        except OSError as ex:
            logger.error("Listing {} failed: {}", path, ex)
            return []

    def copy(self, path: str, dest: str) -> bool:
        try:
            if self.is_directory(path):
                shutil.copytree(path, dest, symlinks=True)
            else:
                shutil.copy2(path, dest, follow_symlinks=False)
            return True
        except (OSError, shutil.Error) as ex:
            logger.error("Copy {} -> {} failed: {}", path, dest, ex)
            return False
        except Exception as ex:  # pylint: disable=broad-exception-caught
            # e.g. RecursionError when copying a tree into its own subtree
            logger.exception("Copy {} -> {} aborted: {}", path, dest, ex)
            return False

    def remove_tree(self, path: str) -> bool:
        try:
            shutil.rmtree(path)
            return True
        except OSError as ex:
            logger.error("Remove tree {} failed: {}", path, ex)
            return False

    def remove_file(self, path: str) -> bool:
        try:
            os.unlink(path)
            return True
        except OSError as ex:
            logger.error("Remove file {} failed: {}", path, ex)
            return False
