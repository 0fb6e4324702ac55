"""Core service interfaces.

The deletion engine never touches the operating system directly. It talks to
two capabilities: a file system offering copy/remove/inspect primitives that
report success as booleans, and a terminal that can ask a yes/no question and
show status lines. Infrastructure provides the real implementations; tests
provide fakes.
"""

from __future__ import annotations

from collections.abc import Sequence


class IFileSystem:
    """File-system primitives used by the deletion engine.

    Mutating primitives return False instead of raising on failure.
    """

    def exists(self, path: str) -> bool:
        """Return True if `path` exists (symbolic links are followed)."""
        raise NotImplementedError

    def is_symlink(self, path: str) -> bool:
        """Return True if `path` is a symbolic link, dangling or not."""
        raise NotImplementedError

    def is_directory(self, path: str) -> bool:
        """Return True if `path` is a real directory (not a link to one)."""
        raise NotImplementedError

    def list_direct_children(self, path: str) -> Sequence[str]:
        """Return full paths of the direct children of directory `path`."""
        raise NotImplementedError

    def copy(self, path: str, dest: str) -> bool:
        """Copy file or directory tree `path` to the new location `dest`."""
        raise NotImplementedError

    def remove_tree(self, path: str) -> bool:
        """Remove directory `path` and everything below it."""
        raise NotImplementedError

    def remove_file(self, path: str) -> bool:
        """Remove the single file or symbolic link `path`."""
        raise NotImplementedError


class ITerminal:
    """Interactive terminal used for prompts and status lines."""

    def ask(self, question: str) -> str:
        """Show `question` and return the line typed in reply ('' at end of input)."""
        raise NotImplementedError

    def info(self, message: str) -> None:
        """Write an informational line to standard output."""
        raise NotImplementedError

    def warn(self, message: str) -> None:
        """Write a warning to standard error."""
        raise NotImplementedError
