"""Copy-then-remove transfer of a single target into the trash directory.

The original is only removed after its trash copy exists. If removing the
original fails, the fresh trash copy is removed again so the trash never holds
a duplicate of something that was not deleted. When that rollback fails too,
both copies remain and the result says so.
"""

from __future__ import annotations

from collections.abc import Iterator
import os

from loguru import logger

from core.models import Outcome, Policy, TargetResult
from core.services.interfaces import IFileSystem, ITerminal
from core.services.name_versioner import trash_name_for, versioned_name


class TransferEngine:
    """Moves validated, confirmed targets into `trash_dir`."""

    def __init__(
        self, trash_dir: str, fs: IFileSystem, terminal: ITerminal, policy: Policy
    ) -> None:
        self.trash_dir = trash_dir
        self._fs = fs
        self._terminal = terminal
        self._policy = policy

    def transfer(self, path: str, is_directory: bool) -> TargetResult:
        """Trash one target; never raises for per-target failures."""
        name = versioned_name(trash_name_for(path), self.trash_dir, self._fs)
        dest = os.path.join(self.trash_dir, name)

        if not self._copy(path, dest):
            logger.error("Copy to trash failed: {} -> {}", path, dest)
            return TargetResult(
                path=path,
                outcome=Outcome.FAILED_COPY,
                message=f"cannot remove '{path}': copy to trash failed, original kept",
            )

        if self._policy.verbose:
            self._report_removal(path, is_directory)

        if self._remove(path, is_directory):
            logger.info("Trashed {} -> {}", path, dest)
            return TargetResult(path=path, outcome=Outcome.DELETED, destination=dest)

        return self._rollback(path, dest, is_directory)

    def _copy(self, path: str, dest: str) -> bool:
        if not self._fs.copy(path, dest):
            return False
        # The copy must actually be there before the original may go
        return self._fs.exists(dest) or self._fs.is_symlink(dest)

    def _remove(self, path: str, is_directory: bool) -> bool:
        if is_directory:
            return self._fs.remove_tree(path)
        return self._fs.remove_file(path)

    def _rollback(self, path: str, dest: str, is_directory: bool) -> TargetResult:
        logger.warning("Removing {} failed, rolling back trash copy {}", path, dest)
        if self._remove(dest, is_directory):
            return TargetResult(
                path=path,
                outcome=Outcome.FAILED_REMOVE_ROLLED_BACK,
                message=(
                    f"cannot remove '{path}': trash copy '{dest}' was deleted again "
                    "because the original could not be removed"
                ),
            )

        logger.error("Rollback failed, orphaned trash copy: {}", dest)
        return TargetResult(
            path=path,
            outcome=Outcome.FAILED_REMOVE_ORPHANED,
            destination=dest,
            message=(
                f"cannot remove '{path}': the original and its trash copy '{dest}' "
                "both exist now; the trash copy is stale"
            ),
        )

    def _report_removal(self, path: str, is_directory: bool) -> None:
        if not is_directory:
            self._terminal.info(f"removed '{path}'")
            return
        for entry, entry_is_dir in self._walk_deepest_first(path):
            if entry_is_dir:
                self._terminal.info(f"removed directory '{entry}'")
            else:
                self._terminal.info(f"removed '{entry}'")
        self._terminal.info(f"removed directory '{path}'")

    def _walk_deepest_first(self, directory: str) -> Iterator[tuple[str, bool]]:
        """Yield (path, is_directory) for everything below `directory`, children first."""
        for child in self._fs.list_direct_children(directory):
            if self._fs.is_directory(child):
                yield from self._walk_deepest_first(child)
                yield child, True
            else:
                yield child, False
