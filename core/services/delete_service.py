"""Batch deletion service.

Provides the high-level API used by the command line: parse the arguments
once, ask the batch-level question if needed, then validate, confirm and trash
each target in order. A failing target never stops the batch; its warning is
shown as soon as that target is finished and kept in the returned report.
"""

from __future__ import annotations

from collections.abc import Sequence

from loguru import logger

from core.models import BatchReport, Outcome, Policy, TargetResult
from core.services.confirmation import ConfirmationGate
from core.services.flag_parser import parse_args
from core.services.interfaces import IFileSystem, ITerminal
from core.services.target_validator import validate_target
from core.services.transfer_engine import TransferEngine


class DeleteService:
    """Coordinates trash-instead-of-delete batches against one trash directory."""

    def __init__(self, trash_dir: str, fs: IFileSystem, terminal: ITerminal) -> None:
        self.trash_dir = trash_dir
        self._fs = fs
        self._terminal = terminal

    def run(self, tokens: Sequence[str]) -> BatchReport:
        """Parse `tokens` and execute the resulting batch.

        Raises:
            UsageError: The command line is invalid; nothing was touched.
        """
        policy, targets = parse_args(tokens)
        return self.execute(policy, targets)

    def execute(self, policy: Policy, targets: Sequence[str]) -> BatchReport:
        """Trash `targets` in order under `policy` and report every outcome."""
        gate = ConfirmationGate(policy, self._terminal)
        engine = TransferEngine(self.trash_dir, self._fs, self._terminal, policy)

        if not gate.confirm_batch(len(targets)):
            logger.info("Batch of {} target(s) declined", len(targets))
            return BatchReport(aborted=True)

        report = BatchReport()
        for path in targets:
            result = self.delete_to_trash(path, policy, gate, engine)
            report.results.append(result)
            self._show(result, policy)

        logger.info(
            "Batch done: {} trashed, {} warning(s)", len(report.deleted), report.warning_count
        )
        return report

    def delete_to_trash(
        self, path: str, policy: Policy, gate: ConfirmationGate, engine: TransferEngine
    ) -> TargetResult:
        """Validate, confirm and transfer a single target."""
        skipped = validate_target(path, policy, self._fs, self.trash_dir)
        if skipped is not None:
            return skipped

        is_directory = self._fs.is_directory(path)
        if not gate.confirm_target(path, is_directory):
            logger.info("Not confirmed, keeping {}", path)
            return TargetResult(path=path, outcome=Outcome.SKIPPED_NOT_CONFIRMED)

        return engine.transfer(path, is_directory)

    def _show(self, result: TargetResult, policy: Policy) -> None:
        if result.outcome.is_warning:
            self._terminal.warn(result.message)
        elif result.outcome is Outcome.DELETED and policy.verbose:
            self._terminal.info(f"'{result.path}' moved to trash as '{result.destination}'")
