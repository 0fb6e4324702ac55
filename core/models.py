"""Core domain models for a single trash-instead-of-delete invocation."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True)
class Policy:
    """Effective removal policy built once from the command-line flags.

    At most one of `force`, `prompt_each` and `prompt_once_if_many` is set.
    """

    recursive: bool = False
    force: bool = False
    prompt_each: bool = False
    prompt_once_if_many: bool = False
    verbose: bool = False
    allow_empty_dir_delete: bool = False

    @property
    def allows_directories(self) -> bool:
        return self.recursive or self.allow_empty_dir_delete


class Outcome(Enum):
    """Final state of one target."""

    DELETED = "deleted"
    SKIPPED_PROTECTED = "skipped_protected"
    SKIPPED_MISSING = "skipped_missing"
    SKIPPED_NOT_CONFIRMED = "skipped_not_confirmed"
    SKIPPED_IS_DIRECTORY = "skipped_is_directory"
    SKIPPED_NOT_EMPTY = "skipped_not_empty"
    FAILED_COPY = "failed_copy"
    FAILED_REMOVE_ROLLED_BACK = "failed_remove_rolled_back"
    FAILED_REMOVE_ORPHANED = "failed_remove_orphaned"

    @property
    def is_warning(self) -> bool:
        # A declined confirmation is the user's own choice, not a warning
        return self not in (Outcome.DELETED, Outcome.SKIPPED_NOT_CONFIRMED)


@dataclass(frozen=True)
class TargetResult:
    """Outcome of processing a single target.

    Attributes:
        path: Target path exactly as given on the command line.
        outcome: Final outcome.
        destination: Trash path of the copy, when one was made and kept.
        message: Human-readable reason, empty for plain success.
    """

    path: str
    outcome: Outcome
    destination: str | None = None
    message: str = ""


@dataclass
class BatchReport:
    """Ordered results of a whole invocation.

    Attributes:
        results: One entry per processed target, in command-line order.
        aborted: True when the batch-level confirmation was declined.
    """

    results: list[TargetResult] = field(default_factory=list)
    aborted: bool = False

    @property
    def deleted(self) -> list[TargetResult]:
        return [r for r in self.results if r.outcome is Outcome.DELETED]

    @property
    def warnings(self) -> list[TargetResult]:
        return [r for r in self.results if r.outcome.is_warning]

    @property
    def warning_count(self) -> int:
        return len(self.warnings)
