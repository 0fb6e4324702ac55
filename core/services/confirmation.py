"""Interactive confirmation rules for `-i` and `-I`."""

from __future__ import annotations

from loguru import logger

from core.models import Policy
from core.services.interfaces import ITerminal

PROMPT_ONCE_THRESHOLD = 3


def is_affirmative(answer: str) -> bool:
    return answer.strip()[:1] in ("y", "Y")


class ConfirmationGate:
    """Decide whether a question is needed and ask it.

    One gate serves one batch: it remembers whether the batch-level question
    or a directory question has already been answered with yes.
    """

    def __init__(self, policy: Policy, terminal: ITerminal) -> None:
        self._policy = policy
        self._terminal = terminal
        self._batch_confirmed = False
        self._directory_confirmed = False

    def confirm_batch(self, count: int) -> bool:
        """Ask once for the whole batch under `-I` when more than three targets are given."""
        if not self._policy.prompt_once_if_many or count <= PROMPT_ONCE_THRESHOLD:
            return True
        self._batch_confirmed = self._ask(f"Delete {count} files?")
        return self._batch_confirmed

    def confirm_target(self, path: str, is_directory: bool) -> bool:
        """Return True when `path` may be trashed under the active prompting mode."""
        if self._policy.prompt_each:
            return self._ask(f"confirm deletion of '{path}'?")

        if self._needs_directory_prompt(is_directory):
            self._directory_confirmed = self._ask(f"recursively delete directory '{path}'?")
            return self._directory_confirmed

        return True

    def _needs_directory_prompt(self, is_directory: bool) -> bool:
        return (
            self._policy.prompt_once_if_many
            and self._policy.recursive
            and is_directory
            and not self._batch_confirmed
            and not self._directory_confirmed
        )

    def _ask(self, question: str) -> bool:
        answer = self._terminal.ask(f"{question} ")
        confirmed = is_affirmative(answer)
        logger.debug("Prompt {!r} answered {!r} -> {}", question, answer, confirmed)
        return confirmed
