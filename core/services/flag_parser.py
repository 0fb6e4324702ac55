"""Parse an rm-compatible short-flag command line into a `Policy`.

Each token starting with '-' (other than '-' and '--') is a cluster of
single-character flags, so `-rf` equals `-r -f`. A bare '--' ends option
parsing and every later token is a literal target, which lets callers trash
files whose names start with '-'.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace

from loguru import logger

from core.models import Policy

UNSUPPORTED_FLAGS = frozenset("xW")


class UsageError(ValueError):
    """Command line cannot be turned into a batch; aborts the whole call."""

    def __init__(self, message: str, option: str | None = None) -> None:
        super().__init__(message)
        self.option = option


class UnknownOptionError(UsageError):
    def __init__(self, option: str) -> None:
        super().__init__(f"unknown option -- {option}", option)


class NotImplementedOptionError(UsageError):
    def __init__(self, option: str) -> None:
        super().__init__(f"option not implemented -- {option}", option)


class MissingOperandError(UsageError):
    def __init__(self) -> None:
        super().__init__("missing operand")


def _apply_flag(policy: Policy, flag: str) -> Policy:
    """Return `policy` updated for one flag character."""
    if flag in ("r", "R"):
        return replace(policy, recursive=True)
    if flag == "d":
        return replace(policy, allow_empty_dir_delete=True)
    # f, i and I select the prompting mode; the last one given wins
    if flag == "f":
        return replace(policy, force=True, prompt_each=False, prompt_once_if_many=False)
    if flag == "i":
        return replace(policy, force=False, prompt_each=True, prompt_once_if_many=False)
    if flag == "I":
        return replace(policy, force=False, prompt_each=False, prompt_once_if_many=True)
    if flag == "v":
        return replace(policy, verbose=True)
    if flag == "P":
        return policy
    if flag in UNSUPPORTED_FLAGS:
        raise NotImplementedOptionError(flag)
    raise UnknownOptionError(flag)


def parse_args(tokens: Sequence[str]) -> tuple[Policy, list[str]]:
    """Split raw argument tokens into the effective policy and the target list.

    Args:
        tokens: Arguments as typed, without the program name.

    Returns:
        The policy and the targets in the order given.

    Raises:
        UnknownOptionError: A flag character is not recognized.
        NotImplementedOptionError: `-x` or `-W` was requested.
        MissingOperandError: No target remains after parsing.
    """
    policy = Policy()
    targets: list[str] = []
    options_done = False
    for token in tokens:
        if options_done:
            targets.append(token)
        elif token == "--":
            options_done = True
        elif token.startswith("-") and token != "-":
            for flag in token[1:]:
                policy = _apply_flag(policy, flag)
        else:
            targets.append(token)

    if not targets:
        raise MissingOperandError()

    logger.debug("Parsed {} target(s) with {}", len(targets), policy)
    return policy, targets
