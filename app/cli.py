"""Command-line entry point: an `rm` that moves targets to the trash.

usage: trashrm [-rRdfiIvP] [--] FILE...

Install it under your shell's name for `rm` (an alias or a wrapper script on
PATH) to make every deletion recoverable from the trash directory.
"""

from __future__ import annotations

from collections.abc import Sequence
import sys

from loguru import logger

from core.services.delete_service import DeleteService
from core.services.flag_parser import UsageError, parse_args
from infrastructure.console import Console
from infrastructure.local_filesystem import LocalFileSystem
from infrastructure.logging import disable_logging, init_logging
from infrastructure.settings import AppConfig, load_config

PROG = "trashrm"

EXIT_OK = 0
EXIT_USAGE = 1


def _setup_logging(config: AppConfig) -> None:
    if not config.logging_enabled:
        disable_logging()
        return
    try:
        init_logging(config.log_dir, config.log_level)
    except OSError:
        # Logging must never block a deletion
        disable_logging()


def run(
    argv: Sequence[str],
    config: AppConfig,
    console: Console | None = None,
) -> int:
    """Run one invocation with explicit configuration and return the exit status."""
    console = console if console is not None else Console(PROG)
    trash_dir = str(config.trash_dir)
    service = DeleteService(trash_dir, LocalFileSystem(), console)

    try:
        policy, targets = parse_args(argv)
    except UsageError as ex:
        logger.error("Usage error for {}: {}", list(argv), ex)
        console.warn(str(ex))
        return EXIT_USAGE

    try:
        config.trash_dir.mkdir(parents=True, exist_ok=True)
    except OSError as ex:
        logger.error("Trash directory {} unavailable: {}", trash_dir, ex)
        console.warn(f"cannot use trash directory '{trash_dir}': {ex}")
        return EXIT_USAGE

    report = service.execute(policy, targets)
    if report.aborted:
        logger.info("Nothing trashed, batch declined")
    return EXIT_OK


def main(argv: Sequence[str] | None = None) -> int:
    """Console-script entry point."""
    if argv is None:
        argv = sys.argv[1:]
    config = load_config()
    _setup_logging(config)
    logger.debug("Invoked with {} (trash: {})", list(argv), config.trash_dir)
    return run(argv, config)
