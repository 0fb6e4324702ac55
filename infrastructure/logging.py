"""Logging initialization utilities using loguru."""

from __future__ import annotations

from pathlib import Path

from loguru import logger

from infrastructure.settings import DEFAULT_LOG_DIR

LOG_FILE_PATTERN = "trashrm_*.log"


def init_logging(log_dir: str | Path | None = None, level: str = "INFO") -> None:
    """Initialize rotating file logging under the given directory.

    The default stderr sink is removed so log records never mix with the
    command's own output.
    """
    log_path = Path(log_dir) if log_dir is not None else get_log_directory()
    log_path.mkdir(parents=True, exist_ok=True)

    logger.remove()
    logger.add(
        str(log_path / "trashrm_{time:YYYYMMDD}.log"),
        rotation="10 MB",
        retention="10 days",
        compression="zip",
        backtrace=False,
        diagnose=False,
        level=level,
    )


def disable_logging() -> None:
    """Drop every sink; used when logging is switched off in the settings."""
    logger.remove()


def get_log_directory() -> Path:
    """Get the main log directory path."""
    return DEFAULT_LOG_DIR


def find_latest_log_file(log_dir: str | Path | None = None) -> Path | None:
    """Find the latest log file in the specified directory."""
    log_path = Path(log_dir) if log_dir is not None else get_log_directory()
    try:
        if not log_path.exists():
            return None

        log_files = list(log_path.glob(LOG_FILE_PATTERN))
        if not log_files:
            return None

        # Return the most recently modified file
        return max(log_files, key=lambda p: p.stat().st_mtime)
    except (OSError, ValueError):
        return None
