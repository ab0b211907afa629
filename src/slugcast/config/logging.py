"""Logging configuration for slugcast."""

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# Chatty third-party loggers that only matter when debugging
NOISY_LOGGERS = ("httpx", "httpcore", "anthropic")


def setup_logging(
    verbose: bool = False,
    log_file: Path | None = None,
    level: str | None = None,
) -> None:
    """Configure root logging once per process.

    Args:
        verbose: Enable DEBUG level regardless of ``level``
        log_file: Optional file to mirror log records into
        level: Configured level name (defaults to WARNING for the console)
    """
    if verbose:
        log_level = logging.DEBUG
    else:
        log_level = logging.getLevelName(level or "WARNING")
        if not isinstance(log_level, int):
            log_level = logging.WARNING

    handlers: list[logging.Handler] = [
        RichHandler(
            console=Console(stderr=True),
            show_path=verbose,
            rich_tracebacks=verbose,
            markup=False,
        )
    ]

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handlers.append(file_handler)

    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=handlers,
        force=True,
    )

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.DEBUG if verbose else logging.WARNING)
