"""Logging setup for the command-line tools."""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

_console = Console(stderr=True)

QUIET_LOGGERS = ("httpx", "httpcore")


def setup_logger(name: Optional[str] = None, level: str = "INFO") -> logging.Logger:
    """
    Configure logging with a rich handler on stderr.

    Args:
        name: Logger name (root logger if None)
        level: Log level name

    Returns:
        Configured logger
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    root = logging.getLogger()
    root.setLevel(log_level)

    # HTTP client libraries log every request at INFO
    for noisy in QUIET_LOGGERS:
        logging.getLogger(noisy).setLevel(logging.DEBUG if log_level <= logging.DEBUG else logging.WARNING)

    if not any(isinstance(h, RichHandler) for h in root.handlers):
        handler = RichHandler(console=_console, show_path=False, rich_tracebacks=False)
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
        root.addHandler(handler)

    return logging.getLogger(name)


def get_logger(name: str) -> logging.Logger:
    """Get a module logger."""
    return logging.getLogger(name)
