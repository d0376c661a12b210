"""Logging setup shared by the CLI and library modules."""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAMESPACE = "aisum"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Configure the aisum logger namespace. Safe to call more than once."""
    logger = logging.getLogger(LOGGER_NAMESPACE)
    logger.handlers.clear()

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s", datefmt="[%X]"))

    logger.addHandler(handler)
    logger.setLevel(level.upper())
    logger.propagate = False
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a child logger of the aisum namespace."""
    return logging.getLogger(f"{LOGGER_NAMESPACE}.{name}")
