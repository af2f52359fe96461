"""
Unified logging utility.

• console (default) → colourised RichHandler
• json              → machine-friendly logs for Docker/K8s
"""

from __future__ import annotations

import logging
import sys
from functools import lru_cache

from pythonjsonlogger.json import JsonFormatter
from rich.console import Console
from rich.logging import RichHandler

from config import get_settings

# ---------------------------- #
# Build handlers based on environment settings
# ---------------------------- #


def _console_handler() -> logging.Handler:
    return RichHandler(
        console=Console(stderr=True),
        show_time=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )


def _json_handler() -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JsonFormatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
    return handler


def setup_logging(force: bool = False) -> None:
    """
    Set up logging based on environment configuration.
    If 'force' is True, reconfigure even if handlers exist.
    """
    root = logging.getLogger()

    if root.handlers and not force:
        return

    for h in list(root.handlers):
        root.removeHandler(h)

    settings = get_settings()
    log_level = (settings.log_level or "INFO").upper()
    root.setLevel(log_level)

    handler = _json_handler() if settings.log_format.lower() == "json" else _console_handler()
    root.addHandler(handler)

    # Ensure uvicorn logs use the same handler and level
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logger = logging.getLogger(name)
        logger.handlers = [handler]
        logger.setLevel(log_level)
        logger.propagate = False


@lru_cache()
def get_logger(name: str | None = None) -> logging.Logger:
    """
    Return a logger with the given name.
    Uses cached setup_logging to avoid reinitializing handlers.
    """
    setup_logging()
    return logging.getLogger(name or "token-relay")
