"""Logging setup for arith-cli.

Modules log through ``logging.getLogger(__name__)``; this module only
decides where records go and at which level.  Records are written to
stderr so they never mix with the results on stdout.

The level comes from the ``ARITH_CLI_LOG_LEVEL`` environment variable
(``DEBUG``, ``INFO``, ... or a number) and defaults to ``WARNING``.
"""

from __future__ import annotations

import logging
import os
import sys

LOG_LEVEL_ENV: str = "ARITH_CLI_LOG_LEVEL"
DEFAULT_LEVEL: int = logging.WARNING
LOG_FORMAT: str = "[%(levelname)s] %(name)s: %(message)s"

_PACKAGE_LOGGER = "arith_cli"


def resolve_env_log_level() -> int | None:
    """Return a logging level from the environment, or ``None`` if unset or unknown."""
    raw = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    if not raw:
        return None
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw)
    return level if isinstance(level, int) else None


def _build_handler() -> logging.Handler:
    """Prefer Rich's handler; fall back to a plain stderr stream handler."""
    try:
        from rich.console import Console
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler: logging.Handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        return handler
    return RichHandler(console=Console(stderr=True), show_path=False)


def setup_logging(level: int | None = None) -> logging.Logger:
    """Configure the package logger and return it.

    Calling this more than once replaces the previously installed handler.
    """
    if level is None:
        level = resolve_env_log_level()
    if level is None:
        level = DEFAULT_LEVEL

    logger = logging.getLogger(_PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.addHandler(_build_handler())
    logger.setLevel(level)
    logger.propagate = False
    return logger
