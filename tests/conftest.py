"""Shared pytest fixtures and configuration for the arith-cli test suite.

Guidelines
----------
* Stdin is always replaced with an in-memory stream; no test waits on a terminal.
* Core tests must be pure — no side effects.
"""

from __future__ import annotations

import io
import logging
import sys
from collections.abc import Callable, Iterator

import pytest


@pytest.fixture
def feed_stdin(monkeypatch: pytest.MonkeyPatch) -> Callable[[str], None]:
    """Return a function that replaces ``sys.stdin`` with the given text."""

    def _feed(text: str) -> None:
        monkeypatch.setattr(sys, "stdin", io.StringIO(text))

    return _feed


@pytest.fixture
def script_argv(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make ``sys.argv`` look like a bare ``arith-cli`` invocation."""
    monkeypatch.setattr(sys, "argv", ["arith-cli"])


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("ARITH_CLI_LOG_LEVEL", raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """Undo whatever ``setup_logging`` installed during a test."""
    yield
    logger = logging.getLogger("arith_cli")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture(autouse=True)
def _restore_int_digit_limit() -> Iterator[None]:
    limit = sys.get_int_max_str_digits()
    yield
    sys.set_int_max_str_digits(limit)
