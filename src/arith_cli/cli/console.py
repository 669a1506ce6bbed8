"""Stderr console helpers with optional Rich support.

Rich is imported lazily so that the arithmetic itself keeps working
when it is not installed; diagnostics then fall back to plain stderr
with markup tags removed.
"""

from __future__ import annotations

import re
import sys
from typing import Any

from arith_cli.exceptions import EnvironmentError

_TAG_RE = re.compile(r"(?<!\\)\[/?[a-z ]+\]")


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console() -> Any:
    """Create a Rich console instance targeting stderr."""
    console_class = _load_rich_console_class()
    return console_class(stderr=True)


def escape(text: str) -> str:
    """Escape user-supplied text so it is never read as markup."""
    try:
        from rich.markup import escape as rich_escape
    except ModuleNotFoundError:
        return text.replace("[", "\\[")
    return rich_escape(text)


def strip_markup(text: str) -> str:
    """Remove markup tags and unescape brackets for plain output."""
    return _TAG_RE.sub("", text).replace("\\[", "[")


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback."""

    def print(self, *objects: object) -> None:
        """Render with Rich when available, else plain stderr print."""
        try:
            rich_console = get_rich_console()
        except EnvironmentError:
            print(
                *(strip_markup(o) if isinstance(o, str) else o for o in objects),
                file=sys.stderr,
            )
            return
        rich_console.print(*objects)


console = _ConsoleProxy()
