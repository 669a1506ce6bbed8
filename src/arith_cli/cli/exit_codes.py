"""Exit-code constants used by the CLI layer.

Every exit path uses one of these values rather than a literal integer.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Clean exit, including the division-by-zero case."""

GENERAL_ERROR: int = 1
"""A known ArithCliError was caught (e.g. malformed input)."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""
