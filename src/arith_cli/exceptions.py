"""Custom exception hierarchy for arith-cli.

Every error condition that reaches the user must be a subclass of
:class:`ArithCliError` so that the CLI error boundary can render a clean
message and map it to a well-known exit code.

Division by zero is *not* part of this hierarchy: it is an expected
outcome reported on stdout, not a failure.

Hierarchy
---------
ArithCliError
├── InputError
│   ├── InvalidOperandError
│   ├── MissingOperandError
│   └── UndecodableInputError
├── QuotientRangeError
└── EnvironmentError
"""

from __future__ import annotations


class ArithCliError(Exception):
    """Base exception for all arith-cli errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Input -----------------------------------------------------------------

class InputError(ArithCliError):
    """Raised when standard input does not hold two usable integers."""


class InvalidOperandError(InputError):
    """Raised when a token cannot be parsed as an integer."""

    def __init__(self, token: str, position: int) -> None:
        ordinal = "first" if position == 1 else "second"
        super().__init__(
            f"Invalid {ordinal} number: {token!r}",
            hint="Enter two whole numbers separated by a space, e.g. 7 2",
        )
        self.token: str = token
        self.position: int = position


class MissingOperandError(InputError):
    """Raised when input ends before two integers were read."""

    def __init__(self, found: int) -> None:
        super().__init__(
            f"Expected two numbers, got {found}.",
            hint="Enter two whole numbers separated by a space, e.g. 7 2",
        )
        self.found: int = found


class UndecodableInputError(InputError):
    """Raised when stdin holds bytes that are not valid text."""

    def __init__(self, encoding: str) -> None:
        super().__init__(
            f"Input is not valid {encoding} text.",
            hint="Enter two whole numbers separated by a space, e.g. 7 2",
        )


# --- Arithmetic ------------------------------------------------------------

class QuotientRangeError(ArithCliError):
    """Raised when a quotient is too large to represent as a float."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(ArithCliError):
    """Raised when an optional runtime dependency is not available."""
