"""Domain models for arith-cli.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.
"""

from __future__ import annotations

from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Operands
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class OperandPair:
    """The two integers read for a single invocation."""

    a: int
    """First operand (dividend)."""

    b: int
    """Second operand (divisor)."""


# ---------------------------------------------------------------------------
# Derived values
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ArithmeticReport:
    """Every value derived from an :class:`OperandPair`."""

    operands: OperandPair

    sum: int

    difference: int

    product: int

    quotient: float | None
    """``a / b`` as a float, or ``None`` when the divisor is zero."""

    @property
    def division_by_zero(self) -> bool:
        return self.quotient is None
