"""Pure arithmetic over an :class:`OperandPair`.

Every function in this module is a **pure** transformation — no I/O,
no side effects, fully deterministic.
"""

from __future__ import annotations

import logging

from arith_cli.core.models import ArithmeticReport, OperandPair
from arith_cli.exceptions import QuotientRangeError

logger = logging.getLogger(__name__)


def add(a: int, b: int) -> int:
    return a + b


def subtract(a: int, b: int) -> int:
    return a - b


def multiply(a: int, b: int) -> int:
    return a * b


def divide(a: int, b: int) -> float | None:
    """Return ``a / b`` as a float, or ``None`` when *b* is zero.

    The division is never attempted for a zero divisor.

    Raises
    ------
    QuotientRangeError
        If the quotient does not fit in a float.
    """
    if b == 0:
        return None
    try:
        return a / b
    except OverflowError as exc:
        raise QuotientRangeError(
            "Quotient is too large to display.",
            hint="Use smaller numbers or a larger divisor.",
        ) from exc


def build_report(operands: OperandPair) -> ArithmeticReport:
    """Compute all four results for *operands*.

    Everything is computed up front so that a failure never leaves a
    partially printed report.
    """
    a, b = operands.a, operands.b
    report = ArithmeticReport(
        operands=operands,
        sum=add(a, b),
        difference=subtract(a, b),
        product=multiply(a, b),
        quotient=divide(a, b),
    )
    logger.debug("Computed report: %r", report)
    return report
