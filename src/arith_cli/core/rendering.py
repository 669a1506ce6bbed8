"""Render an :class:`ArithmeticReport` as output lines.

Line order is fixed: sum, difference, product, then the quotient or the
division-by-zero message.
"""

from __future__ import annotations

from arith_cli.core.models import ArithmeticReport

DIVISION_BY_ZERO_MESSAGE: str = "Division by zero is not allowed."


def format_quotient(quotient: float | None) -> str:
    if quotient is None:
        return DIVISION_BY_ZERO_MESSAGE
    return f"Division: {quotient:.2f}"


def render_report(report: ArithmeticReport) -> list[str]:
    """Return the four output lines, without trailing newlines."""
    return [
        f"Sum: {report.sum}",
        f"Difference: {report.difference}",
        f"Product: {report.product}",
        format_quotient(report.quotient),
    ]
