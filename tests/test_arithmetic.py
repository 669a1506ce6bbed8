"""Tests for the pure arithmetic and rendering layer."""

from __future__ import annotations

import pytest

from arith_cli.core.arithmetic import add, build_report, divide, multiply, subtract
from arith_cli.core.models import ArithmeticReport, OperandPair
from arith_cli.core.rendering import (
    DIVISION_BY_ZERO_MESSAGE,
    format_quotient,
    render_report,
)
from arith_cli.exceptions import QuotientRangeError


# ---------------------------------------------------------------------------
# Individual operations
# ---------------------------------------------------------------------------

class TestOperations:
    @pytest.mark.parametrize(
        ("a", "b"),
        [(7, 2), (5, 0), (-4, 2), (0, 0), (-9, -3), (2**40, 2**40)],
    )
    def test_integer_operations_are_exact(self, a: int, b: int) -> None:
        assert add(a, b) == a + b
        assert subtract(a, b) == a - b
        assert multiply(a, b) == a * b

    def test_large_product_does_not_wrap(self) -> None:
        assert multiply(2**40, 2**40) == 2**80

    def test_divide(self) -> None:
        assert divide(7, 2) == 3.5

    def test_divide_negative(self) -> None:
        assert divide(-4, 2) == -2.0

    def test_divide_by_zero_returns_none(self) -> None:
        assert divide(5, 0) is None
        assert divide(0, 0) is None

    def test_huge_ratio_of_huge_ints(self) -> None:
        assert divide(10**400, 10**399) == 10.0

    def test_quotient_out_of_float_range(self) -> None:
        with pytest.raises(QuotientRangeError):
            divide(10**400, 1)


# ---------------------------------------------------------------------------
# Report
# ---------------------------------------------------------------------------

class TestBuildReport:
    def test_report_fields(self) -> None:
        report = build_report(OperandPair(a=7, b=2))
        assert report == ArithmeticReport(
            operands=OperandPair(a=7, b=2),
            sum=9,
            difference=5,
            product=14,
            quotient=3.5,
        )
        assert not report.division_by_zero

    def test_zero_divisor_flag(self) -> None:
        assert build_report(OperandPair(a=5, b=0)).division_by_zero

    def test_report_is_frozen(self) -> None:
        report = build_report(OperandPair(a=1, b=1))
        with pytest.raises(AttributeError):
            report.sum = 3  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

class TestFormatQuotient:
    @pytest.mark.parametrize(
        ("quotient", "expected"),
        [
            (3.5, "Division: 3.50"),
            (-2.0, "Division: -2.00"),
            (1 / 3, "Division: 0.33"),
            (2 / 3, "Division: 0.67"),
            (0.0, "Division: 0.00"),
        ],
    )
    def test_two_decimal_places(self, quotient: float, expected: str) -> None:
        assert format_quotient(quotient) == expected

    def test_none_is_zero_division_message(self) -> None:
        assert format_quotient(None) == "Division by zero is not allowed."
        assert DIVISION_BY_ZERO_MESSAGE == "Division by zero is not allowed."


class TestRenderReport:
    @pytest.mark.parametrize(
        ("a", "b", "expected"),
        [
            (7, 2, ["Sum: 9", "Difference: 5", "Product: 14", "Division: 3.50"]),
            (
                5,
                0,
                ["Sum: 5", "Difference: 5", "Product: 0", "Division by zero is not allowed."],
            ),
            (-4, 2, ["Sum: -2", "Difference: -6", "Product: -8", "Division: -2.00"]),
            (
                0,
                0,
                ["Sum: 0", "Difference: 0", "Product: 0", "Division by zero is not allowed."],
            ),
        ],
    )
    def test_scenarios(self, a: int, b: int, expected: list[str]) -> None:
        assert render_report(build_report(OperandPair(a=a, b=b))) == expected

    def test_line_order_is_fixed(self) -> None:
        lines = render_report(build_report(OperandPair(a=-100, b=7)))
        prefixes = [line.split(":")[0] for line in lines]
        assert prefixes == ["Sum", "Difference", "Product", "Division"]
