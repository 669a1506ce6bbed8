"""Core layer — pure arithmetic, parsing and rendering.

Rules
-----
* No ``print()`` calls.
* No stdin/stdout access.
* No imports from ``cli``.
* All functions must be fully typed and deterministic.
"""

from arith_cli.core.arithmetic import build_report
from arith_cli.core.models import ArithmeticReport, OperandPair
from arith_cli.core.parsing import parse_operands
from arith_cli.core.rendering import render_report

__all__: list[str] = [
    "ArithmeticReport",
    "OperandPair",
    "build_report",
    "parse_operands",
    "render_report",
]
