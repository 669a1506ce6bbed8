"""Operand parsing from raw input text.

Policy
------
* A token is an integer when it matches ``[+-]?[0-9]+`` (ASCII digits
  only).  ``int()`` alone would also accept underscores and non-ASCII
  digits, so tokens are checked against a strict pattern first.
* Only the first two tokens matter; anything after them is ignored.
* Fewer than two tokens raises :class:`MissingOperandError`.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from arith_cli.core.models import OperandPair
from arith_cli.exceptions import InvalidOperandError, MissingOperandError

logger = logging.getLogger(__name__)

OPERAND_COUNT: int = 2

_INTEGER_RE = re.compile(r"[+-]?[0-9]+", re.ASCII)


def parse_integer(token: str, position: int) -> int:
    """Convert a single token to ``int`` or raise :class:`InvalidOperandError`."""
    if not _INTEGER_RE.fullmatch(token):
        raise InvalidOperandError(token, position)
    return int(token)


def collect_tokens(lines: Iterable[str], count: int = OPERAND_COUNT) -> list[str]:
    """Read whitespace-separated tokens from *lines* until *count* are found.

    *lines* is consumed lazily so that an interactive stdin is never read
    past the line that completes the operand pair.
    """
    tokens: list[str] = []
    for line in lines:
        tokens.extend(line.split())
        if len(tokens) >= count:
            break
    return tokens[:count]


def parse_operands(lines: Iterable[str]) -> OperandPair:
    """Parse the first two integers from *lines*.

    Raises
    ------
    InvalidOperandError
        If either of the first two tokens is not an integer.
    MissingOperandError
        If input ends before two tokens were read.
    """
    tokens = collect_tokens(lines)
    logger.debug("Collected tokens: %r", tokens)
    # Validate in order so a bad first token is reported before a missing second.
    values = [parse_integer(token, i) for i, token in enumerate(tokens, start=1)]
    if len(values) < OPERAND_COUNT:
        raise MissingOperandError(len(values))
    return OperandPair(a=values[0], b=values[1])
