"""Terminal I/O for the CLI layer: the prompt, stdin, and stdout.

Results are written as plain text, never through Rich, so that the
output format is exact regardless of terminal capabilities.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator, Sequence
from typing import TextIO

from arith_cli.core.models import OperandPair
from arith_cli.core.parsing import parse_operands
from arith_cli.exceptions import UndecodableInputError

logger = logging.getLogger(__name__)

PROMPT: str = "Enter two numbers: "


def _iter_lines(stream: TextIO) -> Iterator[str]:
    """Yield lines one ``readline`` at a time until EOF."""
    return iter(stream.readline, "")


def prompt_operands(
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> OperandPair:
    """Write the prompt and read two integers.

    The prompt carries no trailing newline and is flushed before reading.
    """
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    stdout.write(PROMPT)
    stdout.flush()
    try:
        operands = parse_operands(_iter_lines(stdin))
    except UnicodeDecodeError as exc:
        raise UndecodableInputError(exc.encoding) from exc
    logger.info("Read operands a=%d b=%d", operands.a, operands.b)
    return operands


def write_lines(lines: Sequence[str], stdout: TextIO | None = None) -> None:
    """Write each line followed by a newline, then flush."""
    stdout = stdout if stdout is not None else sys.stdout
    for line in lines:
        stdout.write(f"{line}\n")
    stdout.flush()
