"""CLI application entry point for arith-cli.

This module is the **sole error boundary** for the entire application.
It catches :class:`~arith_cli.exceptions.ArithCliError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages on stderr and returning well-defined exit codes.

Architecture notes
------------------
* No arithmetic lives here — all work is delegated to ``core``.
* Results go to stdout as plain text; diagnostics go to stderr.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys

from arith_cli.cli import exit_codes
from arith_cli.cli.console import console, escape
from arith_cli.cli.io import prompt_operands, write_lines
from arith_cli.cli.logs import setup_logging
from arith_cli.core.arithmetic import build_report
from arith_cli.core.rendering import render_report
from arith_cli.exceptions import ArithCliError
from arith_cli.version import __version__

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the argument parser.

    The program takes no arguments of its own; only ``--help`` and
    ``--version`` are recognised.
    """
    parser = argparse.ArgumentParser(
        prog="arith-cli",
        description=(
            "Read two integers from standard input and print their sum, "
            "difference, product and quotient."
        ),
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


# ---------------------------------------------------------------------------
# Command
# ---------------------------------------------------------------------------

def _run_arithmetic() -> int:
    """Prompt, compute, and print the four results."""
    operands = prompt_operands()
    report = build_report(operands)
    if report.division_by_zero:
        logger.debug("Divisor is zero; skipping division")
    write_lines(render_report(report))
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the arith-cli program.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    parser.parse_args(argv)
    setup_logging()
    # Operands and results are exact at any size; lift the str<->int digit cap.
    sys.set_int_max_str_digits(0)
    return _run_arithmetic()


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def _terminate_prompt_line() -> None:
    """End the unterminated prompt line so diagnostics start on a fresh line."""
    sys.stdout.write("\n")
    sys.stdout.flush()


def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    Wraps :func:`main` and guarantees the process never exits with a raw
    stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except ArithCliError as exc:
        _terminate_prompt_line()
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        _terminate_prompt_line()
        console.print("[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        _terminate_prompt_line()
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
