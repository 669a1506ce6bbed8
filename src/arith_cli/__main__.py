"""Allow ``python -m arith_cli`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m arith_cli`` behaves identically to the ``arith-cli``
console script.
"""

from __future__ import annotations

from arith_cli.cli.app import cli

if __name__ == "__main__":
    cli()
