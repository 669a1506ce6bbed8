"""arith-cli — read two integers, print their sum, difference, product and quotient.

The package follows a small layered layout: pure arithmetic lives in
``core``; prompting, stdin/stdout and the error boundary live in ``cli``.
"""

from arith_cli.version import __version__

__all__: list[str] = ["__version__"]
