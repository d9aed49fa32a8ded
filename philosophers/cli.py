"""Command-line entry point for the dining-philosophers simulation."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import Optional

from .parser import ArgumentError
from .rules import Rules
from .simulation import Simulation


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run a simulation from command-line arguments; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        rules = Rules.from_args(args)
    except ArgumentError as error:
        sys.stderr.write(f"{error}\n")
        return 1
    Simulation(rules, sys.stdout).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())