"""Command-line entry point for the dining philosophers simulation."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from philosim.arguments import ArgumentError, parse_arguments
from philosim.simulation import Simulation


def main(argv: Sequence[str] | None = None) -> int:
    """Run the simulation from the arguments that follow the program name."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        settings = parse_arguments(args)
    except ArgumentError as error:
        print(error)
        return 1
    Simulation(settings, sys.stdout).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())