"""Command-line entry point."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

BANNER = "LaTeX Solver"


def _build_parser() -> argparse.ArgumentParser:
    return argparse.ArgumentParser(prog="texsolve", description=BANNER)


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the command line and print the program banner."""
    _build_parser().parse_args(argv)
    print(BANNER)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())