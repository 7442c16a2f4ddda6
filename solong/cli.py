"""Command-line entry point: load a level and show it."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from solong.parser import MapError, parse_map


def main(argv: Sequence[str] | None = None) -> int:
    """Load the map named on the command line and print it."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 1
    try:
        grid = parse_map(args[0])
    except MapError as exc:
        print(exc, file=sys.stderr)
        return 1
    print("\n".join(grid))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())