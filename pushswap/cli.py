"""Command line entry point: print the operations that sort the given numbers."""

from __future__ import annotations

import sys
from typing import Sequence

from pushswap.parsing import ARG_MAX, InputError, has_duplicates, parse_arguments
from pushswap.sorting import solve
from pushswap.stack import Operation


def run(args: Sequence[str]) -> list[Operation]:
    """Return the operations that sort the numbers given as arguments.

    No arguments give no operations. Raises InputError for invalid input,
    including duplicated numbers.
    """
    if not args:
        return []
    if args[0] == "" or len(args) > ARG_MAX:
        raise InputError("arguments are not a list of integers")
    values = parse_arguments(args)
    if has_duplicates(values):
        raise InputError("duplicated numbers")
    return solve(values)


def main(argv: Sequence[str] | None = None) -> int:
    """Print one operation per line; on invalid input print "Error" to stderr."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        operations = run(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.write("".join(f"{operation}\n" for operation in operations))
    return 0


if __name__ == "__main__":
    sys.exit(main())