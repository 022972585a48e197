"""The push_swap command: read integers, print the operations that sort them."""

from __future__ import annotations

import sys
from typing import Sequence, TextIO

from pushswap.analysis import disorder
from pushswap.bench import report
from pushswap.parsing import Mode, ParseError, parse_args
from pushswap.stacks import Stacks
from pushswap.strategies import adaptive, bubble_sort, chunk_sort, radix_sort

_STRATEGIES = {
    Mode.SIMPLE: bubble_sort,
    Mode.MEDIUM: chunk_sort,
    Mode.COMPLEX: radix_sort,
    Mode.ADAPTIVE: adaptive,
}


def run(args: Sequence[str], out: TextIO, err: TextIO) -> int:
    """Sort the integers in ``args``, writing operations to ``out``; return the exit code."""
    if not args:
        return 1
    try:
        config = parse_args(args)
    except ParseError:
        err.write("Error\n")
        return 1
    stacks = Stacks(config.values, out=out)
    dis = disorder(config.values)
    if dis > 0:
        _STRATEGIES[config.mode](stacks)
    if config.bench:
        err.write(report(config.mode, dis, stacks))
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    return run(args, sys.stdout, sys.stderr)


if __name__ == "__main__":
    raise SystemExit(main())