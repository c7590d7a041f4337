"""Command line solver: solve a saved puzzle or count its solutions.

    net-solver -s default.txt default_sol.txt
    net-solver -c default.txt
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from io_files import FormatError, load_grid, save_grid, write_solution_count
from render import render_text
from solver.backtracking import count_solutions, solve


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="net-solver", description="Solve a net puzzle or count its solutions")
    mode = parser.add_mutually_exclusive_group(required=True)
    mode.add_argument("-s", dest="mode", action="store_const", const="solve", help="Find one solution")
    mode.add_argument("-c", dest="mode", action="store_const", const="count", help="Count all solutions")
    parser.add_argument("input", help="Puzzle file")
    parser.add_argument("output", nargs="?", default=None, help="Where to write the solution or the count")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log load/save details")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        g = load_grid(args.input)
    except FormatError as e:
        print(f"error: {args.input}: {e}", file=sys.stderr)
        return 2
    except OSError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    print(render_text(g), end="")

    if args.mode == "solve":
        if not solve(g):
            print("> The game has no solutions")
            return 1
        print("> A solution to the game :")
        print(render_text(g), end="")
        if args.output:
            path = save_grid(g, args.output)
            print(f"> Game was successfully saved as '{path}'")
        return 0

    nb_sols = count_solutions(g)
    print(f"> The game has {nb_sols} solutions")
    if args.output:
        path = write_solution_count(nb_sols, args.output)
        print(f"> Game was successfully saved as '{path}'")
    return 0


if __name__ == "__main__":
    sys.exit(main())
