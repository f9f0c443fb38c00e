#!/usr/bin/env python3
"""
bitlattice - Boolean lattice toolkit

Command-line interface for exploring {0,1}^N.

Usage:
    bitlattice compare <a> <b>               Show how two points are ordered
    bitlattice distance <a> <b>              Hamming distance of comparable points
    bitlattice converge <a> <b>              Every point between a and b
    bitlattice midpoints <a> <b>             Middle-rank points between a and b
    bitlattice paths <a> <b>                 Every monotone path from a to b
    bitlattice shadow <a> [--lower]          Upper (or lower) shadow of a point
    bitlattice graph <n> --implicant <bits>  Learner frontiers as a DOT graph
"""

from __future__ import annotations

import argparse
import logging
import math
import random
import sys
import textwrap
from itertools import islice
from typing import Iterable, Optional

from bitlattice import BitVector, LatticeGraph, Learner, MonotoneFunction
from bitlattice.errors import LatticeError

logger = logging.getLogger("bitlattice")

DEFAULT_LIMIT = 64


# ============================================================================
# Formatting helpers
# ============================================================================

class C:
    """ANSI colors."""
    BOLD = "\033[1m"
    DIM = "\033[2m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    CYAN = "\033[36m"
    RESET = "\033[0m"

    @staticmethod
    def off():
        C.BOLD = C.DIM = C.RED = C.GREEN = C.YELLOW = C.CYAN = C.RESET = ""


def header(text: str) -> str:
    return f"\n{C.BOLD}{C.CYAN}{'─' * 60}{C.RESET}\n{C.BOLD}  {text}{C.RESET}\n{C.BOLD}{C.CYAN}{'─' * 60}{C.RESET}"


def ok(text: str) -> str:
    return f"  {C.GREEN}✓{C.RESET} {text}"


def warn(text: str) -> str:
    return f"  {C.YELLOW}⚠{C.RESET} {text}"


def fail(text: str) -> str:
    return f"  {C.RED}✗{C.RESET} {text}"


def dim(text: str) -> str:
    return f"{C.DIM}{text}{C.RESET}"


def parse_pair(args) -> tuple[BitVector, BitVector]:
    a = BitVector.parse(args.a)
    b = BitVector.parse(args.b, len(a))
    return a, b


def print_limited(items: Iterable, limit: int, total: int) -> None:
    shown = 0
    for item in islice(items, limit):
        if isinstance(item, tuple):
            print(f"    {f' {C.CYAN}→{C.RESET} '.join(str(b) for b in item)}")
        else:
            print(f"    {item}")
        shown += 1
    if total > shown:
        print(dim(f"    ...and {total - shown} more"))


# ============================================================================
# Commands
# ============================================================================

def cmd_compare(args):
    """Show how two points are ordered."""
    a, b = parse_pair(args)
    print(header(f"COMPARE: {a} ? {b}"))

    order = a.partial_cmp(b)
    if order is None:
        print(warn(f"{a} and {b} are incomparable"))
        return
    symbol = {"LESS": "<", "EQUAL": "=", "GREATER": ">"}[order.name]
    print(ok(f"{a} {symbol} {b}"))
    print(f"    Distance: {a.distance(b)}")


def cmd_distance(args):
    """Hamming distance of comparable points."""
    a, b = parse_pair(args)
    print(a.distance(b))


def cmd_converge(args):
    """Every point in the interval between two points."""
    a, b = parse_pair(args)
    traversal = a.converge(b)
    print(header(f"CONVERGE: {a} → {b}"))
    print(f"  Points: {traversal.size}")
    print_limited(traversal, args.limit, traversal.size)


def cmd_midpoints(args):
    """Middle-rank points between two points."""
    a, b = parse_pair(args)
    midpoints = a.midpoints(b)
    print(header(f"MIDPOINTS: {a} → {b}"))
    print(f"  Points: {midpoints.size}")
    print_limited(midpoints, args.limit, midpoints.size)


def cmd_paths(args):
    """Every monotone path between two points."""
    a, b = parse_pair(args)
    paths = a.paths(b)
    d = a.distance(b)
    total = math.factorial(d)
    print(header(f"PATHS: {a} → {b}"))
    print(f"  Paths: {total}  |  Hops: {d}")
    print_limited(paths, args.limit, total)


def cmd_shadow(args):
    """Upper or lower shadow of a point."""
    a = BitVector.parse(args.a)
    if args.lower:
        shadow = a.lower_shadow()
        total = 1 << a.count_ones()
    else:
        shadow = a.upper_shadow()
        total = 1 << a.count_zeroes()
    print(header(f"{'LOWER' if args.lower else 'UPPER'} SHADOW: {a}"))
    print(f"  Points: {total}")
    print_limited(shadow, args.limit, total)


def cmd_graph(args):
    """Run the learner and print the labeled lattice as DOT."""
    implicants = [BitVector.parse(s, args.n) for s in args.implicant]
    oracle = MonotoneFunction(implicants)
    learner = Learner(oracle, rng=random.Random(args.seed))
    for _ in range(args.iterations):
        learner.iterate()
    logger.info("%r", learner)

    graph = LatticeGraph.from_learner(learner)
    sys.stdout.write(graph.to_dot())


# ============================================================================
# CLI setup
# ============================================================================

def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="bitlattice",
        description="bitlattice - Boolean lattice toolkit",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=textwrap.dedent("""
        examples:
          bitlattice compare 10001 11111
          bitlattice converge 10001 11111
          bitlattice midpoints 00000 11111 -n 5
          bitlattice paths 11111 10001
          bitlattice shadow 0110 --lower
          bitlattice graph 4 --implicant 1010 --iterations 2 --seed 7
        """),
    )
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    sub = parser.add_subparsers(dest="command", help="Command to run")

    for name, help_text in (
        ("compare", "Show how two points are ordered"),
        ("distance", "Hamming distance of comparable points"),
        ("converge", "Every point between two points"),
        ("midpoints", "Middle-rank points between two points"),
        ("paths", "Every monotone path between two points"),
    ):
        p = sub.add_parser(name, help=help_text)
        p.add_argument("a", help="First point, e.g. 10001")
        p.add_argument("b", help="Second point, same width")
        p.add_argument("-n", "--limit", type=int, default=DEFAULT_LIMIT,
                       help="Max items to display")

    # shadow
    p = sub.add_parser("shadow", help="Upper (or lower) shadow of a point")
    p.add_argument("a", help="Point, e.g. 0110")
    p.add_argument("--lower", action="store_true", help="Walk down instead of up")
    p.add_argument("-n", "--limit", type=int, default=DEFAULT_LIMIT,
                   help="Max items to display")

    # graph
    p = sub.add_parser("graph", help="Learner frontiers as a DOT graph")
    p.add_argument("n", type=int, help="Number of coordinates")
    p.add_argument("--implicant", action="append", required=True,
                   help="Implicant of the monotone function (repeatable)")
    p.add_argument("--iterations", type=int, default=0, help="Learner iterations to run")
    p.add_argument("--seed", type=int, help="Random seed for the learner")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.no_color:
        C.off()

    if not args.command:
        parser.print_help()
        return 0

    # Dispatch
    commands = {
        "compare": cmd_compare,
        "distance": cmd_distance,
        "converge": cmd_converge,
        "midpoints": cmd_midpoints,
        "paths": cmd_paths,
        "shadow": cmd_shadow,
        "graph": cmd_graph,
    }

    handler = commands[args.command]
    try:
        handler(args)
    except (LatticeError, ValueError) as e:
        print(fail(f"Error: {e}"))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
