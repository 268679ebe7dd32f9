"""Command line entry point reading problem input from standard input."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator

from contest_solvers.graphs import bfs_distances
from contest_solvers.search import can_travel


def _ints(tokens: list[str]) -> Iterator[int]:
    for token in tokens:
        try:
            yield int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None


def _take(numbers: Iterator[int], count: int) -> list[int]:
    taken = [value for _, value in zip(range(count), numbers)]
    if len(taken) != count:
        raise ValueError("input ended too early")
    return taken


def _bfs(tokens: list[str]) -> list[str]:
    numbers = _ints(tokens)
    n, m = _take(numbers, 2)
    flat = _take(numbers, 2 * m)
    edges = list(zip(flat[::2], flat[1::2]))
    return [f"{v}:{d} " for v, d in enumerate(bfs_distances(n, edges, 0))]


def _traveling(tokens: list[str]) -> list[str]:
    numbers = _ints(tokens)
    (n,) = _take(numbers, 1)
    flat = _take(numbers, 3 * n)
    plan = list(zip(flat[::3], flat[1::3], flat[2::3]))
    return ["Yes" if can_travel(plan) else "No"]


def main(argv: list[str] | None = None) -> int:
    """Solve the chosen problem for the input on standard input."""
    parser = argparse.ArgumentParser(
        prog="contest-solvers", description="Solve a problem read from standard input."
    )
    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("bfs", help="distances from vertex 0: N M then M edges")
    sub.add_parser("traveling", help="travel plan check: N then N lines of t x y")
    args = parser.parse_args(argv)

    tokens = sys.stdin.read().split()
    try:
        lines = _bfs(tokens) if args.command == "bfs" else _traveling(tokens)
    except ValueError as exc:
        parser.error(str(exc))
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())