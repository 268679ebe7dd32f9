"""Solutions to short contest problems: times, products, dice, grids, letters."""

from __future__ import annotations

import string
from collections.abc import Iterable, Sequence
from functools import reduce
from itertools import product
from operator import xor


def meets_deadline(a: int, b: int, c: int, d: int) -> bool:
    """Tell whether a submission at ``c:d`` is strictly before deadline ``a:b``."""
    return c * 60 + d < a * 60 + b


def overflow_product(values: Iterable[int], k: int) -> int:
    """Multiply values in turn, resetting to 1 whenever the product reaches 10**k."""
    limit = 10**k
    result = 1
    for value in values:
        result *= value
        if result >= limit:
            result = 1
    return result


def rounded_quotient(a: int, b: int) -> int:
    """Return ``a / b`` rounded half up, for non-negative ``a`` and positive ``b``."""
    return (a + b // 2) // b


def dice_probability(x: int, y: int) -> float:
    """Probability that two dice sum to at least ``x`` or differ by at least ``y``."""
    count = sum(
        1
        for a, b in product(range(1, 7), repeat=2)
        if a + b >= x or abs(a - b) >= y
    )
    return count / 36.0


def format_probability(value: float) -> str:
    """Format a dice probability: shortest form if exact in 36ths, else 30 decimals."""
    scaled = value * 36
    if abs(scaled - round(scaled)) < 1e-9:
        return f"{value:g}"
    return f"{value:.30f}"


def button_presses(s: str) -> int:
    """Fewest presses to show ``s`` using an append-0 button and an increment-all button."""
    if not s or not s.isdigit():
        raise ValueError("expected a non-empty string of decimal digits")
    digits = [int(ch) for ch in reversed(s)]
    increments = sum((nxt - cur) % 10 for cur, nxt in zip(digits, digits[1:]))
    return len(s) + increments + digits[0]


def max_domino_xor(grid: Sequence[Sequence[int]]) -> int:
    """Largest XOR of uncovered cells over all coverings with no two covered neighbours."""
    if not grid:
        return 0
    width = len(grid[0])
    if any(len(row) != width for row in grid):
        raise ValueError("grid rows must all have the same length")
    cells = [value for row in grid for value in row]
    height = len(grid)
    pairs = [
        (i * width + j, i * width + j + 1)
        for i in range(height)
        for j in range(width - 1)
    ] + [
        (i * width + j, (i + 1) * width + j)
        for i in range(height - 1)
        for j in range(width)
    ]

    best = 0
    for keep in product((False, True), repeat=len(cells)):
        if any(not keep[p] and not keep[q] for p, q in pairs):
            continue
        total = reduce(xor, (v for v, kept in zip(cells, keep) if kept), 0)
        best = max(best, total)
    return best


def count_diff(s: Sequence[str], t: Sequence[str]) -> int:
    """Count cells where two equally sized grids differ."""
    if len(s) != len(t) or any(len(a) != len(b) for a, b in zip(s, t)):
        raise ValueError("grids must have the same shape")
    return sum(a != b for row_s, row_t in zip(s, t) for a, b in zip(row_s, row_t))


def rotate_right(grid: Sequence[str]) -> list[str]:
    """Rotate a square grid of characters 90 degrees clockwise."""
    if any(len(row) != len(grid) for row in grid):
        raise ValueError("grid must be square")
    return ["".join(column) for column in zip(*reversed(grid))]


def min_rotation_cost(s: Sequence[str], t: Sequence[str]) -> int:
    """Fewest operations (rotations plus cell changes) to turn grid ``s`` into ``t``."""
    best = None
    current = list(s)
    for rotations in range(4):
        cost = count_diff(current, t) + rotations
        best = cost if best is None else min(best, cost)
        current = rotate_right(current)
    return best


def missing_letter(s: str) -> str | None:
    """Return the first lower-case letter not in ``s``, or ``None`` if all appear."""
    present = set(s)
    return next((c for c in string.ascii_lowercase if c not in present), None)