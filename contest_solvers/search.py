"""Recursive and exhaustive search problems: burgers, sequences, bills, travel, words."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from itertools import combinations_with_replacement

_WORD = re.compile(r"[A-Z][a-z]*[A-Z]")
_WORDS = re.compile(r"(?:[A-Z][a-z]*[A-Z])*")


def patty_count(n: int, x: int) -> int:
    """Count patties among the bottom ``x`` layers of a level-``n`` burger."""
    if n < 0:
        raise ValueError("level must not be negative")
    lengths, patties = [1], [1]
    for _ in range(n):
        lengths.append(2 * lengths[-1] + 3)
        patties.append(2 * patties[-1] + 1)
    if not 1 <= x <= lengths[n]:
        raise ValueError(f"layer {x} is outside a burger of {lengths[n]} layers")

    total = 0
    while n > 0:
        prev = lengths[n - 1]
        if x == 1:
            return total
        if x <= prev + 1:
            x -= 1
        elif x == prev + 2:
            return total + patties[n - 1] + 1
        elif x <= 2 * prev + 2:
            total += patties[n - 1] + 1
            x -= prev + 2
        else:
            return total + 2 * patties[n - 1] + 1
        n -= 1
    return total + 1


def max_requirement_score(
    n: int, m: int, requirements: Sequence[tuple[int, int, int, int]]
) -> int:
    """Best score over non-decreasing sequences of length ``n`` with values in 1..``m``.

    Each requirement ``(a, b, c, d)`` (1-based positions) adds ``d`` when
    ``A[b] - A[a] == c``.
    """
    if n < 1 or m < 1:
        raise ValueError("length and maximum value must be positive")
    for a, b, _, _ in requirements:
        if not (1 <= a <= n and 1 <= b <= n):
            raise ValueError(f"positions ({a}, {b}) are out of range")
    best = 0
    for seq in combinations_with_replacement(range(1, m + 1), n):
        score = sum(d for a, b, c, d in requirements if seq[b - 1] - seq[a - 1] == c)
        best = max(best, score)
    return best


def find_bills(n: int, y: int) -> tuple[int, int, int] | None:
    """Find counts of 10000, 5000 and 1000 bills, ``n`` in all, worth ``y``."""
    for tens in range(n + 1):
        for fives in range(n - tens + 1):
            ones = n - tens - fives
            if 10000 * tens + 5000 * fives + 1000 * ones == y:
                return tens, fives, ones
    return None


def can_travel(plan: Iterable[tuple[int, int, int]]) -> bool:
    """Tell whether the grid walk from the origin hits every ``(t, x, y)`` in time."""
    pt = px = py = 0
    for t, x, y in plan:
        steps = t - pt
        distance = abs(x - px) + abs(y - py)
        if steps < distance or steps % 2 != distance % 2:
            return False
        pt, px, py = t, x, y
    return True


def double_camel_sort(s: str) -> str:
    """Sort words that start and end with a capital letter, case-insensitively."""
    if _WORDS.fullmatch(s) is None:
        raise ValueError("every word must start and end with an upper-case letter")
    words = sorted(
        w[0].lower() + w[1:-1] + w[-1].lower() for w in _WORD.findall(s)
    )
    return "".join(w[0].upper() + w[1:-1] + w[-1].upper() for w in words)