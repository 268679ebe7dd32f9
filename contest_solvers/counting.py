"""Counting problems: substrings, anagrams, distinct values, prefix sums, signs."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import accumulate

BUCKET_SIZE = 1_000_000


def count_ab_substrings(strings: Iterable[str]) -> int:
    """Most occurrences of ``AB`` obtainable by concatenating the strings in some order."""
    inside = both = ends_a = starts_b = 0
    for s in strings:
        if not s:
            raise ValueError("strings must not be empty")
        inside += s.count("AB")
        if s[0] == "B" and s[-1] == "A":
            both += 1
        elif s[-1] == "A":
            ends_a += 1
        elif s[0] == "B":
            starts_b += 1
    if ends_a == 0 and starts_b == 0:
        return inside + max(both - 1, 0)
    return inside + both + min(ends_a, starts_b)


def count_anagram_pairs(words: Iterable[str]) -> int:
    """Count unordered pairs of words that are anagrams of each other."""
    groups = Counter("".join(sorted(word)) for word in words)
    return sum(size * (size - 1) // 2 for size in groups.values())


def count_distinct(values: Iterable[int]) -> int:
    """Count distinct values, each of which must lie in ``[0, BUCKET_SIZE)``."""
    seen: set[int] = set()
    for value in values:
        if not 0 <= value < BUCKET_SIZE:
            raise ValueError(f"value {value} is outside [0, {BUCKET_SIZE})")
        seen.add(value)
    return len(seen)


def ac_prefix_counts(s: str) -> list[int]:
    """Return ``counts`` where ``counts[i]`` is the number of ``AC`` within ``s[:i]``."""
    if not s:
        return [0]
    hits = (a + b == "AC" for a, b in zip(s, s[1:]))
    return [0, *accumulate(hits, initial=0)]


def count_ac(s: str, queries: Iterable[tuple[int, int]]) -> list[int]:
    """Answer each 1-based inclusive range query with the ``AC`` count inside it."""
    counts = ac_prefix_counts(s)
    answers = []
    for left, right in queries:
        if not 1 <= left <= right <= len(s):
            raise ValueError(f"query ({left}, {right}) is out of range")
        answers.append(counts[right] - counts[left])
    return answers


def max_sum_after_flips(values: Sequence[int]) -> int:
    """Largest sum reachable by repeatedly negating two adjacent values."""
    negatives = sum(1 for v in values if v < 0)
    total = sum(abs(v) for v in values)
    if negatives % 2 == 0:
        return total
    return total - 2 * min(abs(v) for v in values)


def fairness(a: int, b: int, c: int, k: int) -> int:
    """Difference between the first two values after ``k`` rounds of the exchange."""
    return b - a if k % 2 == 1 else a - b