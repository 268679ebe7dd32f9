import pytest

from contest_solvers.counting import (
    BUCKET_SIZE,
    ac_prefix_counts,
    count_ab_substrings,
    count_ac,
    count_anagram_pairs,
    count_distinct,
    fairness,
    max_sum_after_flips,
)


def test_ab_inside_strings_only():
    assert count_ab_substrings(["AB", "AB", "AB"]) == 3


def test_ab_order_does_not_matter():
    strings = ["BxA", "xxA", "Bxx", "xABx", "BA"]
    assert count_ab_substrings(strings) == count_ab_substrings(list(reversed(strings)))


def test_ab_neutral_string_does_not_change_result():
    strings = ["BxA", "BA", "xxA"]
    assert count_ab_substrings(strings + ["xyz"]) == count_ab_substrings(strings)


def test_ab_empty_string_rejected():
    with pytest.raises(ValueError):
        count_ab_substrings(["AB", ""])


def test_anagram_pairs_grow_with_copies():
    words = ["acornistnt", "peanutbomb", "constraint"]
    single = count_anagram_pairs(words)
    assert count_anagram_pairs(words + ["tniartsnoc"]) > single


def test_anagram_pairs_order_independent():
    words = ["abc", "cab", "bca", "xyz", "zyx"]
    assert count_anagram_pairs(words) == count_anagram_pairs(sorted(words))


def test_distinct_ignores_duplicates():
    values = [8, 10, 8, 6]
    assert count_distinct(values + values) == count_distinct(values)


def test_distinct_of_range():
    assert count_distinct(range(5)) == 5


@pytest.mark.parametrize("bad", [-1, BUCKET_SIZE])
def test_distinct_out_of_range(bad):
    with pytest.raises(ValueError):
        count_distinct([1, bad])


def test_prefix_counts_shape_and_total():
    s = "ACACTACG"
    counts = ac_prefix_counts(s)
    assert len(counts) == len(s) + 1
    assert counts[-1] == s.count("AC")
    assert all(a <= b for a, b in zip(counts, counts[1:]))


def test_count_ac_whole_and_single():
    s = "ACACTACG"
    whole, single = count_ac(s, [(1, len(s)), (3, 3)])
    assert whole == s.count("AC")
    assert single == 0


def test_count_ac_bad_query():
    with pytest.raises(ValueError):
        count_ac("ACAC", [(3, 2)])


def test_flips_nonnegative_keeps_sum():
    values = [3, 0, 7, 2]
    assert max_sum_after_flips(values) == sum(values)


def test_flips_invariant_under_pair_negation():
    values = [-10, 5, -3, 7]
    negated = [10, -5, -3, 7]
    assert max_sum_after_flips(values) == max_sum_after_flips(negated)
    assert max_sum_after_flips(values) <= sum(abs(v) for v in values)


def test_fairness_examples():
    assert fairness(1, 2, 3, 1) == 1
    assert fairness(5, 2, 1, 1) == -3
    assert fairness(5, 2, 1, 2) == 3


def test_fairness_parity_symmetry():
    assert fairness(4, 9, 2, 3) == -fairness(4, 9, 2, 4)