"""Tests for exact combinatorics and the combinatorial number system.

Verifies:
- factorial / binomial are exact well beyond 64-bit factorials
- unrank_combination enumerates subsets in lexicographic order
- rank_combination inverts unrank_combination
- DomainError on sizes, ranks and arguments out of range
"""

import itertools

import pytest

from core.combinatorics import (
    binomial,
    factorial,
    rank_combination,
    unrank_combination,
)
from core.validation import DomainError


# ── factorial / binomial ──────────────────────────────────────────────

class TestExactCombinatorics:

    def test_small_factorials(self):
        assert [factorial(n) for n in range(6)] == [1, 1, 2, 6, 24, 120]

    def test_factorial_30_is_exact(self):
        # 30! is far outside uint64
        assert factorial(30) == 265252859812191058636308480000000

    def test_negative_factorial_raises(self):
        with pytest.raises(DomainError):
            factorial(-1)

    @pytest.mark.parametrize("a", range(0, 12))
    def test_edges_and_symmetry(self, a):
        assert binomial(a, 0) == 1
        assert binomial(a, a) == 1
        for b in range(a + 1):
            assert binomial(a, b) == binomial(a, a - b)

    def test_pascal_rule(self):
        for a in range(1, 25):
            for b in range(1, a):
                assert binomial(a, b) == binomial(a - 1, b - 1) + binomial(a - 1, b)

    def test_matches_factorial_formula_beyond_uint64(self):
        """The naive formula overflows 64-bit integers from a = 21 on."""
        for a in range(21, 41):
            for b in range(a + 1):
                expected = factorial(a) // (factorial(b) * factorial(a - b))
                assert binomial(a, b) == expected

    def test_known_large_values(self):
        assert binomial(30, 15) == 155117520
        assert binomial(60, 30) == 118264581564861424

    def test_row_sums_to_power_of_two(self):
        for d in range(0, 20):
            assert sum(binomial(d, k) for k in range(d + 1)) == 2 ** d

    def test_b_greater_than_a_raises(self):
        with pytest.raises(DomainError):
            binomial(3, 4)

    def test_negative_argument_raises(self):
        with pytest.raises(DomainError):
            binomial(-2, 1)


# ── unrank / rank ─────────────────────────────────────────────────────

class TestCombinationRanker:

    @pytest.mark.parametrize("upper", range(1, 8))
    def test_lexicographic_enumeration(self, upper):
        """Ranks 0..C-1 give every increasing subset once, in order."""
        for size in range(upper + 1):
            count = binomial(upper, size)
            subsets = [unrank_combination(upper, size, r) for r in range(count)]
            assert subsets == list(itertools.combinations(range(upper), size))

    def test_first_and_last(self):
        assert unrank_combination(6, 3, 0) == (0, 1, 2)
        assert unrank_combination(6, 3, binomial(6, 3) - 1) == (3, 4, 5)

    def test_size_zero_is_empty(self):
        assert unrank_combination(4, 0, 0) == ()

    def test_size_one_is_rank(self):
        assert [unrank_combination(5, 1, r) for r in range(5)] == [
            (0,), (1,), (2,), (3,), (4,)
        ]

    def test_known_values(self):
        assert unrank_combination(4, 2, 3) == (1, 2)
        assert unrank_combination(5, 2, 9) == (3, 4)
        assert unrank_combination(5, 3, 6) == (1, 2, 3)

    def test_large_universe(self):
        """Counts beyond uint64 factorials still unrank correctly."""
        upper, size = 40, 20
        last = binomial(upper, size) - 1
        assert unrank_combination(upper, size, last) == tuple(range(20, 40))
        middle = last // 2
        assert rank_combination(upper, unrank_combination(upper, size, middle)) == middle

    @pytest.mark.parametrize("upper", range(0, 7))
    def test_rank_inverts_unrank(self, upper):
        for size in range(upper + 1):
            for r in range(binomial(upper, size)):
                assert rank_combination(upper, unrank_combination(upper, size, r)) == r

    def test_size_beyond_upper_raises(self):
        with pytest.raises(DomainError):
            unrank_combination(3, 4, 0)

    def test_rank_out_of_range_raises(self):
        with pytest.raises(DomainError):
            unrank_combination(4, 2, 6)
        with pytest.raises(DomainError):
            unrank_combination(4, 2, -1)

    def test_rank_of_unsorted_subset_raises(self):
        with pytest.raises(DomainError):
            rank_combination(4, (2, 1))
        with pytest.raises(DomainError):
            rank_combination(4, (1, 4))
