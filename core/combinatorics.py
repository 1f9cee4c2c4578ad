# Oddgamma: Odd Clifford Group Gamma Matrices (C) 2026 The Oddgamma Authors
# Licensed under the Apache License, Version 2.0

"""Exact combinatorics and the combinatorial number system.

Big gamma matrices are indexed by subsets of generator indices. Within a
fixed subset size the subsets are ordered lexicographically, and
:func:`unrank_combination` / :func:`rank_combination` convert between that
position (the *rank*) and the subset itself.

All counts are Python ``int`` and therefore exact for any signature.
"""

import math
from typing import Sequence, Tuple

from core.validation import DomainError, check_non_negative, check_subset_size


def factorial(n: int) -> int:
    """Computes ``n!`` exactly.

    Args:
        n (int): Non-negative integer.

    Returns:
        int: ``n!``; ``factorial(0) == factorial(1) == 1``.
    """
    check_non_negative(n, "n")
    return math.factorial(n)


def binomial(a: int, b: int) -> int:
    """Computes the binomial coefficient ``C(a, b)``.

    Uses the multiplicative formula, so no intermediate value is larger than
    ``C(a, b) * b``; no factorial is ever materialized.

    Args:
        a (int): Universe size, ``a >= 0``.
        b (int): Subset size, ``0 <= b <= a``.

    Returns:
        int: ``C(a, b)``.

    Raises:
        DomainError: If ``b > a`` or either argument is negative.
    """
    check_non_negative(a, "a")
    check_non_negative(b, "b")
    if b > a:
        raise DomainError(f"binomial({a}, {b}): b must not exceed a")

    b = min(b, a - b)
    result = 1
    for i in range(1, b + 1):
        # Exact at every step: result is C(a - b + i, i) afterwards
        result = result * (a - b + i) // i
    return result


def unrank_combination(upper: int, size: int, rank: int) -> Tuple[int, ...]:
    """Returns the ``rank``-th ``size``-subset of ``{0, ..., upper - 1}``.

    Subsets are strictly increasing tuples in ascending lexicographic order,
    so rank ``0`` is ``(0, 1, ..., size - 1)`` and rank
    ``binomial(upper, size) - 1`` is ``(upper - size, ..., upper - 1)``.

    Each leading position is found by skipping whole blocks of subsets that
    share a smaller prefix; the last position follows from what is left of
    the rank.

    Args:
        upper (int): Universe size (number of generators).
        size (int): Subset size, ``0 <= size <= upper``.
        rank (int): ``0 <= rank < binomial(upper, size)``.

    Returns:
        Tuple[int, ...]: The subset in canonical (increasing) form.

    Raises:
        DomainError: On an invalid size or rank.
    """
    check_subset_size(upper, size)
    total = binomial(upper, size)
    if rank < 0 or rank >= total:
        raise DomainError(
            f"rank {rank} out of range for {total} subsets of size {size} "
            f"from {upper}"
        )

    if size == 0:
        return ()

    # Work with 1-based values; shifted down on return
    combination = [0] * size
    skipped = 0
    block = 0
    for i in range(size - 1):
        combination[i] = combination[i - 1] if i > 0 else 0
        while True:
            combination[i] += 1
            block = binomial(upper - combination[i], size - i - 1)
            skipped += block
            if skipped > rank:
                break
        skipped -= block

    previous = combination[size - 2] if size > 1 else 0
    combination[size - 1] = previous + rank + 1 - skipped

    return tuple(c - 1 for c in combination)


def rank_combination(upper: int, indices: Sequence[int]) -> int:
    """Inverse of :func:`unrank_combination`.

    Args:
        upper (int): Universe size.
        indices (Sequence[int]): Strictly increasing subset of ``[0, upper)``.

    Returns:
        int: Lexicographic rank among subsets of the same size.
    """
    size = len(indices)
    check_subset_size(upper, size)
    rank = 0
    previous = -1
    for i, value in enumerate(indices):
        if value <= previous or value >= upper:
            raise DomainError(
                f"indices {tuple(indices)} are not a strictly increasing "
                f"subset of [0, {upper})"
            )
        for skipped in range(previous + 1, value):
            rank += binomial(upper - skipped - 1, size - i - 1)
        previous = value
    return rank
