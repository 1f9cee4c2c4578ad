# Oddgamma: Odd Clifford Group Gamma Matrices (C) 2026 The Oddgamma Authors
# Licensed under the Apache License, Version 2.0

"""Input validation for index subsets and generator sets.

Unlike tensor shape checks, these guard combinatorial preconditions whose
violation would silently produce a wrong collection, so they always raise
:class:`DomainError` instead of asserting.
"""

import operator
from typing import Sequence, Tuple

import torch


class DomainError(ValueError):
    """An argument lies outside the domain of a combinatorial operation."""


def check_non_negative(value: int, name: str) -> None:
    """Raise if *value* is negative."""
    if value < 0:
        raise DomainError(f"{name} must be non-negative, got {value}")


def check_subset_size(upper: int, size: int) -> None:
    """Raise unless ``0 <= size <= upper``."""
    check_non_negative(upper, "upper")
    check_non_negative(size, "size")
    if size > upper:
        raise DomainError(
            f"subset size {size} exceeds the number of generators {upper}"
        )


def check_sequence(sequence: Sequence[int], d: int, name: str = "sequence") -> None:
    """Raise unless *sequence* holds at most *d* distinct indices in ``[0, d)``."""
    if len(sequence) > d:
        raise DomainError(
            f"{name}: {len(sequence)} indices but only {d} generators"
        )
    for index in sequence:
        if index < 0 or index >= d:
            raise DomainError(
                f"{name}: index {index} out of range for {d} generators"
            )
    if len(set(sequence)) != len(sequence):
        raise DomainError(f"{name}: repeated index in {tuple(sequence)}")


def check_generators(matrices: Sequence[torch.Tensor], name: str = "matrices") -> int:
    """Check that *matrices* are square and of one shared dimension.

    Returns:
        int: The shared dimension ``k``.
    """
    if len(matrices) == 0:
        raise DomainError(f"{name}: no generators to take the dimension from")
    k = matrices[0].shape[-1]
    for i, m in enumerate(matrices):
        if m.ndim != 2 or m.shape[0] != m.shape[1]:
            raise DomainError(
                f"{name}[{i}]: expected a square matrix, got shape {tuple(m.shape)}"
            )
        if m.shape[0] != k:
            raise DomainError(
                f"{name}[{i}]: dimension {m.shape[0]} differs from {k}"
            )
    return k


def as_indices(sequence: Sequence[int], name: str = "sequence") -> Tuple[int, ...]:
    """Return *sequence* as a tuple of ints; floats and other non-integers raise."""
    try:
        return tuple(operator.index(i) for i in sequence)
    except TypeError as exc:
        raise DomainError(
            f"{name}: indices must be integers, got {list(sequence)}"
        ) from exc
