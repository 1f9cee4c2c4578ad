# Oddgamma: Odd Clifford Group Gamma Matrices (C) 2026 The Oddgamma Authors
# Licensed under the Apache License, Version 2.0

"""Antisymmetrized products of gamma matrices and their H/L type.

Two normalizations of the antisymmetrizer are provided. Both expand along
the first factor,

    A(s) = c_n * sum_i (-1)^i M[s_i] @ A(s without s_i),

and differ only in the base case and ``c_n``:

* :func:`antisymmetrize` starts from the plain commutator at two indices and
  uses ``c_n = 1 / (2n)``. This is the normalization of the big gamma
  collection.
* :func:`antisymmetric_product` starts from ``A((a,)) = M[a]`` and uses
  ``c_n = 1 / n``, which equals ``(1/n!) sum_sigma sgn(sigma) M[s_sigma(0)]
  ... M[s_sigma(n-1)]``. For anticommuting generators this is just the
  ordered product.

For any matrices and ``n >= 2`` the two are related by
``antisymmetrize(s) == 2^(3 - n) * antisymmetric_product(s)``, so the first
halves at every index beyond three.

The expansion costs ``n!`` matrix products; collections are practical up to
about eight generators.
"""

import enum
from collections import Counter
from typing import Callable, Iterable, Optional, Sequence, Tuple

import torch

from core.validation import DomainError, as_indices, check_generators, check_sequence


class GammaType(str, enum.Enum):
    """Structural class of a product: Hermitian (H) or anti-Hermitian (L)."""

    H = "H"
    L = "L"


def commutator(a: torch.Tensor, b: torch.Tensor) -> torch.Tensor:
    """``[a, b] = ab - ba``."""
    return a @ b - b @ a


def _prepare(matrices, sequence, dim, dtype, device) -> Tuple[Tuple[int, ...], torch.Tensor]:
    """Validates the arguments and returns the sequence and the identity.

    The identity follows the generators; ``dim``, ``dtype`` and ``device``
    only describe it when there are none.
    """
    if len(matrices) > 0:
        k = check_generators(matrices)
        reference = matrices[0]
        identity = torch.eye(k, dtype=reference.dtype, device=reference.device)
    elif dim is not None:
        identity = torch.eye(dim, dtype=dtype, device=device)
    else:
        raise DomainError("no generators and no dimension given for the identity")

    sequence = as_indices(sequence)
    check_sequence(sequence, len(matrices))
    return sequence, identity


def _expand(matrices, sequence, recurse: Callable, divisor: int) -> torch.Tensor:
    """Alternating expansion along the first factor, divided by *divisor*."""
    result = torch.zeros_like(matrices[sequence[0]])
    for i, index in enumerate(sequence):
        rest = sequence[:i] + sequence[i + 1:]
        term = matrices[index] @ recurse(matrices, rest)
        if i % 2 == 0:
            result = result + term
        else:
            result = result - term
    return result / divisor


def _commutator_normalized(matrices, sequence) -> torch.Tensor:
    n = len(sequence)
    if n == 1:
        return matrices[sequence[0]]
    if n == 2:
        return commutator(matrices[sequence[0]], matrices[sequence[1]])
    return _expand(matrices, sequence, _commutator_normalized, 2 * n)


def _unit_normalized(matrices, sequence) -> torch.Tensor:
    n = len(sequence)
    if n == 1:
        return matrices[sequence[0]]
    return _expand(matrices, sequence, _unit_normalized, n)


def antisymmetrize(
    matrices: Sequence[torch.Tensor],
    sequence: Sequence[int],
    dim: Optional[int] = None,
    dtype=torch.complex128,
    device='cpu',
) -> torch.Tensor:
    """Fully antisymmetrized product of ``matrices`` indexed by ``sequence``.

    * no index: the identity,
    * one index: the matrix itself,
    * two indices: the commutator,
    * ``n > 2`` indices: ``1/(2n) sum_i (-1)^i M[s_i] A(s without s_i)``.

    Args:
        matrices (Sequence[torch.Tensor]): The ``d`` base matrices, all ``k x k``.
        sequence (Sequence[int]): Distinct indices into ``matrices``, any order.
        dim (int, optional): Identity dimension when ``matrices`` is empty.
        dtype (torch.dtype, optional): Identity dtype when ``matrices`` is empty.
        device (str, optional): Identity device when ``matrices`` is empty.

    Returns:
        torch.Tensor: ``k x k`` matrix.

    Raises:
        DomainError: On a non-integer, out-of-range or repeated index, more indices than
            matrices, or matrices of mismatched dimension.
    """
    sequence, identity = _prepare(matrices, sequence, dim, dtype, device)
    if not sequence:
        return identity
    return _commutator_normalized(matrices, sequence)


def antisymmetric_product(
    matrices: Sequence[torch.Tensor],
    sequence: Sequence[int],
    dim: Optional[int] = None,
    dtype=torch.complex128,
    device='cpu',
) -> torch.Tensor:
    """Unit-normalized antisymmetrizer ``M[s_0 ... s_(n-1)]``.

    Same arguments and errors as :func:`antisymmetrize`.
    """
    sequence, identity = _prepare(matrices, sequence, dim, dtype, device)
    if not sequence:
        return identity
    return _unit_normalized(matrices, sequence)


def classify(sequence: Sequence[int], p: int) -> GammaType:
    """H/L type of the product indexed by ``sequence``.

    Indices below ``p`` are H-type generators, the rest L-type. A single
    index keeps its own type; a product of ``n > 1`` is H when
    ``n(n-1)/2 + #L`` is even. With Hermitian H and anti-Hermitian L
    generators, H products are Hermitian and L products anti-Hermitian.

    Raises:
        DomainError: For an empty sequence.
    """
    n = len(sequence)
    if n == 0:
        raise DomainError("classify: the empty product has no H/L type")
    if n == 1:
        return GammaType.H if sequence[0] < p else GammaType.L

    exponent = n * (n - 1) // 2 + sum(1 for i in sequence if i >= p)
    return GammaType.H if exponent % 2 == 0 else GammaType.L


def count_types(sequences: Iterable[Sequence[int]], p: int) -> Counter:
    """Number of H and L products among the non-empty ``sequences``."""
    counts = Counter({GammaType.H: 0, GammaType.L: 0})
    for sequence in sequences:
        if len(sequence) > 0:
            counts[classify(sequence, p)] += 1
    return counts
