# Oddgamma: Odd Clifford Group Gamma Matrices (C) 2026 The Oddgamma Authors
# Licensed under the Apache License, Version 2.0

"""Big gamma matrices of a (p, q) signature.

Given the small gammas ``gamma_mu`` of type (p, q), builds the collection

    Gamma = { 1, gamma_mu, gamma_{mu nu}, gamma_{mu nu rho}, ... }

ordered by the number of indices and, within a fixed number, by the
lexicographic rank of the index subset.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Sequence, Tuple

import torch

from core.algebra import CliffordAlgebra
from core.antisymmetry import (
    GammaType,
    antisymmetric_product,
    antisymmetrize,
    classify,
    count_types,
)
from core.combinatorics import binomial, rank_combination, unrank_combination
from core.validation import DomainError, as_indices, check_non_negative
from log import get_logger

logger = get_logger(__name__)

# Above this many generators the n! expansion dominates the build time
PRACTICAL_MAX_GENERATORS = 8

NORMALIZATIONS = {
    "commutator": antisymmetrize,
    "unit": antisymmetric_product,
}


@dataclass(frozen=True)
class Signature:
    """Signature (p, q) of the algebra; ``d = p + q`` generators."""

    p: int
    q: int = 0

    def __post_init__(self) -> None:
        check_non_negative(self.p, "p")
        check_non_negative(self.q, "q")

    @property
    def d(self) -> int:
        return self.p + self.q


@dataclass(frozen=True)
class GammaEntry:
    """One big gamma matrix with its origin.

    Attributes:
        position: Index in the collection.
        size: Number of generator indices.
        rank: Lexicographic rank of ``indices`` among subsets of ``size``.
        indices: Increasing generator indices.
        kind: H/L type, ``None`` for the identity.
        matrix: The ``k x k`` matrix.
    """

    position: int
    size: int
    rank: int
    indices: Tuple[int, ...]
    kind: Optional[GammaType]
    matrix: torch.Tensor = field(repr=False, compare=False)


def build_gamma_collection(
    generators: Sequence[torch.Tensor],
    p: int,
    normalization: str = "commutator",
    odd_only: bool = False,
    dim: Optional[int] = None,
    dtype=torch.complex128,
    device='cpu',
) -> Tuple[GammaEntry, ...]:
    """Builds the ordered big gamma collection from explicit generators.

    Args:
        generators (Sequence[torch.Tensor]): The ``d`` base matrices.
        p (int): Number of H-type generators (indices below ``p``).
        normalization (str): ``'commutator'`` (default) or ``'unit'``.
        odd_only (bool): Keep only products of an odd number of generators.
        dim (int, optional): Matrix dimension when ``generators`` is empty.
        dtype (torch.dtype, optional): Identity dtype when ``generators`` is empty.
        device (str, optional): Identity device when ``generators`` is empty.

    Returns:
        Tuple[GammaEntry, ...]: ``2^d`` entries (``2^(d-1)`` if ``odd_only``
        and ``d > 0``), ordered by (size, rank).

    Raises:
        DomainError: On an unknown normalization or malformed generators.
    """
    if normalization not in NORMALIZATIONS:
        raise DomainError(
            f"Unknown normalization: {normalization}. "
            f"Available: {list(NORMALIZATIONS.keys())}"
        )
    product = NORMALIZATIONS[normalization]
    d = len(generators)

    entries: List[GammaEntry] = []
    for size in range(d + 1):
        if odd_only and size % 2 == 0:
            continue
        count = binomial(d, size)
        for rank in range(count):
            indices = unrank_combination(d, size, rank)
            matrix = product(generators, indices, dim=dim, dtype=dtype, device=device)
            kind = classify(indices, p) if size > 0 else None
            entries.append(GammaEntry(len(entries), size, rank, indices, kind, matrix))
        logger.debug("size %d: %d matrices", size, count)

    return tuple(entries)


class OddCliffordGroup:
    """Big gamma matrices of a signature, built once at construction.

    Attributes:
        signature (Signature): The (p, q) signature.
        algebra (CliffordAlgebra): Provider of the small gammas.
        normalization (str): Antisymmetrizer normalization.
        odd_only (bool): Whether even products were left out.
        entries (Tuple[GammaEntry, ...]): The ordered collection.
    """

    def __init__(
        self,
        signature: Signature,
        normalization: str = "commutator",
        odd_only: bool = False,
        device='cpu',
        dtype=torch.complex128,
    ):
        """Builds the collection for ``signature``.

        Args:
            signature (Signature): The (p, q) signature.
            normalization (str, optional): ``'commutator'`` or ``'unit'``.
            odd_only (bool, optional): Drop even products. Defaults to False.
            device (str, optional): Tensor device. Defaults to 'cpu'.
            dtype (torch.dtype, optional): Complex dtype.
        """
        self.signature = signature
        self.normalization = normalization
        self.odd_only = odd_only

        if signature.d > PRACTICAL_MAX_GENERATORS:
            logger.warning(
                "%d generators: antisymmetrization costs up to %d! products per matrix",
                signature.d, signature.d,
            )

        self.algebra = CliffordAlgebra(signature.p, signature.q, device=device, dtype=dtype)
        self.entries = build_gamma_collection(
            self.algebra.generators,
            signature.p,
            normalization=normalization,
            odd_only=odd_only,
            dim=self.algebra.dim,
            dtype=self.algebra.dtype,
            device=self.algebra.device,
        )
        logger.info(
            "Built %d big gammas for (p, q) = (%d, %d), dimension %d",
            len(self.entries), signature.p, signature.q, self.algebra.dim,
        )

    def __len__(self) -> int:
        return len(self.entries)

    def __getitem__(self, position: int) -> torch.Tensor:
        return self.entries[position].matrix

    def __iter__(self) -> Iterator[torch.Tensor]:
        return iter(self.matrices)

    def __repr__(self):
        return (
            f"OddCliffordGroup(p={self.signature.p}, q={self.signature.q}, "
            f"size={len(self)}, normalization={self.normalization!r})"
        )

    def __str__(self):
        blocks = []
        for entry in self.entries:
            blocks.append(f" Gamma {entry.position + 1}:\n{format_matrix(entry.matrix)}\n")
        return "\n".join(blocks)

    @property
    def dim(self) -> int:
        """Dimension ``k`` of every matrix."""
        return self.algebra.dim

    @property
    def matrices(self) -> Tuple[torch.Tensor, ...]:
        return tuple(entry.matrix for entry in self.entries)

    @property
    def sizes(self) -> Tuple[int, ...]:
        """Number of generator indices of each entry, in collection order."""
        return tuple(entry.size for entry in self.entries)

    def entry_for(self, indices: Sequence[int]) -> GammaEntry:
        """Looks up the entry of a subset of generator indices (any order)."""
        d = self.signature.d
        ordered = tuple(sorted(as_indices(indices, "indices")))
        size = len(ordered)
        if self.odd_only and size % 2 == 0:
            raise DomainError(f"{ordered}: even products are not in an odd-only collection")
        rank = rank_combination(d, ordered)

        # Entries of smaller sizes come first
        offset = sum(
            binomial(d, s) for s in range(size)
            if not (self.odd_only and s % 2 == 0)
        )
        return self.entries[offset + rank]

    def type_counts(self) -> Counter:
        """Number of H and L products in the collection (identity excluded)."""
        return count_types((entry.indices for entry in self.entries), self.signature.p)


def format_matrix(matrix: torch.Tensor, precision: int = 4) -> str:
    """Renders a complex matrix row by row as ``re+imj`` entries."""
    rows = []
    for row in matrix.tolist():
        cells = []
        for value in row:
            value = complex(value)
            cells.append(f"({value.real:+.{precision}f}{value.imag:+.{precision}f}j)")
        rows.append(" ".join(cells))
    return "\n".join(rows)
