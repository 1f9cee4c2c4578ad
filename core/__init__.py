# Oddgamma: Odd Clifford Group Gamma Matrices (C) 2026 The Oddgamma Authors
# Licensed under the Apache License, Version 2.0

"""Core kernel for the big gamma matrices of the odd Clifford group.

Provides exact combinatorics, the combinatorial number system, the
antisymmetrizer with H/L classification, the small gamma representation and
the ordered big gamma collection.
"""

from .algebra import CliffordAlgebra, unity
from .antisymmetry import (
    GammaType,
    antisymmetric_product,
    antisymmetrize,
    classify,
    commutator,
    count_types,
)
from .combinatorics import binomial, factorial, rank_combination, unrank_combination
from .device import resolve_device
from .odd_group import (
    GammaEntry,
    OddCliffordGroup,
    Signature,
    build_gamma_collection,
    format_matrix,
)
from .validation import DomainError

__all__ = [
    # combinatorics
    "factorial",
    "binomial",
    "unrank_combination",
    "rank_combination",
    # antisymmetry
    "GammaType",
    "commutator",
    "antisymmetrize",
    "antisymmetric_product",
    "classify",
    "count_types",
    # algebra
    "CliffordAlgebra",
    "unity",
    # collection
    "Signature",
    "GammaEntry",
    "OddCliffordGroup",
    "build_gamma_collection",
    "format_matrix",
    # device / validation
    "resolve_device",
    "DomainError",
]
