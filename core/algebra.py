# Oddgamma: Odd Clifford Group Gamma Matrices (C) 2026 The Oddgamma Authors
# Licensed under the Apache License, Version 2.0

import torch
from functools import reduce
from typing import List

from core.validation import check_non_negative


def unity(k: int, device='cpu', dtype=torch.complex128) -> torch.Tensor:
    """Identity matrix of dimension ``k``."""
    return torch.eye(k, device=device, dtype=dtype)


class CliffordAlgebra:
    """Matrix representation of the small gamma matrices of type (p, q).

    The ``n = p + q`` generators pairwise anticommute and satisfy
    ``gamma_i^2 = +1`` for ``i < p`` (type H, Hermitian) and
    ``gamma_i^2 = -1`` for ``i >= p`` (type L, anti-Hermitian).

    Generators are built as a Jordan-Wigner chain of Pauli matrices on
    ``n // 2`` qubits; an odd ``n`` adds the chirality ``Z x ... x Z``.

    Attributes:
        p (int): Number of generators squaring to +1.
        q (int): Number of generators squaring to -1.
        n (int): Total number of generators (p + q).
        dim (int): Matrix dimension ``2^(n // 2)``.
        device (str): Device of the generator tensors.
        dtype (torch.dtype): Complex dtype of the generator tensors.
    """

    def __init__(self, p: int, q: int = 0, device='cpu', dtype=torch.complex128):
        """Initialize the algebra and build its generators.

        Args:
            p (int): Generators squaring to +1.
            q (int, optional): Generators squaring to -1. Defaults to 0.
            device (str, optional): Tensor device. Defaults to 'cpu'.
            dtype (torch.dtype, optional): Complex dtype. Defaults to complex128.
        """
        check_non_negative(p, "p")
        check_non_negative(q, "q")

        self.p, self.q = p, q
        self.n = p + q
        self.dim = 2 ** (self.n // 2)
        self.device = device
        self.dtype = dtype

        self.generators = self._build_generators()

    def __len__(self) -> int:
        return self.n

    def __getitem__(self, i: int) -> torch.Tensor:
        return self.generators[i]

    def __repr__(self):
        return f"CliffordAlgebra(p={self.p}, q={self.q}, dim={self.dim})"

    def unity(self) -> torch.Tensor:
        """Identity of the representation space."""
        return unity(self.dim, device=self.device, dtype=self.dtype)

    def metric(self) -> torch.Tensor:
        """Diagonal metric ``eta = diag(+1 x p, -1 x q)`` (real)."""
        signs = [1.0] * self.p + [-1.0] * self.q
        return torch.diag(torch.tensor(signs, dtype=torch.float64, device=self.device))

    def _paulis(self):
        kw = dict(device=self.device, dtype=self.dtype)
        eye = torch.eye(2, **kw)
        x = torch.tensor([[0, 1], [1, 0]], **kw)
        y = torch.tensor([[0, -1j], [1j, 0]], **kw)
        z = torch.tensor([[1, 0], [0, -1]], **kw)
        return eye, x, y, z

    def _build_generators(self) -> List[torch.Tensor]:
        """Builds the ``n`` generators, H-type first."""
        qubits = self.n // 2
        eye, x, y, z = self._paulis()
        one = torch.ones(1, 1, device=self.device, dtype=self.dtype)

        def chain(factors):
            return reduce(torch.kron, factors, one)

        hermitian = []
        for j in range(qubits):
            tail = [eye] * (qubits - j - 1)
            hermitian.append(chain([z] * j + [x] + tail))
            hermitian.append(chain([z] * j + [y] + tail))
        if self.n % 2 == 1:
            hermitian.append(chain([z] * qubits))

        # Multiplying by i flips the square to -1 and makes the generator anti-Hermitian
        return [
            g if i < self.p else 1j * g
            for i, g in enumerate(hermitian)
        ]
