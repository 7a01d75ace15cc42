# Blades: Sparse Clifford Algebra Engine (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0 | "Unbending" Paradigm

from typing import Iterable, Optional, Tuple

from blades.blade import blade_sign
from blades.multivector import Multivector
from blades.signature import EuclideanSignature, MetricSignature, MinkowskiSignature
from blades.validation import MASK_WIDTH, check_basis_index

_SIGN_CACHE_SIZE = 1 << 16


class CliffordAlgebra:
    """Sparse Clifford algebra bound to one metric signature.

    The signature is chosen once per algebra; every multivector built here
    carries the algebra and only combines with multivectors of an equal
    signature.

    Attributes:
        signature (MetricSignature): Bilinear-form policy.
        n (int): Number of basis vectors (``signature.max_dimension()``).
    """

    def __init__(self, signature: MetricSignature):
        """Binds the algebra to a signature.

        Args:
            signature (MetricSignature): Policy supplying ``value(i)`` and
                ``max_dimension()``.
        """
        if not isinstance(signature, MetricSignature):
            raise TypeError(
                f"signature must be a MetricSignature, got {type(signature).__name__}"
            )
        self.signature = signature
        self.n = signature.max_dimension()
        self._signs = {}

    def __eq__(self, other):
        if not isinstance(other, CliffordAlgebra):
            return NotImplemented
        return self.signature == other.signature

    def __hash__(self):
        # Signatures need not be hashable; equal signatures share type and size.
        return hash((type(self.signature), self.n))

    def __repr__(self):
        return f"CliffordAlgebra({self.signature})"

    def create(self, blades: Iterable[Tuple[float, int]] = ()) -> Multivector:
        """Builds a multivector, merging ``(coefficient, mask)`` pairs in order.

        Args:
            blades (iterable): Blades to insert.

        Returns:
            Multivector: Multivector with unique masks.
        """
        return Multivector(self, blades)

    def scalar(self, value: float) -> Multivector:
        """The grade-0 multivector ``value * 1``."""
        return Multivector(self, [(value, 0)])

    def basis_vector(self, i: int) -> Multivector:
        """Unit basis vector ``e_i``.

        Args:
            i (int): Basis index, ``0 <= i < n``.

        Returns:
            Multivector: Single blade ``1.0 * e(1 << i)``.

        Raises:
            BasisIndexError: If *i* is outside the signature.
        """
        check_basis_index(i, min(self.n, MASK_WIDTH), "basis_vector(i)")
        return Multivector(self, [(1.0, 1 << i)])

    def basis(self) -> Tuple[Multivector, ...]:
        """All basis vectors ``e_0 .. e_(n-1)``."""
        return tuple(self.basis_vector(i) for i in range(self.n))

    def pseudoscalar(self, n: Optional[int] = None) -> Multivector:
        """Geometric product ``e_0 e_1 ... e_(n-1)``.

        Args:
            n (int, optional): Number of leading basis vectors. Defaults to
                the full dimension.

        Returns:
            Multivector: The top-grade blade (the scalar 1 when ``n == 0``).
        """
        n = self.n if n is None else n
        result = self.scalar(1.0)
        for i in range(n):
            result = result * self.basis_vector(i)
        return result

    def sign(self, a: int, b: int) -> int:
        """Sign of ``e_A * e_B`` under this algebra's signature, memoised per pair."""
        key = (a, b)
        if key not in self._signs:
            if len(self._signs) >= _SIGN_CACHE_SIZE:
                self._signs.clear()
            self._signs[key] = blade_sign(self.signature, a, b)
        return self._signs[key]

    def commutator(self, A: Multivector, B: Multivector) -> Multivector:
        """Computes AB - BA."""
        return Multivector.commutator(A, B)

    def anticommutator(self, A: Multivector, B: Multivector) -> Multivector:
        """Computes AB + BA."""
        return Multivector.anticommutator(A, B)


# Predefined algebras
CliffordAlgebra64 = CliffordAlgebra(EuclideanSignature(64))
EuclideanAlgebra = CliffordAlgebra(EuclideanSignature(4))
SpacetimeAlgebra = CliffordAlgebra(MinkowskiSignature())
