# Blades: Sparse Clifford Algebra Engine (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0 | "Unbending" Paradigm

"""Sparse Multivector value type.

A multivector is a sum of scaled basis blades with unique masks.  It
supports natural mathematical syntax: ``A + B``, ``A - B``, ``A * B``
(geometric product), ``2.0 * A`` and ``~A`` (reversion).

Multivectors never change once handed to a caller; every operation
builds a fresh result.
"""

from typing import Iterable, Iterator, List, Tuple

from blades.blade import Blade, grade, reverse_sign
from blades.validation import MASK_WIDTH, check_mask, check_same_algebra


class Multivector:
    """Sparse multivector over a :class:`~blades.algebra.CliffordAlgebra`.

    Blades are folded by mask on insertion: equal masks add their
    coefficients, a literal zero coefficient is never stored, but a blade
    whose coefficients cancel to zero is kept.

    Attributes:
        algebra (CliffordAlgebra): The algebra the multivector lives in.
    """

    __slots__ = ("algebra", "_blades")

    def __init__(self, algebra, blades: Iterable[Tuple[float, int]] = ()):
        """Builds a multivector by merging *blades* in order.

        Args:
            algebra (CliffordAlgebra): The algebra instance.
            blades (iterable): ``(coefficient, mask)`` pairs or :class:`Blade`.
        """
        self.algebra = algebra
        self._blades = {}
        width = min(algebra.n, MASK_WIDTH)
        for coefficient, mask in blades:
            check_mask(mask, width=width)
            self._add_blade(float(coefficient), mask)

    def _empty(self) -> "Multivector":
        return Multivector(self.algebra)

    def _copy(self) -> "Multivector":
        result = self._empty()
        result._blades = dict(self._blades)
        return result

    def _add_blade(self, coefficient: float, mask: int) -> None:
        if coefficient == 0.0:
            return
        if mask in self._blades:
            self._blades[mask] += coefficient
        else:
            self._blades[mask] = coefficient

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    @property
    def blades(self) -> Tuple[Blade, ...]:
        """Blades in insertion order."""
        return tuple(Blade(c, m) for m, c in self._blades.items())

    def __iter__(self) -> Iterator[Blade]:
        return iter(self.blades)

    def __len__(self) -> int:
        return len(self._blades)

    def coefficient(self, mask: int) -> float:
        """Coefficient of the blade with *mask*, 0.0 if absent."""
        return self._blades.get(mask, 0.0)

    def is_zero(self) -> bool:
        """True for the empty multivector (no stored blades at all)."""
        return not self._blades

    def grades(self) -> List[int]:
        """Sorted grades present."""
        return sorted({grade(m) for m in self._blades})

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def __add__(self, other):
        """Blade-wise addition."""
        if not isinstance(other, Multivector):
            return NotImplemented
        check_same_algebra(self, other, "A + B")
        result = self._copy()
        for mask, coefficient in other._blades.items():
            result._add_blade(coefficient, mask)
        return result

    def __sub__(self, other):
        """Blade-wise subtraction."""
        if not isinstance(other, Multivector):
            return NotImplemented
        check_same_algebra(self, other, "A - B")
        result = self._copy()
        for mask, coefficient in other._blades.items():
            result._add_blade(-coefficient, mask)
        return result

    def __neg__(self):
        return self * -1.0

    def _scale(self, scalar) -> "Multivector":
        result = self._empty()
        for mask, coefficient in self._blades.items():
            result._add_blade(scalar * coefficient, mask)
        return result

    def __mul__(self, other):
        """Geometric product (A * B) or scaling (A * s)."""
        if isinstance(other, Multivector):
            return self.geometric_product(other)
        elif isinstance(other, (int, float)) and not isinstance(other, bool):
            return self._scale(other)
        else:
            return NotImplemented

    def __rmul__(self, other):
        """Scaling from the left (s * A)."""
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return self._scale(other)
        return NotImplemented

    def geometric_product(self, other: "Multivector") -> "Multivector":
        """Computes the geometric product blade pair by blade pair.

        ``e_A * e_B = sign(A, B) * e_(A ^ B)``, the sign coming from
        reordering and metric contraction (see :func:`blades.blade.blade_sign`).

        Args:
            other (Multivector): Right operand.

        Returns:
            Multivector: The product AB.
        """
        check_same_algebra(self, other, "A * B")
        sign_of = self.algebra.sign
        result = self._empty()
        for a_mask, a_coeff in self._blades.items():
            for b_mask, b_coeff in other._blades.items():
                sign = sign_of(a_mask, b_mask)
                result._add_blade(a_coeff * b_coeff * sign, a_mask ^ b_mask)
        return result

    def reverse(self) -> "Multivector":
        """Reversion: each grade-k blade picks up ``(-1)^(k(k-1)/2)``."""
        result = self._empty()
        for mask, coefficient in self._blades.items():
            result._add_blade(coefficient * reverse_sign(mask), mask)
        return result

    def __invert__(self):
        """Reversion (~A)."""
        return self.reverse()

    @staticmethod
    def commutator(A: "Multivector", B: "Multivector") -> "Multivector":
        """AB - BA."""
        return A * B - B * A

    @staticmethod
    def anticommutator(A: "Multivector", B: "Multivector") -> "Multivector":
        """AB + BA."""
        return A * B + B * A

    # ------------------------------------------------------------------
    # Comparison and display
    # ------------------------------------------------------------------

    def _terms(self):
        # Cancelled blades are stored but carry no value.
        return {m: c for m, c in self._blades.items() if c != 0.0}

    def __eq__(self, other):
        """Value equality: same algebra, same non-zero coefficients per mask."""
        if not isinstance(other, Multivector):
            return NotImplemented
        return self.algebra == other.algebra and self._terms() == other._terms()

    def __hash__(self):
        return hash((self.algebra, frozenset(self._terms().items())))

    def __str__(self):
        return "\n".join(str(b) for b in self.blades)

    def __repr__(self):
        terms = ", ".join(f"({c!r}, {m})" for m, c in self._blades.items())
        return f"Multivector([{terms}], signature={self.algebra.signature})"
