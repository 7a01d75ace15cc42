"""Tests for metric signatures and the basis product sign rule.

Verifies the sign rule for:
- Euclidean Cl(n, 0): anticommuting vectors, unit squares
- The fixed (1, 0, 0, 0) table: degenerate entries flip, never annihilate
- General tables with negative entries
"""

import itertools
from dataclasses import dataclass, field

import pytest

from blades.algebra import CliffordAlgebra, CliffordAlgebra64, SpacetimeAlgebra
from blades.blade import blade_sign, grade, reordering_parity, reverse_sign
from blades.signature import (
    EuclideanSignature,
    MetricSignature,
    MinkowskiSignature,
    TableSignature,
)
from blades.validation import BasisIndexError


# ── Euclidean signatures ──────────────────────────────────────────────

class TestEuclidean:

    @pytest.fixture(params=[1, 2, 3, 5, 8])
    def algebra(self, request):
        return CliffordAlgebra(EuclideanSignature(request.param))

    def test_vectors_square_to_one(self, algebra):
        for e in algebra.basis():
            assert e * e == algebra.scalar(1.0)

    def test_orthogonal_vectors_anticommute(self, algebra):
        basis = algebra.basis()
        for i, j in itertools.permutations(range(algebra.n), 2):
            assert basis[i] * basis[j] == -(basis[j] * basis[i])

    def test_product_is_associative_on_basis_blades(self, algebra):
        masks = range(min(1 << algebra.n, 16))
        for a, b, c in itertools.product(masks, repeat=3):
            A = algebra.create([(1.0, a)])
            B = algebra.create([(1.0, b)])
            C = algebra.create([(1.0, c)])
            assert (A * B) * C == A * (B * C)

    def test_scalar_is_identity(self, algebra):
        one = algebra.scalar(1.0)
        for e in algebra.basis():
            assert one * e == e
            assert e * one == e

    def test_basis_vector_bounds(self, algebra):
        with pytest.raises(BasisIndexError):
            algebra.basis_vector(algebra.n)
        with pytest.raises(BasisIndexError):
            algebra.basis_vector(-1)

    def test_value_is_always_one(self, algebra):
        assert algebra.signature.values() == (1,) * algebra.n


class TestEuclidean64:

    def test_highest_basis_vector(self):
        e63 = CliffordAlgebra64.basis_vector(63)
        assert e63.blades[0].mask == 1 << 63
        assert e63 * e63 == CliffordAlgebra64.scalar(1.0)

    def test_index_64_rejected(self):
        with pytest.raises(BasisIndexError):
            CliffordAlgebra64.basis_vector(64)

    @pytest.mark.parametrize("dimension", [-1, 65, 2.5, True])
    def test_invalid_dimension(self, dimension):
        with pytest.raises(ValueError):
            EuclideanSignature(dimension)


# ── Fixed spacetime table ─────────────────────────────────────────────

class TestMinkowski:

    def test_table(self):
        sig = MinkowskiSignature()
        assert sig.max_dimension() == 4
        assert sig.values() == (1, 0, 0, 0)

    def test_table_is_fixed(self):
        with pytest.raises(ValueError):
            MinkowskiSignature((1, -1, -1, -1))

    @pytest.mark.parametrize("i,expected", [(0, 1.0), (1, -1.0), (2, -1.0), (3, -1.0)])
    def test_squares(self, i, expected):
        e = SpacetimeAlgebra.basis_vector(i)
        assert e * e == SpacetimeAlgebra.scalar(expected)

    def test_vectors_anticommute(self):
        basis = SpacetimeAlgebra.basis()
        for i, j in itertools.permutations(range(4), 2):
            assert basis[i] * basis[j] == -(basis[j] * basis[i])

    def test_value_out_of_range(self):
        with pytest.raises(BasisIndexError):
            MinkowskiSignature().value(4)

    def test_basis_vector_out_of_range(self):
        with pytest.raises(BasisIndexError):
            SpacetimeAlgebra.basis_vector(4)


# ── General tables ────────────────────────────────────────────────────

class TestTable:

    def test_negative_entry(self):
        alg = CliffordAlgebra(TableSignature((1, -1)))
        e0, e1 = alg.basis()
        assert e1 * e1 == alg.scalar(-1.0)
        # (e0 e1)^2 = -e0 e0 e1 e1 = +1 when e1^2 = -1
        assert (e0 * e1) * (e0 * e1) == alg.scalar(1.0)

    def test_list_table_is_hashable(self):
        sig = TableSignature([1, -1, 0])
        assert sig.table == (1, -1, 0)
        assert hash(sig) == hash(TableSignature((1, -1, 0)))

    def test_table_too_long(self):
        with pytest.raises(ValueError):
            TableSignature((1,) * 65)

    def test_algebra_requires_signature(self):
        with pytest.raises(TypeError):
            CliffordAlgebra((1, 0, 0, 0))

    def test_custom_signature_subclass(self):
        class Negative(MetricSignature):
            def max_dimension(self):
                return 2

            def value(self, i):
                return -1

        alg = CliffordAlgebra(Negative())
        e0 = alg.basis_vector(0)
        assert e0 * e0 == alg.scalar(-1.0)

    def test_mutable_dataclass_signature(self):
        @dataclass
        class Mutable(MetricSignature):
            squares: list = field(default_factory=lambda: [1, -1])

            def max_dimension(self):
                return len(self.squares)

            def value(self, i):
                return self.squares[i]

        sig = Mutable()
        assert Mutable.__hash__ is None
        alg = CliffordAlgebra(sig)
        e0, e1 = alg.basis()
        assert e1 * e1 == alg.scalar(-1.0)
        assert e0 * e1 == -(e1 * e0)
        assert alg == CliffordAlgebra(Mutable())
        assert hash(alg) == hash(CliffordAlgebra(Mutable()))

    def test_euclidean_value_is_float(self):
        assert isinstance(EuclideanSignature(2).value(0), float)


# ── Sign helpers ──────────────────────────────────────────────────────

class TestSignHelpers:

    @pytest.mark.parametrize("a,b,parity", [
        (0b001, 0b010, 0),  # e0 e1: already ordered
        (0b010, 0b001, 1),  # e1 e0: one swap
        (0b011, 0b100, 0),
        (0b110, 0b001, 0),  # e1 e2 e0: two swaps
        (0b100, 0b011, 0),
        (0b011, 0b011, 1),
    ])
    def test_reordering_parity(self, a, b, parity):
        assert reordering_parity(a, b) == parity

    def test_blade_sign_matches_algebra(self):
        sig = EuclideanSignature(3)
        alg = CliffordAlgebra(sig)
        for a, b in itertools.product(range(8), repeat=2):
            assert alg.sign(a, b) == blade_sign(sig, a, b)

    def test_grade_and_reverse_sign(self):
        assert grade(0) == 0
        assert grade(0b1011) == 3
        assert [reverse_sign((1 << k) - 1) for k in range(6)] == [1, 1, -1, -1, 1, 1]
