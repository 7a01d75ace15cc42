# Blades: Sparse Clifford Algebra Engine (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0 | "Unbending" Paradigm

import unittest
from blades.algebra import CliffordAlgebra, SpacetimeAlgebra
from blades.signature import EuclideanSignature, MinkowskiSignature


class TestCliffordAlgebra(unittest.TestCase):
    def setUp(self):
        self.alg = CliffordAlgebra(EuclideanSignature(3))
        self.e0, self.e1, self.e2 = self.alg.basis()

    def test_euclidean_3d_products(self):
        # e0*e1 -> e(3), sign +
        self.assertEqual(self.e0 * self.e1, self.alg.create([(1.0, 0b011)]))
        # e1*e0 -> e(3), sign -
        self.assertEqual(self.e1 * self.e0, self.alg.create([(-1.0, 0b011)]))
        # e0*e1*e2 -> e(7), sign +
        self.assertEqual(self.e0 * self.e1 * self.e2, self.alg.create([(1.0, 0b111)]))
        # e0*e0 -> scalar 1
        self.assertEqual(self.e0 * self.e0, self.alg.create([(1.0, 0)]))

    def test_rendering_matches_products(self):
        self.assertEqual(str(self.e0 * self.e1), "1 * e(3)")
        self.assertEqual(str(self.e1 * self.e0), "-1 * e(3)")
        self.assertEqual(str(self.e0 * self.e1 * self.e2), "1 * e(7)")
        self.assertEqual(str(self.e0 * self.e0), "1 * e(0)")

    def test_geometric_product_simple(self):
        # (2 e0) * (3 e1) = 6 e01
        A = self.alg.create([(2.0, 0b001)])
        B = self.alg.create([(3.0, 0b010)])
        C = A * B
        self.assertEqual(C.coefficient(0b011), 6.0)
        self.assertEqual(len(C), 1)

    def test_bivector_squares_to_minus_one(self):
        e01 = self.e0 * self.e1
        self.assertEqual(e01 * e01, self.alg.scalar(-1.0))

    def test_pseudoscalar(self):
        self.assertEqual(self.alg.pseudoscalar(), self.alg.create([(1.0, 0b111)]))
        self.assertEqual(self.alg.pseudoscalar(0), self.alg.scalar(1.0))

    def test_degenerate_entry_keeps_product(self):
        # (1, 0, 0, 0): e3 is null, but e3*e3 is -1, not annihilated
        e3 = SpacetimeAlgebra.basis_vector(3)
        sq = e3 * e3
        self.assertEqual(len(sq), 1)
        self.assertEqual(sq.coefficient(0), -1.0)
        self.assertEqual(str(sq), "-1 * e(0)")

    def test_spacetime_timelike_square(self):
        e0 = SpacetimeAlgebra.basis_vector(0)
        self.assertEqual(e0 * e0, SpacetimeAlgebra.scalar(1.0))
        self.assertEqual(SpacetimeAlgebra.signature, MinkowskiSignature())


if __name__ == '__main__':
    unittest.main()
