# Blades: Sparse Clifford Algebra Engine (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0 | "Unbending" Paradigm

"""Basis blades and their sign rules.

A basis blade is identified by a bit mask: bit ``i`` set means ``e_i``
takes part, and the blade is the wedge of its vectors in increasing
index order.

    mask 0b000 -> 1 (scalar)
    mask 0b011 -> e0 e1
    mask 0b101 -> e0 e2
"""

from typing import NamedTuple

from blades.signature import MetricSignature


class Blade(NamedTuple):
    """A scaled basis blade.

    Attributes:
        coefficient (float): Scalar weight.
        mask (int): Participating basis vectors as a bit set.
    """

    coefficient: float
    mask: int

    @property
    def grade(self) -> int:
        return grade(self.mask)

    def __str__(self):
        return f"{format(self.coefficient, 'g')} * e({self.mask})"


def grade(mask: int) -> int:
    """Number of basis vectors in a blade."""
    return bin(mask).count('1')


def _set_bits(mask: int):
    """Yields the indices of set bits, lowest first."""
    while mask:
        lowest = mask & -mask
        yield lowest.bit_length() - 1
        mask ^= lowest


def reordering_parity(a: int, b: int) -> int:
    """Parity of the swaps that sort ``e_A e_B`` into increasing order.

    Each vector of B moves left past every vector of A with a larger
    index.

    Args:
        a (int): Mask of the left blade.
        b (int): Mask of the right blade.

    Returns:
        int: 0 for an even number of swaps, 1 for odd.
    """
    parity = 0
    for j in _set_bits(b):
        parity ^= grade(a >> (j + 1)) & 1
    return parity


def blade_sign(signature: MetricSignature, a: int, b: int) -> int:
    """Sign of the basis product ``e_A * e_B = sign * e_(A ^ B)``.

    Combines the reordering parity with one contraction per shared basis
    vector.  A vector that squares to +1 contracts without changing the
    parity; any other square flips it.  Degenerate (zero) squares are not
    annihilated, so ``e_k * e_k`` is ``-1`` when ``value(k) == 0``.

    Args:
        signature (MetricSignature): Bilinear-form policy.
        a (int): Mask of the left blade.
        b (int): Mask of the right blade.

    Returns:
        int: +1 or -1.
    """
    parity = reordering_parity(a, b)
    for i in _set_bits(a & b):
        if signature.value(i) != 1:
            parity ^= 1
    return 1 - 2 * parity


def reverse_sign(mask: int) -> int:
    """Reversion sign ``(-1)^(k(k-1)/2)`` for a grade-k blade."""
    k = grade(mask)
    return 1 - 2 * ((k * (k - 1) // 2) % 2)
