# Blades: Sparse Clifford Algebra Engine (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0 | "Unbending" Paradigm

"""Metric signatures for Clifford algebras.

A signature is the bilinear-form policy of an algebra: it tells the
geometric product what each basis vector squares to.  Signatures are
immutable and hashable, so algebras built from equal signatures are
interchangeable.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Tuple

from blades.validation import MASK_WIDTH, check_basis_index


class MetricSignature(ABC):
    """Abstract bilinear-form policy.

    Subclasses supply ``max_dimension()`` and ``value(i)``, the square of
    basis vector ``e_i``.
    """

    @abstractmethod
    def max_dimension(self) -> int:
        """Number of basis vectors the algebra may use."""

    @abstractmethod
    def value(self, i: int) -> float:
        """Square of basis vector ``e_i`` under the bilinear form."""

    def values(self) -> Tuple[float, ...]:
        """All squares, in basis order."""
        return tuple(self.value(i) for i in range(self.max_dimension()))


@dataclass(frozen=True)
class EuclideanSignature(MetricSignature):
    """Cl(n, 0): every basis vector squares to +1.

    Attributes:
        dimension (int): Number of basis vectors, at most 64.
    """

    dimension: int = MASK_WIDTH

    def __post_init__(self):
        if isinstance(self.dimension, bool) or not isinstance(self.dimension, int):
            raise ValueError(f"dimension must be an int, got {self.dimension!r}")
        if not 0 <= self.dimension <= MASK_WIDTH:
            raise ValueError(
                f"dimension must be in [0, {MASK_WIDTH}], got {self.dimension}"
            )

    def max_dimension(self) -> int:
        return self.dimension

    def value(self, i: int) -> float:
        return 1.0


@dataclass(frozen=True)
class TableSignature(MetricSignature):
    """Signature given by an explicit table of basis-vector squares.

    Entries are used literally: a ``0`` marks a degenerate basis vector.

    Attributes:
        table (tuple): Square of each basis vector, in index order.
    """

    table: Tuple[float, ...] = ()

    def __post_init__(self):
        # Normalise lists to a tuple so the signature stays hashable.
        object.__setattr__(self, "table", tuple(self.table))
        if len(self.table) > MASK_WIDTH:
            raise ValueError(
                f"signature table holds at most {MASK_WIDTH} entries, "
                f"got {len(self.table)}"
            )

    def max_dimension(self) -> int:
        return len(self.table)

    def value(self, i: int) -> float:
        check_basis_index(i, self.max_dimension(), "value(i)")
        return self.table[i]


MINKOWSKI_TABLE = (1, 0, 0, 0)


@dataclass(frozen=True)
class MinkowskiSignature(TableSignature):
    """The fixed four-dimensional spacetime table ``(1, 0, 0, 0)``.

    Note the zeros: e1..e3 are null vectors here, not the usual
    (+, -, -, -) spacetime metric.
    """

    table: Tuple[float, ...] = MINKOWSKI_TABLE

    def __post_init__(self):
        super().__post_init__()
        if self.table != MINKOWSKI_TABLE:
            raise ValueError(
                f"MinkowskiSignature is fixed to {MINKOWSKI_TABLE}; "
                "use TableSignature for custom tables"
            )
