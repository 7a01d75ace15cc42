# Blades: Sparse Clifford Algebra Engine (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0 | "Unbending" Paradigm

"""Sparse Clifford algebra engine.

Provides metric signatures, basis blades, the sparse multivector value
type with the geometric product, and a dense tensor bridge.
"""

__version__ = "0.1.0"

from .validation import (
    MASK_WIDTH,
    AlgebraMismatchError,
    BasisIndexError,
    MaskWidthError,
)
from .signature import (
    MetricSignature,
    EuclideanSignature,
    TableSignature,
    MinkowskiSignature,
)
from .blade import Blade, grade, blade_sign, reverse_sign
from .multivector import Multivector
from .algebra import (
    CliffordAlgebra,
    CliffordAlgebra64,
    EuclideanAlgebra,
    SpacetimeAlgebra,
)

__all__ = [
    "__version__",
    # validation
    "MASK_WIDTH",
    "AlgebraMismatchError",
    "BasisIndexError",
    "MaskWidthError",
    # signature
    "MetricSignature",
    "EuclideanSignature",
    "TableSignature",
    "MinkowskiSignature",
    # blade
    "Blade",
    "grade",
    "blade_sign",
    "reverse_sign",
    # algebra
    "Multivector",
    "CliffordAlgebra",
    "CliffordAlgebra64",
    "EuclideanAlgebra",
    "SpacetimeAlgebra",
]
