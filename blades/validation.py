# Blades: Sparse Clifford Algebra Engine (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0 | "Unbending" Paradigm

"""Input validation and error types for the blade engine.

Every check raises an explicit exception instead of asserting, so the
guards survive ``python -O``.
"""

MASK_WIDTH = 64
MAX_MASK = (1 << MASK_WIDTH) - 1


class BasisIndexError(IndexError):
    """A basis-vector index outside the signature's dimension."""


class MaskWidthError(ValueError):
    """A blade mask that does not fit the available bit width."""


class AlgebraMismatchError(ValueError):
    """Operands belong to algebras with different signatures."""


def _is_int(x) -> bool:
    return isinstance(x, int) and not isinstance(x, bool)


def check_basis_index(i, max_dimension: int, name: str = "i") -> None:
    """Raise unless ``0 <= i < max_dimension``."""
    if not _is_int(i):
        raise BasisIndexError(f"{name}: basis index must be an int, got {i!r}")
    if not 0 <= i < max_dimension:
        raise BasisIndexError(
            f"{name}: basis index {i} outside of signature bounds "
            f"[0, {max_dimension})"
        )


def check_mask(mask, name: str = "mask", width: int = MASK_WIDTH) -> None:
    """Raise unless *mask* is a non-negative int of at most *width* bits."""
    if not _is_int(mask):
        raise MaskWidthError(f"{name}: mask must be an int, got {mask!r}")
    if mask < 0:
        raise MaskWidthError(f"{name}: mask must be non-negative, got {mask}")
    if mask.bit_length() > width:
        raise MaskWidthError(
            f"{name}: mask {mask:#x} needs {mask.bit_length()} bits, "
            f"only {width} available"
        )


def check_same_algebra(a, b, name: str = "operands") -> None:
    """Raise if two multivectors were built over different signatures."""
    if a.algebra != b.algebra:
        raise AlgebraMismatchError(
            f"{name}: algebras must match, got {a.algebra} and {b.algebra}"
        )
