# Blades: Sparse Clifford Algebra Engine (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0 | "Unbending" Paradigm

"""Dense tensor bridge.

Converts sparse multivectors to and from dense coefficient tensors of
length ``2^n`` (index = blade mask) and provides a batched dense
geometric product using the same sign rule as the sparse engine.
"""

import torch

from blades.multivector import Multivector
from blades.signature import MetricSignature
from blades.validation import check_mask
from blades.log import get_logger

logger = get_logger(__name__)

MAX_DENSE_DIMENSION = 12

_CACHED_TABLES = {}


def _check_dense_dimension(n: int) -> None:
    if not 0 <= n <= MAX_DENSE_DIMENSION:
        raise ValueError(
            f"dense dimension must be in [0, {MAX_DENSE_DIMENSION}], got {n}"
        )


def _dimension_of(size: int) -> int:
    n = size.bit_length() - 1
    if size < 1 or (1 << n) != size:
        raise ValueError(f"last dim must be a power of two, got {size}")
    _check_dense_dimension(n)
    return n


def _popcount(x: torch.Tensor, n: int) -> torch.Tensor:
    count = torch.zeros_like(x)
    temp = x
    for _ in range(n):
        count += temp & 1
        temp = temp >> 1
    return count


def cayley_table(signature: MetricSignature, n: int):
    """Dense product table for the first *n* basis vectors.

    Args:
        signature (MetricSignature): Bilinear-form policy.
        n (int): Number of basis vectors, at most ``MAX_DENSE_DIMENSION``
            and the signature's dimension.

    Returns:
        tuple: ``indices[a, b] = a ^ b`` and ``signs[a, b]`` (+1/-1), both
        ``[2^n, 2^n]``.
    """
    _check_dense_dimension(n)
    if n > signature.max_dimension():
        raise ValueError(
            f"n={n} exceeds signature dimension {signature.max_dimension()}"
        )
    # Keyed on the squares, so unhashable signatures share tables too.
    key = (tuple(signature.value(i) for i in range(n)), n)
    if key not in _CACHED_TABLES:
        logger.debug("Building %dx%d Cayley table for %s", 1 << n, 1 << n, signature)
        _CACHED_TABLES[key] = _generate_cayley_table(signature, n)
    return _CACHED_TABLES[key]


def _generate_cayley_table(signature: MetricSignature, n: int):
    dim = 1 << n
    indices = torch.arange(dim)
    A = indices.unsqueeze(1)  # Row
    B = indices.unsqueeze(0)  # Col

    # 1. Reordering: every vector of B passes the larger vectors of A
    swap_counts = torch.zeros((dim, dim), dtype=torch.long)
    for j in range(n):
        b_j = (B >> j) & 1
        a_above = _popcount(A >> (j + 1), n)
        swap_counts += b_j * a_above

    # 2. Contraction: shared vectors not squaring to +1 flip the sign
    flip_mask = 0
    for i in range(n):
        if signature.value(i) != 1:
            flip_mask |= (1 << i)
    flip_counts = _popcount(A & B & flip_mask, n)

    parity = (swap_counts + flip_counts) % 2
    signs = (1 - 2 * parity).to(dtype=torch.float64)
    return A ^ B, signs


def dense_geometric_product(signature: MetricSignature, A: torch.Tensor,
                            B: torch.Tensor) -> torch.Tensor:
    """Batched geometric product of dense multivectors.

    Args:
        signature (MetricSignature): Bilinear-form policy.
        A (torch.Tensor): Left operand [..., 2^n].
        B (torch.Tensor): Right operand [..., 2^n].

    Returns:
        torch.Tensor: The product AB [..., 2^n].
    """
    if A.shape[-1] != B.shape[-1]:
        raise ValueError(
            f"operands disagree on last dim: {A.shape[-1]} vs {B.shape[-1]}"
        )
    n = _dimension_of(A.shape[-1])
    idx, signs = cayley_table(signature, n)
    # result[..., k] = sum_i A[..., i] * B[..., i ^ k] * sign(i, i ^ k)
    gp_signs = torch.gather(signs, 1, idx).to(device=A.device, dtype=A.dtype)
    idx = idx.to(A.device)
    B_gathered = B[..., idx]  # [..., D, D]
    return (A.unsqueeze(-1) * B_gathered * gp_signs).sum(dim=-2)


def to_tensor(mv: Multivector, n: int = None, dtype=torch.float64,
              device='cpu') -> torch.Tensor:
    """Scatters a sparse multivector into a dense coefficient tensor.

    Args:
        mv (Multivector): Source multivector.
        n (int, optional): Dense dimension. Defaults to the algebra's.
        dtype (torch.dtype): Output dtype.
        device (str): Output device.

    Returns:
        torch.Tensor: Coefficients [2^n], indexed by blade mask.
    """
    n = mv.algebra.n if n is None else n
    _check_dense_dimension(n)
    out = torch.zeros(1 << n, dtype=dtype, device=device)
    for blade in mv:
        check_mask(blade.mask, "to_tensor", width=n)
        out[blade.mask] = blade.coefficient
    return out


def from_tensor(algebra, tensor: torch.Tensor) -> Multivector:
    """Gathers the non-zero entries of a dense tensor into a multivector.

    Args:
        algebra (CliffordAlgebra): Target algebra.
        tensor (torch.Tensor): Coefficients [2^n].

    Returns:
        Multivector: Blades in ascending mask order.
    """
    if tensor.ndim != 1:
        raise ValueError(f"expected a 1-D tensor, got shape {tuple(tensor.shape)}")
    _dimension_of(tensor.shape[0])
    values = tensor.detach().cpu().tolist()
    return algebra.create((c, mask) for mask, c in enumerate(values) if c != 0.0)
