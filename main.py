# Blades: Sparse Clifford Algebra Engine (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0 | "Unbending" Paradigm

"""Blades demo entry point. Prints the basis products of one algebra.

Run from the project root:
    python main.py algebra.signature=euclidean algebra.dimension=3
"""

from typing import List, Sequence

import hydra
from omegaconf import DictConfig, OmegaConf

from blades.algebra import CliffordAlgebra
from blades.signature import EuclideanSignature, MinkowskiSignature
from blades.log import get_logger

logger = get_logger(__name__)

SECTIONS = ('basis', 'bivectors', 'trivectors', 'pseudoscalar')


def resolve_algebra(cfg: DictConfig) -> CliffordAlgebra:
    """Builds the algebra named by ``cfg.algebra``.

    Args:
        cfg (DictConfig): Config with ``algebra.signature`` and, for the
            Euclidean case, ``algebra.dimension``.

    Returns:
        CliffordAlgebra: The requested algebra.
    """
    name = cfg.algebra.signature
    if name == 'euclidean':
        return CliffordAlgebra(EuclideanSignature(int(cfg.algebra.get('dimension', 4))))
    if name == 'minkowski':
        return CliffordAlgebra(MinkowskiSignature())
    raise ValueError(f"Unknown signature: {name}. Available: ['euclidean', 'minkowski']")


def _label(*indices: int) -> str:
    return " * ".join(f"e{i + 1}" for i in indices)


def build_report(algebra: CliffordAlgebra, sections: Sequence[str] = SECTIONS) -> List[str]:
    """Renders the demo report as lines.

    Basis vectors are named ``e1 .. en`` (one-based); products are taken
    left to right over non-decreasing index tuples.

    Args:
        algebra (CliffordAlgebra): Algebra to tabulate.
        sections (sequence): Any of ``basis``, ``bivectors``,
            ``trivectors``, ``pseudoscalar``.

    Returns:
        list: Report lines without trailing newlines.
    """
    unknown = [s for s in sections if s not in SECTIONS]
    if unknown:
        raise ValueError(f"Unknown sections: {unknown}. Available: {list(SECTIONS)}")

    basis = algebra.basis()
    n = len(basis)
    lines = []

    def header(title):
        if lines:
            lines.append("")
        lines.append(title)

    if 'basis' in sections:
        header("Basis Vectors:")
        for i in range(n):
            lines.append(f"{_label(i)}: {basis[i]}")

    if 'bivectors' in sections:
        header("Bivectors:")
        for i in range(n):
            for j in range(i, n):
                lines.append(f"{_label(i, j)} = {basis[i] * basis[j]}")

    if 'trivectors' in sections:
        header("Trivectors:")
        for i in range(n):
            for j in range(i, n):
                for k in range(j, n):
                    lines.append(f"{_label(i, j, k)} = {basis[i] * basis[j] * basis[k]}")

    if 'pseudoscalar' in sections:
        header(f"Pseudoscalar ({_label(*range(n))}):")
        lines.append(str(algebra.pseudoscalar()))

    return lines


@hydra.main(version_base=None, config_path="conf", config_name="config")
def main(cfg: DictConfig):
    """Prints the report for the configured algebra.

    Args:
        cfg (DictConfig): The plan.
    """
    algebra = resolve_algebra(cfg)
    sections = list(cfg.demo.get('sections', SECTIONS))
    logger.info("Algebra: %s", algebra)
    logger.debug("Config:\n%s", OmegaConf.to_yaml(cfg))
    for line in build_report(algebra, sections):
        print(line)


if __name__ == "__main__":
    main()
