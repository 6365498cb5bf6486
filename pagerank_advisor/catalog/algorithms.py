"""Algorithm reference guide.

Static reference data describing the PageRank methods the engine can
recommend, grouped by family. Evidence strings quote the experimental
measurements the recommendation rules are based on.
"""
from __future__ import annotations

from .models import AlgorithmFamily, AlgorithmInfo

# ---------- Recent GPU research algorithms ----------

_RESEARCH = AlgorithmFamily(
    family="Recent GPU research algorithms",
    algorithms=[
        AlgorithmInfo(
            name="Dynamic Frontier PageRank (DF-P)",
            summary="Processes only the nodes whose rank changed",
            evidence="5.9x faster than Gunrock; Twitter-2010 1,060+ MTEPS (4 partitions)",
        ),
        AlgorithmInfo(
            name="Static PageRank (Push-Pull)",
            summary="Gunrock based, linear scalability",
            evidence="Pokec 1,077 MTEPS, LiveJournal 1,032 MTEPS",
        ),
        AlgorithmInfo(
            name="Monte Carlo PageRank",
            summary="Memory-saving probabilistic sampling",
            evidence="Approximate solution for very large graphs",
        ),
    ],
)

# ---------- Experimentally validated numerical methods ----------

_NUMERICAL = AlgorithmFamily(
    family="Experimentally validated numerical methods",
    algorithms=[
        AlgorithmInfo(
            name="Hessen Method",
            summary="Fewest iterations to converge, best for high precision",
            evidence="Slashdot0902: 12 iterations vs 825 for the Power Method",
        ),
        AlgorithmInfo(
            name="Gauss-Seidel Method",
            summary="Converges 40-45% faster than the Power Method",
            evidence="Strong on high-density graphs",
        ),
        AlgorithmInfo(
            name="Power Method",
            summary="Stable, broad library support",
            evidence="LiveJournal: 0.64 s (cuGraph)",
        ),
    ],
)

# ---------- Krylov subspace methods ----------

_KRYLOV = AlgorithmFamily(
    family="Krylov subspace methods",
    algorithms=[
        AlgorithmInfo(
            name="GMRES",
            summary="Suited to non-symmetric matrices, robust convergence",
            evidence="Recommended when high precision is required",
        ),
        AlgorithmInfo(
            name="BiCGStab",
            summary="Memory efficient with stable convergence",
            evidence="Best fit for medium-density graphs",
        ),
        AlgorithmInfo(
            name="Arnoldi Methods",
            summary="Eigenvalue-problem based",
            evidence="Convergence was unstable on large graphs",
        ),
    ],
)

ALGORITHM_GUIDE: list[AlgorithmFamily] = [_RESEARCH, _NUMERICAL, _KRYLOV]


def get_algorithm_guide() -> list[AlgorithmFamily]:
    return ALGORITHM_GUIDE


def find_algorithm(name: str) -> AlgorithmInfo | None:
    """Look up a guide entry by exact algorithm name, case-insensitively."""
    wanted = name.strip().lower()
    for family in ALGORITHM_GUIDE:
        for info in family.algorithms:
            if info.name.lower() == wanted:
                return info
    return None
