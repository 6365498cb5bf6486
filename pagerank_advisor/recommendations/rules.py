"""Decision table for algorithm selection.

Rules are evaluated top-down and the first rule whose size band matches and
whose predicate holds wins. Each band closes with an unconditional rule, so
every graph profile selects exactly one rule.

The experimental figures quoted in the rationales (iteration counts, MTEPS,
speedups) are reference measurements carried as text, not computed values.
"""
from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass
from typing import Callable

from .config import DEFAULT_ENGINE_CONFIG, EngineConfig
from .models import PerformanceTier, SizeBand

_BANDS_IN_ORDER = list(SizeBand)


@dataclass(frozen=True)
class GraphProfile:
    """Derived metrics for one graph under one memory budget."""

    node_count: int
    edge_count: int
    directed: bool
    tolerance: float | None
    density: float
    memory_usage_gb: float
    memory_limit_gb: float
    band: SizeBand

    @property
    def over_memory_budget(self) -> bool:
        return self.memory_usage_gb > self.memory_limit_gb

    def is_high_precision(self, config: EngineConfig = DEFAULT_ENGINE_CONFIG) -> bool:
        return self.tolerance is not None and self.tolerance < config.high_precision_tolerance


@dataclass(frozen=True)
class RuleOutcome:
    algorithm: str
    framework: str
    tier: PerformanceTier
    rationale: str
    expected_time_range: str
    convergence_iteration_range: str
    alternatives: tuple[str, ...]
    throughput_mteps: int | None = None


Predicate = Callable[[GraphProfile, EngineConfig], bool]


@dataclass(frozen=True)
class RecommendationRule:
    name: str
    band: SizeBand
    predicate: Predicate
    outcome: RuleOutcome

    def matches(self, profile: GraphProfile, config: EngineConfig = DEFAULT_ENGINE_CONFIG) -> bool:
        return profile.band == self.band and self.predicate(profile, config)


def classify_band(node_count: int, config: EngineConfig = DEFAULT_ENGINE_CONFIG) -> SizeBand:
    """Map a node count onto its size band. Breakpoints are exclusive upper bounds."""
    return _BANDS_IN_ORDER[bisect_right(config.band_breakpoints, node_count)]


# ── Predicates ───────────────────────────────────────────────────────────


def _always(profile: GraphProfile, config: EngineConfig) -> bool:
    return True


def _high_precision(profile: GraphProfile, config: EngineConfig) -> bool:
    return profile.is_high_precision(config)


def _high_density(profile: GraphProfile, config: EngineConfig) -> bool:
    return profile.density > config.high_density


def _medium_density(profile: GraphProfile, config: EngineConfig) -> bool:
    return profile.density > config.medium_density


def _over_memory_budget(profile: GraphProfile, config: EngineConfig) -> bool:
    return profile.over_memory_budget


# ── Rules ────────────────────────────────────────────────────────────────

RULES: list[RecommendationRule] = [
    # Small graphs (Slashdot0902 scale)
    RecommendationRule(
        name="small_high_precision",
        band=SizeBand.small,
        predicate=_high_precision,
        outcome=RuleOutcome(
            algorithm="Hessen Method",
            framework="Custom Upper-Hessenberg Implementation",
            tier=PerformanceTier.highest,
            rationale=(
                "Small graph, high precision: on Slashdot0902 the Hessen Method "
                "converged in 12 iterations against 825 for the Power Method."
            ),
            expected_time_range="< 1 s",
            convergence_iteration_range="12-20 iterations",
            alternatives=("Power Method", "GMRES", "Jacobi Method"),
        ),
    ),
    RecommendationRule(
        name="small_standard_precision",
        band=SizeBand.small,
        predicate=_always,
        outcome=RuleOutcome(
            algorithm="Power Method",
            framework="cuGraph",
            tier=PerformanceTier.high,
            rationale=(
                "Small graph, standard precision: cuGraph's optimised implementation "
                "gives fast development and stable convergence."
            ),
            expected_time_range="< 0.5 s",
            convergence_iteration_range="200-800 iterations",
            alternatives=("Hessen Method", "Gauss-Seidel Method", "Aitken Extrapolation"),
        ),
    ),
    # Medium graphs
    RecommendationRule(
        name="medium_high_precision",
        band=SizeBand.medium,
        predicate=_high_precision,
        outcome=RuleOutcome(
            algorithm="Hessen Method",
            framework="Custom Upper-Hessenberg Implementation",
            tier=PerformanceTier.highest,
            rationale=(
                "Medium graph, high precision: the Hessen Method reaches strict "
                "tolerances in the fewest iterations (20 against 775 for the Power "
                "Method on Orkut)."
            ),
            expected_time_range="1-3 s",
            convergence_iteration_range="20-50 iterations",
            alternatives=("GMRES", "Power Method", "BiCGStab"),
        ),
    ),
    RecommendationRule(
        name="medium_high_density",
        band=SizeBand.medium,
        predicate=_high_density,
        outcome=RuleOutcome(
            algorithm="Gauss-Seidel Method",
            framework="Custom GPU Implementation",
            tier=PerformanceTier.very_high,
            rationale=(
                "Dense medium graph: Gauss-Seidel converges 40-45% faster than the "
                "Power Method and performs well on high-density graphs."
            ),
            expected_time_range="2-5 s",
            convergence_iteration_range="100-300 iterations",
            alternatives=("BiCGStab", "Power Method + ILU Preconditioner", "Weighted Jacobi"),
        ),
    ),
    RecommendationRule(
        name="medium_medium_density",
        band=SizeBand.medium,
        predicate=_medium_density,
        outcome=RuleOutcome(
            algorithm="BiCGStab",
            framework="CUSP Library + GPU",
            tier=PerformanceTier.high,
            rationale=(
                "Medium-density graph: BiCGStab balances memory efficiency against "
                "stable convergence, the strength of Krylov subspace methods."
            ),
            expected_time_range="3-8 s",
            convergence_iteration_range="50-200 iterations",
            alternatives=("GMRES", "Conjugate Gradient", "Arnoldi Methods"),
        ),
    ),
    RecommendationRule(
        name="medium_low_density",
        band=SizeBand.medium,
        predicate=_always,
        outcome=RuleOutcome(
            algorithm="Hessen Method",
            framework="Custom Upper-Hessenberg Implementation",
            tier=PerformanceTier.highest,
            rationale=(
                "Sparse medium graph: on low-density graphs such as WikiTalk the Hessen "
                "Method converges quickly with the fewest iterations."
            ),
            expected_time_range="1-3 s",
            convergence_iteration_range="20-50 iterations",
            alternatives=("Power Method", "GMRES", "Weighted Arnoldi"),
        ),
    ),
    # Large graphs (Pokec, LiveJournal scale)
    RecommendationRule(
        name="large",
        band=SizeBand.large,
        predicate=_always,
        outcome=RuleOutcome(
            algorithm="Static PageRank (Push-Pull)",
            framework="Gunrock GPU Framework",
            tier=PerformanceTier.very_high,
            rationale=(
                "Large graph: measured on Pokec (1,077 MTEPS) and LiveJournal "
                "(1,032 MTEPS) with linear scaling."
            ),
            expected_time_range="8-20 s",
            convergence_iteration_range="50-150 iterations",
            alternatives=("cuGraph", "Dynamic Frontier PageRank", "Power Method + GPU"),
            throughput_mteps=1000,
        ),
    ),
    # Very large graphs (Twitter-2010, UK-2005 scale)
    RecommendationRule(
        name="very_large",
        band=SizeBand.very_large,
        predicate=_always,
        outcome=RuleOutcome(
            algorithm="Dynamic Frontier PageRank (DF-P)",
            framework="Custom GPU",
            tier=PerformanceTier.highest,
            rationale=(
                "Very large graph: on Twitter-2010 with 4-way partitioning DF-P reached "
                "1,060+ MTEPS, 5.9x Gunrock and 31x Hornet."
            ),
            expected_time_range="60-180 s (partitioned)",
            convergence_iteration_range="dynamic convergence",
            alternatives=(
                "Static PageRank + Heavy Partitioning",
                "Distributed Gunrock",
                "Asynchronous PageRank",
            ),
            throughput_mteps=1100,
        ),
    ),
    # Extreme graphs
    RecommendationRule(
        name="extreme_memory_constrained",
        band=SizeBand.extreme,
        predicate=_over_memory_budget,
        outcome=RuleOutcome(
            algorithm="Monte Carlo PageRank",
            framework="Custom GPU + Random Walk",
            tier=PerformanceTier.medium_high,
            rationale=(
                "Memory-constrained extreme graph: a probabilistic random-walk method "
                "cuts memory use sharply in exchange for an approximate answer."
            ),
            expected_time_range="10-30 s per partition",
            convergence_iteration_range="sampling-based",
            alternatives=("Reduced Precision PageRank", "Block-Jacobi + Partitioning"),
        ),
    ),
    RecommendationRule(
        name="extreme",
        band=SizeBand.extreme,
        predicate=_always,
        outcome=RuleOutcome(
            algorithm="Distributed Block-Jacobi PageRank",
            framework="Multi-GPU + MPI + NCCL",
            tier=PerformanceTier.high,
            rationale=(
                "Extreme graph: beyond a single GPU's comfort zone, distributed "
                "processing with Block-Jacobi keeps communication cost low."
            ),
            expected_time_range="300-900 s",
            convergence_iteration_range="asynchronous convergence",
            alternatives=("GraphX Spark", "Pregel-based Systems", "Streaming PageRank"),
        ),
    ),
]


def select_rule(
    profile: GraphProfile,
    config: EngineConfig = DEFAULT_ENGINE_CONFIG,
    rules: list[RecommendationRule] | None = None,
) -> RecommendationRule:
    for rule in rules if rules is not None else RULES:
        if rule.matches(profile, config):
            return rule
    raise LookupError(f"No recommendation rule matches band {profile.band.value!r}")
