from __future__ import annotations

import logging
import math
import re

from .config import DEFAULT_ENGINE_CONFIG, EngineConfig
from .models import (
    ClauseKind,
    GraphDescriptor,
    ReasoningClause,
    Recommendation,
)
from .rules import GraphProfile, classify_band, select_rule

logger = logging.getLogger(__name__)

HITS_ALTERNATIVE = "HITS Algorithm"

_NUMERIC_RANGE = re.compile(r"^(\d+)-(\d+)(.*)$")


class InvalidArgumentError(ValueError):
    """Raised when counts are negative, the memory budget is not positive, or
    the derived metrics overflow a float."""


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def compute_density(node_count: int, edge_count: int) -> float:
    """Edges per node; an empty graph has density 0."""
    if node_count == 0:
        return 0.0
    return edge_count / node_count


def estimate_memory_gb(edge_count: int, config: EngineConfig = DEFAULT_ENGINE_CONFIG) -> float:
    return (edge_count * config.memory_per_edge_kb) / 1024


def compute_partition_count(
    memory_usage_gb: float,
    memory_limit_gb: float,
    config: EngineConfig = DEFAULT_ENGINE_CONFIG,
) -> int | None:
    """Number of partitions needed, or ``None`` when the graph fits the budget."""
    if memory_usage_gb <= memory_limit_gb:
        return None
    return max(1, math.ceil(memory_usage_gb / (memory_limit_gb * config.partition_fill_ratio)))


def widen_iteration_range(
    iteration_range: str,
    config: EngineConfig = DEFAULT_ENGINE_CONFIG,
) -> str:
    """Stretch a ``min-max`` iteration range; qualitative labels pass through."""
    match = _NUMERIC_RANGE.match(iteration_range)
    if not match:
        return iteration_range
    low = _round_half_up(int(match.group(1)) * config.precision_low_factor)
    high = _round_half_up(int(match.group(2)) * config.precision_high_factor)
    return f"{low}-{high}{match.group(3)}"


def _validate(graph: GraphDescriptor, memory_limit_gb: float) -> None:
    if graph.node_count < 0 or graph.edge_count < 0:
        raise InvalidArgumentError(
            f"node and edge counts must be non-negative, got "
            f"{graph.node_count} nodes and {graph.edge_count} edges"
        )
    if not math.isfinite(memory_limit_gb) or memory_limit_gb <= 0:
        raise InvalidArgumentError(f"memory limit must be positive, got {memory_limit_gb}")


def build_profile(
    graph: GraphDescriptor,
    memory_limit_gb: float,
    config: EngineConfig = DEFAULT_ENGINE_CONFIG,
) -> GraphProfile:
    return GraphProfile(
        node_count=graph.node_count,
        edge_count=graph.edge_count,
        directed=graph.directed,
        tolerance=graph.tolerance,
        density=compute_density(graph.node_count, graph.edge_count),
        memory_usage_gb=estimate_memory_gb(graph.edge_count, config),
        memory_limit_gb=memory_limit_gb,
        band=classify_band(graph.node_count, config),
    )


def recommend(
    graph: GraphDescriptor,
    memory_limit_gb: float,
    config: EngineConfig = DEFAULT_ENGINE_CONFIG,
) -> Recommendation:
    """
    Recommend a PageRank strategy for ``graph`` under ``memory_limit_gb``.

    Selects a rule from the decision table, then applies the undirected-graph
    penalty and the high-precision adjustment, in that order.
    """
    _validate(graph, memory_limit_gb)
    try:
        profile = build_profile(graph, memory_limit_gb, config)
        partition_count = compute_partition_count(profile.memory_usage_gb, memory_limit_gb, config)
    except OverflowError as exc:
        raise InvalidArgumentError(
            f"graph of {graph.edge_count} edges under a {memory_limit_gb} GB limit "
            f"is outside the representable range: {exc}"
        ) from exc
    rule = select_rule(profile, config)
    outcome = rule.outcome
    logger.debug("Selected rule %s for %d nodes / %d edges", rule.name, graph.node_count, graph.edge_count)

    tier = outcome.tier
    alternatives = list(outcome.alternatives)
    throughput = outcome.throughput_mteps
    iteration_range = outcome.convergence_iteration_range
    clauses = [ReasoningClause(kind=ClauseKind.base, text=outcome.rationale)]

    if not graph.directed:
        tier = tier.demote()
        clauses.append(ReasoningClause(
            kind=ClauseKind.undirected,
            text=(
                f"[Undirected graphs run about {config.undirected_slowdown}x slower than "
                "directed ones; the higher effective density adds per-iteration work.]"
            ),
        ))
        if graph.node_count < config.hits_node_threshold:
            alternatives.append(HITS_ALTERNATIVE)
        if throughput is not None:
            throughput = _round_half_up(throughput / config.undirected_slowdown)

    if profile.is_high_precision(config):
        clauses.append(ReasoningClause(
            kind=ClauseKind.high_precision,
            text=f"[High precision ({graph.tolerance:g}) tightens the convergence criterion.]",
        ))
        iteration_range = widen_iteration_range(iteration_range, config)

    strategy = None
    if partition_count is not None:
        strategy = (
            f"Split the graph into {partition_count} parts; overlap boundary nodes "
            "between parts to limit accuracy loss when merging results."
        )

    return Recommendation(
        algorithm=outcome.algorithm,
        framework=outcome.framework,
        performance_tier=tier,
        size_band=profile.band,
        reasoning=" ".join(clause.text for clause in clauses),
        reasoning_clauses=clauses,
        density=profile.density,
        memory_usage_gb=profile.memory_usage_gb,
        alternatives=alternatives,
        partitioning_required=partition_count is not None,
        partition_count=partition_count,
        partitioning_strategy=strategy,
        expected_time_range=outcome.expected_time_range,
        estimated_throughput_mteps=throughput,
        convergence_iteration_range=iteration_range,
    )
