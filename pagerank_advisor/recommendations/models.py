from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .config import DEFAULT_MEMORY_LIMIT_GB


class PerformanceTier(str, Enum):
    highest = "Highest"
    very_high = "VeryHigh"
    high = "High"
    medium_high = "MediumHigh"
    medium = "Medium"

    @property
    def rank(self) -> int:
        """Position on the scale, 0 for the best tier."""
        return list(PerformanceTier).index(self)

    def demote(self) -> PerformanceTier:
        """Return the next tier down, clamped at ``medium``."""
        tiers = list(PerformanceTier)
        return tiers[min(self.rank + 1, len(tiers) - 1)]


class SizeBand(str, Enum):
    small = "small"
    medium = "medium"
    large = "large"
    very_large = "very_large"
    extreme = "extreme"


class ClauseKind(str, Enum):
    base = "base"
    undirected = "undirected"
    high_precision = "high_precision"


class GraphDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True)

    node_count: int = Field(..., ge=0)
    edge_count: int = Field(..., ge=0)
    directed: bool = True
    tolerance: float | None = Field(
        default=None, gt=0, description="Convergence threshold; omit for standard precision"
    )


class RecommendationRequest(BaseModel):
    graph: GraphDescriptor
    memory_limit_gb: float = Field(
        default=DEFAULT_MEMORY_LIMIT_GB,
        gt=0,
        description="Available accelerator memory in GB",
    )


class ReasoningClause(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: ClauseKind
    text: str


class Recommendation(BaseModel):
    model_config = ConfigDict(frozen=True)

    algorithm: str
    framework: str
    performance_tier: PerformanceTier
    size_band: SizeBand
    reasoning: str
    reasoning_clauses: list[ReasoningClause]
    density: float
    memory_usage_gb: float
    alternatives: list[str]
    partitioning_required: bool = False
    partition_count: int | None = Field(default=None, ge=1)
    partitioning_strategy: str | None = None
    expected_time_range: str | None = None
    estimated_throughput_mteps: int | None = Field(default=None, ge=0)
    convergence_iteration_range: str | None = None

    @model_validator(mode="after")
    def _partition_fields_match_flag(self) -> Recommendation:
        if self.partitioning_required != (self.partition_count is not None):
            raise ValueError("partition_count must be set exactly when partitioning is required")
        return self


class NamedGraph(BaseModel):
    id: str = Field(..., min_length=1)
    name: str | None = None
    graph: GraphDescriptor


class BatchRecommendationRequest(BaseModel):
    dataset_ids: list[str] = Field(
        default_factory=list, description="Catalog dataset ids, e.g. [\"pokec\", \"orkut\"]"
    )
    custom: list[NamedGraph] = Field(default_factory=list)
    memory_limit_gb: float = Field(default=DEFAULT_MEMORY_LIMIT_GB, gt=0)


class BatchRecommendationResponse(BaseModel):
    memory_limit_gb: float
    results: dict[str, Recommendation]
