from __future__ import annotations

from pydantic import BaseModel, Field

from ..recommendations.models import GraphDescriptor


class GraphDataset(BaseModel):
    id: str
    name: str
    description: str | None = None
    graph: GraphDescriptor


class DatasetProfile(BaseModel):
    dataset: GraphDataset
    density: float = Field(..., description="Edges per node")
    estimated_memory_gb: float


class AlgorithmInfo(BaseModel):
    name: str
    summary: str
    evidence: str | None = None


class AlgorithmFamily(BaseModel):
    family: str
    algorithms: list[AlgorithmInfo]
