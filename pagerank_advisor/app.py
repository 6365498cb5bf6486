from __future__ import annotations

import logging
import time

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from .analytics.aggregator import compute_analytics
from .analytics.store import get_events, record_recommendation
from .catalog.algorithms import find_algorithm, get_algorithm_guide
from .catalog.data_store import get_dataset, list_datasets, profile_dataset
from .catalog.models import AlgorithmFamily, AlgorithmInfo, DatasetProfile
from .recommendations.cache import cached_recommend, get_cache_stats
from .recommendations.engine import InvalidArgumentError
from .recommendations.models import (
    BatchRecommendationRequest,
    BatchRecommendationResponse,
    GraphDescriptor,
    Recommendation,
    RecommendationRequest,
)

logger = logging.getLogger(__name__)

app = FastAPI(title="PageRank Strategy Advisor API", version="1.0.0")


@app.exception_handler(InvalidArgumentError)
def invalid_argument_handler(request: Request, exc: InvalidArgumentError) -> JSONResponse:
    logger.warning("Rejected recommendation input on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=422, content={"detail": str(exc)})


def _timed_recommend(
    graph: GraphDescriptor,
    memory_limit_gb: float,
    dataset_id: str | None = None,
    batch: bool = False,
) -> Recommendation:
    start_time = time.perf_counter()
    result, cache_hit = cached_recommend(graph, memory_limit_gb)
    elapsed_ms = round((time.perf_counter() - start_time) * 1000, 3)
    record_recommendation(result, elapsed_ms, cache_hit, dataset_id=dataset_id, batch=batch)
    return result


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/datasets", response_model=list[DatasetProfile])
def datasets() -> list[DatasetProfile]:
    return [profile_dataset(d) for d in list_datasets()]


@app.get("/datasets/{dataset_id}", response_model=DatasetProfile)
def dataset_detail(dataset_id: str) -> DatasetProfile:
    dataset = get_dataset(dataset_id)
    if dataset is None:
        raise HTTPException(status_code=404, detail=f"Unknown dataset: {dataset_id}")
    return profile_dataset(dataset)


@app.get("/algorithms", response_model=list[AlgorithmFamily])
def algorithms() -> list[AlgorithmFamily]:
    return get_algorithm_guide()


@app.get("/algorithms/{name}", response_model=AlgorithmInfo)
def algorithm_detail(name: str) -> AlgorithmInfo:
    info = find_algorithm(name)
    if info is None:
        raise HTTPException(status_code=404, detail=f"Unknown algorithm: {name}")
    return info


# ── Recommendation endpoints ─────────────────────────────────────────────


@app.post("/recommendations", response_model=Recommendation)
def recommendations(body: RecommendationRequest) -> Recommendation:
    return _timed_recommend(body.graph, body.memory_limit_gb)


@app.post("/recommendations/batch", response_model=BatchRecommendationResponse)
def batch_recommendations(body: BatchRecommendationRequest) -> BatchRecommendationResponse:
    if not body.dataset_ids and not body.custom:
        raise HTTPException(status_code=422, detail="Provide at least one dataset id or custom graph")

    # Resolve every catalog id before computing anything
    graphs: dict[str, GraphDescriptor] = {}
    for dataset_id in body.dataset_ids:
        dataset = get_dataset(dataset_id)
        if dataset is None:
            raise HTTPException(status_code=404, detail=f"Unknown dataset: {dataset_id}")
        graphs[dataset.id] = dataset.graph
    for entry in body.custom:
        if entry.id in graphs:
            raise HTTPException(status_code=422, detail=f"Duplicate dataset id: {entry.id}")
        graphs[entry.id] = entry.graph

    results = {
        dataset_id: _timed_recommend(graph, body.memory_limit_gb, dataset_id=dataset_id, batch=True)
        for dataset_id, graph in graphs.items()
    }
    return BatchRecommendationResponse(memory_limit_gb=body.memory_limit_gb, results=results)


# ── Admin endpoints ──────────────────────────────────────────────────────


@app.get("/analytics")
def analytics() -> dict:
    return compute_analytics(get_events())


@app.get("/cache/stats")
def cache_stats() -> dict:
    return get_cache_stats()
