from __future__ import annotations

import time
from typing import Any

from ..recommendations.models import Recommendation

_events: list[dict[str, Any]] = []


def record_recommendation(
    recommendation: Recommendation,
    response_time_ms: float,
    cache_hit: bool,
    dataset_id: str | None = None,
    batch: bool = False,
) -> None:
    _events.append({
        "type": "recommendation",
        "timestamp": time.time(),
        "dataset_id": dataset_id,
        "algorithm": recommendation.algorithm,
        "size_band": recommendation.size_band.value,
        "performance_tier": recommendation.performance_tier.value,
        "partitioning_required": recommendation.partitioning_required,
        "response_time_ms": response_time_ms,
        "cache_hit": cache_hit,
        "batch": batch,
    })


def get_events() -> list[dict[str, Any]]:
    return _events


def clear_events() -> None:
    _events.clear()
