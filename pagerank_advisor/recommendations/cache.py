from __future__ import annotations

import hashlib
import json
import time
from typing import Any

from .config import CACHE_TTL_SECONDS
from .engine import recommend
from .models import GraphDescriptor, Recommendation

_cache: dict[str, dict[str, Any]] = {}
_hits: int = 0
_misses: int = 0


def _make_key(graph: GraphDescriptor, memory_limit_gb: float) -> str:
    normalized = json.dumps(
        {"graph": graph.model_dump(), "memory_limit_gb": memory_limit_gb},
        sort_keys=True,
        default=str,
    )
    return hashlib.sha256(normalized.encode()).hexdigest()[:16]


def cache_get(graph: GraphDescriptor, memory_limit_gb: float) -> Recommendation | None:
    global _hits, _misses
    key = _make_key(graph, memory_limit_gb)
    entry = _cache.get(key)
    if entry and time.time() - entry["created_at"] < CACHE_TTL_SECONDS:
        _hits += 1
        return entry["value"].model_copy(deep=True)
    if entry:
        del _cache[key]
    _misses += 1
    return None


def cache_set(graph: GraphDescriptor, memory_limit_gb: float, value: Recommendation) -> None:
    _cache[_make_key(graph, memory_limit_gb)] = {
        "value": value.model_copy(deep=True),
        "created_at": time.time(),
    }


def cached_recommend(graph: GraphDescriptor, memory_limit_gb: float) -> tuple[Recommendation, bool]:
    """Return ``(recommendation, cache_hit)``, computing and storing on a miss."""
    cached = cache_get(graph, memory_limit_gb)
    if cached is not None:
        return cached, True
    result = recommend(graph, memory_limit_gb)
    cache_set(graph, memory_limit_gb, result)
    return result, False


def get_cache_stats() -> dict:
    total = _hits + _misses
    return {
        "size": len(_cache),
        "hits": _hits,
        "misses": _misses,
        "hit_rate": round(_hits / total * 100, 1) if total > 0 else 0.0,
    }


def clear_cache() -> None:
    global _hits, _misses
    _cache.clear()
    _hits = 0
    _misses = 0
