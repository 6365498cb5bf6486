from __future__ import annotations

from collections import Counter
from typing import Any


def compute_analytics(events: list[dict[str, Any]]) -> dict[str, Any]:
    recs = [e for e in events if e["type"] == "recommendation"]
    total = len(recs)

    # Average response time
    times = [r["response_time_ms"] for r in recs if "response_time_ms" in r]
    avg_time = round(sum(times) / len(times), 3) if times else 0.0

    # Top algorithms
    algo_counter: Counter[str] = Counter(r["algorithm"] for r in recs)
    top_algorithms = [{"name": n, "count": c} for n, c in algo_counter.most_common(10)]

    # Top catalog datasets
    dataset_counter: Counter[str] = Counter(r["dataset_id"] for r in recs if r.get("dataset_id"))
    top_datasets = [{"id": n, "count": c} for n, c in dataset_counter.most_common(10)]

    band_distribution = dict(Counter(r["size_band"] for r in recs))

    partitioned = sum(1 for r in recs if r.get("partitioning_required"))

    cache_hits = sum(1 for r in recs if r.get("cache_hit"))
    cache_misses = total - cache_hits

    return {
        "total_recommendations": total,
        "batch_recommendations": sum(1 for r in recs if r.get("batch")),
        "avg_response_time_ms": avg_time,
        "top_algorithms": top_algorithms,
        "top_datasets": top_datasets,
        "size_band_distribution": band_distribution,
        "partitioning_rate": round(partitioned / total * 100, 1) if total else 0.0,
        "cache_stats": {
            "hits": cache_hits,
            "misses": cache_misses,
            "hit_rate": round(cache_hits / total * 100, 1) if total else 0.0,
        },
    }
