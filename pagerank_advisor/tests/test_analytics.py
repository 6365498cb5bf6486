from __future__ import annotations

from fastapi.testclient import TestClient

from pagerank_advisor.analytics.aggregator import compute_analytics
from pagerank_advisor.analytics.store import clear_events
from pagerank_advisor.app import app
from pagerank_advisor.recommendations.cache import clear_cache

client = TestClient(app)

SMALL = {"graph": {"node_count": 82168, "edge_count": 948464}, "memory_limit_gb": 32}


def test_analytics_returns_empty_initially():
    clear_events()
    resp = client.get("/analytics")
    assert resp.status_code == 200
    body = resp.json()
    assert body["total_recommendations"] == 0
    assert body["avg_response_time_ms"] == 0.0
    assert body["partitioning_rate"] == 0.0


def test_analytics_tracks_recommendations():
    clear_events()
    clear_cache()
    client.post("/recommendations", json=SMALL)
    client.post("/recommendations", json=SMALL)
    body = client.get("/analytics").json()
    assert body["total_recommendations"] == 2
    assert body["top_algorithms"] == [{"name": "Power Method", "count": 2}]
    assert body["size_band_distribution"] == {"small": 2}
    assert body["cache_stats"]["hits"] == 1


def test_analytics_tracks_batch_datasets():
    clear_events()
    client.post("/recommendations/batch", json={"dataset_ids": ["twitter", "slashdot"], "memory_limit_gb": 20})
    body = client.get("/analytics").json()
    assert body["total_recommendations"] == 2
    assert body["batch_recommendations"] == 2
    assert {d["id"] for d in body["top_datasets"]} == {"twitter", "slashdot"}
    assert body["partitioning_rate"] == 100.0


def test_compute_analytics_ignores_other_events():
    assert compute_analytics([{"type": "other"}])["total_recommendations"] == 0
