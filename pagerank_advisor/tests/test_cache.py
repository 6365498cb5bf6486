from __future__ import annotations

from unittest.mock import patch

from fastapi.testclient import TestClient

from pagerank_advisor.app import app
from pagerank_advisor.recommendations.cache import cached_recommend, clear_cache, get_cache_stats
from pagerank_advisor.recommendations.models import GraphDescriptor

client = TestClient(app)

GRAPH = GraphDescriptor(node_count=82168, edge_count=948464)


def test_cache_miss_then_hit():
    clear_cache()
    first, hit1 = cached_recommend(GRAPH, 20)
    second, hit2 = cached_recommend(GRAPH, 20)
    assert (hit1, hit2) == (False, True)
    assert first == second
    stats = get_cache_stats()
    assert stats["hits"] == 1
    assert stats["misses"] == 1
    assert stats["hit_rate"] == 50.0


def test_cache_keys_on_memory_limit():
    clear_cache()
    cached_recommend(GRAPH, 20)
    _, hit = cached_recommend(GRAPH, 40)
    assert hit is False
    assert get_cache_stats()["size"] == 2


@patch("pagerank_advisor.recommendations.cache.CACHE_TTL_SECONDS", 0)
def test_cache_entries_expire():
    clear_cache()
    cached_recommend(GRAPH, 20)
    _, hit = cached_recommend(GRAPH, 20)
    assert hit is False
    assert get_cache_stats()["hits"] == 0


def test_cache_stats_endpoint():
    clear_cache()
    payload = {"graph": GRAPH.model_dump(), "memory_limit_gb": 20}
    client.post("/recommendations", json=payload)
    client.post("/recommendations", json=payload)
    resp = client.get("/cache/stats")
    assert resp.status_code == 200
    body = resp.json()
    assert body["hits"] >= 1
    assert "hit_rate" in body


def test_cache_hits_are_independent_copies():
    clear_cache()
    first, _ = cached_recommend(GRAPH, 20)
    first.alternatives.append("Custom Method")
    second, hit = cached_recommend(GRAPH, 20)
    third, _ = cached_recommend(GRAPH, 20)
    assert hit is True
    assert "Custom Method" not in second.alternatives
    second.reasoning_clauses.clear()
    assert third.reasoning_clauses
