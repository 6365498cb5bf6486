from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


@dataclass(frozen=True)
class EngineConfig:
    """Every threshold the recommendation engine branches on."""

    memory_per_edge_kb: float = 0.025
    partition_fill_ratio: float = 0.8  # each partition fills 80% of the budget
    high_precision_tolerance: float = 1e-7
    # small | medium | large | very large | extreme
    band_breakpoints: tuple[int, ...] = (100_000, 1_000_000, 10_000_000, 50_000_000)
    high_density: float = 30.0
    medium_density: float = 15.0
    hits_node_threshold: int = 5_000_000
    undirected_slowdown: float = 1.7
    precision_low_factor: float = 1.5
    precision_high_factor: float = 2.0


DEFAULT_ENGINE_CONFIG = EngineConfig()

DEFAULT_MEMORY_LIMIT_GB = float(os.getenv("PAGERANK_MEMORY_LIMIT_GB", "20"))
CACHE_TTL_SECONDS = int(os.getenv("PAGERANK_CACHE_TTL", "300"))
