from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

from ..recommendations.engine import compute_density, estimate_memory_gb
from ..recommendations.models import GraphDescriptor
from .models import DatasetProfile, GraphDataset

logger = logging.getLogger(__name__)

_DATA_DIR = Path(__file__).resolve().parent.parent / "data"
_DATASETS_CSV = _DATA_DIR / "datasets.csv"

_df: pd.DataFrame | None = None


def _load() -> pd.DataFrame:
    df = pd.read_csv(
        _DATASETS_CSV,
        dtype={"id": str, "name": str, "nodes": "int64", "edges": "int64", "description": str},
        true_values=["true"],
        false_values=["false"],
    )
    df["directed"] = df["directed"].astype(bool)
    # Datasets without a tolerance run at standard precision
    df["tolerance"] = pd.to_numeric(df["tolerance"], errors="coerce")
    logger.info("Loaded %d catalog datasets from %s", len(df), _DATASETS_CSV)
    return df.set_index("id", drop=False)


def get_catalog() -> pd.DataFrame:
    """Return the in-memory dataset catalog, loading it on first call."""
    global _df
    if _df is None:
        _df = _load()
    return _df


def _row_to_dataset(row: pd.Series) -> GraphDataset:
    tolerance = row["tolerance"]
    description = row["description"]
    return GraphDataset(
        id=row["id"],
        name=row["name"],
        description=description if pd.notna(description) else None,
        graph=GraphDescriptor(
            node_count=int(row["nodes"]),
            edge_count=int(row["edges"]),
            directed=bool(row["directed"]),
            tolerance=float(tolerance) if pd.notna(tolerance) else None,
        ),
    )


def list_datasets() -> list[GraphDataset]:
    return [_row_to_dataset(row) for _, row in get_catalog().iterrows()]


def get_dataset(dataset_id: str) -> GraphDataset | None:
    df = get_catalog()
    if dataset_id not in df.index:
        return None
    return _row_to_dataset(df.loc[dataset_id])


def profile_dataset(dataset: GraphDataset) -> DatasetProfile:
    graph = dataset.graph
    return DatasetProfile(
        dataset=dataset,
        density=round(compute_density(graph.node_count, graph.edge_count), 2),
        estimated_memory_gb=round(estimate_memory_gb(graph.edge_count), 2),
    )
