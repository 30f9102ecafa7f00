from __future__ import annotations
from typing import Optional, Sequence

import pandas as pd

from ..topology.graph import Graph


def distance_frame(graph: Graph, distances: Sequence[Optional[int]]) -> pd.DataFrame:
    """One row per vertex: internal index, external id, hop distance (<NA> if unreached)."""
    return pd.DataFrame(
        {
            "vertex": pd.Series(range(graph.n), dtype="int64"),
            "vertex_id": pd.Series(graph.vertex_ids, dtype="int64"),
            "distance": pd.array(list(distances), dtype="Int64"),
        }
    )


def distance_histogram(distances: Sequence[Optional[int]]) -> pd.DataFrame:
    """Number of reached vertices at each hop distance, ascending."""
    reached = pd.Series([d for d in distances if d is not None], dtype="int64")
    counts = reached.value_counts().sort_index()
    return pd.DataFrame(
        {
            "distance": counts.index.to_numpy(dtype="int64"),
            "count": counts.to_numpy(dtype="int64"),
        }
    )
