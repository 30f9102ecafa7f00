from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable

import numpy as np

from ..errors import EmptyInputError
from ..ingest.edges import VertexId
from ..topology.graph import Graph
from ..traversal.bfs import bfs_distances, reachable

# --- Distance Statistics ---
# Reduces a hop-distance distribution to mean / max / median.
# All three come from one sorted working copy, so max and median
# are always read off the same data.
# ------------------------------------------------------


@dataclass(frozen=True)
class DistanceStats:
    mean: float
    maximum: int
    median: float
    count: int

    def as_tuple(self) -> tuple[float, int, float]:
        return (self.mean, self.maximum, self.median)


def _sorted_copy(distances: Iterable[int]) -> np.ndarray:
    arr = np.sort(np.fromiter(distances, dtype=np.int64))
    if arr.size == 0:
        raise EmptyInputError("no distances to summarize")
    return arr


def _mean_of_sorted(arr: np.ndarray) -> float:
    return float(arr.sum()) / arr.size


def _median_of_sorted(arr: np.ndarray) -> float:
    mid = arr.size // 2
    if arr.size % 2 == 1:
        return float(arr[mid])
    return (float(arr[mid - 1]) + float(arr[mid])) / 2.0


def mean(distances: Iterable[int]) -> float:
    return _mean_of_sorted(_sorted_copy(distances))


def maximum(distances: Iterable[int]) -> int:
    return int(_sorted_copy(distances)[-1])


def median(distances: Iterable[int]) -> float:
    """Middle value; mean of the two central values for an even count."""
    return _median_of_sorted(_sorted_copy(distances))


def summarize(distances: Iterable[int]) -> DistanceStats:
    """Raises EmptyInputError when there is nothing to summarize."""
    arr = _sorted_copy(distances)
    return DistanceStats(
        mean=_mean_of_sorted(arr),
        maximum=int(arr[-1]),
        median=_median_of_sorted(arr),
        count=int(arr.size),
    )


def graph_statistics(graph: Graph, source: int) -> DistanceStats:
    """
    Statistics of the hop distances from `source` (internal index) to
    every vertex it reaches, itself included at distance 0.
    """
    if graph.n == 0:
        raise EmptyInputError("graph has no vertices")
    return summarize(reachable(bfs_distances(graph, source)))


def graph_statistics_for_id(graph: Graph, vertex_id: VertexId) -> DistanceStats:
    if graph.n == 0:
        raise EmptyInputError("graph has no vertices")
    return graph_statistics(graph, graph.index_of(vertex_id))
