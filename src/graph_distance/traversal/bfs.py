from __future__ import annotations

import logging
from collections import deque
from typing import Deque, Dict, List, Optional, Sequence, Tuple

from ..ingest.edges import VertexId
from ..topology.graph import Graph

LOGGER = logging.getLogger(__name__)

# distance[v] = hop count from the source, None if v was not reached
DistanceMap = Tuple[Optional[int], ...]


def bfs_distances(graph: Graph, source: int) -> DistanceMap:
    """
    Single-source hop distances by breadth-first search.

    The first time a vertex is reached is along a shortest path, so a
    distance, once set, is never overwritten. Each vertex is enqueued at
    most once: O(n + m) with m the total adjacency length.
    Raises IndexOutOfRange if source is not in [0, n).
    """
    start = graph.check_index(source)

    distance: List[Optional[int]] = [None] * graph.n
    distance[start] = 0
    queue: Deque[int] = deque([start])

    while queue:
        v = queue.popleft()
        next_d = distance[v] + 1
        for u in graph.adjacency[v]:
            if distance[u] is None:
                distance[u] = next_d
                queue.append(u)

    LOGGER.debug(
        "BFS from %d reached %d of %d vertices",
        start, graph.n - distance.count(None), graph.n,
    )
    return tuple(distance)


def bfs_distances_from_id(graph: Graph, vertex_id: VertexId) -> DistanceMap:
    """BFS from an external id; UnknownVertex if the graph lacks it."""
    return bfs_distances(graph, graph.index_of(vertex_id))


def reachable(distances: Sequence[Optional[int]]) -> List[int]:
    return [d for d in distances if d is not None]


def distance_by_id(graph: Graph, distances: Sequence[Optional[int]]) -> Dict[VertexId, Optional[int]]:
    return {graph.vertex_ids[v]: d for v, d in enumerate(distances)}
