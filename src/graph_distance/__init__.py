from .errors import (
    GraphDistanceError,
    ParseError,
    IndexOutOfRange,
    UnknownVertex,
    EmptyInputError,
)
from .ingest.edges import unique_vertices, sorted_vertices, dedup_edges
from .topology.graph import Graph, build_graph
from .traversal.bfs import DistanceMap, bfs_distances, bfs_distances_from_id, reachable
from .traversal.components import ComponentLabeling, label_components
from .metrics.distance_stats import (
    DistanceStats,
    mean,
    maximum,
    median,
    summarize,
    graph_statistics,
    graph_statistics_for_id,
)

__all__ = [
    "GraphDistanceError",
    "ParseError",
    "IndexOutOfRange",
    "UnknownVertex",
    "EmptyInputError",
    "unique_vertices",
    "sorted_vertices",
    "dedup_edges",
    "Graph",
    "build_graph",
    "DistanceMap",
    "bfs_distances",
    "bfs_distances_from_id",
    "reachable",
    "ComponentLabeling",
    "label_components",
    "DistanceStats",
    "mean",
    "maximum",
    "median",
    "summarize",
    "graph_statistics",
    "graph_statistics_for_id",
]
