from __future__ import annotations

import logging
import operator
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import networkx as nx

from ..errors import IndexOutOfRange, UnknownVertex
from ..ingest.edges import Edge, VertexId, dedup_edges, unique_vertices

LOGGER = logging.getLogger(__name__)

# --- Graph Builder ---
# Maps arbitrary vertex ids onto a dense 0..n-1 index space and stores an
# undirected adjacency list over those indices. Each edge is inserted in
# both directions; duplicate edges keep their multiplicity.
# ------------------------------------------------------


def checked_index(v: object, n: int) -> int:
    """
    v as a plain int in [0, n), else IndexOutOfRange.
    Anything operator.index accepts (numpy ints included) counts; bools do not.
    """
    if isinstance(v, bool):
        raise IndexOutOfRange(v, n)
    try:
        idx = operator.index(v)
    except TypeError:
        raise IndexOutOfRange(v, n) from None
    if not 0 <= idx < n:
        raise IndexOutOfRange(v, n)
    return idx


@dataclass(frozen=True)
class Graph:
    """
    Immutable undirected graph over internal indices [0, n).

    adjacency[v] holds the indices adjacent to v (order irrelevant,
    duplicates allowed). vertex_ids[v] is the external id of index v.
    """
    adjacency: Tuple[Tuple[int, ...], ...]
    vertex_ids: Tuple[VertexId, ...]
    _index: Dict[VertexId, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_index", {vid: i for i, vid in enumerate(self.vertex_ids)})

    @property
    def n(self) -> int:
        return len(self.adjacency)

    @property
    def edge_count(self) -> int:
        # self-loops sit twice in one list, so halving still counts them once
        return sum(len(nbrs) for nbrs in self.adjacency) // 2

    def check_index(self, v: object) -> int:
        """Return v as an int index, or raise IndexOutOfRange."""
        return checked_index(v, self.n)

    def neighbors(self, v: int) -> Tuple[int, ...]:
        return self.adjacency[self.check_index(v)]

    def degree(self, v: int) -> int:
        return len(self.neighbors(v))

    def index_of(self, vertex_id: VertexId) -> int:
        try:
            return self._index[vertex_id]
        except (KeyError, TypeError):
            raise UnknownVertex(vertex_id) from None

    def vertex_id(self, v: int) -> VertexId:
        return self.vertex_ids[self.check_index(v)]

    def __contains__(self, vertex_id: object) -> bool:
        try:
            return vertex_id in self._index
        except TypeError:
            return False

    def to_networkx(self) -> nx.MultiGraph:
        """
        Same graph as a networkx MultiGraph keyed by external id.
        Duplicate edges become parallel edges.
        """
        g = nx.MultiGraph()
        g.add_nodes_from(self.vertex_ids)
        for v, nbrs in enumerate(self.adjacency):
            loops = 0
            for u in nbrs:
                if v < u:
                    g.add_edge(self.vertex_ids[v], self.vertex_ids[u])
                elif v == u:
                    loops += 1
            for _ in range(loops // 2):
                g.add_edge(self.vertex_ids[v], self.vertex_ids[v])
        return g


def build_graph(
    edges: Iterable[Edge],
    vertices: Optional[Iterable[VertexId]] = None,
    *,
    sort_vertices: bool = True,
    dedup: bool = False,
) -> Graph:
    """
    Build a Graph from an edge list.

    - vertices: the vertex set to index; defaults to the ids found in edges.
      Ids listed here but absent from edges become isolated vertices.
    - sort_vertices: index ids in ascending order (reproducible). When False
      the iteration order of `vertices` is used as given.
    - dedup: drop repeated undirected pairs first.
    """
    edge_list: List[Edge] = list(edges)
    if dedup:
        before = len(edge_list)
        edge_list = dedup_edges(edge_list)
        LOGGER.debug("Dropped %d duplicate edges", before - len(edge_list))

    if vertices is None:
        vertices = unique_vertices(edge_list)
    order: Sequence[VertexId] = list(dict.fromkeys(vertices))
    if sort_vertices:
        order = sorted(order)

    index: Dict[VertexId, int] = {vid: i for i, vid in enumerate(order)}
    adjacency: List[List[int]] = [[] for _ in order]

    for a, b in edge_list:
        try:
            ia = index[a]
            ib = index[b]
        except KeyError as exc:
            raise UnknownVertex(exc.args[0]) from None
        adjacency[ia].append(ib)
        adjacency[ib].append(ia)

    graph = Graph(
        adjacency=tuple(tuple(nbrs) for nbrs in adjacency),
        vertex_ids=tuple(order),
    )
    LOGGER.debug("Built graph: n=%d, edges=%d", graph.n, graph.edge_count)
    return graph
