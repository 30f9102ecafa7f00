from __future__ import annotations
from typing import Iterable, List, Set, Tuple

# --- Edge Ingestion ---
# Turns raw (id, id) pairs into the distinct vertex set the builder indexes.
# Pairs need not be sorted or unique; self-loops are fine.
# ------------------------------------------------------

VertexId = int
Edge = Tuple[VertexId, VertexId]


def unique_vertices(edges: Iterable[Edge]) -> Set[VertexId]:
    """Set of every identifier that appears in at least one edge."""
    vertices: Set[VertexId] = set()
    for a, b in edges:
        vertices.add(a)
        vertices.add(b)
    return vertices


def sorted_vertices(edges: Iterable[Edge]) -> List[VertexId]:
    return sorted(unique_vertices(edges))


def dedup_edges(edges: Iterable[Edge]) -> List[Edge]:
    """
    Drop repeated undirected pairs, keeping the first occurrence.
    (a, b) and (b, a) count as the same pair.
    """
    seen: Set[Edge] = set()
    out: List[Edge] = []
    for a, b in edges:
        key = (a, b) if a <= b else (b, a)
        if key in seen:
            continue
        seen.add(key)
        out.append((a, b))
    return out
