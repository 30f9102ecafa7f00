from __future__ import annotations

import logging
from collections import Counter, deque
from dataclasses import dataclass
from typing import Deque, List, Optional, Tuple

from ..topology.graph import Graph, checked_index

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class ComponentLabeling:
    """
    labels[v] = id of the connected component holding vertex v.
    Ids are 0..count-1 in order of discovery scanning vertices 0..n-1,
    so component 0 always holds vertex 0.
    """
    labels: Tuple[int, ...]
    count: int

    def component_of(self, v: int) -> int:
        return self.labels[checked_index(v, len(self.labels))]

    def same_component(self, a: int, b: int) -> bool:
        return self.component_of(a) == self.component_of(b)

    def members(self, cid: int) -> List[int]:
        return [v for v, label in enumerate(self.labels) if label == cid]

    def sizes(self) -> List[int]:
        """sizes()[cid] = number of vertices in component cid."""
        counts = Counter(self.labels)
        return [counts[cid] for cid in range(self.count)]

    def largest(self) -> Optional[int]:
        """Id of the biggest component (lowest id on ties); None if empty."""
        sizes = self.sizes()
        if not sizes:
            return None
        return max(range(self.count), key=lambda cid: (sizes[cid], -cid))


def label_components(graph: Graph) -> ComponentLabeling:
    """
    Partition the graph into connected components.

    Scans vertices in index order and flood-fills (BFS) from each one not
    yet labeled. Every vertex is visited once over all fills: O(n + m).
    """
    labels: List[Optional[int]] = [None] * graph.n
    next_id = 0

    for root in range(graph.n):
        if labels[root] is not None:
            continue
        labels[root] = next_id
        queue: Deque[int] = deque([root])
        while queue:
            v = queue.popleft()
            for u in graph.adjacency[v]:
                if labels[u] is None:
                    labels[u] = next_id
                    queue.append(u)
        next_id += 1

    LOGGER.debug("Labeled %d components over %d vertices", next_id, graph.n)
    return ComponentLabeling(labels=tuple(labels), count=next_id)
