from __future__ import annotations
from typing import Optional
from .graph import Graph
from ..traversal.components import ComponentLabeling, label_components
# Summary statistics over a built Graph: size, connectivity and degree spread.
# Degrees count adjacency entries, so duplicate edges and self-loops add to them.


def topology_summary(g: Graph, labeling: Optional[ComponentLabeling] = None) -> dict:
    n = g.n
    if labeling is None:
        labeling = label_components(g)
    sizes = labeling.sizes()
    comp_size = max(sizes) if sizes else 0

    degrees = [len(nbrs) for nbrs in g.adjacency]
    deg_min = min(degrees) if degrees else 0
    deg_max = max(degrees) if degrees else 0
    deg_avg = (sum(degrees) / len(degrees)) if degrees else 0.0

    return {
        "nodes": n,
        "edges": g.edge_count,
        "connected": labeling.count == 1,
        "components": labeling.count,
        "largest_component_size": comp_size,
        "isolated": sum(1 for d in degrees if d == 0),
        "degree_min": deg_min,
        "degree_avg": float(deg_avg),
        "degree_max": deg_max,
    }
