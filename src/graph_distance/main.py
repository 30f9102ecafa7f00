from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import AnalysisConfig, GraphConfig, InputConfig, RunConfig, configure_logging, parse_log_level
from .errors import GraphDistanceError
from .ingest.edge_list import read_edge_list
from .metrics.distance_stats import summarize
from .metrics.report import distance_histogram
from .topology.graph import build_graph
from .topology.stats import topology_summary
from .traversal.bfs import bfs_distances_from_id, reachable
from .traversal.components import label_components

LOGGER = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(
        prog="graph-distance",
        description="Hop-distance statistics and connected components of an undirected edge list.",
    )
    ap.add_argument("edges", type=Path, help="Whitespace-separated edge list, one 'u v' pair per line")
    ap.add_argument("--source", type=int, default=0, help="Vertex id to measure distances from")
    ap.add_argument("--header", action="store_true", help="Skip the first line of the edge file")
    ap.add_argument("--dedup", action="store_true", help="Drop repeated edges before building the graph")
    ap.add_argument("--unsorted", action="store_true",
                    help="Index vertices in discovery order instead of sorted id order")
    ap.add_argument("--show-distances", action="store_true", help="Print the distance of every vertex")
    ap.add_argument("--histogram-csv", type=Path, default=None,
                    help="Write the distance histogram (distance,count) to this CSV file")
    ap.add_argument("--log-level", default=None, help="Logging level (default: $GRAPH_DISTANCE_LOG_LEVEL or INFO)")
    return ap.parse_args(argv)


def config_from_args(args: argparse.Namespace) -> RunConfig:
    return RunConfig(
        input=InputConfig(path=args.edges, has_header=args.header),
        graph=GraphConfig(sort_vertices=not args.unsorted, dedup_edges=args.dedup),
        analysis=AnalysisConfig(source=args.source),
    )


def run(cfg: RunConfig, show_distances: bool = False, histogram_csv: Optional[Path] = None) -> None:
    edges = read_edge_list(cfg.input.path, has_header=cfg.input.has_header)
    g = build_graph(edges, sort_vertices=cfg.graph.sort_vertices, dedup=cfg.graph.dedup_edges)

    labeling = label_components(g)
    print("=== Topology summary ===")
    for k, v in topology_summary(g, labeling).items():
        print(f"{k}: {v}")

    print(f"\n=== Components: {labeling.count} ===")
    largest = labeling.largest()
    if largest is not None:
        print(f"largest: id={largest}, size={labeling.sizes()[largest]}")

    source = cfg.analysis.source
    distances = bfs_distances_from_id(g, source)

    if show_distances:
        print(f"\nVertex: Distance from start vertex {source}:")
        for vid, d in zip(g.vertex_ids, distances):
            print(f"{vid}: {'Unreachable' if d is None else d}")

    stats = summarize(reachable(distances))
    print(f"\n=== Distance statistics from vertex {source} ===")
    print(f"reached: {stats.count} of {g.n}")
    print(f"mean:    {stats.mean:.4f}")
    print(f"max:     {stats.maximum}")
    print(f"median:  {stats.median:.1f}")

    if histogram_csv is not None:
        distance_histogram(distances).to_csv(histogram_csv, index=False)
        LOGGER.info("Wrote distance histogram to %s", histogram_csv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    level = None
    if args.log_level:
        level = parse_log_level(args.log_level)
        if level is None:
            print(f"error: unknown log level {args.log_level!r}", file=sys.stderr)
            return 2
    configure_logging(level)

    cfg = config_from_args(args)
    try:
        run(cfg, show_distances=args.show_distances, histogram_csv=args.histogram_csv)
    except (GraphDistanceError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
