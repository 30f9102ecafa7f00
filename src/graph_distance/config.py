from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_LEVEL_ENV = "GRAPH_DISTANCE_LOG_LEVEL"


@dataclass(frozen=True)
class InputConfig:
    path: Path | None = None  # whitespace-separated edge list
    has_header: bool = False  # skip the first line of the file


@dataclass(frozen=True)
class GraphConfig:
    sort_vertices: bool = True  # sort ids before indexing -> reproducible indices
    dedup_edges: bool = False   # drop repeated unordered pairs before building


@dataclass(frozen=True)
class AnalysisConfig:
    source: int = 0  # external vertex id of the BFS source


@dataclass(frozen=True)
class RunConfig:
    input: InputConfig = field(default_factory=InputConfig)
    graph: GraphConfig = field(default_factory=GraphConfig)
    analysis: AnalysisConfig = field(default_factory=AnalysisConfig)


def parse_log_level(raw: str) -> int | None:
    """Level name ("debug") or number ("10"); None if unrecognized."""
    raw = raw.strip()
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    return level if isinstance(level, int) else None


def default_log_level() -> int:
    """Level from GRAPH_DISTANCE_LOG_LEVEL, INFO if unset or unrecognized."""
    level = parse_log_level(os.environ.get(LOG_LEVEL_ENV, ""))
    return logging.INFO if level is None else level


def configure_logging(level: int | None = None) -> None:
    logging.basicConfig(
        level=default_log_level() if level is None else level,
        format=LOG_FORMAT,
    )
