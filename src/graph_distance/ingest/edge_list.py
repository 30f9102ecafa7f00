from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import pandas as pd

from ..errors import ParseError
from .edges import Edge

LOGGER = logging.getLogger(__name__)

COMMENT_PREFIXES = ("#", "%")


def _parse_id(token: str, lineno: int | None, line: str) -> int:
    if not (token.isascii() and token.isdigit()):
        raise ParseError(f"invalid vertex id {token!r}", lineno=lineno, line=line)
    return int(token)


def parse_edge_line(line: str, lineno: int | None = None) -> Optional[Edge]:
    """
    Parse one 'u v' line. Blank and comment lines give None.
    Tokens past the second (weights, timestamps) are ignored.
    """
    stripped = line.strip()
    if not stripped or stripped.startswith(COMMENT_PREFIXES):
        return None
    parts = stripped.split()
    if len(parts) < 2:
        raise ParseError("expected two vertex ids", lineno=lineno, line=line)
    return _parse_id(parts[0], lineno, line), _parse_id(parts[1], lineno, line)


def read_edge_list(path: str | Path, has_header: bool = False) -> List[Edge]:
    path = Path(path)
    edges: List[Edge] = []
    # decoded per line so a bad byte is reported on its own line
    with path.open("rb") as fh:
        for lineno, raw in enumerate(fh, start=1):
            if has_header and lineno == 1:
                continue
            try:
                line = raw.decode("utf-8")
            except UnicodeDecodeError as exc:
                raise ParseError(f"not valid UTF-8 ({exc.reason})", lineno=lineno) from exc
            edge = parse_edge_line(line, lineno)
            if edge is not None:
                edges.append(edge)
    LOGGER.info("Read %d edges from %s", len(edges), path)
    return edges


def read_edge_frame(path: str | Path, has_header: bool = False) -> pd.DataFrame:
    """Edges as an integer frame with columns u, v."""
    edges = read_edge_list(path, has_header=has_header)
    return pd.DataFrame(edges, columns=["u", "v"]).astype("int64")
