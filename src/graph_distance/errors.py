from __future__ import annotations

# --- Error taxonomy ---
# Every failure the core reports derives from GraphDistanceError and from
# the matching builtin (ValueError / IndexError / LookupError).
# ------------------------------------------------------


class GraphDistanceError(Exception):
    """Base class for all errors raised by graph_distance."""


class ParseError(GraphDistanceError, ValueError):
    """A line of edge-list text did not hold two non-negative integer ids."""

    def __init__(self, message: str, lineno: int | None = None, line: str | None = None):
        self.lineno = lineno
        self.line = line
        if lineno is not None:
            message = f"line {lineno}: {message}"
        super().__init__(message)


class IndexOutOfRange(GraphDistanceError, IndexError):
    """An internal vertex index outside [0, n)."""

    def __init__(self, index: object, n: int):
        self.index = index
        self.n = n
        super().__init__(f"vertex index {index!r} out of range for graph with n={n}")


class UnknownVertex(GraphDistanceError, LookupError):
    """An external vertex identifier that the graph does not contain."""

    def __init__(self, vertex_id: object):
        self.vertex_id = vertex_id
        super().__init__(f"unknown vertex id {vertex_id!r}")


class EmptyInputError(GraphDistanceError, ValueError):
    """Statistics requested over an empty distance sequence."""
