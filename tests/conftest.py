# tests/conftest.py
"""Pytest configuration and shared graph fixtures."""

from __future__ import annotations

from typing import List, Tuple

import networkx as nx
import pytest

from graph_distance.topology.graph import Graph, build_graph


@pytest.fixture
def path_edges() -> List[Tuple[int, int]]:
    """0 - 1 - 2 - 3."""
    return [(0, 1), (1, 2), (2, 3)]


@pytest.fixture
def path_graph(path_edges: List[Tuple[int, int]]) -> Graph:
    return build_graph(path_edges)


@pytest.fixture
def two_components() -> Graph:
    """{0, 1} and {2, 3}, no edge between them."""
    return build_graph([(0, 1), (2, 3)])


@pytest.fixture
def empty_graph() -> Graph:
    return build_graph([])


@pytest.fixture
def karate() -> nx.Graph:
    """Zachary's karate club: a small connected social network (ids 0..33)."""
    return nx.karate_club_graph()


@pytest.fixture
def sparse_random() -> nx.Graph:
    """Sparse random graph with several components and isolated vertices."""
    return nx.gnp_random_graph(60, 0.03, seed=7)
