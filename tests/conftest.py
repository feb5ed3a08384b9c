"""
Pytest configuration and shared fixtures.

Graphs are small enough to trace by hand; the expected histories in the
tests were worked out on paper from the label-ordered expansion rules.
"""

import math
import random
from pathlib import Path

import pytest

from util import Edge, Graph, Node


def _graph(nodes, edges):
    return Graph([Node(*n) for n in nodes], [Edge(*e) for e in edges])


@pytest.fixture
def graphs_dir() -> Path:
    """Return the folder holding the sample graph files."""
    return Path(__file__).parent.parent / "graphs"


@pytest.fixture
def non_admissible() -> Graph:
    """h(A) = 1000 while the true remaining cost from A is 3."""
    return _graph(
        [(0, 50, 300, "S", 5), (1, 200, 150, "A", 1000), (2, 200, 450, "B", 0),
         (3, 400, 300, "C", 0), (4, 550, 300, "G", 0)],
        [(0, 1, 1), (0, 2, 2), (1, 3, 2), (2, 3, 100), (3, 4, 1)],
    )


@pytest.fixture
def inconsistent() -> Graph:
    """h(A) = 100 > w(A, C) + h(C) = 1."""
    return _graph(
        [(0, 50, 300, "S", 10), (1, 200, 150, "A", 100), (2, 200, 450, "B", 0),
         (3, 400, 300, "C", 0), (4, 550, 300, "G", 0)],
        [(0, 1, 1), (0, 2, 1), (1, 3, 1), (2, 3, 10), (3, 4, 100)],
    )


@pytest.fixture
def line() -> Graph:
    """A - B - C - D - E, ids 0..4, weight 10 each."""
    return _graph(
        [(i, i * 10, 0, "ABCDE"[i]) for i in range(5)],
        [(i, i + 1, 10) for i in range(4)],
    )


@pytest.fixture
def grid() -> Graph:
    """3x3 grid, ids row by row, labels A..I, weights equal to the spacing."""
    nodes = [(r * 3 + c, c * 100, r * 100, "ABCDEFGHI"[r * 3 + c]) for r in range(3) for c in range(3)]
    edges = []
    for r in range(3):
        for c in range(3):
            node_id = r * 3 + c
            if c < 2:
                edges.append((node_id, node_id + 1, 100))
            if r < 2:
                edges.append((node_id, node_id + 3, 100))
    return _graph(nodes, edges)


@pytest.fixture
def triangle_with_island() -> Graph:
    """Cycle A-B-C plus an unreachable D (id 3)."""
    return _graph(
        [(0, 0, 0, "A"), (1, 10, 0, "B"), (2, 5, 10, "C"), (3, 100, 100, "D")],
        [(0, 1, 10), (1, 2, 11), (2, 0, 11)],
    )


@pytest.fixture
def shortcut() -> Graph:
    """S-G costs 10 directly but only 2 through A."""
    return _graph(
        [(0, 0, 0, "S"), (1, 1, 1, "A"), (2, 2, 0, "G")],
        [(0, 2, 10), (0, 1, 1), (1, 2, 1)],
    )


@pytest.fixture
def star() -> Graph:
    """S linked to C, A, B (in that edge order); only B leads on to G."""
    return _graph(
        [(0, 0, 0, "S"), (1, 10, 0, "C"), (2, 0, 10, "A"), (3, -10, 0, "B"), (4, -20, 0, "G")],
        [(0, 1, 1), (0, 2, 1), (0, 3, 1), (3, 4, 1)],
    )


def random_connected_graph(seed, size=12, extra_edges=8):
    """Connected graph with unique letter labels and weights >= distance."""
    rng = random.Random(seed)
    labels = rng.sample("ABCDEFGHIJKLMNOPQRSTUVWXYZ", size)
    nodes = [Node(i, rng.uniform(0, 500), rng.uniform(0, 500), labels[i]) for i in range(size)]

    def weight(a, b):
        return math.floor(math.hypot(nodes[a].x - nodes[b].x, nodes[a].y - nodes[b].y)) + 1

    pairs = set()
    for i in range(1, size):
        pairs.add((rng.randrange(i), i))
    while len(pairs) < size - 1 + extra_edges:
        a, b = sorted(rng.sample(range(size), 2))
        pairs.add((a, b))
    edges = [Edge(a, b, weight(a, b)) for a, b in sorted(pairs)]
    return Graph(nodes, edges)


@pytest.fixture
def random_graphs():
    """A batch of seeded random connected graphs."""
    return [random_connected_graph(seed) for seed in range(20)]
