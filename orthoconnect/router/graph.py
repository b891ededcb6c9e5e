"""Orthogonal visibility graph over candidate spots.

Nodes are interned into a dense arena: ``points[i]`` is the coordinate
of node ``i`` and ``adjacency[i]`` maps neighbour indices to edge
weights.  Edges only ever join nodes sharing an x or a y coordinate.
"""

from __future__ import annotations

import logging

from orthoconnect.geometry import Line, Point, distance


log = logging.getLogger(__name__)


class PointGraph:
    """Undirected weighted graph keyed by exact point coordinates."""

    def __init__(self) -> None:
        self.points: list[Point] = []
        self.adjacency: list[dict[int, float]] = []
        self._index: dict[Point, int] = {}

    def add(self, p: Point) -> int:
        """Register *p* (no-op if already present) and return its index."""
        idx = self._index.get(p)
        if idx is None:
            idx = len(self.points)
            self._index[p] = idx
            self.points.append(p)
            self.adjacency.append({})
        return idx

    def has(self, p: Point) -> bool:
        return p in self._index

    def index_of(self, p: Point) -> int | None:
        return self._index.get(p)

    def connect(self, a: Point, b: Point) -> None:
        """Add the directed edge a→b weighted by Euclidean distance."""
        ia = self._index.get(a)
        ib = self._index.get(b)
        if ia is None or ib is None:
            raise KeyError(f"Cannot connect {a} -> {b}: a point was not found")
        self.adjacency[ia][ib] = distance(a, b)

    def neighbours(self, idx: int) -> dict[int, float]:
        return self.adjacency[idx]

    def edge_count(self) -> int:
        """Number of undirected edges."""
        return sum(len(adj) for adj in self.adjacency) // 2

    def __len__(self) -> int:
        return len(self.points)


def build_graph(spots: list[Point]) -> tuple[PointGraph, list[Line]]:
    """Connect every spot to its nearest hot-line neighbours.

    The distinct x values and y values among the spots are the hot
    lines.  Each spot is joined, in both directions, to the spot at the
    previous hot x in its row and at the previous hot y in its column —
    if a spot exists there.  Returns the graph and its undirected edges.
    """
    graph = PointGraph()
    for p in spots:
        graph.add(p)

    hot_xs = sorted({p.x for p in graph.points})
    hot_ys = sorted({p.y for p in graph.points})
    x_rank = {x: i for i, x in enumerate(hot_xs)}
    y_rank = {y: i for i, y in enumerate(hot_ys)}

    connections: list[Line] = []

    for b in sorted(graph.points, key=lambda p: (y_rank[p.y], x_rank[p.x])):
        j = x_rank[b.x]
        if j > 0:
            a = Point(hot_xs[j - 1], b.y)
            if graph.has(a):
                graph.connect(a, b)
                graph.connect(b, a)
                connections.append(Line(a, b))

        i = y_rank[b.y]
        if i > 0:
            a = Point(b.x, hot_ys[i - 1])
            if graph.has(a):
                graph.connect(a, b)
                graph.connect(b, a)
                connections.append(Line(a, b))

    log.debug("Graph: %d nodes, %d edges (%d hot x, %d hot y)",
              len(graph), len(connections), len(hot_xs), len(hot_ys))
    return graph, connections
