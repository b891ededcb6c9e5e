"""Turn-penalized Dijkstra over the orthogonal point graph.

Changing direction costs ``(edge_weight + 1) ** 2`` on top of the edge
weight, charged on the edge leaving the bend.  The penalty grows faster
than the edge length, so long detours are preferred over extra bends.

The search runs from the origin until every reachable node is settled;
it does not stop early at the destination.
"""

from __future__ import annotations

import heapq
import logging
import math
from dataclasses import dataclass

from orthoconnect.geometry import Point

from .graph import PointGraph
from .models import EndpointNotFound


log = logging.getLogger(__name__)


HORIZONTAL = "h"
VERTICAL = "v"


def direction_of(a: Point, b: Point) -> str | None:
    """Axis of the segment a→b, or None if it is diagonal."""
    if a.y == b.y:
        return HORIZONTAL
    if a.x == b.x:
        return VERTICAL
    return None


def turn_penalty(edge_weight: float) -> float:
    return (edge_weight + 1) ** 2


@dataclass
class SearchResult:
    """Distances and parent links from a single-source search."""

    origin: int
    distances: list[float]
    parents: list[int]          # -1 = no parent (origin or unreached)

    def reached(self, idx: int) -> bool:
        return self.distances[idx] < math.inf

    def path_to(self, idx: int) -> list[int]:
        """Node indices from the origin to *idx*, or [] if unreached."""
        if not self.reached(idx):
            return []
        path = [idx]
        while self.parents[path[-1]] >= 0:
            path.append(self.parents[path[-1]])
        path.reverse()
        return path


def shortest_paths(graph: PointGraph, origin: int) -> SearchResult:
    """Single-source turn-penalized search from node *origin*."""
    n = len(graph)
    points = graph.points
    dist = [math.inf] * n
    parents = [-1] * n
    dist[origin] = 0.0

    counter = 0
    heap: list[tuple[float, int, int]] = [(0.0, counter, origin)]
    settled: set[int] = set()

    while heap:
        d, _cnt, u = heapq.heappop(heap)
        if u in settled:
            continue
        settled.add(u)

        pu = points[u]
        parent = parents[u]
        coming = direction_of(points[parent], pu) if parent >= 0 else None

        for v, weight in graph.neighbours(u).items():
            if v in settled:
                continue
            going = direction_of(pu, points[v])
            extra = turn_penalty(weight) if coming and going and coming != going else 0.0
            candidate = d + weight + extra
            if candidate < dist[v]:
                dist[v] = candidate
                parents[v] = u
                counter += 1
                heapq.heappush(heap, (candidate, counter, v))

    log.debug("Search: settled %d of %d nodes", len(settled), n)
    return SearchResult(origin=origin, distances=dist, parents=parents)


def shortest_path(graph: PointGraph, origin: Point, destination: Point) -> list[Point]:
    """Points from *origin* to *destination* inclusive; [] if unreachable.

    Raises EndpointNotFound if either point is not a graph node.
    """
    origin_idx = graph.index_of(origin)
    if origin_idx is None:
        raise EndpointNotFound(origin, "origin")
    destination_idx = graph.index_of(destination)
    if destination_idx is None:
        raise EndpointNotFound(destination, "destination")

    result = shortest_paths(graph, origin_idx)
    return [graph.points[i] for i in result.path_to(destination_idx)]
