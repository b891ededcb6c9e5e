"""Candidate spots — the waypoints a connector may pass through.

Two strategies produce the raw candidates:

  grid      corners, mid-sides and centres of the ruler-grid cells
  lattice   a uniform lattice sampled around the gap between the shapes

Either way, candidates inside an inflated obstacle are discarded and the
two antennas are added back unconditionally, so the search always has
nodes at both ends.
"""

from __future__ import annotations

import logging
import math

import shapely
from shapely.strtree import STRtree

from orthoconnect.geometry import Point, Rectangle

from .grid import RoutingGrid
from .models import RouterConfig, SpotStrategy


log = logging.getLogger(__name__)


def generate_spots(
    strategy: SpotStrategy,
    *,
    grid: RoutingGrid,
    inflated_a: Rectangle,
    inflated_b: Rectangle,
    anchor_a: Point,
    anchor_b: Point,
    antennas: tuple[Point, Point],
    obstacles: list[Rectangle],
    config: RouterConfig,
) -> list[Point]:
    """Candidate spots for *strategy*, filtered, with the antennas first."""
    if strategy == SpotStrategy.GRID:
        raw = grid_spots(grid)
    elif strategy == SpotStrategy.LATTICE:
        raw = lattice_spots(inflated_a, inflated_b, anchor_a, anchor_b, config)
    else:
        raise ValueError(f"Unknown spot strategy '{strategy}'")

    candidates = reduce_points(raw)
    free = filter_spots(candidates, obstacles)
    log.debug("Spots (%s): %d raw, %d distinct, %d outside obstacles",
              strategy.value, len(raw), len(candidates), len(free))

    return [*antennas, *free]


# ── Grid strategy ──────────────────────────────────────────────────


def grid_spots(grid: RoutingGrid) -> list[Point]:
    """Border points of every grid cell, chosen by the cell's position.

    Corner cells give their four corners, cells on an outer row/column
    give the three points on that outer side, and interior cells give
    all eight border points plus the centre.
    """
    points: list[Point] = []
    last_row = grid.rows - 1
    last_col = grid.columns - 1

    for row, col, r in grid.cells():
        first_row = row == 0
        is_last_row = row == last_row
        first_col = col == 0
        is_last_col = col == last_col

        if (first_row or is_last_row) and (first_col or is_last_col):
            points += (r.north_west, r.north_east, r.south_west, r.south_east)
        elif first_row:
            points += (r.north_west, r.north, r.north_east)
        elif is_last_row:
            points += (r.south_east, r.south, r.south_west)
        elif first_col:
            points += (r.north_west, r.west, r.south_west)
        elif is_last_col:
            points += (r.north_east, r.east, r.south_east)
        else:
            points += (
                r.north_west, r.north, r.north_east, r.east,
                r.south_east, r.south, r.south_west, r.west, r.center,
            )

    return points


# ── Lattice strategy ───────────────────────────────────────────────


def _round_half_up(v: float) -> float:
    return float(math.floor(v + 0.5))


def _step_count(extent: float, config: RouterConfig) -> int:
    steps = extent / config.lattice_step
    if steps > config.lattice_min_steps:
        return int(_round_half_up(steps)) + config.lattice_extension
    return config.lattice_min_steps + config.lattice_extension


def lattice_spots(
    inflated_a: Rectangle,
    inflated_b: Rectangle,
    anchor_a: Point,
    anchor_b: Point,
    config: RouterConfig,
) -> list[Point]:
    """Uniform lattice anchored between the facing edges of the shapes.

    The lattice origin is ``lookout`` inside the nearer right edge
    horizontally and at the upper anchor vertically, so rows pass
    through left/right anchors whose offset is a multiple of the step.
    Coordinates are rounded half-up to whole units.
    """
    if config.lattice_step <= 0:
        raise ValueError(f"lattice_step must be positive, got {config.lattice_step}")

    step = config.lattice_step
    x1 = min(inflated_a.right, inflated_b.right) + config.lattice_lookout
    x2 = max(inflated_a.left, inflated_b.left) - config.lattice_lookout
    y1 = min(anchor_a.y, anchor_b.y)
    y2 = max(anchor_a.y, anchor_b.y)

    cols = _step_count(abs(x2 - x1), config)
    rows = _step_count(abs(y2 - y1), config)
    ext = config.lattice_extension

    return [
        Point(_round_half_up(x1 + j * step), _round_half_up(y1 + i * step))
        for i in range(-ext, rows)
        for j in range(-ext, cols)
    ]


# ── Dedup / obstacle filtering ─────────────────────────────────────


def reduce_points(points: list[Point]) -> list[Point]:
    """Drop repeated coordinates, keeping first-seen order."""
    return list(dict.fromkeys(points))


def filter_spots(points: list[Point], obstacles: list[Rectangle]) -> list[Point]:
    """Keep only points not contained (boundary inclusive) in any obstacle.

    The STR-tree query narrows candidates by envelope; containment is
    then confirmed with ``Rectangle.contains`` so zero-area obstacles
    behave the same as any other.
    """
    if not points or not obstacles:
        return list(points)

    tree = STRtree([o.to_shapely() for o in obstacles])
    geoms = shapely.points([p.x for p in points], [p.y for p in points])
    point_idx, obstacle_idx = tree.query(geoms)

    blocked: set[int] = set()
    for i, j in zip(point_idx.tolist(), obstacle_idx.tolist()):
        if i not in blocked and obstacles[j].contains(points[i]):
            blocked.add(i)

    return [p for i, p in enumerate(points) if i not in blocked]
