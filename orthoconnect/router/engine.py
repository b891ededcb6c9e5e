"""Routing facade — one orthogonal connector between two shapes.

Algorithm overview:
  1. Validate the request.
  2. Resolve both anchors and their antennas (anchor + margin outward).
  3. Inflate the shapes by the margin (dropped to 0 if they would
     overlap), derive rulers and cut the working bounds into a grid.
  4. Generate candidate spots (grid or lattice strategy), drop those
     inside inflated obstacles, add the antennas back.
  5. Link spots into an orthogonal visibility graph.
  6. Turn-penalized Dijkstra from the origin antenna.
  7. Simplify [start anchor, *search path, end anchor] to its bends.

Every call builds its own grid and graph; the diagnostic byproduct is
returned with the result.
"""

from __future__ import annotations

import logging

from orthoconnect.geometry import Point

from .anchors import compute_point, extrude_point
from .graph import build_graph
from .grid import build_rulers, resolve_margin, rulers_to_grid, working_bounds
from .models import (
    RouteRequest, RouteResult, RouterConfig, RoutingByproduct, InvalidGeometry,
)
from .pathfinder import shortest_path
from .simplify import simplify_path
from .spots import generate_spots
from .validation import validate_request


log = logging.getLogger(__name__)


def route_connector(
    request: RouteRequest,
    *,
    config: RouterConfig | None = None,
) -> RouteResult:
    """Route a connector from ``request.point_a`` to ``request.point_b``.

    Parameters
    ----------
    request : RouteRequest
        The two connector points, margins, global bounds and obstacles.
    config : RouterConfig | None
        Algorithm knobs.  Uses defaults when *None*.

    Returns
    -------
    RouteResult
        The simplified polyline (empty if the destination is unreachable)
        and the byproduct of this call.

    Raises
    ------
    InvalidGeometry
        If the request fails validation.
    """
    if config is None:
        config = RouterConfig()

    errors = validate_request(request)
    if errors:
        log.warning("Router: rejecting request with %d error(s): %s", len(errors), errors)
        raise InvalidGeometry(errors)

    point_a, point_b = request.point_a, request.point_b
    start = compute_point(point_a)
    end = compute_point(point_b)

    # ── 1. Margins, rulers, grid ───────────────────────────────────
    margin, inflated_a, inflated_b = resolve_margin(
        point_a.shape, point_b.shape, request.shape_margin,
    )
    verticals, horizontals = build_rulers(inflated_a, inflated_b, point_a, point_b)
    bounds = working_bounds(
        inflated_a, inflated_b, request.global_bounds_margin, request.global_bounds,
    )
    grid = rulers_to_grid(verticals, horizontals, bounds)

    # ── 2. Candidate spots ─────────────────────────────────────────
    origin = extrude_point(point_a, margin)
    destination = extrude_point(point_b, margin)
    obstacles = [inflated_a, inflated_b]
    obstacles += [o.inflate(margin, margin) for o in request.obstacles]

    spots = generate_spots(
        config.spot_strategy,
        grid=grid,
        inflated_a=inflated_a,
        inflated_b=inflated_b,
        anchor_a=start,
        anchor_b=end,
        antennas=(origin, destination),
        obstacles=obstacles,
        config=config,
    )

    # ── 3. Graph + search ──────────────────────────────────────────
    graph, connections = build_graph(spots)
    search_path = shortest_path(graph, origin, destination)

    byproduct = RoutingByproduct(
        h_rulers=horizontals,
        v_rulers=verticals,
        spots=spots,
        grid=grid.rectangles(),
        connections=connections,
        shape_margin=margin,
    )

    log.info("Router: %s → %s via %d spots, %d nodes, %d edges (%s, margin=%.1f)",
             _fmt(start), _fmt(end), len(spots), len(graph), len(connections),
             config.spot_strategy.value, margin)

    if not search_path:
        log.info("Router: no route from %s to %s", _fmt(origin), _fmt(destination))
        return RouteResult(path=[], byproduct=byproduct)

    path = simplify_path([start, *search_path, end])
    log.debug("Router: %d search points simplified to %d", len(search_path) + 2, len(path))
    return RouteResult(path=path, byproduct=byproduct)


def route_path(
    request: RouteRequest,
    *,
    config: RouterConfig | None = None,
) -> list[Point]:
    """Like ``route_connector`` but returns only the polyline."""
    return route_connector(request, config=config).path


def _fmt(p: Point) -> str:
    return f"({p.x:g}, {p.y:g})"
