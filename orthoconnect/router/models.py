"""Router request/result dataclasses, configuration and errors."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from orthoconnect.config import ROUTING_RULES
from orthoconnect.geometry import Line, Point, Rectangle


# Sides of a shape a connector can attach to
TOP = "top"
RIGHT = "right"
BOTTOM = "bottom"
LEFT = "left"
SIDES = (TOP, RIGHT, BOTTOM, LEFT)


class SpotStrategy(str, Enum):
    """How candidate waypoints are generated."""

    GRID = "grid"           # corners / mid-sides / centres of ruler cells
    LATTICE = "lattice"     # uniform sampling between the two shapes


# ── Request ────────────────────────────────────────────────────────


@dataclass(frozen=True)
class ConnectorPoint:
    """Where a connector attaches: a side of a shape plus an offset.

    ``distance`` is absolute, measured from the side's start corner
    (the left end of top/bottom sides, the top end of left/right sides).
    """

    shape: Rectangle
    side: str               # "top" | "right" | "bottom" | "left"
    distance: float


@dataclass
class RouteRequest:
    """Everything needed to route one connector."""

    point_a: ConnectorPoint
    point_b: ConnectorPoint
    global_bounds: Rectangle
    shape_margin: float = ROUTING_RULES.shape_margin
    global_bounds_margin: float = ROUTING_RULES.global_bounds_margin
    obstacles: list[Rectangle] = field(default_factory=list)   # every shape except A and B


# ── Result ─────────────────────────────────────────────────────────


@dataclass
class RoutingByproduct:
    """Intermediate data from one routing call, for visualization/debugging."""

    h_rulers: list[float] = field(default_factory=list)
    v_rulers: list[float] = field(default_factory=list)
    spots: list[Point] = field(default_factory=list)
    grid: list[Rectangle] = field(default_factory=list)
    connections: list[Line] = field(default_factory=list)
    shape_margin: float = 0.0       # effective margin after the overlap reset


@dataclass
class RouteResult:
    """Routed polyline (empty when no route exists) plus diagnostics."""

    path: list[Point]
    byproduct: RoutingByproduct

    @property
    def ok(self) -> bool:
        return len(self.path) > 0


# ── Router configuration ──────────────────────────────────────────


@dataclass
class RouterConfig:
    """Algorithm knobs for a routing call.

    Defaults come from ``ROUTING_RULES``.  Request-level geometry
    (margins, bounds) lives on ``RouteRequest`` instead.
    """

    spot_strategy: SpotStrategy = SpotStrategy(ROUTING_RULES.spot_strategy)
    lattice_step: float = ROUTING_RULES.lattice_step
    lattice_lookout: float = ROUTING_RULES.lattice_lookout
    lattice_extension: int = ROUTING_RULES.lattice_extension
    lattice_min_steps: int = ROUTING_RULES.lattice_min_steps


# ── Errors ─────────────────────────────────────────────────────────


class RoutingError(Exception):
    """Base class for router failures."""


class EndpointNotFound(RoutingError):
    """Raised when an antenna coordinate has no node in the routing graph."""

    def __init__(self, point: Point, role: str) -> None:
        self.point = point
        self.role = role
        super().__init__(f"{role.capitalize()} node {{{point.x},{point.y}}} not found")


class InvalidGeometry(RoutingError, ValueError):
    """Raised when a request carries geometry the router cannot use."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = list(errors)
        super().__init__("Invalid routing request: " + "; ".join(self.errors))
