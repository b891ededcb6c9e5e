"""Scene fixtures — hardcoded routing requests shared by the tests.

Every scene uses shape A = (0, 0, 100×50) anchored on its right side
25 units down, so the anchor sits at (100, 25).  Shape B is anchored on
its left side, also 25 units down.

  straight     B at (300, 0): facing anchors on the same row
  offset       B at (300, 150): anchors 150 units apart vertically
  blocked      straight scene plus a 100×100 box in the corridor
  touching     B at (100, 0): the two shapes share an edge
  close        B at (120, 0) with margin 15: inflated shapes overlap
"""

from __future__ import annotations

from orthoconnect.geometry import Rectangle
from orthoconnect.router import ConnectorPoint, RouteRequest


SHAPE_A = Rectangle(0, 0, 100, 50)
GLOBAL_BOUNDS = Rectangle(-500, -500, 2000, 2000)
MARGIN = 10.0
BOUNDS_MARGIN = 50.0
CORRIDOR_BOX = Rectangle(150, -25, 100, 100)


def make_request(
    shape_b: Rectangle,
    *,
    shape_a: Rectangle = SHAPE_A,
    margin: float = MARGIN,
    obstacles: list[Rectangle] | None = None,
) -> RouteRequest:
    """A right-side → left-side request between *shape_a* and *shape_b*."""
    return RouteRequest(
        point_a=ConnectorPoint(shape=shape_a, side="right", distance=25),
        point_b=ConnectorPoint(shape=shape_b, side="left", distance=25),
        global_bounds=GLOBAL_BOUNDS,
        shape_margin=margin,
        global_bounds_margin=BOUNDS_MARGIN,
        obstacles=list(obstacles or []),
    )


def make_straight_scene() -> RouteRequest:
    return make_request(Rectangle(300, 0, 100, 50))


def make_offset_scene() -> RouteRequest:
    return make_request(Rectangle(300, 150, 100, 50))


def make_blocked_scene() -> RouteRequest:
    return make_request(Rectangle(300, 0, 100, 50), obstacles=[CORRIDOR_BOX])


def make_touching_scene() -> RouteRequest:
    return make_request(Rectangle(100, 0, 100, 50))


def make_close_scene() -> RouteRequest:
    return make_request(Rectangle(120, 0, 100, 50), margin=15.0)


def make_request_dict() -> dict:
    """JSON form of the offset scene."""
    return {
        "point_a": {
            "shape": {"left": 0, "top": 0, "width": 100, "height": 50},
            "side": "right",
            "distance": 25,
        },
        "point_b": {
            "shape": {"left": 300, "top": 150, "width": 100, "height": 50},
            "side": "left",
            "distance": 25,
        },
        "shape_margin": 10,
        "global_bounds_margin": 50,
        "global_bounds": {"left": -500, "top": -500, "width": 2000, "height": 2000},
        "obstacles": [],
    }
