"""Routing serialization — JSON conversion."""

from __future__ import annotations

from orthoconnect.config import ROUTING_RULES
from orthoconnect.geometry import Line, Point, Rectangle

from .models import ConnectorPoint, RouteRequest, RouteResult, RoutingByproduct


# ── Geometry ───────────────────────────────────────────────────────


def rect_to_dict(r: Rectangle) -> dict:
    return {"left": r.left, "top": r.top, "width": r.width, "height": r.height}


def parse_rect(data: dict) -> Rectangle:
    return Rectangle(
        left=float(data["left"]),
        top=float(data["top"]),
        width=float(data["width"]),
        height=float(data["height"]),
    )


def _point_to_list(p: Point) -> list[float]:
    return [p.x, p.y]


def _parse_point(data: list | tuple | dict) -> Point:
    if isinstance(data, dict):
        return Point(float(data["x"]), float(data["y"]))
    x, y = data
    return Point(float(x), float(y))


# ── Request ────────────────────────────────────────────────────────


def connector_point_to_dict(cp: ConnectorPoint) -> dict:
    return {
        "shape": rect_to_dict(cp.shape),
        "side": cp.side,
        "distance": cp.distance,
    }


def parse_connector_point(data: dict) -> ConnectorPoint:
    return ConnectorPoint(
        shape=parse_rect(data["shape"]),
        side=str(data["side"]),
        distance=float(data["distance"]),
    )


def route_request_to_dict(req: RouteRequest) -> dict:
    """Serialize a RouteRequest to a JSON-safe dict."""
    return {
        "point_a": connector_point_to_dict(req.point_a),
        "point_b": connector_point_to_dict(req.point_b),
        "shape_margin": req.shape_margin,
        "global_bounds_margin": req.global_bounds_margin,
        "global_bounds": rect_to_dict(req.global_bounds),
        "obstacles": [rect_to_dict(o) for o in req.obstacles],
    }


def parse_route_request(data: dict) -> RouteRequest:
    """Parse a request dict.  Missing margins fall back to ROUTING_RULES."""
    shape_margin = data.get("shape_margin")
    bounds_margin = data.get("global_bounds_margin")
    return RouteRequest(
        point_a=parse_connector_point(data["point_a"]),
        point_b=parse_connector_point(data["point_b"]),
        global_bounds=parse_rect(data["global_bounds"]),
        shape_margin=(
            float(shape_margin) if shape_margin is not None
            else ROUTING_RULES.shape_margin
        ),
        global_bounds_margin=(
            float(bounds_margin) if bounds_margin is not None
            else ROUTING_RULES.global_bounds_margin
        ),
        obstacles=[parse_rect(o) for o in data.get("obstacles") or []],
    )


# ── Result ─────────────────────────────────────────────────────────


def byproduct_to_dict(bp: RoutingByproduct) -> dict:
    return {
        "h_rulers": list(bp.h_rulers),
        "v_rulers": list(bp.v_rulers),
        "spots": [_point_to_list(p) for p in bp.spots],
        "grid": [rect_to_dict(r) for r in bp.grid],
        "connections": [
            [_point_to_list(c.a), _point_to_list(c.b)] for c in bp.connections
        ],
        "shape_margin": bp.shape_margin,
    }


def parse_byproduct(data: dict) -> RoutingByproduct:
    return RoutingByproduct(
        h_rulers=[float(v) for v in data.get("h_rulers", [])],
        v_rulers=[float(v) for v in data.get("v_rulers", [])],
        spots=[_parse_point(p) for p in data.get("spots", [])],
        grid=[parse_rect(r) for r in data.get("grid", [])],
        connections=[
            Line(_parse_point(a), _parse_point(b))
            for a, b in data.get("connections", [])
        ],
        shape_margin=float(data.get("shape_margin", 0.0)),
    )


def route_result_to_dict(result: RouteResult, *, include_byproduct: bool = False) -> dict:
    """Serialize a RouteResult to a JSON-safe dict."""
    data: dict = {
        "path": [_point_to_list(p) for p in result.path],
        "ok": result.ok,
    }
    if include_byproduct:
        data["byproduct"] = byproduct_to_dict(result.byproduct)
    return data


def parse_route_result(data: dict) -> RouteResult:
    """Parse a result dict back into a RouteResult."""
    byproduct_data = data.get("byproduct")
    return RouteResult(
        path=[_parse_point(p) for p in data.get("path", [])],
        byproduct=(
            parse_byproduct(byproduct_data) if byproduct_data is not None
            else RoutingByproduct()
        ),
    )
