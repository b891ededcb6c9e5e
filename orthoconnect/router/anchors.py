"""Connector anchors — where a connector leaves a shape, and its antenna."""

from __future__ import annotations

from orthoconnect.geometry import Point

from .models import ConnectorPoint, TOP, RIGHT, BOTTOM, LEFT


def is_vertical_side(side: str) -> bool:
    """True for top/bottom sides, whose anchor x becomes a vertical ruler."""
    return side == TOP or side == BOTTOM


def compute_point(cp: ConnectorPoint) -> Point:
    """Absolute coordinate of a connector point on its shape's boundary."""
    b = cp.shape
    if cp.side == TOP:
        return Point(b.left + cp.distance, b.top)
    if cp.side == BOTTOM:
        return Point(b.left + cp.distance, b.bottom)
    if cp.side == LEFT:
        return Point(b.left, b.top + cp.distance)
    if cp.side == RIGHT:
        return Point(b.right, b.top + cp.distance)
    raise ValueError(f"Unknown side '{cp.side}'")


def extrude_point(cp: ConnectorPoint, margin: float) -> Point:
    """The anchor pushed outward by *margin* along its side's normal."""
    p = compute_point(cp)
    if cp.side == TOP:
        return Point(p.x, p.y - margin)
    if cp.side == RIGHT:
        return Point(p.x + margin, p.y)
    if cp.side == BOTTOM:
        return Point(p.x, p.y + margin)
    return Point(p.x - margin, p.y)
