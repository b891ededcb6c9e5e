"""Path simplification — keep only the points where the path bends."""

from __future__ import annotations

from orthoconnect.geometry import Point


# Bend classifications
NONE = "none"           # straight through, no direction change
UNKNOWN = "unknown"     # at least one segment is not axis-aligned


def get_bend(a: Point, b: Point, c: Point) -> str:
    """Classify the turn at *b* on the path a → b → c.

    Returns ``"none"`` for a straight run, the cardinal direction of the
    outgoing segment (``"n"``, ``"e"``, ``"s"``, ``"w"``; y grows
    southward) for an orthogonal bend, or ``"unknown"`` otherwise.
    """
    equal_x = a.x == b.x == c.x
    equal_y = a.y == b.y == c.y
    if equal_x or equal_y:
        return NONE

    seg1_horizontal = a.y == b.y
    seg1_vertical = a.x == b.x
    seg2_horizontal = b.y == c.y
    seg2_vertical = b.x == c.x

    if not (seg1_horizontal or seg1_vertical) or not (seg2_horizontal or seg2_vertical):
        return UNKNOWN

    if seg1_horizontal and seg2_vertical:
        return "s" if c.y > b.y else "n"
    if seg1_vertical and seg2_horizontal:
        return "e" if c.x > b.x else "w"
    return UNKNOWN


def simplify_path(points: list[Point]) -> list[Point]:
    """Drop interior points that don't change the path direction.

    First and last points are always kept; so are points whose bend
    cannot be classified.
    """
    if len(points) <= 2:
        return list(points)

    result = [points[0]]
    for i in range(1, len(points) - 1):
        if get_bend(points[i - 1], points[i], points[i + 1]) != NONE:
            result.append(points[i])
    result.append(points[-1])
    return result
