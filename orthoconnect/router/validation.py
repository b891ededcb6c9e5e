"""Request validation — reject geometry the router cannot use."""

from __future__ import annotations

import math

from orthoconnect.geometry import Rectangle

from .models import RouteRequest, ConnectorPoint, SIDES


def _check_number(value: float, name: str, errors: list[str]) -> bool:
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        errors.append(f"{name}: expected a number, got {type(value).__name__}")
        return False
    if not math.isfinite(value):
        errors.append(f"{name}: must be finite, got {value}")
        return False
    return True


def validate_rectangle(rect: Rectangle, name: str) -> list[str]:
    """Return error messages for *rect* (empty = valid)."""
    errors: list[str] = []
    for attr in ("left", "top", "width", "height"):
        _check_number(getattr(rect, attr), f"{name}.{attr}", errors)
    if not errors:
        if rect.width < 0:
            errors.append(f"{name}.width: must be >= 0, got {rect.width}")
        if rect.height < 0:
            errors.append(f"{name}.height: must be >= 0, got {rect.height}")
    return errors


def validate_connector_point(cp: ConnectorPoint, name: str) -> list[str]:
    errors = validate_rectangle(cp.shape, f"{name}.shape")
    if cp.side not in SIDES:
        errors.append(f"{name}.side: unknown side '{cp.side}' (expected one of {', '.join(SIDES)})")
    _check_number(cp.distance, f"{name}.distance", errors)
    return errors


def validate_request(request: RouteRequest) -> list[str]:
    """Validate a RouteRequest.  Returns error messages (empty = valid)."""
    errors: list[str] = []

    errors += validate_connector_point(request.point_a, "point_a")
    errors += validate_connector_point(request.point_b, "point_b")
    errors += validate_rectangle(request.global_bounds, "global_bounds")

    for name in ("shape_margin", "global_bounds_margin"):
        value = getattr(request, name)
        if _check_number(value, name, errors) and value < 0:
            errors.append(f"{name}: must be >= 0, got {value}")

    for i, obstacle in enumerate(request.obstacles):
        errors += validate_rectangle(obstacle, f"obstacles[{i}]")

    return errors
