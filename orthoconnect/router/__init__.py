"""Router — orthogonal connector routing between two shapes.

Submodules:
  models        Request/result dataclasses, configuration and errors.
  anchors       Connector point → anchor coordinate and antenna.
  grid          Margin resolution, rulers and the ruler grid.
  spots         Candidate waypoints (grid / lattice) and obstacle filter.
  graph         Orthogonal visibility graph over the spots.
  pathfinder    Turn-penalized Dijkstra.
  simplify      Collapse straight runs to their bends.
  validation    Request checks before routing.
  engine        Routing facade (route_connector, route_path).
  serialization JSON conversion (route_result_to_dict, parse_route_request).
"""

from .models import (
    ConnectorPoint, RouteRequest, RouteResult, RoutingByproduct,
    RouterConfig, SpotStrategy,
    RoutingError, EndpointNotFound, InvalidGeometry,
)
from .engine import route_connector, route_path
from .serialization import (
    parse_route_request, route_request_to_dict,
    route_result_to_dict, parse_route_result, byproduct_to_dict,
)

__all__ = [
    # Models
    "ConnectorPoint", "RouteRequest", "RouteResult", "RoutingByproduct",
    "RouterConfig", "SpotStrategy",
    # Errors
    "RoutingError", "EndpointNotFound", "InvalidGeometry",
    # Engine
    "route_connector", "route_path",
    # Serialization
    "parse_route_request", "route_request_to_dict",
    "route_result_to_dict", "parse_route_result", "byproduct_to_dict",
]
