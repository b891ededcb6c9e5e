"""
FastAPI web server — JSON endpoint around the connector router.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from orthoconnect.config import ROUTING_RULES
from orthoconnect.router import (
    RouterConfig, SpotStrategy, EndpointNotFound, InvalidGeometry,
    route_connector, parse_route_request, route_result_to_dict,
)


log = logging.getLogger(__name__)

# ── App ────────────────────────────────────────────────────────────

app = FastAPI(title="orthoconnect")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Models ─────────────────────────────────────────────────────────

class RectModel(BaseModel):
    left: float
    top: float
    width: float
    height: float


class ConnectorPointModel(BaseModel):
    shape: RectModel
    side: str
    distance: float


class RouteRequestModel(BaseModel):
    point_a: ConnectorPointModel
    point_b: ConnectorPointModel
    global_bounds: RectModel
    shape_margin: float | None = None
    global_bounds_margin: float | None = None
    obstacles: list[RectModel] = []
    spot_strategy: SpotStrategy | None = None
    include_byproduct: bool = False


# ── Routes ─────────────────────────────────────────────────────────

@app.get("/api/health")
def health():
    return {"status": "ok"}


@app.get("/api/config")
def get_config():
    """Default routing parameters."""
    return ROUTING_RULES.to_dict()


@app.post("/api/route")
def route(req: RouteRequestModel):
    """Route one connector and return its polyline.

    Geometry the router rejects (negative sizes, unknown sides) is a
    400; an antenna that never made it into the graph is a 422.
    """
    request = parse_route_request(
        req.model_dump(exclude={"spot_strategy", "include_byproduct"}),
    )
    config = RouterConfig()
    if req.spot_strategy is not None:
        config.spot_strategy = req.spot_strategy

    try:
        result = route_connector(request, config=config)
    except InvalidGeometry as exc:
        raise HTTPException(400, str(exc))
    except EndpointNotFound as exc:
        log.warning("Route failed: %s", exc)
        raise HTTPException(422, str(exc))

    return route_result_to_dict(result, include_byproduct=req.include_byproduct)


def main(host: str = "127.0.0.1", port: int = 8000):
    import uvicorn
    uvicorn.run("orthoconnect.web.server:app", host=host, port=port, reload=False)


if __name__ == "__main__":
    main()
