"""
orthoconnect — entry point.

Usage:
    python -m orthoconnect route request.json            # print result JSON
    python -m orthoconnect route request.json --strategy grid --png out.png
    python -m orthoconnect serve --port 3000             # start web server
"""

import argparse
import json
import logging
import sys
from pathlib import Path


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="orthoconnect", description="Orthogonal connector routing")
    sub = p.add_subparsers(dest="cmd", required=True)

    r = sub.add_parser("route", help="Route one connector from a request JSON file")
    r.add_argument("request", help="Path to request.json")
    r.add_argument("--strategy", choices=["grid", "lattice"], default=None,
                   help="Candidate-spot strategy (default from ROUTING_RULES)")
    r.add_argument("--byproduct", action="store_true", help="Include routing diagnostics in the output")
    r.add_argument("--png", default=None, help="Write a debug image to this path")
    r.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG, INFO, ...)")

    sv = sub.add_parser("serve", help="Start the web server")
    sv.add_argument("--host", default="127.0.0.1", help="Host to bind")
    sv.add_argument("--port", type=int, default=8000, help="Port to bind")

    return p


def _route(args: argparse.Namespace) -> int:
    from orthoconnect.router import (
        RouterConfig, SpotStrategy, RoutingError,
        route_connector, parse_route_request, route_result_to_dict,
    )

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        data = json.loads(Path(args.request).read_text(encoding="utf-8"))
        request = parse_route_request(data)
    except (KeyError, TypeError, ValueError) as exc:
        print(f"Error: malformed request {args.request}: {exc!r}", file=sys.stderr)
        return 1

    config = RouterConfig()
    if args.strategy:
        config.spot_strategy = SpotStrategy(args.strategy)

    try:
        result = route_connector(request, config=config)
    except RoutingError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(json.dumps(route_result_to_dict(result, include_byproduct=args.byproduct), indent=2))

    if args.png:
        from orthoconnect.visualizer import RoutingVisualizer
        out = RoutingVisualizer().render(request, result, Path(args.png))
        print(f"Debug image written to {out}", file=sys.stderr)

    return 0 if result.ok else 2


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.cmd == "route":
        return _route(args)

    if args.cmd == "serve":
        from orthoconnect.web.server import main as serve
        serve(host=args.host, port=args.port)
        return 0

    return 2


if __name__ == "__main__":
    sys.exit(main())
