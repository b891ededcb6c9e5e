"""Tests for JSON conversion of requests and results."""

from __future__ import annotations

import json
import unittest

from orthoconnect.config import ROUTING_RULES
from orthoconnect.geometry import Point, Rectangle
from orthoconnect.router import (
    RouterConfig, SpotStrategy,
    route_connector, parse_route_request, route_request_to_dict,
    route_result_to_dict, parse_route_result,
)
from tests.scene_fixture import make_offset_scene, make_request_dict


class TestRequestSerialization(unittest.TestCase):

    def test_parse(self):
        req = parse_route_request(make_request_dict())
        self.assertEqual(req.point_b.shape, Rectangle(300, 150, 100, 50))
        self.assertEqual(req.point_a.side, "right")
        self.assertEqual(req.point_a.distance, 25.0)
        self.assertEqual(req.shape_margin, 10.0)
        self.assertEqual(req.obstacles, [])

    def test_missing_fields_use_defaults(self):
        data = make_request_dict()
        del data["shape_margin"]
        del data["global_bounds_margin"]
        del data["obstacles"]
        req = parse_route_request(data)
        self.assertEqual(req.shape_margin, ROUTING_RULES.shape_margin)
        self.assertEqual(req.global_bounds_margin, ROUTING_RULES.global_bounds_margin)
        self.assertEqual(req.obstacles, [])

    def test_to_dict_matches_parsed(self):
        req = make_offset_scene()
        data = json.loads(json.dumps(route_request_to_dict(req)))
        self.assertEqual(parse_route_request(data), req)

    def test_missing_required_field(self):
        data = make_request_dict()
        del data["point_a"]
        with self.assertRaises(KeyError):
            parse_route_request(data)


class TestResultSerialization(unittest.TestCase):

    def setUp(self):
        config = RouterConfig(spot_strategy=SpotStrategy.GRID)
        self.result = route_connector(make_offset_scene(), config=config)

    def test_path_only_by_default(self):
        data = route_result_to_dict(self.result)
        self.assertEqual(set(data), {"path", "ok"})
        self.assertTrue(data["ok"])
        self.assertEqual(data["path"][0], [100, 25])
        self.assertEqual(data["path"][-1], [300, 175])

    def test_byproduct_is_json_safe(self):
        data = route_result_to_dict(self.result, include_byproduct=True)
        text = json.dumps(data)
        bp = json.loads(text)["byproduct"]
        self.assertEqual(bp["shape_margin"], 10.0)
        self.assertEqual(len(bp["grid"]), len(self.result.byproduct.grid))
        self.assertEqual(len(bp["connections"][0]), 2)

    def test_parse_back(self):
        data = json.loads(json.dumps(route_result_to_dict(self.result, include_byproduct=True)))
        parsed = parse_route_result(data)
        self.assertEqual(parsed.path, self.result.path)
        self.assertEqual(parsed.byproduct.spots, self.result.byproduct.spots)
        self.assertEqual(parsed.byproduct.connections, self.result.byproduct.connections)

    def test_parse_without_byproduct(self):
        parsed = parse_route_result({"path": [[0, 0], [10, 0]], "ok": True})
        self.assertEqual(parsed.path, [Point(0, 0), Point(10, 0)])
        self.assertEqual(parsed.byproduct.spots, [])
        self.assertTrue(parsed.ok)


if __name__ == "__main__":
    unittest.main()
