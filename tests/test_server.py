"""Tests for the HTTP service."""

from __future__ import annotations

import unittest

from fastapi.testclient import TestClient

from orthoconnect.config import ROUTING_RULES
from orthoconnect.web.server import app
from tests.scene_fixture import make_request_dict


class TestServer(unittest.TestCase):

    def setUp(self):
        self.client = TestClient(app)

    def test_health(self):
        resp = self.client.get("/api/health")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"status": "ok"})

    def test_config(self):
        resp = self.client.get("/api/config")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), ROUTING_RULES.to_dict())

    def test_route(self):
        body = make_request_dict()
        body["spot_strategy"] = "grid"
        resp = self.client.post("/api/route", json=body)
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertTrue(data["ok"])
        self.assertEqual(data["path"], [[100, 25], [200, 25], [200, 175], [300, 175]])
        self.assertNotIn("byproduct", data)

    def test_route_with_byproduct(self):
        body = make_request_dict()
        body["include_byproduct"] = True
        resp = self.client.post("/api/route", json=body)
        self.assertEqual(resp.status_code, 200)
        bp = resp.json()["byproduct"]
        self.assertIn("spots", bp)
        self.assertEqual(bp["shape_margin"], 10.0)

    def test_invalid_geometry_is_400(self):
        body = make_request_dict()
        body["point_a"]["shape"]["width"] = -5
        resp = self.client.post("/api/route", json=body)
        self.assertEqual(resp.status_code, 400)
        self.assertIn("point_a.shape.width", resp.json()["detail"])

    def test_unknown_side_is_400(self):
        body = make_request_dict()
        body["point_b"]["side"] = "middle"
        resp = self.client.post("/api/route", json=body)
        self.assertEqual(resp.status_code, 400)

    def test_schema_error_is_422(self):
        body = make_request_dict()
        del body["global_bounds"]
        resp = self.client.post("/api/route", json=body)
        self.assertEqual(resp.status_code, 422)

    def test_unknown_strategy_is_422(self):
        body = make_request_dict()
        body["spot_strategy"] = "spiral"
        resp = self.client.post("/api/route", json=body)
        self.assertEqual(resp.status_code, 422)


if __name__ == "__main__":
    unittest.main()
