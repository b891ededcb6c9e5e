"""Tests for the debug image renderer."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from PIL import Image

from orthoconnect.router import RouteResult, RoutingByproduct, route_connector
from orthoconnect.visualizer import RoutingVisualizer
from tests.scene_fixture import make_blocked_scene, make_offset_scene


class TestRoutingVisualizer(unittest.TestCase):

    def test_render_png(self):
        request = make_offset_scene()
        result = route_connector(request)
        with tempfile.TemporaryDirectory() as tmp:
            out = RoutingVisualizer().render(request, result, Path(tmp) / "nested" / "route.png")
            self.assertTrue(out.exists())
            with Image.open(out) as img:
                self.assertEqual(img.format, "PNG")
                self.assertGreater(img.width, 100)
                self.assertGreater(img.height, 100)

    def test_render_without_byproduct(self):
        """Falls back to the shapes' extent when there is no grid."""
        request = make_blocked_scene()
        result = RouteResult(path=[], byproduct=RoutingByproduct())
        with tempfile.TemporaryDirectory() as tmp:
            out = RoutingVisualizer(scale=1.0).render(request, result, Path(tmp) / "empty.png")
            with Image.open(out) as img:
                # shapes span x 0..400 and y -25..75
                self.assertEqual(img.width, 400 + 2 * 20 + 1)
                self.assertEqual(img.height, 100 + 2 * 20 + 1)

    def test_large_scene_is_scaled_down(self):
        request = make_offset_scene()
        result = route_connector(request)
        with tempfile.TemporaryDirectory() as tmp:
            viz = RoutingVisualizer(scale=50.0, max_size=500)
            out = viz.render(request, result, Path(tmp) / "big.png")
            with Image.open(out) as img:
                self.assertLessEqual(max(img.width, img.height), 500 + 2 * 20 + 1)


if __name__ == "__main__":
    unittest.main()
