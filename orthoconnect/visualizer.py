"""
Routing Visualizer - Generates debug images for connector routes.

Draws, back to front:
- grid cells spanned by the rulers
- inflated obstacles (including the two endpoint shapes)
- visibility-graph connections and candidate spots
- the two endpoint shapes and the routed path
"""

from __future__ import annotations

import logging
from pathlib import Path

from PIL import Image, ImageDraw

from orthoconnect.geometry import Point, Rectangle
from orthoconnect.router.models import RouteRequest, RouteResult


log = logging.getLogger(__name__)


class RoutingVisualizer:
    """Render one routing call (request + result) to a PNG."""

    # Color palette
    COLORS = {
        'background': (11, 17, 32),         # Dark blue
        'grid': (51, 65, 85),               # Slate grid lines
        'obstacle': (239, 68, 68, 60),      # Red with alpha
        'obstacle_outline': (239, 68, 68),
        'connection': (71, 85, 105),        # Slate
        'spot': (148, 163, 184),            # Gray
        'shape': (147, 197, 253),           # Light blue
        'shape_outline': (59, 130, 246),    # Blue
        'path': (253, 186, 116),            # Orange
        'anchor': (134, 239, 172),          # Green
    }

    def __init__(self, scale: float = 2.0, padding: int = 20, max_size: int = 4000):
        self.scale = scale
        self.padding = padding
        self.max_size = max_size

    def render(self, request: RouteRequest, result: RouteResult, output_path: Path) -> Path:
        """Draw *request* and *result* into *output_path*.  Returns the path."""
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        extent = self._extent(request, result)
        scale = self._fit_scale(extent)
        width = int(extent.width * scale) + 2 * self.padding + 1
        height = int(extent.height * scale) + 2 * self.padding + 1

        def to_px(x: float, y: float) -> tuple[float, float]:
            return (
                self.padding + (x - extent.left) * scale,
                self.padding + (y - extent.top) * scale,
            )

        def rect_px(r: Rectangle) -> list[tuple[float, float]]:
            # Cells clipped by tight global bounds can come out inverted
            x0, y0 = to_px(min(r.left, r.right), min(r.top, r.bottom))
            x1, y1 = to_px(max(r.left, r.right), max(r.top, r.bottom))
            return [(x0, y0), (x1, y1)]

        img = Image.new('RGBA', (width, height), self.COLORS['background'])
        draw = ImageDraw.Draw(img, 'RGBA')
        bp = result.byproduct
        margin = bp.shape_margin

        for cell in bp.grid:
            draw.rectangle(rect_px(cell), outline=self.COLORS['grid'], width=1)

        inflated = [
            request.point_a.shape.inflate(margin, margin),
            request.point_b.shape.inflate(margin, margin),
            *(o.inflate(margin, margin) for o in request.obstacles),
        ]
        for r in inflated:
            draw.rectangle(rect_px(r), fill=self.COLORS['obstacle'],
                           outline=self.COLORS['obstacle_outline'], width=1)

        for line in bp.connections:
            draw.line([to_px(line.a.x, line.a.y), to_px(line.b.x, line.b.y)],
                      fill=self.COLORS['connection'], width=1)

        for p in bp.spots:
            self._dot(draw, to_px(p.x, p.y), 1.5, self.COLORS['spot'])

        for shape in (request.point_a.shape, request.point_b.shape):
            draw.rectangle(rect_px(shape), fill=self.COLORS['shape'],
                           outline=self.COLORS['shape_outline'], width=2)

        if result.path:
            draw.line([to_px(p.x, p.y) for p in result.path],
                      fill=self.COLORS['path'], width=3)
            for p in (result.path[0], result.path[-1]):
                self._dot(draw, to_px(p.x, p.y), 4, self.COLORS['anchor'])

        img.convert('RGB').save(output_path, 'PNG')
        log.info("Visualizer: wrote %s (%dx%d)", output_path, width, height)
        return output_path

    def _extent(self, request: RouteRequest, result: RouteResult) -> Rectangle:
        """World-space area to draw: the grid if there is one, else the shapes."""
        rects = list(result.byproduct.grid) or [
            request.point_a.shape, request.point_b.shape, *request.obstacles,
        ]
        extent = rects[0]
        for r in rects[1:]:
            extent = extent.union(r)
        for p in result.path:
            extent = extent.union(Rectangle(p.x, p.y, 0, 0))
        return extent

    def _fit_scale(self, extent: Rectangle) -> float:
        span = max(extent.width, extent.height)
        if span * self.scale > self.max_size:
            return self.max_size / span
        return self.scale

    @staticmethod
    def _dot(draw: ImageDraw.ImageDraw, center: tuple[float, float], radius: float, color):
        cx, cy = center
        draw.ellipse([(cx - radius, cy - radius), (cx + radius, cy + radius)], fill=color)
