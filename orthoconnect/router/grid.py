"""Ruler grid — partitions the working area around the two shapes.

Rulers are the x/y coordinates of the (inflated) shape edges plus the
anchor coordinates.  Consecutive rulers bound the rows and columns of a
dense table of rectangular cells covering the working bounds.  Duplicate
rulers are legal and produce zero-width (or zero-height) cells.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from orthoconnect.geometry import Rectangle

from .anchors import compute_point, is_vertical_side
from .models import ConnectorPoint


log = logging.getLogger(__name__)


class RoutingGrid:
    """Dense (row, column) table of cells built from sorted rulers."""

    def __init__(self) -> None:
        self._rows = 0
        self._cols = 0
        self._cells: dict[int, dict[int, Rectangle]] = {}

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._cols

    def set(self, row: int, column: int, rect: Rectangle) -> None:
        self._rows = max(self._rows, row + 1)
        self._cols = max(self._cols, column + 1)
        self._cells.setdefault(row, {})[column] = rect

    def get(self, row: int, column: int) -> Rectangle | None:
        row_cells = self._cells.get(row)
        if row_cells is None:
            return None
        return row_cells.get(column)

    def cells(self) -> Iterator[tuple[int, int, Rectangle]]:
        """Yield ``(row, column, rect)`` in row-major order."""
        for row, row_cells in self._cells.items():
            for column, rect in row_cells.items():
                yield row, column, rect

    def rectangles(self) -> list[Rectangle]:
        return [rect for _, _, rect in self.cells()]

    def __len__(self) -> int:
        return sum(len(r) for r in self._cells.values())


# ── Margins, rulers, bounds ────────────────────────────────────────


def resolve_margin(
    shape_a: Rectangle,
    shape_b: Rectangle,
    margin: float,
) -> tuple[float, Rectangle, Rectangle]:
    """Inflate both shapes by *margin*, or drop the margin if they'd overlap.

    Returns ``(effective_margin, inflated_a, inflated_b)``.
    """
    inflated_a = shape_a.inflate(margin, margin)
    inflated_b = shape_b.inflate(margin, margin)
    if inflated_a.intersects(inflated_b):
        log.debug("Inflated shapes overlap at margin %.2f — using margin 0", margin)
        return 0.0, shape_a, shape_b
    return margin, inflated_a, inflated_b


def build_rulers(
    inflated_a: Rectangle,
    inflated_b: Rectangle,
    cp_a: ConnectorPoint,
    cp_b: ConnectorPoint,
) -> tuple[list[float], list[float]]:
    """Return ``(verticals, horizontals)``, each sorted ascending."""
    verticals: list[float] = []
    horizontals: list[float] = []

    for b in (inflated_a, inflated_b):
        verticals.append(b.left)
        verticals.append(b.right)
        horizontals.append(b.top)
        horizontals.append(b.bottom)

    # Rulers through the anchors themselves
    for cp in (cp_a, cp_b):
        origin = compute_point(cp)
        if is_vertical_side(cp.side):
            verticals.append(origin.x)
        else:
            horizontals.append(origin.y)

    verticals.sort()
    horizontals.sort()
    return verticals, horizontals


def working_bounds(
    inflated_a: Rectangle,
    inflated_b: Rectangle,
    margin: float,
    global_bounds: Rectangle,
) -> Rectangle:
    """Union of both shapes grown by *margin*, clipped to *global_bounds*."""
    inflated = inflated_a.union(inflated_b).inflate(margin, margin)
    clipped = Rectangle.from_ltrb(
        max(inflated.left, global_bounds.left),
        max(inflated.top, global_bounds.top),
        min(inflated.right, global_bounds.right),
        min(inflated.bottom, global_bounds.bottom),
    )
    if clipped.width < 0 or clipped.height < 0:
        log.warning(
            "Global bounds (%.1f, %.1f, %.1f, %.1f) do not overlap the shapes — "
            "ignoring them",
            global_bounds.left, global_bounds.top,
            global_bounds.right, global_bounds.bottom,
        )
        return inflated
    return clipped


def rulers_to_grid(
    verticals: list[float],
    horizontals: list[float],
    bounds: Rectangle,
) -> RoutingGrid:
    """Cut *bounds* into cells along the rulers (which must be sorted).

    The first row/column starts at the bounds' top/left edge; the last
    one extends to its bottom/right edge.
    """
    grid = RoutingGrid()

    last_y = bounds.top
    row = 0
    for y in horizontals:
        last_x = bounds.left
        column = 0
        for x in verticals:
            grid.set(row, column, Rectangle.from_ltrb(last_x, last_y, x, y))
            last_x = x
            column += 1
        # Last cell of the row
        grid.set(row, column, Rectangle.from_ltrb(last_x, last_y, bounds.right, y))
        last_y = y
        row += 1

    # Last row of cells
    last_x = bounds.left
    column = 0
    for x in verticals:
        grid.set(row, column, Rectangle.from_ltrb(last_x, last_y, x, bounds.bottom))
        last_x = x
        column += 1
    grid.set(row, column, Rectangle.from_ltrb(last_x, last_y, bounds.right, bounds.bottom))

    log.debug("Grid: %d rows × %d columns", grid.rows, grid.columns)
    return grid
