"""Drawing geometry for flat-topped hexes, for use by rendering code."""

from __future__ import annotations

from math import cos, pi, sin, sqrt

from pydantic import BaseModel, ConfigDict, Field

from .cell import Cell, CellLike, to_cell
from .conversions import cube_round

Point = tuple[float, float]


class HexGeometry(BaseModel):
    """Maps cells to 2D positions. ``size`` is the corner-to-corner width.

    The y axis points north, matching :attr:`~hexlattice.neighbors.Direction.N`.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    size: float = Field(default=1.0, gt=0.0)
    origin_x: float = Field(default=0.0)
    origin_y: float = Field(default=0.0)

    @property
    def width(self) -> float:
        return self.size

    @property
    def height(self) -> float:
        return self.size * sqrt(3.0) / 2.0

    def center(self, cell: CellLike) -> Point:
        c = to_cell(cell)
        px = self.origin_x + 0.75 * self.width * c.x
        py = self.origin_y + self.height * (c.y + c.x / 2.0)
        return px, py

    def corners(self, cell: CellLike) -> list[Point]:
        """Return the six vertices, counter-clockwise from due east."""

        cx, cy = self.center(cell)
        radius = self.width / 2.0
        return [
            (cx + radius * cos(pi / 3.0 * i), cy + radius * sin(pi / 3.0 * i))
            for i in range(6)
        ]

    def cell_at(self, px: float, py: float) -> Cell:
        fx = (px - self.origin_x) / (0.75 * self.width)
        fy = (py - self.origin_y) / self.height - fx / 2.0
        return to_cell(cube_round(fx, fy, -fx - fy))


UNIT_GEOMETRY = HexGeometry()
