"""The lattice cell value type and normalisation of coordinate-like inputs."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

from .conversions import axial_to_offset, offset_to_axial
from .coords import Axial, Cube, Offset
from .errors import CubeInvariantError, InvalidCoordinateShape

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .neighbors import Direction

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Cell:
    """A single hex cell, stored in canonical cube coordinates.

    Cells are immutable values: the ``with_*`` helpers return a new cell
    instead of editing this one, and every traversal query allocates fresh
    cells.
    """

    x: int
    y: int
    z: int

    def __post_init__(self) -> None:
        if not (_is_int(self.x) and _is_int(self.y) and _is_int(self.z)):
            raise InvalidCoordinateShape(
                f"cube coordinates must be integers, got ({self.x!r}, {self.y!r}, {self.z!r})"
            )
        if self.x + self.y + self.z != 0:
            raise CubeInvariantError(
                f"cube coordinates must sum to 0, got ({self.x}, {self.y}, {self.z})"
            )

    # --- Construction ---------------------------------------------------------

    @classmethod
    def from_cube(cls, x: int, y: int, z: int) -> "Cell":
        return cls(x, y, z)

    @classmethod
    def from_axial(cls, x: int, y: int) -> "Cell":
        return cls(x, y, -x - y)

    @classmethod
    def from_offset(cls, col: int, row: int) -> "Cell":
        axial = offset_to_axial(Offset(col, row))
        return cls.from_axial(axial.x, axial.y)

    @classmethod
    def of(cls, value: CellLike) -> "Cell":
        """Normalise any coordinate-like value to a :class:`Cell`."""

        return to_cell(value)

    # --- Coordinate views -----------------------------------------------------

    @property
    def cube(self) -> Cube:
        return Cube(self.x, self.y, self.z)

    @property
    def axial(self) -> Axial:
        return Axial(self.x, self.y)

    @property
    def offset(self) -> Offset:
        return axial_to_offset(self.axial)

    def with_cube(self, x: int, y: int, z: int) -> "Cell":
        return Cell(x, y, z)

    def with_axial(self, x: int, y: int) -> "Cell":
        return Cell.from_axial(x, y)

    def with_offset(self, col: int, row: int) -> "Cell":
        return Cell.from_offset(col, row)

    def translate(self, dx: int, dy: int, dz: int) -> "Cell":
        return Cell(self.x + dx, self.y + dy, self.z + dz)

    # --- Lattice queries ------------------------------------------------------

    def adjacent(self, direction: Direction) -> "Cell":
        from .neighbors import adjacent

        return adjacent(self, direction)

    def all_adjacent(self) -> list["Cell"]:
        from .neighbors import all_adjacent

        return all_adjacent(self)

    def distance_to(self, other: CellLike) -> int:
        from .traversal import distance

        return distance(self, other)

    def area(self, radius: int) -> list["Cell"]:
        from .traversal import area

        return area(self, radius)

    def ring(self, radius: int) -> list["Cell"]:
        from .traversal import ring

        return ring(self, radius)

    def spiral(self, radius: int) -> list["Cell"]:
        from .traversal import spiral

        return spiral(self, radius)

    def line_to(self, target: CellLike) -> list["Cell"]:
        from .traversal import line

        return line(self, target)


CellLike: TypeAlias = Cell | Cube | Axial | Offset | Sequence[int]


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def to_cell(value: CellLike) -> Cell:
    """Return ``value`` as a :class:`Cell`.

    Accepts a cell, one of the typed coordinate views, or a plain sequence of
    three (cube) or two (axial) integers. Any other shape raises
    :class:`InvalidCoordinateShape`.
    """

    if isinstance(value, Cell):
        return value
    if isinstance(value, Cube):
        return Cell(value.x, value.y, value.z)
    if isinstance(value, Axial):
        return Cell.from_axial(value.x, value.y)
    if isinstance(value, Offset):
        return Cell.from_offset(value.col, value.row)
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        components = tuple(value)
        if all(_is_int(item) for item in components):
            if len(components) == 3:
                return Cell(*components)
            if len(components) == 2:
                return Cell.from_axial(*components)
    logger.debug("rejected coordinate value %r", value)
    raise InvalidCoordinateShape(
        f"expected a 2- or 3-component integer coordinate, got {value!r}"
    )
