from __future__ import annotations

from enum import Enum

from .cell import Cell, CellLike, to_cell


class Direction(Enum):
    """The six cube-space unit steps, declared clockwise from north."""

    N = (0, +1, -1)
    NE = (+1, 0, -1)
    SE = (+1, -1, 0)
    S = (0, -1, +1)
    SW = (-1, 0, +1)
    NW = (-1, +1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def dz(self) -> int:
        return self.value[2]

    @property
    def index(self) -> int:
        return _CLOCKWISE.index(self)

    def rotated(self, steps: int) -> "Direction":
        """Return the direction ``steps`` sixths of a turn clockwise."""

        return _CLOCKWISE[(self.index + steps) % 6]

    @property
    def opposite(self) -> "Direction":
        return self.rotated(3)


_CLOCKWISE: tuple[Direction, ...] = tuple(Direction)

DIRECTIONS = _CLOCKWISE


def adjacent(cell: CellLike, direction: Direction, steps: int = 1) -> Cell:
    if not isinstance(direction, Direction):
        raise TypeError(f"direction must be a Direction, got {direction!r}")
    origin = to_cell(cell)
    return origin.translate(direction.dx * steps, direction.dy * steps, direction.dz * steps)


def all_adjacent(cell: CellLike) -> list[Cell]:
    origin = to_cell(cell)
    return [origin.translate(d.dx, d.dy, d.dz) for d in DIRECTIONS]
