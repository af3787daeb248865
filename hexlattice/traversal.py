"""Ring, area, distance and line queries over the hex lattice."""

from __future__ import annotations

from .cell import Cell, CellLike, to_cell
from .conversions import cube_round
from .neighbors import Direction, adjacent

# Applied to the start of every line so interpolated points never land
# exactly on a cell edge or vertex. Components sum to zero.
LINE_NUDGE: tuple[float, float, float] = (1e-6, 2e-6, -3e-6)

# Legs walked around a ring, starting from its northernmost cell.
_RING_LEGS: tuple[Direction, ...] = (
    Direction.SE,
    Direction.S,
    Direction.SW,
    Direction.NW,
    Direction.N,
    Direction.NE,
)


def distance(a: CellLike, b: CellLike) -> int:
    ca, cb = to_cell(a), to_cell(b)
    return (abs(ca.x - cb.x) + abs(ca.y - cb.y) + abs(ca.z - cb.z)) // 2


def area(cell: CellLike, radius: int) -> list[Cell]:
    """Return every cell within ``radius`` steps of ``cell``, inclusive.

    Cells are ordered by increasing x offset, then increasing y offset.
    """

    center = to_cell(cell)
    out: list[Cell] = []
    for dx in range(-radius, radius + 1):
        for dy in range(max(-radius, -radius - dx), min(radius, radius - dx) + 1):
            out.append(center.translate(dx, dy, -dx - dy))
    return out


def ring(cell: CellLike, radius: int) -> list[Cell]:
    """Return the cells exactly ``radius`` steps from ``cell``.

    The walk starts at the northernmost cell and proceeds clockwise. Any
    radius below 1 yields ``[cell]``.
    """

    center = to_cell(cell)
    if radius < 1:
        return [center]

    out: list[Cell] = []
    current = adjacent(center, Direction.N, radius)
    for direction in _RING_LEGS:
        for _ in range(radius):
            out.append(current)
            current = adjacent(current, direction)
    return out


def spiral(cell: CellLike, radius: int) -> list[Cell]:
    """Return the same cells as :func:`area`, ordered ring by ring outward."""

    center = to_cell(cell)
    out = [center]
    for k in range(1, radius + 1):
        out.extend(ring(center, k))
    return out


def line(cell: CellLike, target: CellLike) -> list[Cell]:
    """Rasterise the straight segment from ``cell`` to ``target``.

    Both endpoints are included and consecutive cells are adjacent.
    """

    start, end = to_cell(cell), to_cell(target)
    steps = distance(start, end)
    if steps == 0:
        return [start]

    ex, ey, ez = LINE_NUDGE
    ax, ay, az = start.x + ex, start.y + ey, start.z + ez
    out: list[Cell] = []
    for i in range(steps + 1):
        t = i / steps
        rounded = cube_round(
            ax + (end.x - ax) * t,
            ay + (end.y - ay) * t,
            az + (end.z - az) * t,
        )
        out.append(to_cell(rounded))
    return out
