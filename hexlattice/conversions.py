from __future__ import annotations

from .coords import Axial, Cube, Offset


def axial_to_cube(a: Axial) -> Cube:
    x = a.x
    y = a.y
    z = -x - y
    return Cube(x, y, z)


def cube_to_axial(c: Cube) -> Axial:
    return Axial(c.x, c.y)


def axial_to_offset(a: Axial) -> Offset:
    # x & 1 is the non-negative parity even for negative x, so the
    # numerator is always even and floor division is exact.
    col = a.x
    row = a.y + (a.x - (a.x & 1)) // 2
    return Offset(col, row)


def offset_to_axial(o: Offset) -> Axial:
    x = o.col
    y = o.row - (o.col - (o.col & 1)) // 2
    return Axial(x, y)


def cube_to_offset(c: Cube) -> Offset:
    return axial_to_offset(cube_to_axial(c))


def offset_to_cube(o: Offset) -> Cube:
    return axial_to_cube(offset_to_axial(o))


def cube_round(fx: float, fy: float, fz: float) -> Cube:
    """Round a real-valued cube triple to the nearest lattice cell.

    Each component is rounded on its own; the one with the largest rounding
    error is then recomputed from the other two so the result satisfies
    ``x + y + z == 0``.
    """

    rx, ry, rz = round(fx), round(fy), round(fz)
    dx, dy, dz = abs(rx - fx), abs(ry - fy), abs(rz - fz)
    if dx > dy and dx > dz:
        rx = -ry - rz
    elif dy > dz:
        ry = -rx - rz
    else:
        rz = -rx - ry
    return Cube(rx, ry, rz)
