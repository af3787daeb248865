import math

import pytest
from pydantic import ValidationError

from hexlattice import UNIT_GEOMETRY, Cell, HexGeometry, area


def test_unit_hex_dimensions():
    assert UNIT_GEOMETRY.width == 1.0
    assert math.isclose(UNIT_GEOMETRY.height, math.sqrt(3) / 2)


def test_centers_of_neighbors():
    g = UNIT_GEOMETRY
    assert g.center(Cell(0, 0, 0)) == (0.0, 0.0)
    px, py = g.center(Cell(0, 1, -1))
    assert px == 0.0 and math.isclose(py, g.height)
    ex, ey = g.center(Cell(1, 0, -1))
    assert math.isclose(ex, 0.75) and math.isclose(ey, g.height / 2)


def test_neighbor_centers_are_equidistant():
    g = HexGeometry(size=2.0, origin_x=5.0, origin_y=-3.0)
    cx, cy = g.center(Cell(1, -2, 1))
    for neighbor in Cell(1, -2, 1).all_adjacent():
        px, py = g.center(neighbor)
        assert math.isclose(math.hypot(px - cx, py - cy), g.height)


def test_corners_sit_on_circumcircle():
    g = UNIT_GEOMETRY
    corners = g.corners(Cell(0, 0, 0))
    assert len(corners) == 6
    assert corners[0] == pytest.approx((0.5, 0.0))
    for px, py in corners:
        assert math.isclose(math.hypot(px, py), 0.5)


def test_cell_at_inverts_center():
    g = HexGeometry(size=3.5, origin_x=10.0, origin_y=4.0)
    for cell in area(Cell(0, 0, 0), 4):
        px, py = g.center(cell)
        assert g.cell_at(px, py) == cell
        assert g.cell_at(px + 0.3, py - 0.2) == cell


def test_geometry_validates_size():
    with pytest.raises(ValidationError):
        HexGeometry(size=0)
    with pytest.raises(ValidationError):
        HexGeometry(scale=2.0)
