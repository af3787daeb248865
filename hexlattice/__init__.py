"""Hexagonal lattice coordinates, neighbors and traversal queries."""

from .cell import Cell, CellLike, to_cell
from .conversions import (
    axial_to_cube,
    axial_to_offset,
    cube_round,
    cube_to_axial,
    cube_to_offset,
    offset_to_axial,
    offset_to_cube,
)
from .coords import Axial, Cube, Offset
from .errors import CubeInvariantError, HexLatticeError, InvalidCoordinateShape
from .geometry import UNIT_GEOMETRY, HexGeometry
from .neighbors import DIRECTIONS, Direction, adjacent, all_adjacent
from .traversal import area, distance, line, ring, spiral

__version__ = "0.1.0"

__all__ = [
    "Axial",
    "Cube",
    "Offset",
    "Cell",
    "CellLike",
    "to_cell",
    "axial_to_cube",
    "cube_to_axial",
    "axial_to_offset",
    "offset_to_axial",
    "cube_to_offset",
    "offset_to_cube",
    "cube_round",
    "Direction",
    "DIRECTIONS",
    "adjacent",
    "all_adjacent",
    "distance",
    "area",
    "ring",
    "spiral",
    "line",
    "HexGeometry",
    "UNIT_GEOMETRY",
    "HexLatticeError",
    "InvalidCoordinateShape",
    "CubeInvariantError",
    "__version__",
]
