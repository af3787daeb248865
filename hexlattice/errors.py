"""Exceptions raised by the lattice coordinate model."""

from __future__ import annotations


class HexLatticeError(Exception):
    """Base class for every error raised by :mod:`hexlattice`."""


class InvalidCoordinateShape(HexLatticeError, TypeError):
    """A value is neither a 2- nor a 3-component integer coordinate."""


class CubeInvariantError(HexLatticeError, ValueError):
    """A cube triple whose components do not sum to zero."""
