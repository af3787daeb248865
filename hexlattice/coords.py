from __future__ import annotations
from dataclasses import dataclass

from .errors import CubeInvariantError


@dataclass(frozen=True, slots=True)
class Axial:
    x: int
    y: int  # cube z is implied as -x - y


@dataclass(frozen=True, slots=True)
class Cube:
    x: int
    y: int
    z: int

    def __post_init__(self) -> None:
        if self.x + self.y + self.z != 0:
            raise CubeInvariantError("For cube coords, x + y + z must be 0")


@dataclass(frozen=True, slots=True)
class Offset:
    col: int  # same as cube x
    row: int  # odd columns shifted by half a row
