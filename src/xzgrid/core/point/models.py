"""Integer point and vector models on the XZ plane.

Usage:
    p = XZPoint(3, -7)
    moved = p + XZVector(1, 1)   # XZPoint(4, -6)
    delta = moved - p            # XZVector(1, 1)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import overload

from xzgrid.core.errors import CoordinateOverflowError
from xzgrid.core.types import Coordinate, in_i32_range


@dataclass(frozen=True, slots=True)
class XZVector:
    """Integer displacement on the XZ plane.

    Deltas are unbounded; only the points they produce are range checked.
    """

    dx: int = 0
    dz: int = 0

    @classmethod
    def zero(cls) -> XZVector:
        return cls(0, 0)

    def __add__(self, other: object) -> XZVector:
        if not isinstance(other, XZVector):
            return NotImplemented
        return XZVector(self.dx + other.dx, self.dz + other.dz)

    def __sub__(self, other: object) -> XZVector:
        if not isinstance(other, XZVector):
            return NotImplemented
        return XZVector(self.dx - other.dx, self.dz - other.dz)

    def __neg__(self) -> XZVector:
        return XZVector(-self.dx, -self.dz)

    def __str__(self) -> str:
        return f"<{self.dx}, {self.dz}>"


@dataclass(frozen=True, slots=True)
class XZPoint:
    """Block position on the XZ plane.

    Both components must fit in a signed 32-bit integer.

    Raises:
        CoordinateOverflowError: If x or z is outside the 32-bit range.
    """

    x: Coordinate
    z: Coordinate

    def __post_init__(self) -> None:
        if not (in_i32_range(self.x) and in_i32_range(self.z)):
            raise CoordinateOverflowError(f"XZPoint ({self.x}, {self.z}) exceeds i32 range")

    @classmethod
    def origin(cls) -> XZPoint:
        return cls(0, 0)

    def __add__(self, other: object) -> XZPoint:
        if not isinstance(other, XZVector):
            return NotImplemented
        return XZPoint(self.x + other.dx, self.z + other.dz)

    @overload
    def __sub__(self, other: XZVector) -> XZPoint: ...

    @overload
    def __sub__(self, other: XZPoint) -> XZVector: ...

    def __sub__(self, other: object) -> XZPoint | XZVector:
        # point - vector moves the point; point - point is the displacement between them
        if isinstance(other, XZVector):
            return XZPoint(self.x - other.dx, self.z - other.dz)
        if isinstance(other, XZPoint):
            return XZVector(self.x - other.x, self.z - other.z)
        return NotImplemented

    def __str__(self) -> str:
        return f"({self.x}, {self.z})"
