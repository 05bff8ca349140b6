"""Axis-aligned rectangle over integer blocks.

Usage:
    rect = XZBBoxRect(XZPoint(0, 0), XZPoint(3, 1))
    rect.total_blocks()              # 8
    XZPoint(2, 1) in rect            # True
    shifted = rect + XZVector(10, 0)
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from xzgrid.core.errors import InvalidBoundsError
from xzgrid.core.point import XZPoint, XZVector


@dataclass(frozen=True, slots=True)
class XZBBoxRect:
    """Closed rectangle of blocks: both corners are covered.

    Immutable - translation returns a new rectangle. Because both corners move by
    the same vector, translation never re-validates ordering.

    Args:
        min: Corner with the smallest x and z.
        max: Corner with the largest x and z.

    Raises:
        InvalidBoundsError: If min.x > max.x or min.z > max.z.
    """

    min: XZPoint
    max: XZPoint

    def __post_init__(self) -> None:
        if self.min.x > self.max.x or self.min.z > self.max.z:
            raise InvalidBoundsError(self.min, self.max)

    def contains(self, point: XZPoint) -> bool:
        """Check if a block lies within the rectangle, edges included."""
        return self.min.x <= point.x <= self.max.x and self.min.z <= point.z <= self.max.z

    def __contains__(self, point: object) -> bool:
        return isinstance(point, XZPoint) and self.contains(point)

    def total_blocks_x(self) -> int:
        return self.max.x - self.min.x + 1

    def total_blocks_z(self) -> int:
        return self.max.z - self.min.z + 1

    def total_blocks(self) -> int:
        """Number of covered blocks. Exact for any pair of 32-bit corners."""
        return self.total_blocks_x() * self.total_blocks_z()

    def translate(self, vector: XZVector) -> XZBBoxRect:
        """Return this rectangle shifted by vector.

        Raises:
            CoordinateOverflowError: If a shifted corner leaves the 32-bit range.
        """
        return XZBBoxRect(self.min + vector, self.max + vector)

    def iter_points(self) -> Iterator[XZPoint]:
        """Yield every covered block, x ascending outer, z ascending inner."""
        min_x, max_x = self.min.x, self.max.x
        min_z, max_z = self.min.z, self.max.z
        for x in range(min_x, max_x + 1):
            for z in range(min_z, max_z + 1):
                yield XZPoint(x, z)

    def __add__(self, other: object) -> XZBBoxRect:
        if not isinstance(other, XZVector):
            return NotImplemented
        return self.translate(other)

    def __sub__(self, other: object) -> XZBBoxRect:
        if not isinstance(other, XZVector):
            return NotImplemented
        return self.translate(-other)

    def __str__(self) -> str:
        return f"Rect({self.min}, {self.max})"
