"""Bounding box models: shape-polymorphic extent of a world region.

Usage:
    bbox = XZBBox.rect_from_xz_lengths(128.0, 64.0)
    bbox.max_x(), bbox.max_z()       # (128, 64)
    for point in bbox:
        ...
    bbox += XZVector(-64, -32)       # rebinds to the translated box

Adding a shape means adding it to ShapeVariant and BBoxShape, then extending
every match below; each match ends in assert_never so a type checker reports
any site that was missed.
"""

from __future__ import annotations

import warnings
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import assert_never

from xzgrid.core.bbox.rectangle import XZBBoxRect
from xzgrid.core.errors import LengthOverflowError, NegativeLengthError
from xzgrid.core.point import XZPoint, XZVector
from xzgrid.core.types import I32_MAX


class BBoxShape(Enum):
    """Discriminator of the active XZBBox variant."""

    RECT = "Rect"


class LargeIterationWarning(UserWarning):
    """Emitted when iterating a box whose block count exceeds the caller's threshold."""

    pass


ShapeVariant = XZBBoxRect
"""Union of all shape variants an XZBBox can hold."""


@dataclass(frozen=True, slots=True)
class XZBBox:
    """Bounding box in XZ block space with varied shapes.

    Immutable value: translation returns a new box with the same shape, and
    `box += v` rebinds the name like any other immutable Python value.

    Iteration borrows the box. Bounds are captured when iteration starts, so
    the same box can be iterated any number of times.
    """

    variant: ShapeVariant

    @classmethod
    def from_rect(cls, rect: XZBBoxRect) -> XZBBox:
        """Wrap an already valid rectangle."""
        return cls(rect)

    @classmethod
    def rect_from_xz_lengths(cls, length_x: float, length_z: float) -> XZBBox:
        """Construct a rectangle bbox from the x and z lengths of the world, originated at (0, 0).

        Lengths are truncated toward zero, and the box spans one more block than
        the integer part of each length: 0.0 gives a single block, 1.0 gives two.

        Checks run in a fixed order and the first failure is reported:
        x negative, z negative, x overflow, z overflow.

        Args:
            length_x: World length along x, in blocks.
            length_z: World length along z, in blocks.

        Returns:
            Rectangle bbox from (0, 0) to (int(length_x), int(length_z)) inclusive.

        Raises:
            NegativeLengthError: If a length is below zero or NaN.
            LengthOverflowError: If a length exceeds the 32-bit coordinate range.
        """
        # NaN fails every comparison, so it is reported as not >= 0
        if not length_x >= 0.0:
            raise NegativeLengthError("x", length_x)
        if not length_z >= 0.0:
            raise NegativeLengthError("z", length_z)
        if length_x > I32_MAX:
            raise LengthOverflowError("x", length_x)
        if length_z > I32_MAX:
            raise LengthOverflowError("z", length_z)

        return cls(XZBBoxRect(XZPoint.origin(), XZPoint(int(length_x), int(length_z))))

    @property
    def shape(self) -> BBoxShape:
        match self.variant:
            case XZBBoxRect():
                return BBoxShape.RECT
            case _:
                assert_never(self.variant)

    def contains(self, point: XZPoint) -> bool:
        """Check whether a block is covered."""
        match self.variant:
            case XZBBoxRect():
                return self.variant.contains(point)
            case _:
                assert_never(self.variant)

    def __contains__(self, point: object) -> bool:
        return isinstance(point, XZPoint) and self.contains(point)

    def bounding_rect(self) -> XZBBoxRect:
        """Return the circumscribed rectangle of the current shape.

        For non-rectangular shapes this encloses the shape without being equal to it.
        """
        match self.variant:
            case XZBBoxRect():
                return self.variant
            case _:
                assert_never(self.variant)

    def min_x(self) -> int:
        return self.bounding_rect().min.x

    def max_x(self) -> int:
        return self.bounding_rect().max.x

    def min_z(self) -> int:
        return self.bounding_rect().min.z

    def max_z(self) -> int:
        return self.bounding_rect().max.z

    def total_blocks(self) -> int:
        """Number of blocks covered by the shape itself."""
        match self.variant:
            case XZBBoxRect():
                return self.variant.total_blocks()
            case _:
                assert_never(self.variant)

    def translate(self, vector: XZVector) -> XZBBox:
        """Return this box shifted by vector, keeping its shape.

        Raises:
            CoordinateOverflowError: If the shifted box leaves the 32-bit range.
        """
        match self.variant:
            case XZBBoxRect():
                return XZBBox(self.variant.translate(vector))
            case _:
                assert_never(self.variant)

    def __add__(self, other: object) -> XZBBox:
        if not isinstance(other, XZVector):
            return NotImplemented
        return self.translate(other)

    def __sub__(self, other: object) -> XZBBox:
        if not isinstance(other, XZVector):
            return NotImplemented
        return self.translate(-other)

    def iter_points(self, *, warn_above: int | None = None) -> Iterator[XZPoint]:
        """Lazily yield every covered block.

        Order is x ascending in the outer loop, z ascending in the inner loop.
        Nothing is materialized, so memory stays constant for any box size.

        Args:
            warn_above: Block count above which a LargeIterationWarning is
                emitted before iteration starts. None disables the check.

        Returns:
            Fresh iterator over XZPoint; the box itself is untouched.
        """
        total = self.total_blocks()
        if warn_above is not None and total > warn_above:
            warnings.warn(
                f"Iterating {self} covers {total} blocks (threshold {warn_above})",
                LargeIterationWarning,
                stacklevel=2,
            )
        match self.variant:
            case XZBBoxRect():
                return self.variant.iter_points()
            case _:
                assert_never(self.variant)

    def __iter__(self) -> Iterator[XZPoint]:
        return self.iter_points()

    def __str__(self) -> str:
        return f"XZBBox::{self.variant}"
