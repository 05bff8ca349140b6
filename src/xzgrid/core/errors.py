"""Errors raised while building grid values.

All errors are ValueError subclasses: every failure here is a bad input to a
constructor, never an operational fault.

Usage:
    try:
        bbox = XZBBox.rect_from_xz_lengths(length_x, length_z)
    except InvalidLengthError as e:
        print(e.axis, e.value)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from xzgrid.core.point import XZPoint

Axis = Literal["x", "z"]


class XZGridError(ValueError):
    """Base class for xzgrid construction errors."""

    pass


class CoordinateOverflowError(XZGridError):
    """Raised when a coordinate falls outside the signed 32-bit range."""

    pass


class InvalidBoundsError(XZGridError):
    """Raised when a rectangle's min corner exceeds its max corner on some axis."""

    def __init__(self, min: XZPoint, max: XZPoint):
        self.min = min
        self.max = max
        super().__init__(f"Invalid XZBBoxRect: min {min} must not exceed max {max} on any axis")


class InvalidLengthError(XZGridError):
    """Raised when a world length cannot describe a bounding box.

    Attributes:
        axis: Axis whose length failed validation.
        value: The offending length.
    """

    def __init__(self, axis: Axis, value: float, message: str):
        self.axis = axis
        self.value = value
        super().__init__(message)


class NegativeLengthError(InvalidLengthError):
    """Length is below zero (or NaN)."""

    def __init__(self, axis: Axis, value: float):
        super().__init__(
            axis,
            value,
            f"Invalid XZBBox::rect from xz lengths: length {axis} should be >= 0, "
            f"but encountered {value}",
        )


class LengthOverflowError(InvalidLengthError):
    """Length does not fit in a signed 32-bit coordinate."""

    def __init__(self, axis: Axis, value: float):
        super().__init__(
            axis,
            value,
            f"Invalid XZBBox::rect from xz lengths: length {axis} too large for i32: {value}",
        )
