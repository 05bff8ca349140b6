"""Core functionalities: immutable value types for the XZ block plane.

Architecture Note:
    core/ contains pure, stateless value types. Nothing here logs, caches or
    holds external resources; environment-driven setup lives in config/.
"""

from xzgrid.core.bbox import (
    BBoxShape,
    LargeIterationWarning,
    ShapeVariant,
    XZBBox,
    XZBBoxRect,
)
from xzgrid.core.errors import (
    CoordinateOverflowError,
    InvalidBoundsError,
    InvalidLengthError,
    LengthOverflowError,
    NegativeLengthError,
    XZGridError,
)
from xzgrid.core.point import XZPoint, XZVector
from xzgrid.core.types import I32_MAX, I32_MIN, Coordinate

__all__ = [
    # Types
    "Coordinate",
    "I32_MAX",
    "I32_MIN",
    # Point
    "XZPoint",
    "XZVector",
    # Bounding box
    "XZBBox",
    "XZBBoxRect",
    "BBoxShape",
    "ShapeVariant",
    "LargeIterationWarning",
    # Errors
    "XZGridError",
    "CoordinateOverflowError",
    "InvalidBoundsError",
    "InvalidLengthError",
    "NegativeLengthError",
    "LengthOverflowError",
]
