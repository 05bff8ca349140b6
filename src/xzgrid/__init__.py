"""xzgrid: bounding boxes over the XZ block plane of a voxel world.

Usage:
    from xzgrid import XZBBox, XZPoint, XZVector

    bbox = XZBBox.rect_from_xz_lengths(15.0, 15.0)   # 16 x 16 blocks at the origin
    assert XZPoint(15, 0) in bbox
    chunk = bbox + XZVector(16, 0)
    for point in chunk:
        ...
"""

__version__ = "0.1.0"

from xzgrid.core import (
    I32_MAX,
    I32_MIN,
    BBoxShape,
    CoordinateOverflowError,
    InvalidBoundsError,
    InvalidLengthError,
    LargeIterationWarning,
    LengthOverflowError,
    NegativeLengthError,
    XZBBox,
    XZBBoxRect,
    XZGridError,
    XZPoint,
    XZVector,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "XZPoint",
    "XZVector",
    "XZBBox",
    "XZBBoxRect",
    "BBoxShape",
    "I32_MIN",
    "I32_MAX",
    # Diagnostics
    "LargeIterationWarning",
    # Errors
    "XZGridError",
    "CoordinateOverflowError",
    "InvalidBoundsError",
    "InvalidLengthError",
    "NegativeLengthError",
    "LengthOverflowError",
]
