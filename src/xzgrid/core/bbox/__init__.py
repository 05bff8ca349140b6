"""Bounding box functionality: rectangles and the shape-polymorphic XZBBox."""

from xzgrid.core.bbox.models import BBoxShape, LargeIterationWarning, ShapeVariant, XZBBox
from xzgrid.core.bbox.rectangle import XZBBoxRect

__all__ = [
    "BBoxShape",
    "LargeIterationWarning",
    "ShapeVariant",
    "XZBBox",
    "XZBBoxRect",
]
