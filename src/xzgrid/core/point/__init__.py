"""Point functionality: integer positions and displacements on the XZ plane."""

from xzgrid.core.point.models import XZPoint, XZVector

__all__ = [
    "XZPoint",
    "XZVector",
]
