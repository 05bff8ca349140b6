"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from xzgrid import XZBBox, XZBBoxRect, XZPoint


@pytest.fixture
def unit_bbox():
    """2 x 2 box at the origin."""
    return XZBBox.rect_from_xz_lengths(1.0, 1.0)


@pytest.fixture
def offset_rect():
    """3 x 2 rectangle away from the origin, straddling negative x."""
    return XZBBoxRect(XZPoint(-1, 4), XZPoint(1, 5))
