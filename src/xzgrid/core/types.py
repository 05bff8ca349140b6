"""Core type definitions for xzgrid."""

I32_MIN = -(2**31)
I32_MAX = 2**31 - 1

type Coordinate = int
"""Block coordinate on one axis of the XZ plane, always within the signed 32-bit range."""


def in_i32_range(value: int) -> bool:
    """Check if an integer fits in a signed 32-bit slot."""
    return I32_MIN <= value <= I32_MAX
