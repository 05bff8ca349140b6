"""Configuration settings using Pydantic Settings.

Reads the extent of the generated world from the environment, so scripts can
share one source of truth for the region they operate on.

Usage:
    from xzgrid.config import WorldSettings

    # Load from environment variables (XZGRID_*)
    settings = WorldSettings()

    # Or override with explicit values
    settings = WorldSettings(length_x=1023.0, length_z=511.0)
    for point in settings.iter_points():
        ...
"""

from __future__ import annotations

from collections.abc import Iterator

try:
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as e:
    raise ImportError(
        "pydantic-settings is required for config module. "
        "Install with: pip install xzgrid[config]"
    ) from e

from xzgrid.core.bbox import XZBBox
from xzgrid.core.point import XZPoint

DEFAULT_ITERATION_WARNING_BLOCKS = 1 << 24


class WorldSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for the world region.

    Lengths are validated by XZBBox.rect_from_xz_lengths when the box is built,
    not at load time, so the same errors surface whether the box comes from
    settings or from code.

    Attributes:
        length_x: World length along x, in blocks.
        length_z: World length along z, in blocks.
        iteration_warning_blocks: Block count above which iterating the world
            emits a LargeIterationWarning (None disables the warning).

    Environment Variables:
        XZGRID_LENGTH_X
        XZGRID_LENGTH_Z
        XZGRID_ITERATION_WARNING_BLOCKS
    """

    model_config = SettingsConfigDict(
        env_prefix="XZGRID_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    length_x: float = 0.0
    length_z: float = 0.0
    iteration_warning_blocks: int | None = DEFAULT_ITERATION_WARNING_BLOCKS

    def bbox(self) -> XZBBox:
        """Build the world's bounding box.

        Raises:
            InvalidLengthError: If a configured length is negative or too large.
        """
        return XZBBox.rect_from_xz_lengths(self.length_x, self.length_z)

    def iter_points(self) -> Iterator[XZPoint]:
        """Iterate every block of the world, warning above the configured threshold."""
        return self.bbox().iter_points(warn_above=self.iteration_warning_blocks)
