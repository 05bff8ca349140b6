"""Configuration module using Pydantic Settings.

Provides typed world-extent configuration with environment variable support.

Usage:
    from xzgrid.config import WorldSettings

    settings = WorldSettings(length_x=255.0, length_z=255.0)
    bbox = settings.bbox()
"""

from xzgrid.config.settings import WorldSettings

__all__ = [
    "WorldSettings",
]
