"""Walk a configured world region chunk by chunk.

Reads XZGRID_LENGTH_X / XZGRID_LENGTH_Z (or a .env file) and reports which
16 x 16 chunks the world touches and how many of each chunk's blocks it covers.
"""

import argparse

from xzgrid import XZBBox, XZBBoxRect, XZPoint, XZVector
from xzgrid.config import WorldSettings

CHUNK_SIZE = 16


def iter_chunks(world: XZBBox):
    """Yield (chunk_x, chunk_z, chunk_bbox) for every chunk overlapping the world."""
    first = XZBBox(XZBBoxRect(XZPoint(0, 0), XZPoint(CHUNK_SIZE - 1, CHUNK_SIZE - 1)))
    for chunk_x in range(world.min_x() // CHUNK_SIZE, world.max_x() // CHUNK_SIZE + 1):
        for chunk_z in range(world.min_z() // CHUNK_SIZE, world.max_z() // CHUNK_SIZE + 1):
            yield chunk_x, chunk_z, first + XZVector(chunk_x * CHUNK_SIZE, chunk_z * CHUNK_SIZE)


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--length-x", type=float, default=None)
    parser.add_argument("--length-z", type=float, default=None)
    args = parser.parse_args()

    overrides = {
        key: value
        for key, value in (("length_x", args.length_x), ("length_z", args.length_z))
        if value is not None
    }
    settings = WorldSettings(**overrides)
    world = settings.bbox()
    print(f"World {world}: {world.total_blocks()} blocks")

    for chunk_x, chunk_z, chunk in iter_chunks(world):
        covered = sum(1 for p in chunk if p in world)
        print(f"chunk ({chunk_x}, {chunk_z}): {covered}/{chunk.total_blocks()} blocks")


if __name__ == "__main__":
    main()
