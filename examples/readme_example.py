from xzgrid import NegativeLengthError, XZBBox, XZPoint, XZVector


def main() -> None:
    world = XZBBox.rect_from_xz_lengths(31.7, 15.0)
    print(f"World: {world} covers {world.total_blocks()} blocks")

    spawn = XZPoint(12, 9)
    print(f"{spawn} inside world: {spawn in world}")

    # Shift the world so that it is centered on the origin
    centered = world - XZVector(world.max_x() // 2, world.max_z() // 2)
    print(f"Centered: {centered}")

    corners = [p for p in centered if p.x in (centered.min_x(), centered.max_x())]
    print(f"Blocks on the x edges: {len(corners)}")

    try:
        XZBBox.rect_from_xz_lengths(-1.0, 4.0)
    except NegativeLengthError as e:
        print(f"Rejected: {e}")


if __name__ == "__main__":
    main()
