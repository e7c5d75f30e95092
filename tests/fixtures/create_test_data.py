"""Create test tilesets for dissector tests."""

from pathlib import Path
from PIL import Image, ImageDraw


def tile_color(index: int):
    """Unique opaque color for tile `index`."""
    return ((index * 10) % 256, (index * 15) % 256, (index * 20) % 256, 255)


def create_test_tileset(output_path: Path, grid_size=(2, 1), tile_size=48):
    """Create a tileset of cols x rows tiles, each a distinct color.

    A white marker in each tile's top-left corner makes tiles
    distinguishable even if their colors wrap around.
    """
    cols, rows = grid_size
    img = Image.new('RGBA', (tile_size * cols, tile_size * rows), (0, 0, 0, 0))
    draw = ImageDraw.Draw(img)

    tile_index = 0
    for row in range(rows):
        for col in range(cols):
            x = col * tile_size
            y = row * tile_size

            draw.rectangle(
                [x, y, x + tile_size - 1, y + tile_size - 1],
                fill=tile_color(tile_index)
            )
            draw.point((x, y), fill=(255, 255, 255, 255))

            tile_index += 1

    output_path.parent.mkdir(parents=True, exist_ok=True)
    img.save(output_path)
    return output_path


if __name__ == '__main__':
    fixtures_dir = Path(__file__).parent
    create_test_tileset(fixtures_dir / 'test_tileset.png', grid_size=(4, 3))
    print("Test fixtures created")
