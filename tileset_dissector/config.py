"""Configuration for tileset dissector."""

from pathlib import Path

# Tile settings
DEFAULT_TILE_SIZE = 48  # 48x48 px tiles

# Output naming: <stem>_<index><suffix>, suffix keeps its leading dot
TILE_NAME_FORMAT = "{stem}_{index}{suffix}"

# Tilesets dissected by `python -m tileset_dissector` (relative to cwd)
TILESET_ROOT = Path("assets") / "tilesets"
TILESETS = (
    "nature/nature.png",
    "interior/interior.png",
    "rubytown/rubytown.png",
)
