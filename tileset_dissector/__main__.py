"""Dissect the configured tilesets: python -m tileset_dissector"""

from pathlib import Path
from typing import List

from tileset_dissector.config import DEFAULT_TILE_SIZE, TILESET_ROOT, TILESETS
from tileset_dissector.dissector import DissectionResult, dissect_images


def tileset_paths(root: Path = TILESET_ROOT) -> List[Path]:
    """Configured tileset paths under root, in config order."""
    return [root / relative for relative in TILESETS]


def run(root: Path = TILESET_ROOT, tile_size: int = DEFAULT_TILE_SIZE) -> List[DissectionResult]:
    """Dissect every configured tileset and print a summary line.

    Per-file failures are reported in the results, never raised.
    """
    results = dissect_images(tileset_paths(root), tile_size)

    tile_count = sum(result.tile_count for result in results)
    failed = sum(1 for result in results if not result.ok)
    print(f"Dissected {tile_count} tiles from {len(results)} files ({failed} failed)")

    return results


def main():
    run()


if __name__ == '__main__':
    main()
