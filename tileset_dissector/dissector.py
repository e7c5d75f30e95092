"""Dissect tileset images into fixed-size square tiles."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Tuple
from PIL import Image

from tileset_dissector.config import DEFAULT_TILE_SIZE, TILE_NAME_FORMAT


class DissectionError(OSError):
    """A source image that cannot be dissected into tiles."""


@dataclass
class DissectionResult:
    """Outcome of dissecting a single source image."""
    source: Path
    tile_paths: List[Path] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def tile_count(self) -> int:
        return len(self.tile_paths)


def validate_tile_size(tile_size: int) -> None:
    """Raise ValueError unless tile_size is a positive integer."""
    if isinstance(tile_size, bool) or not isinstance(tile_size, int):
        raise ValueError(f"tile_size must be an integer, got {tile_size!r}")
    if tile_size <= 0:
        raise ValueError(f"tile_size must be positive, got {tile_size}")


def tile_output_path(source_path: Path, index: int) -> Path:
    """Path of tile `index`, e.g. nature.png -> nature_3.png in the same dir.

    Raises:
        DissectionError: If the source file name has no extension
    """
    source_path = Path(source_path)
    if not source_path.suffix:
        raise DissectionError(f"'{source_path.name}' has no file extension")

    name = TILE_NAME_FORMAT.format(
        stem=source_path.stem,
        index=index,
        suffix=source_path.suffix
    )
    return source_path.with_name(name)


def tile_boxes(
    width: int,
    height: int,
    tile_size: int
) -> Iterator[Tuple[int, int, int, int]]:
    """Yield (left, top, right, bottom) crop boxes in row-major order."""
    validate_tile_size(tile_size)

    for top in range(0, height, tile_size):
        for left in range(0, width, tile_size):
            yield (left, top, left + tile_size, top + tile_size)


def _output_format(source_path: Path) -> str:
    # Tiles are encoded with the writer registered for the source extension
    extension = source_path.suffix.lower()
    image_format = Image.registered_extensions().get(extension)

    if image_format is None or image_format.upper() not in Image.SAVE:
        raise DissectionError(
            f"No image writer for extension '{source_path.suffix}'"
        )
    return image_format


def dissect_image(
    source_path: Path,
    tile_size: int = DEFAULT_TILE_SIZE
) -> DissectionResult:
    """Split a tileset image into tile_size x tile_size tiles beside it.

    Tiles are written in row-major order as <stem>_<index>.<ext>, with a
    single flat index across rows. Existing tiles are overwritten.

    Read/write failures are reported on stdout and returned in the result;
    tiles written before the failure are left in place.

    Args:
        source_path: Path to the tileset image
        tile_size: Width and height of each tile in pixels

    Returns:
        DissectionResult with the written tile paths or the failure message

    Raises:
        ValueError: If tile_size is not a positive integer
    """
    validate_tile_size(tile_size)

    source_path = Path(source_path)
    result = DissectionResult(source=source_path)

    print(f"Dissecting file: '{source_path.name}'")

    try:
        image_format = _output_format(source_path)

        with Image.open(source_path) as source:
            source.load()
            width, height = source.size

            # Partial edge tiles are not supported
            if width % tile_size != 0 or height % tile_size != 0:
                raise DissectionError(
                    f"Image size {width}x{height} doesn't divide evenly "
                    f"into {tile_size}x{tile_size} tiles"
                )

            for index, box in enumerate(tile_boxes(width, height, tile_size)):
                tile_path = tile_output_path(source_path, index)
                print(f"Writing: {tile_path.name}")

                tile = source.crop(box)
                tile.save(tile_path, format=image_format)
                result.tile_paths.append(tile_path)

    except (OSError, Image.DecompressionBombError) as e:
        result.error = str(e)
        print(f"Failed to read/write file: {source_path.name} - {e}")

    return result


def dissect_images(
    source_paths: Iterable[Path],
    tile_size: int = DEFAULT_TILE_SIZE
) -> List[DissectionResult]:
    """Dissect each source image in turn; a failed image doesn't stop the rest.

    Raises:
        ValueError: If tile_size is not a positive integer
    """
    validate_tile_size(tile_size)

    return [dissect_image(path, tile_size) for path in source_paths]
