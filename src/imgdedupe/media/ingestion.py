from __future__ import annotations

from pathlib import Path
from typing import Iterator, Optional

from PIL import Image

from .formats import ImageFormat, supported_format
from ..logging import get_logger

logger = get_logger(__name__)


class DecodeFailure(Exception):
    """Raised when a file cannot be decoded as the format it claims."""

    def __init__(self, path: Path, cause: Exception) -> None:
        super().__init__(f"Failed to decode {path}: {cause}")
        self.path = path
        self.cause = cause


def discover_images(
    source_dir: Path,
    exclude: Optional[Path] = None,
) -> Iterator[tuple[Path, ImageFormat]]:
    """
    Recursively yield supported image files under ``source_dir``.

    Paths are yielded in sorted order. Files with unrecognised extensions
    and anything below ``exclude`` are skipped.
    """
    excluded = exclude.resolve() if exclude is not None else None

    for path in sorted(source_dir.rglob("*")):
        if not path.is_file():
            continue

        if excluded is not None and excluded in path.resolve().parents:
            logger.debug(f"Skipping {path}: inside output directory")
            continue

        image_format = supported_format(path)
        if image_format is None:
            logger.debug(f"Skipping {path}: unsupported extension")
            continue

        yield path, image_format


def load_image(path: Path, image_format: ImageFormat) -> Image.Image:
    """
    Decode ``path`` as ``image_format`` and return its luma channel.

    Raises:
        DecodeFailure: If the file is missing or is not a valid image of that format
    """
    try:
        with Image.open(path, formats=[image_format.pil_format]) as img:
            img.load()
            return img.convert("L")
    except Exception as exc:
        raise DecodeFailure(path, exc) from exc
