"""Extension-based recognition of supported image formats."""

from enum import Enum
from pathlib import Path
from typing import Dict, Optional

LARGE_SUFFIX = "-large"


class ImageFormat(Enum):
    GIF = "GIF"
    PNG = "PNG"
    JPEG = "JPEG"
    WEBP = "WEBP"

    @property
    def pil_format(self) -> str:
        """Format name as understood by ``PIL.Image.open``."""
        return self.value

    @property
    def extension(self) -> str:
        """Canonical lowercase extension used for output files."""
        return _CANONICAL_EXTENSIONS[self]


_CANONICAL_EXTENSIONS: Dict[ImageFormat, str] = {
    ImageFormat.GIF: "gif",
    ImageFormat.PNG: "png",
    ImageFormat.JPEG: "jpg",
    ImageFormat.WEBP: "webp",
}

_EXTENSION_ALIASES: Dict[str, ImageFormat] = {
    "gif": ImageFormat.GIF,
    "png": ImageFormat.PNG,
    "jpg": ImageFormat.JPEG,
    "jpeg": ImageFormat.JPEG,
    "jpe": ImageFormat.JPEG,
    "webp": ImageFormat.WEBP,
}


def format_for_extension(extension: str) -> Optional[ImageFormat]:
    """
    Map a file extension to a supported format.

    Matching ignores case and a leading dot, and accepts a ``-large``
    suffix on any known extension (``jpg-large``, ``png-large``).
    """
    ext = extension.lower().lstrip(".")
    if ext.endswith(LARGE_SUFFIX):
        ext = ext[: -len(LARGE_SUFFIX)]
    return _EXTENSION_ALIASES.get(ext)


def supported_format(path: Path) -> Optional[ImageFormat]:
    """Return the format claimed by ``path``'s extension, or None if unsupported."""
    if not path.suffix:
        return None
    return format_for_extension(path.suffix)
