"""Test configuration for pytest."""

import logging
import os
from pathlib import Path

import pytest
from PIL import Image

DARK = 28
LIGHT = 228


@pytest.fixture(autouse=True)
def configure_test_logging():
    """Configure logging for tests to be minimal."""
    os.environ['IMGDEDUPE_LOG_LEVEL'] = 'WARNING'
    logging.getLogger().setLevel(logging.WARNING)
    logging.getLogger('imgdedupe.media.ingestion').setLevel(logging.ERROR)


def _halves(size: int, left: int, right: int, mode: str = "L") -> Image.Image:
    if mode == "RGB":
        img = Image.new("RGB", (size, size), (left, left, left))
        img.paste((right, right, right), (size // 2, 0, size, size))
    else:
        img = Image.new("L", (size, size), left)
        img.paste(right, (size // 2, 0, size, size))
    return img


@pytest.fixture
def make_halves():
    """Factory for square images with a dark left half and a light right half."""
    def factory(size: int = 64, inverted: bool = False, mode: str = "L") -> Image.Image:
        if inverted:
            return _halves(size, LIGHT, DARK, mode)
        return _halves(size, DARK, LIGHT, mode)
    return factory


@pytest.fixture
def image_dir(tmp_path, make_halves) -> Path:
    """
    Directory with three images: two copies of one picture at different
    resolutions and one mirrored picture.
    """
    source = tmp_path / "photos"
    source.mkdir()
    make_halves(64).save(source / "a.png")
    make_halves(128).save(source / "b.png")
    make_halves(64, inverted=True).save(source / "c.png")
    return source
