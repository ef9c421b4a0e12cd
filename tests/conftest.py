"""Expose the project root on sys.path and provide sample image files."""

from __future__ import annotations

import sys

from pathlib import Path

import pytest
from PIL import Image

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def _make_rgba_image(width: int, height: int) -> Image.Image:
    image = Image.new("RGBA", (width, height))
    for x in range(width):
        for y in range(height):
            image.putpixel((x, y), (x * 40 % 256, y * 60 % 256, 128, 255 - x * 10))
    return image


@pytest.fixture()
def rgba_image_path(tmp_path: Path) -> Path:
    """Return a small 4x3 RGBA png with distinct pixel values."""

    path = tmp_path / "sample.png"
    _make_rgba_image(4, 3).save(path, format="PNG")
    return path


@pytest.fixture()
def wide_image_path(tmp_path: Path) -> Path:
    path = tmp_path / "wide.bmp"
    Image.new("RGB", (10, 2), color=(200, 10, 10)).save(path, format="BMP")
    return path


@pytest.fixture()
def text_file_path(tmp_path: Path) -> Path:
    path = tmp_path / "notes.txt"
    path.write_text("definitely not an image", encoding="utf-8")
    return path
