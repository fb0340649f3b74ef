"""
Shared fixtures for imageformat tests

Images are synthesized with Pillow so tests need no binary fixtures.
"""

from pathlib import Path

import pytest
from PIL import Image, ImageDraw

RED = (255, 0, 0)
BLUE = (0, 0, 255)


def create_basic_image(width: int, height: int, color: tuple = (70, 130, 180)) -> Image.Image:
    """Create a single-colored RGB image"""
    return Image.new('RGB', (width, height), color)


def create_split_image(width: int = 200, height: int = 100) -> Image.Image:
    """Left half red, right half blue"""
    img = Image.new('RGB', (width, height), RED)
    draw = ImageDraw.Draw(img)
    draw.rectangle([width // 2, 0, width - 1, height - 1], fill=BLUE)
    return img


@pytest.fixture
def image_800x600():
    return create_basic_image(800, 600)


@pytest.fixture
def split_image():
    return create_split_image()


@pytest.fixture
def jpeg_file(tmp_path) -> Path:
    """800x600 JPEG on disk"""
    path = tmp_path / "source.jpg"
    create_basic_image(800, 600).save(path, quality=85)
    return path


@pytest.fixture
def png_bytes() -> bytes:
    """800x600 PNG as upload content"""
    from io import BytesIO

    buffer = BytesIO()
    create_basic_image(800, 600).save(buffer, format='PNG')
    return buffer.getvalue()
