"""
Image I/O

Open and save images for the one-shot command and the HTTP service. The
pipeline never calls these; it only sees decoded Pillow images.
"""

import logging
from io import BytesIO
from pathlib import Path
from typing import Union

from PIL import Image, UnidentifiedImageError

from ..errors import ImageLoadError, ImageSaveError
from .formats import FormatDetector, ImageFormat

logger = logging.getLogger(__name__)

DEFAULT_JPEG_QUALITY = 95


def open_image(path: Union[str, Path]) -> Image.Image:
    """
    Open and fully decode an image file.

    Raises:
        ImageLoadError: If the file is missing or not a readable image
    """
    try:
        with Image.open(path) as img:
            img.load()
            return img.copy()
    except (OSError, UnidentifiedImageError, Image.DecompressionBombError) as e:
        raise ImageLoadError(f"Failed to open image {path}: {e}") from e


def open_image_bytes(data: bytes) -> Image.Image:
    """
    Decode an image held in memory.

    Raises:
        ImageLoadError: If the bytes are not a readable image
    """
    try:
        with Image.open(BytesIO(data)) as img:
            img.load()
            return img.copy()
    except (OSError, UnidentifiedImageError, Image.DecompressionBombError) as e:
        raise ImageLoadError(f"Failed to open image: {e}") from e


def save_image(
    img: Image.Image,
    path: Union[str, Path],
    quality: int = DEFAULT_JPEG_QUALITY,
) -> Path:
    """
    Encode an image in the format given by the path's extension.

    Images with transparency are flattened to RGB for formats that cannot
    store alpha. Missing parent directories are created.

    Args:
        img: Image to save
        path: Destination; its extension picks the format
        quality: JPEG/WEBP quality 0-100

    Returns:
        The destination path

    Raises:
        ImageSaveError: If the extension is unsupported or writing fails
    """
    path = Path(path)
    image_format = FormatDetector.detect_format(path)
    if image_format is None:
        raise ImageSaveError(f"Unsupported output format: {path.name}")

    if not FormatDetector.supports_alpha(image_format) and img.mode not in ("RGB", "L"):
        img = img.convert("RGB")

    params = {}
    if image_format in (ImageFormat.JPEG, ImageFormat.WEBP):
        params["quality"] = quality

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        img.save(path, format=image_format.value, **params)
    except (OSError, ValueError) as e:
        raise ImageSaveError(f"Failed to save image {path}: {e}") from e

    logger.info(f"Saved image {path}")
    return path
