"""
Transform Steps

Rotate, crop and resize a Pillow image. Each step either returns its input
unchanged (no-op) or a brand new image; the input is never modified.
"""

import logging
from typing import Tuple, Union

from PIL import Image

from ..errors import InvalidGeometryError
from ..models.options import Crop, resolve_size

logger = logging.getLogger(__name__)

Color = Union[str, Tuple[int, ...]]

TRANSPARENT: Tuple[int, int, int, int] = (0, 0, 0, 0)

# Modes Pillow can fill with a named color without conversion
_NAMED_FILL_MODES = {"RGB", "RGBA", "L", "LA"}


def resolve_fill(fill: str) -> Color:
    """
    Map a fill token to a Pillow color.

    "black"/"b" and "white"/"w" (any case) are opaque; everything else,
    including the empty string, is fully transparent.
    """
    token = (fill or "").lower()
    if token in ("black", "b"):
        return "black"
    if token in ("white", "w"):
        return "white"
    return TRANSPARENT


class ImageOperations:
    """Pure image transforms used by the pipeline"""

    ROTATE_RESAMPLE = Image.Resampling.BILINEAR
    RESIZE_RESAMPLE = Image.Resampling.LANCZOS

    @staticmethod
    def rotate(img: Image.Image, degrees: float, fill: str = "") -> Image.Image:
        """
        Rotate counter-clockwise, growing the canvas to fit.

        Args:
            img: Source image
            degrees: Rotation angle (0 = no-op)
            fill: Fill token for the uncovered corners (see resolve_fill)

        Returns:
            The same image if degrees is 0, otherwise a new image whose
            bounding box contains all of the rotated content
        """
        if degrees == 0:
            return img

        color = resolve_fill(fill)
        if color == TRANSPARENT:
            if img.mode != "RGBA":
                img = img.convert("RGBA")
        elif img.mode not in _NAMED_FILL_MODES:
            img = img.convert("RGBA")

        logger.info(f"Rotating {degrees} degrees. Fill color: {color}")
        return img.rotate(
            degrees,
            resample=ImageOperations.ROTATE_RESAMPLE,
            expand=True,
            fillcolor=color,
        )

    @staticmethod
    def crop(img: Image.Image, crop: Crop) -> Image.Image:
        """
        Crop to the rectangle (x, y) - (x + width, y + height).

        The rectangle is clipped to the image bounds.

        Raises:
            InvalidGeometryError: If nothing of the rectangle lies inside
                the image
        """
        if not crop.should_crop(img.size):
            return img

        left, upper, right, lower = crop.box
        width, height = img.size
        box = (max(left, 0), max(upper, 0), min(right, width), min(lower, height))
        if box[0] >= box[2] or box[1] >= box[3]:
            raise InvalidGeometryError(
                f"Crop rectangle {crop.box} does not intersect a {width}x{height} image"
            )

        logger.info(f"Cropping to {box}.")
        return img.crop(box)

    @staticmethod
    def resize(img: Image.Image, width: int, height: int) -> Image.Image:
        """
        Resize to exactly width x height with a Lanczos filter.

        A zero side is filled with the other side (square target). Both
        sides <= 0, or a target equal to the current size, is a no-op.
        """
        target = resolve_size(width, height)
        if target is None or target == img.size:
            return img

        logger.info(f"Resizing: w = {target[0]}, h = {target[1]}.")
        return img.resize(target, ImageOperations.RESIZE_RESAMPLE)


def should_crop(img: Image.Image, crop: Crop) -> bool:
    return crop.should_crop(img.size)


apply_rotate = ImageOperations.rotate
apply_crop = ImageOperations.crop
apply_resize = ImageOperations.resize
