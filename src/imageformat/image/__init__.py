"""Image codec module"""

from .formats import FormatDetector, ImageFormat
from .io import open_image, open_image_bytes, save_image

__all__ = ["ImageFormat", "FormatDetector", "open_image", "open_image_bytes", "save_image"]
