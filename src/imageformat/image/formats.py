"""
Image Format Detection

Output format is chosen from the file extension, as for the one-shot
command and the HTTP service alike.
"""

from enum import Enum
from pathlib import Path
from typing import Dict, Optional, Set, Union


class ImageFormat(Enum):
    """Supported output formats (values are Pillow format names)"""
    JPEG = "JPEG"
    PNG = "PNG"
    GIF = "GIF"
    TIFF = "TIFF"
    BMP = "BMP"
    WEBP = "WEBP"


class FormatDetector:
    """Detect formats and their capabilities"""

    EXTENSIONS: Dict[str, ImageFormat] = {
        '.jpg': ImageFormat.JPEG,
        '.jpeg': ImageFormat.JPEG,
        '.png': ImageFormat.PNG,
        '.gif': ImageFormat.GIF,
        '.tif': ImageFormat.TIFF,
        '.tiff': ImageFormat.TIFF,
        '.bmp': ImageFormat.BMP,
        '.webp': ImageFormat.WEBP,
    }

    # Formats that cannot store an alpha channel
    OPAQUE_FORMATS: Set[ImageFormat] = {ImageFormat.JPEG, ImageFormat.BMP}

    @staticmethod
    def detect_format(file_path: Union[str, Path]) -> Optional[ImageFormat]:
        """
        Detect format from file extension.

        Args:
            file_path: Output path or file name

        Returns:
            ImageFormat enum or None if unsupported
        """
        ext = Path(file_path).suffix.lower()
        return FormatDetector.EXTENSIONS.get(ext)

    @staticmethod
    def is_supported(file_path: Union[str, Path]) -> bool:
        return FormatDetector.detect_format(file_path) is not None

    @staticmethod
    def supports_alpha(image_format: ImageFormat) -> bool:
        return image_format not in FormatDetector.OPAQUE_FORMATS
