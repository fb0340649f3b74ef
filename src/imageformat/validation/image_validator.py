"""
Image Validation Module

Validates source images before they enter the pipeline.
"""

from io import BytesIO
from pathlib import Path
from typing import Optional, Tuple

from PIL import Image


class ImageValidator:
    """Validate source images before processing"""

    MAX_FILE_SIZE = 50 * 1024 * 1024  # 50 MB
    MIN_DIMENSIONS = (1, 1)
    MAX_DIMENSIONS = (50000, 50000)

    @staticmethod
    def validate_file(file_path: Path) -> Tuple[bool, Optional[str]]:
        """
        Validate a source image file.

        Checks:
        - File exists and is a regular file
        - File size within limits
        - Image can be decoded
        - Dimensions are reasonable

        Args:
            file_path: Path to image file

        Returns:
            (is_valid, error_message) tuple
        """
        file_path = Path(file_path)

        if not file_path.exists():
            return False, f"File not found: {file_path}"

        if not file_path.is_file():
            return False, f"Not a file: {file_path}"

        try:
            size = file_path.stat().st_size
        except OSError as e:
            return False, f"Cannot access file: {e}"

        error = ImageValidator._check_size(size)
        if error:
            return False, error

        try:
            with Image.open(file_path) as img:
                return ImageValidator._check_image(img)
        except Exception as e:
            return False, f"Cannot open image: {e}"

    @staticmethod
    def validate_bytes(data: bytes) -> Tuple[bool, Optional[str]]:
        """
        Validate an uploaded image held in memory.

        Args:
            data: Raw file content

        Returns:
            (is_valid, error_message) tuple
        """
        error = ImageValidator._check_size(len(data))
        if error:
            return False, error

        try:
            with Image.open(BytesIO(data)) as img:
                img.verify()
            # verify() leaves the image unusable, reopen for the size check
            with Image.open(BytesIO(data)) as img:
                return ImageValidator._check_image(img)
        except Exception as e:
            return False, f"Invalid image file: {e}"

    @staticmethod
    def _check_size(size: int) -> Optional[str]:
        if size == 0:
            return "File is empty"
        if size > ImageValidator.MAX_FILE_SIZE:
            size_mb = size / 1024 / 1024
            max_mb = ImageValidator.MAX_FILE_SIZE / 1024 / 1024
            return f"File too large: {size_mb:.1f} MB (max {max_mb:.0f} MB)"
        return None

    @staticmethod
    def _check_image(img: Image.Image) -> Tuple[bool, Optional[str]]:
        w, h = img.size

        min_w, min_h = ImageValidator.MIN_DIMENSIONS
        if w < min_w or h < min_h:
            return False, f"Image too small: {w}x{h}px (min {min_w}x{min_h}px)"

        max_w, max_h = ImageValidator.MAX_DIMENSIONS
        if w > max_w or h > max_h:
            return False, f"Image too large: {w}x{h}px (max {max_w}x{max_h}px)"

        return True, None
