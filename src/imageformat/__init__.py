"""
imageformat - Image formatting pipeline

This library provides:
- Rotation with black, white or transparent fill
- Cropping to a rectangle
- Resizing (Lanczos)
- Thumbnail generation from the formatted image
- A one-shot command and an HTTP API on top of the same pipeline

Order of actions: rotation, cropping, resizing.

Example:
    >>> from PIL import Image
    >>> from imageformat import Crop, Options, Resize, Thumb, process_image
    >>>
    >>> options = Options(
    ...     rotate=90,
    ...     crop=Crop(x=10, y=10, width=200, height=200),
    ...     resize=Resize(width=100),
    ...     thumbnails=(Thumb(suffix="-small", width=32, height=32),),
    ... )
    >>> for result in process_image("photo.png", Image.open("photo.png"), options):
    ...     result.image.save(result.name)
"""

from .version import __version__

# Errors
from .errors import (
    ImageFormatError,
    ImageLoadError,
    ImageSaveError,
    InvalidGeometryError,
    MalformedOptionsError,
)

# Models
from .models import Crop, FormatResult, Options, ProcessedImage, Resize, Thumb, parse_options

# Transform steps
from .transform import apply_crop, apply_resize, apply_rotate, resolve_fill, should_crop

# Pipeline
from .pipeline import StepEvent, derive_name, process_image

# Image I/O
from .image import FormatDetector, ImageFormat, open_image, save_image

# Validation
from .validation import ImageValidator

# High-level API
from .api import format_file, save_outputs

__all__ = [
    # Version
    "__version__",
    # Errors
    "ImageFormatError",
    "MalformedOptionsError",
    "InvalidGeometryError",
    "ImageLoadError",
    "ImageSaveError",
    # Models
    "Crop",
    "Resize",
    "Thumb",
    "Options",
    "parse_options",
    "ProcessedImage",
    "FormatResult",
    # Transform
    "apply_rotate",
    "apply_crop",
    "apply_resize",
    "resolve_fill",
    "should_crop",
    # Pipeline
    "process_image",
    "derive_name",
    "StepEvent",
    # Image
    "ImageFormat",
    "FormatDetector",
    "open_image",
    "save_image",
    # Validation
    "ImageValidator",
    # High-level API
    "format_file",
    "save_outputs",
]
