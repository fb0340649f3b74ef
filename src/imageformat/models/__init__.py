"""Data models for imageformat"""

from .options import Crop, Options, Resize, Thumb, parse_options, resolve_size
from .processed import FormatResult, ProcessedImage

__all__ = [
    "Crop",
    "Resize",
    "Thumb",
    "Options",
    "parse_options",
    "resolve_size",
    "ProcessedImage",
    "FormatResult",
]
