"""Transform steps module"""

from .operations import (
    ImageOperations,
    apply_crop,
    apply_resize,
    apply_rotate,
    resolve_fill,
    should_crop,
)

__all__ = [
    "ImageOperations",
    "apply_rotate",
    "apply_crop",
    "apply_resize",
    "resolve_fill",
    "should_crop",
]
