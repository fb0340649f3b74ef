"""
Exception hierarchy for imageformat.

The pipeline itself raises nothing of its own: these are raised by the
options parser, the geometry checks and the codec layer, and propagate
through the pipeline unmodified.
"""


class ImageFormatError(Exception):
    """Base class for all imageformat errors"""


class MalformedOptionsError(ImageFormatError, ValueError):
    """Options document does not fit the Options shape"""


class InvalidGeometryError(ImageFormatError, ValueError):
    """Crop rectangle or resize target cannot be applied to the image"""


class ImageLoadError(ImageFormatError, OSError):
    """Source image cannot be read or decoded"""


class ImageSaveError(ImageFormatError, OSError):
    """Output image cannot be encoded or written"""
