"""
High-level API for imageformat

Convenience functions that connect the pipeline to the file system.
"""

import logging
from pathlib import Path
from typing import List, Optional, Sequence, Union

from .errors import ImageFormatError
from .image.io import open_image, save_image
from .models.options import Options, Thumb
from .models.processed import FormatResult, ProcessedImage
from .pipeline.processor import StepObserver, process_image
from .validation.image_validator import ImageValidator

logger = logging.getLogger(__name__)

# Thumbnail set used by the command line when none is given
DEFAULT_THUMBNAILS = (Thumb(suffix="-small", width=150, height=150),)


def save_outputs(
    results: Sequence[ProcessedImage],
    root: Optional[Union[str, Path]] = None,
) -> List[Path]:
    """
    Save pipeline outputs in order, each at its name.

    Either every output is written or none is: if one save fails, files
    already written by this call are removed before the error propagates.

    Args:
        results: Output of process_image()
        root: Directory the names are relative to (None = as given)

    Returns:
        Written paths, primary first

    Raises:
        ImageSaveError: If an output cannot be written
    """
    written: List[Path] = []
    try:
        for result in results:
            path = Path(root) / result.name if root is not None else Path(result.name)
            logger.info(f"Saving image {path}")
            written.append(save_image(result.image, path))
    except ImageFormatError:
        for path in written:
            path.unlink(missing_ok=True)
        raise
    return written


def format_file(
    src: Union[str, Path],
    dst: Union[str, Path],
    options: Optional[Options] = None,
    observer: Optional[StepObserver] = None,
) -> FormatResult:
    """
    Format an image file and write the result plus its thumbnails.

    The primary output is written to dst; thumbnails are written next to
    it with their suffix inserted before the extension.

    Args:
        src: Source image path
        dst: Destination path of the primary output
        options: What to do (None = copy through unchanged)
        observer: Optional callback(StepEvent) invoked at every step

    Returns:
        FormatResult with saved paths, or the error if anything failed

    Example:
        >>> from imageformat import Options, Resize, format_file
        >>> from imageformat.api import DEFAULT_THUMBNAILS
        >>>
        >>> options = Options(resize=Resize(1024, 768), thumbnails=DEFAULT_THUMBNAILS)
        >>> result = format_file("photo.jpg", "out/photo.jpg", options)
        >>> if result.success:
        ...     print(result.formatted, result.thumbnails)
    """
    src = Path(src)
    options = options or Options()

    is_valid, error = ImageValidator.validate_file(src)
    if not is_valid:
        return FormatResult(success=False, error=error)

    try:
        img = open_image(src)
        results = process_image(str(dst), img, options, observer=observer)
        outputs = save_outputs(results)
    except (ImageFormatError, ValueError) as e:
        logger.warning(f"Failed to format {src}: {e}")
        return FormatResult(success=False, error=str(e))

    return FormatResult(success=True, outputs=outputs)
