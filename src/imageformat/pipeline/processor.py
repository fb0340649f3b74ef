"""
Pipeline Orchestrator

Runs rotate -> crop -> resize on one image, then resizes the finished image
once per thumbnail spec.
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from PIL import Image

from ..models.options import Options
from ..models.processed import ProcessedImage
from ..transform.operations import ImageOperations
from .naming import derive_name

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StepEvent:
    """
    Reported to an observer after each pipeline step.

    Attributes:
        step: "rotate", "crop", "resize" or "thumbnail"
        name: Output name the step worked on
        changed: False when the step was a no-op
        size: Image size after the step
    """
    step: str
    name: str
    changed: bool
    size: Tuple[int, int]


StepObserver = Callable[[StepEvent], None]


def process_image(
    name: str,
    image: Image.Image,
    options: Options,
    observer: Optional[StepObserver] = None,
) -> List[ProcessedImage]:
    """
    Apply options to an image and fan out thumbnails.

    Thumbnails are resized from the rotated, cropped and resized primary
    image, never from the untouched source. Errors raised by a step
    propagate unchanged; nothing is returned for a failed run.

    Args:
        name: Primary output name; thumbnail names derive from it
        image: Decoded source image (not modified)
        options: What to do
        observer: Optional callback(StepEvent) invoked at every step

    Returns:
        [primary, *thumbnails] in options.thumbnails order

    Example:
        >>> from PIL import Image
        >>> from imageformat import Options, Resize, Thumb, process_image
        >>>
        >>> options = Options(resize=Resize(400, 0), thumbnails=(Thumb("-t", 100, 100),))
        >>> results = process_image("photo.jpg", Image.new("RGB", (800, 600)), options)
        >>> [(r.name, r.size) for r in results]
        [('photo.jpg', (400, 400)), ('photo-t.jpg', (100, 100))]
    """
    def notify(step: str, output: str, before: Image.Image, after: Image.Image) -> None:
        if observer is not None:
            observer(StepEvent(step=step, name=output, changed=after is not before, size=after.size))

    rotated = ImageOperations.rotate(image, options.rotate, options.fill)
    notify("rotate", name, image, rotated)

    cropped = ImageOperations.crop(rotated, options.crop)
    notify("crop", name, rotated, cropped)

    resized = ImageOperations.resize(cropped, options.resize.width, options.resize.height)
    notify("resize", name, cropped, resized)

    results = [ProcessedImage(name=name, image=resized)]

    for thumb in options.thumbnails:
        thumb_name = derive_name(name, thumb.suffix)
        thumb_img = ImageOperations.resize(resized, thumb.width, thumb.height)
        notify("thumbnail", thumb_name, resized, thumb_img)
        results.append(ProcessedImage(name=thumb_name, image=thumb_img))

    logger.debug(f"Processed {name}: {len(results)} output(s)")
    return results
