"""
Result models

ProcessedImage is the unit the pipeline hands back; FormatResult wraps a
whole one-shot run the same way the high-level API reports success or
failure without raising.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

from PIL import Image


@dataclass
class ProcessedImage:
    """
    One named output of the pipeline.

    Attributes:
        name: Output file name (primary name or derived thumbnail name)
        image: Pillow image, owned by the caller
    """
    name: str
    image: Image.Image

    @property
    def size(self) -> Tuple[int, int]:
        return self.image.size


@dataclass
class FormatResult:
    """
    Result from formatting a single source image.

    Attributes:
        success: True if every output was produced and saved
        outputs: Saved paths in pipeline order (primary first)
        error: Error description if failed
    """
    success: bool
    outputs: List[Path] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def formatted(self) -> Optional[Path]:
        """Path of the primary output"""
        return self.outputs[0] if self.outputs else None

    @property
    def thumbnails(self) -> List[Path]:
        return self.outputs[1:]

    @property
    def failed(self) -> bool:
        return not self.success
