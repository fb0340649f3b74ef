"""
Options Model - what the pipeline should do to one image

Options are immutable and travel as a JSON document over the wire:

    {
      "crop":   {"x": 0, "y": 0, "width": 0, "height": 0},
      "rotate": 0.0,
      "fill":   "black",
      "resize": {"width": 0, "height": 0},
      "thumbnails": [{"suffix": "-small", "width": 150, "height": 150}]
    }

Every field is optional. A zero value means "leave this step alone", so an
empty document is a valid no-op request.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from ..errors import MalformedOptionsError


def _int_field(data: Dict[str, Any], key: str, where: str) -> int:
    value = data.get(key, 0)
    if value is None:
        return 0
    # bool is an int subclass, but "true" is never a pixel count
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedOptionsError(
            f"{where}.{key} must be an integer, got {type(value).__name__}"
        )
    if value < 0:
        raise MalformedOptionsError(f"{where}.{key} must be >= 0, got {value}")
    return value


def _object(data: Any, where: str) -> Dict[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise MalformedOptionsError(
            f"{where} must be an object, got {type(data).__name__}"
        )
    return data


@dataclass(frozen=True)
class Crop:
    """
    Crop rectangle in source pixels.

    Attributes:
        x: Left edge
        y: Top edge
        width: Rectangle width (0 = keep current width)
        height: Rectangle height (0 = keep current height)
    """
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    def should_crop(self, size: Tuple[int, int]) -> bool:
        """
        Decide whether cropping an image of the given size changes anything.

        Any offset forces a crop. Without an offset, a crop only runs when
        both dimensions are given and differ from the current size.
        """
        current_width, current_height = size
        return (
            self.x != 0
            or self.y != 0
            or (
                self.width > 0
                and self.height > 0
                and (self.width != current_width or self.height != current_height)
            )
        )

    @property
    def box(self) -> Tuple[int, int, int, int]:
        """(left, upper, right, lower) as Pillow expects it"""
        return (self.x, self.y, self.x + self.width, self.y + self.height)

    def to_dict(self) -> Dict[str, Any]:
        return {k: v for k, v in (
            ("x", self.x), ("y", self.y),
            ("width", self.width), ("height", self.height),
        ) if v}

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'Crop':
        data = _object(data, "crop")
        return cls(
            x=_int_field(data, "x", "crop"),
            y=_int_field(data, "y", "crop"),
            width=_int_field(data, "width", "crop"),
            height=_int_field(data, "height", "crop"),
        )


@dataclass(frozen=True)
class Resize:
    """
    Resize target.

    Both zero means no resize. When exactly one side is zero it is filled
    with the other side, giving a square target. This is NOT aspect ratio
    preservation: 800x600 resized to (400, 0) becomes 400x400.
    """
    width: int = 0
    height: int = 0

    def resolve(self) -> Optional[Tuple[int, int]]:
        """
        Final (width, height), or None when no resize is requested.
        """
        return resolve_size(self.width, self.height)

    def to_dict(self) -> Dict[str, Any]:
        return {k: v for k, v in (("width", self.width), ("height", self.height)) if v}

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'Resize':
        data = _object(data, "resize")
        return cls(
            width=_int_field(data, "width", "resize"),
            height=_int_field(data, "height", "resize"),
        )


def resolve_size(width: int, height: int) -> Optional[Tuple[int, int]]:
    """Apply the square-fill rule to a width/height pair"""
    if width <= 0 and height <= 0:
        return None
    if width == 0:
        width = height
    elif height == 0:
        height = width
    return width, height


@dataclass(frozen=True)
class Thumb:
    """
    Extra output resized from the finished primary image.

    Attributes:
        suffix: Inserted before the file extension, e.g. "-small"
        width: Target width (Resize rules apply)
        height: Target height (Resize rules apply)
    """
    suffix: str = ""
    width: int = 0
    height: int = 0

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        if self.suffix:
            data["suffix"] = self.suffix
        if self.width:
            data["width"] = self.width
        if self.height:
            data["height"] = self.height
        return data

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]], index: int = 0) -> 'Thumb':
        where = f"thumbnails[{index}]"
        data = _object(data, where)
        suffix = data.get("suffix") or ""
        if not isinstance(suffix, str):
            raise MalformedOptionsError(f"{where}.suffix must be a string")
        if "/" in suffix or "\\" in suffix or ".." in suffix:
            raise MalformedOptionsError(
                f"{where}.suffix must not contain path separators or '..', got {suffix!r}"
            )
        return cls(
            suffix=suffix,
            width=_int_field(data, "width", where),
            height=_int_field(data, "height", where),
        )


@dataclass(frozen=True)
class Options:
    """
    Everything one pipeline run needs to know.

    Steps run in a fixed order: rotate, crop, resize. Thumbnails are then
    resized from the result, in list order.

    Attributes:
        crop: Crop rectangle (all zero = no crop)
        rotate: Degrees counter-clockwise (0 = no rotation)
        fill: Color for areas uncovered by rotation: black/b, white/w,
              anything else is transparent
        resize: Resize target for the primary image
        thumbnails: Additional outputs
    """
    crop: Crop = field(default_factory=Crop)
    rotate: float = 0.0
    fill: str = ""
    resize: Resize = field(default_factory=Resize)
    thumbnails: Tuple[Thumb, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the wire document, omitting default fields"""
        data: Dict[str, Any] = {}
        crop = self.crop.to_dict()
        if crop:
            data["crop"] = crop
        if self.rotate:
            data["rotate"] = self.rotate
        if self.fill:
            data["fill"] = self.fill
        resize = self.resize.to_dict()
        if resize:
            data["resize"] = resize
        if self.thumbnails:
            data["thumbnails"] = [t.to_dict() for t in self.thumbnails]
        return data

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'Options':
        """
        Build Options from a decoded JSON document.

        Unknown keys are ignored. Missing keys take their zero value.

        Raises:
            MalformedOptionsError: If a field has the wrong type or a
                dimension is negative
        """
        data = _object(data, "options")

        rotate = data.get("rotate", 0) or 0
        if isinstance(rotate, bool) or not isinstance(rotate, (int, float)):
            raise MalformedOptionsError(
                f"rotate must be a number, got {type(rotate).__name__}"
            )

        fill = data.get("fill") or ""
        if not isinstance(fill, str):
            raise MalformedOptionsError(f"fill must be a string, got {type(fill).__name__}")

        thumbnails = data.get("thumbnails") or []
        if not isinstance(thumbnails, list):
            raise MalformedOptionsError(
                f"thumbnails must be a list, got {type(thumbnails).__name__}"
            )

        return cls(
            crop=Crop.from_dict(data.get("crop")),
            rotate=float(rotate),
            fill=fill,
            resize=Resize.from_dict(data.get("resize")),
            thumbnails=tuple(Thumb.from_dict(t, i) for i, t in enumerate(thumbnails)),
        )


def parse_options(document: Optional[str]) -> Options:
    """
    Parse an options JSON document.

    An empty or missing document yields default Options.

    Raises:
        MalformedOptionsError: If the document is not valid JSON or does
            not fit the Options shape
    """
    if document is None or not document.strip():
        return Options()
    try:
        data = json.loads(document)
    except json.JSONDecodeError as e:
        raise MalformedOptionsError(f"Invalid options JSON: {e}") from e
    return Options.from_dict(data)
