"""
Rectangle helpers shared by both examples.

Two rectangle conventions meet here:

* ``Box`` follows dlib: ``right`` and ``bottom`` are inclusive pixel
  coordinates, so a 1x1 box has ``left == right``.
* OpenCV rects are ``(x, y, w, h)`` and their bottom-right corner
  ``(x + w, y + h)`` is exclusive.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Tuple

from .backend import import_dlib

OpenCVRect = Tuple[int, int, int, int]  # (x, y, w, h)


@dataclass(frozen=True)
class Box:
    """Axis-aligned face box in the pixel space of one image scale."""

    left: int
    top: int
    right: int
    bottom: int

    @property
    def width(self) -> int:
        return self.right - self.left + 1

    @property
    def height(self) -> int:
        return self.bottom - self.top + 1

    @property
    def top_left(self) -> Tuple[int, int]:
        return (self.left, self.top)

    @property
    def bottom_right(self) -> Tuple[int, int]:
        return (self.right, self.bottom)

    @classmethod
    def from_dlib(cls, rect: Any) -> "Box":
        """Build from anything exposing dlib's rectangle accessors."""
        return cls(int(rect.left()), int(rect.top()), int(rect.right()), int(rect.bottom()))

    def to_dlib(self) -> Any:
        dlib = import_dlib("build dlib rectangles")
        return dlib.rectangle(self.left, self.top, self.right, self.bottom)


def opencv_rect_to_box(rect: OpenCVRect) -> Box:
    """Convert an OpenCV ``(x, y, w, h)`` rect into a ``Box``.

    Before: bottom-right ``(x + w, y + h)`` is exclusive.
    After: ``right``/``bottom`` are inclusive, hence the ``- 1``.
    """
    x, y, w, h = (int(v) for v in rect)
    return Box(x, y, x + w - 1, y + h - 1)


def box_to_opencv_rect(box: Box) -> OpenCVRect:
    """Convert a ``Box`` into an OpenCV ``(x, y, w, h)`` rect.

    Before: ``right``/``bottom`` are inclusive.
    After: the implied bottom-right ``(right + 1, bottom + 1)`` is exclusive.
    """
    return (box.left, box.top, box.right + 1 - box.left, box.bottom + 1 - box.top)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def scale_box(box: Box, factor: float) -> Box:
    """Scale both corners linearly by ``factor`` (rounded half up)."""
    if factor <= 0:
        raise ValueError(f"Scale factor must be positive, got {factor}")
    return Box(
        _round_half_up(box.left * factor),
        _round_half_up(box.top * factor),
        _round_half_up(box.right * factor),
        _round_half_up(box.bottom * factor),
    )


def rect_down(box: Box, upsample_factor: float) -> Box:
    """Map a box found on an upsampled buffer back to the original scale."""
    return scale_box(box, 1.0 / upsample_factor)
