"""
Still-image face annotation.

Detection runs on a grayscale copy upsampled with ``cv2.pyrUp``: dlib's
frontal detector only finds faces of roughly 80x80 pixels or larger, so one
doubling lets it see faces down to about 40x40 at the cost of a slower scan.
Boxes are mapped back to the original scale before being drawn on the color
image, and the result is resized to a fixed preview size.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Tuple, Union

import cv2
import numpy as np

from .geometry import Box, rect_down

DISPLAY_SIZE = (640, 480)  # (width, height)
BOX_COLOR = (0, 0, 255)
BOX_THICKNESS = 2
NEXT_IMAGE_PROMPT = "Hit enter to process the next image..."


@dataclass(frozen=True)
class BatchConfig:
    """Settings for the still-image annotator."""

    upsample_levels: int = 1
    display_size: Tuple[int, int] = DISPLAY_SIZE
    window_name: str = "Face Detection"

    @property
    def upsample_factor(self) -> int:
        return 2 ** self.upsample_levels


def load_image(path: Union[str, Path]) -> np.ndarray:
    image = cv2.imread(str(path), cv2.IMREAD_COLOR)
    if image is None:
        raise FileNotFoundError(f"Could not load image from {path}")
    return image


def upsample(gray: np.ndarray, levels: int) -> np.ndarray:
    for _ in range(levels):
        gray = cv2.pyrUp(gray)
    return gray


def annotate_image(
    image: np.ndarray,
    detector: Callable[[np.ndarray], List[Box]],
    upsample_levels: int = 1,
) -> tuple[np.ndarray, List[Box]]:
    """Detect faces on an upsampled grayscale copy and draw them on ``image``.

    Returns a full-resolution annotated copy and the boxes in the original
    image's coordinates.
    """
    gray = cv2.cvtColor(image, cv2.COLOR_BGR2GRAY)
    gray = upsample(gray, upsample_levels)

    found = detector(gray)
    factor = 2 ** upsample_levels
    boxes = [rect_down(box, factor) for box in found]

    annotated = image.copy()
    for box in boxes:
        cv2.rectangle(annotated, box.top_left, box.bottom_right, BOX_COLOR, BOX_THICKNESS)
    return annotated, boxes


def resize_for_display(image: np.ndarray, size: Tuple[int, int] = DISPLAY_SIZE) -> np.ndarray:
    # TODO: letterbox instead of stretching so the aspect ratio survives.
    return cv2.resize(image, size, interpolation=cv2.INTER_AREA)


def _show_and_pump(window_name: str, image: np.ndarray) -> None:
    """Show ``image`` and let HighGUI paint it once.

    While ``input()`` blocks, only a window thread keeps repainting the
    preview; ``run_batch`` starts one where the backend supports it (GTK).
    Elsewhere the window shows the image but stops responding until the
    operator presses enter.
    """
    cv2.imshow(window_name, image)
    cv2.waitKey(1)


def run_batch(
    paths: Iterable[Union[str, Path]],
    detector: Callable[[np.ndarray], List[Box]],
    config: BatchConfig = BatchConfig(),
    show: Optional[Callable[[str, np.ndarray], None]] = None,
    prompt: Optional[Callable[[str], str]] = None,
) -> int:
    """Annotate each image in turn, waiting for the operator in between.

    Any failure propagates and ends the batch. Returns the number of images
    shown.
    """
    if show is None:
        cv2.startWindowThread()
        show = _show_and_pump
    prompt = prompt or input
    shown = 0
    for path in paths:
        print(f"Processing image: {path}")
        image = load_image(path)
        annotated, boxes = annotate_image(image, detector, config.upsample_levels)
        print(f"Found {len(boxes)} faces.")
        logging.debug("Boxes for %s: %s", path, boxes)

        show(config.window_name, resize_for_display(annotated, config.display_size))
        shown += 1
        prompt(NEXT_IMAGE_PROMPT)
    return shown
