"""
Live webcam landmark overlay.

Face detection is the slowest step, so it runs only every
``detection_ratio`` frames on a downsampled copy of the feed. Skipped frames
reuse the previous boxes; a fast-moving face may be landmarked against a
stale box for one frame.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Protocol

import cv2
import numpy as np

from .fps import FpsCounter
from .geometry import Box
from .landmarks import draw_landmarks

BOX_COLOR = (0, 0, 255)
FPS_TEXT_ORIGIN = (50, 50)
FPS_TEXT_COLOR = (255, 255, 255)
ESCAPE_KEY = 27


class Detector(Protocol):
    def detect(self, image: np.ndarray) -> List[Box]:
        ...


class Predictor(Protocol):
    def predict(self, image: np.ndarray, box: Box) -> np.ndarray:
        ...


@dataclass(frozen=True)
class LiveConfig:
    """Settings for the webcam loop."""

    detection_ratio: int = 2
    downsample_ratio: int = 2
    window_name: str = "Facial Landmarks"
    wait_ms: int = 10
    exit_key: int = ESCAPE_KEY


@dataclass
class SessionState:
    """Everything the frame loop carries from one iteration to the next."""

    iteration_count: int = 0
    faces: List[Box] = field(default_factory=list)
    fps: FpsCounter = field(default_factory=FpsCounter)


def should_detect(state: SessionState, ratio: int) -> bool:
    """Advance the iteration counter; True on iterations 0, ratio, 2*ratio, ..."""
    detect = state.iteration_count % ratio == 0
    state.iteration_count += 1
    return detect


def downsample(frame: np.ndarray, ratio: int) -> np.ndarray:
    down = 1.0 / ratio
    return cv2.resize(frame, None, fx=down, fy=down)


def draw_fps(frame: np.ndarray, text: str) -> None:
    cv2.putText(
        frame,
        text,
        FPS_TEXT_ORIGIN,
        fontFace=cv2.FONT_HERSHEY_COMPLEX_SMALL,
        fontScale=1.0,
        color=FPS_TEXT_COLOR,
        thickness=1,
    )


def process_frame(
    frame: np.ndarray,
    state: SessionState,
    detector: Detector,
    predictor: Predictor,
    config: LiveConfig = LiveConfig(),
) -> np.ndarray:
    """Annotate one camera frame and return the downsampled result."""
    small = downsample(frame, config.downsample_ratio)

    if should_detect(state, config.detection_ratio):
        state.faces = list(detector.detect(small))
        logging.debug("Detected %d faces on iteration %d", len(state.faces), state.iteration_count - 1)

    # Landmarks are predicted on the unannotated frame before anything is drawn.
    shapes = [predictor.predict(small, box) for box in state.faces]

    for box, points in zip(state.faces, shapes):
        cv2.rectangle(small, box.top_left, box.bottom_right, BOX_COLOR)
        draw_landmarks(small, points)

    state.fps.tick()
    draw_fps(small, state.fps.label())
    return small


def _show(window_name: str, frame: np.ndarray) -> None:
    cv2.namedWindow(window_name, cv2.WINDOW_AUTOSIZE)
    cv2.imshow(window_name, frame)


def run(
    capture: Any,
    detector: Detector,
    predictor: Predictor,
    config: LiveConfig = LiveConfig(),
    state: Optional[SessionState] = None,
    show: Optional[Callable[[str, np.ndarray], None]] = None,
    wait_key: Optional[Callable[[int], int]] = None,
) -> int:
    """Grab, annotate and display frames until escape or a failed read.

    Returns the number of frames processed.
    """
    state = state or SessionState()
    show = show or _show
    wait_key = wait_key or cv2.waitKey
    frames = 0
    while (wait_key(config.wait_ms) & 0xFF) != config.exit_key:
        ret, frame = capture.read()
        if not ret:
            logging.info("Frame read failed; stopping.")
            break

        annotated = process_frame(frame, state, detector, predictor, config)
        show(config.window_name, annotated)
        frames += 1
    return frames
