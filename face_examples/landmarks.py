"""68-point facial landmark layout and polyline rendering."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence, Tuple

import cv2
import numpy as np

NUM_LANDMARKS = 68
LANDMARK_COLOR = (0, 255, 0)
LANDMARK_THICKNESS = 1


@dataclass(frozen=True)
class Feature:
    """Contiguous landmark index range; ``end`` is inclusive."""

    name: str
    start: int
    end: int
    closed: bool = False

    @property
    def indices(self) -> range:
        return range(self.start, self.end + 1)


# Drawing order matches dlib's 68-point annotation scheme. Index 30 (nose tip)
# is shared by the nose bridge and the lower nose.
FACIAL_FEATURES: Tuple[Feature, ...] = (
    Feature("jaw", 0, 16),
    Feature("left_eyebrow", 17, 21),
    Feature("right_eyebrow", 22, 26),
    Feature("nose_bridge", 27, 30),
    Feature("lower_nose", 30, 35, closed=True),
    Feature("left_eye", 36, 41, closed=True),
    Feature("right_eye", 42, 47, closed=True),
    Feature("outer_lip", 48, 59, closed=True),
    Feature("inner_lip", 60, 67, closed=True),
)


def shape_to_points(shape: Any) -> np.ndarray:
    """Convert a dlib ``full_object_detection`` into an ``(N, 2)`` int array."""
    points = np.array([(part.x, part.y) for part in shape.parts()], dtype=np.int32)
    if points.shape != (NUM_LANDMARKS, 2):
        raise ValueError(f"Expected {NUM_LANDMARKS} landmarks, got {len(points)}")
    return points


def draw_feature(
    frame: np.ndarray,
    points: np.ndarray,
    feature: Feature,
    color: Tuple[int, int, int] = LANDMARK_COLOR,
    thickness: int = LANDMARK_THICKNESS,
) -> None:
    segment = np.ascontiguousarray(points[feature.start : feature.end + 1], dtype=np.int32)
    cv2.polylines(frame, [segment], feature.closed, color, thickness, cv2.LINE_AA)


def draw_landmarks(
    frame: np.ndarray,
    points: np.ndarray,
    features: Sequence[Feature] = FACIAL_FEATURES,
    color: Tuple[int, int, int] = LANDMARK_COLOR,
) -> np.ndarray:
    """Draw every feature polyline onto ``frame`` in place and return it."""
    for feature in features:
        draw_feature(frame, points, feature, color)
    return frame
