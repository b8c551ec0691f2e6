"""
Thin wrappers over dlib's frontal face detector and landmark predictor so
both examples (still images or webcam feeds) share one detection surface.
"""

from __future__ import annotations

from typing import Any, List, Optional

import numpy as np

from .backend import import_dlib
from .geometry import Box
from .landmarks import shape_to_points


class FaceDetector:
    """dlib HOG + linear SVM frontal face detector."""

    def __init__(self, upsample: int = 0, detector: Optional[Any] = None):
        self.upsample = upsample
        if detector is None:
            detector = import_dlib("use FaceDetector").get_frontal_face_detector()
        self.detector = detector

    def detect(self, image: np.ndarray) -> List[Box]:
        """Return face boxes in the pixel space of ``image``."""
        rects = self.detector(image, self.upsample)
        return [Box.from_dlib(rect) for rect in rects]

    __call__ = detect


class LandmarkPredictor:
    """68-point landmark regression on top of a loaded ``dlib.shape_predictor``."""

    def __init__(self, predictor: Any):
        self.predictor = predictor

    def predict(self, image: np.ndarray, box: Box) -> np.ndarray:
        shape = self.predictor(image, box.to_dlib())
        return shape_to_points(shape)
