"""dlib face detection and landmark examples."""

from .fps import FpsCounter
from .geometry import Box, box_to_opencv_rect, opencv_rect_to_box, rect_down
from .landmarks import FACIAL_FEATURES, Feature
from .models import ModelError, ModelLoadResult, load_shape_predictor
from .vision import FaceDetector, LandmarkPredictor

__all__ = [
    "Box",
    "FACIAL_FEATURES",
    "FaceDetector",
    "Feature",
    "FpsCounter",
    "LandmarkPredictor",
    "ModelError",
    "ModelLoadResult",
    "box_to_opencv_rect",
    "load_shape_predictor",
    "opencv_rect_to_box",
    "rect_down",
]
