"""Shared fakes standing in for dlib collaborators."""

from dataclasses import dataclass
from typing import List

import numpy as np
import pytest

from face_examples.geometry import Box


@dataclass
class FakeRect:
    x1: int
    y1: int
    x2: int
    y2: int

    def left(self):
        return self.x1

    def top(self):
        return self.y1

    def right(self):
        return self.x2

    def bottom(self):
        return self.y2


@dataclass
class FakePoint:
    x: int
    y: int


class FakeShape:
    def __init__(self, points):
        self._points = [FakePoint(int(x), int(y)) for x, y in points]

    def parts(self):
        return list(self._points)


class ScriptedDetector:
    """Returns a distinct box list on every call and records the call."""

    def __init__(self):
        self.calls: List[np.ndarray] = []

    def detect(self, image):
        self.calls.append(image)
        n = len(self.calls)
        return [Box(n, n, n + 10, n + 10)]


class FixedPredictor:
    def __init__(self):
        self.boxes: List[Box] = []

    def predict(self, image, box):
        self.boxes.append(box)
        xs = np.arange(68) % 10 + box.left
        ys = np.arange(68) // 10 + box.top
        return np.stack([xs, ys], axis=1).astype(np.int32)


@pytest.fixture
def synthetic_points():
    return np.array([(i, 2 * i) for i in range(68)], dtype=np.int32)


@pytest.fixture
def frame():
    return np.zeros((120, 160, 3), dtype=np.uint8)
