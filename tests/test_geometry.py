"""Tests for rectangle conversion and scaling."""

import pytest

from conftest import FakeRect
from face_examples.geometry import (
    Box,
    box_to_opencv_rect,
    opencv_rect_to_box,
    rect_down,
    scale_box,
)


class TestBox:
    def test_inclusive_size(self):
        box = Box(10, 20, 19, 39)
        assert box.width == 10
        assert box.height == 20

    def test_single_pixel(self):
        box = Box(5, 5, 5, 5)
        assert box.width == 1
        assert box.height == 1

    def test_from_dlib(self):
        box = Box.from_dlib(FakeRect(1, 2, 30, 40))
        assert box == Box(1, 2, 30, 40)

    def test_corners(self):
        box = Box(1, 2, 3, 4)
        assert box.top_left == (1, 2)
        assert box.bottom_right == (3, 4)


class TestOpenCVConversion:
    def test_rect_to_box_makes_far_corner_inclusive(self):
        assert opencv_rect_to_box((10, 20, 100, 50)) == Box(10, 20, 109, 69)

    def test_box_to_rect_makes_far_corner_exclusive(self):
        assert box_to_opencv_rect(Box(10, 20, 109, 69)) == (10, 20, 100, 50)

    @pytest.mark.parametrize("rect", [(0, 0, 1, 1), (3, 7, 64, 48), (100, 5, 2, 300)])
    def test_conversions_are_inverse(self, rect):
        assert box_to_opencv_rect(opencv_rect_to_box(rect)) == rect

    def test_accepts_numpy_ints(self):
        import numpy as np

        rect = tuple(np.array([4, 6, 10, 12], dtype=np.int32))
        assert opencv_rect_to_box(rect) == Box(4, 6, 13, 17)


class TestScaling:
    @pytest.mark.parametrize(
        "found",
        [Box(0, 0, 2, 2), Box(40, 60, 200, 220), Box(12, 8, 100, 96)],
    )
    def test_rect_down_divides_both_corners(self, found):
        scaled = rect_down(found, 2)
        assert scaled == Box(found.left // 2, found.top // 2, found.right // 2, found.bottom // 2)

    def test_rect_down_by_four(self):
        assert rect_down(Box(40, 80, 120, 160), 4) == Box(10, 20, 30, 40)

    def test_rect_down_rounds_half_up(self):
        assert rect_down(Box(1, 3, 5, 7), 2) == Box(1, 2, 3, 4)

    def test_scale_is_linear(self):
        assert scale_box(Box(10, 10, 20, 20), 1.5) == Box(15, 15, 30, 30)

    def test_non_positive_factor_rejected(self):
        with pytest.raises(ValueError):
            scale_box(Box(0, 0, 1, 1), 0)
