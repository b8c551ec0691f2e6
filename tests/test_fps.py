"""Tests for the FPS accumulator."""

import pytest

from face_examples.fps import FpsCounter


class FakeClock:
    def __init__(self, now=100.0):
        self.now = now

    def __call__(self):
        return self.now


class TestFpsCounter:
    def test_starts_at_zero(self):
        counter = FpsCounter(clock=FakeClock())
        assert counter.fps == 0.0
        assert counter.frame_count == 0
        assert counter.label() == "0 fps"

    def test_counts_below_one_second(self):
        clock = FakeClock()
        counter = FpsCounter(clock=clock)
        for _ in range(9):
            clock.now += 0.1
            counter.tick()
        assert counter.frame_count == 9
        assert counter.fps == 0.0

    def test_rate_at_crossing_then_reset(self):
        clock = FakeClock(100.0)
        counter = FpsCounter(clock=clock)
        for _ in range(9):
            clock.now += 0.1
            assert counter.tick() == 0.0
        assert clock.now == pytest.approx(100.9)
        frames = counter.frame_count

        clock.now = 101.25
        fps = counter.tick()

        assert fps == pytest.approx(frames / 1.25)
        assert counter.frame_count == 0
        assert counter.start == 101.25

    def test_value_held_until_next_window(self):
        clock = FakeClock(0.0)
        counter = FpsCounter(clock=clock)
        for _ in range(4):
            clock.now += 0.25
            counter.tick()
        first = counter.fps
        assert first == pytest.approx(3.0)

        clock.now += 0.5
        assert counter.tick() == first
        assert counter.frame_count == 1

    def test_label_formatting(self):
        counter = FpsCounter(clock=FakeClock(), fps=29.5)
        assert counter.label() == "29.5 fps"
