"""Once-a-second frame rate accumulator."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable, Optional


@dataclass
class FpsCounter:
    """Counts frames and recomputes the rate when a full second has elapsed.

    The reported value lags by design: it is the rate over the previous
    measurement window and stays constant until the next window closes.
    """

    clock: Callable[[], float] = time.monotonic
    fps: float = 0.0
    frame_count: int = 0
    start: Optional[float] = field(default=None)

    def __post_init__(self) -> None:
        if self.start is None:
            self.start = self.clock()

    def tick(self) -> float:
        now = self.clock()
        elapsed = now - self.start
        if elapsed >= 1.0:
            self.fps = self.frame_count / elapsed
            self.frame_count = 0
            self.start = now
        else:
            self.frame_count += 1
        return self.fps

    def label(self) -> str:
        return f"{self.fps:g} fps"
