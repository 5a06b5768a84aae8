# Pointer motion tracking: velocity, speed and the drifting hue cursor.

import math
from dataclasses import dataclass
from typing import Optional, Tuple

HUE_DRIFT       = 0.35   # Hue degrees added on every sample
HUE_SPEED_SCALE = 0.01   # Extra hue degrees per pixel of movement


@dataclass
class MotionSample:
    x: float = 0.0; y: float = 0.0
    vx: float = 0.0; vy: float = 0.0
    speed: float = 0.0


class InputTracker:
    """Turns raw pointer positions into velocity-annotated motion samples."""

    def __init__(self, hue: float = 210.0):
        self.sample = MotionSample()
        self.hue = hue
        self._last: Optional[Tuple[float, float]] = None  # None until the first sample arrives

    def on_move(self, x: float, y: float) -> Optional[MotionSample]:
        """Record a pointer position.

        Returns the updated sample, or None for the very first position since
        there is no direction to emit along yet.
        """
        s = self.sample
        first = self._last is None
        if first:
            s.vx = 0.0; s.vy = 0.0; s.speed = 0.0
        else:
            s.vx = x - self._last[0]
            s.vy = y - self._last[1]
            s.speed = math.hypot(s.vx, s.vy)

        s.x = x; s.y = y
        self._last = (x, y)

        self.hue = (self.hue + HUE_DRIFT + s.speed * HUE_SPEED_SCALE) % 360.0
        return None if first else s

    def reset(self):
        """Forget the previous position so the next sample starts a new path."""
        self._last = None
