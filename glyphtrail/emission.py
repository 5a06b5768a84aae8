# Deciding how many particles a motion sample spawns, where, and with what state.

import math
import random
from typing import List, Optional, Tuple

from glyphtrail.motion import MotionSample
from glyphtrail.particles import Particle, ParticleStore

SPAWN_STEP       = 6.0    # Distance units per particle (lower = denser)
MOMENTUM_SHARE   = 0.03   # Fraction of pointer velocity a particle inherits
HUE_JITTER       = 9.0    # +/- degrees around the hue cursor


class EmissionPolicy:
    """Spawns particles along the path travelled since the last sample.

    Fractional spawn counts accumulate in ``spawn_carry`` so the long-run
    rate matches ``distance / step`` exactly.
    """

    def __init__(self, step: float = SPAWN_STEP, rng: Optional[random.Random] = None):
        self.step = step
        self.spawn_carry = 0.0
        self.rng = rng or random.Random()

    def take(self, count: float) -> int:
        """Add a fractional count to the carry and return the whole part."""
        self.spawn_carry += count
        n = math.floor(self.spawn_carry)
        self.spawn_carry -= n
        return n

    def spawn_count(self, speed: float) -> int:
        # Floor of 1 keeps slow drags progressing
        dist = max(1.0, speed)
        return self.take(dist / self.step)

    @staticmethod
    def spawn_points(sample: MotionSample, n: int) -> List[Tuple[float, float]]:
        """Evenly spaced points from the previous position to the current one."""
        x1 = sample.x - sample.vx; y1 = sample.y - sample.vy
        x2 = sample.x; y2 = sample.y
        points = []
        for i in range(n):
            t = 1.0 if n == 1 else i / (n - 1)
            points.append((x1 + (x2 - x1) * t, y1 + (y2 - y1) * t))
        return points

    def make_particle(self, x: float, y: float, sample: MotionSample, hue: float) -> Particle:
        rng = self.rng
        speed = sample.speed

        # Faster movement = bigger particles + shorter life
        base = 0.6 + min(2.2, speed / 25.0)
        life = 30.0 + rng.uniform(0.0, 30.0) - base * 6.0
        size = 1.2 + rng.uniform(0.0, 2.8) + base * 0.9

        angle = rng.uniform(0.0, 2 * math.pi)
        v = (0.25 + rng.uniform(0.0, 0.9)) * base
        vx = math.cos(angle) * v + sample.vx * MOMENTUM_SHARE
        vy = math.sin(angle) * v + sample.vy * MOMENTUM_SHARE

        return Particle(
            x, y,
            x, y,
            vx, vy,
            life, life,
            size,
            (hue + rng.uniform(-HUE_JITTER, HUE_JITTER)) % 360.0,
        )

    def emit(self, sample: MotionSample, hue: float, store: ParticleStore) -> int:
        """Spawn this sample's particles into ``store``; returns how many were created."""
        n = self.spawn_count(sample.speed)
        if n <= 0:
            return 0
        for x, y in self.spawn_points(sample, n):
            store.append(self.make_particle(x, y, sample, hue))
        return n
