# The owned simulation state: input tracking, emission and the particle store.

import random
from typing import List, Optional

from glyphtrail.config import Config
from glyphtrail.emission import EmissionPolicy
from glyphtrail.motion import InputTracker
from glyphtrail.particles import Particle, ParticleStore, step_particles


def clamp_frame_delta(dt: float, max_ms: float = 32.0) -> float:
    """Bound a frame delta so a stalled frame doesn't teleport particles."""
    return max(0.0, min(max_ms, dt))


class TrailSimulation:
    """Everything that changes between frames, with no Qt or drawing involved.

    Several instances can run side by side; nothing lives at module level.
    """

    def __init__(self, cfg: Optional[Config] = None, rng: Optional[random.Random] = None):
        self.cfg = cfg or Config()
        self.tracker = InputTracker(hue=self.cfg.start_hue)
        self.policy = EmissionPolicy(step=self.cfg.spawn_step, rng=rng)
        self.particles = ParticleStore(self.cfg.max_particles)

    @property
    def hue(self) -> float:
        return self.tracker.hue

    @property
    def spawn_carry(self) -> float:
        return self.policy.spawn_carry

    def on_move(self, x: float, y: float) -> int:
        """Feed one pointer position; returns the number of particles spawned."""
        sample = self.tracker.on_move(x, y)
        if sample is None:
            return 0
        return self.policy.emit(sample, self.tracker.hue, self.particles)

    def step(self, dt: float) -> List[Particle]:
        """Advance by ``dt`` milliseconds (clamped); returns the particles to draw."""
        dt = clamp_frame_delta(dt, self.cfg.max_frame_ms)
        return step_particles(self.particles, dt, self.cfg.damping)

    def reset(self):
        self.tracker.reset()
        self.particles.clear()
        self.policy.spawn_carry = 0.0
