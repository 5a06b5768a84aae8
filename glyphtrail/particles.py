# Particle state, the bounded particle store and the per-frame simulation step.

from collections import deque
from dataclasses import dataclass
from typing import Deque, Iterator, List

FRAME_MS = 16.67   # One 60 FPS frame; motion and decay are normalized to it
DAMPING  = 0.985


@dataclass
class Particle:
    x: float; y: float
    px: float; py: float   # Previous-frame position, used by line mode
    vx: float; vy: float
    life: float; max_life: float
    size: float
    hue: float


class ParticleStore:
    """Insertion-ordered particles with a hard population cap.

    The ring buffer drops the oldest particle when a new one is appended at
    capacity, so survivors always keep their spawn order.
    """

    def __init__(self, capacity: int = 1200):
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self._items: Deque[Particle] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._items.maxlen

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Particle]:
        return iter(self._items)

    def __getitem__(self, i: int) -> Particle:
        return self._items[i]

    def append(self, particle: Particle) -> int:
        """Add a particle; returns how many old particles were evicted (0 or 1)."""
        evicted = 1 if len(self._items) == self._items.maxlen else 0
        self._items.append(particle)
        return evicted

    def retain(self, alive: List[Particle]):
        """Replace the contents with ``alive``, which must preserve spawn order."""
        self._items = deque(alive, maxlen=self._items.maxlen)

    def clear(self):
        self._items.clear()


def step_particles(store: ParticleStore, dt: float, damping: float = DAMPING) -> List[Particle]:
    """Advance every particle by ``dt`` milliseconds and drop expired ones.

    Returns the survivors in spawn order; these are the particles to draw
    this frame. ``dt`` is used as given, callers clamp it.
    """
    k = dt / FRAME_MS
    alive: List[Particle] = []
    for p in store:
        p.px = p.x; p.py = p.y

        p.vx *= damping
        p.vy *= damping

        p.x += p.vx * k
        p.y += p.vy * k

        p.life -= k
        if p.life <= 0:
            continue
        alive.append(p)

    if len(alive) != len(store):
        store.retain(alive)
    return alive
