# effects.py
from __future__ import annotations
from dataclasses import dataclass
import random
from typing import List, Tuple

import numpy as np  # type: ignore

GRAVITY = 0.12


@dataclass(frozen=True)
class Particle:
    x: float
    y: float
    life: int
    color: Tuple[int, int, int]


class ParticlePool:
    """
    Ephemeral particle effects. Positions, velocities and life counters are
    kept as numpy arrays so a whole burst advances and culls in one go.
    """

    def __init__(self, gravity: float = GRAVITY):
        self.gravity = gravity
        self.clear()

    def __len__(self) -> int:
        return int(self.life.shape[0])

    def burst(self, x: float, y: float, color, count: int, rng: random.Random) -> None:
        """Spawn `count` particles at (x, y) with random spread and lifetime."""
        pos = np.tile(np.array([x, y], dtype=np.float64), (count, 1))
        vel = np.array(
            [[(rng.random() - 0.5) * 4, (rng.random() - 0.5) * 4] for _ in range(count)],
            dtype=np.float64,
        ).reshape(count, 2)
        life = np.array([40 + rng.randrange(30) for _ in range(count)], dtype=np.int64)

        self.pos = np.vstack([self.pos, pos])
        self.vel = np.vstack([self.vel, vel])
        self.life = np.concatenate([self.life, life])
        self.colors.extend([tuple(color)] * count)

    def advance(self) -> None:
        """Move every particle one frame, apply gravity, age, and drop the dead."""
        if not len(self):
            return
        self.pos += self.vel
        self.vel[:, 1] += self.gravity
        self.life -= 1

        alive = self.life > 0
        self.pos = self.pos[alive]
        self.vel = self.vel[alive]
        self.life = self.life[alive]
        self.colors = [c for c, keep in zip(self.colors, alive.tolist()) if keep]

    def clear(self) -> None:
        self.pos = np.zeros((0, 2), dtype=np.float64)
        self.vel = np.zeros((0, 2), dtype=np.float64)
        self.life = np.zeros((0,), dtype=np.int64)
        self.colors: List[Tuple[int, int, int]] = []

    def snapshot(self) -> Tuple[Particle, ...]:
        return tuple(
            Particle(float(p[0]), float(p[1]), int(l), c)
            for p, l, c in zip(self.pos, self.life, self.colors)
        )
