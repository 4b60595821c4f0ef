# spawner.py
from __future__ import annotations
import random
from typing import Iterable, List, Optional, Sequence, Tuple, TypeVar

from .config import SHOOTER_CFG, ShooterConfig
from .entities import Category, Entity, Food, FoodKind

T = TypeVar("T")

# Cumulative upper bounds, checked in order against a single uniform draw.
FOOD_TABLE: Sequence[Tuple[float, FoodKind]] = (
    (0.84, FoodKind.NORMAL),
    (0.92, FoodKind.SLOW),
    (1.00, FoodKind.BONUS),
)


def weighted_pick(table: Sequence[Tuple[float, T]], roll: float) -> T:
    """Return the first entry whose cumulative bound covers `roll` (in [0, 1))."""
    for bound, value in table:
        if roll <= bound:
            return value
    return table[-1][1]


class Spawner:
    """Produces new entities with randomized attributes from an injected RNG."""

    def __init__(self, rng: Optional[random.Random] = None, cfg: ShooterConfig = SHOOTER_CFG):
        self.rng = rng or random.Random()
        self.cfg = cfg

    # ---------- Shooter ----------
    def spawn_hostile(self, board_w: float, board_h: float) -> Entity:
        """A hostile just past the right edge, drifting left."""
        c = self.cfg
        size = c.hostile_min_size + self.rng.random() * c.hostile_size_range
        y = max(8, self.rng.random() * (board_h - size - 8))
        speed = c.hostile_min_speed + self.rng.random() * c.hostile_speed_range
        return Entity(
            x=board_w + 10, y=y, w=size, h=size,
            vx=-speed, vy=0.0,
            category=Category.HOSTILE, hp=1,
        )

    def spawn_projectile(self, player: Entity) -> Entity:
        c = self.cfg
        return Entity(
            x=player.x + player.w + 4,
            y=player.y + player.h / 2 - c.bullet_size / 2,
            w=c.bullet_size, h=c.bullet_size,
            vx=c.bullet_speed, vy=0.0,
            category=Category.PROJECTILE, hp=1,
        )

    # ---------- Grid ----------
    def food_kind(self) -> FoodKind:
        return weighted_pick(FOOD_TABLE, self.rng.random())

    def spawn_food(self, cols: int, rows: int,
                   occupied: Iterable[Tuple[int, int]] = ()) -> Optional[Food]:
        """
        Food at a uniformly random free cell. Returns None when every cell is
        occupied (the snake filled the board).
        """
        cols, rows = max(1, cols), max(1, rows)
        taken = set(occupied)
        kind = self.food_kind()

        # Rejection sampling is fine while the board is mostly empty
        for _ in range(64):
            cell = (self.rng.randrange(cols), self.rng.randrange(rows))
            if cell not in taken:
                return Food(cell, kind)

        free: List[Tuple[int, int]] = [
            (x, y) for y in range(rows) for x in range(cols) if (x, y) not in taken
        ]
        if not free:
            return None
        return Food(self.rng.choice(free), kind)
