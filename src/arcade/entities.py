# entities.py
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterator, List, Tuple

from .collision import Rect


class Category(Enum):
    PLAYER = "player"
    PROJECTILE = "projectile"
    HOSTILE = "hostile"


class FoodKind(Enum):
    NORMAL = "normal"
    BONUS = "bonus"
    SLOW = "slow"


@dataclass
class Entity:
    x: float
    y: float
    w: float
    h: float
    vx: float = 0.0
    vy: float = 0.0
    category: Category = Category.HOSTILE
    hp: int = 1

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.w, self.h)


@dataclass(frozen=True)
class Food:
    cell: Tuple[int, int]
    kind: FoodKind = FoodKind.NORMAL


class EntityStore:
    """Owns the transient shooter entities (projectiles and hostiles)."""

    def __init__(self) -> None:
        self._items: List[Entity] = []

    def __iter__(self) -> Iterator[Entity]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def add(self, entity: Entity) -> Entity:
        self._items.append(entity)
        return entity

    def remove(self, entity: Entity) -> None:
        # identity, not equality: two hostiles may share every field
        self._items = [e for e in self._items if e is not entity]

    def clear(self) -> None:
        self._items = []

    def of(self, category: Category) -> List[Entity]:
        return [e for e in self._items if e.category is category]

    def advance_all(self, dt: float = 1) -> None:
        for e in self._items:
            e.x += e.vx * dt
            e.y += e.vy * dt

    def cull(self, predicate: Callable[[Entity], bool]) -> int:
        """Drop every entity matching `predicate`; returns how many went."""
        keep = [e for e in self._items if not predicate(e)]
        removed = len(self._items) - len(keep)
        self._items = keep
        return removed
