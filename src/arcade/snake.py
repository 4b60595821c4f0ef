# snake.py
from __future__ import annotations
import logging
from typing import List, Optional, Tuple

from .clock import TickChain, tick_delay
from .config import (
    WIDTH, HEIGHT, CELL_SIZE, MIN_COLS, MIN_ROWS, MIN_VIEWPORT,
    FOOD_NORMAL, FOOD_BONUS, FOOD_SLOW,
    SCORE_NORMAL, SCORE_BONUS, SCORE_SLOW,
    RIGHT, SNAKE_CFG, SnakeConfig,
)
from .controls import is_opposite
from .effects import ParticlePool
from .entities import Food, FoodKind
from .game import ArcadeGame, Phase, Snapshot
from .spawner import Spawner

log = logging.getLogger(__name__)

FOOD_SCORE = {
    FoodKind.NORMAL: SCORE_NORMAL,
    FoodKind.BONUS: SCORE_BONUS,
    FoodKind.SLOW: SCORE_SLOW,
}
FOOD_COLOR = {
    FoodKind.NORMAL: FOOD_NORMAL,
    FoodKind.BONUS: FOOD_BONUS,
    FoodKind.SLOW: FOOD_SLOW,
}


def board_for_viewport(width: int, height: int, cell: int = CELL_SIZE) -> Tuple[int, int]:
    """Grid size that fits the viewport, never smaller than MIN_COLS x MIN_ROWS."""
    width = max(MIN_VIEWPORT, width)
    height = max(MIN_VIEWPORT, height)
    return max(MIN_COLS, width // cell), max(MIN_ROWS, height // cell)


class SnakeGame(ArcadeGame):
    """Grid snake on a chain of one-shot timers whose delay tracks the score."""
    name = "Snake"

    def __init__(self, width: int = WIDTH, height: int = HEIGHT,
                 cfg: SnakeConfig = SNAKE_CFG, cell_size: int = CELL_SIZE, **kwargs):
        super().__init__(**kwargs)
        self.cfg = cfg
        self.cell_size = cell_size
        self.spawner = Spawner(self.rng)
        self.particles = ParticlePool()

        self.snake: List[Tuple[int, int]] = []   # head at index 0
        self.direction: Tuple[int, int] = RIGHT
        self.pending: Tuple[int, int] = RIGHT
        self.food: Optional[Food] = None
        self.slow_until = 0.0

        self.ticks = TickChain(
            self.scheduler, self.step, self.current_delay,
            keep_going=lambda: self.phase is Phase.RUNNING,
        )
        self.resize(width, height)

    # ---------- Layout ----------
    def resize(self, width: int, height: int) -> None:
        """A new viewport means a new board, so the session starts over."""
        self.cols, self.rows = board_for_viewport(width, height, self.cell_size)
        log.debug("Snake: board %dx%d", self.cols, self.rows)
        self.reset()

    def _reset_layout(self) -> None:
        self.snake = [(self.cols // 2, self.rows // 2)]
        self.direction = RIGHT
        self.pending = RIGHT
        self.slow_until = 0.0
        self.particles.clear()
        self.food = self.spawner.spawn_food(self.cols, self.rows, self.snake)

    # ---------- Drivers ----------
    def _start_drivers(self) -> None:
        self.ticks.start()

    def _stop_drivers(self) -> None:
        self.ticks.stop()

    @property
    def slow_active(self) -> bool:
        return self.scheduler.now < self.slow_until

    def current_delay(self) -> int:
        return tick_delay(self.score, self.slow_active, self.cfg)

    # ---------- Input ----------
    def _steer(self, direction: Tuple[int, int]) -> bool:
        # Compare against the committed heading so two quick turns in one
        # tick can't fold the snake back onto itself
        if is_opposite(direction, self.direction):
            return False
        self.pending = direction
        return True

    # ---------- Update ----------
    def step(self) -> bool:
        """
        Advance the snake by one cell.
        Returns True if the snake is still alive, False on game over or when
        the game isn't running.
        """
        if self.phase is not Phase.RUNNING:
            return False

        # Commit direction once per tick
        self.direction = self.pending

        hx, hy = self.snake[0]
        dx, dy = self.direction
        nx, ny = hx + dx, hy + dy

        if self.cfg.wrap:
            nx, ny = nx % self.cols, ny % self.rows
        elif not (0 <= nx < self.cols and 0 <= ny < self.rows):
            self.end("wall")
            return False

        new_head = (nx, ny)

        # Self collision
        if new_head in self.snake:
            self.end("self")
            return False

        # Move / grow
        self.snake.insert(0, new_head)
        if self.food is not None and new_head == self.food.cell:
            self._eat(self.food)
        else:
            self.snake.pop()

        self.particles.advance()
        return self.phase is Phase.RUNNING

    def _eat(self, food: Food) -> None:
        self.score += FOOD_SCORE[food.kind]
        if food.kind is FoodKind.SLOW:
            self.slow_until = self.scheduler.now + self.cfg.slow_duration_ms

        fx, fy = food.cell
        self.particles.burst(
            fx * self.cell_size + self.cell_size / 2,
            fy * self.cell_size + self.cell_size / 2,
            FOOD_COLOR[food.kind],
            self.cfg.particles_per_burst,
            self.rng,
        )

        self.food = self.spawner.spawn_food(self.cols, self.rows, self.snake)
        if self.food is None:
            self.end("board full")

    # ---------- Presentation ----------
    def snapshot(self) -> Snapshot:
        return Snapshot(
            game=self.name,
            phase=self.phase,
            score=self.score,
            board=(self.cols, self.rows),
            cell_size=self.cell_size,
            snake=tuple(self.snake),
            food=self.food,
            particles=self.particles.snapshot(),
        )
