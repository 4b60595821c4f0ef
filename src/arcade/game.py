# game.py
"""
Phase machine shared by both games.

A game is Idle until the first start command, Running while it simulates,
and Ended once the player dies. Ended only exits through a restart, which
lands straight in a fresh Running session. Subclasses supply the layout,
the drivers (frame loop or tick chain) and the per-tick rules.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
import logging
import random
from typing import Callable, Optional, Tuple

from .clock import Scheduler
from .collision import Rect
from .controls import Command, DIRECTIONS
from .effects import Particle
from .entities import Entity, Food

log = logging.getLogger(__name__)

Reporter = Callable[[str, int, str], object]


class Phase(Enum):
    IDLE = "idle"
    RUNNING = "running"
    ENDED = "ended"


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of one frame, handed to the renderer."""
    game: str
    phase: Phase
    score: int
    board: Tuple[int, int]           # (cols, rows) for the grid, (w, h) px otherwise
    cell_size: int = 1
    player: Optional[Rect] = None
    entities: Tuple[Entity, ...] = ()
    snake: Tuple[Tuple[int, int], ...] = ()
    food: Optional[Food] = None
    particles: Tuple[Particle, ...] = ()


class ArcadeGame:
    name = "Arcade"

    def __init__(self, scheduler: Optional[Scheduler] = None,
                 rng: Optional[random.Random] = None,
                 reporter: Optional[Reporter] = None,
                 user_id: Optional[str] = None):
        self.scheduler = scheduler or Scheduler()
        self.rng = rng or random.Random()
        self.reporter = reporter
        self.user_id = user_id
        self.phase = Phase.IDLE
        self.score = 0
        self.end_reason: Optional[str] = None

    # ---------- Hooks ----------
    def _reset_layout(self) -> None:
        raise NotImplementedError

    def _start_drivers(self) -> None:
        raise NotImplementedError

    def _stop_drivers(self) -> None:
        raise NotImplementedError

    def _steer(self, direction: Tuple[int, int]) -> bool:
        """Apply a direction; return True if it was accepted."""
        raise NotImplementedError

    def resize(self, width: int, height: int) -> None:
        raise NotImplementedError

    def snapshot(self) -> Snapshot:
        raise NotImplementedError

    # ---------- Transitions ----------
    @property
    def running(self) -> bool:
        return self.phase is Phase.RUNNING

    def start(self) -> bool:
        if self.phase is not Phase.IDLE:
            return False
        self.phase = Phase.RUNNING
        self._start_drivers()
        log.info("%s: started", self.name)
        return True

    def end(self, reason: str = "") -> None:
        if self.phase is not Phase.RUNNING:
            return
        self._stop_drivers()
        self.phase = Phase.ENDED
        self.end_reason = reason
        log.info("%s: game over (%s), score %d", self.name, reason or "?", self.score)
        self._report()

    def restart(self) -> bool:
        if self.phase is not Phase.ENDED:
            return False
        self._stop_drivers()
        self._fresh_session()
        self.phase = Phase.RUNNING
        self._start_drivers()
        log.info("%s: restarted", self.name)
        return True

    def reset(self) -> None:
        """Tear down whatever is running and go back to Idle."""
        self._stop_drivers()
        self._fresh_session()
        self.phase = Phase.IDLE

    def _fresh_session(self) -> None:
        self.score = 0
        self.end_reason = None
        self._reset_layout()

    def _report(self) -> None:
        if not self.user_id or self.reporter is None:
            return
        try:
            self.reporter(self.name, self.score, self.user_id)
        except Exception as e:  # reporting must never touch gameplay
            log.warning("%s: score report failed: %s", self.name, e)

    # ---------- Input ----------
    def handle(self, cmd: Optional[Command]) -> None:
        """Apply one input command in whatever phase the game is in."""
        if cmd is None:
            return
        if cmd is Command.RESTART:
            self.restart()
        elif cmd is Command.START:
            if self.phase is Phase.ENDED:
                self.restart()
            else:
                self.start()
        elif cmd is Command.FIRE:
            self.fire()
        elif cmd in DIRECTIONS:
            if self.phase is Phase.ENDED:
                return
            if self._steer(DIRECTIONS[cmd]) and self.phase is Phase.IDLE:
                self.start()

    def fire(self) -> None:
        self.handle(Command.START)
