# shooter.py
from __future__ import annotations
import dataclasses
import logging
from typing import Optional, Tuple

from .clock import FrameLoop, TimerHandle
from .collision import overlaps
from .config import WIDTH, HEIGHT, SCORE_PER_KILL, SHOOTER_CFG, ShooterConfig
from .controls import Command
from .entities import Category, Entity, EntityStore
from .game import ArcadeGame, Phase, Snapshot
from .spawner import Spawner

log = logging.getLogger(__name__)


class ShooterGame(ArcadeGame):
    """
    Side-scroller: the player sits on the left, hostiles drift in from the
    right, projectiles fly right. Runs one frame per display refresh and
    spawns a hostile on a fixed interval.
    """
    name = "Shooter"

    def __init__(self, width: float = WIDTH, height: float = HEIGHT,
                 cfg: ShooterConfig = SHOOTER_CFG, **kwargs):
        super().__init__(**kwargs)
        self.cfg = cfg
        self.width, self.height = width, height
        self.spawner = Spawner(self.rng, cfg)
        self.store = EntityStore()
        self.player = Entity(
            x=cfg.player_x, y=height / 2, w=cfg.player_size, h=cfg.player_size,
            category=Category.PLAYER,
        )
        self.frames = FrameLoop(
            self.scheduler, self.frame,
            keep_going=lambda: self.phase is Phase.RUNNING,
        )
        self.spawn_timer: Optional[TimerHandle] = None

    # ---------- Layout ----------
    def resize(self, width: float, height: float) -> None:
        """Only the field changes; the session carries on."""
        self.width, self.height = width, height
        if self.phase is Phase.IDLE:
            self.player.y = height / 2
        self._clamp_player()

    def _reset_layout(self) -> None:
        self.store.clear()
        self.player.x = self.cfg.player_x
        self.player.y = self.height / 2

    def _clamp_player(self) -> None:
        bottom = max(self.cfg.top_margin, self.height - self.player.h)
        self.player.y = min(max(self.player.y, self.cfg.top_margin), bottom)

    # ---------- Drivers ----------
    def _start_drivers(self) -> None:
        self.frames.start()
        if self.spawn_timer is None or not self.spawn_timer.active:
            self.spawn_timer = self.scheduler.call_every(self.cfg.spawn_every_ms, self.spawn)

    def _stop_drivers(self) -> None:
        self.frames.stop()
        if self.spawn_timer is not None:
            self.spawn_timer.cancel()
            self.spawn_timer = None

    def spawn(self) -> Entity:
        return self.store.add(self.spawner.spawn_hostile(self.width, self.height))

    # ---------- Input ----------
    def handle(self, cmd: Optional[Command]) -> None:
        # Space is the fire button here
        super().handle(Command.FIRE if cmd is Command.START else cmd)

    def _steer(self, direction: Tuple[int, int]) -> bool:
        _, dy = direction
        if dy == 0:
            return False
        self.player.y += dy * self.cfg.move_step
        self._clamp_player()
        return True

    def fire(self) -> None:
        if self.phase is Phase.ENDED:
            self.restart()
            return
        if self.phase is Phase.IDLE:
            self.start()
        self.store.add(self.spawner.spawn_projectile(self.player))

    # ---------- Update ----------
    def frame(self) -> None:
        if self.phase is not Phase.RUNNING:
            return

        self.store.advance_all()

        # projectiles -> hostiles, at most one projectile spent per hostile
        projectiles = self.store.of(Category.PROJECTILE)
        for hostile in self.store.of(Category.HOSTILE):
            for bullet in projectiles:
                if overlaps(hostile.rect, bullet.rect):
                    projectiles.remove(bullet)
                    self.store.remove(bullet)
                    hostile.hp -= 1
                    if hostile.hp <= 0:
                        self.store.remove(hostile)
                        self.score += SCORE_PER_KILL
                    break

        # hostiles -> player
        for hostile in self.store.of(Category.HOSTILE):
            if overlaps(hostile.rect, self.player.rect):
                self.end("hit")
                return

        margin = self.cfg.offscreen_margin
        self.store.cull(lambda e: (
            (e.category is Category.PROJECTILE and e.x >= self.width + margin)
            or (e.category is Category.HOSTILE and e.x + e.w <= -margin)
        ))

    # ---------- Presentation ----------
    def snapshot(self) -> Snapshot:
        return Snapshot(
            game=self.name,
            phase=self.phase,
            score=self.score,
            board=(int(self.width), int(self.height)),
            player=self.player.rect,
            entities=tuple(dataclasses.replace(e) for e in self.store),
        )
