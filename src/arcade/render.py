# render.py
import logging
from typing import Optional, Tuple

import pygame  # type: ignore

from .config import (
    BG_SNAKE, BG_SHOOTER, HEAD, BODY, TAIL, PLAYER, BULLET, HOSTILE, HUD, TEXT,
)
from .entities import Category
from .game import Phase, Snapshot
from .snake import FOOD_COLOR

log = logging.getLogger(__name__)


# ---------- Helpers ----------
def draw_cell(screen: pygame.Surface, gx: int, gy: int, cell: int,
              color: Tuple[int, int, int], inset: int = 1) -> None:
    rect = pygame.Rect(gx * cell + inset, gy * cell + inset, cell - 2 * inset, cell - 2 * inset)
    pygame.draw.rect(screen, color, rect)


def draw_box(screen: pygame.Surface, x: float, y: float, w: float, h: float, color) -> None:
    pygame.draw.rect(screen, color, pygame.Rect(int(x), int(y), int(round(w)), int(round(h))))


# ---------- Per-game frames ----------
def draw_snake(screen: pygame.Surface, snap: Snapshot) -> None:
    screen.fill(BG_SNAKE)
    cell = snap.cell_size

    if snap.food is not None:
        fx, fy = snap.food.cell
        draw_cell(screen, fx, fy, cell, FOOD_COLOR[snap.food.kind], inset=2)

    last = len(snap.snake) - 1
    for i, (x, y) in enumerate(snap.snake):
        if i == 0:
            color = HEAD
        elif i == last:
            color = TAIL
        else:
            color = BODY
        draw_cell(screen, x, y, cell, color)

    for p in snap.particles:
        draw_box(screen, p.x, p.y, 3, 3, p.color)


def draw_shooter(screen: pygame.Surface, snap: Snapshot) -> None:
    screen.fill(BG_SHOOTER)
    if snap.player is not None:
        r = snap.player
        draw_box(screen, r.x, r.y, r.w, r.h, PLAYER)
    for e in snap.entities:
        color = BULLET if e.category is Category.PROJECTILE else HOSTILE
        draw_box(screen, e.x, e.y, e.w, e.h, color)


def draw_hud(screen: pygame.Surface, font: pygame.font.Font, score: int) -> None:
    txt = font.render(f"Score: {score}", True, HUD)
    screen.blit(txt, (12, 8))


def draw_overlay(screen: pygame.Surface, font: pygame.font.Font, snap: Snapshot) -> None:
    """Start prompt while Idle, result while Ended."""
    width, height = screen.get_size()
    overlay = pygame.Surface((width, height), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 140))  # RGBA
    screen.blit(overlay, (0, 0))

    if snap.phase is Phase.ENDED:
        lines = [f"Game Over — Score {snap.score}", "Press Space or R to restart"]
    else:
        lines = ["Press Space to Start"]

    for i, line in enumerate(lines):
        surf = font.render(line, True, TEXT)
        rect = surf.get_rect(center=(width // 2, height // 2 - 16 + i * 32))
        screen.blit(surf, rect)


def draw_frame(screen: Optional[pygame.Surface], font: pygame.font.Font, snap: Snapshot) -> bool:
    """
    Render one snapshot. Returns False (and draws nothing) when there is no
    surface to draw on yet.
    """
    if screen is None:
        log.debug("No surface; skipping frame")
        return False

    # only the grid game leaves the player rect empty
    if snap.player is None:
        draw_snake(screen, snap)
    else:
        draw_shooter(screen, snap)
    draw_hud(screen, font, snap.score)
    if snap.phase is not Phase.RUNNING:
        draw_overlay(screen, font, snap)
    return True
