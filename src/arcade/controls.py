# controls.py
from enum import Enum
from typing import Dict, Optional, Tuple

import pygame  # type: ignore

from .config import UP, DOWN, LEFT, RIGHT

SWIPE_MIN_PX = 20


class Command(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    FIRE = "fire"
    START = "start"
    RESTART = "restart"


DIRECTIONS: Dict[Command, Tuple[int, int]] = {
    Command.UP: UP,
    Command.DOWN: DOWN,
    Command.LEFT: LEFT,
    Command.RIGHT: RIGHT,
}

KEYMAP: Dict[int, Command] = {
    pygame.K_UP: Command.UP,    pygame.K_w: Command.UP,
    pygame.K_DOWN: Command.DOWN, pygame.K_s: Command.DOWN,
    pygame.K_LEFT: Command.LEFT, pygame.K_a: Command.LEFT,
    pygame.K_RIGHT: Command.RIGHT, pygame.K_d: Command.RIGHT,
    pygame.K_SPACE: Command.START,
    pygame.K_r: Command.RESTART,
}


def is_opposite(a: Tuple[int, int], b: Tuple[int, int]) -> bool:
    return a[0] + b[0] == 0 and a[1] + b[1] == 0


def command_for_key(key: int) -> Optional[Command]:
    """Map a pygame key code to a command; unknown keys give None."""
    return KEYMAP.get(key)


def command_for_swipe(dx: float, dy: float) -> Optional[Command]:
    """Dominant axis of a swipe vector; short swipes are ignored."""
    if max(abs(dx), abs(dy)) < SWIPE_MIN_PX:
        return None
    if abs(dx) > abs(dy):
        return Command.RIGHT if dx > 0 else Command.LEFT
    return Command.DOWN if dy > 0 else Command.UP


class SwipeTracker:
    """Turns a touch-down / touch-up pair into a direction command."""

    def __init__(self) -> None:
        self.start: Optional[Tuple[float, float]] = None

    def press(self, x: float, y: float) -> None:
        self.start = (x, y)

    def release(self, x: float, y: float) -> Optional[Command]:
        if self.start is None:
            return None
        sx, sy = self.start
        self.start = None
        # a tap (no real swipe) acts like the start overlay being clicked
        return command_for_swipe(x - sx, y - sy) or Command.START


def command_for_event(event, swipe: Optional[SwipeTracker] = None) -> Optional[Command]:
    """Translate a raw pygame event. Anything unrecognised maps to None."""
    if event.type == pygame.KEYDOWN:
        return command_for_key(event.key)
    if swipe is None:
        return None
    if event.type == pygame.MOUSEBUTTONDOWN:
        swipe.press(*event.pos)
    elif event.type == pygame.MOUSEBUTTONUP:
        return swipe.release(*event.pos)
    return None
