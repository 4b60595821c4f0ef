"""Arcade mini-games (snake and a side-scrolling shooter) on a shared game-loop core."""

from .game import ArcadeGame, Phase, Snapshot
from .shooter import ShooterGame
from .snake import SnakeGame

__all__ = ["ArcadeGame", "Phase", "Snapshot", "ShooterGame", "SnakeGame"]
