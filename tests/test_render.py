import random

import pygame
import pytest

from arcade.controls import Command
from arcade.render import draw_frame
from arcade.shooter import ShooterGame
from arcade.snake import SnakeGame


@pytest.fixture(scope="module")
def font():
    pygame.font.init()
    yield pygame.font.Font(None, 18)
    pygame.font.quit()


@pytest.mark.parametrize("cls", [SnakeGame, ShooterGame])
def test_draws_idle_running_and_ended(cls, font):
    game = cls(280, 224, rng=random.Random(0))
    screen = pygame.Surface((280, 224))

    assert draw_frame(screen, font, game.snapshot())

    game.handle(Command.START)
    assert draw_frame(screen, font, game.snapshot())

    game.end("test")
    assert draw_frame(screen, font, game.snapshot())


def test_missing_surface_skips_frame(font):
    game = SnakeGame(rng=random.Random(0))
    assert draw_frame(None, font, game.snapshot()) is False


def test_dispatch_does_not_depend_on_display_name(font):
    from dataclasses import replace

    from arcade.config import HEAD

    game = SnakeGame(280, 224, rng=random.Random(0))
    game.start()
    snap = replace(game.snapshot(), game="Renamed")
    screen = pygame.Surface((280, 224))
    draw_frame(screen, font, snap)

    hx, hy = snap.snake[0]
    cell = snap.cell_size
    assert tuple(screen.get_at((hx * cell + cell // 2, hy * cell + cell // 2)))[:3] == HEAD
