# main.py
import argparse
import logging
import random

import pygame  # type: ignore

from .clock import Scheduler
from .config import WIDTH, HEIGHT, ReporterConfig, SnakeConfig
from .controls import SwipeTracker, command_for_event
from .render import draw_frame
from .reporter import ScoreReporter
from .shooter import ShooterGame
from .snake import SnakeGame

log = logging.getLogger(__name__)

GAMES = {"snake": SnakeGame, "shooter": ShooterGame}


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Arcade mini-games: snake and a side-scrolling shooter.")
    p.add_argument("--game", choices=sorted(GAMES), default="snake")
    p.add_argument("--user-id", default=None, help="Identity for score reporting; omit to skip reporting")
    p.add_argument("--api-base", default=ReporterConfig.api_base)
    p.add_argument("--wrap", action="store_true", help="Snake wraps at the walls instead of dying")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--fps", type=int, default=60)
    p.add_argument("--log-level", default="INFO")
    return p.parse_args(argv)


def build_game(args, scheduler: Scheduler):
    rng = random.Random(args.seed)
    reporter = ScoreReporter(ReporterConfig(api_base=args.api_base))
    common = dict(scheduler=scheduler, rng=rng, reporter=reporter, user_id=args.user_id)
    if args.game == "snake":
        return SnakeGame(WIDTH, HEIGHT, cfg=SnakeConfig(wrap=args.wrap), **common)
    return ShooterGame(WIDTH, HEIGHT, **common)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    pygame.init()
    font = pygame.font.SysFont(None, 24)
    screen = pygame.display.set_mode((WIDTH, HEIGHT), pygame.RESIZABLE)
    clock = pygame.time.Clock()

    scheduler = Scheduler(pygame.time.get_ticks())
    game = build_game(args, scheduler)
    pygame.display.set_caption(f"Arcade — {game.name}")
    swipe = SwipeTracker()
    running = True

    while running:
        # 1) input
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.VIDEORESIZE:
                screen = pygame.display.set_mode(event.size, pygame.RESIZABLE)
                game.resize(*event.size)
            else:
                game.handle(command_for_event(event, swipe))

        # 2) update: due timers and the frame callback
        scheduler.advance(pygame.time.get_ticks())

        # 3) render
        draw_frame(screen, font, game.snapshot())
        pygame.display.flip()
        clock.tick(args.fps)

    scheduler.cancel_all()
    pygame.quit()


if __name__ == "__main__":
    main()
