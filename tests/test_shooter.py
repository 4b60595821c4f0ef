import math
import random

from arcade.controls import Command
from arcade.entities import Category, Entity
from arcade.game import Phase
from arcade.shooter import ShooterGame


def make_game(**kwargs):
    kwargs.setdefault("width", 400)
    kwargs.setdefault("height", 200)
    kwargs.setdefault("rng", random.Random(0))
    return ShooterGame(**kwargs)


def hostile(x, y, size=30, vx=-3):
    return Entity(x, y, size, size, vx=vx, category=Category.HOSTILE)


def test_starts_idle_with_nothing_moving():
    game = make_game()
    assert game.phase is Phase.IDLE
    assert len(game.store) == 0
    game.frame()
    assert len(game.store) == 0
    assert game.scheduler.pending == 0


def test_fire_starts_and_keeps_the_projectile():
    game = make_game()
    game.handle(Command.START)
    assert game.phase is Phase.RUNNING
    (bullet,) = game.store.of(Category.PROJECTILE)
    assert (bullet.x, bullet.y) == (40 + 22 + 4, 100 + 11 - 4)


def test_projectile_kills_hostile():
    game = make_game()
    game.handle(Command.FIRE)
    game.store.add(hostile(game.width + 10, 100))

    limit = math.ceil((game.width + 10 - 40 - 30) / 3)
    for _ in range(limit):
        game.frame()
        if not game.store.of(Category.HOSTILE):
            break

    assert game.store.of(Category.HOSTILE) == []
    assert game.store.of(Category.PROJECTILE) == []
    assert game.score == 1
    assert game.phase is Phase.RUNNING


def test_one_projectile_per_hostile_per_frame():
    game = make_game()
    game.start()
    game.store.add(hostile(200, 100))
    game.store.add(Entity(200, 110, 8, 8, category=Category.PROJECTILE))
    game.store.add(Entity(205, 110, 8, 8, category=Category.PROJECTILE))
    game.frame()
    assert game.score == 1
    assert len(game.store.of(Category.PROJECTILE)) == 1


def test_tough_hostile_takes_two_hits():
    game = make_game()
    game.start()
    tough = game.store.add(hostile(200, 100))
    tough.hp = 2
    game.store.add(Entity(200, 110, 8, 8, category=Category.PROJECTILE))
    game.frame()
    assert game.score == 0 and tough.hp == 1
    game.store.add(Entity(tough.x, 110, 8, 8, category=Category.PROJECTILE))
    game.frame()
    assert game.score == 1
    assert game.store.of(Category.HOSTILE) == []


def test_hostile_reaching_player_ends_game(reporter):
    game = make_game(reporter=reporter, user_id="p1")
    game.handle(Command.UP)
    assert game.phase is Phase.RUNNING
    game.store.add(hostile(game.player.x + 10, game.player.y))
    game.frame()
    assert game.phase is Phase.ENDED
    assert game.end_reason == "hit"
    assert not game.frames.armed
    assert game.spawn_timer is None
    assert game.scheduler.pending == 0
    assert reporter.calls == [("Shooter", 0, "p1")]


def test_offscreen_entities_are_culled():
    game = make_game()
    game.start()
    game.store.add(Entity(game.width + 45, 0, 8, 8, vx=8, category=Category.PROJECTILE))
    game.store.add(hostile(-100, 0))
    game.store.add(hostile(300, 0))
    game.frame()
    assert len(game.store) == 1
    assert game.store.of(Category.HOSTILE)[0].x == 297


def test_spawn_interval_while_running():
    game = make_game()
    game.handle(Command.DOWN)
    game.scheduler.advance(899)
    assert game.store.of(Category.HOSTILE) == []
    game.scheduler.advance(900)
    assert len(game.store.of(Category.HOSTILE)) == 1
    game.scheduler.advance(1800)
    assert len(game.store.of(Category.HOSTILE)) == 2


def test_frame_loop_runs_every_advance():
    game = make_game()
    game.handle(Command.FIRE)
    (bullet,) = game.store.of(Category.PROJECTILE)
    for t in (16, 32, 48):
        game.scheduler.advance(t)
    assert bullet.x == 66 + 3 * 8
    assert game.frames.armed


def test_movement_clamps():
    game = make_game()
    for _ in range(20):
        game.handle(Command.UP)
    assert game.player.y == 4
    for _ in range(40):
        game.handle(Command.DOWN)
    assert game.player.y == game.height - game.player.h


def test_sideways_input_ignored():
    game = make_game()
    y = game.player.y
    game.handle(Command.LEFT)
    game.handle(Command.RIGHT)
    assert game.phase is Phase.IDLE
    assert game.player.y == y


def test_fire_in_ended_restarts():
    game = make_game()
    game.handle(Command.FIRE)
    game.score = 3
    game.store.add(hostile(game.player.x, game.player.y))
    game.frame()
    assert game.phase is Phase.ENDED

    game.handle(Command.FIRE)
    assert game.phase is Phase.RUNNING
    assert game.score == 0
    assert len(game.store) == 0
    assert game.frames.armed and game.spawn_timer is not None


def test_no_report_without_identity(reporter):
    game = make_game(reporter=reporter)
    game.start()
    game.store.add(hostile(game.player.x, game.player.y))
    game.frame()
    assert game.phase is Phase.ENDED
    assert reporter.calls == []


def test_resize_is_a_rescale():
    game = make_game()
    game.handle(Command.FIRE)
    game.player.y = 180
    game.resize(800, 150)
    assert game.phase is Phase.RUNNING
    assert (game.width, game.height) == (800, 150)
    assert game.player.y == 150 - 22
    assert len(game.store) == 1


def test_snapshot_copies_entities():
    game = make_game()
    game.handle(Command.FIRE)
    snap = game.snapshot()
    game.frame()
    assert snap.entities[0].x == 66
    assert snap.board == (400, 200)
    assert snap.player.x == 40


def test_stalled_loop_spawns_one_hostile():
    game = make_game()
    game.handle(Command.DOWN)
    game.scheduler.advance(16)
    game.scheduler.advance(9016)
    assert len(game.store.of(Category.HOSTILE)) == 1


def test_resize_while_idle_recentres_player():
    game = make_game()
    game.resize(400, 300)
    assert game.phase is Phase.IDLE
    assert game.player.y == 150
    game.handle(Command.FIRE)
    assert game.player.y == 150
