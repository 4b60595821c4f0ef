from dataclasses import dataclass

# ----- Window & grid -----
WIDTH, HEIGHT = 720, 480
CELL_SIZE = 28
MIN_COLS, MIN_ROWS = 10, 8
MIN_VIEWPORT = 100

# ----- Colors -----
BG_SNAKE   = (10, 168, 75)
BG_SHOOTER = (8, 27, 7)
HEAD       = (122, 247, 124)
BODY       = (31, 107, 46)
TAIL       = (11, 61, 18)
PLAYER     = (124, 247, 124)
BULLET     = (255, 216, 107)
HOSTILE    = (255, 107, 107)
FOOD_NORMAL = (255, 77, 77)
FOOD_BONUS  = (255, 216, 107)
FOOD_SLOW   = (107, 180, 255)
HUD        = (102, 255, 204)
TEXT       = (240, 240, 250)

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)

# ----- Tunables -----
@dataclass
class SnakeConfig:
    base_delay_ms: int = 120
    min_delay_ms: int = 50
    delay_step_per_point: int = 4
    slow_penalty_ms: int = 60
    slow_duration_ms: int = 3000
    particles_per_burst: int = 10
    wrap: bool = False            # walls are lethal unless wrap is set


@dataclass
class ShooterConfig:
    spawn_every_ms: int = 900
    player_x: float = 40
    player_size: float = 22
    move_step: float = 18
    top_margin: float = 4
    bullet_size: float = 8
    bullet_speed: float = 8
    hostile_min_size: float = 22
    hostile_size_range: float = 18
    hostile_min_speed: float = 2
    hostile_speed_range: float = 3
    offscreen_margin: float = 50


@dataclass
class ReporterConfig:
    api_base: str = "http://localhost:5118/api/Users"
    timeout_s: float = 5.0


SNAKE_CFG = SnakeConfig()
SHOOTER_CFG = ShooterConfig()

# Score deltas per food kind / kill
SCORE_NORMAL, SCORE_BONUS, SCORE_SLOW = 1, 3, 1
SCORE_PER_KILL = 1
