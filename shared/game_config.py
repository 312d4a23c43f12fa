# shared/game_config.py
from dataclasses import dataclass
from typing import Optional

@dataclass(frozen=True)
class GameConfig:
    tick_length: float = 16.6    # ms per simulation tick
    max_catchup_ticks: Optional[int] = None   # None = catch up fully after a stall

    acceleration: float = 0.2    # speed gained on every reflection
    max_miss: int = 10

    bar_width: int = 100
    bar_height: int = 25
    bar_draw_height: int = 10    # visual
    bar_margin: int = 100        # space below the image for the paddle

    ball_size: int = 5
    ball_speed: float = 3.0
    ball_angle: float = 270.0    # degrees, straight up on screen

    grid_columns: int = 10       # block cells across the mask width

    animation_speed: float = 0.2
    animation_range: float = 10.0
    damaged_fraction: float = 0.5

CFG = GameConfig()
