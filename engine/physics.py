# engine/physics.py
"""
Ball physics: a plain angle-and-speed reflection model.

Collisions test the ball *center* against rectangles (see ``intersects``);
the ball radius only matters for the walls. Positions advance by one full
step per tick with no sub-step correction, so a fast ball can pass through
thin geometry.
"""
import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from engine.game_entities import Ball, BlockField, Box, Field, Paddle
from shared.game_config import CFG

logger = logging.getLogger(__name__)

PADDLE = "paddle"
HORIZONTAL_WALL = "horizontal_wall"   # top / bottom
VERTICAL_WALL = "vertical_wall"       # left / right


@dataclass
class StepResult:
    surface: Optional[str] = None     # what the ball bounced off before blocks
    missed: bool = False
    block_index: Optional[int] = None


def intersects(rect: Box, ball: Ball) -> bool:
    """Ball center inside rect, edges inclusive."""
    x, y = ball.pos.x, ball.pos.y
    return rect.x <= x <= rect.right and rect.y <= y <= rect.bottom


def clamp(v: float, lo: float, hi: float) -> float:
    if v < lo:
        return lo
    if v > hi:
        return hi
    return v


def move_bar(bar: Paddle, cursor_x: float, field: Field) -> Paddle:
    bar.x = clamp(cursor_x - bar.width / 2, 0, field.width - bar.width)
    return bar


def mirror_vertical(angle: float) -> float:
    return 360 - angle


def mirror_horizontal(angle: float) -> float:
    return 180 - angle


def paddle_angle(ball: Ball, bar: Paddle) -> float:
    # r in about [-0.5, 0.5]: where across the paddle the ball landed
    r = (ball.pos.x - bar.x) / bar.width - 0.5
    return 360 - ball.angle - 90 * -r


def hits_horizontal_wall(ball: Ball, field: Field) -> bool:
    return ball.pos.y <= ball.size or ball.pos.y >= field.height - ball.size


def hits_vertical_wall(ball: Ball, field: Field) -> bool:
    return ball.pos.x <= ball.size or ball.pos.x >= field.width - ball.size


def is_miss(ball: Ball, field: Field) -> bool:
    return ball.pos.y >= field.height - ball.size


def accelerate(ball: Ball, amount: float = CFG.acceleration):
    ball.speed += amount


def reflect(ball: Ball, bar: Paddle, field: Field, acceleration: float = CFG.acceleration) -> Optional[str]:
    """
    Bounce off at most one of paddle / top-bottom wall / left-right wall,
    in that priority. Returns the surface hit, or None.
    """
    if intersects(bar, ball):
        ball.angle = paddle_angle(ball, bar)
        surface = PADDLE
    elif hits_horizontal_wall(ball, field):
        ball.angle = mirror_vertical(ball.angle)
        surface = HORIZONTAL_WALL
    elif hits_vertical_wall(ball, field):
        ball.angle = mirror_horizontal(ball.angle)
        surface = VERTICAL_WALL
    else:
        return None

    accelerate(ball, acceleration)
    return surface


def hit_block(ball: Ball, blocks: BlockField, direction: Tuple[float, float],
              acceleration: float = CFG.acceleration) -> Optional[int]:
    """
    Destroy the first present block under the ball and bounce off it.
    The bounce axis comes from the travel direction: ry < rx mirrors
    vertically, otherwise horizontally.
    """
    rx, ry = direction
    for i, block in blocks.present():
        if not intersects(block, ball):
            continue
        blocks.destroy(i)
        if ry < rx:
            ball.angle = mirror_vertical(ball.angle)
        else:
            ball.angle = mirror_horizontal(ball.angle)
        accelerate(ball, acceleration)
        return i
    return None


def integrate(ball: Ball, direction: Tuple[float, float]):
    rx, ry = direction
    ball.pos.x += rx * ball.speed
    ball.pos.y += ry * ball.speed


def step_ball(ball: Ball, bar: Paddle, blocks: BlockField, field: Field,
              acceleration: float = CFG.acceleration) -> StepResult:
    """
    One physics tick: paddle/wall bounce, miss check, block hit, move.

    The move uses the direction taken after the paddle/wall bounce and the
    speed after every increment of this tick; a block bounce turns the ball
    from the next tick on.
    """
    res = StepResult()
    res.surface = reflect(ball, bar, field, acceleration)
    res.missed = is_miss(ball, field)

    direction = ball.direction
    res.block_index = hit_block(ball, blocks, direction, acceleration)

    integrate(ball, direction)

    if res.block_index is not None:
        logger.debug("block %d destroyed", res.block_index)
    return res

