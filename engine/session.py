# engine/session.py
import logging
from typing import Tuple

from engine.block_field import AlphaMask, make_block_field
from engine.game_entities import Ball, Character, Field, GameState, Paddle, Scene, Vec2
from shared.game_config import CFG

logger = logging.getLogger(__name__)


def fit_image(client_w: int, client_h: int, image_w: int, image_h: int) -> Tuple[int, int]:
    """Largest image size with the bitmap's aspect ratio inside the client area."""
    if image_w <= 0 or image_h <= 0:
        raise ValueError(f"bad image size {image_w}x{image_h}")
    h = client_h
    w = (h * image_w) // image_h
    if client_w < w:
        w = client_w
        h = (w * image_h) // image_w
    return w, h


def fit_field(client_w: int, client_h: int, image_w: int, image_h: int) -> Tuple[Field, Tuple[int, int]]:
    """Field for a client area: the image plus the paddle margin below it, all inside the area."""
    if client_h <= CFG.bar_margin:
        raise ValueError(f"client height {client_h} leaves no room for the image")
    w, h = fit_image(client_w, client_h - CFG.bar_margin, image_w, image_h)
    return Field(w, h + CFG.bar_margin), (w, h)


def mask_origin(field: Field, mask: AlphaMask) -> Tuple[float, float]:
    return field.width / 2 - mask.width / 2, 0.0


def new_game(field: Field, image_size: Tuple[int, int], mask: AlphaMask,
             animation: bool = True) -> GameState:
    image_w, image_h = image_size

    bar_x = field.width / 2 - CFG.bar_width / 2
    bar_y = field.height - CFG.bar_margin / 2
    bar = Paddle(bar_x, bar_y, CFG.bar_width, CFG.bar_height)

    # ball starts on the paddle's left edge; the first Start tick recentres it
    ball = Ball(Vec2(bar_x, bar_y - CFG.ball_size), CFG.ball_size, CFG.ball_angle, CFG.ball_speed)

    blocks = make_block_field(mask, mask_origin(field, mask))
    character = Character(field.width / 2 - image_w / 2, 0, image_w, image_h)

    logger.info("new game: field %sx%s, %d blocks, animation %s",
                field.width, field.height, blocks.total, "on" if animation else "off")
    return GameState(
        field=field,
        bar=bar,
        ball=ball,
        blocks=blocks,
        character=character,
        miss=0,
        scene=Scene.START,
        animation=animation,
    )
