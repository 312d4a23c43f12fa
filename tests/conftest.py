# tests/conftest.py
import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest

from engine.game_entities import Ball, Block, BlockField, Character, Field, GameState, Paddle, Scene, Vec2


def far_paddle(field: Field) -> Paddle:
    # below the field, out of the ball's reach
    return Paddle(0, field.height + 1000, 100, 25)


@pytest.fixture
def make_state():
    def _make(ball_pos=(50, 50), angle=270.0, speed=3.0, size=5, field=(100, 100),
              blocks=None, bar=None, scene=Scene.GAME, miss=0, animation=False):
        f = Field(*field)
        return GameState(
            field=f,
            bar=bar if bar is not None else far_paddle(f),
            ball=Ball(Vec2(*ball_pos), size, angle, speed),
            blocks=BlockField(blocks if blocks is not None else [Block(0, 0, 1, 1)]),
            character=Character(0, 0, f.width, f.height),
            miss=miss,
            scene=scene,
            animation=animation,
        )
    return _make
