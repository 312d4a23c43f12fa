import random

import pytest

from engine.game_entities import Block, Paddle, Scene
from engine.input_state import InputState
from engine.scenes import animate_character, update


def test_start_tracks_cursor(make_state):
    s = make_state(field=(400, 300), scene=Scene.START)
    s.bar = Paddle(0, 250, 100, 25)

    update(s, InputState(200))
    assert s.bar.x == 150
    assert s.ball.pos.x == 200

    update(s, InputState(10))
    assert s.bar.x == 0
    assert s.ball.pos.x == 50

    update(s, InputState(1000))
    assert s.bar.x == 300
    assert s.ball.pos.x == 350
    assert s.scene is Scene.START


def test_start_does_not_move_ball_vertically(make_state):
    s = make_state(ball_pos=(50, 40), scene=Scene.START)
    update(s, InputState(50))
    assert s.ball.pos.y == 40
    assert s.ball.speed == 3


def test_click_launches_once(make_state):
    s = make_state(scene=Scene.START)
    inputs = InputState(50)
    inputs.click()
    update(s, inputs)
    assert s.scene is Scene.GAME
    assert not inputs.take_click()


def test_no_click_stays_in_start(make_state):
    s = make_state(scene=Scene.START)
    for _ in range(5):
        update(s, InputState(50))
    assert s.scene is Scene.START


def test_last_block_clears_on_same_tick(make_state):
    s = make_state(ball_pos=(50, 50), blocks=[Block(40, 40, 20, 20)])
    update(s, InputState(50))
    assert s.blocks.all_destroyed()
    assert s.scene is Scene.CLEAR

    pos = tuple(s.ball.pos)
    update(s, InputState(50))
    assert tuple(s.ball.pos) == pos


def test_empty_field_clears_at_once(make_state):
    s = make_state(blocks=[])
    update(s, InputState(50))
    assert s.scene is Scene.CLEAR


@pytest.mark.parametrize("before,scene", [(8, Scene.GAME), (9, Scene.GAMEOVER)])
def test_tenth_miss_is_game_over(make_state, before, scene):
    s = make_state(ball_pos=(50, 95), angle=90, miss=before)
    update(s, InputState(50))
    assert s.miss == before + 1
    assert s.scene is scene
    if scene is Scene.GAMEOVER:
        assert s.character.image == "gameover"
    else:
        assert s.character.image == "base"


def test_terminal_scenes_do_nothing(make_state):
    for scene in (Scene.CLEAR, Scene.GAMEOVER):
        s = make_state(ball_pos=(50, 95), angle=90, scene=scene)
        inputs = InputState(99)
        inputs.click()
        update(s, inputs)
        assert s.scene is scene
        assert s.miss == 0
        assert tuple(s.ball.pos) == (50, 95)


def test_damaged_image_below_half(make_state):
    blocks = [Block(40, 40, 20, 20), Block(0, 0, 1, 1), Block(2, 0, 1, 1), Block(4, 0, 1, 1)]
    s = make_state(blocks=blocks)
    s.blocks.destroy(1)
    update(s, InputState(50))
    # 2 of 4 left is not below half
    assert s.blocks.remaining() == 2
    assert s.character.image == "base"

    s.blocks.destroy(2)
    update(s, InputState(50))
    assert s.character.image == "diff"


def test_character_bobs_between_bounds(make_state):
    s = make_state(animation=True)
    c = s.character
    ys = []
    for _ in range(200):
        animate_character(c)
        ys.append(c.y)
    assert min(ys) >= -0.2 - 1e-9
    assert max(ys) <= 10.2 + 1e-9
    assert c.animation in ("up", "down")
    assert max(ys) > 10


def test_animation_flag_gates_bob(make_state):
    s = make_state(animation=False)
    update(s, InputState(50))
    assert s.character.y == 0

    s = make_state(animation=True)
    update(s, InputState(50))
    assert s.character.y == pytest.approx(0.2)


ORDER = {Scene.START: 0, Scene.GAME: 1, Scene.CLEAR: 2, Scene.GAMEOVER: 2}


def test_long_session_invariants(make_state):
    rng = random.Random(7)
    blocks = [Block(x, y, 20, 20) for y in range(0, 100, 20) for x in range(0, 300, 20)]
    s = make_state(ball_pos=(150, 250), field=(300, 300), blocks=blocks, scene=Scene.START, animation=True)
    s.bar = Paddle(100, 260, 100, 25)

    inputs = InputState(150)
    last_miss = 0
    last_scene = s.scene
    destroyed = set()
    for i in range(5000):
        inputs.move_cursor(rng.uniform(-100, 400))
        if i == 10:
            inputs.click()
        update(s, inputs)

        assert 0 <= s.bar.x <= s.field.width - s.bar.width
        assert s.miss >= last_miss
        assert ORDER[s.scene] >= ORDER[last_scene]
        if last_scene in (Scene.CLEAR, Scene.GAMEOVER):
            assert s.scene is last_scene
        now_destroyed = {k for k, b in enumerate(s.blocks) if b.destroyed}
        assert destroyed <= now_destroyed
        assert len(now_destroyed - destroyed) <= 1

        last_miss, last_scene, destroyed = s.miss, s.scene, now_destroyed

    assert s.scene is not Scene.START


def test_clear_beats_game_over_on_same_tick(make_state):
    s = make_state(ball_pos=(50, 95), angle=90, miss=9, blocks=[Block(40, 90, 20, 10)])
    update(s, InputState(50))
    assert s.blocks.all_destroyed()
    assert s.miss == 10
    assert s.scene is Scene.CLEAR
    assert s.character.image == "diff"
