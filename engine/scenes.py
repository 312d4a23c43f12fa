# engine/scenes.py
"""
Scene state machine: Start -> Game -> Clear | Gameover.

``update`` runs one simulation tick on the state and returns it. Clear and
Gameover are terminal.
"""
import logging
from typing import Callable, Dict

from engine.game_entities import Character, GameState, Scene
from engine.input_state import InputState
from engine.physics import clamp, move_bar, step_ball
from shared.game_config import CFG

logger = logging.getLogger(__name__)

SceneUpdate = Callable[[GameState, InputState], GameState]


def _set_scene(state: GameState, scene: Scene):
    if state.scene is scene:
        return
    logger.info("scene %s -> %s (tick %d, miss %d, blocks %d/%d)",
                state.scene.value, scene.value, state.ticks, state.miss,
                state.blocks.remaining(), state.blocks.total)
    state.scene = scene


def animate_character(c: Character) -> Character:
    if c.animation == "up":
        if c.y < 0:
            c.animation = "down"
        else:
            c.y -= CFG.animation_speed
    elif c.animation == "down":
        if c.y > CFG.animation_range:
            c.animation = "up"
        else:
            c.y += CFG.animation_speed
    return c


def update_scene_start(state: GameState, inputs: InputState) -> GameState:
    cursor_x = inputs.cursor_x
    move_bar(state.bar, cursor_x, state.field)

    # ball rides the paddle until launch
    half = state.bar.width / 2
    state.ball.pos.x = clamp(cursor_x, half, state.field.width - half)

    if inputs.take_click():
        _set_scene(state, Scene.GAME)
    return state


def update_scene_game(state: GameState, inputs: InputState) -> GameState:
    move_bar(state.bar, inputs.cursor_x, state.field)

    res = step_ball(state.ball, state.bar, state.blocks, state.field)
    if res.missed:
        state.miss += 1

    if state.blocks.remaining() < state.blocks.total * CFG.damaged_fraction:
        state.character.image = "diff"

    if state.blocks.all_destroyed():
        _set_scene(state, Scene.CLEAR)
    elif state.miss >= CFG.max_miss:
        state.character.image = "gameover"
        _set_scene(state, Scene.GAMEOVER)
    return state


def update_scene_over(state: GameState, inputs: InputState) -> GameState:
    return state


SCENE_UPDATES: Dict[Scene, SceneUpdate] = {
    Scene.START: update_scene_start,
    Scene.GAME: update_scene_game,
    Scene.CLEAR: update_scene_over,
    Scene.GAMEOVER: update_scene_over,
}


def update(state: GameState, inputs: InputState) -> GameState:
    if state.animation:
        animate_character(state.character)
    state.ticks += 1
    return SCENE_UPDATES[state.scene](state, inputs)
