# client/screens.py
import pygame

from client.assets import StageAssets
from client.ui import Hud, draw_ball, draw_bar
from engine.game_entities import GameState, Scene
from shared.constants import CLEAR_BG
from shared.game_config import CFG


class Screen:
    name = "base"
    def __init__(self, assets: StageAssets, hud: Hud):
        self.assets = assets
        self.hud = hud
    def draw(self, surface, state: GameState): pass


def draw_silhouette(surface, state: GameState, assets: StageAssets):
    """
    Mask image cut down to the blocks still standing, over the character.
    Blocks follow the character's bob vertically.
    """
    c = state.character
    size = (int(c.width), int(c.height))
    pos = (round(c.x), round(c.y))

    layer = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
    layer.blit(assets.get("mask", size), pos)

    keep = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
    keep.fill(CLEAR_BG)
    for _, block in state.blocks.present():
        keep.fill((255, 255, 255, 255), block.to_rect(dy=c.y))
    layer.blit(keep, (0, 0), special_flags=pygame.BLEND_RGBA_MULT)

    surface.blit(assets.get(c.image, size), pos)
    surface.blit(layer, (0, 0))


# -------------------- Start / Game --------------------
class PlayScreen(Screen):
    name = "play"
    def draw(self, surface, state):
        draw_silhouette(surface, state, self.assets)
        self.hud.draw(surface, state)
        draw_bar(surface, state, CFG.bar_draw_height)
        draw_ball(surface, state)


# -------------------- Gameover --------------------
class GameoverScreen(Screen):
    name = "gameover"
    def draw(self, surface, state):
        draw_silhouette(surface, state, self.assets)
        self.hud.draw(surface, state)


# -------------------- Clear --------------------
class ClearScreen(Screen):
    name = "clear"
    def draw(self, surface, state):
        c = state.character
        surface.blit(self.assets.get("clear", (c.width, c.height)), (round(c.x), round(c.y)))


def make_screens(assets: StageAssets, hud: Hud):
    play = PlayScreen(assets, hud)
    return {
        Scene.START: play,
        Scene.GAME: play,
        Scene.GAMEOVER: GameoverScreen(assets, hud),
        Scene.CLEAR: ClearScreen(assets, hud),
    }
