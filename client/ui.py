# client/ui.py
import pygame

from engine.game_entities import GameState
from shared.constants import RED, WHITE, BLACK


class Hud:
    def __init__(self, font, color=RED, border=10):
        self.font = font
        self.color = color
        self.border = border

    def text(self, state: GameState) -> str:
        return f"miss {state.miss}    block {state.blocks.remaining()}/{state.blocks.total}"

    def draw(self, surface, state: GameState):
        w, h = surface.get_size()
        pygame.draw.rect(surface, self.color, (0, 0, w, h), width=self.border)
        img = self.font.render(self.text(state), True, self.color)
        # baseline-ish placement, 16px from the bottom-left corner
        surface.blit(img, img.get_rect(bottomleft=(16, h - 16)))


def draw_bar(surface, state: GameState, height: int):
    bar = state.bar
    rect = pygame.Rect(round(bar.x), round(bar.y), round(bar.width), height)
    pygame.draw.rect(surface, WHITE, rect)
    pygame.draw.rect(surface, BLACK, rect, width=1)


def draw_ball(surface, state: GameState):
    b = state.ball
    center = (int(b.pos.x), int(b.pos.y))
    r = int(b.size)
    pygame.draw.circle(surface, WHITE, center, r)
    pygame.draw.circle(surface, BLACK, center, r, 1)
