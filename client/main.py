# client/main.py
import logging
import os
import sys
from typing import Optional, Tuple

import pygame

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from shared.constants import APP_TITLE, BG, DEFAULT_STAGE, FPS, HEIGHT, WIDTH, WINDOW_FRAME
from client.assets import DEFAULT_ASSETS_DIR, StageAssets, load_stage
from client.screens import make_screens
from client.ui import Hud
from engine.block_field import sample_alpha
from engine.game_entities import GameState
from engine.input_state import InputState
from engine.scenes import update
from engine.scheduler import FixedStepScheduler
from engine.session import fit_field, new_game

logger = logging.getLogger(__name__)


def parse_size(value: Optional[str]) -> Optional[Tuple[int, int]]:
    """'800x600' -> (800, 600); None or junk -> None."""
    if not value:
        return None
    try:
        w, h = value.lower().split("x", 1)
        size = int(w), int(h)
    except ValueError:
        logger.warning("ignoring CLIENT_SIZE=%r (expected WxH)", value)
        return None
    if size[0] <= 0 or size[1] <= 0:
        return None
    return size


def desktop_size() -> Tuple[int, int]:
    info = pygame.display.Info()
    if info.current_w > 0 and info.current_h > 0:
        return info.current_w, info.current_h - WINDOW_FRAME
    return WIDTH, HEIGHT


class App:
    def __init__(self, stage: str = DEFAULT_STAGE, assets_dir: str = DEFAULT_ASSETS_DIR,
                 client_size: Optional[Tuple[int, int]] = None):
        pygame.init()
        pygame.display.set_caption(APP_TITLE)

        # raises FileNotFoundError / pygame.error; nothing is built on failure
        self.assets: StageAssets = load_stage(stage, assets_dir)

        cw, ch = client_size or desktop_size()
        self.field, image_size = fit_field(cw, ch, *self.assets.base_size)

        self.screen = pygame.display.set_mode((int(self.field.width), int(self.field.height)))
        self.assets.prepare()
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("sans", 16)

        mask = sample_alpha(self.assets.images["mask"], *image_size)
        self.state: GameState = new_game(self.field, image_size, mask, self.assets.animation)

        self.inputs = InputState(self.field.width / 2)
        self.screens = make_screens(self.assets, Hud(self.font))
        self.scheduler = FixedStepScheduler(pygame.time.get_ticks())
        self.running = True

    def handle_event(self, event):
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            self.running = False
        elif event.type == pygame.MOUSEMOTION:
            self.inputs.move_cursor(event.pos[0])
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.inputs.click()
        elif event.type in (pygame.FINGERDOWN, pygame.FINGERMOTION):
            # touch only steers; taps arrive as emulated mouse clicks
            self.inputs.move_cursor(event.x * self.field.width)

    def tick(self, state: GameState) -> GameState:
        return update(state, self.inputs)

    def render(self, state: GameState):
        self.screen.fill(BG)
        self.screens[state.scene].draw(self.screen, state)
        pygame.display.flip()

    def run(self):
        try:
            while self.running:
                self.clock.tick(FPS)
                for event in pygame.event.get():
                    self.handle_event(event)
                self.state = self.scheduler.frame(pygame.time.get_ticks(), self.state, self.tick, self.render)
        finally:
            logger.info("session ended: scene %s, %d ticks", self.state.scene.value, self.scheduler.total_ticks)
            pygame.quit()


def main() -> int:
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    stage = os.getenv("STAGE", DEFAULT_STAGE)
    assets_dir = os.getenv("ASSETS_DIR", DEFAULT_ASSETS_DIR)
    try:
        app = App(stage, assets_dir, parse_size(os.getenv("CLIENT_SIZE")))
    except (FileNotFoundError, ValueError, pygame.error) as e:
        logger.error("cannot start: %s", e)
        pygame.quit()
        return 1
    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
