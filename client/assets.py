# client/assets.py
import logging
import os
from dataclasses import dataclass
from typing import Dict, Tuple

import pygame

from shared.constants import DEFAULT_STAGE

logger = logging.getLogger(__name__)

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
DEFAULT_ASSETS_DIR = os.path.join(ROOT, "assets")


@dataclass(frozen=True)
class StageSpec:
    subdir: str
    gameover: str
    animation: bool


STAGES: Dict[str, StageSpec] = {
    DEFAULT_STAGE: StageSpec("", "gameover.png", True),
    "2021": StageSpec("2021", "clear.png", False),   # no gameover art, still portrait
}


def stage_spec(name: str) -> StageSpec:
    # unknown stage names fall back to the default set
    return STAGES.get(name, STAGES[DEFAULT_STAGE])


class StageAssets:
    """Images of one stage, keyed by the names the simulation uses."""

    def __init__(self, images: Dict[str, pygame.Surface], animation: bool):
        self.images = images
        self.animation = animation
        self._scaled: Dict[Tuple[str, int, int], pygame.Surface] = {}

    @property
    def base_size(self) -> Tuple[int, int]:
        return self.images["base"].get_size()

    def prepare(self):
        # needs a display mode
        self.images = {k: img.convert_alpha() for k, img in self.images.items()}
        self._scaled.clear()

    def get(self, key: str, size: Tuple[int, int]) -> pygame.Surface:
        w, h = int(size[0]), int(size[1])
        k = (key, w, h)
        surf = self._scaled.get(k)
        if surf is None:
            surf = pygame.transform.smoothscale(self.images[key], (w, h))
            self._scaled[k] = surf
        return surf


def load_image(path: str) -> pygame.Surface:
    if not os.path.exists(path):
        raise FileNotFoundError(path)
    return pygame.image.load(path)


def load_stage(name: str, assets_dir: str = DEFAULT_ASSETS_DIR) -> StageAssets:
    spec = stage_spec(name)
    folder = os.path.join(assets_dir, spec.subdir)
    files = {
        "base": "base.png",
        "diff": "diff.png",
        "mask": "mask.png",
        "clear": "clear.png",
        "gameover": spec.gameover,
    }
    images = {key: load_image(os.path.join(folder, fn)) for key, fn in files.items()}
    logger.info("loaded stage %r from %s", name, folder)
    return StageAssets(images, spec.animation)
