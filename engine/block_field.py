# engine/block_field.py
"""
Block field generation from a bitmap's alpha channel.

The mask is cut into square cells ``width // 10`` pixels wide. A cell becomes
a block as soon as one of its pixels is not fully transparent.
"""
import logging
from dataclasses import dataclass
from typing import List, Tuple

import pygame

from engine.game_entities import Block, BlockField
from shared.game_config import CFG

logger = logging.getLogger(__name__)

BYTES_PER_PIXEL = 4   # RGBA, alpha last


@dataclass(frozen=True)
class AlphaMask:
    width: int
    height: int
    data: bytes       # row-major RGBA

    @classmethod
    def empty(cls) -> "AlphaMask":
        return cls(0, 0, b"")

    def alpha(self, x: int, y: int) -> int:
        return self.data[(x + y * self.width) * BYTES_PER_PIXEL + 3]


def cell_size(mask_width: int, columns: int = CFG.grid_columns) -> int:
    return mask_width // columns


def _cell_has_alpha(mask: AlphaMask, x0: int, y0: int, size: int) -> bool:
    for y in range(y0, y0 + size):
        for x in range(x0, x0 + size):
            if mask.alpha(x, y) > 0:
                return True
    return False


def make_blocks(mask: AlphaMask, origin: Tuple[float, float] = (0.0, 0.0),
                columns: int = CFG.grid_columns) -> List[Block]:
    """Blocks for every non-transparent whole cell, row-major."""
    size = cell_size(mask.width, columns)
    if size <= 0 or mask.height <= 0:
        return []
    if len(mask.data) < mask.width * mask.height * BYTES_PER_PIXEL:
        logger.warning("alpha mask too short for %dx%d, no blocks", mask.width, mask.height)
        return []

    ox, oy = origin
    blocks: List[Block] = []
    for row in range(mask.height // size):
        for col in range(mask.width // size):
            x, y = col * size, row * size
            if _cell_has_alpha(mask, x, y, size):
                blocks.append(Block(ox + x, oy + y, size, size))
    return blocks


def make_block_field(mask: AlphaMask, origin: Tuple[float, float] = (0.0, 0.0)) -> BlockField:
    blocks = make_blocks(mask, origin)
    logger.info("block field: %d blocks from %dx%d mask (cell %d)",
                len(blocks), mask.width, mask.height, cell_size(mask.width))
    return BlockField(blocks)


def sample_alpha(image: pygame.Surface, width: int, height: int) -> AlphaMask:
    """
    Scale image to width x height and read back its RGBA bytes.
    Any failure gives an empty mask, which means an empty block field.
    """
    if width <= 0 or height <= 0:
        logger.warning("cannot sample mask at %dx%d", width, height)
        return AlphaMask.empty()
    try:
        surf = image
        if surf.get_size() != (width, height):
            surf = pygame.transform.smoothscale(surf, (width, height))
        data = pygame.image.tobytes(surf, "RGBA")
    except (pygame.error, ValueError) as e:
        logger.warning("mask sampling failed: %s", e)
        return AlphaMask.empty()
    return AlphaMask(width, height, data)
