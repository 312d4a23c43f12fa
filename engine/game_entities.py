# engine/game_entities.py
import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional, Tuple

import pygame

Vec2 = pygame.math.Vector2


class Scene(Enum):
    START = "start"
    GAME = "game"
    CLEAR = "clear"
    GAMEOVER = "gameover"


@dataclass(frozen=True)
class Field:
    width: float
    height: float


@dataclass
class Box:
    """Axis-aligned rectangle with float coordinates (pygame.Rect truncates to int)."""
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def to_rect(self, dy: float = 0.0) -> pygame.Rect:
        return pygame.Rect(round(self.x), round(self.y + dy), round(self.width), round(self.height))


@dataclass
class Paddle(Box):
    pass


@dataclass
class Block(Box):
    destroyed: bool = False

    @property
    def present(self) -> bool:
        return not self.destroyed


@dataclass
class Ball:
    pos: Vec2
    size: float
    angle: float     # degrees, 0 = +x, counter-clockwise
    speed: float

    @property
    def direction(self) -> Tuple[float, float]:
        rad = math.radians(self.angle)
        return math.cos(rad), math.sin(rad)


class BlockField:
    """
    Fixed-size, ordered set of blocks.
    Destroyed blocks stay in their slot so iteration order never shifts.
    """

    def __init__(self, blocks: Optional[List[Block]] = None):
        self._blocks: List[Block] = list(blocks or [])

    def __len__(self) -> int:
        return len(self._blocks)

    def __iter__(self) -> Iterator[Block]:
        return iter(self._blocks)

    def __getitem__(self, index: int) -> Block:
        return self._blocks[index]

    @property
    def total(self) -> int:
        return len(self._blocks)

    def present(self) -> Iterator[Tuple[int, Block]]:
        for i, b in enumerate(self._blocks):
            if b.present:
                yield i, b

    def remaining(self) -> int:
        return sum(1 for b in self._blocks if b.present)

    def destroy(self, index: int):
        self._blocks[index].destroyed = True

    def all_destroyed(self) -> bool:
        return all(b.destroyed for b in self._blocks)


@dataclass
class Character:
    # decorative; the simulation only bobs it and swaps its image key
    x: float
    y: float
    width: float
    height: float
    image: str = "base"          # base | diff | gameover
    animation: str = "down"      # up | down


@dataclass
class GameState:
    field: Field
    bar: Paddle
    ball: Ball
    blocks: BlockField
    character: Character
    miss: int = 0
    scene: Scene = Scene.START
    animation: bool = True
    ticks: int = 0
