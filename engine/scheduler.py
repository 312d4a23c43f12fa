# engine/scheduler.py
import logging
from typing import Callable, Optional

from engine.game_entities import GameState
from shared.game_config import CFG

logger = logging.getLogger(__name__)

Tick = Callable[[GameState], GameState]
Render = Callable[[GameState], None]


class FixedStepScheduler:
    """
    Runs the simulation at a fixed tick rate whatever the frame rate is.

    Each frame, every whole tick between the last simulated tick and the
    frame time is run, then the frame is rendered once. An early frame
    runs no tick and renders the unchanged state.
    """

    def __init__(self, last_tick: float, tick_length: float = CFG.tick_length,
                 max_ticks: Optional[int] = CFG.max_catchup_ticks):
        if tick_length <= 0:
            raise ValueError("tick_length must be positive")
        self.last_tick = float(last_tick)
        self.tick_length = float(tick_length)
        self.max_ticks = max_ticks
        self.total_ticks = 0

    def ticks_due(self, now: float) -> int:
        if now <= self.last_tick + self.tick_length:
            return 0
        return int((now - self.last_tick) // self.tick_length)

    def advance(self, now: float, state: GameState, tick: Tick) -> GameState:
        n = self.ticks_due(now)
        run = n if self.max_ticks is None else min(n, self.max_ticks)
        if n > 1:
            logger.debug("catching up %d ticks (running %d)", n, run)

        for _ in range(run):
            self.last_tick += self.tick_length
            state = tick(state)
        # capped ticks are dropped, not deferred
        self.last_tick += (n - run) * self.tick_length
        self.total_ticks += run
        return state

    def frame(self, now: float, state: GameState, tick: Tick, render: Render) -> GameState:
        state = self.advance(now, state, tick)
        render(state)
        return state
