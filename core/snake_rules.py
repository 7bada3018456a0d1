# core/snake_rules.py  (pure rules, no pygame)
from __future__ import annotations
from typing import List, Optional, Tuple
import numpy as np
from .interfaces import GridPosition, Heading, SnakeSegment, TickResult

BOARD_W = 16
BOARD_H = 13
START_LEN = 4

class Rules:
    """Reference snake engine. Cells are linear board indices (x + y * width)."""

    def __init__(self, grid_w: int = BOARD_W, grid_h: int = BOARD_H, seed: Optional[int] = None):
        self.grid_w = grid_w
        self.grid_h = grid_h
        self.rng = np.random.default_rng(seed)
        self._reset_state()

    def _reset_state(self):
        # (cell index, heading), head first; middle row, cells 105..102 on 16x13
        cx, cy = self.grid_w // 2 + 1, self.grid_h // 2
        self.snake: List[Tuple[int, Heading]] = [
            (cx - i + cy * self.grid_w, Heading.RIGHT) for i in range(START_LEN)
        ]
        self._score = 0
        self.terminated = False
        self.apple: Optional[int] = None
        self._place_apple()

    # ---- SimulationPort ----
    def width(self) -> int:
        return self.grid_w

    def height(self) -> int:
        return self.grid_h

    def reset(self) -> None:
        self._reset_state()

    def length(self) -> int:
        return len(self.snake)

    def segment(self, i: int) -> SnakeSegment:
        index, heading = self.snake[i]
        return SnakeSegment(GridPosition.from_index(index, self.grid_w), heading)

    def apple_position(self) -> Optional[GridPosition]:
        if self.apple is None:
            return None
        return GridPosition.from_index(self.apple, self.grid_w)

    def score(self) -> int:
        return self._score

    def update(self, next_heading: Optional[Heading]) -> TickResult:
        if self.terminated:
            return TickResult.GAME_OVER

        head, prev_dir = self.snake[0]
        # ignore instant 180° reversal; keep current heading
        if next_heading is None or next_heading == prev_dir.opposite:
            heading = prev_dir
        else:
            heading = next_heading

        nxt = self._next_cell(head, heading)
        if nxt is None:
            return self._game_over()

        # the tail cell is vacated this tick, so it is not checked
        if len(self.snake) > 4 and any(nxt == cell for cell, _ in self.snake[3:-1]):
            return self._game_over()

        self.snake.insert(0, (nxt, heading))
        self.snake.pop()

        if self.apple is not None and nxt == self.apple:
            # a duplicate head grows the snake once it reaches the tail
            self.snake.insert(0, (nxt, heading))
            self._score += 1
            self._place_apple()

        return TickResult.CONTINUE

    # ---- helpers ----
    def _game_over(self) -> TickResult:
        self.terminated = True
        return TickResult.GAME_OVER

    def _next_cell(self, cell: int, heading: Heading) -> Optional[int]:
        x, y = cell % self.grid_w, cell // self.grid_w
        dx, dy = heading.value
        nx, ny = x + dx, y + dy
        if not (0 <= nx < self.grid_w and 0 <= ny < self.grid_h):
            return None
        return nx + ny * self.grid_w

    def _place_apple(self) -> None:
        occ = {cell for cell, _ in self.snake}
        free = [i for i in range(self.grid_w * self.grid_h) if i not in occ]
        if not free:
            self.apple = None
            return
        self.apple = free[int(self.rng.integers(len(free)))]
