# core/interfaces.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Protocol, Tuple

class Heading(Enum):
    UP = (0, -1)
    RIGHT = (1, 0)
    DOWN = (0, 1)
    LEFT = (-1, 0)

    @property
    def opposite(self) -> "Heading":
        dx, dy = self.value
        return Heading((-dx, -dy))

class TickResult(Enum):
    CONTINUE = "continue"
    GAME_OVER = "game_over"

@dataclass(frozen=True)
class GridPosition:
    x: int
    y: int

    @classmethod
    def from_index(cls, index: int, width: int) -> "GridPosition":
        x = index % width
        return cls(x, (index - x) // width)

    def to_index(self, width: int) -> int:
        return self.x + self.y * width

@dataclass(frozen=True)
class SnakeSegment:
    position: GridPosition
    heading: Heading

@dataclass(frozen=True)
class Snapshot:
    segments: Tuple[SnakeSegment, ...]   # head first
    apple: Optional[GridPosition]
    score: int
    grid_w: int
    grid_h: int

class SimulationPort(Protocol):
    def width(self) -> int: ...
    def height(self) -> int: ...
    def reset(self) -> None: ...
    def update(self, next_heading: Optional[Heading]) -> TickResult: ...
    def length(self) -> int: ...
    def segment(self, i: int) -> SnakeSegment: ...
    def apple_position(self) -> Optional[GridPosition]: ...
    def score(self) -> int: ...

KeyListener = Callable[[int], None]
FrameCallback = Callable[[float], None]

class Host(Protocol):
    """Per-frame scheduler and key event source the game runs inside."""
    def now(self) -> float: ...
    def request_frame(self, callback: FrameCallback) -> None: ...
    def add_key_listener(self, listener: KeyListener) -> None: ...
    def remove_key_listener(self, listener: KeyListener) -> None: ...

class FrameRenderer(Protocol):
    def render(self, snap: Snapshot, high_score: int) -> None: ...
    def render_game_over(self) -> None: ...

def take_snapshot(sim: SimulationPort) -> Snapshot:
    return Snapshot(
        segments=tuple(sim.segment(i) for i in range(sim.length())),
        apple=sim.apple_position(),
        score=sim.score(),
        grid_w=sim.width(),
        grid_h=sim.height(),
    )
