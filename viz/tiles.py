# viz/tiles.py
from __future__ import annotations
from enum import Enum
from itertools import product
from typing import Dict, Tuple
from core.interfaces import Heading

Tile = Tuple[int, int]   # (column, row) on the sprite sheet

class TileClass(Enum):
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"
    CORNER_A = "corner_a"
    CORNER_B = "corner_b"
    CORNER_C = "corner_c"
    CORNER_D = "corner_d"

BODY_TILES: Dict[TileClass, Tile] = {
    TileClass.CORNER_A: (0, 2),
    TileClass.CORNER_B: (1, 2),
    TileClass.CORNER_C: (2, 2),
    TileClass.CORNER_D: (3, 2),
    TileClass.VERTICAL: (0, 3),
    TileClass.HORIZONTAL: (1, 3),
}

HEAD_ROW = 0
TAIL_ROW = 1
APPLE_TILE: Tile = (3, 3)
HEADING_COLUMN: Dict[Heading, int] = {
    Heading.UP: 0,
    Heading.RIGHT: 1,
    Heading.DOWN: 2,
    Heading.LEFT: 3,
}

FALLBACK = TileClass.CORNER_D

# (current, previous) -> class; previous is the heading of the segment nearer the head
_TURNS = {
    (Heading.UP, Heading.UP): TileClass.VERTICAL,
    (Heading.DOWN, Heading.DOWN): TileClass.VERTICAL,
    (Heading.RIGHT, Heading.RIGHT): TileClass.HORIZONTAL,
    (Heading.LEFT, Heading.LEFT): TileClass.HORIZONTAL,
    (Heading.LEFT, Heading.UP): TileClass.CORNER_A,
    (Heading.DOWN, Heading.RIGHT): TileClass.CORNER_A,
    (Heading.UP, Heading.RIGHT): TileClass.CORNER_B,
    (Heading.LEFT, Heading.DOWN): TileClass.CORNER_B,
    (Heading.UP, Heading.LEFT): TileClass.CORNER_C,
    (Heading.RIGHT, Heading.DOWN): TileClass.CORNER_C,
    (Heading.DOWN, Heading.LEFT): TileClass.CORNER_D,
    (Heading.RIGHT, Heading.UP): TileClass.CORNER_D,
}

# every one of the 16 pairs is present; reversals land on the fallback
TURN_TABLE: Dict[Tuple[Heading, Heading], TileClass] = {
    pair: _TURNS.get(pair, FALLBACK) for pair in product(Heading, Heading)
}

def classify_turn(current: Heading, previous: Heading) -> TileClass:
    return TURN_TABLE.get((current, previous), FALLBACK)

def body_tile(current: Heading, previous: Heading) -> Tile:
    return BODY_TILES[classify_turn(current, previous)]

def head_tile(heading: Heading) -> Tile:
    return (HEADING_COLUMN[heading], HEAD_ROW)

def tail_tile(heading: Heading) -> Tile:
    return (HEADING_COLUMN[heading], TAIL_ROW)
