# viz/keyboard.py
from typing import Optional
import pygame as pg
from core.interfaces import Heading

ARROWS = {
    pg.K_UP: Heading.UP,
    pg.K_RIGHT: Heading.RIGHT,
    pg.K_DOWN: Heading.DOWN,
    pg.K_LEFT: Heading.LEFT,
}

def key_to_heading(key: int) -> Optional[Heading]:
    return ARROWS.get(key)
