# viz/spritesheet.py
from __future__ import annotations
import os
from typing import Iterable
import pygame as pg
from core.interfaces import Heading
from viz.tiles import APPLE_TILE, BODY_TILES, HEADING_COLUMN, HEAD_ROW, TAIL_ROW, TileClass
import viz.renderer_colors as theme

SHEET_TILES = 4   # 4 x 4 tiles

class SpriteSheetError(RuntimeError):
    pass

def load_sprite_sheet(path: str, tile_px: int) -> pg.Surface:
    """Load the tile sheet or fail loudly; rendering without it is undefined."""
    if not os.path.isfile(path):
        raise SpriteSheetError(f"Failed to load sprite sheet from {path!r}: file not found")
    try:
        sheet = pg.image.load(path)
    except (pg.error, OSError) as e:
        raise SpriteSheetError(f"Failed to load sprite sheet from {path!r}: {e}") from e

    need = SHEET_TILES * tile_px
    w, h = sheet.get_size()
    if w < need or h < need:
        raise SpriteSheetError(
            f"Failed to load sprite sheet from {path!r}: {w}x{h} is smaller than {need}x{need}"
        )
    if pg.display.get_surface() is not None:
        sheet = sheet.convert_alpha()
    return sheet

# --- built-in sheet ---
_SIDE = {"top": Heading.UP, "right": Heading.RIGHT, "bottom": Heading.DOWN, "left": Heading.LEFT}

_BODY_SIDES = {
    TileClass.VERTICAL: ("top", "bottom"),
    TileClass.HORIZONTAL: ("left", "right"),
    TileClass.CORNER_A: ("top", "right"),
    TileClass.CORNER_B: ("bottom", "right"),
    TileClass.CORNER_C: ("bottom", "left"),
    TileClass.CORNER_D: ("top", "left"),
}

def _segment(surf: pg.Surface, col: int, row: int, t: int, sides: Iterable[str], color) -> None:
    ox, oy = col * t, row * t
    m = max(1, t // 8)
    pg.draw.rect(surf, color, pg.Rect(ox + m, oy + m, t - 2 * m, t - 2 * m))
    for side in sides:
        if side == "top":
            pg.draw.rect(surf, color, pg.Rect(ox + m, oy, t - 2 * m, m))
        elif side == "bottom":
            pg.draw.rect(surf, color, pg.Rect(ox + m, oy + t - m, t - 2 * m, m))
        elif side == "left":
            pg.draw.rect(surf, color, pg.Rect(ox, oy + m, m, t - 2 * m))
        elif side == "right":
            pg.draw.rect(surf, color, pg.Rect(ox + t - m, oy + m, m, t - 2 * m))

def _side_of(heading: Heading) -> str:
    return next(k for k, v in _SIDE.items() if v == heading)

def build_default_sheet(tile_px: int) -> pg.Surface:
    """Draw a sheet with the standard layout using plain shapes."""
    t = tile_px
    surf = pg.Surface((SHEET_TILES * t, SHEET_TILES * t), pg.SRCALPHA)
    surf.fill((0, 0, 0, 0))

    for heading, col in HEADING_COLUMN.items():
        # head: body joins behind it, eye towards the heading
        _segment(surf, col, HEAD_ROW, t, [_side_of(heading.opposite)], theme.HEAD)
        dx, dy = heading.value
        cx = col * t + t // 2 + dx * (t // 4)
        cy = HEAD_ROW * t + t // 2 + dy * (t // 4)
        pg.draw.circle(surf, theme.EYE, (cx, cy), max(1, t // 8))

        # tail: the body continues in the direction of travel
        ox, oy = col * t, TAIL_ROW * t
        half = pg.Rect(ox, oy, t, t)
        if heading in (Heading.UP, Heading.DOWN):
            half.height = t // 2
            if heading == Heading.DOWN:
                half.y += t // 2
            half.inflate_ip(-2 * max(1, t // 4), 0)
        else:
            half.width = t // 2
            if heading == Heading.RIGHT:
                half.x += t // 2
            half.inflate_ip(0, -2 * max(1, t // 4))
        pg.draw.rect(surf, theme.BODY, half)

    for cls, (col, row) in BODY_TILES.items():
        _segment(surf, col, row, t, _BODY_SIDES[cls], theme.BODY)

    ax, ay = APPLE_TILE
    pg.draw.circle(surf, theme.FOOD, (ax * t + t // 2, ay * t + t // 2), max(1, t // 2 - 1))
    return surf
