# viz/renderer_pygame.py
from __future__ import annotations
from typing import Optional
import pygame as pg
from config import AppConfig
from core.interfaces import Snapshot
from viz.renderer import plan_frame, score_text
from viz.spritesheet import build_default_sheet, load_sprite_sheet
import viz.renderer_colors as theme

class PygameRenderer:
    """Draws frames onto an off-screen board surface of exactly tile_px * grid cells."""
    def __init__(self):
        self.tile = 8
        self.surf: Optional[pg.Surface] = None
        self.sheet: Optional[pg.Surface] = None
        self.score_text = ""

    def open(self, cfg: AppConfig, grid_w: int, grid_h: int) -> None:
        # Guard: ensure instance, not class
        if isinstance(cfg, type):
            raise TypeError("Pass an AppConfig instance (use AppConfig()), not the class.")
        self.tile = cfg.tile_px

        if not pg.get_init():
            pg.init()
        # raises SpriteSheetError; nothing is drawn without a sheet
        if cfg.sprite_path:
            self.sheet = load_sprite_sheet(cfg.sprite_path, self.tile)
        else:
            self.sheet = build_default_sheet(self.tile)
        self.surf = pg.Surface((grid_w * self.tile, grid_h * self.tile))

    def render(self, s: Snapshot, high_score: int) -> None:
        assert self.surf is not None, "Renderer not opened"
        self.score_text = score_text(s.score, high_score)
        if pg.display.get_surface() is not None:
            pg.display.set_caption(self.score_text)

        t = self.tile
        for op in plan_frame(s):
            if op.kind == "clear":
                self.surf.fill(theme.BG)
                continue
            col, row = op.tile
            area = pg.Rect(col * t, row * t, t, t)
            self.surf.blit(self.sheet, (op.cell.x * t, op.cell.y * t), area)

    def render_game_over(self) -> None:
        assert self.surf is not None, "Renderer not opened"
        w, h = self.surf.get_size()
        pg.draw.rect(self.surf, theme.OVERLAY, pg.Rect(0, h // 2 - 10, w, 20))
        font = pg.font.SysFont(None, 16)
        txt = font.render("Game over", True, theme.TEXT)
        self.surf.blit(txt, txt.get_rect(center=(w // 2, h // 2)))

    def close(self) -> None:
        self.surf = None
        self.sheet = None
