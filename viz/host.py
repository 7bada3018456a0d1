# viz/host.py
from __future__ import annotations
import logging
from typing import List, Optional
import pygame as pg
from core.interfaces import FrameCallback, KeyListener

logger = logging.getLogger(__name__)

class PygameHost:
    """
    Window, key events and a requestAnimationFrame-style scheduler.

    Callbacks requested during a frame run on the next one. Key events are
    delivered one at a time to the listeners installed when the event is
    dispatched.
    """
    def __init__(self, board: pg.Surface, scale: int = 1, fps: int = 60, title: str = "Snake"):
        self.board = board
        self.scale = max(1, int(scale))
        self.fps = fps
        self.title = title
        self.screen: Optional[pg.Surface] = None
        self.clock: Optional[pg.time.Clock] = None
        self._frame_cbs: List[FrameCallback] = []
        self._listeners: List[KeyListener] = []
        self._running = False

    def open(self) -> None:
        if not pg.get_init():
            pg.init()
        pg.display.set_caption(self.title)
        w, h = self.board.get_size()
        self.screen = pg.display.set_mode((w * self.scale, h * self.scale))
        self.clock = pg.time.Clock()

    # ---- Host ----
    def now(self) -> float:
        return float(pg.time.get_ticks())

    def request_frame(self, callback: FrameCallback) -> None:
        self._frame_cbs.append(callback)

    def add_key_listener(self, listener: KeyListener) -> None:
        self._listeners.append(listener)

    def remove_key_listener(self, listener: KeyListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def listener_count(self) -> int:
        return len(self._listeners)

    # ---- loop ----
    def dispatch_key(self, key: int) -> None:
        for listener in list(self._listeners):
            listener(key)

    def run_frame(self, t: Optional[float] = None) -> None:
        due, self._frame_cbs = self._frame_cbs, []
        t = self.now() if t is None else t
        for cb in due:
            cb(t)

    def pump(self) -> None:
        for event in pg.event.get():
            if event.type == pg.QUIT:
                self.stop()
            elif event.type == pg.KEYDOWN:
                if event.key == pg.K_ESCAPE:
                    self.stop()
                    continue
                self.dispatch_key(event.key)

    def present(self) -> None:
        if self.screen is None:
            return
        if self.scale == 1:
            self.screen.blit(self.board, (0, 0))
        else:
            pg.transform.scale(self.board, self.screen.get_size(), self.screen)
        pg.display.flip()

    def run(self) -> None:
        if self.screen is None:
            self.open()
        self._running = True
        try:
            while self._running:
                self.pump()
                if not self._running:
                    break
                self.run_frame()
                self.present()
                self.clock.tick(self.fps)
        finally:
            logger.debug("Host loop stopped")

    def stop(self) -> None:
        self._running = False

    def close(self) -> None:
        try:
            pg.quit()
        finally:
            self.screen = None
            self.clock = None
