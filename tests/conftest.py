# tests/conftest.py
import os
import sys

# Headless SDL so tests don't open a window
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

# Ensure project root is importable (so core.* / viz.* imports work when running from repo root)
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import pygame as pg
import pytest

from core.interfaces import GridPosition, Heading, SnakeSegment, Snapshot, TickResult

@pytest.fixture(scope="session", autouse=True)
def _pygame_session():
    pg.init()
    yield
    pg.quit()

class FakeHost:
    """Host double: frames and keys are driven by the test."""
    def __init__(self):
        self.t = 0.0
        self.frame_cbs = []
        self.listeners = []

    def now(self):
        return self.t

    def request_frame(self, cb):
        self.frame_cbs.append(cb)

    def add_key_listener(self, listener):
        self.listeners.append(listener)

    def remove_key_listener(self, listener):
        self.listeners.remove(listener)

    def frame(self, t):
        self.t = t
        due, self.frame_cbs = self.frame_cbs, []
        for cb in due:
            cb(t)

    def key(self, k):
        for listener in list(self.listeners):
            listener(k)

class FakeSim:
    """Straight snake heading right; ends the game after `ticks_to_die` updates."""
    def __init__(self, ticks_to_die=None, score=0):
        self.ticks_to_die = ticks_to_die
        self.final_score = score
        self.updates = []
        self.resets = 0
        self._score = 0

    def width(self): return 10
    def height(self): return 10
    def length(self): return 3
    def reset(self):
        self.resets += 1
        self.updates = []
        self._score = 0
    def update(self, heading):
        self.updates.append(heading)
        if self.ticks_to_die is not None and len(self.updates) >= self.ticks_to_die:
            self._score = self.final_score
            return TickResult.GAME_OVER
        return TickResult.CONTINUE
    def segment(self, i):
        return SnakeSegment(GridPosition(5 - i, 5), Heading.RIGHT)
    def apple_position(self): return GridPosition(8, 8)
    def score(self): return self._score

class MemoryStore:
    def __init__(self, value=0):
        self.value = value
        self.saves = []
    def load(self):
        return self.value
    def save(self, value):
        self.value = value
        self.saves.append(value)

@pytest.fixture
def host():
    return FakeHost()

@pytest.fixture
def fake_sim_factory():
    return FakeSim

@pytest.fixture
def store_factory():
    return MemoryStore

@pytest.fixture
def snapshot_factory():
    def make(parts, apple=None, score=0, w=10, h=10):
        # parts: [((x, y), Heading), ...] head first
        segs = tuple(SnakeSegment(GridPosition(x, y), d) for (x, y), d in parts)
        return Snapshot(segments=segs, apple=apple, score=score, grid_w=w, grid_h=h)
    return make
