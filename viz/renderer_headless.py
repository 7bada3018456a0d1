# viz/renderer_headless.py
from __future__ import annotations
from typing import List
from core.interfaces import Snapshot
from viz.renderer import DrawOp, plan_frame, score_text

class HeadlessRenderer:
    """Keeps the planned draw ops instead of drawing them."""
    def __init__(self):
        self.frames = 0
        self.game_overs = 0
        self.last_ops: List[DrawOp] = []
        self.last_snapshot: Snapshot | None = None
        self.score_text = ""

    def render(self, snap: Snapshot, high_score: int) -> None:
        self.frames += 1
        self.last_snapshot = snap
        self.last_ops = plan_frame(snap)
        self.score_text = score_text(snap.score, high_score)

    def render_game_over(self) -> None:
        self.game_overs += 1
