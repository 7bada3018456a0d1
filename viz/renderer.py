# viz/renderer.py
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional
from core.interfaces import GridPosition, Snapshot
from viz.tiles import APPLE_TILE, Tile, body_tile, head_tile, tail_tile

@dataclass(frozen=True)
class DrawOp:
    """Blit sprite-sheet `tile` at board `cell`; a `clear` op has neither."""
    kind: str                        # "clear" | "body" | "tail" | "head" | "apple"
    tile: Optional[Tile] = None
    cell: Optional[GridPosition] = None

def score_text(score: int, high_score: int) -> str:
    return f"Score: {score}, High Score: {high_score}"

def plan_frame(s: Snapshot) -> List[DrawOp]:
    """Map a snapshot to draw operations. Never touches the simulation."""
    ops = [DrawOp("clear")]
    if not s.segments:
        return ops

    head = s.segments[0]
    tail = s.segments[-1]

    last_pos = head.position
    last_dir = head.heading
    # body walk, head to tail; the tail index is always skipped by the position check
    for seg in s.segments[1:]:
        if seg.position == last_pos or seg.position == tail.position:
            continue
        ops.append(DrawOp("body", body_tile(seg.heading, last_dir), seg.position))
        last_pos = seg.position
        last_dir = seg.heading

    ops.append(DrawOp("tail", tail_tile(last_dir), tail.position))
    ops.append(DrawOp("head", head_tile(head.heading), head.position))

    if s.apple is not None:
        ops.append(DrawOp("apple", APPLE_TILE, s.apple))
    return ops
