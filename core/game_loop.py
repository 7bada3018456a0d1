# core/game_loop.py
from __future__ import annotations
import logging
from collections import deque
from typing import Callable, Deque, Optional
from .interfaces import Heading, Host, SimulationPort, TickResult

logger = logging.getLogger(__name__)

class InputBuffer:
    """Bounded FIFO of pending headings. Full buffers drop new pushes."""
    def __init__(self, capacity: int = 3):
        self._cap = int(capacity)
        self._buf: Deque[Heading] = deque()

    def __len__(self) -> int:
        return len(self._buf)

    def capacity(self) -> int:
        return self._cap

    def push(self, heading: Heading) -> bool:
        if len(self._buf) >= self._cap:
            return False
        self._buf.append(heading)
        return True

    def pop(self) -> Optional[Heading]:
        return self._buf.popleft() if self._buf else None

class GameLoop:
    """
    Fixed-timestep driver scheduled through the host's per-frame callbacks.

    Each frame adds the elapsed time to an accumulator. Once it reaches `dt`
    one tick runs: pop at most one buffered heading, update the simulation,
    render. At most one tick runs per frame; ticks missed while lagging are
    dropped, not replayed. The loop stops rescheduling itself for good after
    the first GameOver and then calls `on_game_over`.
    """
    def __init__(
        self,
        host: Host,
        sim: SimulationPort,
        render: Callable[[], None],
        on_game_over: Callable[[], None],
        dt: float = 1000 / 5.5,
        buffer: Optional[InputBuffer] = None,
    ):
        self.host = host
        self.sim = sim
        self.dt = float(dt)
        self.buffer = buffer if buffer is not None else InputBuffer()
        self._render = render
        self._on_game_over = on_game_over
        self._accum = 0.0
        self._prev_t: Optional[float] = None
        self._running = False
        self.ticks = 0

    @property
    def accumulator(self) -> float:
        return self._accum

    @property
    def running(self) -> bool:
        return self._running

    def start(self) -> None:
        if self._running:
            return
        self._running = True
        self._accum = 0.0
        self._prev_t = self.host.now()
        self.host.request_frame(self._frame)

    def _frame(self, t: float) -> None:
        if not self._running:
            return
        self._accum += t - self._prev_t
        self._prev_t = t

        if self._accum >= self.dt:
            self._accum = (self._accum - self.dt) % self.dt
            result = self.sim.update(self.buffer.pop())
            self.ticks += 1
            self._render()
            if result is TickResult.GAME_OVER:
                self._running = False
                logger.debug("Loop finished after %d ticks", self.ticks)
                self._on_game_over()
                return

        self.host.request_frame(self._frame)
