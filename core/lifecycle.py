# core/lifecycle.py
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Callable, Optional, Protocol
from .game_loop import GameLoop, InputBuffer
from .interfaces import FrameRenderer, Heading, Host, SimulationPort, take_snapshot

logger = logging.getLogger(__name__)

class ScoreStore(Protocol):
    def load(self) -> int: ...
    def save(self, value: int) -> None: ...

@dataclass
class Session:
    """Everything the lifecycle states share. Owned by the top-level runner."""
    host: Host
    sim: SimulationPort
    renderer: FrameRenderer
    store: ScoreStore
    key_to_heading: Callable[[int], Optional[Heading]]
    tick_ms: float = 1000 / 5.5
    input_buffer_cap: int = 3
    high_score: int = 0

class State:
    name = "state"

    def __init__(self, fsm: "LifecycleFSM"):
        self.fsm = fsm
        self.session = fsm.session

    def enter(self) -> None:
        pass

    def exit(self) -> None:
        pass

    def on_key(self, key: int) -> None:
        pass

class WaitingState(State):
    name = "waiting"

    def enter(self) -> None:
        self.session.sim.reset()
        self.fsm.render()

    def on_key(self, key: int) -> None:
        heading = self.session.key_to_heading(key)
        if heading is None:
            return
        self.fsm.transition(RunningState(self.fsm, heading))

class RunningState(State):
    name = "running"

    def __init__(self, fsm: "LifecycleFSM", first: Heading):
        super().__init__(fsm)
        self.first = first
        self.buffer: Optional[InputBuffer] = None
        self.loop: Optional[GameLoop] = None

    def enter(self) -> None:
        s = self.session
        self.buffer = InputBuffer(s.input_buffer_cap)
        self.buffer.push(self.first)
        self.loop = GameLoop(
            s.host, s.sim,
            render=self.fsm.render,
            on_game_over=self._game_over,
            dt=s.tick_ms,
            buffer=self.buffer,
        )
        self.loop.start()

    def exit(self) -> None:
        self.buffer = None
        self.loop = None

    def on_key(self, key: int) -> None:
        heading = self.session.key_to_heading(key)
        if heading is None or self.buffer is None:
            return
        self.buffer.push(heading)

    def _game_over(self) -> None:
        self.fsm.transition(GameOverState(self.fsm))

class GameOverState(State):
    name = "game_over"

    def enter(self) -> None:
        s = self.session
        score = s.sim.score()
        if score > s.high_score:
            logger.info("New high score: %d (was %d)", score, s.high_score)
            s.high_score = score
            s.store.save(score)
        s.renderer.render_game_over()

    def on_key(self, key: int) -> None:
        self.fsm.transition(WaitingState(self.fsm))

class LifecycleFSM:
    """
    Waiting -> Running -> GameOver -> Waiting ...

    The driver owns listener installation: exactly one key listener (the
    current state's) is installed at any time. The old state's listener is
    removed before the next state is entered.
    """
    def __init__(self, session: Session):
        self.session = session
        self.state: Optional[State] = None

    def start(self) -> None:
        self.session.high_score = self.session.store.load()
        self.transition(WaitingState(self))

    def transition(self, new: State) -> None:
        old = self.state
        if old is not None:
            self.session.host.remove_key_listener(old.on_key)
            old.exit()
        logger.debug("%s -> %s", old.name if old else None, new.name)
        self.state = new
        new.enter()
        if self.state is new:
            self.session.host.add_key_listener(new.on_key)

    def render(self) -> None:
        s = self.session
        s.renderer.render(take_snapshot(s.sim), s.high_score)
