# tests/test_lifecycle.py
import pygame as pg
import pytest
from core.interfaces import Heading
from core.highscore import HighScoreStore
from core.lifecycle import GameOverState, LifecycleFSM, RunningState, Session, WaitingState
from viz.keyboard import key_to_heading
from viz.renderer_headless import HeadlessRenderer

DT = 100.0

@pytest.fixture
def make_fsm(host, fake_sim_factory, store_factory):
    def make(ticks_to_die=None, score=0, stored=0):
        sim = fake_sim_factory(ticks_to_die=ticks_to_die, score=score)
        store = store_factory(stored)
        session = Session(
            host=host, sim=sim, renderer=HeadlessRenderer(), store=store,
            key_to_heading=key_to_heading, tick_ms=DT, input_buffer_cap=3,
        )
        fsm = LifecycleFSM(session)
        fsm.start()
        return fsm
    return make

def test_start_waits_with_reset_and_one_render(make_fsm, host):
    fsm = make_fsm(stored=4)
    assert isinstance(fsm.state, WaitingState)
    assert fsm.session.sim.resets == 1
    assert fsm.session.renderer.frames == 1
    assert fsm.session.high_score == 4
    assert fsm.session.renderer.score_text == "Score: 0, High Score: 4"
    assert len(host.listeners) == 1
    assert host.frame_cbs == []

def test_waiting_ignores_non_arrow_keys(make_fsm, host):
    fsm = make_fsm()
    host.key(pg.K_SPACE)
    host.key(pg.K_a)
    assert isinstance(fsm.state, WaitingState)

def test_first_arrow_starts_running_and_is_buffered(make_fsm, host):
    fsm = make_fsm()
    host.key(pg.K_UP)
    assert isinstance(fsm.state, RunningState)
    assert len(host.listeners) == 1
    assert len(fsm.state.buffer) == 1
    host.frame(DT)
    assert fsm.session.sim.updates == [Heading.UP]

def test_running_buffers_arrows_up_to_capacity(make_fsm, host):
    fsm = make_fsm()
    host.key(pg.K_UP)
    for k in (pg.K_LEFT, pg.K_DOWN, pg.K_RIGHT, pg.K_x):
        host.key(k)
    assert len(fsm.state.buffer) == 3
    for i in range(1, 5):
        host.frame(i * DT)
    assert fsm.session.sim.updates == [Heading.UP, Heading.LEFT, Heading.DOWN, None]

def test_game_over_then_any_key_returns_to_waiting(make_fsm, host):
    fsm = make_fsm(ticks_to_die=1)
    host.key(pg.K_RIGHT)
    host.frame(DT)
    assert isinstance(fsm.state, GameOverState)
    assert fsm.session.renderer.game_overs == 1
    assert len(host.listeners) == 1
    assert host.frame_cbs == []

    host.key(pg.K_SPACE)
    assert isinstance(fsm.state, WaitingState)
    assert fsm.session.sim.resets == 2
    assert len(host.listeners) == 1

def test_key_that_leaves_game_over_is_not_delivered_twice(make_fsm, host):
    fsm = make_fsm(ticks_to_die=1)
    host.key(pg.K_RIGHT)
    host.frame(DT)
    host.key(pg.K_UP)      # leaves game over, must not also start a run
    assert isinstance(fsm.state, WaitingState)

@pytest.mark.parametrize("score,stored,expected,saves", [
    (12, 10, 12, [12]),
    (8, 10, 10, []),
    (10, 10, 10, []),
])
def test_high_score_only_improves(make_fsm, host, score, stored, expected, saves):
    fsm = make_fsm(ticks_to_die=1, score=score, stored=stored)
    host.key(pg.K_LEFT)
    host.frame(DT)
    assert fsm.session.high_score == expected
    assert fsm.session.store.saves == saves

def test_high_score_non_decreasing_across_sessions(make_fsm, host):
    fsm = make_fsm(ticks_to_die=1, stored=5)
    seen = []
    t = 0.0
    for score in (3, 9, 7, 11, 0):
        fsm.session.sim.final_score = score
        host.key(pg.K_UP)          # waiting -> running
        t += DT
        host.frame(t)              # running -> game over
        seen.append(fsm.session.high_score)
        host.key(pg.K_UP)          # game over -> waiting
    assert seen == [5, 9, 9, 11, 11]
    assert fsm.session.store.value == 11

def test_failed_high_score_write_keeps_game_going(host, fake_sim_factory, tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("")
    session = Session(
        host=host, sim=fake_sim_factory(ticks_to_die=1, score=5),
        renderer=HeadlessRenderer(), store=HighScoreStore(str(blocker / "hs.json")),
        key_to_heading=key_to_heading, tick_ms=DT,
    )
    fsm = LifecycleFSM(session)
    fsm.start()
    host.key(pg.K_UP)
    host.frame(DT)
    assert isinstance(fsm.state, GameOverState)
    assert session.high_score == 5
    assert session.renderer.game_overs == 1
    assert len(host.listeners) == 1

    host.key(pg.K_SPACE)
    assert isinstance(fsm.state, WaitingState)
    assert len(host.listeners) == 1
