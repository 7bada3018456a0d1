# runners/run_snake.py
from core.highscore import HighScoreStore
from core.lifecycle import LifecycleFSM, Session
from core.snake_rules import Rules
from viz.host import PygameHost
from viz.keyboard import key_to_heading
from viz.renderer_pygame import PygameRenderer
from config import AppConfig

def main(cfg: AppConfig = AppConfig()):
    rules = Rules(seed=cfg.seed)

    rend = PygameRenderer()
    rend.open(cfg, rules.width(), rules.height())

    host = PygameHost(rend.surf, scale=cfg.render_scale, fps=cfg.fps, title=cfg.render_title)
    host.open()

    session = Session(
        host=host,
        sim=rules,
        renderer=rend,
        store=HighScoreStore(cfg.highscore_path),
        key_to_heading=key_to_heading,
        tick_ms=cfg.tick_ms,
        input_buffer_cap=cfg.input_buffer_cap,
    )
    fsm = LifecycleFSM(session)
    fsm.start()
    try:
        host.run()
    finally:
        rend.close()
        host.close()
