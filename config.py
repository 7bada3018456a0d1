# config.py
from dataclasses import dataclass, replace
from typing import Optional

@dataclass(frozen=True, slots=True)
class AppConfig:
    # board / simulation
    seed: Optional[int] = None

    # timing
    fps: int = 60
    tick_ms: float = 1000 / 5.5           # fixed logical timestep (~181.8 ms)
    input_buffer_cap: int = 3             # pushes rejected once this many are held

    # render
    tile_px: int = 8
    render_scale: int = 4                 # window = board surface * scale
    render_title: str = "Snake"
    sprite_path: Optional[str] = None     # None -> built-in sheet

    # persistence
    highscore_path: str = "~/.snake/highscore.json"

    def with_(self, **kwargs) -> "AppConfig":
        """Convenience: clone with updated values"""
        return replace(self, **kwargs)
