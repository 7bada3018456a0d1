# main.py
import argparse
import logging

from config import AppConfig
from runners.run_snake import main as snake

def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Tile-sprite snake.")
    p.add_argument("--scale", type=int, default=None, help="window scale factor")
    p.add_argument("--fps", type=int, default=None)
    p.add_argument("--sprites", default=None, help="path to a 4x4 tile sprite sheet PNG")
    p.add_argument("--highscore-file", default=None)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--log-level", default="WARNING")
    return p.parse_args(argv)

def build_config(args) -> AppConfig:
    overrides = {
        "render_scale": args.scale,
        "fps": args.fps,
        "sprite_path": args.sprites,
        "highscore_path": args.highscore_file,
        "seed": args.seed,
    }
    return AppConfig().with_(**{k: v for k, v in overrides.items() if v is not None})

def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    snake(build_config(args))

if __name__ == "__main__":
    main()
