from __future__ import annotations
import json, logging, os

logger = logging.getLogger(__name__)

HIGHSCORE_KEY = "snakeHighScore"

class HighScoreStore:
    """Persists a single integer high score as a small JSON document."""
    def __init__(self, path: str):
        self.path = os.path.expanduser(path)

    def load(self) -> int:
        try:
            with open(self.path, "r") as f:
                value = json.load(f)[HIGHSCORE_KEY]
            value = int(value)
        except FileNotFoundError:
            return 0
        except (OSError, ValueError, TypeError, KeyError) as e:
            logger.debug("Ignoring unreadable high score at %s: %s", self.path, e)
            return 0
        return max(0, value)

    def save(self, value: int) -> None:
        try:
            parent = os.path.dirname(self.path)
            if parent:
                os.makedirs(parent, exist_ok=True)
            with open(self.path, "w") as f:
                json.dump({HIGHSCORE_KEY: int(value)}, f)
        except OSError as e:
            logger.debug("Could not write high score to %s: %s", self.path, e)
