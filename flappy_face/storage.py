import json
import logging
import os

from .config import SAVE_FILE

logger = logging.getLogger(__name__)


class BestScoreStore:
    """Tiny JSON key/value file holding best scores between sessions."""

    def __init__(self, path=SAVE_FILE):
        self.path = path

    def _load(self):
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r") as f:
                data = json.load(f)
        except (OSError, ValueError) as exc:
            logger.warning("Could not read %s: %s", self.path, exc)
            return {}
        return data if isinstance(data, dict) else {}

    def get(self, key, default=0) -> int:
        value = self._load().get(key, default)
        try:
            return max(0, int(value))
        except (TypeError, ValueError):
            return default

    def set(self, key, value: int):
        data = self._load()
        data[key] = int(value)
        try:
            with open(self.path, "w") as f:
                json.dump(data, f)
        except OSError as exc:
            logger.warning("Could not save best score to %s: %s", self.path, exc)
