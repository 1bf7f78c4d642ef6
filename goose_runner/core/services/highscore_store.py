"""
highscore_store.py
------------------
Persists the best score between sessions as a small JSON file.

Loading never fails: a missing, unreadable or malformed file counts as a high
score of 0. Saving logs a warning on I/O errors and carries on.
"""

from goose_runner.core.debug.debug_logger import DebugLogger
from goose_runner.core.runtime.game_settings import Storage
from goose_runner.core.services.config_manager import load_config, save_config


class HighScoreStore:
    """File-backed persistence collaborator for the session's high score."""

    def __init__(self, path=None, key=Storage.HIGHSCORE_KEY):
        self.path = path or Storage.HIGHSCORE_FILE
        self.key = key

    def load_high_score(self) -> int:
        data = load_config(self.path, default_dict={self.key: 0})
        value = data.get(self.key, 0)
        try:
            score = int(value)
        except (TypeError, ValueError):
            DebugLogger.warn(f"Ignoring invalid high score {value!r} in {self.path}", category="storage")
            return 0
        return max(score, 0)

    def save_high_score(self, score: int):
        if save_config(self.path, {self.key: int(score)}):
            DebugLogger.system(f"High score {score} saved", category="storage")


class MemoryHighScoreStore:
    """In-memory store for headless runs and tests."""

    def __init__(self, high_score: int = 0):
        self.high_score = high_score
        self.saves = []

    def load_high_score(self) -> int:
        return self.high_score

    def save_high_score(self, score: int):
        self.high_score = score
        self.saves.append(score)
