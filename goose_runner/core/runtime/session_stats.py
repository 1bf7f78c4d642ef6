"""
session_stats.py
----------------
Tracks score statistics for the current run.
Separated from entity management and session state.
"""

from goose_runner.core.runtime.game_settings import Scoring


# ===========================================================
# Session Stats
# ===========================================================

class SessionStats:
    """Container for run-specific statistics. Reset when starting a new run."""

    def __init__(self, high_score: int = 0):
        self.raw_score = 0
        self.score = 0
        self.high_score = high_score
        self.items_collected = 0
        self.jumps = 0

    # ===========================================================
    # Core Stats
    # ===========================================================

    def add_points(self, multiplier: int):
        """Add one tick's worth of raw points and refresh the displayed score."""
        self.raw_score += multiplier
        self.score = self.raw_score // Scoring.DISPLAY_DIVISOR

    def add_item(self):
        """Increment item collection count."""
        self.items_collected += 1

    def add_jump(self):
        self.jumps += 1

    def is_new_best(self) -> bool:
        return self.score > self.high_score

    def commit_high_score(self) -> bool:
        """Raise the high score to the current score. Returns True if it changed."""
        if self.is_new_best():
            self.high_score = self.score
            return True
        return False

    # ===========================================================
    # Lifecycle
    # ===========================================================

    def reset(self):
        """Reset all stats for new run. Preserves high score."""
        self.raw_score = 0
        self.score = 0
        self.items_collected = 0
        self.jumps = 0
