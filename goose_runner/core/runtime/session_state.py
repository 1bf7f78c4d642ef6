"""
session_state.py
----------------
Defines the states a play session can be in.
"""

from enum import Enum


class SessionState(Enum):
    """Top-level session states."""
    MENU = "menu"           # Initial, waiting for start
    PLAYING = "playing"     # Simulation ticking every frame
    GAME_OVER = "gameOver"  # Run ended by collision, waiting for restart
