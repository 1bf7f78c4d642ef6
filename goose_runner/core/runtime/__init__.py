"""
Runtime configuration exports.

Provides game-wide constants, session states and commands. All exports are
lightweight with no initialization overhead.
"""

from goose_runner.core.runtime.game_settings import (
    Display,
    World,
    ActorDefaults,
    Spawning,
    ObstacleSizes,
    PowerUps,
    Scoring,
    Particles,
    Tones,
    Storage,
    Palette,
)
from goose_runner.core.runtime.session_state import SessionState
from goose_runner.core.runtime.commands import Command

__all__ = [
    # Configuration
    'Display',
    'World',
    'ActorDefaults',
    'Spawning',
    'ObstacleSizes',
    'PowerUps',
    'Scoring',
    'Particles',
    'Tones',
    'Storage',
    'Palette',
    # Session
    'SessionState',
    'Command',
]
