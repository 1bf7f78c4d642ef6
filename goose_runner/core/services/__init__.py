"""
Core services exports.

Provides the event system, configuration loading and persistence.
"""

from goose_runner.core.services.config_manager import load_config, save_config
from goose_runner.core.services.event_manager import (
    EventManager,
    BaseEvent,
    RunStartedEvent,
    JumpEvent,
    PowerUpCollectedEvent,
    GameOverEvent,
    HighScoreEvent,
)
from goose_runner.core.services.highscore_store import HighScoreStore, MemoryHighScoreStore
from goose_runner.core.services.settings_manager import SettingsManager

__all__ = [
    # Config
    'load_config',
    'save_config',
    # Events
    'EventManager',
    'BaseEvent',
    'RunStartedEvent',
    'JumpEvent',
    'PowerUpCollectedEvent',
    'GameOverEvent',
    'HighScoreEvent',
    # Persistence
    'HighScoreStore',
    'MemoryHighScoreStore',
    'SettingsManager',
]
