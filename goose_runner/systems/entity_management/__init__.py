"""
Entity management system exports.

Provides the spawner for obstacles and power-ups.
"""

from goose_runner.systems.entity_management.spawn_manager import SpawnManager

__all__ = [
    'SpawnManager',
]
