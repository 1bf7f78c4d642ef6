"""
goose_runner/entities/__init__.py
---------------------------------
Entity module exports.

Plain data records for the actor and the scrolling entities.

Exports:
    Actor         - The player-controlled goose
    Obstacle      - Ground obstacle with a fixed per-kind size
    PowerUp       - Shield hat pickup
    ObstacleKind  - Closed set of obstacle kinds (camera, pursuer, ledger)
    PowerUpKind   - Pickup kinds (shield hat)
"""

from goose_runner.entities.entity_types import ObstacleKind, PowerUpKind
from goose_runner.entities.actor import Actor
from goose_runner.entities.obstacle import Obstacle
from goose_runner.entities.items.power_up import PowerUp

__all__ = [
    'Actor',
    'Obstacle',
    'PowerUp',
    'ObstacleKind',
    'PowerUpKind',
]
