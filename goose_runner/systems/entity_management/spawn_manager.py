"""
spawn_manager.py
----------------
Stochastic, rate-limited generator of obstacles and power-ups.

Responsibilities
----------------
- Run one Bernoulli trial per tick for each entity category.
- Enforce a minimum frame gap (cooldown) between spawns of the same category.
- Choose the obstacle kind uniformly and place new entities at the right
  screen edge, at fixed offsets above the ground line.

The spawner owns no entities. It appends to the sequences it is handed and
keeps only the frame number of the last spawn per category.
"""

import random

from goose_runner.core.debug.debug_logger import DebugLogger
from goose_runner.core.runtime.game_settings import Display, Spawning, World
from goose_runner.entities.entity_types import ObstacleKind
from goose_runner.entities.obstacle import Obstacle
from goose_runner.entities.items.power_up import PowerUp


class SpawnManager:
    """Per-tick spawn decisions with cooldown counters."""

    OBSTACLE_KINDS = tuple(ObstacleKind)

    def __init__(self, rng: random.Random = None):
        """
        Args:
            rng: Random source for spawn trials and kind choice. A fresh
                unseeded generator is used when omitted.
        """
        self.rng = rng if rng is not None else random.Random()
        self.last_obstacle_frame = 0
        self.last_powerup_frame = 0

        self._spawn_stats = {
            "obstacles": 0,
            "power_ups": 0,
        }

    # ===========================================================
    # Lifecycle
    # ===========================================================
    def reset(self):
        """Zero the cooldown counters for a new run."""
        self.last_obstacle_frame = 0
        self.last_powerup_frame = 0
        self._spawn_stats = {"obstacles": 0, "power_ups": 0}

    def get_stats(self) -> dict:
        return dict(self._spawn_stats)

    # ===========================================================
    # Spawning
    # ===========================================================
    def try_spawn_obstacle(self, frame: int, obstacles: list) -> Obstacle | None:
        """
        Append a new obstacle if this tick's trial and the cooldown both pass.

        The random draw happens every tick, before the cooldown check.
        """
        roll = self.rng.random()
        if roll >= Spawning.OBSTACLE_RATE:
            return None
        if frame - self.last_obstacle_frame <= Spawning.OBSTACLE_COOLDOWN:
            return None

        kind = self.rng.choice(self.OBSTACLE_KINDS)
        obstacle = Obstacle.spawn(
            kind,
            x=float(Display.WIDTH),
            y=float(World.GROUND_Y - Spawning.OBSTACLE_OFFSET_Y),
        )
        obstacles.append(obstacle)
        self.last_obstacle_frame = frame
        self._spawn_stats["obstacles"] += 1

        DebugLogger.trace(f"Spawned {kind.value} at frame {frame}", category="entity_spawn")
        return obstacle

    def try_spawn_power_up(self, frame: int, power_ups: list) -> PowerUp | None:
        """Append a new shield hat if this tick's trial and the cooldown both pass."""
        roll = self.rng.random()
        if roll >= Spawning.POWERUP_RATE:
            return None
        if frame - self.last_powerup_frame <= Spawning.POWERUP_COOLDOWN:
            return None

        power_up = PowerUp.spawn(
            x=float(Display.WIDTH),
            y=float(World.GROUND_Y - Spawning.POWERUP_OFFSET_Y),
        )
        power_ups.append(power_up)
        self.last_powerup_frame = frame
        self._spawn_stats["power_ups"] += 1

        DebugLogger.trace(f"Spawned power-up at frame {frame}", category="entity_spawn")
        return power_up
