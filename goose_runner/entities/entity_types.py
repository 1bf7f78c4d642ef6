"""Entity types."""

from enum import Enum

from goose_runner.core.runtime.game_settings import ObstacleSizes, PowerUps


class ObstacleKind(Enum):
    """
    Closed set of obstacle kinds. Size is fixed per kind and copied onto the
    obstacle when it spawns.
    """
    CAMERA = "camera"
    PURSUER = "pursuer"
    LEDGER = "ledger"

    @property
    def size(self) -> tuple:
        return _OBSTACLE_SIZES[self]


_OBSTACLE_SIZES = {
    ObstacleKind.CAMERA: ObstacleSizes.CAMERA,
    ObstacleKind.PURSUER: ObstacleSizes.PURSUER,
    ObstacleKind.LEDGER: ObstacleSizes.LEDGER,
}


class PowerUpKind(Enum):
    """Pickup kinds. Only the shield hat exists."""
    SHIELD_HAT = "hat"

    @property
    def size(self) -> tuple:
        return (PowerUps.WIDTH, PowerUps.HEIGHT)
