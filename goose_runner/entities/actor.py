"""
actor.py
--------
The player-controlled goose.

Coordinates are top-left based with y growing downward, so a negative
vertical velocity moves the actor up.
"""

from dataclasses import dataclass

from goose_runner.core.runtime.game_settings import ActorDefaults, World


@dataclass
class Actor:
    x: float
    y: float
    width: int
    height: int
    velocity_y: float = 0.0
    airborne: bool = False
    shielded: bool = False
    shield_end_ms: float = 0.0

    @classmethod
    def initial(cls) -> "Actor":
        """Fresh actor standing on the ground, unshielded."""
        return cls(
            x=ActorDefaults.X,
            y=float(World.GROUND_Y - ActorDefaults.HEIGHT),
            width=ActorDefaults.WIDTH,
            height=ActorDefaults.HEIGHT,
        )

    @property
    def ground_y(self) -> float:
        """Resting y for this actor's height."""
        return World.GROUND_Y - self.height

    def activate_shield(self, now_ms: float, duration_ms: float):
        self.shielded = True
        self.shield_end_ms = now_ms + duration_ms

    def expire_shield(self, now_ms: float) -> bool:
        """Drop the shield once wall-clock time passes expiry. Returns True if it expired."""
        if self.shielded and now_ms > self.shield_end_ms:
            self.shielded = False
            return True
        return False
