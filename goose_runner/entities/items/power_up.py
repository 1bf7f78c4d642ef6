"""
power_up.py
-----------
Collectible hat that grants a temporary shield and a score multiplier.
"""

from dataclasses import dataclass

from goose_runner.entities.entity_types import PowerUpKind


@dataclass
class PowerUp:
    x: float
    y: float
    width: int
    height: int
    kind: PowerUpKind = PowerUpKind.SHIELD_HAT
    collected: bool = False

    @classmethod
    def spawn(cls, x: float, y: float, kind: PowerUpKind = PowerUpKind.SHIELD_HAT) -> "PowerUp":
        width, height = kind.size
        return cls(x=x, y=y, width=width, height=height, kind=kind)

    def scroll(self, speed: float):
        self.x -= speed

    @property
    def on_screen(self) -> bool:
        return self.x > -self.width
