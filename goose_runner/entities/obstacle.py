"""
obstacle.py
-----------
Ground obstacles the goose has to jump over.
"""

from dataclasses import dataclass

from goose_runner.entities.entity_types import ObstacleKind


@dataclass
class Obstacle:
    x: float
    y: float
    width: int
    height: int
    kind: ObstacleKind

    @classmethod
    def spawn(cls, kind: ObstacleKind, x: float, y: float) -> "Obstacle":
        """Create an obstacle with the fixed size of its kind."""
        width, height = kind.size
        return cls(x=x, y=y, width=width, height=height, kind=kind)

    def scroll(self, speed: float):
        self.x -= speed

    @property
    def on_screen(self) -> bool:
        """False once the right edge has passed the left screen boundary."""
        return self.x > -self.width
