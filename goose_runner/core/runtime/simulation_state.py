"""
simulation_state.py
-------------------
Everything one run mutates, held in a single value.

The session owns exactly one SimulationState for its lifetime and passes it
explicitly to the frame driver and the physics engine; nothing here is global.
"""

from dataclasses import dataclass, field

from goose_runner.core.runtime.game_settings import World
from goose_runner.core.runtime.session_stats import SessionStats
from goose_runner.entities.actor import Actor


@dataclass
class SimulationState:
    actor: Actor = field(default_factory=Actor.initial)
    obstacles: list = field(default_factory=list)     # spawn order, front to back
    power_ups: list = field(default_factory=list)
    particles: list = field(default_factory=list)
    frame_count: int = 0
    game_speed: float = World.BASE_SPEED
    stats: SessionStats = field(default_factory=SessionStats)

    def reset(self):
        """Return to the initial pose with empty sequences. Keeps the high score."""
        self.actor = Actor.initial()
        self.obstacles = []
        self.power_ups = []
        self.particles = []
        self.frame_count = 0
        self.game_speed = World.BASE_SPEED
        self.stats.reset()
