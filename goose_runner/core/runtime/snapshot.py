"""
snapshot.py
-----------
Read-only view of the simulation handed to the renderer each frame.

Views are frozen copies, so a presentation layer can keep a snapshot around
without seeing later ticks or touching simulation internals.
"""

from dataclasses import dataclass

from goose_runner.core.runtime.session_state import SessionState


@dataclass(frozen=True)
class ActorView:
    x: float
    y: float
    width: int
    height: int
    airborne: bool
    shielded: bool


@dataclass(frozen=True)
class ObstacleView:
    x: float
    y: float
    width: int
    height: int
    kind: str


@dataclass(frozen=True)
class PowerUpView:
    x: float
    y: float
    width: int
    height: int
    kind: str
    collected: bool


@dataclass(frozen=True)
class ParticleView:
    x: float
    y: float
    life: int
    max_life: int

    @property
    def fade(self) -> float:
        return max(0.0, self.life / self.max_life)


@dataclass(frozen=True)
class RenderSnapshot:
    state: SessionState
    actor: ActorView
    obstacles: tuple
    power_ups: tuple
    particles: tuple
    score: int
    high_score: int
    game_speed: float
    frame: int

    @classmethod
    def capture(cls, state: SessionState, sim) -> "RenderSnapshot":
        """Copy everything a renderer needs out of a SimulationState."""
        actor = sim.actor
        return cls(
            state=state,
            actor=ActorView(
                x=actor.x, y=actor.y,
                width=actor.width, height=actor.height,
                airborne=actor.airborne, shielded=actor.shielded,
            ),
            obstacles=tuple(
                ObstacleView(o.x, o.y, o.width, o.height, o.kind.value)
                for o in sim.obstacles
            ),
            power_ups=tuple(
                PowerUpView(p.x, p.y, p.width, p.height, p.kind.value, p.collected)
                for p in sim.power_ups
            ),
            particles=tuple(
                ParticleView(p.x, p.y, p.life, p.max_life)
                for p in sim.particles
            ),
            score=sim.stats.score,
            high_score=sim.stats.high_score,
            game_speed=sim.game_speed,
            frame=sim.frame_count,
        )
