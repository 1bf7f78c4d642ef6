"""
frame_driver.py
---------------
Runs one simulation tick per animation frame.

Responsibilities
----------------
- Queue commands from input collaborators and apply them at the start of the
  next update.
- Keep the frame request alive while playing and cancel it when the run ends.
- Run the tick steps in their fixed order and publish a RenderSnapshot.

Tick order (must not change):
    1. frame counter          4. obstacle spawn, power-up spawn   7. particles
    2. actor physics + clamp  5. obstacles (collision ends run)   8. score
    3. shield expiry          6. power-ups (collection)           9. speed ramp

A collision in step 5 ends the run immediately but the remaining steps of the
tick still run. The high score is settled after step 9.
"""

import time
from collections import deque

from goose_runner.core.debug.debug_logger import DebugLogger
from goose_runner.core.runtime.commands import Command
from goose_runner.core.runtime.snapshot import RenderSnapshot
from goose_runner.core.services.event_manager import PowerUpCollectedEvent
from goose_runner.systems.physics.physics_engine import PhysicsEngine


def wall_clock_ms() -> float:
    """Milliseconds since the epoch."""
    return time.time() * 1000.0


class FrameDriver:
    """Orchestrates the session, the physics engine and the spawner each frame."""

    def __init__(self, session, engine: PhysicsEngine = None, clock=None):
        """
        Args:
            session: Session state machine that owns the SimulationState.
            engine: Physics engine. Shares the session's random source by default.
            clock: Callable returning wall-clock milliseconds (shield timing).
        """
        self.session = session
        self.engine = engine or PhysicsEngine(rng=session.rng)
        self.clock = clock or wall_clock_ms

        self._commands = deque()
        self._frame_requested = False
        self.snapshot = RenderSnapshot.capture(session.state, session.sim)

    # ===========================================================
    # Command Intake
    # ===========================================================
    def submit(self, command: Command):
        """Queue a command; it takes effect at the start of the next update."""
        self._commands.append(command)

    def _drain_commands(self):
        while self._commands:
            command = self._commands.popleft()
            applied = self.session.handle(command)
            if applied and command is Command.START:
                self.request_frame()

    # ===========================================================
    # Frame Scheduling
    # ===========================================================
    @property
    def frame_pending(self) -> bool:
        return self._frame_requested

    def request_frame(self):
        self._frame_requested = True

    def cancel_frame(self):
        """Drop the pending frame request. Safe to call when none is pending."""
        if self._frame_requested:
            DebugLogger.trace("Frame request cancelled", category="session")
        self._frame_requested = False

    # ===========================================================
    # Per-Frame Update
    # ===========================================================
    def update(self) -> RenderSnapshot:
        """
        Apply queued commands, run a tick if one is scheduled, and capture the
        snapshot. Outside of play this does no simulation work.
        """
        self._drain_commands()

        if self._frame_requested and self.session.playing:
            self.tick()

        if not self.session.playing:
            self.cancel_frame()

        self.snapshot = RenderSnapshot.capture(self.session.state, self.session.sim)
        return self.snapshot

    def tick(self):
        """Advance the simulation by exactly one step."""
        session = self.session
        if not session.playing:
            return

        sim = session.sim
        engine = self.engine
        now_ms = self.clock()

        # 1. Frame counter
        sim.frame_count += 1

        # 2. Actor physics
        engine.integrate_actor(sim.actor)

        # 3. Shield expiry
        engine.expire_shield(sim.actor, now_ms)

        # 4. Spawning
        session.spawner.try_spawn_obstacle(sim.frame_count, sim.obstacles)
        session.spawner.try_spawn_power_up(sim.frame_count, sim.power_ups)

        # 5. Obstacles
        hit = engine.update_obstacles(sim)
        if hit is not None:
            session.end_run(hit)

        # 6. Power-ups
        for power_up in engine.update_power_ups(sim, now_ms):
            session.events.dispatch(PowerUpCollectedEvent(
                position=(power_up.x, power_up.y),
                kind=power_up.kind.value,
                shield_end_ms=sim.actor.shield_end_ms,
            ))

        # 7. Particles
        engine.update_particles(sim)

        # 8. Score
        engine.accumulate_score(sim)

        # 9. Speed ramp
        engine.ramp_speed(sim)

        if not session.playing:
            session.settle_run()
            self.cancel_frame()
