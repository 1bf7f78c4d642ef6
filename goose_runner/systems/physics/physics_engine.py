"""
physics_engine.py
-----------------
Per-tick motion, collision outcomes, particles and scoring.

Responsibilities
----------------
- Integrate the actor's vertical motion (semi-implicit Euler, one step per
  frame, no dt scaling) and clamp it to the ground.
- Expire the shield on wall-clock time.
- Scroll, collide and filter obstacles and power-ups.
- Advance particles, accumulate score and ramp the scroll speed.

Each step is a separate method so the frame driver can run them in its fixed
order. The engine never changes session state; it reports outcomes (the
obstacle that ended the run, the power-ups collected) to its caller.
"""

import random

from goose_runner.core.debug.debug_logger import DebugLogger
from goose_runner.core.runtime.game_settings import PowerUps, Scoring, World
from goose_runner.graphics.particles.particle_manager import ParticleEmitter
from goose_runner.systems.collision.collision_manager import CollisionManager


class PhysicsEngine:
    """Stateless apart from its collaborators; all run data lives in SimulationState."""

    def __init__(self, rng: random.Random = None, collisions: CollisionManager = None):
        self.rng = rng if rng is not None else random.Random()
        self.collisions = collisions or CollisionManager()

    # ===========================================================
    # Actor
    # ===========================================================
    def integrate_actor(self, actor):
        """Apply gravity, move, and clamp to the ground line."""
        actor.velocity_y += World.GRAVITY
        actor.y += actor.velocity_y

        ground = actor.ground_y
        if actor.y >= ground:
            actor.y = ground
            actor.velocity_y = 0.0
            actor.airborne = False

    def expire_shield(self, actor, now_ms: float) -> bool:
        expired = actor.expire_shield(now_ms)
        if expired:
            DebugLogger.trace("Shield expired", category="item")
        return expired

    # ===========================================================
    # Scrolling Entities
    # ===========================================================
    def update_obstacles(self, state):
        """
        Scroll every obstacle, test it against the actor, and drop those that
        left the screen.

        A colliding obstacle is kept for this tick regardless of position.

        Returns:
            Obstacle | None: The first obstacle that hit the actor this tick.
        """
        speed = state.game_speed
        actor = state.actor
        hit = None
        kept = []

        for obstacle in state.obstacles:
            obstacle.scroll(speed)

            if self.collisions.obstacle_hit(actor, obstacle):
                if hit is None:
                    hit = obstacle
                kept.append(obstacle)
                continue

            if obstacle.on_screen:
                kept.append(obstacle)
            else:
                DebugLogger.trace(f"Removed {obstacle.kind.value} off-screen", category="entity_cleanup")

        state.obstacles = kept
        return hit

    def update_power_ups(self, state, now_ms: float) -> list:
        """
        Scroll power-ups, collect those touching the actor, and drop collected
        or off-screen ones.

        Collecting grants the shield (expiry = now + duration) and emits a
        particle burst at the power-up's position.

        Returns:
            list[PowerUp]: Power-ups collected this tick.
        """
        speed = state.game_speed
        actor = state.actor
        collected = []
        kept = []

        for power_up in state.power_ups:
            if power_up.collected:
                continue

            power_up.scroll(speed)

            if self.collisions.power_up_collected(actor, power_up):
                power_up.collected = True
                actor.activate_shield(now_ms, PowerUps.SHIELD_DURATION_MS)
                state.particles.extend(ParticleEmitter.burst(power_up.x, power_up.y, self.rng))
                state.stats.add_item()
                collected.append(power_up)
                DebugLogger.trace(
                    f"Collected {power_up.kind.value}, shield until {actor.shield_end_ms:.0f}",
                    category="item"
                )
                continue

            if power_up.on_screen:
                kept.append(power_up)

        state.power_ups = kept
        return collected

    def update_particles(self, state):
        state.particles = ParticleEmitter.update_all(state.particles)

    # ===========================================================
    # Score & Speed
    # ===========================================================
    def accumulate_score(self, state):
        """Add this tick's points: doubled while shielded."""
        if state.actor.shielded:
            multiplier = Scoring.SHIELDED_MULTIPLIER
        else:
            multiplier = Scoring.BASE_MULTIPLIER
        state.stats.add_points(multiplier)

    def ramp_speed(self, state):
        """Linear, uncapped speed increase with elapsed frames."""
        state.game_speed = World.BASE_SPEED + state.frame_count / World.SPEED_RAMP_FRAMES
