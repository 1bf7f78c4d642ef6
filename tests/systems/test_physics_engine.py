"""
test_physics_engine.py
----------------------
Unit tests for the per-tick physics steps.

Responsibilities
----------------
- Verify actor integration, ground clamp and the full jump arc.
- Verify obstacle scrolling, removal and the kept colliding obstacle.
- Verify power-up collection (shield, particles, removal).
- Verify particle lifetime, score multiplier and speed ramp.
"""

import pytest

from goose_runner.core.runtime.game_settings import World
from goose_runner.core.runtime.simulation_state import SimulationState
from goose_runner.entities.entity_types import ObstacleKind
from goose_runner.entities.items.power_up import PowerUp
from goose_runner.entities.obstacle import Obstacle
from goose_runner.graphics.particles.particle_manager import Particle
from goose_runner.systems.physics.physics_engine import PhysicsEngine


@pytest.fixture
def engine(quiet_rng):
    return PhysicsEngine(rng=quiet_rng)


@pytest.fixture
def state():
    return SimulationState()


# ===========================================================
# Actor
# ===========================================================

class TestActorIntegration:

    def test_grounded_actor_stays_clamped(self, engine, state):
        actor = state.actor
        for _ in range(10):
            engine.integrate_actor(actor)
            assert actor.y == actor.ground_y
            assert actor.velocity_y == 0.0
            assert not actor.airborne

    def test_first_airborne_step(self, engine, state):
        actor = state.actor
        actor.velocity_y = World.JUMP_VELOCITY
        actor.airborne = True

        engine.integrate_actor(actor)

        assert actor.velocity_y == pytest.approx(-11.4)
        assert actor.y == pytest.approx(250 - 11.4)
        assert actor.airborne

    def test_jump_arc_returns_to_ground(self, engine, state):
        actor = state.actor
        actor.velocity_y = World.JUMP_VELOCITY
        actor.airborne = True

        ticks = 0
        peak = actor.y
        while actor.airborne:
            engine.integrate_actor(actor)
            peak = min(peak, actor.y)
            ticks += 1
            assert ticks < 100

        assert actor.y == actor.ground_y
        assert actor.velocity_y == 0.0
        # Peak roughly v^2 / 2g above the ground
        assert actor.ground_y - peak == pytest.approx(114, abs=7)
        assert 38 <= ticks <= 42

    def test_actor_never_below_ground(self, engine, state):
        actor = state.actor
        actor.y = actor.ground_y - 1
        actor.velocity_y = 30.0
        actor.airborne = True
        engine.integrate_actor(actor)
        assert actor.y == actor.ground_y


# ===========================================================
# Obstacles
# ===========================================================

class TestObstacles:

    def test_obstacles_scroll_by_game_speed(self, engine, state):
        state.game_speed = 5.0
        state.obstacles = [Obstacle.spawn(ObstacleKind.CAMERA, x=800.0, y=260.0)]
        assert engine.update_obstacles(state) is None
        assert state.obstacles[0].x == 795.0

    def test_removed_on_tick_right_edge_passes_left_boundary(self, engine, state):
        state.game_speed = 4.0
        # Above the actor so it never collides
        obstacle = Obstacle.spawn(ObstacleKind.CAMERA, x=-27.0, y=0.0)
        state.obstacles = [obstacle]

        engine.update_obstacles(state)
        assert state.obstacles == [obstacle]     # x == -31 > -35

        engine.update_obstacles(state)
        assert state.obstacles == []             # x == -35

    def test_order_preserved(self, engine, state):
        first = Obstacle.spawn(ObstacleKind.CAMERA, x=500.0, y=0.0)
        second = Obstacle.spawn(ObstacleKind.LEDGER, x=700.0, y=0.0)
        state.obstacles = [first, second]
        engine.update_obstacles(state)
        assert state.obstacles == [first, second]

    def test_first_colliding_obstacle_is_reported_and_kept(self, engine, state):
        state.game_speed = 4.0
        hit = Obstacle.spawn(ObstacleKind.PURSUER, x=124.0, y=260.0)
        also_hit = Obstacle.spawn(ObstacleKind.LEDGER, x=130.0, y=260.0)
        state.obstacles = [hit, also_hit]

        assert engine.update_obstacles(state) is hit
        assert state.obstacles == [hit, also_hit]

    def test_shielded_actor_passes_through(self, engine, state):
        state.actor.activate_shield(0, 5000)
        state.obstacles = [Obstacle.spawn(ObstacleKind.PURSUER, x=124.0, y=260.0)]
        assert engine.update_obstacles(state) is None


# ===========================================================
# Power-ups & Particles
# ===========================================================

class TestPowerUps:

    def test_collection_grants_shield_and_burst(self, engine, state):
        power_up = PowerUp.spawn(x=124.0, y=240.0)
        state.power_ups = [power_up]

        collected = engine.update_power_ups(state, now_ms=20_000)

        assert collected == [power_up]
        assert power_up.collected
        assert state.power_ups == []
        assert state.actor.shielded
        assert state.actor.shield_end_ms == 25_000
        assert len(state.particles) == 5
        assert state.stats.items_collected == 1

    def test_collecting_again_refreshes_expiry(self, engine, state):
        state.actor.activate_shield(0, 5000)
        state.power_ups = [PowerUp.spawn(x=124.0, y=240.0)]
        engine.update_power_ups(state, now_ms=3000)
        assert state.actor.shield_end_ms == 8000

    def test_missed_power_up_scrolls_then_leaves(self, engine, state):
        state.game_speed = 4.0
        power_up = PowerUp.spawn(x=-23.0, y=0.0)
        state.power_ups = [power_up]

        engine.update_power_ups(state, now_ms=0)
        assert state.power_ups == [power_up]

        engine.update_power_ups(state, now_ms=0)
        assert state.power_ups == []

    def test_burst_particles_near_power_up(self, engine, state):
        power_up = PowerUp.spawn(x=124.0, y=240.0)
        state.power_ups = [power_up]
        engine.update_power_ups(state, now_ms=0)

        for particle in state.particles:
            assert power_up.x <= particle.x <= power_up.x + 20
            assert power_up.y <= particle.y <= power_up.y + 20
            assert -2.0 <= particle.vx <= 2.0
            assert particle.life == 30


class TestParticles:

    def test_particle_lives_exactly_thirty_ticks(self, engine, state):
        state.particles = [Particle(0.0, 0.0, 1.0, -1.0, life=30)]
        for _ in range(29):
            engine.update_particles(state)
        assert len(state.particles) == 1
        assert state.particles[0].x == 29.0

        engine.update_particles(state)
        assert state.particles == []


# ===========================================================
# Score & Speed
# ===========================================================

class TestScoreAndSpeed:

    def test_score_counts_one_per_tick(self, engine, state):
        for _ in range(25):
            engine.accumulate_score(state)
        assert state.stats.raw_score == 25
        assert state.stats.score == 2

    def test_shield_doubles_points(self, engine, state):
        state.actor.activate_shield(0, 5000)
        for _ in range(10):
            engine.accumulate_score(state)
        assert state.stats.raw_score == 20
        assert state.stats.score == 2

    def test_speed_ramp_is_linear_and_uncapped(self, engine, state):
        state.frame_count = 3600
        engine.ramp_speed(state)
        assert state.game_speed == pytest.approx(5.0)

        state.frame_count = 36_000
        engine.ramp_speed(state)
        assert state.game_speed == pytest.approx(14.0)
