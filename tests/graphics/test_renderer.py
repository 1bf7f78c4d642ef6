"""
test_renderer.py
----------------
Smoke tests drawing real snapshots onto an off-screen surface.
"""

import pygame
import pytest

from goose_runner.core.runtime.session_state import SessionState
from goose_runner.core.runtime.simulation_state import SimulationState
from goose_runner.core.runtime.snapshot import RenderSnapshot
from goose_runner.entities.entity_types import ObstacleKind
from goose_runner.entities.items.power_up import PowerUp
from goose_runner.entities.obstacle import Obstacle
from goose_runner.graphics.particles.particle_manager import Particle
from goose_runner.graphics.renderer import Renderer


@pytest.fixture(scope="module", autouse=True)
def pygame_fonts():
    pygame.font.init()
    yield
    pygame.font.quit()


@pytest.fixture
def busy_sim():
    sim = SimulationState()
    for i, kind in enumerate(ObstacleKind):
        sim.obstacles.append(Obstacle.spawn(kind, x=300.0 + i * 120, y=260.0))
    sim.power_ups.append(PowerUp.spawn(x=700.0, y=220.0))
    sim.particles.append(Particle(200.0, 200.0, 1.0, 1.0, life=10, max_life=30))
    sim.actor.activate_shield(0, 5000)
    return sim


@pytest.mark.parametrize("state", list(SessionState))
def test_draws_every_state(busy_sim, state):
    surface = pygame.Surface((800, 400))
    renderer = Renderer(800, 400)

    renderer.draw(surface, RenderSnapshot.capture(state, busy_sim))

    # Ground band is painted below the ground line
    assert surface.get_at((5, 395))[:3] != surface.get_at((5, 5))[:3]
