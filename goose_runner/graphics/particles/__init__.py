"""
Particle system exports.

Provides particle bursts for visual feedback.
"""

from goose_runner.graphics.particles.particle_manager import (
    ParticleEmitter,
    Particle,
)

__all__ = [
    'ParticleEmitter',
    'Particle',
]
