"""
particle_manager.py
-------------------
Frame-based particle bursts for pickup feedback.

Particles move by their velocity once per tick and die when their remaining
life reaches zero. Fading is left to the renderer (alpha = life / max_life).

Usage:
    particles.extend(ParticleEmitter.burst(power_up.x, power_up.y, rng))
    particles = ParticleEmitter.update_all(particles)
"""

import random

from goose_runner.core.runtime.game_settings import Particles


# ===========================================================
# Single Particle
# ===========================================================

class Particle:
    """Individual particle with position, velocity, and lifetime in ticks."""

    __slots__ = ("x", "y", "vx", "vy", "life", "max_life")

    def __init__(self, x, y, vx, vy, life, max_life=None):
        self.x = x
        self.y = y
        self.vx = vx
        self.vy = vy
        self.life = life
        self.max_life = life if max_life is None else max_life

    def update(self) -> bool:
        """Advance one tick. Returns True while the particle is still alive."""
        self.x += self.vx
        self.y += self.vy
        self.life -= 1
        return self.life > 0

    @property
    def alive(self):
        return self.life > 0

    @property
    def fade(self) -> float:
        """Remaining life as a 0..1 fraction."""
        return max(0.0, self.life / self.max_life)

    def __repr__(self):
        return f"Particle(x={self.x:.1f}, y={self.y:.1f}, life={self.life}/{self.max_life})"


# ===========================================================
# Emitter
# ===========================================================

class ParticleEmitter:
    """Stateless helpers for creating and advancing particle lists."""

    @staticmethod
    def burst(x: float, y: float, rng: random.Random, count: int = Particles.BURST_COUNT) -> list:
        """
        Create a burst of particles scattered around (x, y).

        Args:
            x, y: Top-left anchor of the burst.
            rng: Random source.
            count: Number of particles.

        Returns:
            list[Particle]: New particles, not yet attached to any sequence.
        """
        spread = Particles.SPREAD
        speed = Particles.SPEED
        particles = []
        for _ in range(count):
            particles.append(Particle(
                x=x + rng.random() * spread,
                y=y + rng.random() * spread,
                vx=(rng.random() - 0.5) * speed,
                vy=(rng.random() - 0.5) * speed,
                life=Particles.LIFE,
            ))
        return particles

    @staticmethod
    def update_all(particles: list) -> list:
        """Advance every particle one tick and keep the survivors, in order."""
        return [p for p in particles if p.update()]
