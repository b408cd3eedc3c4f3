"""Bursts and trails of particles around the ball."""

from __future__ import annotations

import math
import random

from pygame.math import Vector2

from . import colors
from .particle import Particle

_PI = 3.14159


class ParticleSystem:
    """Owns the live particles, spawns new ones and drops the dead."""

    def __init__(self, rng=None):
        self.rng = rng if rng is not None else random.Random()
        self._particles = []

    def __len__(self):
        return len(self._particles)

    def __iter__(self):
        return iter(self._particles)

    def _spawn(self, position, velocity, lifetime, size, color):
        particle = Particle(position, velocity, lifetime, size)
        particle.color = color
        self._particles.append(particle)

    def create_collision_particles(self, position, normal):
        """White sparks spread in a 60 degree cone around the normal."""
        count = self.rng.randint(8, 12)
        for _ in range(count):
            speed = self.rng.uniform(50.0, 150.0)
            lifetime = self.rng.uniform(0.3, 0.7)
            size = self.rng.uniform(1.5, 3.5)
            direction = self.random_direction_in_cone(normal, 60.0)
            self._spawn(position, direction * speed, lifetime, size, colors.WHITE)

    def create_movement_particles(self, position, direction):
        """A puff of green behind a ball that has just been launched."""
        count = self.rng.randint(15, 20)
        base = -Vector2(direction)
        for _ in range(count):
            speed = self.rng.uniform(20.0, 80.0)
            lifetime = self.rng.uniform(0.4, 0.8)
            size = self.rng.uniform(2.0, 4.0)
            particle_dir = self.random_direction_in_cone(base, 90.0)
            shade = self.rng.randint(150, 255)
            self._spawn(position, particle_dir * speed, lifetime, size, (0, shade, 0, 255))

    def create_trail_particles(self, position, direction, speed):
        """A few translucent green particles trailing a moving ball."""
        count = min(2 + int(speed / 50.0), 5)
        base = -Vector2(direction)
        position = Vector2(position)
        for _ in range(count):
            particle_speed = self.rng.uniform(10.0, 30.0)
            lifetime = self.rng.uniform(0.2, 0.5)
            size = self.rng.uniform(1.5, 3.0)
            offset = Vector2(self.rng.uniform(-5.0, 5.0), self.rng.uniform(-5.0, 5.0))
            particle_dir = self.random_direction_in_cone(base, 30.0)
            shade = self.rng.randint(150, 255)
            self._spawn(
                position + offset,
                particle_dir * particle_speed,
                lifetime,
                size,
                (0, shade, 0, 200),
            )

    def update(self, delta_time):
        """Advance every particle and forget those whose lifetime ran out."""
        for particle in self._particles:
            particle.update(delta_time)
        self._particles = [p for p in self._particles if p.alive]

    def draw(self, target):
        for particle in self._particles:
            particle.draw(target)

    def random_direction_in_cone(self, base_direction, spread_angle):
        """A unit vector within spread_angle degrees centred on base_direction."""
        spread = spread_angle * _PI / 180.0
        angle = self.rng.uniform(-spread / 2, spread / 2)
        base = Vector2(base_direction)
        length = base.length()
        base = base / length if length > 0 else Vector2(0, -1)
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        return Vector2(base.x * cos_a - base.y * sin_a, base.x * sin_a + base.y * cos_a)