"""Short-lived particles that fall, slow down, fade and shrink."""

from __future__ import annotations

import math

import pygame
from pygame.math import Vector2

from . import colors
from .entity import Entity

_GRAVITY = 50.0
_DRAG = 0.98


def _draw_circle(target, color, center, radius):
    screen = target.to_screen(center)
    pixels = target.scale_length(radius)
    color = pygame.Color(*color)
    if pixels <= 0 or color.a == 0:
        return
    if color.a == 255:
        pygame.draw.circle(target.surface, color, screen, pixels)
        return
    extent = math.ceil(pixels) + 1
    layer = pygame.Surface((2 * extent, 2 * extent), pygame.SRCALPHA)
    pygame.draw.circle(layer, color, (extent, extent), pixels)
    target.surface.blit(layer, (screen.x - extent, screen.y - extent))


class Particle(Entity):
    """A small circle with a limited lifetime."""

    def __init__(self, position, velocity, lifetime=0.5, size=3.0):
        self.position = Vector2(position)
        self.velocity = Vector2(velocity)
        self.remaining_lifetime = float(lifetime)
        self.initial_lifetime = float(lifetime)
        self.size = float(size)
        self.radius = float(size)
        self.color = colors.WHITE

    @property
    def alive(self):
        return self.remaining_lifetime > 0.0

    def update(self, delta_time):
        self.remaining_lifetime -= delta_time
        self.position += self.velocity * delta_time
        self.velocity.y += _GRAVITY * delta_time
        self.velocity *= _DRAG

        ratio = self.remaining_lifetime / self.initial_lifetime
        alpha = int(max(0.0, min(255.0, ratio * 255.0)))
        self.color = (*tuple(self.color)[:3], alpha)
        self.radius = self.size * (0.8 + ratio * 0.2)

    def draw(self, target):
        if self.alive:
            _draw_circle(target, self.color, self.position, self.radius)

    def draw_shadow(self, target):
        """Particles cast no shadow."""
        return None