"""The player's ball: dragged with the mouse, slowed by friction, bounces off walls."""

from __future__ import annotations

import math

import pygame
from pygame.math import Vector2

from . import colors
from .entity import Entity

_FRICTION = 0.99
_LAUNCH_FACTOR = 2.5
_SPEED_LOSS = 0.8
_ARROW_SIZE = 15.0
_SHADOW_OFFSET = 6.0
_SHADOW_SCALE = 1.1
_MOVEMENT_THRESHOLD = 20.0
_IMPACT_THRESHOLD = 50.0


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


class Ball(Entity):
    """A golf ball launched by dragging away from it and releasing.

    on_collision(point, normal) is called after a hard impact;
    on_movement(position, direction) is called on a strong launch.
    """

    def __init__(self, radius=20.0):
        self.radius = float(radius)
        self.position = Vector2(300.0, 300.0)
        self.velocity = Vector2(0.0, 0.0)
        self.dragging = False
        self.friction = _FRICTION
        self.drag_start = Vector2()
        self.drag_current = Vector2()
        self.line_start = Vector2(self.position)
        self.line_end = Vector2(self.position)
        self.arrow_head = [Vector2() for _ in range(3)]
        self.on_collision = None
        self.on_movement = None

    def update(self, delta_time):
        if not self.dragging:
            self.velocity *= self.friction
            if abs(self.velocity.x) < 1.0 and abs(self.velocity.y) < 1.0:
                self.velocity = Vector2(0.0, 0.0)
            self.position += self.velocity * delta_time
        self.line_start = Vector2(self.position)

    def draw(self, target):
        _draw_circle(target, colors.BALL_COLOR, self.position, self.radius)
        if self.dragging:
            pygame.draw.line(
                target.surface,
                colors.DRAG_LINE_COLOR,
                target.to_screen(self.line_start),
                target.to_screen(self.line_end),
            )
            pygame.draw.polygon(
                target.surface,
                colors.DRAG_LINE_COLOR,
                [target.to_screen(p) for p in self.arrow_head],
            )

    def draw_shadow(self, target):
        # The shadow is scaled about the unscaled origin, so it drifts slightly.
        offset = _SHADOW_OFFSET + (_SHADOW_SCALE - 1.0) * self.radius
        center = self.position + Vector2(offset, offset)
        _draw_circle(target, colors.SHADOW_COLOR, center, self.radius * _SHADOW_SCALE)

    def bounds(self):
        """Axis-aligned bounding box as (left, top, width, height)."""
        return (
            self.position.x - self.radius,
            self.position.y - self.radius,
            2 * self.radius,
            2 * self.radius,
        )

    def _contains(self, point):
        left, top, width, height = self.bounds()
        return left <= point.x < left + width and top <= point.y < top + height

    def handle_mouse_press(self, mouse_pos):
        mouse_pos = Vector2(mouse_pos)
        if not self._contains(mouse_pos):
            return False
        self.dragging = True
        self.drag_start = Vector2(self.position)
        self.drag_current = Vector2(mouse_pos)
        self.velocity = Vector2(0.0, 0.0)
        self.line_start = Vector2(self.position)
        self.line_end = Vector2(mouse_pos)
        self._update_arrow_head()
        return True

    def handle_mouse_release(self, mouse_pos):
        if not self.dragging:
            return False
        self.dragging = False
        drag = self.position - Vector2(mouse_pos)
        distance = drag.length()
        self.velocity = drag * _LAUNCH_FACTOR
        if self.on_movement is not None and distance > _MOVEMENT_THRESHOLD:
            direction = drag / distance if distance > 0 else Vector2(0, -1)
            self.on_movement(Vector2(self.position), direction)
        return True

    def handle_mouse_move(self, mouse_pos):
        if not self.dragging:
            return False
        self.drag_current = Vector2(mouse_pos)
        self.line_end = Vector2(mouse_pos)
        self._update_arrow_head()
        return True

    def _update_arrow_head(self):
        direction = self.line_start - self.line_end
        length = direction.length()
        if length < 1.0:
            return
        unit = direction / length
        perpendicular = Vector2(-unit.y, unit.x)
        tip = Vector2(self.line_start)
        back = tip - unit * _ARROW_SIZE
        wing = perpendicular * _ARROW_SIZE * 0.5
        self.arrow_head = [tip, back + wing, back - wing]

    def check_collision(self, obstacle):
        """Push the ball out of the obstacle and reflect its velocity."""
        if self.velocity.x == 0 and self.velocity.y == 0:
            return
        hit = obstacle.check_circle_collision(self.position, self.radius)
        if hit is None:
            return
        overlap = self.radius - self.position.distance_to(hit.point)
        self.position += hit.normal * overlap

        speed_before = self.velocity.length()
        dot = self.velocity.dot(hit.normal)
        self.velocity -= hit.normal * (2.0 * dot * _SPEED_LOSS)

        self.line_start = Vector2(self.position)
        if self.on_collision is not None and speed_before > _IMPACT_THRESHOLD:
            self.on_collision(Vector2(hit.point), Vector2(hit.normal))