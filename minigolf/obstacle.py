"""Static rectangular obstacles with precise circle collision."""

from __future__ import annotations

import math
from dataclasses import dataclass

import pygame
from pygame.math import Vector2

from . import colors
from .entity import Entity

_PI = 3.14159
_SHADOW_OFFSET = 5.0


@dataclass(frozen=True)
class Collision:
    """Where a circle touches an obstacle, and the normal pushing it out."""

    point: Vector2
    normal: Vector2


def distance_point_segment(point, start, end):
    """Return (distance, closest point) from a point to a line segment."""
    point, start, end = Vector2(point), Vector2(start), Vector2(end)
    line = end - start
    length = line.length()
    if length > 0:
        line = line / length
    projection = (point - start).dot(line)
    projection = max(0.0, min(projection, length))
    closest = start + line * projection
    return point.distance_to(closest), closest


def _draw_polygon(target, color, points):
    screen = [target.to_screen(p) for p in points]
    color = pygame.Color(*color)
    if color.a == 0:
        return
    if color.a == 255:
        pygame.draw.polygon(target.surface, color, screen)
        return
    left = math.floor(min(p.x for p in screen))
    top = math.floor(min(p.y for p in screen))
    right = math.ceil(max(p.x for p in screen))
    bottom = math.ceil(max(p.y for p in screen))
    layer = pygame.Surface((right - left + 1, bottom - top + 1), pygame.SRCALPHA)
    pygame.draw.polygon(layer, color, [(p.x - left, p.y - top) for p in screen])
    target.surface.blit(layer, (left, top))


class Obstacle(Entity):
    """A rectangle centred on its position, rotatable in degrees."""

    def __init__(self, position, size, color=colors.GRAY):
        self.position = Vector2(position)
        self.size = Vector2(size)
        self.color = tuple(color)
        self._rotation = 0.0

    @property
    def rotation(self):
        """Rotation in degrees, wrapped into [0, 360)."""
        return self._rotation

    @rotation.setter
    def rotation(self, angle):
        self._rotation = float(angle) % 360.0

    def update(self, delta_time):
        """Obstacles are static."""
        return None

    def _corner_points(self, angle, center=None):
        center = self.position if center is None else Vector2(center)
        half_w, half_h = self.size.x / 2, self.size.y / 2
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        return [
            Vector2(center.x - half_w * cos_a + half_h * sin_a,
                    center.y - half_w * sin_a - half_h * cos_a),
            Vector2(center.x + half_w * cos_a + half_h * sin_a,
                    center.y + half_w * sin_a - half_h * cos_a),
            Vector2(center.x + half_w * cos_a - half_h * sin_a,
                    center.y + half_w * sin_a + half_h * cos_a),
            Vector2(center.x - half_w * cos_a - half_h * sin_a,
                    center.y - half_w * sin_a + half_h * cos_a),
        ]

    def corners(self):
        """The four corners: top-left, top-right, bottom-right, bottom-left."""
        return self._corner_points(self._rotation * _PI / 180.0)

    def bounds(self):
        """Axis-aligned bounding box as (left, top, width, height)."""
        points = self._corner_points(math.radians(self._rotation))
        left = min(p.x for p in points)
        top = min(p.y for p in points)
        right = max(p.x for p in points)
        bottom = max(p.y for p in points)
        return left, top, right - left, bottom - top

    def draw(self, target):
        _draw_polygon(target, self.color, self._corner_points(math.radians(self._rotation)))

    def draw_shadow(self, target):
        shadow_center = self.position + Vector2(_SHADOW_OFFSET, _SHADOW_OFFSET)
        points = self._corner_points(math.radians(self._rotation), shadow_center)
        _draw_polygon(target, colors.SHADOW_COLOR, points)

    def check_circle_collision(self, circle_center, radius):
        """Return a Collision if the circle touches an edge, else None."""
        circle_center = Vector2(circle_center)
        corners = self.corners()
        min_distance = math.inf
        closest = Vector2()
        for current, following in zip(corners, corners[1:] + corners[:1]):
            distance, candidate = distance_point_segment(circle_center, current, following)
            if distance < min_distance:
                min_distance = distance
                closest = candidate
        if min_distance > radius:
            return None
        normal = circle_center - closest
        length = normal.length()
        normal = normal / length if length > 0 else Vector2(0, -1)
        return Collision(point=Vector2(closest), normal=normal)