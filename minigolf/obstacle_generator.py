"""Random winding paths lined with walls, laid out ahead of the ball."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass

from pygame.math import Vector2

from . import colors
from .obstacle import Obstacle

_PI = 3.14159
_WALL_COLORS = (colors.LIGHT_BROWN, colors.DARK_BROWN, colors.GRAY)
_WALL_THICKNESS = 20.0
_BALL_RADIUS = 20.0


@dataclass
class PathSegment:
    """A straight stretch of path between two points, of a given width."""

    start: Vector2
    end: Vector2
    width: float


class ObstacleGenerator:
    """Extends a random path as the ball travels and walls it in."""

    def __init__(self, rng=None):
        self.rng = rng if rng is not None else random.Random()
        self.last_generation_pos = Vector2(0.0, 0.0)
        self.current_path_end = Vector2(300.0, 300.0)
        self.current_path_direction = Vector2(1.0, 0.0)
        self.current_path_width = 200.0
        self.obstacle_generation_distance = 300.0
        self.min_obstacle_distance = 100.0
        self.max_obstacle_count = 100
        self.max_path_turn_angle = 45.0
        self.min_path_segment_length = 200.0
        self.max_path_segment_length = 500.0

    def generate_obstacles(self, ball_position, entities, existing_obstacles):
        """Append walls for new path segments to entities, unless already full."""
        if len(existing_obstacles) >= self.max_obstacle_count:
            return
        ball_position = Vector2(ball_position)
        if self.last_generation_pos == Vector2(0.0, 0.0):
            self.current_path_end = ball_position + Vector2(200.0, 0.0)
            self.current_path_direction = Vector2(1.0, 0.0)
        segments = self.generate_path_segments(ball_position)
        self.create_walls_from_path(segments, entities, ball_position, existing_obstacles)
        self.update_last_generation_position(ball_position)

    def generate_path_segments(self, ball_position):
        """Three connected segments continuing the current path."""
        segments = []
        start = Vector2(self.current_path_end)
        direction = Vector2(self.current_path_direction)
        for _ in range(3):
            length = self.rng.uniform(self.min_path_segment_length, self.max_path_segment_length)
            turn = self.rng.uniform(-self.max_path_turn_angle, self.max_path_turn_angle)
            width = self.rng.uniform(180.0, 250.0)

            angle = turn * _PI / 180.0
            cos_a, sin_a = math.cos(angle), math.sin(angle)
            new_dir = Vector2(
                direction.x * cos_a - direction.y * sin_a,
                direction.x * sin_a + direction.y * cos_a,
            )
            norm = new_dir.length()
            if norm > 0:
                new_dir = new_dir / norm

            end = start + new_dir * length
            segments.append(PathSegment(start=Vector2(start), end=Vector2(end), width=width))
            start = end
            direction = new_dir

        self.current_path_end = Vector2(start)
        self.current_path_direction = Vector2(direction)
        self.current_path_width = segments[-1].width
        return segments

    def create_walls_from_path(self, segments, entities, ball_position, existing_obstacles):
        """Append a left and a right wall along each segment where there is room."""
        ball_position = Vector2(ball_position)
        for segment in segments:
            seg_dir = segment.end - segment.start
            seg_length = seg_dir.length()
            seg_dir = seg_dir / seg_length
            perp = Vector2(-seg_dir.y, seg_dir.x)
            half_width = segment.width / 2.0

            left_pos = (segment.start + segment.end) / 2.0 + perp * half_width
            right_pos = (segment.start + segment.end) / 2.0 - perp * half_width
            wall_size = Vector2(seg_length, _WALL_THICKNESS)
            angle = math.atan2(seg_dir.y, seg_dir.x) * 180.0 / _PI

            left_color = _WALL_COLORS[self.rng.randint(0, 2)]
            left_wall = Obstacle(left_pos, wall_size, left_color)
            left_wall.rotation = angle

            right_color = _WALL_COLORS[self.rng.randint(0, 2)]
            right_wall = Obstacle(right_pos, wall_size, right_color)
            right_wall.rotation = angle

            if self.is_valid_obstacle_position(
                left_pos, wall_size, ball_position, _BALL_RADIUS, existing_obstacles
            ):
                entities.append(left_wall)
            if self.is_valid_obstacle_position(
                right_pos, wall_size, ball_position, _BALL_RADIUS, existing_obstacles
            ):
                entities.append(right_wall)

    def is_valid_obstacle_position(self, pos, size, ball_position, ball_radius, obstacles):
        """False if too near the ball or, by centre distance, an existing obstacle."""
        pos, size = Vector2(pos), Vector2(size)
        if pos.distance_to(Vector2(ball_position)) < self.min_obstacle_distance + ball_radius:
            return False
        for obstacle in obstacles:
            left, top, width, height = obstacle.bounds()
            center = Vector2(left + width / 2.0, top + height / 2.0)
            min_dist = (size.x + size.y + width + height) / 4.0
            if pos.distance_to(center) < min_dist:
                return False
        return True

    def update_last_generation_position(self, position):
        self.last_generation_pos = Vector2(position)

    def should_generate_obstacles(self, current_position):
        """True once the ball has moved far enough from the last generation point."""
        distance = Vector2(current_position).distance_to(self.last_generation_pos)
        return distance > self.obstacle_generation_distance