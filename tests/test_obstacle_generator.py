import math
import random

import pytest
from pygame.math import Vector2

from minigolf import colors
from minigolf.obstacle import Obstacle
from minigolf.obstacle_generator import ObstacleGenerator, PathSegment


def _generator(seed=3):
    return ObstacleGenerator(random.Random(seed))


def test_should_generate_after_moving_far_enough():
    generator = _generator()
    assert not generator.should_generate_obstacles((100, 100))
    assert generator.should_generate_obstacles((400, 0))


def test_update_last_generation_position_resets_distance():
    generator = _generator()
    generator.update_last_generation_position((1000, 1000))
    assert not generator.should_generate_obstacles((1000, 1000))
    assert generator.should_generate_obstacles((0, 0))


@pytest.mark.parametrize("seed", range(5))
def test_path_segments_are_connected_and_bounded(seed):
    generator = _generator(seed)
    segments = generator.generate_path_segments(Vector2(0, 0))
    assert len(segments) == 3
    assert segments[0].start == Vector2(300, 300)
    previous_dir = Vector2(1, 0)
    for first, second in zip(segments, segments[1:]):
        assert first.end == second.start
    for segment in segments:
        length = segment.start.distance_to(segment.end)
        assert 200.0 - 1e-3 <= length <= 500.0 + 1e-3
        assert 180.0 <= segment.width <= 250.0
        direction = (segment.end - segment.start).normalize()
        turn = math.degrees(math.acos(max(-1.0, min(1.0, direction.dot(previous_dir)))))
        assert turn <= 45.0 + 1e-2
        previous_dir = direction
    assert generator.current_path_end == segments[-1].end
    assert generator.current_path_width == segments[-1].width


def test_walls_flank_segment():
    generator = _generator()
    segment = PathSegment(start=Vector2(1000, 0), end=Vector2(1300, 0), width=200.0)
    entities = []
    generator.create_walls_from_path([segment], entities, Vector2(-5000, -5000), [])
    assert len(entities) == 2
    left, right = entities
    midpoint = (segment.start + segment.end) / 2
    assert (left.position + right.position) / 2 == midpoint
    assert left.position.distance_to(right.position) == pytest.approx(segment.width)
    for wall in (left, right):
        assert wall.size == Vector2(300, 20)
        assert wall.rotation == pytest.approx(0.0)
        assert wall.color in (colors.LIGHT_BROWN, colors.DARK_BROWN, colors.GRAY)


def test_walls_near_ball_are_skipped():
    generator = _generator()
    segment = PathSegment(start=Vector2(-150, 0), end=Vector2(150, 0), width=200.0)
    entities = []
    generator.create_walls_from_path([segment], entities, Vector2(0, 0), [])
    assert entities == []


def test_position_near_ball_is_invalid():
    generator = _generator()
    assert not generator.is_valid_obstacle_position((50, 0), (100, 20), (0, 0), 20.0, [])
    assert generator.is_valid_obstacle_position((500, 0), (100, 20), (0, 0), 20.0, [])


def test_position_overlapping_obstacle_is_invalid():
    generator = _generator()
    existing = [Obstacle((1000, 1000), (300, 20))]
    assert not generator.is_valid_obstacle_position(
        (1000, 1000), (300, 20), (0, 0), 20.0, existing
    )
    assert generator.is_valid_obstacle_position(
        (5000, 5000), (300, 20), (0, 0), 20.0, existing
    )


@pytest.mark.parametrize("seed", range(5))
def test_generate_obstacles_adds_walls(seed):
    generator = _generator(seed)
    entities = []
    generator.generate_obstacles(Vector2(300, 300), entities, [])
    assert 0 < len(entities) <= 6
    assert all(isinstance(entity, Obstacle) for entity in entities)
    assert generator.last_generation_pos == Vector2(300, 300)
    assert not generator.should_generate_obstacles((300, 300))


def test_first_generation_starts_path_ahead_of_ball():
    generator = _generator()
    generator.generate_obstacles(Vector2(1000, 1000), [], [])
    assert generator.current_path_end != Vector2(1200, 1000)
    assert generator.current_path_end.distance_to(Vector2(1200, 1000)) >= 200.0


def test_full_course_generates_nothing():
    generator = _generator()
    existing = [Obstacle((i * 1000.0, 0.0), (10, 10)) for i in range(100)]
    entities = []
    generator.generate_obstacles(Vector2(300, 300), entities, existing)
    assert entities == []
    assert generator.last_generation_pos == Vector2(0, 0)