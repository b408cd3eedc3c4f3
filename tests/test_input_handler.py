import pygame
import pytest
from pygame.math import Vector2

from minigolf.ball import Ball
from minigolf.entity import RenderTarget, View
from minigolf.input_handler import InputHandler


def make_handler(center=(300, 300), size=(600, 600)):
    target = RenderTarget(pygame.Surface((600, 600)), View(center, size))
    return InputHandler(target), target


def event(kind, **attrs):
    return pygame.event.Event(kind, **attrs)


def test_identity_view_maps_pixels_unchanged():
    handler, _ = make_handler()
    assert handler.map_pixel_to_coords((10, 20)) == Vector2(10, 20)


def test_mapping_round_trips_through_target():
    handler, target = make_handler(center=(0, 0), size=(1200, 900))
    world = handler.map_pixel_to_coords((123, 456))
    screen = target.to_screen(world)
    assert screen.x == pytest.approx(123)
    assert screen.y == pytest.approx(456)


def test_quit_stops():
    handler, _ = make_handler()
    assert handler.process_events([event(pygame.QUIT)], []) is False


def test_no_events_keeps_running():
    handler, _ = make_handler()
    assert handler.process_events([], []) is True


def test_left_press_starts_drag():
    handler, _ = make_handler()
    ball = Ball()
    handler.process_events([event(pygame.MOUSEBUTTONDOWN, pos=(300, 300), button=1)], [ball])
    assert ball.dragging is True


def test_right_press_is_ignored():
    handler, _ = make_handler()
    ball = Ball()
    handler.process_events([event(pygame.MOUSEBUTTONDOWN, pos=(300, 300), button=3)], [ball])
    assert ball.dragging is False


def test_only_first_entity_takes_press():
    handler, _ = make_handler()
    first, second = Ball(), Ball()
    handler.process_events(
        [event(pygame.MOUSEBUTTONDOWN, pos=(300, 300), button=1)], [first, second]
    )
    assert first.dragging is True
    assert second.dragging is False


def test_drag_move_and_release_launch_ball():
    handler, _ = make_handler()
    ball = Ball()
    events = [
        event(pygame.MOUSEBUTTONDOWN, pos=(300, 300), button=1),
        event(pygame.MOUSEMOTION, pos=(250, 300), rel=(-50, 0), buttons=(1, 0, 0)),
    ]
    assert handler.process_events(events, [ball]) is True
    assert ball.line_end == Vector2(250, 300)
    handler.process_events([event(pygame.MOUSEBUTTONUP, pos=(250, 300), button=1)], [ball])
    assert ball.dragging is False
    assert ball.velocity.x > 0
    assert ball.velocity.y == 0