import pygame
import pytest
from pygame.math import Vector2

from minigolf.entity import RenderTarget, View
from minigolf.particle import Particle


def _target():
    surface = pygame.Surface((100, 100))
    surface.fill((0, 0, 0))
    return RenderTarget(surface, View((50, 50), (100, 100)))


def test_lifetime_counts_down():
    particle = Particle((0, 0), (0, 0), lifetime=0.5)
    particle.update(0.1)
    assert particle.remaining_lifetime == pytest.approx(0.4)
    assert particle.alive


def test_dies_after_lifetime():
    particle = Particle((0, 0), (0, 0), lifetime=0.5)
    particle.update(0.6)
    assert not particle.alive


def test_gravity_pulls_down():
    particle = Particle((10, 10), (0, 0), lifetime=1.0)
    particle.update(0.1)
    assert particle.velocity.y > 0
    particle.update(0.1)
    assert particle.position.y > 10
    assert particle.position.x == pytest.approx(10)


def test_fades_and_shrinks():
    particle = Particle((0, 0), (0, 0), lifetime=1.0, size=4.0)
    particle.update(0.5)
    assert particle.color[3] < 255
    assert 0.8 * 4.0 <= particle.radius < 4.0


def test_set_color_keeps_rgb_on_update():
    particle = Particle((0, 0), (0, 0), lifetime=1.0)
    particle.color = (0, 200, 0, 200)
    particle.update(0.1)
    assert particle.color[:3] == (0, 200, 0)


def test_draw_alive_particle():
    target = _target()
    Particle((50, 50), (0, 0), size=5).draw(target)
    assert tuple(target.surface.get_at((50, 50)))[:3] == (255, 255, 255)


def test_dead_particle_not_drawn():
    target = _target()
    particle = Particle((50, 50), Vector2(0, 0), lifetime=0.1, size=5)
    particle.update(0.2)
    particle.draw(target)
    assert tuple(target.surface.get_at((50, 50)))[:3] == (0, 0, 0)