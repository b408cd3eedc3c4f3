"""The game loop: window, view following the ball, and the systems that drive play."""

from __future__ import annotations

import argparse
import math

import pygame
from pygame.math import Vector2

from . import colors
from .ball import Ball
from .entity import RenderTarget, View
from .input_handler import InputHandler
from .obstacle import Obstacle
from .obstacle_generator import ObstacleGenerator
from .particle_system import ParticleSystem
from .physics import PhysicsSystem

STANDARD_RATIOS = (
    ("4:3", 4.0 / 3.0),
    ("16:9", 16.0 / 9.0),
    ("16:10", 16.0 / 10.0),
    ("21:9", 21.0 / 9.0),
    ("32:9", 32.0 / 9.0),
)

# Smaller value shows more of the world.
ZOOM_FACTORS = {
    "4:3": 1.0,
    "16:9": 0.8,
    "16:10": 1.0,
    "21:9": 1.0,
    "32:9": 1.0,
}

_FRAMERATE_LIMIT = 144
_TILE_SIZE = 50.0
_TILE_MARGIN = 5
_TRAIL_MIN_SPEED = 5.0
_TRAIL_INTERVAL = 0.01


def find_closest_aspect_ratio(target_ratio):
    """The standard aspect ratio nearest to target_ratio."""
    closest = 16.0 / 9.0
    closest_diff = math.inf
    for _, ratio in STANDARD_RATIOS:
        diff = abs(ratio - target_ratio)
        if diff < closest_diff:
            closest_diff = diff
            closest = ratio
    return closest


def zoom_factor_for(ratio):
    """The zoom factor of the standard ratio matching ratio, or 1.0."""
    for name, standard in STANDARD_RATIOS:
        if abs(standard - ratio) < 0.01:
            return ZOOM_FACTORS.get(name, 1.0)
    return 1.0


def view_size_for(width, height, original_height):
    """World size shown for a window of the given size, keeping height fixed."""
    if width <= 0 or height <= 0:
        raise ValueError(f"window size must be positive, got {width}x{height}")
    ratio = find_closest_aspect_ratio(width / height)
    view_height = original_height / zoom_factor_for(ratio)
    return Vector2(view_height * ratio, view_height)


class Game:
    """Owns the window, the entities and the systems, and runs the frame loop."""

    def __init__(self, width=600, height=600, surface=None):
        self._owns_display = surface is None
        if surface is None:
            surface = pygame.display.set_mode((width, height), pygame.RESIZABLE)
            pygame.display.set_caption("Mini Golf")
        self.original_size = Vector2(width, height)
        self.running = True
        self.tile_size = _TILE_SIZE

        view_size = view_size_for(width, height, self.original_size.y)
        self.view = View(view_size / 2, view_size)
        self.target = RenderTarget(surface, view=self.view)

        self.entities = []
        self.physics_system = PhysicsSystem()
        self.input_handler = InputHandler(self.target)
        self.obstacle_generator = ObstacleGenerator()
        self.particle_system = ParticleSystem()
        self.clock = pygame.time.Clock()
        self._particle_timer = 0.0

    @property
    def surface(self):
        return self.target.surface

    def run(self):
        """Loop over events, updates and drawing until the window closes."""
        while self.running:
            self.process_events(pygame.event.get())
            if not self.running:
                break
            delta_time = self.clock.tick(_FRAMERATE_LIMIT) / 1000.0
            self.update(delta_time)
            self.render()

    def add_entity(self, entity):
        """Add an entity; a ball gets its impact and launch effects hooked up."""
        if isinstance(entity, Ball):
            entity.on_collision = self.particle_system.create_collision_particles
            entity.on_movement = self.particle_system.create_movement_particles
        self.entities.append(entity)

    def find_ball(self):
        """The first ball among the entities, or None."""
        return next((e for e in self.entities if isinstance(e, Ball)), None)

    def find_obstacles(self):
        """All obstacles among the entities, in order."""
        return [e for e in self.entities if isinstance(e, Obstacle)]

    def process_events(self, events):
        """Handle input and window resizes."""
        events = list(events)
        self.running = self.input_handler.process_events(events, self.entities)
        for event in events:
            if event.type == pygame.VIDEORESIZE:
                self.handle_resize(event.w, event.h)

    def update(self, delta_time):
        """Advance entities, particles, the path ahead and the camera."""
        self.physics_system.update(self.entities, delta_time)
        self.particle_system.update(delta_time)

        ball = self.find_ball()
        if ball is None:
            return
        ball_pos = Vector2(ball.position)

        if self.obstacle_generator.should_generate_obstacles(ball_pos):
            self.obstacle_generator.generate_obstacles(
                ball_pos, self.entities, self.find_obstacles()
            )

        self.physics_system.check_collisions(ball, self.find_obstacles())
        self.view.center = Vector2(ball_pos)

        velocity = Vector2(ball.velocity)
        speed = velocity.length()
        if speed > _TRAIL_MIN_SPEED:
            direction = velocity / speed
            self._particle_timer += delta_time
            if self._particle_timer >= _TRAIL_INTERVAL:
                self.particle_system.create_trail_particles(ball_pos, direction, speed)
                self._particle_timer = 0.0

    def render(self):
        """Draw background, shadows, particles and entities."""
        self.surface.fill(colors.BLACK)
        self.draw_background()
        for entity in self.entities:
            entity.draw_shadow(self.target)
        self.particle_system.draw(self.target)
        for entity in self.entities:
            entity.draw(self.target)
        if self._owns_display:
            pygame.display.flip()

    def handle_resize(self, width, height):
        """Fit the view to the new window shape, keeping its centre."""
        center = Vector2(self.view.center)
        if self._owns_display:
            surface = pygame.display.get_surface() or self.surface
        else:
            surface = pygame.Surface((width, height))
        self.view.size = view_size_for(width, height, self.original_size.y)
        self.view.center = center
        self.target.surface = surface

    def draw_background(self):
        """Fill the visible area with a checkerboard of grass tiles."""
        tile = self.tile_size
        half = self.view.size / 2
        left, top = self.view.center - half
        right, bottom = self.view.center + half

        start_row = int(top / tile) - _TILE_MARGIN
        end_row = int(bottom / tile) + _TILE_MARGIN
        start_col = int(left / tile) - _TILE_MARGIN
        end_col = int(right / tile) + _TILE_MARGIN

        for row in range(start_row, end_row + 1):
            for col in range(start_col, end_col + 1):
                color = colors.LIGHT_GREEN if (row + col) % 2 == 0 else colors.DARK_GREEN
                top_left = self.target.to_screen((col * tile, row * tile))
                bottom_right = self.target.to_screen(((col + 1) * tile, (row + 1) * tile))
                x0, y0 = math.floor(top_left.x), math.floor(top_left.y)
                x1, y1 = math.ceil(bottom_right.x), math.ceil(bottom_right.y)
                pygame.draw.rect(self.surface, color, pygame.Rect(x0, y0, x1 - x0, y1 - y0))


def main(argv=None):
    """Open the window with a ball on the course and play until closed."""
    parser = argparse.ArgumentParser(prog="minigolf", description="Endless mini golf.")
    parser.add_argument("--width", type=int, default=600, help="window width in pixels")
    parser.add_argument("--height", type=int, default=600, help="window height in pixels")
    args = parser.parse_args(argv)
    if args.width <= 0 or args.height <= 0:
        parser.error("window size must be positive")

    pygame.init()
    try:
        game = Game(args.width, args.height)
        game.add_entity(Ball())
        game.run()
    finally:
        pygame.quit()
    return 0