"""Base entity type and the view that maps world coordinates to the screen."""

from __future__ import annotations

from abc import ABC, abstractmethod

from pygame.math import Vector2


class View:
    """A rectangle of the world, stretched over the whole screen."""

    def __init__(self, center, size):
        self.center = Vector2(center)
        self.size = Vector2(size)
        if self.size.x <= 0 or self.size.y <= 0:
            raise ValueError(f"view size must be positive, got {tuple(self.size)}")

    def scale(self, screen_size):
        """Pixels per world unit along x and y."""
        width, height = screen_size
        return width / self.size.x, height / self.size.y

    def _top_left(self):
        return self.center - self.size / 2

    def world_to_screen(self, point, screen_size):
        """Map a world point to a pixel position."""
        sx, sy = self.scale(screen_size)
        origin = self._top_left()
        point = Vector2(point)
        return Vector2((point.x - origin.x) * sx, (point.y - origin.y) * sy)

    def screen_to_world(self, pixel, screen_size):
        """Map a pixel position back to a world point."""
        sx, sy = self.scale(screen_size)
        origin = self._top_left()
        pixel = Vector2(pixel)
        return Vector2(pixel.x / sx + origin.x, pixel.y / sy + origin.y)


class RenderTarget:
    """A surface together with the view used to draw onto it."""

    def __init__(self, surface, view):
        self.surface = surface
        self.view = view

    @property
    def screen_size(self):
        return self.surface.get_size()

    def to_screen(self, point):
        return self.view.world_to_screen(point, self.screen_size)

    def to_world(self, pixel):
        return self.view.screen_to_world(pixel, self.screen_size)

    def scale_length(self, length):
        """Convert a world length to pixels, averaging the two axis scales."""
        sx, sy = self.view.scale(self.screen_size)
        return length * (sx + sy) / 2


class Entity(ABC):
    """Something that lives in the game world, is updated and drawn."""

    @abstractmethod
    def update(self, delta_time):
        """Advance the entity by delta_time seconds."""

    @abstractmethod
    def draw(self, target):
        """Draw the entity onto a RenderTarget."""

    @abstractmethod
    def draw_shadow(self, target):
        """Draw the entity's shadow onto a RenderTarget."""

    def handle_mouse_press(self, mouse_pos):
        """Return True if the entity consumed the press."""
        return False

    def handle_mouse_release(self, mouse_pos):
        """Return True if the entity consumed the release."""
        return False

    def handle_mouse_move(self, mouse_pos):
        """Return True if the entity consumed the move."""
        return False