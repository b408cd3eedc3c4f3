"""Turns window events into mouse actions on entities."""

from __future__ import annotations

import pygame


class InputHandler:
    """Dispatches mouse events, in world coordinates, to the first entity that takes them."""

    def __init__(self, target):
        self.target = target

    def map_pixel_to_coords(self, pixel_pos):
        """Convert a pixel position to a world position using the target's view."""
        return self.target.to_world(pixel_pos)

    @staticmethod
    def _dispatch(entities, handler_name, mouse_pos):
        for entity in entities:
            if getattr(entity, handler_name)(mouse_pos):
                break

    def process_events(self, events, entities):
        """Handle the events; return False once the window is asked to close."""
        for event in events:
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.MOUSEBUTTONDOWN and event.button == pygame.BUTTON_LEFT:
                self._dispatch(entities, "handle_mouse_press", self.map_pixel_to_coords(event.pos))
            elif event.type == pygame.MOUSEBUTTONUP:
                self._dispatch(entities, "handle_mouse_release", self.map_pixel_to_coords(event.pos))
            elif event.type == pygame.MOUSEMOTION:
                self._dispatch(entities, "handle_mouse_move", self.map_pixel_to_coords(event.pos))
        return True