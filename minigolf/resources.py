"""Cache of images, fonts and sounds loaded from disk."""

from __future__ import annotations

import pygame


class ResourceError(RuntimeError):
    """A resource file could not be loaded."""


class ResourceManager:
    """Loads each resource once and hands out the cached object afterwards."""

    _shared = None

    def __init__(self):
        self._textures = {}
        self._fonts = {}
        self._sound_buffers = {}

    @classmethod
    def instance(cls):
        """The process-wide shared manager."""
        if cls._shared is None:
            cls._shared = cls()
        return cls._shared

    @staticmethod
    def _cached(cache, key, kind, filename, loader):
        if key in cache:
            return cache[key]
        try:
            resource = loader()
        except (pygame.error, OSError) as exc:
            raise ResourceError(f"Failed to load {kind}: {filename}") from exc
        cache[key] = resource
        return resource

    def texture(self, filename):
        """An image surface loaded from filename."""
        return self._cached(
            self._textures, filename, "texture", filename,
            lambda: pygame.image.load(filename),
        )

    def font(self, filename, size):
        """A font loaded from filename at the given point size."""

        def load():
            if not pygame.font.get_init():
                pygame.font.init()
            return pygame.font.Font(filename, size)

        return self._cached(self._fonts, (filename, size), "font", filename, load)

    def sound_buffer(self, filename):
        """A sound loaded from filename."""

        def load():
            if not pygame.mixer.get_init():
                pygame.mixer.init()
            return pygame.mixer.Sound(filename)

        return self._cached(self._sound_buffers, filename, "sound buffer", filename, load)

    def clear(self):
        """Forget every cached resource."""
        self._textures.clear()
        self._fonts.clear()
        self._sound_buffers.clear()