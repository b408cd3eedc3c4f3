"""Per-frame entity updates and ball-versus-obstacle collisions."""

from __future__ import annotations


class PhysicsSystem:
    """Advances entities and resolves collisions between the ball and walls."""

    gravity = 0.0
    friction = 0.99

    def update(self, entities, delta_time):
        """Advance every entity by delta_time seconds."""
        for entity in entities:
            entity.update(delta_time)

    def check_collisions(self, ball, obstacles):
        """Collide the ball against each obstacle in turn; no ball, no work."""
        if ball is None:
            return
        for obstacle in obstacles:
            ball.check_collision(obstacle)