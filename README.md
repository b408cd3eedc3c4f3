# minigolf

A top-down mini golf game that never ends. The ball starts on a checkered
green, and walls are laid out ahead of it as it travels, forming a winding
path that keeps turning in new, random directions.

## Installing

```
pip install .
```

This pulls in `pygame`, which draws the game and reads the mouse.

## Playing

```
minigolf
```

The window is 600 by 600 pixels unless you ask for another size:

```
minigolf --width 1280 --height 720
```

- Press the left mouse button on the ball and drag away from it. A red line
  and an arrowhead at the ball show the drag; the ball will go the opposite
  way from it.
- Release to shoot. The farther you dragged, the faster the ball goes.
- The ball slows down on the grass and bounces off walls, losing some speed
  on each bounce.
- The view follows the ball. Once the ball is more than 300 units from where
  walls were last laid out, three more path segments are walled in ahead
  (up to 100 walls in all).
- Close the window to quit.

The view is fitted to the standard aspect ratio (4:3, 16:9, 16:10, 21:9 or
32:9) closest to the window's shape, both at start and when the window is
resized. The height of world shown stays the same as at start, except that
16:9 windows are zoomed out a little to show more.

Particles add a little life: white sparks when the ball hits a wall hard, a
burst of green when you make a strong shot, and a green trail behind a moving
ball.

## What it does not do

There are no holes, no stroke count and no score: the course is an endless
path to roll along. There is no sound, and no menus or settings screen.

## Using it as a library

The pieces can be used on their own, without opening a window:

```python
import random

from minigolf.ball import Ball
from minigolf.obstacle import Obstacle
from minigolf.obstacle_generator import ObstacleGenerator
from minigolf.physics import PhysicsSystem

ball = Ball(20.0)
wall = Obstacle((400.0, 300.0), (20.0, 200.0), (100, 100, 100))

physics = PhysicsSystem()
physics.update([ball, wall], 1 / 144)
physics.check_collisions(ball, [wall])

generator = ObstacleGenerator(random.Random(1))
```

- `minigolf.entity` holds the `Entity` base class, and `View` and
  `RenderTarget`, which map world coordinates to pixels.
- `minigolf.obstacle` has `Obstacle`, a rotatable rectangle, with
  `check_circle_collision` returning a `Collision` (point and normal) or
  `None`.
- `minigolf.particle_system` has `ParticleSystem`, which spawns, updates and
  drops `Particle` objects from `minigolf.particle`.
- `minigolf.input_handler` has `InputHandler`, which passes pygame mouse
  events, in world coordinates, to the first entity that takes them.
- `minigolf.resources` has `ResourceManager`, a cache of images, fonts and
  sounds; a file that cannot be loaded raises `ResourceError`.
- `Game` in `minigolf.game` ties these together with the tiled background.
  `main` in the same module is what the `minigolf` command runs.

`ObstacleGenerator` and `ParticleSystem` take a `random.Random` so that runs
can be repeated; without one they make their own.

## Running the tests

```
pip install ".[test]"
pytest
```