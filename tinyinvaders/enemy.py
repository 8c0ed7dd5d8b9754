"""Invaders that sway side to side and drop beams."""

from __future__ import annotations

import math
import weakref
from enum import Enum

from .effect import Effect
from .enemy_beam import EnemyBeam
from .geometry import Point, Rect
from .world import GameObject

ENEMY_WIDTH = 48
ENEMY_HEIGHT = 48
ENEMY_INIT_X = 100.0
ENEMY_INIT_Y = 100.0
ENEMY_SPEED = 100.0
SWAY_PERIOD = 10.0
BEAM_INTERVAL = 10.0
_PI = 3.14159265


class EnemyType(Enum):
    """Kinds of enemy, each with its own ship image."""

    ZAKO = "Assets/tiny_ship10.png"
    MID = "Assets/tiny_ship18.png"
    KNIGHT = "Assets/tiny_ship16.png"
    BOSS = "Assets/tiny_ship9.png"

    @property
    def image_path(self):
        return self.value


# One beam timer is shared by every enemy in a world: each enemy's update
# runs it down, and whichever enemy finds it expired fires.
_beam_timers: "weakref.WeakKeyDictionary[object, float]" = weakref.WeakKeyDictionary()


class Enemy(GameObject):
    """An enemy ship swaying around `x_origin` by half of `x_move_max`."""

    def __init__(self, world, enemy_id, kind):
        super().__init__(world)
        self.enemy_id = enemy_id
        self.kind = EnemyType(kind)
        self.image = world.renderer.load_image(self.kind.image_path)
        self.x = ENEMY_INIT_X
        self.y = ENEMY_INIT_Y
        self.speed = ENEMY_SPEED
        self.image_size = Point(ENEMY_WIDTH, ENEMY_HEIGHT)
        self.move_time = 0.0
        self.x_move_max = 0.0
        self.x_origin = 0.0

    def update(self):
        """Sway horizontally and, when the shared timer runs out, drop a beam."""
        dt = self.world.dt
        omega = 2.0 * _PI / SWAY_PERIOD
        self.move_time += dt
        self.x = self.x_origin + self.x_move_max / 2.0 * math.sin(omega * self.move_time)

        timer = _beam_timers.get(self.world, BEAM_INTERVAL)
        if timer < 0:
            EnemyBeam(
                self.world,
                Point(self.x + self.image_size.x / 2, self.y + self.image_size.y),
            )
            timer = BEAM_INTERVAL
        _beam_timers[self.world] = timer - dt

    def draw(self, renderer):
        """Draw the ship."""
        renderer.draw_image(self.image, self.x, self.y, ENEMY_WIDTH, ENEMY_HEIGHT)

    def destroy(self):
        """Leave an explosion where the ship was."""
        Effect(self.world, Point(self.x, self.y))

    def set_pos(self, x, y):
        """Move the ship to the given position."""
        self.x = x
        self.y = y

    def rect(self):
        """Return the ship's bounding rectangle."""
        return Rect(self.x, self.y, self.image_size.x, self.image_size.y)