"""An enemy shot: falls straight down and dies below the screen."""

from __future__ import annotations

from .geometry import WIN_HEIGHT, Point, Rect
from .world import GameObject

ENEMY_BEAM_IMAGE_PATH = "Assets/ebeams.png"
ENEMY_BEAM_WIDTH = 11
ENEMY_BEAM_HEIGHT = 21
ENEMY_BEAM_SPEED = 250.0


class EnemyBeam(GameObject):
    """A falling beam that starts out fired."""

    def __init__(self, world, pos=None):
        super().__init__(world)
        self.image = world.renderer.load_image(ENEMY_BEAM_IMAGE_PATH)
        self.pos = Point(-10.0, -10.0) if pos is None else Point(pos.x, pos.y)
        self.speed = ENEMY_BEAM_SPEED
        self.image_size = Point(ENEMY_BEAM_WIDTH, ENEMY_BEAM_HEIGHT)
        self.fired = True

    def update(self):
        """Fall; below the screen the beam stops and dies."""
        self.pos.y += self.speed * self.world.dt
        if self.pos.y > WIN_HEIGHT:
            self.fired = False
            self.alive = False

    def draw(self, renderer):
        """Draw the beam if it is fired."""
        if self.fired:
            renderer.draw_image(
                self.image, self.pos.x, self.pos.y, self.image_size.x, self.image_size.y
            )

    def set_pos(self, x, y):
        """Move the beam to the given position."""
        self.pos = Point(x, y)

    def rect(self):
        """Return the beam's bounding rectangle."""
        return Rect(self.pos.x, self.pos.y, self.image_size.x, self.image_size.y)