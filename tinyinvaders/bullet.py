"""The player's shot: flies straight up while fired."""

from __future__ import annotations

from .geometry import Point, Rect
from .world import GameObject

BULLET_IMAGE_PATH = "Assets/laserBlue03 1.png"
BULLET_WIDTH = 13
BULLET_HEIGHT = 33
BULLET_SPEED = 200.0


class Bullet(GameObject):
    """A reusable player bullet; it is drawn and collides only while fired."""

    def __init__(self, world, x=0.0, y=0.0):
        super().__init__(world)
        self.image = world.renderer.load_image(BULLET_IMAGE_PATH)
        self.x = float(x)
        self.y = float(y)
        self.speed = BULLET_SPEED
        self.image_size = Point(BULLET_WIDTH, BULLET_HEIGHT)
        self.fired = False

    def update(self):
        """Move up; once above the screen the bullet is ready to fire again."""
        self.y -= self.speed * self.world.dt
        if self.y < 0:
            self.fired = False

    def draw(self, renderer):
        """Draw the bullet if it is fired."""
        if self.fired:
            renderer.draw_image(
                self.image, self.x, self.y, self.image_size.x, self.image_size.y
            )

    def set_pos(self, x, y):
        """Move the bullet to the given position."""
        self.x = x
        self.y = y

    def rect(self):
        """Return the bullet's bounding rectangle."""
        return Rect(self.x, self.y, self.image_size.x, self.image_size.y)