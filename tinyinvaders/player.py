"""The player's ship: moves left and right, shoots, and dies to enemy beams."""

from __future__ import annotations

from .bullet import Bullet
from .effect import Effect
from .enemy_beam import EnemyBeam
from .geometry import WIN_HEIGHT, WIN_WIDTH, Point, Rect, check_hit
from .input import Key
from .world import GameObject

PLAYER_IMAGE_PATH = "Assets/tiny_ship5.png"
PLAYER_SPEED = 200.0
PLAYER_WIDTH = 48
PLAYER_HEIGHT = 48
PLAYER_BASE_MARGIN = 32
PLAYER_INIT_X = float(WIN_WIDTH // 2 - PLAYER_WIDTH // 2)
PLAYER_INIT_Y = float(WIN_HEIGHT - PLAYER_HEIGHT - PLAYER_BASE_MARGIN)
BULLET_MARGIN = 17
BULLET_INTERVAL = 0.5
BULLET_COUNT = 5
_OFF_SCREEN = -1000.0


class Player(GameObject):
    """The player's ship, with a fixed pool of bullets."""

    def __init__(self, world, keys):
        super().__init__(world)
        # Bullets join the world first; the ship comes after them.
        world.pending.remove(self)
        self.keys = keys
        self.image = world.renderer.load_image(PLAYER_IMAGE_PATH)
        self.x = PLAYER_INIT_X
        self.y = PLAYER_INIT_Y
        self.speed = PLAYER_SPEED
        self.image_size = Point(PLAYER_WIDTH, PLAYER_HEIGHT)
        self.dead = False
        self.bullet_timer = 0.0
        self.bullets = [Bullet(world, -10, -10) for _ in range(BULLET_COUNT)]
        world.add(self)

    def update(self):
        """Move with held arrow keys, die on beam hits, and shoot on space."""
        if self.dead:
            return
        dt = self.world.dt
        next_x = self.x
        if self.keys.keep_count(Key.LEFT):
            next_x = self.x - self.speed * dt
        if self.keys.keep_count(Key.RIGHT):
            next_x = self.x + self.speed * dt
        if 0 <= next_x <= WIN_WIDTH - PLAYER_WIDTH:
            self.x = next_x

        for obj in self.world:
            if isinstance(obj, EnemyBeam) and obj.fired and check_hit(self.rect(), obj.rect()):
                self.kill()
                obj.fired = False
                break

        if self.bullet_timer > 0.0:
            self.bullet_timer -= dt

        if self.keys.is_key_down(Key.SPACE) and self.bullet_timer <= 0.0:
            self.shoot()
            self.bullet_timer = BULLET_INTERVAL

    def draw(self, renderer):
        """Draw the ship unless it is dead."""
        if self.dead:
            return
        renderer.draw_image(self.image, self.x, self.y, PLAYER_WIDTH, PLAYER_HEIGHT)

    def _ready_bullet(self):
        return next((bullet for bullet in self.bullets if not bullet.fired), None)

    def shoot(self):
        """Fire the first bullet that is not in flight, if any."""
        bullet = self._ready_bullet()
        if bullet is not None:
            bullet.set_pos(self.x + BULLET_MARGIN, self.y)
            bullet.fired = True

    def kill(self):
        """Die once: leave an explosion and move off screen."""
        if self.dead:
            return
        self.dead = True
        Effect(self.world, Point(self.x, self.y))
        self.x = _OFF_SCREEN
        self.y = _OFF_SCREEN

    def rect(self):
        """Return the ship's bounding rectangle."""
        return Rect(self.x, self.y, self.image_size.x, self.image_size.y)