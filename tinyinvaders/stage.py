"""The playfield: the player, a formation of enemies and the background."""

from __future__ import annotations

import itertools

from .enemy import Enemy, EnemyType
from .geometry import WIN_HEIGHT, WIN_WIDTH, intersect_rect
from .player import Player
from .world import GameObject

ENEMY_COLUMNS = 10
ENEMY_ROWS = 7
ENEMY_COUNT = ENEMY_COLUMNS * ENEMY_ROWS
ENEMY_ALIGN_X = 55.0
ENEMY_ALIGN_Y = 50.0
ENEMY_LEFT_MARGIN = int((WIN_WIDTH - ENEMY_ALIGN_X * ENEMY_COLUMNS) / 2)
ENEMY_TOP_MARGIN = 75
ROW_TYPES = (
    EnemyType.BOSS,
    EnemyType.KNIGHT,
    EnemyType.MID,
    EnemyType.ZAKO,
    EnemyType.ZAKO,
    EnemyType.ZAKO,
    EnemyType.ZAKO,
)
BACKGROUND_PATH = "Assets/bg.png"


class Stage(GameObject):
    """Builds the player and the enemy formation and resolves bullet hits."""

    def __init__(self, world, keys):
        super().__init__(world)
        self.player = Player(world, keys)
        self.enemies: list[Enemy] = []
        cells = itertools.product(range(ENEMY_ROWS), range(ENEMY_COLUMNS))
        for enemy_id, (row, col) in enumerate(cells):
            enemy = Enemy(world, enemy_id, ROW_TYPES[row])
            x = col * ENEMY_ALIGN_X + ENEMY_LEFT_MARGIN
            enemy.x_move_max = ENEMY_LEFT_MARGIN
            enemy.set_pos(x, row * ENEMY_ALIGN_Y + ENEMY_TOP_MARGIN)
            enemy.x_origin = x
            self.enemies.append(enemy)
        self.background = world.renderer.load_image(BACKGROUND_PATH)

    def update(self):
        """Each fired bullet that overlaps a live enemy kills it and is spent."""
        for enemy in self.enemies:
            for bullet in self.player.bullets:
                if (
                    bullet.fired
                    and enemy.alive
                    and intersect_rect(enemy.rect(), bullet.rect())
                ):
                    bullet.fired = False
                    enemy.alive = False

    def draw(self, renderer):
        """Draw the background over the whole window."""
        renderer.draw_image(self.background, 0, 0, WIN_WIDTH, WIN_HEIGHT)