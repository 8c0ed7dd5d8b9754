"""A short explosion animation."""

from __future__ import annotations

from .geometry import Point
from .world import GameObject

EFFECT_IMAGE_PATH = "Assets/explosion.png"
EFFECT_SIZE = 48
ANIME_TIME = 1.0
FRAME_COUNT = 9
GRID_DIVISIONS = 3
FRAME_TIME = ANIME_TIME / FRAME_COUNT


class Effect(GameObject):
    """An explosion that plays its frames and dies after ANIME_TIME seconds."""

    def __init__(self, world, pos):
        super().__init__(world)
        self.pos = Point(pos.x, pos.y)
        self.frames = world.renderer.load_frames(
            EFFECT_IMAGE_PATH,
            FRAME_COUNT,
            GRID_DIVISIONS,
            GRID_DIVISIONS,
            EFFECT_SIZE,
            EFFECT_SIZE,
        )
        self.anim_timer = ANIME_TIME
        self.frame_timer = FRAME_TIME
        self.frame = 0

    def update(self):
        """Run down the timers, advancing frames and dying when time is up."""
        dt = self.world.dt
        self.anim_timer -= dt
        if self.anim_timer <= 0:
            self.alive = False

        self.frame_timer -= dt
        if self.frame_timer < 0:
            self.frame = min(self.frame + 1, FRAME_COUNT - 1)
            self.frame_timer = FRAME_TIME - self.frame_timer

    def draw(self, renderer):
        """Draw the current frame."""
        renderer.draw_image(
            self.frames[self.frame], self.pos.x, self.pos.y, EFFECT_SIZE, EFFECT_SIZE
        )