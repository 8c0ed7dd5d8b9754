"""Screens of the game: the title screen and the playing screen."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .geometry import WIN_HEIGHT, WIN_WIDTH
from .input import Key
from .player import Player
from .stage import Stage

TITLE_IMAGE_PATH = "Assets/Title.png"
DEATH_DELAY = 1.0


class Scene(ABC):
    """A screen; next_scene returns itself to stay, another scene, or None to quit."""

    ended = False

    @abstractmethod
    def update(self):
        """Advance the scene by one frame."""

    @abstractmethod
    def draw(self, renderer):
        """Draw the scene's frame."""

    @abstractmethod
    def next_scene(self):
        """Return the scene to show next."""


class TitleScene(Scene):
    """Shows the title picture until Enter is held."""

    def __init__(self, world, keys):
        self.world = world
        self.keys = keys
        self.timer = 0
        self.ended = False
        self.title_image = world.renderer.load_image(TITLE_IMAGE_PATH)

    def update(self):
        """Count frames and note when Enter is held."""
        self.timer += 1
        if self.keys.is_pressed(Key.RETURN):
            self.ended = True

    def draw(self, renderer):
        """Draw the title picture on a cleared screen."""
        renderer.clear()
        renderer.draw_image(self.title_image, 0, 0, WIN_WIDTH, WIN_HEIGHT)
        renderer.present()

    def next_scene(self):
        """Start the game while Enter is held, otherwise stay."""
        if self.keys.is_pressed(Key.RETURN):
            return GameScene(self.world, self.keys)
        return self


class GameScene(Scene):
    """Runs a stage until Escape is held or a second has passed since the player died."""

    def __init__(self, world, keys):
        self.world = world
        self.keys = keys
        self.timer = 0
        self.ended = False
        self.death_timer = -1.0
        self.stage = Stage(world, keys)

    def update(self):
        """Watch for the player's death and for Escape."""
        self.timer += 1
        player = self.world.find(Player)
        if player is not None and player.dead:
            if self.death_timer < 0:
                self.death_timer = DEATH_DELAY
            self.death_timer -= self.world.dt
            if self.death_timer <= 0:
                self.ended = True
        if self.keys.is_pressed(Key.ESCAPE):
            self.ended = True

    def draw(self, renderer):
        """Draw every live object on a cleared screen."""
        renderer.clear()
        self.world.draw_all(renderer)
        renderer.present()

    def next_scene(self):
        """Return None once the game is over, otherwise stay."""
        return None if self.ended else self