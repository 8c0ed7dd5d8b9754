"""The game loop and the command that opens a window and plays."""

from __future__ import annotations

import argparse

from .geometry import WIN_HEIGHT, WIN_WIDTH
from .input import Key, KeyState
from .scenes import TitleScene
from .world import World

FRAME_WAIT_MS = 16
WINDOW_TITLE = "TITLE"


class Game:
    """Owns the world, keyboard state and current scene, and runs frames."""

    def __init__(self, renderer):
        self.renderer = renderer
        self.world = World(renderer)
        self.keys = KeyState()
        self.scene = TitleScene(self.world, self.keys)
        self.running = True

    def step(self, pressed, dt):
        """Run one frame with the held keys and elapsed seconds; False once over."""
        if not self.running:
            return False
        self.renderer.clear()
        self.keys.update(pressed)
        self.world.dt = dt
        self.scene.update()
        self.scene.draw(self.renderer)

        nxt = self.scene.next_scene()
        if nxt is not self.scene:
            self.scene = nxt
            self.world.clear()
            if nxt is None:
                self.running = False
                return False

        self.world.flush_new()
        self.world.update_all()
        self.world.remove_dead()
        self.renderer.present()
        return True


def _held_keys(pygame):
    mapping = {
        pygame.K_LEFT: Key.LEFT,
        pygame.K_RIGHT: Key.RIGHT,
        pygame.K_SPACE: Key.SPACE,
        pygame.K_RETURN: Key.RETURN,
        pygame.K_ESCAPE: Key.ESCAPE,
    }
    state = pygame.key.get_pressed()
    return {key for code, key in mapping.items() if state[code]}


def main(argv=None):
    """Open a window and play until the game ends or the window closes."""
    parser = argparse.ArgumentParser(prog="tinyinvaders", description="Play the game.")
    parser.add_argument("--assets", default=".", help="directory holding the Assets folder")
    args = parser.parse_args(argv)

    import pygame

    from .graphics import PygameRenderer

    pygame.init()
    try:
        surface = pygame.display.set_mode((WIN_WIDTH, WIN_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        game = Game(PygameRenderer(surface, args.assets))
        previous = pygame.time.get_ticks()
        while True:
            if any(event.type == pygame.QUIT for event in pygame.event.get()):
                break
            now = pygame.time.get_ticks()
            if not game.step(_held_keys(pygame), (now - previous) / 1000.0):
                break
            pygame.time.wait(FRAME_WAIT_MS)
            previous = now
    finally:
        pygame.quit()
    return 0