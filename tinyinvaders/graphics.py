"""Renderers: a pygame one for play and a recording one for headless runs."""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pygame

BACKGROUND_COLOR = (0, 0, 0)


def _check_grid(count: int, columns: int, rows: int) -> None:
    if count < 0 or columns <= 0 or rows <= 0:
        raise ValueError("frame grid needs positive columns and rows")
    if count > columns * rows:
        raise ValueError(f"{count} frames do not fit in a {columns}x{rows} grid")


@dataclass(frozen=True)
class DrawCall:
    """One image drawn by a RecordingRenderer."""

    handle: Any
    x: float
    y: float
    width: float
    height: float


class RecordingRenderer:
    """A renderer that draws nothing and remembers every request."""

    def __init__(self):
        self.images: dict[int, str] = {}
        self.draws: list[DrawCall] = []
        self.clears = 0
        self.presents = 0
        self._handles = itertools.count()

    def load_image(self, path):
        """Register an image and return a fresh handle for it."""
        handle = next(self._handles)
        self.images[handle] = path
        return handle

    def load_frames(self, path, count, columns, rows, width, height):
        """Register the first `count` cells of a sprite sheet, one handle each."""
        _check_grid(count, columns, rows)
        return [self.load_image(path) for _ in range(count)]

    def draw_image(self, handle, x, y, width, height):
        """Record a draw; a missing image draws nothing."""
        if handle is None:
            return
        self.draws.append(DrawCall(handle, x, y, width, height))

    def clear(self):
        """Count a screen clear and forget the frame's draws."""
        self.clears += 1
        self.draws.clear()

    def present(self):
        """Count a finished frame."""
        self.presents += 1


class PygameRenderer:
    """Draws onto a pygame surface, loading images relative to `asset_dir`."""

    def __init__(self, surface, asset_dir="."):
        self.surface = surface
        self.asset_dir = Path(asset_dir)

    def _load(self, path):
        try:
            return pygame.image.load(str(self.asset_dir / path))
        except (pygame.error, OSError):
            return None

    def load_image(self, path):
        """Load an image; return None when it cannot be read."""
        return self._load(path)

    def load_frames(self, path, count, columns, rows, width, height):
        """Cut a sprite sheet into cells, row by row, and return the first `count`."""
        _check_grid(count, columns, rows)
        sheet = self._load(path)
        if sheet is None:
            return [None] * count
        cells = itertools.islice(itertools.product(range(rows), range(columns)), count)
        try:
            return [
                sheet.subsurface(pygame.Rect(col * width, row * height, width, height)).copy()
                for row, col in cells
            ]
        except ValueError:
            return [None] * count

    def draw_image(self, handle, x, y, width, height):
        """Draw an image stretched to the given size; None draws nothing."""
        if handle is None:
            return
        size = (max(0, round(width)), max(0, round(height)))
        image = handle if handle.get_size() == size else pygame.transform.scale(handle, size)
        self.surface.blit(image, (round(x), round(y)))

    def clear(self):
        """Fill the surface with the background colour."""
        self.surface.fill(BACKGROUND_COLOR)

    def present(self):
        """Show the finished frame."""
        pygame.display.flip()