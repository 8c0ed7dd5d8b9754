"""Game objects and the world that updates, draws and reaps them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterator, TypeVar

T = TypeVar("T", bound="GameObject")


class GameObject(ABC):
    """Something that lives in a World; it joins the world on creation."""

    def __init__(self, world):
        self.world = world
        self.alive = True
        world.add(self)

    @abstractmethod
    def update(self):
        """Advance this object by the world's current frame time."""

    @abstractmethod
    def draw(self, renderer):
        """Draw this object with the given renderer."""

    def destroy(self):
        """Hook run once when the world drops this object after it died."""


class World:
    """Holds the live objects, the objects waiting to join, and the frame time."""

    def __init__(self, renderer):
        self.renderer = renderer
        self.dt = 0.0
        self.objects: list[GameObject] = []
        self.pending: list[GameObject] = []

    def __iter__(self) -> Iterator[GameObject]:
        return iter(self.objects)

    def __len__(self) -> int:
        return len(self.objects)

    def add(self, obj):
        """Queue an object; it joins at the next flush."""
        self.pending.append(obj)

    def flush_new(self):
        """Move queued objects into the live list, keeping their order."""
        self.objects.extend(self.pending)
        self.pending.clear()

    def update_all(self):
        """Update every live object in order."""
        for obj in list(self.objects):
            obj.update()

    def draw_all(self, renderer):
        """Draw every live object in order."""
        for obj in self.objects:
            obj.draw(renderer)

    def remove_dead(self):
        """Drop dead objects, run their destroy hooks and return them."""
        dead = [obj for obj in self.objects if not obj.alive]
        self.objects = [obj for obj in self.objects if obj.alive]
        for obj in dead:
            obj.destroy()
        return dead

    def clear(self):
        """Forget every live object; queued ones stay queued."""
        self.objects.clear()

    def find(self, kind: type[T]) -> T | None:
        """Return the first live object of the given type, or None."""
        return next((obj for obj in self.objects if isinstance(obj, kind)), None)