"""Collision shapes that register with the physics registry."""

from __future__ import annotations

import contextlib
from abc import ABC, abstractmethod
from typing import Callable, Optional

from jengine.entity import Entity
from jengine.physics import Physics
from jengine.vector import Vector

CollisionHandler = Callable[[str], None]


class CollisionShape(Entity, ABC):
    """An entity that takes part in collision detection.

    ``in_layer`` is the layer mask the shape lives in; ``view_layer`` is the
    mask of layers it can see. On every update the shape compares its current
    colliders with the previous ones and calls the end handlers for those that
    left, then the start handlers for those that arrived, each with the other
    shape's id.
    """

    def __init__(self, position: Optional[Vector] = None) -> None:
        super().__init__(position)
        self.in_layer = 0x0001
        self.view_layer = 0x0001
        self.colliders: list[str] = []
        self.collision_start_handlers: list[CollisionHandler] = []
        self.collision_end_handlers: list[CollisionHandler] = []
        Physics.get_instance().add_collision_shape(self)

    def destroy(self) -> None:
        """Unregister from the physics registry and destroy the children."""
        with contextlib.suppress(KeyError):
            Physics.get_instance().remove_collision_shape(self)
        super().destroy()

    @abstractmethod
    def collides_with(self, other: CollisionShape) -> bool:
        """Return whether this shape collides with ``other``."""

    @abstractmethod
    def collides_with_point(self, point: Vector) -> bool:
        """Return whether ``point`` lies strictly inside this shape."""

    @abstractmethod
    def collides_with_square(self, square: CollisionShapeSquare) -> bool:
        """Return whether this shape sees and overlaps ``square``."""

    def update(self, dt: float) -> None:
        current = Physics.get_instance().check_collision(self)
        removed = [c for c in self.colliders if c not in current]
        added = [c for c in current if c not in self.colliders]
        self.colliders = current
        for collider in removed:
            for handler in self.collision_end_handlers:
                handler(collider)
        for collider in added:
            for handler in self.collision_start_handlers:
                handler(collider)


class CollisionShapeSquare(CollisionShape):
    """An axis-aligned rectangle anchored at its global position."""

    def __init__(self, position: Optional[Vector] = None, size: Optional[Vector] = None) -> None:
        super().__init__(position)
        self.size = size if size is not None else Vector()

    def collides_with(self, other: CollisionShape) -> bool:
        return other.collides_with_square(self)

    def collides_with_point(self, point: Vector) -> bool:
        pos = self.global_position
        return (
            pos.x < point.x < pos.x + self.size.x
            and pos.y < point.y < pos.y + self.size.y
        )

    def collides_with_square(self, square: CollisionShapeSquare) -> bool:
        if not self.view_layer & square.in_layer:
            return False
        pos = self.global_position
        other = square.global_position
        return (
            pos.x + self.size.x > other.x
            and pos.x < other.x + square.size.x
            and pos.y + self.size.y > other.y
            and pos.y < other.y + square.size.y
        )