"""Scene objects that have a position in space."""

from __future__ import annotations

from typing import Optional

from jengine.objects import Object
from jengine.vector import Vector


class Entity(Object):
    """An object with a local position, a derived global position and a velocity.

    The global position is the parent entity's global position plus the local
    position, or just the local position when the parent is not an entity.
    """

    def __init__(
        self, position: Optional[Vector] = None, velocity: Optional[Vector] = None
    ) -> None:
        super().__init__()
        self.velocity = velocity if velocity is not None else Vector()
        self._position = position if position is not None else Vector()
        self._global_position = Vector()
        self.update_global_position()

    @property
    def position(self) -> Vector:
        return self._position

    @position.setter
    def position(self, value: Vector) -> None:
        self._position = value
        self.update_global_position()

    @property
    def global_position(self) -> Vector:
        return self._global_position

    @global_position.setter
    def global_position(self, value: Vector) -> None:
        self._global_position = value

    def update_global_position(self) -> None:
        """Recompute the global position of this entity and its entity descendants."""
        parent = self.parent
        if isinstance(parent, Entity):
            self._global_position = parent._global_position + self._position
        else:
            self._global_position = self._position
        for child in self.children:
            if isinstance(child, Entity):
                child.update_global_position()

    def add_child(self, child: Object) -> None:
        super().add_child(child)
        self.update_global_position()