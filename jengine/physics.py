"""Registry of collision shapes and pairwise collision queries."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, Optional

from jengine.objects import Object

if TYPE_CHECKING:
    from jengine.collision import CollisionShape


class Physics(Object):
    """Process-wide registry of collision shapes, keyed by object id."""

    _instance: ClassVar[Optional[Physics]] = None

    def __init__(self) -> None:
        super().__init__("Physics")
        self._shapes: dict[str, CollisionShape] = {}

    @classmethod
    def get_instance(cls) -> Physics:
        """Return the shared instance, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def delete_instance(cls) -> None:
        """Destroy the shared instance, if there is one."""
        if cls._instance is not None:
            cls._instance.destroy()
            cls._instance = None

    def add_collision_shape(self, shape: CollisionShape) -> None:
        """Register ``shape``. Raises ValueError if its id is already registered."""
        if shape.id in self._shapes:
            raise ValueError(f"collision shape {shape.id} is already registered")
        self._shapes[shape.id] = shape

    def remove_collision_shape(self, shape: CollisionShape) -> None:
        """Unregister ``shape``. Raises KeyError if it is not registered."""
        if self._shapes.get(shape.id) is not shape:
            raise KeyError(shape.id)
        del self._shapes[shape.id]

    def check_collision(self, shape: CollisionShape) -> list[str]:
        """Return the ids of every other registered shape that ``shape`` collides with."""
        return [
            shape_id
            for shape_id, other in self._shapes.items()
            if other is not shape and shape.collides_with(other)
        ]