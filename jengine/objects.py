"""The scene-tree node that every engine object derives from."""

from __future__ import annotations

from typing import Any, ClassVar, Optional

from jengine.ids import generate_uuid


class Object:
    """A node in the scene tree with a unique id, a parent and children.

    Subclasses override :meth:`input`, :meth:`update` and :meth:`output`;
    the ``run_*`` methods call these and then recurse into the children.
    """

    _root: ClassVar[Optional[Any]] = None

    def __init__(self, name: str = "") -> None:
        self.name = name
        self._id = generate_uuid()
        self._parent: Optional[Object] = None
        self._children: list[Object] = []

    @classmethod
    def _set_root(cls, root: Optional[Object]) -> None:
        """Register the scene root, which may never become a child."""
        Object._root = root

    @property
    def id(self) -> str:
        return self._id

    @property
    def parent(self) -> Optional[Object]:
        return self._parent

    @property
    def children(self) -> tuple[Object, ...]:
        return tuple(self._children)

    def get_child(self, child_id: str) -> Optional[Object]:
        """Return the direct child with the given id, or None."""
        return next((c for c in self._children if c.id == child_id), None)

    def get_child_by_name(self, name: str) -> Optional[Object]:
        """Return the first direct child with the given name, or None."""
        return next((c for c in self._children if c.name == name), None)

    def _check_candidate(self, child: Optional[Object]) -> Object:
        if child is None:
            raise TypeError("child must be an Object, not None")
        root = Object._root
        if root is not None and root.id == child.id:
            raise ValueError("the scene root cannot be a child")
        return child

    def add_child(self, child: Object) -> None:
        """Attach ``child`` to this node.

        Raises ValueError if it is already a child or is the scene root.
        """
        child = self._check_candidate(child)
        if self.get_child(child.id) is not None:
            raise ValueError(f"object {child.id} is already a child")
        child._parent = self
        self._children.append(child)

    def _index_of(self, child: Object) -> int:
        for index, entry in enumerate(self._children):
            if entry.id == child.id:
                return index
        raise ValueError(f"object {child.id} is not a child")

    def remove_child(self, child: Object) -> None:
        """Detach ``child`` from this node without destroying it."""
        child = self._check_candidate(child)
        index = self._index_of(child)
        child._parent = None
        del self._children[index]

    def delete_child(self, child: Object) -> None:
        """Detach and destroy ``child``. Prefer remove_child with queue_delete."""
        child = self._check_candidate(child)
        index = self._index_of(child)
        self._children[index].destroy()
        del self._children[index]

    def delete_children(self) -> None:
        """Destroy and drop every child."""
        for child in self._children:
            child.destroy()
        self._children.clear()

    def destroy(self) -> None:
        """Release this node and, recursively, all of its children."""
        self.delete_children()

    def queue_delete(self) -> None:
        """Ask the scene root to delete this object at the end of its update."""
        root = Object._root
        if root is None:
            return
        root.queue_delete_object(self)

    def run_input(self) -> None:
        self.input()
        for child in tuple(self._children):
            child.run_input()

    def run_update(self, dt: float) -> None:
        self.update(dt)
        for child in tuple(self._children):
            child.run_update(dt)

    def run_output(self) -> None:
        self.output()
        for child in tuple(self._children):
            child.run_output()

    def input(self) -> None:
        """Handle input for this frame."""

    def update(self, dt: float) -> None:
        """Advance this object by ``dt`` seconds."""

    def output(self) -> None:
        """Draw or emit this object's output for this frame."""