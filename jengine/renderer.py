"""The game window and its drawing surface."""

from __future__ import annotations

from typing import ClassVar, Optional

import pygame

from jengine.objects import Object
from jengine.vector import Vector

_DEFAULT_TITLE = "JEngine Game"
_CLEAR_COLOR = (0, 0, 0, 255)


class Renderer(Object):
    """Owns the window; clears it at the start of a frame and presents it at the end."""

    window_size: ClassVar[Vector] = Vector(800, 600)
    _instance: ClassVar[Optional[Renderer]] = None

    def __init__(self) -> None:
        super().__init__("Renderer")
        self.fonts: dict[str, pygame.font.Font] = {}
        try:
            if not pygame.display.get_init():
                pygame.display.init()
            self.surface = pygame.display.set_mode(
                (int(self.window_size.x), int(self.window_size.y)), pygame.SHOWN
            )
        except pygame.error as exc:
            raise RuntimeError("Failed to create window") from exc
        pygame.display.set_caption(_DEFAULT_TITLE)

    @classmethod
    def get_instance(cls) -> Renderer:
        """Return the shared instance, creating the window on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def delete_instance(cls) -> None:
        """Destroy the shared instance and close its window, if there is one."""
        if cls._instance is not None:
            cls._instance.destroy()
            cls._instance = None

    def clear(self) -> None:
        """Fill the whole window with black."""
        self.surface.fill(_CLEAR_COLOR)

    def present(self) -> None:
        """Show what has been drawn since the last clear."""
        pygame.display.flip()

    def set_window_title(self, title: str) -> None:
        pygame.display.set_caption(title)

    def destroy(self) -> None:
        """Destroy the children and close the window."""
        super().destroy()
        self.fonts.clear()
        pygame.display.quit()