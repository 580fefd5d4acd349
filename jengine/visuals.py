"""Entities that draw themselves into the window."""

from __future__ import annotations

from typing import Optional

import pygame

from jengine.entity import Entity
from jengine.renderer import Renderer
from jengine.vector import Vector


class Visual(Entity):
    """An entity with a draw colour, as an (r, g, b, a) tuple."""

    def __init__(self, position: Optional[Vector] = None) -> None:
        super().__init__(position)
        self.color: tuple[int, int, int, int] = (255, 255, 255, 255)


class Square(Visual):
    """A filled rectangle of ``width`` by ``height`` pixels at the global position."""

    def __init__(self, width: int, height: int, position: Optional[Vector] = None) -> None:
        super().__init__(position)
        self.width = width
        self.height = height

    def output(self) -> None:
        renderer = Renderer.get_instance()
        pos = self.global_position
        rect = pygame.Rect(int(pos.x), int(pos.y), self.width, self.height)
        pygame.draw.rect(renderer.surface, self.color, rect)