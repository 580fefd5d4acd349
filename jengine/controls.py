"""Translation of window events into key and mouse callbacks."""

from __future__ import annotations

from typing import Callable, ClassVar, Optional

import pygame

from jengine.objects import Object
from jengine.vector import Vector

KeyHandler = Callable[[str], None]
MouseHandler = Callable[[Vector], None]

_LEFT, _MIDDLE, _RIGHT = 1, 2, 3


class Controls(Object):
    """Polls the event queue and dispatches to the registered handlers.

    Key handlers receive the key's name; mouse handlers receive the cursor
    position as a Vector. ``on_stop`` is called when the window is closed.
    """

    _instance: ClassVar[Optional[Controls]] = None

    def __init__(self) -> None:
        super().__init__("Controls")
        self.on_stop: Optional[Callable[[], None]] = None
        self.key_press_handlers: list[KeyHandler] = []
        self.key_release_handlers: list[KeyHandler] = []
        self.mouse_left_click_handlers: list[MouseHandler] = []
        self.mouse_left_release_handlers: list[MouseHandler] = []
        self.mouse_right_click_handlers: list[MouseHandler] = []
        self.mouse_right_release_handlers: list[MouseHandler] = []
        self.mouse_middle_click_handlers: list[MouseHandler] = []
        self.mouse_middle_release_handlers: list[MouseHandler] = []
        self.mouse_movement_handlers: list[MouseHandler] = []

    @classmethod
    def get_instance(cls) -> Controls:
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

    def input(self) -> None:
        for event in pygame.event.get():
            self.handle_event(event)

    def handle_event(self, event: pygame.event.Event) -> None:
        """Dispatch a single event to the matching handlers."""
        if event.type == pygame.QUIT:
            if self.on_stop is not None:
                self.on_stop()
        elif event.type == pygame.KEYDOWN:
            _invoke(self.key_press_handlers, pygame.key.name(event.key))
        elif event.type == pygame.KEYUP:
            _invoke(self.key_release_handlers, pygame.key.name(event.key))
        elif event.type == pygame.MOUSEBUTTONDOWN:
            handlers = {
                _LEFT: self.mouse_left_click_handlers,
                _RIGHT: self.mouse_right_click_handlers,
                _MIDDLE: self.mouse_middle_click_handlers,
            }.get(event.button)
            if handlers is not None:
                _invoke(handlers, _position(event))
        elif event.type == pygame.MOUSEBUTTONUP:
            handlers = {
                _LEFT: self.mouse_left_release_handlers,
                _RIGHT: self.mouse_right_release_handlers,
                _MIDDLE: self.mouse_middle_release_handlers,
            }.get(event.button)
            if handlers is not None:
                _invoke(handlers, _position(event))
        elif event.type == pygame.MOUSEMOTION:
            _invoke(self.mouse_movement_handlers, _position(event))


def _position(event: pygame.event.Event) -> Vector:
    x, y = event.pos
    return Vector(float(x), float(y))


def _invoke(handlers: list, value: object) -> None:
    for handler in handlers:
        handler(value)