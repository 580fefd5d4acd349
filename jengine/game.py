"""The scene root and main loop."""

from __future__ import annotations

import contextlib
import time
from typing import ClassVar, Optional

import pygame

from jengine.controls import Controls
from jengine.objects import Object
from jengine.physics import Physics
from jengine.renderer import Renderer
from jengine.resources import Resources


class Game(Object):
    """The root of the scene tree, which runs the fixed-rate frame loop.

    Call :meth:`init` once after obtaining the instance and :meth:`cleanup`
    before deleting it.
    """

    _instance: ClassVar[Optional[Game]] = None

    def __init__(self) -> None:
        super().__init__("Game")
        self.fps = 30.0
        self.running = False
        self._physics: Optional[Physics] = None
        self._renderer: Optional[Renderer] = None
        self._controls: Optional[Controls] = None
        self._resources: Optional[Resources] = None
        self._to_be_deleted: list[Object] = []

    @classmethod
    def get_instance(cls) -> Game:
        """Return the shared instance, creating it and making it the scene root."""
        if cls._instance is None:
            cls._instance = cls()
            Object._set_root(cls._instance)
        return cls._instance

    @classmethod
    def delete_instance(cls) -> None:
        """Destroy the shared instance, if there is one."""
        if cls._instance is not None:
            cls._instance.destroy()
            cls._instance = None
            Object._set_root(None)

    def init(self) -> None:
        """Start the display and font systems and attach the core subsystems."""
        try:
            pygame.display.init()
        except pygame.error as exc:
            raise RuntimeError("Failed to initialize display") from exc
        try:
            pygame.font.init()
        except pygame.error as exc:
            raise RuntimeError("Failed to initialize fonts") from exc

        self._physics = Physics.get_instance()
        self.add_child(self._physics)
        self._renderer = Renderer.get_instance()
        self.add_child(self._renderer)
        self._controls = Controls.get_instance()
        self.add_child(self._controls)
        self._resources = Resources.get_instance()
        self.add_child(self._resources)

        self._controls.on_stop = self.stop

    def cleanup(self) -> None:
        """Destroy every child and subsystem and shut down the display."""
        for subsystem in (self._physics, self._renderer, self._controls, self._resources):
            if subsystem is not None and subsystem.parent is self:
                self.remove_child(subsystem)

        self.delete_children()

        Physics.delete_instance()
        self._physics = None
        Renderer.delete_instance()
        self._renderer = None
        Controls.delete_instance()
        self._controls = None
        Resources.delete_instance()
        self._resources = None

        pygame.font.quit()
        pygame.quit()

    def run(self) -> None:
        """Run frames at the configured rate until :meth:`stop` is called."""
        self.running = True
        frame_duration = 1.0 / self.fps
        while self.running:
            frame_start = time.perf_counter()
            self.input()
            self.update(frame_duration)
            self.output()
            elapsed = time.perf_counter() - frame_start
            if elapsed < frame_duration:
                time.sleep(frame_duration - elapsed)

    def stop(self) -> None:
        self.running = False

    def queue_delete_object(self, obj: Optional[Object]) -> None:
        """Schedule ``obj`` for deletion at the end of the next update."""
        if obj is None:
            return
        self._to_be_deleted.append(obj)

    def set_fps(self, fps: float) -> None:
        self.fps = fps

    def input(self) -> None:
        for child in self.children:
            child.run_input()

    def update(self, dt: float) -> None:
        for child in self.children:
            child.run_update(dt)

        queued, self._to_be_deleted = self._to_be_deleted, []
        for obj in queued:
            parent = obj.parent
            if parent is not None:
                with contextlib.suppress(ValueError):
                    parent.delete_child(obj)
            else:
                obj.destroy()

    def output(self) -> None:
        if self._renderer is None:
            raise RuntimeError("the game has not been initialised")
        self._renderer.clear()
        for child in self.children:
            child.run_output()
        self._renderer.present()