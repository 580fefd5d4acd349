"""A small 2D game engine on pygame: a scene tree of objects, entities, timers and collision shapes."""

__version__ = "1.0.0"