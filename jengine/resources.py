"""In-memory store of font data."""

from __future__ import annotations

import io
from typing import ClassVar, Optional

from jengine.objects import Object


class Resources(Object):
    """Holds font data loaded from memory, as readable streams keyed by name."""

    _instance: ClassVar[Optional[Resources]] = None

    def __init__(self) -> None:
        super().__init__("Resources")
        self.fonts: dict[str, io.BytesIO] = {}

    @classmethod
    def get_instance(cls) -> Resources:
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

    def load_font(self, name: str, data: bytes) -> None:
        """Store ``data`` as the font called ``name``. Raises ValueError if empty."""
        if not data:
            raise ValueError("font data must not be empty")
        previous = self.fonts.get(name)
        self.fonts[name] = io.BytesIO(bytes(data))
        if previous is not None:
            previous.close()

    def clean_fonts(self) -> None:
        """Close and drop every stored font."""
        for stream in self.fonts.values():
            stream.close()
        self.fonts.clear()

    def destroy(self) -> None:
        self.clean_fonts()
        super().destroy()