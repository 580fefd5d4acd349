"""Identifier generation for scene objects."""

import uuid


def generate_uuid() -> str:
    """Return a new random version-4 UUID in its canonical string form."""
    return str(uuid.uuid4())