"""Errors raised by redirpath path values."""

from __future__ import annotations


class EmbeddedNulError(ValueError):
    """Raised when a path containing a NUL cannot be made null-terminated."""

    def __init__(self, text: str, position: int | None = None) -> None:
        if position is None:
            position = text.find("\x00")
        self.text = text
        self.position = position
        super().__init__(f"path contains an embedded NUL at index {position}")
