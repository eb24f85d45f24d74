"""
Error types raised by the key codecs and the config loader.

EncodingError and DecodingError subclass ValueError so that pydantic turns
them into field-level entries of its ValidationError.
"""
from __future__ import annotations


class EncodingError(ValueError):
    """A key value has no text form."""


class DecodingError(ValueError):
    """A text token is not a valid key or modifier list."""


class KeyBindingsConfigError(Exception):
    """A keybindings file could not be read or validated."""

    def __init__(self, path: str, issues: list[str]) -> None:
        self.path = path
        self.issues = list(issues)
        super().__init__(f"{path}: " + "; ".join(self.issues))
