"""
Root conftest.py — shared fixtures for the keycodec tests.

Fixtures:
  keyboard_model   — a pydantic model with four ConfigKeyEvent fields
  keyboard         — an instance of it (move_up/down/left/right)
  keyboard_data    — the same bindings as plain record dicts
"""
from __future__ import annotations

from typing import Any

import pytest
from pydantic import BaseModel

from pi_keycodec import ConfigKeyEvent, KeyEvent, KeyModifiers, NamedKey


# ---------------------------------------------------------------------------
# Keyboard block
# ---------------------------------------------------------------------------

class KeyBoard(BaseModel):
    move_up: ConfigKeyEvent
    move_down: ConfigKeyEvent
    move_left: ConfigKeyEvent
    move_right: ConfigKeyEvent


@pytest.fixture
def keyboard_model() -> type[KeyBoard]:
    return KeyBoard


@pytest.fixture
def keyboard() -> KeyBoard:
    return KeyBoard(
        move_up=KeyEvent(NamedKey.UP, KeyModifiers.NONE),
        move_down=KeyEvent(NamedKey.DOWN, KeyModifiers.ALT),
        move_left=KeyEvent(NamedKey.LEFT, KeyModifiers.ALT | KeyModifiers.CONTROL),
        move_right=KeyEvent(NamedKey.RIGHT, KeyModifiers.NONE | KeyModifiers.SUPER),
    )


@pytest.fixture
def keyboard_data() -> dict[str, Any]:
    return {
        "move_up": {"code": "Up", "modifiers": "NONE"},
        "move_down": {"code": "Down", "modifiers": "ALT"},
        "move_left": {"code": "Left", "modifiers": "ALT+CONTROL"},
        "move_right": {"code": "Right", "modifiers": "SUPER"},
    }
