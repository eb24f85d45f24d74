"""
Key event model — the in-memory shape of one key press.

A KeyEvent carries a key identity (KeyCode), a modifier bitset
(KeyModifiers), the event kind (press/repeat/release) and extra state bits
(keypad, caps lock, num lock).
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntFlag
from typing import Union

# ─────────────────────────────────────────────────────────────────────────────
# Key identity
# ─────────────────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Char:
    """A single character key, e.g. ``Char("a")`` or ``Char("/")``."""

    char: str

    def __post_init__(self) -> None:
        if not isinstance(self.char, str) or len(self.char) != 1:
            raise ValueError(f"Char expects exactly one character, got {self.char!r}")


class NamedKey(Enum):
    BACKSPACE = "backspace"
    ENTER = "enter"
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    HOME = "home"
    END = "end"
    PAGE_UP = "pageUp"
    PAGE_DOWN = "pageDown"
    TAB = "tab"
    BACK_TAB = "backTab"
    DELETE = "delete"
    INSERT = "insert"
    NULL = "null"
    ESC = "esc"
    CAPS_LOCK = "capsLock"
    SCROLL_LOCK = "scrollLock"
    NUM_LOCK = "numLock"
    PRINT_SCREEN = "printScreen"
    PAUSE = "pause"
    MENU = "menu"
    KEYPAD_BEGIN = "keypadBegin"


@dataclass(frozen=True)
class FunctionKey:
    """F1..F24. Present in the event model but has no text form."""

    number: int


KeyCode = Union[Char, NamedKey, FunctionKey]

# ─────────────────────────────────────────────────────────────────────────────
# Modifiers, kind and state
# ─────────────────────────────────────────────────────────────────────────────


class KeyModifiers(IntFlag):
    NONE = 0
    SHIFT = 1
    CONTROL = 2
    ALT = 4
    SUPER = 8
    HYPER = 16
    META = 32


class KeyEventKind(Enum):
    PRESS = "press"
    REPEAT = "repeat"
    RELEASE = "release"


class KeyEventState(IntFlag):
    NONE = 0
    KEYPAD = 1
    CAPS_LOCK = 2
    NUM_LOCK = 4


@dataclass(frozen=True)
class KeyEvent:
    code: KeyCode
    modifiers: KeyModifiers = KeyModifiers.NONE
    kind: KeyEventKind = KeyEventKind.PRESS
    state: KeyEventState = KeyEventState.NONE

    @classmethod
    def char(cls, char: str, modifiers: KeyModifiers = KeyModifiers.NONE) -> "KeyEvent":
        """Shortcut for ``KeyEvent(Char(char), modifiers)``."""
        return cls(Char(char), modifiers)
