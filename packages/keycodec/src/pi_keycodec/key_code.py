"""
Key identity codec.

A key is written as either one literal character ("a", "A", "/") or one of
the reserved names below ("Up", "Enter", "PageDown"). Names are at least two
characters long, so the two forms never collide.
"""
from __future__ import annotations

from .errors import DecodingError, EncodingError
from .events import Char, KeyCode, NamedKey

# ─────────────────────────────────────────────────────────────────────────────
# Name table
# ─────────────────────────────────────────────────────────────────────────────

KEY_NAMES: dict[str, NamedKey] = {
    "Backspace":   NamedKey.BACKSPACE,
    "Enter":       NamedKey.ENTER,
    "Left":        NamedKey.LEFT,
    "Right":       NamedKey.RIGHT,
    "Up":          NamedKey.UP,
    "Down":        NamedKey.DOWN,
    "Home":        NamedKey.HOME,
    "End":         NamedKey.END,
    "PageUp":      NamedKey.PAGE_UP,
    "PageDown":    NamedKey.PAGE_DOWN,
    "Tab":         NamedKey.TAB,
    "BackTab":     NamedKey.BACK_TAB,
    "Delete":      NamedKey.DELETE,
    "Insert":      NamedKey.INSERT,
    "Null":        NamedKey.NULL,
    "Esc":         NamedKey.ESC,
    "CapsLock":    NamedKey.CAPS_LOCK,
    "ScrollLock":  NamedKey.SCROLL_LOCK,
    "NumLock":     NamedKey.NUM_LOCK,
    "PrintScreen": NamedKey.PRINT_SCREEN,
    "Pause":       NamedKey.PAUSE,
    "Menu":        NamedKey.MENU,
    "KeypadBegin": NamedKey.KEYPAD_BEGIN,
}

_NAMES_BY_KEY: dict[NamedKey, str] = {key: name for name, key in KEY_NAMES.items()}

# One-character names would be shadowed by the character form.
if any(len(name) < 2 for name in KEY_NAMES):
    raise RuntimeError("Key names must be at least two characters long")
if len(_NAMES_BY_KEY) != len(KEY_NAMES):
    raise RuntimeError("Each named key must have exactly one name")

_ENCODE_ERROR = "One character or a supported key name (like Up) must be provided"
_DECODE_ERROR = "One character or a valid key name must be provided"


def encode_key_code(code: KeyCode) -> str:
    """Return the text token for a key identity."""
    if isinstance(code, Char):
        return code.char
    if isinstance(code, NamedKey):
        name = _NAMES_BY_KEY.get(code)
        if name is not None:
            return name
    raise EncodingError(f"{_ENCODE_ERROR}, got {code!r}")


def decode_key_code(text: str) -> KeyCode:
    """
    Parse a key token.

    A single character is always a Char, even whitespace; anything longer is
    trimmed and looked up (case-sensitive) in the name table.
    """
    if len(text) == 1:
        return Char(text)

    text = text.strip()
    if not text:
        raise DecodingError(_DECODE_ERROR)
    if len(text) == 1:
        return Char(text)

    key = KEY_NAMES.get(text)
    if key is None:
        raise DecodingError(f"{_DECODE_ERROR}, got {text!r}")
    return key
