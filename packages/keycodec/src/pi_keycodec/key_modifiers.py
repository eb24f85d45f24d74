"""
Modifier set codec.

Modifiers are written as keywords joined with "+", e.g. "ALT+CONTROL".
Output order is fixed (ALT, CONTROL, SHIFT, SUPER, HYPER, META) no matter how
the flags were combined; the empty set is written "NONE".
"""
from __future__ import annotations

from .errors import DecodingError
from .events import KeyModifiers

SEPARATOR = "+"
NONE = "NONE"

MODIFIER_KEYWORDS: dict[str, KeyModifiers] = {
    "SHIFT":   KeyModifiers.SHIFT,
    "CONTROL": KeyModifiers.CONTROL,
    "ALT":     KeyModifiers.ALT,
    "SUPER":   KeyModifiers.SUPER,
    "HYPER":   KeyModifiers.HYPER,
    "META":    KeyModifiers.META,
    NONE:      KeyModifiers.NONE,
}

MODIFIER_ORDER: tuple[tuple[str, KeyModifiers], ...] = (
    ("ALT", KeyModifiers.ALT),
    ("CONTROL", KeyModifiers.CONTROL),
    ("SHIFT", KeyModifiers.SHIFT),
    ("SUPER", KeyModifiers.SUPER),
    ("HYPER", KeyModifiers.HYPER),
    ("META", KeyModifiers.META),
)


def modifier_names(modifiers: KeyModifiers) -> list[str]:
    """List the keywords for *modifiers* in canonical order, ["NONE"] if empty."""
    names = [name for name, flag in MODIFIER_ORDER if flag in modifiers]
    if not names:
        names.append(NONE)
    return names


def encode_key_modifiers(modifiers: KeyModifiers) -> str:
    return SEPARATOR.join(modifier_names(modifiers))


def decode_key_modifiers(text: str) -> KeyModifiers:
    """
    Parse a "+"-separated modifier list.

    NONE may be mixed with other keywords and contributes nothing;
    repeated keywords are harmless.
    """
    text = text.strip()
    if not text:
        raise DecodingError("At least one modifier keyword must be provided")

    result = KeyModifiers.NONE
    for token in text.split(SEPARATOR):
        flag = MODIFIER_KEYWORDS.get(token)
        if flag is None:
            raise DecodingError(f"`{token}` is not a valid keyword")
        result |= flag
    return result
