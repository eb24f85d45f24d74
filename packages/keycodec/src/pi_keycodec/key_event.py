"""
Key event codec — composes the key and modifier codecs.

A KeyEvent is written as a two-field record:

    code: "Up"
    modifiers: "ALT+CONTROL"

``modifiers`` may be omitted and then means no modifiers. Kind and state are
never written; decoding always yields a plain press with no extra state.

The ``Config*`` annotated types plug the codecs into any pydantic model:

    class KeyBoard(BaseModel):
        move_up: ConfigKeyEvent
        move_down: ConfigKeyEvent
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any

from pydantic import BaseModel, PlainSerializer, PlainValidator

from .errors import DecodingError
from .events import Char, FunctionKey, KeyCode, KeyEvent, KeyEventKind, KeyEventState, KeyModifiers, NamedKey
from .key_code import decode_key_code, encode_key_code
from .key_modifiers import decode_key_modifiers, encode_key_modifiers

# ─────────────────────────────────────────────────────────────────────────────
# Record
# ─────────────────────────────────────────────────────────────────────────────


class KeyBindingRecord(BaseModel):
    code: str
    modifiers: str | None = None

    model_config = {"frozen": True, "extra": "ignore"}


def encode_key_event(event: KeyEvent) -> KeyBindingRecord:
    return KeyBindingRecord(
        code=encode_key_code(event.code),
        modifiers=encode_key_modifiers(event.modifiers),
    )


def decode_key_event(record: KeyBindingRecord | Mapping[str, Any]) -> KeyEvent:
    """
    Rebuild a KeyEvent from its record.

    Anything serialized for kind or state is ignored; the result is always a
    press with no extra state.
    """
    if not isinstance(record, KeyBindingRecord):
        record = KeyBindingRecord.model_validate(record)

    code = decode_key_code(record.code)
    if record.modifiers is None:
        modifiers = KeyModifiers.NONE
    else:
        modifiers = decode_key_modifiers(record.modifiers)

    return KeyEvent(code, modifiers, KeyEventKind.PRESS, KeyEventState.NONE)


# ─────────────────────────────────────────────────────────────────────────────
# pydantic field types
# ─────────────────────────────────────────────────────────────────────────────


def _validate_key_event(value: Any) -> KeyEvent:
    if isinstance(value, KeyEvent):
        return value
    if isinstance(value, (KeyBindingRecord, Mapping)):
        return decode_key_event(value)
    raise DecodingError(f"Expected a record with `code` and `modifiers`, got {type(value).__name__}")


def _serialize_key_event(event: KeyEvent) -> dict[str, Any]:
    return encode_key_event(event).model_dump()


def _validate_key_code(value: Any) -> KeyCode:
    if isinstance(value, (Char, NamedKey, FunctionKey)):
        return value
    if isinstance(value, str):
        return decode_key_code(value)
    raise DecodingError(f"Expected a key name or character, got {type(value).__name__}")


def _validate_key_modifiers(value: Any) -> KeyModifiers:
    if isinstance(value, KeyModifiers):
        return value
    if isinstance(value, str):
        return decode_key_modifiers(value)
    raise DecodingError(f"Expected a modifier list like ALT+CONTROL, got {type(value).__name__}")


ConfigKeyEvent = Annotated[
    KeyEvent,
    PlainValidator(_validate_key_event),
    PlainSerializer(_serialize_key_event, return_type=dict),
]

ConfigKeyCode = Annotated[
    KeyCode,
    PlainValidator(_validate_key_code),
    PlainSerializer(encode_key_code, return_type=str),
]

ConfigKeyModifiers = Annotated[
    KeyModifiers,
    PlainValidator(_validate_key_modifiers),
    PlainSerializer(encode_key_modifiers, return_type=str),
]
