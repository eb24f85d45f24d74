"""
pi_keycodec — readable text form for keyboard events in config files.

Keys are written as one character or a name ("a", "/", "Up", "PageDown"),
modifiers as "+"-joined keywords ("ALT+CONTROL", "NONE").
"""
from .config import (
    KeyBindings,
    dump_config,
    dumps_config,
    get_config_dir,
    get_keybindings_path,
    load_config,
    load_keybindings,
)
from .errors import DecodingError, EncodingError, KeyBindingsConfigError
from .events import Char, FunctionKey, KeyCode, KeyEvent, KeyEventKind, KeyEventState, KeyModifiers, NamedKey
from .key_code import KEY_NAMES, decode_key_code, encode_key_code
from .key_event import (
    ConfigKeyCode,
    ConfigKeyEvent,
    ConfigKeyModifiers,
    KeyBindingRecord,
    decode_key_event,
    encode_key_event,
)
from .key_modifiers import MODIFIER_KEYWORDS, decode_key_modifiers, encode_key_modifiers, modifier_names

__all__ = [
    # Events
    "Char",
    "FunctionKey",
    "KeyCode",
    "KeyEvent",
    "KeyEventKind",
    "KeyEventState",
    "KeyModifiers",
    "NamedKey",
    # Errors
    "DecodingError",
    "EncodingError",
    "KeyBindingsConfigError",
    # Codecs
    "KEY_NAMES",
    "MODIFIER_KEYWORDS",
    "decode_key_code",
    "encode_key_code",
    "decode_key_modifiers",
    "encode_key_modifiers",
    "modifier_names",
    "KeyBindingRecord",
    "decode_key_event",
    "encode_key_event",
    "ConfigKeyCode",
    "ConfigKeyEvent",
    "ConfigKeyModifiers",
    # Config
    "KeyBindings",
    "dump_config",
    "dumps_config",
    "get_config_dir",
    "get_keybindings_path",
    "load_config",
    "load_keybindings",
]
