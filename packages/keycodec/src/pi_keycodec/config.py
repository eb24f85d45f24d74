"""
Keybinding files — paths, loading and writing.

Files are JSON (``.json``) or YAML (``.yaml`` / ``.yml``). The default
location is ``~/.pi/keybindings.yaml``; set ``PI_KEYBINDINGS_PATH`` to use a
different file.
"""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, TypeVar

import yaml
from pydantic import BaseModel, RootModel, ValidationError

from .errors import KeyBindingsConfigError
from .events import KeyEvent
from .key_event import ConfigKeyEvent

logger = logging.getLogger(__name__)

APP_NAME: str = "pi"
CONFIG_DIR_NAME: str = ".pi"
KEYBINDINGS_FILE_NAME: str = "keybindings.yaml"

ENV_KEYBINDINGS_PATH: str = f"{APP_NAME.upper()}_KEYBINDINGS_PATH"

_JSON_SUFFIXES = (".json",)
_YAML_SUFFIXES = (".yaml", ".yml")

ModelT = TypeVar("ModelT", bound=BaseModel)


# ============================================================================
# Paths
# ============================================================================


def get_config_dir() -> str:
    """Get the global config directory (~/.pi)."""
    return os.path.join(os.path.expanduser("~"), CONFIG_DIR_NAME)


def get_keybindings_path() -> str:
    """Get the keybindings file path, honoring PI_KEYBINDINGS_PATH."""
    env_path = os.environ.get(ENV_KEYBINDINGS_PATH)
    if env_path:
        return os.path.expanduser(env_path)
    return os.path.join(get_config_dir(), KEYBINDINGS_FILE_NAME)


# ============================================================================
# Models
# ============================================================================


class KeyBindings(RootModel[dict[str, ConfigKeyEvent]]):
    """Action name -> key event, e.g. ``{"move_up": {"code": "Up"}}``."""

    def get(self, action: str) -> KeyEvent | None:
        return self.root.get(action)

    def actions(self) -> list[str]:
        return list(self.root)


# ============================================================================
# Load / dump
# ============================================================================


def _format_of(path: Path) -> str:
    suffix = path.suffix.lower()
    if suffix in _JSON_SUFFIXES:
        return "json"
    if suffix in _YAML_SUFFIXES:
        return "yaml"
    raise KeyBindingsConfigError(str(path), [f"Unsupported file type {suffix or '(none)'!r}, use .json, .yaml or .yml"])


def _format_issues(error: ValidationError) -> list[str]:
    issues = []
    for err in error.errors():
        loc = ".".join(str(part) for part in err["loc"]) or "(root)"
        issues.append(f"{loc}: {err['msg']}")
    return issues


def _read(path: Path) -> Any:
    fmt = _format_of(path)
    try:
        with open(path, encoding="utf-8") as f:
            if fmt == "json":
                return json.load(f)
            return yaml.safe_load(f)
    except FileNotFoundError:
        raise KeyBindingsConfigError(str(path), ["File not found"]) from None
    except (json.JSONDecodeError, yaml.YAMLError, UnicodeDecodeError) as e:
        raise KeyBindingsConfigError(str(path), [f"Could not parse {fmt.upper()}: {e}"]) from e
    except OSError as e:
        raise KeyBindingsConfigError(str(path), [str(e)]) from e


def load_config(path: str | os.PathLike[str], model: type[ModelT] = KeyBindings) -> ModelT:
    """Read a JSON or YAML file and validate it into *model*."""
    path = Path(path)
    data = _read(path)
    if data is None:
        data = {}
    logger.debug("Loaded keybindings from %s", path)
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise KeyBindingsConfigError(str(path), _format_issues(e)) from e


def dump_config(obj: BaseModel, path: str | os.PathLike[str]) -> None:
    """Write *obj* to *path* as JSON or YAML, creating parent dirs as needed."""
    path = Path(path)
    fmt = _format_of(path)
    data = obj.model_dump(mode="json")
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        if fmt == "json":
            json.dump(data, f, indent=2, ensure_ascii=False)
            f.write("\n")
        else:
            yaml.safe_dump(data, f, default_flow_style=False, allow_unicode=True, sort_keys=False)
    logger.debug("Wrote keybindings to %s", path)


def dumps_config(obj: BaseModel, fmt: str = "yaml") -> str:
    """Render *obj* as a JSON or YAML string."""
    data = obj.model_dump(mode="json")
    if fmt == "json":
        return json.dumps(data, indent=2, ensure_ascii=False) + "\n"
    return yaml.safe_dump(data, default_flow_style=False, allow_unicode=True, sort_keys=False)


def load_keybindings(path: str | os.PathLike[str] | None = None) -> KeyBindings:
    """
    Load the user's keybindings.

    When no path is given and the default file does not exist, an empty
    KeyBindings is returned.
    """
    if path is None:
        default_path = get_keybindings_path()
        if not os.path.exists(default_path):
            logger.warning("No keybindings file at %s, using empty bindings", default_path)
            return KeyBindings({})
        path = default_path
    return load_config(path, KeyBindings)
