"""Persistent JSON config helpers.

Stores prompt defaults (page size, loop behavior, theme name). Selection state
is never persisted. Malformed or missing config falls back to built-in
defaults.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from .ui_theme import normalize_theme_name

logger = logging.getLogger(__name__)

APP_NAME = "stagepick"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
THEME_ENV_VAR = "STAGEPICK_THEME"

DEFAULT_PAGE_SIZE = 20
DEFAULT_LOOP = False


@dataclass(frozen=True)
class PromptDefaults:
    """Prompt options resolved from config, before CLI flags are applied."""

    page_size: int = DEFAULT_PAGE_SIZE
    loop: bool = DEFAULT_LOOP
    theme: str | None = None


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.warning("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Any filesystem/serialization error is logged and otherwise ignored to keep
    runtime behavior non-fatal when config cannot be written.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except (OSError, TypeError, ValueError) as exc:
        logger.warning("could not write config %s: %s", CONFIG_PATH, exc)


def _coerce_page_size(value: object) -> int:
    """Accept positive integers only; booleans and other types fall back."""
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        return DEFAULT_PAGE_SIZE
    return value


def load_prompt_defaults() -> PromptDefaults:
    """Resolve prompt defaults from config file and environment."""
    data = load_config()
    loop = data.get("loop")
    theme = data.get("theme")
    if not isinstance(theme, str) or not theme.strip():
        theme = os.environ.get(THEME_ENV_VAR) or None
    return PromptDefaults(
        page_size=_coerce_page_size(data.get("page_size")),
        loop=loop if isinstance(loop, bool) else DEFAULT_LOOP,
        theme=normalize_theme_name(theme) if theme else None,
    )


def save_prompt_defaults(defaults: PromptDefaults) -> None:
    """Persist prompt defaults, keeping unrelated keys already in the file."""
    config = load_config()
    config["page_size"] = _coerce_page_size(defaults.page_size)
    config["loop"] = bool(defaults.loop)
    if defaults.theme:
        config["theme"] = normalize_theme_name(defaults.theme)
    else:
        config.pop("theme", None)
    save_config(config)
