# spellnav/config.py
from __future__ import annotations

import contextlib
import json
import logging
import os
import tempfile
from datetime import datetime

APP_DIR = os.path.expanduser("~/.spellnav")
CONFIG_PATH = os.path.join(APP_DIR, "config.json")

SPELLCHECK_DEFAULT_LANG = "en_US"

DEFAULTS = {
    "spell_lang": SPELLCHECK_DEFAULT_LANG,
    # Empty means the dictionaries enchant finds on the system.
    "dict_folder": "",
    "custom_words": [],
    "font_family": "TkFixedFont",
    "font_size": 14,
    "fg": "#141414",
    "bg": "#d8d8d8",
    "open_maximized": False,
    "log_level": "WARNING",
}

logger = logging.getLogger(__name__)


class ConfigSaveError(Exception):
    """Raised when the configuration cannot be written to disk."""


def default_config() -> dict:
    cfg = DEFAULTS.copy()
    cfg["custom_words"] = []
    return cfg


def _clean_custom_words(value) -> list[str]:
    if not isinstance(value, list):
        return []
    words: list[str] = []
    for item in value:
        if not isinstance(item, str):
            continue
        word = item.strip().lower()
        if word and word not in words:
            words.append(word)
    return words


def _backup_corrupt(reason: str) -> None:
    stamp = datetime.now().strftime("%Y%m%d-%H%M%S")
    backup = f"{CONFIG_PATH}.corrupt-{stamp}"
    with contextlib.suppress(OSError):
        os.replace(CONFIG_PATH, backup)
        logger.warning("Config %s was %s; moved to %s", CONFIG_PATH, reason, backup)


def load_config() -> dict:
    """Return the settings record, merged onto :data:`DEFAULTS`. Never raises."""
    deprecated_keys = {"customWords", "dictFolder", "lang"}
    try:
        os.makedirs(APP_DIR, exist_ok=True)
        if not os.path.exists(CONFIG_PATH):
            save_config(DEFAULTS)
            return default_config()
        with open(CONFIG_PATH, encoding="utf-8") as f:
            raw = f.read()
        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            data = None
        if not isinstance(data, dict):
            _backup_corrupt("not a JSON object")
            save_config(DEFAULTS)
            return default_config()

        changed = False
        for k in list(data):
            if k in deprecated_keys:
                data.pop(k, None)
                changed = True
        for k, v in DEFAULTS.items():
            if k not in data:
                data[k] = list(v) if isinstance(v, list) else v
                changed = True
        words = _clean_custom_words(data["custom_words"])
        if words != data["custom_words"]:
            data["custom_words"] = words
            changed = True
        if changed:
            save_config(data)
        return data
    except Exception:
        logger.exception("Could not load config from %s; using defaults", CONFIG_PATH)
        return default_config()


def save_config(cfg: dict) -> None:
    os.makedirs(APP_DIR, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(prefix="config.", suffix=".tmp", dir=APP_DIR)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(cfg, f, indent=2)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_path, CONFIG_PATH)
    except Exception as exc:
        with contextlib.suppress(Exception):
            os.unlink(tmp_path)
        raise ConfigSaveError(f"Failed to save config to {CONFIG_PATH}: {exc}") from exc
