"""Loading spelling dictionaries through enchant.

A dictionary is addressed by a language code and an optional folder. With no
folder the language is looked up among the dictionaries enchant already
knows; with a folder, ``<folder>/<lang>.aff`` and ``<folder>/<lang>.dic`` are
staged into a private hunspell directory and loaded from there.
"""
from __future__ import annotations

import contextlib
import logging
import os
import tempfile
import threading
from collections.abc import Iterator

import enchant

from .config import SPELLCHECK_DEFAULT_LANG

logger = logging.getLogger(__name__)

# ENCHANT_CONFIG_DIR is process-wide; folder loads must not overlap.
_CONFIG_DIR_LOCK = threading.Lock()


class DictionaryUnavailable(Exception):
    """Raised when a dictionary cannot be found, read or built."""


def list_spell_languages() -> list[str]:
    try:
        langs = enchant.list_languages()
    except Exception:
        return []

    available: list[str] = []
    for lang in sorted(set(langs or [])):
        if not lang:
            continue
        try:
            if enchant.dict_exists(lang):
                available.append(lang)
        except Exception:
            continue
    return available


def dictionary_paths(folder: str, lang: str) -> tuple[str, str]:
    base = os.path.expanduser(folder).rstrip("/\\") or folder
    return os.path.join(base, f"{lang}.aff"), os.path.join(base, f"{lang}.dic")


def _read_resource(path: str) -> bytes:
    try:
        with open(path, "rb") as f:
            data = f.read()
    except OSError as exc:
        raise DictionaryUnavailable(f"Cannot read {path}: {exc}") from exc
    if not data.strip():
        raise DictionaryUnavailable(f"Dictionary file is empty: {path}")
    return data


@contextlib.contextmanager
def _enchant_config_dir(path: str) -> Iterator[None]:
    previous = os.environ.get("ENCHANT_CONFIG_DIR")
    os.environ["ENCHANT_CONFIG_DIR"] = path
    try:
        yield
    finally:
        if previous is None:
            os.environ.pop("ENCHANT_CONFIG_DIR", None)
        else:
            os.environ["ENCHANT_CONFIG_DIR"] = previous


def _load_from_folder(lang: str, folder: str) -> enchant.Dict:
    aff_path, dic_path = dictionary_paths(folder, lang)
    aff_data = _read_resource(aff_path)
    dic_data = _read_resource(dic_path)

    with tempfile.TemporaryDirectory(prefix="spellnav-enchant-") as config_dir:
        hunspell_dir = os.path.join(config_dir, "hunspell")
        os.makedirs(hunspell_dir)
        for suffix, data in ((".aff", aff_data), (".dic", dic_data)):
            with open(os.path.join(hunspell_dir, lang + suffix), "wb") as f:
                f.write(data)
        # hunspell reads both files when the dictionary is requested
        with _CONFIG_DIR_LOCK, _enchant_config_dir(config_dir):
            broker = enchant.Broker()
            broker.set_ordering(lang, "hunspell")
            try:
                return broker.request_dict(lang)
            except enchant.errors.DictNotFoundError as exc:
                raise DictionaryUnavailable(
                    f"Dictionary '{lang}' in {folder} could not be loaded."
                ) from exc


def load_dictionary(lang: str | None, folder: str | None = None) -> enchant.Dict:
    """Build a checker for ``lang``; raise :class:`DictionaryUnavailable` on failure."""
    lang_code = (lang or "").strip() or SPELLCHECK_DEFAULT_LANG
    folder = (folder or "").strip()
    try:
        if folder:
            checker = _load_from_folder(lang_code, folder)
        else:
            checker = enchant.Dict(lang_code)
    except DictionaryUnavailable:
        raise
    except enchant.errors.DictNotFoundError as exc:
        raise DictionaryUnavailable(f"Dictionary '{lang_code}' is not installed.") from exc
    except Exception as exc:
        raise DictionaryUnavailable(f"Failed to initialize dictionary '{lang_code}': {exc}") from exc
    logger.info("Loaded dictionary %s%s", lang_code, f" from {folder}" if folder else "")
    return checker


__all__ = [
    "DictionaryUnavailable",
    "dictionary_paths",
    "list_spell_languages",
    "load_dictionary",
]
