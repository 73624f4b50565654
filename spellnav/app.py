#!/usr/bin/env python3
"""
SpellNav: Tkinter editor with in-paragraph misspelling navigation
and enchant-based suggestions.
"""

import argparse
import contextlib
import logging
import os
import queue
import re
import sys
import threading
import tkinter as tk
import tkinter.font as tkfont
from collections.abc import Callable, Iterable, Sequence
from tkinter import filedialog, messagebox, ttk

from .config import (
    CONFIG_PATH,
    DEFAULTS,
    SPELLCHECK_DEFAULT_LANG,
    ConfigSaveError,
    load_config,
    save_config,
)
from .dictionary import DictionaryUnavailable, list_spell_languages, load_dictionary
from .navigator import MisspellingNavigator
from .ui.menus import AppMenus
from .ui.settings import SettingsWindow
from .ui.text_buffer import TkTextBuffer

logger = logging.getLogger(__name__)

STATUS_CLEAR_MS = 4000


class SpellNavPad(tk.Tk):
    def __init__(self):
        super().__init__()
        self.title("SpellNav")
        self.geometry("900x650")

        self.cfg = load_config()
        self.app_font = tkfont.Font(family=self.cfg["font_family"], size=self.cfg["font_size"])
        if self.cfg.get("open_maximized", False):
            with contextlib.suppress(tk.TclError):
                self.state("zoomed")

        try:
            self.style = ttk.Style(self)
            if "clam" in self.style.theme_names():
                self.style.theme_use("clam")
        except Exception:
            pass

        self.path: str | None = None
        self._settings_window: SettingsWindow | None = None
        self._status_timer: str | None = None
        self._spell_notice_msg: str | None = None
        self._spell_notice_last: str | None = None
        self._dictionary_state = "loading"
        self._dictionary_request = 0
        self._text_shortcut_bindings: list[tuple[str, Callable[[tk.Event], str]]] = []

        self.navigator = MisspellingNavigator(
            custom_words=self.cfg.get("custom_words", []),
            persist=self._persist_custom_words,
        )

        self._build_editor()
        self.menus = AppMenus(self)
        self.menus.attach()
        self._register_shortcuts()
        self._disable_builtin_text_shortcuts(self.text)
        self._bind_shortcuts_to_text(self.text)

        self._result_queue = queue.Queue()
        self.after(60, self._poll_queue)
        self.reload_dictionary()

        self.protocol("WM_DELETE_WINDOW", self._on_close)

    # ---------- Layout ----------

    def _build_editor(self) -> None:
        frame = ttk.Frame(self)
        frame.pack(fill=tk.BOTH, expand=True)
        frame.columnconfigure(0, weight=1)
        frame.rowconfigure(0, weight=1)

        self.text = tk.Text(
            frame,
            wrap=tk.WORD,
            undo=True,
            font=self.app_font,
            fg=self.cfg["fg"],
            bg=self.cfg["bg"],
            insertbackground=self.cfg["fg"],
            padx=10,
            pady=10,
        )
        self.text.grid(row=0, column=0, sticky="nsew")
        scrollbar = ttk.Scrollbar(frame, orient="vertical", command=self.text.yview)
        scrollbar.grid(row=0, column=1, sticky="ns")
        self.text.configure(yscrollcommand=scrollbar.set)

        self.status_var = tk.StringVar(value="")
        ttk.Label(self, textvariable=self.status_var, anchor="w", padding=(8, 2)).pack(
            fill=tk.X, side=tk.BOTTOM
        )

        self.buffer = TkTextBuffer(self.text)
        self.text.focus_set()

    def _make_shortcut_handler(
        self, callback: Callable[[], None]
    ) -> Callable[[tk.Event], str]:
        def handler(_event: tk.Event | None = None) -> str:
            callback()
            return "break"

        return handler

    @staticmethod
    def _normalize_sequence(seq: str) -> str:
        return (
            seq.replace("KeyPress-", "")
            .replace("KeyRelease-", "")
            .replace("Key-", "")
            .lower()
        )

    @staticmethod
    def _uppercase_keysym_sequence(seq: str) -> str | None:
        match = re.fullmatch(r"<(.+)-([a-z])>", seq)
        if not match:
            return None
        prefix, key = match.groups()
        return f"<{prefix}-{key.upper()}>"

    def _shortcut_variants(self, sequence: str) -> list[str]:
        variants = [sequence]
        uppercase = self._uppercase_keysym_sequence(sequence)
        if uppercase and uppercase not in variants:
            variants.append(uppercase)
        return variants

    def _register_shortcuts(self) -> None:
        self._text_shortcut_bindings.clear()

        def add(sequence: str, callback: Callable[[], None]) -> None:
            handler = self._make_shortcut_handler(callback)
            for seq in self._shortcut_variants(sequence):
                self.bind_all(seq, handler, add="+")
                self._text_shortcut_bindings.append((seq, handler))

        add("<Control-o>", self.open_file)
        add("<Control-s>", self.save_file)
        add("<Control-Shift-s>", self.save_file_as)
        add("<Control-q>", self._on_close)
        add("<Control-g>", self.open_settings)
        add("<Alt-j>", self.primary_action)
        add("<Alt-semicolon>", self.add_selection_to_custom)

    def _disable_builtin_text_shortcuts(self, text: tk.Text) -> None:
        # Text class bindings run before "all"; Control-o would insert a newline.
        allowed = {
            "<home>",
            "<end>",
            "<control-home>",
            "<control-end>",
            "<shift-home>",
            "<shift-end>",
            "<control-shift-home>",
            "<control-shift-end>",
        }
        custom_shortcuts = {
            self._normalize_sequence(seq) for seq, _handler in self._text_shortcut_bindings
        }

        def swallow(_event: tk.Event | None = None) -> str:
            return "break"

        try:
            class_sequences = text.bind_class("Text") or []
        except tk.TclError:
            return

        for sequence in class_sequences:
            normalized = self._normalize_sequence(sequence)
            if normalized in allowed:
                continue
            if not any(
                modifier in normalized
                for modifier in ("<control-", "<alt-", "<meta-", "<command-", "<option-")
            ):
                continue
            if normalized in custom_shortcuts:
                continue
            text.bind(sequence, swallow)

    def _bind_shortcuts_to_text(self, text: tk.Text) -> None:
        for sequence, handler in self._text_shortcut_bindings:
            text.bind(sequence, handler)

    # ---------- Commands ----------

    def primary_action(self) -> None:
        if self._dictionary_state == "failed":
            self._notify_spell_unavailable()
        outcome = self.navigator.primary_action(self.buffer)
        logger.debug("Primary action: %s", outcome)

    def add_selection_to_custom(self) -> None:
        result = self.navigator.add_selection_to_custom(self.buffer)
        self.flash_status(result.message)

    # ---------- Dictionary ----------

    def reload_dictionary(self) -> None:
        self._dictionary_request += 1
        request = self._dictionary_request
        lang = self.cfg.get("spell_lang") or SPELLCHECK_DEFAULT_LANG
        folder = self.cfg.get("dict_folder", "")
        self._dictionary_state = "loading"

        def worker() -> None:
            try:
                checker = load_dictionary(lang, folder)
            except DictionaryUnavailable as exc:
                self._result_queue.put(
                    {"kind": "dictionary", "ok": False, "request": request, "error": str(exc)}
                )
                return
            self._result_queue.put(
                {
                    "kind": "dictionary",
                    "ok": True,
                    "request": request,
                    "checker": checker,
                    "lang": lang,
                }
            )

        threading.Thread(target=worker, daemon=True).start()

    def _on_dictionary_loaded(self, item: dict) -> None:
        if item.get("request") != self._dictionary_request:
            return  # superseded by a newer request
        if item.get("ok"):
            self.navigator.set_checker(item["checker"])
            self._dictionary_state = "ready"
            self._spell_notice_msg = None
            self._spell_notice_last = None
            self.flash_status(f"Dictionary {item.get('lang')} loaded.")
            return

        logger.warning("Dictionary unavailable: %s", item.get("error"))
        self.navigator.set_checker(None)
        self._dictionary_state = "failed"
        self._spell_notice_msg = (
            f"Spellcheck unavailable: {item.get('error') or 'failed to load dictionary.'}"
        )
        self._notify_spell_unavailable()

    def _notify_spell_unavailable(self) -> None:
        if not self._spell_notice_msg:
            return
        if self._spell_notice_msg == self._spell_notice_last:
            return
        with contextlib.suppress(Exception):
            messagebox.showinfo("Spellcheck", self._spell_notice_msg, parent=self)
        self._spell_notice_last = self._spell_notice_msg

    def apply_dictionary_settings(self, lang: str, folder: str) -> None:
        lang = lang.strip() or SPELLCHECK_DEFAULT_LANG
        folder = folder.strip()
        if lang == self.cfg.get("spell_lang") and folder == self.cfg.get("dict_folder", ""):
            return
        self.cfg["spell_lang"] = lang
        self.cfg["dict_folder"] = folder
        self._persist_config()
        self.reload_dictionary()

    # ---------- Queue handling ----------

    def _poll_queue(self) -> None:
        try:
            while True:
                item = self._result_queue.get_nowait()
                if item.get("kind") == "dictionary":
                    self._on_dictionary_loaded(item)
        except queue.Empty:
            pass
        finally:
            self.after(60, self._poll_queue)

    # ---------- Settings ----------

    def _persist_config(self) -> None:
        try:
            save_config(self.cfg)
        except ConfigSaveError as exc:
            messagebox.showerror(
                "Config Save Failed",
                f"Could not save settings to {CONFIG_PATH}.\n\n{exc}",
                parent=self,
            )

    def _persist_custom_words(self, words: list[str]) -> None:
        self.cfg["custom_words"] = words
        self._persist_config()

    def open_settings(self) -> None:
        if self._settings_window is not None and self._settings_window.exists():
            self._settings_window.focus()
            return
        self._settings_window = SettingsWindow(self, list_spell_languages())

    def flash_status(self, message: str, delay_ms: int = STATUS_CLEAR_MS) -> None:
        self.status_var.set(message)
        if self._status_timer:
            with contextlib.suppress(Exception):
                self.after_cancel(self._status_timer)
        self._status_timer = self.after(delay_ms, lambda: self.status_var.set(""))

    # ---------- File Ops ----------

    def _load_file(self, path: str) -> bool:
        normalized = os.path.abspath(os.path.expanduser(path))
        try:
            with open(normalized, encoding="utf-8") as f:
                data = f.read()
        except Exception as e:
            messagebox.showerror("Open Error", f"Could not open the file.\n\n{e}", parent=self)
            return False
        self.text.delete("1.0", tk.END)
        self.text.insert("1.0", data)
        self.text.mark_set(tk.INSERT, "1.0")
        self.text.edit_reset()
        self.text.edit_modified(False)
        self.path = normalized
        self.title(f"SpellNav — {os.path.basename(normalized)}")
        return True

    def open_files(self, paths: Iterable[str]) -> None:
        path_list = [p for p in paths if p]
        if not path_list:
            return
        if len(path_list) > 1:
            logger.warning("Only one buffer is supported; opening %s", path_list[0])
        self._load_file(path_list[0])

    def open_file(self) -> None:
        if not self._maybe_save():
            return
        path = filedialog.askopenfilename(parent=self)
        if path:
            self._load_file(path)

    def save_file(self) -> bool:
        if not self.path:
            return self.save_file_as()
        try:
            with open(self.path, "w", encoding="utf-8") as f:
                f.write(self.text.get("1.0", "end-1c"))
        except Exception as e:
            messagebox.showerror("Save Error", f"Could not save the file.\n\n{e}", parent=self)
            return False
        self.text.edit_modified(False)
        return True

    def save_file_as(self) -> bool:
        path = filedialog.asksaveasfilename(parent=self)
        if not path:
            return False
        self.path = os.path.abspath(path)
        self.title(f"SpellNav — {os.path.basename(self.path)}")
        return self.save_file()

    def _maybe_save(self) -> bool:
        if not self.text.edit_modified():
            return True
        answer = messagebox.askyesnocancel("Unsaved Changes", "Save changes first?", parent=self)
        if answer is None:
            return False
        if answer:
            return self.save_file()
        return True

    # ---------- Close / Quit ----------

    def _on_close(self) -> None:
        if not self._maybe_save():
            return
        self.navigator.shutdown()
        self._persist_config()
        self.destroy()


def _configure_logging(level: str | None) -> None:
    resolved = logging.getLevelName((level or DEFAULTS["log_level"]).upper())
    if not isinstance(resolved, int):
        resolved = logging.WARNING
    logging.basicConfig(
        level=resolved,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(
    argv: Sequence[str] | None = None,
    app_factory: Callable[[], SpellNavPad] = SpellNavPad,
) -> None:
    parser = argparse.ArgumentParser(prog="spellnav")
    parser.add_argument("paths", nargs="*", help="file to open")
    parser.add_argument("--log-level", default=None, help="logging level, e.g. DEBUG")
    args = parser.parse_args(list(sys.argv[1:] if argv is None else argv))

    _configure_logging(args.log_level or load_config().get("log_level"))
    app = app_factory()
    if args.paths:
        open_files = getattr(app, "open_files", None)
        if callable(open_files):
            open_files(args.paths)
    app.mainloop()


if __name__ == "__main__":
    main()
