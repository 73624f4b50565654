"""Settings window: dictionary language and folder, custom dictionary editor."""
from __future__ import annotations

import contextlib
import tkinter as tk
from tkinter import filedialog, ttk

from ..config import SPELLCHECK_DEFAULT_LANG


class SettingsWindow:
    def __init__(self, app, languages: list[str]):
        self.app = app
        cfg = app.cfg

        w = tk.Toplevel(app)
        self.window = w
        w.title("Settings — SpellNav")
        w.geometry("560x520")
        w.minsize(420, 380)
        w.transient(app)

        container = ttk.Frame(w, padding=12)
        container.grid(row=0, column=0, sticky="nsew")
        w.columnconfigure(0, weight=1)
        w.rowconfigure(0, weight=1)
        container.columnconfigure(1, weight=1)
        container.rowconfigure(4, weight=1)

        self.lang_var = tk.StringVar(value=cfg.get("spell_lang") or SPELLCHECK_DEFAULT_LANG)
        self.folder_var = tk.StringVar(value=cfg.get("dict_folder", ""))

        ttk.Label(container, text="Language code:", anchor="w").grid(
            row=0, column=0, sticky="w", pady=4
        )
        lang_box = ttk.Combobox(container, textvariable=self.lang_var, values=languages, width=20)
        lang_box.grid(row=0, column=1, padx=(8, 0), pady=4, sticky="w")

        ttk.Label(container, text="Dictionary folder:", anchor="w").grid(
            row=1, column=0, sticky="w", pady=4
        )
        folder_row = ttk.Frame(container)
        folder_row.grid(row=1, column=1, padx=(8, 0), pady=4, sticky="ew")
        folder_row.columnconfigure(0, weight=1)
        ttk.Entry(folder_row, textvariable=self.folder_var).grid(row=0, column=0, sticky="ew")
        ttk.Button(folder_row, text="Browse…", command=self._browse_folder).grid(
            row=0, column=1, padx=(6, 0)
        )
        ttk.Label(
            container,
            text="Folder holding <lang>.aff and <lang>.dic. Leave empty for system dictionaries.",
            wraplength=500,
            foreground="#555555",
        ).grid(row=2, column=0, columnspan=2, sticky="w")

        ttk.Label(container, text="Custom dictionary (one word per line):", anchor="w").grid(
            row=3, column=0, columnspan=2, sticky="w", pady=(12, 4)
        )
        self.words_text = tk.Text(container, height=10, wrap="none", undo=True)
        self.words_text.grid(row=4, column=0, columnspan=2, sticky="nsew")
        self.words_text.insert("1.0", "\n".join(app.navigator.custom_words))

        buttons = ttk.Frame(container)
        buttons.grid(row=5, column=0, columnspan=2, pady=(12, 0), sticky="e")
        ttk.Button(buttons, text="Save custom dictionary", command=self.save_custom_words).grid(
            row=0, column=0, padx=(0, 8)
        )
        ttk.Button(buttons, text="Clear", command=self.clear_custom_words).grid(
            row=0, column=1, padx=(0, 8)
        )
        ttk.Button(buttons, text="Apply", command=self.apply_dictionary).grid(
            row=0, column=2, padx=(0, 8)
        )
        ttk.Button(buttons, text="Close", command=self.close).grid(row=0, column=3)

        w.protocol("WM_DELETE_WINDOW", self.close)

    def _browse_folder(self) -> None:
        folder = filedialog.askdirectory(parent=self.window, mustexist=True)
        if folder:
            self.folder_var.set(folder)

    def save_custom_words(self) -> None:
        words = self.app.navigator.replace_custom_words(
            self.words_text.get("1.0", "end-1c").splitlines()
        )
        self.words_text.delete("1.0", tk.END)
        self.words_text.insert("1.0", "\n".join(words))
        self.app.flash_status("Custom dictionary saved.")

    def clear_custom_words(self) -> None:
        self.app.navigator.clear_custom_words()
        self.words_text.delete("1.0", tk.END)
        self.app.flash_status("Custom dictionary cleared.")

    def apply_dictionary(self) -> None:
        self.app.apply_dictionary_settings(self.lang_var.get(), self.folder_var.get())

    def exists(self) -> bool:
        try:
            return bool(self.window.winfo_exists())
        except tk.TclError:
            return False

    def focus(self) -> None:
        with contextlib.suppress(tk.TclError):
            self.window.deiconify()
            self.window.lift()
            self.window.focus_set()

    def close(self) -> None:
        with contextlib.suppress(tk.TclError):
            self.window.destroy()
