import tkinter as tk


class AppMenus:
    def __init__(self, app):
        self.app = app
        self.menubar = tk.Menu(app)
        self._build_menus()

    def _build_menus(self) -> None:
        app = self.app
        menubar = self.menubar

        filemenu = tk.Menu(menubar, tearoff=0)
        filemenu.add_command(label="Open…", accelerator="Ctrl+O", command=app.open_file)
        filemenu.add_command(label="Save", accelerator="Ctrl+S", command=app.save_file)
        filemenu.add_command(
            label="Save As…", accelerator="Ctrl+Shift+S", command=app.save_file_as
        )
        filemenu.add_separator()
        filemenu.add_command(label="Quit", accelerator="Ctrl+Q", command=app._on_close)
        menubar.add_cascade(label="File", menu=filemenu)

        editmenu = tk.Menu(menubar, tearoff=0)
        editmenu.add_command(
            label="Undo",
            accelerator="Ctrl+Z",
            command=lambda: app.text.event_generate("<<Undo>>"),
        )
        editmenu.add_command(
            label="Redo",
            accelerator="Ctrl+Shift+Z",
            command=lambda: app.text.event_generate("<<Redo>>"),
        )
        editmenu.add_separator()
        editmenu.add_command(
            label="Cut",
            accelerator="Ctrl+X",
            command=lambda: app.text.event_generate("<<Cut>>"),
        )
        editmenu.add_command(
            label="Copy",
            accelerator="Ctrl+C",
            command=lambda: app.text.event_generate("<<Copy>>"),
        )
        editmenu.add_command(
            label="Paste",
            accelerator="Ctrl+V",
            command=lambda: app.text.event_generate("<<Paste>>"),
        )
        editmenu.add_separator()
        editmenu.add_command(
            label="Settings…", accelerator="Ctrl+G", command=app.open_settings
        )
        menubar.add_cascade(label="Edit", menu=editmenu)

        spellmenu = tk.Menu(menubar, tearoff=0)
        spellmenu.add_command(
            label="Misspelling: select/replace/skip",
            accelerator="Alt+J",
            command=app.primary_action,
        )
        spellmenu.add_command(
            label="Add selected word to custom dictionary",
            accelerator="Alt+;",
            command=app.add_selection_to_custom,
        )
        spellmenu.add_separator()
        spellmenu.add_command(label="Reload Dictionary", command=app.reload_dictionary)
        menubar.add_cascade(label="Spelling", menu=spellmenu)

    def attach(self) -> None:
        self.app.config(menu=self.menubar)
