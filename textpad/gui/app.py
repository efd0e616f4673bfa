"""
Module: textpad.gui.app

Main window: menus, toolbar, text area, and status bar.
"""

import tkinter as tk
from logging import Logger
from tkinter import font as tkfont

import ttkbootstrap as ttk
from ttkbootstrap.constants import *

from textpad.config import config
from textpad.config.theme import THEMES, Theme
from textpad.core.commands import SHORTCUTS, Command, accelerator, key_sequences
from textpad.core.editor import Editor
from textpad.core.font import FONT_SIZE_MAX, FONT_SIZE_MIN, FONT_SIZE_STEP, FontState
from textpad.gui.buffer import TextBuffer
from textpad.gui.dialogs import TkDialogs

MENUS = {
    "File": [
        Command.NEW,
        Command.OPEN,
        Command.SAVE,
        Command.SAVE_AS,
        None,
        Command.PRINT,
        None,
        Command.EXIT,
    ],
    "Edit": [
        Command.UNDO,
        Command.REDO,
        None,
        Command.CUT,
        Command.COPY,
        Command.PASTE,
        None,
        Command.FIND,
        Command.REPLACE,
        Command.SELECT_ALL,
    ],
    "View": [],
    "Tools": [Command.WORD_WRAP, Command.INSERT_DATE_TIME, Command.WORD_COUNT],
    "Help": [Command.ABOUT],
}


def install_shortcuts(text, window, dispatch):
    """
    Bind every shortcut once on the text widget and once on the window.

    The text widget binding returns "break" so Tk's own class bindings
    (Ctrl+H backspace, Ctrl+O open line, ...) never run, and the window
    binding covers focus on the toolbar.
    """
    for command in SHORTCUTS:

        def handler(event=None, command=command):
            dispatch(command)
            return "break"

        for sequence in key_sequences(command):
            text.bind(sequence, handler)
            window.bind(sequence, handler)


class TextpadApp(ttk.Window):
    def __init__(self):
        theme = config.get_value("editor.theme", "Light")
        chrome = next((t.chrome for t in THEMES if t.name == theme), "litera")
        super().__init__(themename=chrome)

        self.geometry(config.get_value("editor.geometry", "800x600"))

        self.logger: Logger = config.get_logger("logger", self.__class__.__name__)

        self.theme_var = tk.StringVar(value=theme)
        self.wrap_var = tk.BooleanVar(value=False)
        self.family_var = tk.StringVar()
        self.size_var = tk.IntVar()
        self.bold_var = tk.BooleanVar()
        self.status_var = tk.StringVar()

        self._make_toolbar()
        self._make_text()
        self._make_status()

        self.buffer = TextBuffer(self.text)
        self.dialogs = TkDialogs(self)
        self.editor = Editor(self.buffer, self.dialogs, self)

        self._make_menu()
        self._bind_shortcuts()
        self.protocol("WM_DELETE_WINDOW", lambda: self.editor.dispatch(Command.EXIT))

        self.text.focus_set()
        self.logger.debug("Initialized TextpadApp instance.")

    #
    # Layout
    #

    def _make_toolbar(self):
        self.toolbar = ttk.Frame(self, padding=(4, 2))
        self.toolbar.pack(side=TOP, fill=X)

        families = sorted(set(tkfont.families(self)))
        self.family_box = ttk.Combobox(
            self.toolbar,
            textvariable=self.family_var,
            values=families,
            state="readonly",
            width=24,
        )
        self.family_box.pack(side=LEFT, padx=2)
        self.family_box.bind("<<ComboboxSelected>>", self.on_family_selected)

        self.size_box = ttk.Spinbox(
            self.toolbar,
            textvariable=self.size_var,
            from_=FONT_SIZE_MIN,
            to=FONT_SIZE_MAX,
            increment=FONT_SIZE_STEP,
            width=4,
            command=self.on_size_changed,
        )
        self.size_box.pack(side=LEFT, padx=2)
        self.size_box.bind("<Return>", self.on_size_changed)
        self.size_box.bind("<FocusOut>", self.on_size_changed)

        self.bold_button = ttk.Checkbutton(
            self.toolbar,
            text="B",
            variable=self.bold_var,
            bootstyle="toolbutton",
            command=self.on_bold_toggled,
        )
        self.bold_button.pack(side=LEFT, padx=2)

    def _make_text(self):
        self.viewport = tk.Frame(self, autostyle=False)
        self.viewport.pack(side=TOP, fill=BOTH, expand=True)

        self.text = tk.Text(
            self.viewport,
            undo=True,
            wrap="none",
            borderwidth=0,
            highlightthickness=0,
            autostyle=False,
        )
        scrollbar = ttk.Scrollbar(self.viewport, orient=VERTICAL, command=self.text.yview)
        self.text.configure(yscrollcommand=scrollbar.set)
        scrollbar.pack(side=RIGHT, fill=Y)
        self.text.pack(side=LEFT, fill=BOTH, expand=True, padx=2, pady=2)

    def _make_status(self):
        self.status = tk.Label(
            self,
            textvariable=self.status_var,
            anchor="w",
            padx=6,
            pady=2,
            autostyle=False,
        )
        self.status.pack(side=BOTTOM, fill=X, before=self.viewport)

    def _make_menu(self):
        menubar = tk.Menu(self)

        for title, commands in MENUS.items():
            menu = tk.Menu(menubar, tearoff=0)
            for command in commands:
                if command is None:
                    menu.add_separator()
                elif command is Command.WORD_WRAP:
                    menu.add_checkbutton(
                        label=command.label,
                        variable=self.wrap_var,
                        command=self._dispatcher(command),
                    )
                else:
                    menu.add_command(
                        label=command.label,
                        accelerator=accelerator(command) or "",
                        command=self._dispatcher(command),
                    )
            if title == "View":
                menu.add_cascade(label="Themes", menu=self._make_theme_menu(menu))
            menubar.add_cascade(label=title, menu=menu)

        self.config(menu=menubar)

    def _make_theme_menu(self, parent: tk.Menu) -> tk.Menu:
        menu = tk.Menu(parent, tearoff=0)
        for theme in THEMES:
            menu.add_radiobutton(
                label=theme.name,
                value=theme.name,
                variable=self.theme_var,
                command=lambda name=theme.name: self.editor.set_theme(name),
            )
        return menu

    def _dispatcher(self, command: Command):
        return lambda: self.editor.dispatch(command)

    def _bind_shortcuts(self):
        install_shortcuts(self.text, self, self.editor.dispatch)

    #
    # Toolbar callbacks
    #

    def on_family_selected(self, event=None):
        self.editor.set_font_family(self.family_var.get())

    def on_size_changed(self, event=None):
        try:
            size = int(self.size_box.get())
        except ValueError:
            size = self.editor.font.size
        self.editor.set_font_size(size)

    def on_bold_toggled(self):
        self.editor.toggle_bold()

    #
    # Window interface used by the editor core
    #

    def set_title(self, title: str):
        self.title(title)

    def set_status(self, text: str):
        self.status_var.set(text)

    def close(self):
        self.destroy()

    def apply_theme(self, theme: Theme):
        self.style.theme_use(theme.chrome)
        self.theme_var.set(theme.name)
        self.text.configure(
            background=theme.background,
            foreground=theme.foreground,
            insertbackground=theme.caret,
            selectbackground=theme.selection,
            selectforeground=theme.selection_text,
        )
        self.status.configure(
            background=theme.status_background,
            foreground=theme.status_foreground,
        )
        self.viewport.configure(background=theme.background)

    def apply_font(self, font: FontState):
        self.text.configure(font=font.as_tk())
        self.family_var.set(font.family)
        self.size_var.set(font.size)
        self.bold_var.set(font.bold)

    def set_wrap(self, enabled: bool):
        self.text.configure(wrap="word" if enabled else "none")
        self.wrap_var.set(enabled)
