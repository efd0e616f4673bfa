"""
Module: textpad.core.editor

Command handlers for the editor window.

The Editor owns the document session, search engine, and view state
(font, theme, word wrap) and talks to the toolkit only through three
adapters: the text buffer, the dialogs, and the window. Every user
intent goes through `dispatch`, and every failure is reported here as a
single modal dialog.
"""

from datetime import datetime
from logging import Logger
from typing import Callable, Optional

from textpad.config import config
from textpad.config.theme import DEFAULT_THEME, Theme, theme_by_name
from textpad.core import stats
from textpad.core.commands import Command, CommandRouter
from textpad.core.errors import EditorError, InputCancelled, NotFound
from textpad.core.font import FontState
from textpad.core.printing import PrintService
from textpad.core.search import SearchEngine
from textpad.core.session import DocumentSession

DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"


class Editor:
    def __init__(
        self,
        buffer,
        dialogs,
        window,
        printer: Optional[PrintService] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.buffer = buffer
        self.dialogs = dialogs
        self.window = window
        self.printer = printer if printer else PrintService()
        self.clock = clock if clock else datetime.now

        self.logger: Logger = config.get_logger("logger", self.__class__.__name__)

        self.session = DocumentSession(buffer, dialogs, window)
        self.search = SearchEngine(buffer)

        self.font = FontState.from_config()
        self.theme = self._initial_theme()
        self.wrap = bool(config.get_value("editor.wrap", False))

        self.router = CommandRouter()
        self._register()

        self.window.apply_theme(self.theme)
        self.window.apply_font(self.font)
        self.window.set_wrap(self.wrap)
        self.logger.debug("Initialized Editor instance.")

    def _initial_theme(self) -> Theme:
        name = config.get_value("editor.theme", DEFAULT_THEME.name)
        try:
            return theme_by_name(name)
        except KeyError:
            self.logger.warning(f"Unknown theme '{name}'; using '{DEFAULT_THEME.name}'")
            return DEFAULT_THEME

    def _register(self):
        handlers = {
            Command.NEW: self.new_document,
            Command.OPEN: self.open_document,
            Command.SAVE: self.save,
            Command.SAVE_AS: self.save_as,
            Command.PRINT: self.print_document,
            Command.EXIT: self.exit,
            Command.UNDO: self.undo,
            Command.REDO: self.redo,
            Command.CUT: self.buffer.cut,
            Command.COPY: self.buffer.copy,
            Command.PASTE: self.buffer.paste,
            Command.FIND: self.find,
            Command.REPLACE: self.replace,
            Command.SELECT_ALL: self.buffer.select_all,
            Command.WORD_WRAP: self.toggle_wrap,
            Command.INSERT_DATE_TIME: self.insert_datetime,
            Command.WORD_COUNT: self.word_count,
            Command.ABOUT: self.about,
        }
        for command, handler in handlers.items():
            self.router.register(command, handler)

    def dispatch(self, command: Command) -> bool:
        return self.router.dispatch(command)

    def _report(self, error: EditorError):
        if isinstance(error, InputCancelled):
            return  # silent
        if isinstance(error, NotFound):
            self.dialogs.info(error.title, str(error))
            return
        self.logger.error(str(error))
        self.dialogs.error(error.title, str(error))

    #
    # File
    #

    def new_document(self) -> bool:
        return self.session.new_document()

    def open_document(self, path: Optional[str] = None) -> bool:
        return self.session.open(path)

    def save(self) -> bool:
        return self.session.save()

    def save_as(self) -> bool:
        return self.session.save_as()

    def print_document(self) -> bool:
        try:
            self.printer.print_text(self.buffer.get_text(), self.session.name)
        except EditorError as e:
            self._report(e)
            return False
        return True

    def exit(self) -> bool:
        return self.session.exit()

    #
    # Edit
    #

    def undo(self) -> bool:
        return self.buffer.undo()

    def redo(self) -> bool:
        return self.buffer.redo()

    def find(self) -> bool:
        needle = self.dialogs.ask_string("Find", "Find what:")
        try:
            self.search.find(needle)
        except EditorError as e:
            self._report(e)
            return False
        return True

    def replace(self) -> bool:
        answer = self.dialogs.ask_replace()
        if answer is None:
            return False
        needle, replacement = answer
        try:
            self.search.replace(needle, replacement)
        except EditorError as e:
            self._report(e)
            return False
        return True

    #
    # Tools
    #

    def toggle_wrap(self) -> bool:
        self.wrap = not self.wrap
        self.window.set_wrap(self.wrap)
        return self.wrap

    def insert_datetime(self) -> str:
        stamp = self.clock().strftime(DATETIME_FORMAT)
        self.buffer.insert(stamp)
        return stamp

    def word_count(self) -> stats.TextStats:
        counts = stats.count(self.buffer.get_text())
        self.dialogs.info("Word Count", stats.report(counts))
        return counts

    def about(self):
        name = config.get_value("app.name", "Notepad")
        version = config.get_value("app.version", "1.0")
        description = config.get_value("app.description", "")
        self.dialogs.info("About", f"{name}\nVersion {version}\n\n{description}")

    #
    # View
    #

    def set_theme(self, name: str) -> Theme:
        self.theme = theme_by_name(name)
        self.window.apply_theme(self.theme)
        self.logger.debug(f"Applied theme '{name}'")
        return self.theme

    def _apply_font(self, font: FontState) -> FontState:
        self.font = font
        self.window.apply_font(self.font)
        return self.font

    def set_font_family(self, family: str) -> FontState:
        return self._apply_font(self.font.with_family(family))

    def set_font_size(self, size: int) -> FontState:
        return self._apply_font(self.font.with_size(size))

    def toggle_bold(self) -> FontState:
        return self._apply_font(self.font.toggle_bold())
