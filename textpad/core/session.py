"""
Module: textpad.core.session

Document lifecycle: the modified flag, the bound file, and the window
title derived from both.

    Clean-Unbound --edit--> Dirty-Unbound --save as--> Clean-Bound
    Clean-Bound   --edit--> Dirty-Bound   --save-----> Clean-Bound
    any state --open--> Clean-Bound, any state --new--> Clean-Unbound

New, Open, and Exit consult the CloseGuard first and leave everything
untouched when it aborts.
"""

import os
from enum import Enum
from logging import Logger
from typing import Optional

from textpad.config import config
from textpad.core import stats
from textpad.core.errors import FileReadError, FileWriteError
from textpad.core.gateway import FileGateway
from textpad.core.guard import CloseGuard

UNTITLED = "Untitled"


class DocumentState(Enum):
    CLEAN_UNBOUND = "Clean-Unbound"
    CLEAN_BOUND = "Clean-Bound"
    DIRTY_UNBOUND = "Dirty-Unbound"
    DIRTY_BOUND = "Dirty-Bound"


class DocumentSession:
    def __init__(self, buffer, dialogs, window, gateway: Optional[FileGateway] = None):
        """
        :param buffer: the text buffer; see textpad.gui.buffer.TextBuffer.
        :param dialogs: modal dialogs; see textpad.gui.dialogs.TkDialogs.
        :param window: receives `set_title`, `set_status`, and `close` calls.
        :param gateway: FileGateway, optional
            Built over `dialogs` when omitted.
        """
        self.buffer = buffer
        self.dialogs = dialogs
        self.window = window
        self.gateway = gateway if gateway else FileGateway(dialogs)
        self.guard = CloseGuard(self)

        self.modified = False
        self.path: Optional[str] = None
        self.suffix = config.get_value("editor.title", "Text Editor")

        self.logger: Logger = config.get_logger("logger", self.__class__.__name__)
        self.buffer.set_listener(self.on_buffer_changed)
        self.refresh()
        self.logger.debug("Initialized DocumentSession instance.")

    @property
    def name(self) -> str:
        return os.path.basename(self.path) if self.path else UNTITLED

    @property
    def title(self) -> str:
        marker = " *" if self.modified else ""
        return f"{self.name}{marker} - {self.suffix}"

    @property
    def state(self) -> DocumentState:
        if self.modified:
            if self.path:
                return DocumentState.DIRTY_BOUND
            return DocumentState.DIRTY_UNBOUND
        if self.path:
            return DocumentState.CLEAN_BOUND
        return DocumentState.CLEAN_UNBOUND

    def refresh_title(self):
        self.window.set_title(self.title)

    def refresh_status(self):
        self.window.set_status(stats.status_line(stats.count(self.buffer.get_text())))

    def refresh(self):
        self.refresh_title()
        self.refresh_status()

    def on_buffer_changed(self):
        # flip the flag before the title is redrawn
        if not self.modified:
            self.modified = True
            self.refresh_title()
        self.refresh_status()

    def _bind(self, path: Optional[str]):
        self.path = path
        self.modified = False
        # drop any change notification still queued for the saved text
        self.buffer.mark_clean()
        self.refresh()

    def new_document(self) -> bool:
        if not self.guard.check():
            return False
        self.buffer.load("")
        self._bind(None)
        self.logger.info("Started a new document")
        return True

    def open(self, path: Optional[str] = None) -> bool:
        """Replace the buffer with a file's contents, prompting when path is None."""
        if not self.guard.check():
            return False

        if path is None:
            path = self.gateway.choose_open()
            if not path:
                return False

        try:
            content = self.gateway.read(path)
        except FileReadError as e:
            self.dialogs.error(e.title, str(e))
            return False

        self.buffer.load(content)
        self._bind(path)
        self.logger.info(f"Opened {path}")
        return True

    def save(self) -> bool:
        if self.path is None:
            return self.save_as()
        return self._write(self.path)

    def save_as(self) -> bool:
        initial = os.path.basename(self.path) if self.path else None
        path = self.gateway.choose_save(initial)
        if not path:
            return False
        return self._write(path)

    def _write(self, path: str) -> bool:
        try:
            self.gateway.write(path, self.buffer.get_text())
        except FileWriteError as e:
            self.dialogs.error(e.title, str(e))
            return False

        self._bind(path)
        self.logger.info(f"Saved {path}")
        return True

    def exit(self) -> bool:
        if not self.guard.check():
            return False
        self.logger.info("Closing editor")
        self.window.close()
        return True
