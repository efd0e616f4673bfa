"""
Module: textpad.core.commands

Named user intents and the router that maps them to handlers.
Menus, toolbar controls, and keyboard shortcuts all dispatch through
the same router.
"""

import sys
from enum import Enum
from logging import Logger
from typing import Callable, Dict, List, Optional

from textpad.config import config


class Command(Enum):
    NEW = "New"
    OPEN = "Open"
    SAVE = "Save"
    SAVE_AS = "Save As"
    PRINT = "Print"
    EXIT = "Exit"
    UNDO = "Undo"
    REDO = "Redo"
    CUT = "Cut"
    COPY = "Copy"
    PASTE = "Paste"
    FIND = "Find"
    REPLACE = "Replace"
    SELECT_ALL = "Select All"
    WORD_WRAP = "Word Wrap"
    INSERT_DATE_TIME = "Insert Date/Time"
    WORD_COUNT = "Word Count"
    ABOUT = "About"

    @property
    def label(self) -> str:
        return self.value


# meta + letter
SHORTCUTS: Dict[Command, str] = {
    Command.NEW: "n",
    Command.OPEN: "o",
    Command.SAVE: "s",
    Command.PRINT: "p",
    Command.UNDO: "z",
    Command.REDO: "y",
    Command.FIND: "f",
    Command.REPLACE: "h",
    Command.SELECT_ALL: "a",
}


def meta_key(platform: Optional[str] = None) -> str:
    """Tk modifier name for the platform meta key."""
    platform = platform or sys.platform
    return "Command" if platform == "darwin" else "Control"


def accelerator(command: Command, platform: Optional[str] = None) -> Optional[str]:
    """Menu hint such as 'Ctrl+N', or None for commands without a shortcut."""
    letter = SHORTCUTS.get(command)
    if letter is None:
        return None
    prefix = "Cmd" if meta_key(platform) == "Command" else "Ctrl"
    return f"{prefix}+{letter.upper()}"


def key_sequences(command: Command, platform: Optional[str] = None) -> List[str]:
    """Tk event patterns for a shortcut, in both letter cases."""
    letter = SHORTCUTS.get(command)
    if letter is None:
        return []
    meta = meta_key(platform)
    return [f"<{meta}-{letter}>", f"<{meta}-{letter.upper()}>"]


class CommandRouter:
    def __init__(self):
        self._handlers: Dict[Command, Callable[[], object]] = {}
        self.logger: Logger = config.get_logger("logger", self.__class__.__name__)

    @property
    def handlers(self) -> Dict[Command, Callable[[], object]]:
        return dict(self._handlers)

    def register(self, command: Command, handler: Callable[[], object]):
        self._handlers[command] = handler

    def dispatch(self, command: Command) -> bool:
        handler = self._handlers.get(command)
        if handler is None:
            self.logger.warning(f"No handler registered for '{command.label}'")
            return False
        self.logger.debug(f"Dispatching '{command.label}'")
        handler()
        return True
