"""
Module: textpad.gui.buffer

Adapts a tk.Text widget (with its built-in undo stack) to the buffer
interface the session and search engine expect. Offsets are character
counts from the start of the document.
"""

import tkinter as tk
from typing import Callable, Optional, Tuple


class TextBuffer:
    def __init__(self, text: tk.Text):
        self.text = text
        self.listener: Optional[Callable[[], None]] = None
        self.text.bind("<<Modified>>", self._on_modified, add="+")

    def set_listener(self, listener: Callable[[], None]):
        self.listener = listener

    def _on_modified(self, event=None):
        # <<Modified>> fires only when the flag flips; re-arm it for the next edit
        if not self.text.edit_modified():
            return
        self.text.edit_modified(False)
        if self.listener:
            self.listener()

    def index(self, offset: int) -> str:
        # Tcl 8.6 counts a character outside the BMP as two; let Tcl measure the prefix
        units = int(self.text.tk.call("string", "length", self.get_text()[:offset]))
        return f"1.0 + {units} chars"

    def offset(self, index: str) -> int:
        return len(self.text.get("1.0", index))

    def get_text(self) -> str:
        return self.text.get("1.0", "end-1c")

    def set_text(self, content: str):
        """Replace everything as one undoable edit."""
        self.text.configure(autoseparators=False)
        try:
            self.text.edit_separator()
            self.text.delete("1.0", tk.END)
            self.text.insert("1.0", content)
            self.text.edit_separator()
        finally:
            self.text.configure(autoseparators=True)

    def mark_clean(self):
        """Clear the widget's modified bit so a queued notification is ignored."""
        self.text.edit_modified(False)

    def load(self, content: str):
        """Replace everything without notifying and start a fresh undo history."""
        self.text.delete("1.0", tk.END)
        self.text.insert("1.0", content)
        self.text.edit_reset()
        self.text.edit_modified(False)
        self.text.mark_set(tk.INSERT, "1.0")
        self.text.see(tk.INSERT)

    def insert(self, content: str):
        self.text.insert(tk.INSERT, content)
        self.text.see(tk.INSERT)

    def select(self, start: int, end: int):
        self.text.tag_remove(tk.SEL, "1.0", tk.END)
        self.text.tag_add(tk.SEL, self.index(start), self.index(end))
        self.text.mark_set(tk.INSERT, self.index(start))
        self.text.see(tk.INSERT)
        self.text.focus_set()

    def selection(self) -> Optional[Tuple[int, int]]:
        ranges = self.text.tag_ranges(tk.SEL)
        if not ranges:
            return None
        return self.offset(str(ranges[0])), self.offset(str(ranges[1]))

    def caret(self) -> int:
        return self.offset(tk.INSERT)

    def select_all(self):
        self.text.tag_add(tk.SEL, "1.0", "end-1c")
        self.text.mark_set(tk.INSERT, "1.0")

    def undo(self) -> bool:
        try:
            self.text.edit_undo()
        except tk.TclError:
            return False  # nothing to undo
        return True

    def redo(self) -> bool:
        try:
            self.text.edit_redo()
        except tk.TclError:
            return False  # nothing to redo
        return True

    def cut(self):
        self.text.event_generate("<<Cut>>")

    def copy(self):
        self.text.event_generate("<<Copy>>")

    def paste(self):
        self.text.event_generate("<<Paste>>")
