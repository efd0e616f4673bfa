"""
Shared in-memory stand-ins for the toolkit adapters.
"""

import os
import shutil
import tempfile
from collections import deque

import pytest


def pytest_configure(config):
    # textpad.config reads and creates .textpad/ in the working directory on
    # import; run the whole session from an empty directory
    config._textpad_cwd = os.getcwd()
    config._textpad_tmp = tempfile.mkdtemp(prefix="textpad-tests-")
    os.chdir(config._textpad_tmp)


def pytest_unconfigure(config):
    os.chdir(config._textpad_cwd)
    shutil.rmtree(config._textpad_tmp, ignore_errors=True)


class FakeBuffer:
    """Text buffer with a linear undo journal and synchronous notifications."""

    def __init__(self, text=""):
        self.text = text
        self.listener = None
        self.cursor = 0
        self.sel = None
        self.clipboard = ""
        self.journal = [text]
        self.position = 0
        self.cleaned = 0

    def set_listener(self, listener):
        self.listener = listener

    def _notify(self):
        if self.listener:
            self.listener()

    def _edit(self, text):
        del self.journal[self.position + 1 :]
        self.journal.append(text)
        self.position += 1
        self.text = text
        self._notify()

    def get_text(self):
        return self.text

    def set_text(self, text):
        self.sel = None
        self.cursor = min(self.cursor, len(text))
        self._edit(text)

    def mark_clean(self):
        self.cleaned += 1

    def load(self, text):
        self.text = text
        self.journal = [text]
        self.position = 0
        self.cursor = 0
        self.sel = None

    def insert(self, content):
        text = self.text[: self.cursor] + content + self.text[self.cursor :]
        self.cursor += len(content)
        self._edit(text)

    def type(self, content):
        for char in content:
            self.insert(char)

    def select(self, start, end):
        self.sel = (start, end)
        self.cursor = start

    def selection(self):
        return self.sel

    def caret(self):
        return self.cursor

    def select_all(self):
        self.sel = (0, len(self.text))
        self.cursor = 0

    def undo(self):
        if self.position == 0:
            return False
        self.position -= 1
        self.text = self.journal[self.position]
        self._notify()
        return True

    def redo(self):
        if self.position == len(self.journal) - 1:
            return False
        self.position += 1
        self.text = self.journal[self.position]
        self._notify()
        return True

    def copy(self):
        if self.sel:
            self.clipboard = self.text[self.sel[0] : self.sel[1]]

    def cut(self):
        if self.sel:
            start, end = self.sel
            self.clipboard = self.text[start:end]
            self.cursor = start
            self.sel = None
            self._edit(self.text[:start] + self.text[end:])

    def paste(self):
        if self.clipboard:
            self.insert(self.clipboard)


class FakeDialogs:
    """Scripted answers for every modal; records what was shown."""

    def __init__(self):
        self.open_path = None
        self.save_path = None
        self.confirm_answer = None
        self.strings = deque()
        self.replace_answer = None
        self.shown = []
        self.confirms = []
        self.open_dirs = []
        self.save_requests = []

    def choose_open(self, initial_dir=None):
        self.open_dirs.append(initial_dir)
        return self.open_path

    def choose_save(self, initial_dir=None, initial_file=None):
        self.save_requests.append((initial_dir, initial_file))
        return self.save_path

    def confirm(self, title, message):
        self.confirms.append((title, message))
        return self.confirm_answer

    def ask_string(self, title, prompt):
        return self.strings.popleft() if self.strings else None

    def ask_replace(self):
        return self.replace_answer

    def info(self, title, message):
        self.shown.append(("info", title, message))

    def error(self, title, message):
        self.shown.append(("error", title, message))

    @property
    def messages(self):
        return [message for _, _, message in self.shown]


class FakeWindow:
    def __init__(self):
        self.title = None
        self.status = None
        self.closed = False
        self.theme = None
        self.font = None
        self.wrap = None
        self.titles = []

    def set_title(self, title):
        self.title = title
        self.titles.append(title)

    def set_status(self, text):
        self.status = text

    def close(self):
        self.closed = True

    def apply_theme(self, theme):
        self.theme = theme

    def apply_font(self, font):
        self.font = font

    def set_wrap(self, enabled):
        self.wrap = enabled


@pytest.fixture
def buffer():
    return FakeBuffer()


@pytest.fixture
def dialogs():
    return FakeDialogs()


@pytest.fixture
def window():
    return FakeWindow()
