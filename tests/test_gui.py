"""
Tests for the tk.Text buffer adapter. Skipped without a display.
"""
import pytest

tk = pytest.importorskip("tkinter")

from textpad.core.commands import Command, key_sequences  # noqa: E402
from textpad.core.session import DocumentSession  # noqa: E402
from textpad.gui.buffer import TextBuffer  # noqa: E402

from tests.conftest import FakeDialogs, FakeWindow  # noqa: E402


@pytest.fixture(scope="module")
def root():
    try:
        root = tk.Tk()
    except tk.TclError as e:
        pytest.skip(f"no display available: {e}")
    root.withdraw()
    yield root
    root.destroy()


@pytest.fixture
def text_buffer(root):
    widget = tk.Text(root, undo=True)
    buffer = TextBuffer(widget)
    yield buffer
    widget.destroy()


def flush(root):
    # <<Modified>> is delivered through the event queue
    root.update()


class TestTextBuffer:
    def test_load_is_silent(self, root, text_buffer):
        calls = []
        text_buffer.set_listener(lambda: calls.append(True))
        text_buffer.load("one\ntwo")
        flush(root)
        assert text_buffer.get_text() == "one\ntwo"
        assert calls == []

    def test_edits_notify(self, root, text_buffer):
        calls = []
        text_buffer.set_listener(lambda: calls.append(text_buffer.get_text()))
        text_buffer.insert("a")
        flush(root)
        text_buffer.insert("b")
        flush(root)
        assert calls == ["a", "ab"]

    def test_set_text_is_one_undo_step(self, root, text_buffer):
        text_buffer.load("hello world")
        text_buffer.set_text("heLLo worLd")
        assert text_buffer.undo() is True
        assert text_buffer.get_text() == "hello world"
        assert text_buffer.redo() is True
        assert text_buffer.get_text() == "heLLo worLd"

    def test_select_moves_caret(self, text_buffer):
        text_buffer.load("hello world")
        text_buffer.select(6, 11)
        assert text_buffer.selection() == (6, 11)
        assert text_buffer.caret() == 6

    def test_selection_empty(self, text_buffer):
        text_buffer.load("abc")
        assert text_buffer.selection() is None

    def test_select_all(self, text_buffer):
        text_buffer.load("abc\ndef")
        text_buffer.select_all()
        assert text_buffer.selection() == (0, 7)

    def test_insert_at_caret(self, text_buffer):
        text_buffer.load("ab")
        text_buffer.select(1, 1)
        text_buffer.insert("X")
        assert text_buffer.get_text() == "aXb"

    def test_select_after_astral_character(self, text_buffer):
        text_buffer.load("\U0001f600 hello")
        text_buffer.select(2, 7)
        assert text_buffer.selection() == (2, 7)
        assert text_buffer.text.get(tk.SEL_FIRST, tk.SEL_LAST) == "hello"


class TestQueuedNotification:
    def test_save_before_notification_stays_clean(self, root, text_buffer, tmp_path):
        dialogs, window = FakeDialogs(), FakeWindow()
        session = DocumentSession(text_buffer, dialogs, window)
        text_buffer.insert("pasted")
        dialogs.save_path = str(tmp_path / "a.txt")
        assert session.save() is True
        flush(root)
        assert session.modified is False
        assert window.title == "a.txt - Text Editor"
        assert (tmp_path / "a.txt").read_text() == "pasted"

    def test_later_edit_still_notifies(self, root, text_buffer, tmp_path):
        dialogs, window = FakeDialogs(), FakeWindow()
        session = DocumentSession(text_buffer, dialogs, window)
        dialogs.save_path = str(tmp_path / "a.txt")
        session.save()
        flush(root)
        text_buffer.insert("x")
        flush(root)
        assert session.modified is True


class TestShortcuts:
    def test_installed_on_text_and_window(self, root):
        from textpad.gui.app import install_shortcuts

        widget = tk.Text(root)
        window = tk.Toplevel(root)
        dispatched = []
        install_shortcuts(widget, window, dispatched.append)
        try:
            for sequence in key_sequences(Command.SAVE):
                assert widget.bind(sequence)
                assert window.bind(sequence)
            assert not widget.bind("<Control-q>")
        finally:
            widget.destroy()
            window.destroy()
