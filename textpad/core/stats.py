"""
Module: textpad.core.stats

Line, word, and character counts shown in the status bar and the
Word Count dialog.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class TextStats:
    lines: int
    words: int
    characters: int


def count_lines(text: str) -> int:
    # only "\n" breaks a line; a trailing newline does not start a new one
    return max(1, text.count("\n") + (0 if text.endswith("\n") else 1))


def count_words(text: str) -> int:
    if not text:
        return 0
    # whitespace-only text still yields one (empty) token
    return len(text.split()) or 1


def count(text: str) -> TextStats:
    return TextStats(
        lines=count_lines(text),
        words=count_words(text),
        characters=len(text),
    )


def status_line(stats: TextStats) -> str:
    return (
        f"Lines: {stats.lines}   "
        f"Words: {stats.words}   "
        f"Characters: {stats.characters}"
    )


def report(stats: TextStats) -> str:
    return (
        f"Lines: {stats.lines}\n"
        f"Words: {stats.words}\n"
        f"Characters: {stats.characters}"
    )
