"""
Module: textpad.core.search

Plain, case-sensitive substring search over the whole buffer.
"""

from logging import Logger
from typing import Optional, Tuple

from textpad.config import config
from textpad.core.errors import InputCancelled, NotFound


def locate(text: str, needle: str) -> Optional[Tuple[int, int]]:
    """Return the [start, end) span of the first occurrence, or None."""
    index = text.find(needle)
    if index == -1:
        return None
    return index, index + len(needle)


def replace_all(text: str, needle: str, replacement: str) -> Tuple[str, int]:
    """Replace every non-overlapping occurrence, scanning left to right."""
    occurrences = text.count(needle)
    if occurrences == 0:
        return text, 0
    return text.replace(needle, replacement), occurrences


class SearchEngine:
    def __init__(self, buffer):
        self.buffer = buffer
        self.logger: Logger = config.get_logger("logger", self.__class__.__name__)

    def find(self, needle: Optional[str]) -> Tuple[int, int]:
        """Select the first occurrence of needle, searching from offset 0."""
        if not needle:
            raise InputCancelled()

        span = locate(self.buffer.get_text(), needle)
        if span is None:
            self.logger.debug(f"No match for {needle!r}")
            raise NotFound(needle)

        self.buffer.select(*span)
        self.logger.debug(f"Selected {needle!r} at {span}")
        return span

    def replace(self, needle: Optional[str], replacement: Optional[str]) -> int:
        """Replace all occurrences as a single buffer replacement."""
        if not needle:
            raise InputCancelled()

        text = self.buffer.get_text()
        result, occurrences = replace_all(text, needle, replacement or "")
        # identical output is left alone so the document stays clean
        if result != text:
            self.buffer.set_text(result)

        self.logger.debug(f"Replaced {occurrences} occurrence(s) of {needle!r}")
        return occurrences
