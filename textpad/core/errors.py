"""
Module: textpad.core.errors

Failures a command handler reports to the user.
None of these escape the handler that triggered them.
"""

from typing import Optional


class EditorError(Exception):
    title = "Error"


class InputCancelled(EditorError):
    def __init__(self, message="Input cancelled."):
        super().__init__(message)


class FileReadError(EditorError):
    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Error opening file: {reason}")


class FileWriteError(EditorError):
    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Error saving file: {reason}")


class PrintError(EditorError):
    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Error printing: {reason}")


class NotFound(EditorError):
    title = "Find"

    def __init__(self, needle: Optional[str] = None):
        self.needle = needle
        super().__init__("Text not found")
