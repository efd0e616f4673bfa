"""
Module: textpad.core.gateway

Reads and writes whole text files and fronts the file chooser.
"""

import os
from logging import Logger
from typing import Optional

from textpad.config import config
from textpad.core.errors import FileReadError, FileWriteError


class FileGateway:
    def __init__(self, dialogs, encoding: Optional[str] = None):
        """
        :param dialogs: object providing `choose_open(initial_dir)` and
            `choose_save(initial_dir, initial_file)`; both return a path or None.
        :param encoding: str, optional
            Text encoding for reads and writes. Defaults to `editor.encoding`.

        The chooser starts in the directory of the last file picked during
        this session.
        """
        self.dialogs = dialogs
        self.encoding = encoding or config.get_value("editor.encoding", "utf-8")
        self.last_dir: Optional[str] = None

        self.logger: Logger = config.get_logger("logger", self.__class__.__name__)
        self.logger.debug("Initialized FileGateway instance.")

    def _remember(self, path: Optional[str]) -> Optional[str]:
        if not path:
            return None
        self.last_dir = os.path.dirname(os.path.abspath(path))
        return path

    def choose_open(self) -> Optional[str]:
        return self._remember(self.dialogs.choose_open(self.last_dir))

    def choose_save(self, initial_file: Optional[str] = None) -> Optional[str]:
        return self._remember(self.dialogs.choose_save(self.last_dir, initial_file))

    def read(self, path: str) -> str:
        # newline="" keeps line endings exactly as stored
        try:
            with open(path, "r", encoding=self.encoding, newline="") as f:
                content = f.read()
        except (OSError, UnicodeError) as e:
            self.logger.error(f"Failed to read {path}: {e}")
            raise FileReadError(path, str(e)) from e

        self.logger.info(f"Read {len(content)} characters from {path}")
        return content

    def write(self, path: str, content: str) -> None:
        try:
            with open(path, "w", encoding=self.encoding, newline="") as f:
                f.write(content)
        except (OSError, UnicodeError) as e:
            self.logger.error(f"Failed to write {path}: {e}")
            raise FileWriteError(path, str(e)) from e

        self.logger.info(f"Wrote {len(content)} characters to {path}")
