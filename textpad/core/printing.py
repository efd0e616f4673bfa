"""
Module: textpad.core.printing

Sends the buffer to the system print spooler (`lpr`, falling back to `lp`).
"""

import os
import shutil
import subprocess
import tempfile
from logging import Logger
from typing import List, Optional

from textpad.config import config
from textpad.core.errors import PrintError

# spooler binary -> option that sets the job title
SPOOLERS = (("lpr", "-T"), ("lp", "-t"))


class PrintService:
    def __init__(self, timeout: int = 30):
        self.timeout = timeout
        self.logger: Logger = config.get_logger("logger", self.__class__.__name__)

    def command(self, path: str, title: str) -> List[str]:
        """Build the spooler invocation, raising if none is installed."""
        for name, title_flag in SPOOLERS:
            which = shutil.which(name)
            if which is not None:
                return [which, title_flag, title, path]
        raise PrintError("no print command ('lpr' or 'lp') found in $PATH")

    def print_text(self, text: str, title: Optional[str] = None) -> None:
        title = title or "Untitled"
        path = None
        try:
            fd, path = tempfile.mkstemp(prefix="textpad-", suffix=".txt")
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(text)
            args = self.command(path, title)
            self.logger.info(f"Printing '{title}' via {args[0]}")
            subprocess.run(
                args,
                capture_output=True,
                text=True,
                check=True,
                shell=False,
                timeout=self.timeout,
            )
        except subprocess.CalledProcessError as e:
            reason = e.stderr.strip() if e.stderr else f"exit status {e.returncode}"
            self.logger.error(f"Print job failed: {reason}")
            raise PrintError(reason) from e
        except (OSError, subprocess.TimeoutExpired) as e:
            self.logger.error(f"Print job failed: {e}")
            raise PrintError(str(e)) from e
        finally:
            if path is not None:
                os.remove(path)
