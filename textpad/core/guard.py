"""
Module: textpad.core.guard

Save-before-destroy decision made ahead of New, Open, Exit, and window close.
"""

from enum import Enum
from logging import Logger

from textpad.config import config

PROMPT_TITLE = "Unsaved Changes"
PROMPT_MESSAGE = "Do you want to save changes?"


class Decision(Enum):
    PROCEED = "proceed"
    ABORT = "abort"


class CloseGuard:
    def __init__(self, session):
        self.session = session
        self.logger: Logger = config.get_logger("logger", self.__class__.__name__)

    def decide(self) -> Decision:
        if not self.session.modified:
            return Decision.PROCEED

        # Yes -> True, No -> False, Cancel or dismissed -> None
        answer = self.session.dialogs.confirm(PROMPT_TITLE, PROMPT_MESSAGE)
        if answer is None:
            self.logger.debug("Close cancelled by user")
            return Decision.ABORT
        if answer is False:
            self.logger.debug("Discarding unsaved changes")
            return Decision.PROCEED

        self.session.save()
        if self.session.modified:
            self.logger.warning("Save did not complete; keeping document open")
            return Decision.ABORT
        return Decision.PROCEED

    def check(self) -> bool:
        return self.decide() is Decision.PROCEED
