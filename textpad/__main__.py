"""
Script: textpad.__main__
"""

import sys

from textpad.config import config
from textpad.gui.app import TextpadApp


def main() -> int:
    logger = config.get_logger("logger", "textpad")

    try:
        app = TextpadApp()
    except Exception as e:
        logger.critical(f"Unable to initialize the user interface: {e}", exc_info=True)
        return 1

    logger.info("Starting event loop")
    app.mainloop()
    return 0


if __name__ == "__main__":
    sys.exit(main())
