"""
Module: textpad.config
"""

from jsonpycraft import (
    ConfigurationManager,
    JSONDecodeErrorHandler,
    JSONFileErrorHandler,
    JSONMap,
)

DEFAULT_PATH_LOGS = ".textpad/editor.log"
DEFAULT_PATH_CONF = ".textpad/settings.json"

DEFAULT_CONF = {
    "logger": {
        "path": DEFAULT_PATH_LOGS,
        "level": "DEBUG",
        "type": "file",
    },
    "app": {
        "name": "Notepad",
        "version": "1.0",
        "description": "An enhanced text editor with a modern user interface.",
    },
    "editor": {
        "title": "Text Editor",
        "geometry": "800x600",
        "theme": "Light",
        "wrap": False,
        "encoding": "utf-8",
        "font": {
            "name": "Courier",
            "size": 14,
            "bold": False,
        },
    },
}


def load_or_init_config(path: str, defaults: JSONMap):
    config = ConfigurationManager(path, initial_data=defaults)
    config.mkdir()
    try:
        config.load()
    except (JSONFileErrorHandler, JSONDecodeErrorHandler):
        config.save()
    return config


# NOTE: Do not assign to `config` in any function; it is a top-level singleton.
config = load_or_init_config(DEFAULT_PATH_CONF, DEFAULT_CONF)
