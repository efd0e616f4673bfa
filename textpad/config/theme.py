"""
textpad.config.theme

Color presets for the editing area and status bar.
Each preset also names the ttkbootstrap theme used for the window chrome
so menus, toolbar, and scrollbars follow the same light or dark scheme.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Theme:
    name: str
    background: str  # text area
    foreground: str
    caret: str
    selection: str
    selection_text: str
    status_background: str
    status_foreground: str
    chrome: str  # ttkbootstrap theme name


THEMES: Tuple[Theme, ...] = (
    Theme(
        name="Light",
        background="#ffffff",
        foreground="#000000",
        caret="#000000",
        selection="#add6ff",
        selection_text="#000000",
        status_background="#eeeeee",
        status_foreground="#000000",
        chrome="litera",
    ),
    Theme(
        name="Dark",
        background="#2b2b2b",
        foreground="#a9b7c6",
        caret="#bbbbbb",
        selection="#214283",
        selection_text="#a9b7c6",
        status_background="#3c3f41",
        status_foreground="#bbbbbb",
        chrome="darkly",
    ),
    Theme(
        name="Sepia",
        background="#fbf0d9",
        foreground="#5f4b32",
        caret="#5f4b32",
        selection="#f4dfb8",
        selection_text="#5f4b32",
        status_background="#ece0c8",
        status_foreground="#5f4b32",
        chrome="sandstone",
    ),
    Theme(
        name="High Contrast",
        background="#000000",
        foreground="#00ff00",
        caret="#00ff00",
        selection="#006600",
        selection_text="#00ff00",
        status_background="#000000",
        status_foreground="#00ff00",
        chrome="cyborg",
    ),
)

DEFAULT_THEME = THEMES[0]


def theme_names() -> Tuple[str, ...]:
    return tuple(theme.name for theme in THEMES)


def theme_by_name(name: str) -> Theme:
    for theme in THEMES:
        if theme.name == name:
            return theme
    raise KeyError(f"Unknown theme '{name}'")
