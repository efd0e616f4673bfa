"""
Module: textpad.core.font
"""

from dataclasses import dataclass, replace
from typing import Tuple, Union

from textpad.config import config

FONT_SIZE_MIN = 8
FONT_SIZE_MAX = 72
FONT_SIZE_STEP = 2


def clamp_size(size: int) -> int:
    """Pin a size into [8, 72] on the 8, 10, 12, ... grid."""
    size = min(max(int(size), FONT_SIZE_MIN), FONT_SIZE_MAX)
    return size - (size - FONT_SIZE_MIN) % FONT_SIZE_STEP


@dataclass(frozen=True)
class FontState:
    family: str = "Courier"
    size: int = 14
    bold: bool = False

    def __post_init__(self):
        object.__setattr__(self, "size", clamp_size(self.size))

    @classmethod
    def from_config(cls) -> "FontState":
        return cls(
            family=config.get_value("editor.font.name", "Courier"),
            size=config.get_value("editor.font.size", 14),
            bold=bool(config.get_value("editor.font.bold", False)),
        )

    def with_family(self, family: str) -> "FontState":
        return replace(self, family=family)

    def with_size(self, size: int) -> "FontState":
        return replace(self, size=size)

    def toggle_bold(self) -> "FontState":
        return replace(self, bold=not self.bold)

    def as_tk(self) -> Tuple[Union[str, int], ...]:
        if self.bold:
            return (self.family, self.size, "bold")
        return (self.family, self.size)
