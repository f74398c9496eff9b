"""Geometry, input events and clickable buttons shared by the booking screens."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional, Tuple

Color = Tuple[int, int, int]

WHITE: Color = (255, 255, 255)
BLACK: Color = (0, 0, 0)
RED: Color = (255, 0, 0)
SELECTED_BLUE: Color = (0, 120, 255)
TEXT_GREY: Color = (60, 60, 60)
OUTLINE_GREY: Color = (160, 160, 160)

TEXT_BUTTON_WIDTH = 120
TEXT_BUTTON_HEIGHT = 40
OUTLINE_THICKNESS = 2


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle; the right and bottom edges are exclusive."""

    x: float
    y: float
    width: float
    height: float

    def contains(self, x: float, y: float) -> bool:
        return self.x <= x < self.x + self.width and self.y <= y < self.y + self.height


class Key(enum.Enum):
    """Keys the forms react to."""

    TAB = "tab"
    RETURN = "return"
    OTHER = "other"


@dataclass(frozen=True)
class TextEntered:
    """A character typed by the user; a backspace arrives as ``"\\b"``."""

    char: str


@dataclass(frozen=True)
class KeyPressed:
    """A non-text key press."""

    key: Key


@dataclass(frozen=True)
class MouseClick:
    """A mouse button press at window coordinates."""

    x: float
    y: float


@dataclass
class Button:
    """A rectangle with a caption that toggles its selection when pressed."""

    x: float
    y: float
    width: float
    height: float
    text: str
    fill: Color
    text_color: Color = TEXT_GREY
    text_size: int = 16
    outline_color: Optional[Color] = None
    outline_thickness: float = 0
    selected: bool = False

    @classmethod
    def text_button(cls, x: float, y: float, text_size: int, text: str, fill: Color) -> "Button":
        """A fixed-size action button with white caption text."""
        return cls(
            x,
            y,
            TEXT_BUTTON_WIDTH,
            TEXT_BUTTON_HEIGHT,
            text,
            fill,
            text_color=WHITE,
            text_size=text_size,
        )

    @property
    def bounds(self) -> Rect:
        """The clickable area, including any outline."""
        t = self.outline_thickness
        return Rect(self.x - t, self.y - t, self.width + 2 * t, self.height + 2 * t)

    def refresh_colors(self) -> None:
        """Colour the button according to whether it is selected."""
        self.fill = SELECTED_BLUE if self.selected else WHITE
        self.text_color = WHITE if self.selected else TEXT_GREY

    def set_outline(self, color: Color) -> None:
        self.outline_thickness = OUTLINE_THICKNESS
        self.outline_color = color

    def possibility(self) -> str:
        """The caption if the button is selected, otherwise an empty string."""
        return self.text if self.selected else ""

    def press(self, x: float, y: float) -> bool:
        """Toggle the selection if the point is inside; report whether it was."""
        if self.bounds.contains(x, y):
            self.selected = not self.selected
            return True
        return False