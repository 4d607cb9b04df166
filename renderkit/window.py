"""Settings for the game window."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

CLIENT_WIDTH = 1280
CLIENT_HEIGHT = 720
WINDOW_CLASS_NAME = "CG2WindowClass"
WINDOW_TITLE = "CG2"


class Rect(NamedTuple):
    """Rectangle given by its edges."""

    left: int
    top: int
    right: int
    bottom: int

    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def height(self) -> int:
        return self.bottom - self.top


@dataclass(frozen=True)
class WindowSettings:
    """Client-area size, class name and title of the game window."""

    width: int = CLIENT_WIDTH
    height: int = CLIENT_HEIGHT
    class_name: str = WINDOW_CLASS_NAME
    title: str = WINDOW_TITLE

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("window size must be positive")

    def aspect_ratio(self) -> float:
        """Width divided by height of the client area."""
        return self.width / self.height

    def client_rect(self) -> Rect:
        """The client area as a rectangle anchored at the origin."""
        return Rect(0, 0, self.width, self.height)