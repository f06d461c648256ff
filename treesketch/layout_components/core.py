from dataclasses import dataclass
from enum import Enum

from wcwidth import wcwidth


class Slot(Enum):

    LEFT = "left"
    RIGHT = "right"
    BELOW = "below"
    SPREAD = "spread"


@dataclass
class LineChars:

    left: str = "/"
    right: str = "\\"
    vertical: str = "|"

    @classmethod
    def for_style(cls, style: str) -> "LineChars":
        key = style.lower().strip()
        if key in {"ascii", "plain"}:
            return cls()
        if key in {"unicode", "line", "box"}:
            return cls(left="╱", right="╲", vertical="│")
        raise ValueError(f"Unknown line style: {style}")


@dataclass
class NodePosition:
    text: str
    x: int
    y: int
    width: int

    @property
    def start_x(self) -> int:
        return self.x - self.width // 2

    @property
    def end_x(self) -> int:
        return self.x + (self.width + 1) // 2 - 1


def char_width(char: str) -> int:
    return max(wcwidth(char), 1)


def display_width(text: str) -> int:
    return sum(char_width(char) for char in text)
