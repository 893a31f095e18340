import math
from dataclasses import dataclass
from enum import Enum


SPECIAL_VALUE = "+"


@dataclass(frozen=True)
class Vector:

    x: int
    y: int

    def __add__(self, other: "Vector") -> "Vector":
        return Vector(self.x + other.x, self.y + other.y)

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def clone(self) -> "Vector":
        return Vector(self.x, self.y)


DIRECTIONS = (
    Vector(1, 0),
    Vector(-1, 0),
    Vector(0, 1),
    Vector(0, -1),
)


@dataclass(frozen=True)
class Context:

    left: bool = False
    right: bool = False
    up: bool = False
    down: bool = False

    def count(self) -> int:
        return self.left + self.right + self.up + self.down

    def is_straight(self) -> bool:
        horizontal = self.left and self.right and not self.up and not self.down
        vertical = self.up and self.down and not self.left and not self.right
        return horizontal or vertical


@dataclass(frozen=True)
class DrawEnd:
    # clockwise is set when the first hop from the pivot was horizontal.
    position: Vector
    clockwise: bool


class Mode(Enum):

    BOX = "box"
    LINE = "line"
    FREEFORM = "freeform"
    ERASE = "erase"
    MOVE = "move"


@dataclass
class BoxChars:

    top_left: str = "╭"
    top_right: str = "╮"
    bottom_left: str = "╰"
    bottom_right: str = "╯"

    horizontal: str = "─"
    vertical: str = "│"

    tee_down: str = "┬"
    tee_up: str = "┴"
    tee_right: str = "├"
    tee_left: str = "┤"
    cross: str = "┼"

    @classmethod
    def for_style(cls, style: str) -> "BoxChars":
        key = style.lower().strip()
        if key in {"rounded", "round", "modern"}:
            return cls()
        if key in {"square", "line", "box"}:
            return cls(
                top_left="┌",
                top_right="┐",
                bottom_left="└",
                bottom_right="┘",
            )
        if key in {"ascii", "plain"}:
            return cls(
                top_left="+",
                top_right="+",
                bottom_left="+",
                bottom_right="+",
                horizontal="-",
                vertical="|",
                tee_down="+",
                tee_up="+",
                tee_right="+",
                tee_left="+",
                cross="+",
            )
        raise ValueError(f"Unknown box style: {style}")

    def glyph_for(self, context: Context) -> str:
        horizontal = context.left or context.right
        vertical = context.up or context.down
        if horizontal and not vertical:
            return self.horizontal
        if vertical and not horizontal:
            return self.vertical
        if not horizontal and not vertical:
            return self.cross

        if context.count() == 4:
            return self.cross
        if context.count() == 3:
            if not context.up:
                return self.tee_down
            if not context.down:
                return self.tee_up
            if not context.left:
                return self.tee_right
            return self.tee_left

        if context.right and context.down:
            return self.top_left
        if context.left and context.down:
            return self.top_right
        if context.right and context.up:
            return self.bottom_left
        return self.bottom_right
