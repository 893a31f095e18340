import logging
from typing import Dict, List, Optional, Tuple, Union

from rich.markup import escape
from wcwidth import wcwidth

from ..errors import ConfigurationError, DrawingError, GridOverflowError
from .core import SPECIAL_VALUE, BoxChars, Context, Vector

logger = logging.getLogger(__name__)


class Canvas:

    def __init__(
        self,
        width: int = 80,
        height: int = 40,
        *,
        box_style: Union[str, BoxChars] = "ascii",
        draft_style: Optional[str] = None,
    ) -> None:
        for name, value in (("width", width), ("height", height)):
            if not isinstance(value, int) or isinstance(value, bool):
                raise ConfigurationError(f"{name} must be an integer.")
            if value < 1:
                raise ConfigurationError(f"{name} must be at least 1.")

        if isinstance(box_style, BoxChars):
            box_chars = box_style
        elif isinstance(box_style, str):
            try:
                box_chars = BoxChars.for_style(box_style)
            except ValueError as exc:
                raise ConfigurationError(str(exc)) from exc
        else:
            raise ConfigurationError("box_style must be a string or BoxChars instance.")

        if draft_style is not None and not isinstance(draft_style, str):
            raise ConfigurationError("draft_style must be a string when provided.")

        self.width = width
        self.height = height
        self.box_chars = box_chars
        self.draft_style = draft_style
        self.grid: List[List[Optional[str]]] = [[None for _ in range(width)] for _ in range(height)]
        self.draft: Dict[Tuple[int, int], str] = {}

    def _in_bounds(self, position: Vector) -> bool:
        return 0 <= position.x < self.width and 0 <= position.y < self.height

    def _check_bounds(self, position: Vector) -> None:
        if not self._in_bounds(position):
            raise GridOverflowError(
                f"Position ({position.x}, {position.y}) is outside the "
                f"{self.width}x{self.height} canvas."
            )

    def get_value(self, position: Vector) -> Optional[str]:
        if not self._in_bounds(position):
            return None
        key = (position.x, position.y)
        if key in self.draft:
            return self.draft[key]
        return self.grid[position.y][position.x]

    def is_special(self, position: Vector) -> bool:
        return self.get_value(position) == SPECIAL_VALUE

    def get_context(self, position: Vector) -> Context:
        return Context(
            left=self.is_special(position + Vector(-1, 0)),
            right=self.is_special(position + Vector(1, 0)),
            up=self.is_special(position + Vector(0, -1)),
            down=self.is_special(position + Vector(0, 1)),
        )

    def draw_special(self, position: Vector) -> None:
        self._check_bounds(position)
        self.draft[(position.x, position.y)] = SPECIAL_VALUE

    def set_value(self, position: Vector, value: Optional[str]) -> None:
        self._check_bounds(position)
        if value is not None:
            if not isinstance(value, str) or len(value) != 1:
                raise DrawingError("Cell value must be a single character or None.")
            if wcwidth(value) != 1:
                raise DrawingError(f"Cell value {value!r} does not occupy exactly one column.")
        self.grid[position.y][position.x] = value

    def clear_draw(self) -> None:
        self.draft.clear()

    def commit_draw(self) -> None:
        logger.debug("Committing %d draft cells", len(self.draft))
        for (x, y), value in self.draft.items():
            self.grid[y][x] = value
        self.draft.clear()

    def _bounds(self) -> Optional[Tuple[int, int, int, int]]:
        cells = [
            (x, y)
            for y in range(self.height)
            for x in range(self.width)
            if self.grid[y][x] is not None
        ]
        cells.extend(self.draft.keys())
        if not cells:
            return None
        xs = [x for x, _ in cells]
        ys = [y for _, y in cells]
        return min(xs), min(ys), max(xs), max(ys)

    def _glyph_at(self, x: int, y: int) -> str:
        position = Vector(x, y)
        value = self.get_value(position)
        if value is None:
            return " "
        if value == SPECIAL_VALUE:
            return self.box_chars.glyph_for(self.get_context(position))
        return value

    def render(self, crop: bool = True, include_markup: bool = False) -> str:
        if crop:
            bounds = self._bounds()
            if bounds is None:
                return ""
            min_x, min_y, max_x, max_y = bounds
        else:
            min_x, min_y, max_x, max_y = 0, 0, self.width - 1, self.height - 1

        lines: List[str] = []
        for y in range(min_y, max_y + 1):
            parts: List[str] = []
            for x in range(min_x, max_x + 1):
                glyph = self._glyph_at(x, y)
                if include_markup:
                    glyph = escape(glyph)
                    if self.draft_style and (x, y) in self.draft:
                        glyph = f"{self.draft_style}{glyph}[/]"
                parts.append(glyph)
            line = "".join(parts)
            lines.append(line.rstrip() if crop else line)
        return "\n".join(lines)
