import logging
from typing import Dict, Optional, Union

from wcwidth import wcwidth

from ..errors import ConfigurationError
from .canvas import Canvas
from .core import Mode, Vector
from .draw_functions import DrawBox, DrawFreeform, DrawFunction, DrawLine, DrawMove

logger = logging.getLogger(__name__)


_MODE_ALIASES: Dict[str, Mode] = {
    "box": Mode.BOX,
    "line": Mode.LINE,
    "freeform": Mode.FREEFORM,
    "erase": Mode.ERASE,
    "move": Mode.MOVE,
}

DEFAULT_FREEFORM_VALUE = "O"


def _coerce_mode(value: Union[Mode, str]) -> Mode:
    if isinstance(value, Mode):
        return value
    if isinstance(value, str):
        mode = _MODE_ALIASES.get(value.lower().strip())
        if mode is not None:
            return mode
    raise ConfigurationError(f"Unknown drawing mode: {value!r}")


def _validate_value(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str) or len(value) != 1:
        raise ConfigurationError("value must be a single character or None.")
    if wcwidth(value) != 1:
        raise ConfigurationError(f"value {value!r} does not occupy exactly one column.")
    return value


class DrawingController:

    def __init__(
        self,
        canvas: Canvas,
        mode: Union[Mode, str] = Mode.BOX,
        *,
        value: Optional[str] = DEFAULT_FREEFORM_VALUE,
    ) -> None:
        if not isinstance(canvas, Canvas):
            raise ConfigurationError("canvas must be a Canvas instance.")
        self.canvas = canvas
        self._mode = Mode.BOX
        self.draw_function: DrawFunction = DrawBox(canvas)
        self.set_mode(mode, value=value)

    @property
    def mode(self) -> Mode:
        return self._mode

    def set_mode(
        self, mode: Union[Mode, str], *, value: Optional[str] = DEFAULT_FREEFORM_VALUE
    ) -> DrawFunction:
        # Any gesture in progress is dropped; its draft stays until the next move clears it.
        mode = _coerce_mode(mode)
        if mode == Mode.FREEFORM:
            value = _validate_value(value)
            if value is None:
                mode = Mode.ERASE
        if mode == Mode.BOX:
            draw_function: DrawFunction = DrawBox(self.canvas)
        elif mode == Mode.LINE:
            draw_function = DrawLine(self.canvas)
        elif mode == Mode.FREEFORM:
            draw_function = DrawFreeform(self.canvas, value)
        elif mode == Mode.ERASE:
            draw_function = DrawFreeform(self.canvas, None)
        else:
            draw_function = DrawMove(self.canvas)

        logger.debug("Switching drawing mode to %s", mode.value)
        self._mode = mode
        self.draw_function = draw_function
        return draw_function

    def handle_drawing_press(self, position: Vector) -> None:
        self.draw_function.start(position)

    def handle_drawing_move(self, position: Vector) -> None:
        self.draw_function.move(position)

    def handle_drawing_release(self, position: Vector) -> None:
        self.draw_function.end(position)
