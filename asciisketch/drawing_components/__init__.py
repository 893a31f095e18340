from .core import DIRECTIONS, SPECIAL_VALUE, BoxChars, Context, DrawEnd, Mode, Vector
from .canvas import Canvas
from .line import draw_line
from .draw_functions import DrawBox, DrawFreeform, DrawFunction, DrawLine, DrawMove
from .controller import DrawingController

__all__ = [
    "DIRECTIONS",
    "SPECIAL_VALUE",
    "BoxChars",
    "Context",
    "DrawEnd",
    "Mode",
    "Vector",
    "Canvas",
    "draw_line",
    "DrawFunction",
    "DrawBox",
    "DrawLine",
    "DrawFreeform",
    "DrawMove",
    "DrawingController",
]
