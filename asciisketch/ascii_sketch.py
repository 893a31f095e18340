from .drawing_components import (
    BoxChars,
    Canvas,
    Context,
    DrawBox,
    DrawEnd,
    DrawFreeform,
    DrawFunction,
    DrawingController,
    DrawLine,
    DrawMove,
    Mode,
    Vector,
    draw_line,
)

__all__ = [
    "Canvas",
    "DrawingController",
    "Mode",
    "Vector",
    "Context",
    "DrawEnd",
    "BoxChars",
    "draw_line",
    "DrawFunction",
    "DrawBox",
    "DrawLine",
    "DrawFreeform",
    "DrawMove",
]
