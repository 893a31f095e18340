from .ascii_sketch import *
from .errors import *

__version__ = "0.1.0"
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
    "DrawingError",
    "ConfigurationError",
    "GridOverflowError",
]
