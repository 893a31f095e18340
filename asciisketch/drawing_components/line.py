from .canvas import Canvas
from .core import Vector


def draw_line(canvas: Canvas, start: Vector, end: Vector, clockwise: bool) -> None:
    h_x1, h_x2 = min(start.x, end.x), max(start.x, end.x)
    v_y1, v_y2 = min(start.y, end.y), max(start.y, end.y)

    # Clockwise runs horizontally along the start row first.
    h_y = start.y if clockwise else end.y
    v_x = end.x if clockwise else start.x

    for x in range(h_x1 + 1, h_x2 + 1):
        canvas.draw_special(Vector(x, h_y))
    for y in range(v_y1 + 1, v_y2 + 1):
        canvas.draw_special(Vector(v_x, y))

    canvas.draw_special(start)
    canvas.draw_special(end)
    canvas.draw_special(Vector(v_x, h_y))
