import logging
from typing import List, Optional

from .canvas import Canvas
from .core import DIRECTIONS, DrawEnd, Vector
from .line import draw_line

logger = logging.getLogger(__name__)


class DrawFunction:

    def __init__(self, canvas: Canvas) -> None:
        self.canvas = canvas

    def start(self, position: Vector) -> None:
        raise NotImplementedError

    def move(self, position: Vector) -> None:
        raise NotImplementedError

    def end(self, position: Vector) -> None:
        raise NotImplementedError


class DrawBox(DrawFunction):

    def __init__(self, canvas: Canvas) -> None:
        super().__init__(canvas)
        self.start_position: Optional[Vector] = None

    def start(self, position: Vector) -> None:
        self.start_position = position

    def move(self, position: Vector) -> None:
        self.canvas.clear_draw()
        draw_line(self.canvas, self.start_position, position, True)
        draw_line(self.canvas, self.start_position, position, False)

    def end(self, position: Vector) -> None:
        self.canvas.commit_draw()


class DrawLine(DrawFunction):

    def __init__(self, canvas: Canvas) -> None:
        super().__init__(canvas)
        self.start_position: Optional[Vector] = None

    def start(self, position: Vector) -> None:
        self.start_position = position

    def move(self, position: Vector) -> None:
        self.canvas.clear_draw()

        # Bend away from an existing perpendicular line at either end.
        start_context = self.canvas.get_context(self.start_position)
        end_context = self.canvas.get_context(position)
        clockwise = (start_context.up and start_context.down) or (
            end_context.left and end_context.right
        )

        draw_line(self.canvas, self.start_position, position, clockwise)

    def end(self, position: Vector) -> None:
        self.canvas.commit_draw()


class DrawFreeform(DrawFunction):

    def __init__(self, canvas: Canvas, value: Optional[str]) -> None:
        super().__init__(canvas)
        self.value = value

    def start(self, position: Vector) -> None:
        self.canvas.set_value(position, self.value)

    def move(self, position: Vector) -> None:
        self.canvas.set_value(position, self.value)

    def end(self, position: Vector) -> None:
        pass


class DrawMove(DrawFunction):

    def __init__(self, canvas: Canvas) -> None:
        super().__init__(canvas)
        self.ends: List[DrawEnd] = []

    def start(self, position: Vector) -> None:
        ends: List[DrawEnd] = []
        for direction in DIRECTIONS:
            mid_point = self.follow_line(position, direction)
            if mid_point == position:
                continue
            clockwise = direction.x != 0

            # A plain straight line, nothing branches off at its far end.
            if self.canvas.get_context(mid_point).count() == 1:
                ends.append(DrawEnd(mid_point, clockwise))
                continue

            for branch in DIRECTIONS:
                if (direction + branch).length() == 0:
                    continue
                end = self.follow_line(mid_point, branch)
                if end == mid_point:
                    continue
                ends.append(DrawEnd(end, clockwise))

        logger.debug("Move from (%d, %d) found %d line ends", position.x, position.y, len(ends))
        self.ends = ends

    def move(self, position: Vector) -> None:
        self.canvas.clear_draw()
        for end in self.ends:
            draw_line(self.canvas, position, end.position, end.clockwise)

    def end(self, position: Vector) -> None:
        self.canvas.commit_draw()
        self.ends = []

    def follow_line(self, start_position: Vector, direction: Vector) -> Vector:
        end_position = start_position.clone()
        while True:
            next_end = end_position + direction
            if not self.canvas.is_special(next_end):
                return end_position
            end_position = next_end
            if not self.canvas.get_context(next_end).is_straight():
                return end_position
