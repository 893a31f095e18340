from rich import print

from asciisketch import Canvas, DrawingController, Mode, Vector


def main() -> None:
    canvas = Canvas(40, 12, box_style="rounded", draft_style="[#0a7e89]")
    controller = DrawingController(canvas)

    def drag(*points: Vector) -> None:
        controller.handle_drawing_press(points[0])
        for point in points[1:]:
            controller.handle_drawing_move(point)
        controller.handle_drawing_release(points[-1])

    drag(Vector(1, 1), Vector(12, 5))
    controller.set_mode(Mode.LINE)
    drag(Vector(12, 3), Vector(24, 8))
    controller.set_mode(Mode.FREEFORM, value="O")
    drag(Vector(26, 8), Vector(27, 8))

    controller.set_mode(Mode.MOVE)
    controller.handle_drawing_press(Vector(24, 8))
    controller.handle_drawing_move(Vector(30, 10))
    print(canvas.render(include_markup=True))
    controller.handle_drawing_release(Vector(30, 10))

    print(canvas.render(include_markup=True))


if __name__ == "__main__":
    main()
