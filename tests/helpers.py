from asciisketch import Vector


def special_cells(canvas):
    return {
        (x, y)
        for y in range(canvas.height)
        for x in range(canvas.width)
        if canvas.is_special(Vector(x, y))
    }


def commit_cells(canvas, cells):
    for x, y in cells:
        canvas.draw_special(Vector(x, y))
    canvas.commit_draw()
