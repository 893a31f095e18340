"""Tests for the drawing modes."""

from asciisketch import (
    Canvas,
    DrawBox,
    DrawEnd,
    DrawFreeform,
    DrawLine,
    DrawMove,
    Vector,
    draw_line,
)

from .helpers import commit_cells, special_cells


def _line_cells(start, end, clockwise):
    canvas = Canvas(10, 10)
    draw_line(canvas, start, end, clockwise)
    return special_cells(canvas)


class TestDrawBox:
    """Tests for the box mode."""

    def test_outline_is_union_of_both_bends(self, canvas):
        """Test box outline from both bends."""
        box = DrawBox(canvas)
        box.start(Vector(1, 1))
        box.move(Vector(4, 3))
        expected = _line_cells(Vector(1, 1), Vector(4, 3), True) | _line_cells(
            Vector(1, 1), Vector(4, 3), False
        )
        assert special_cells(canvas) == expected
        assert len(expected) == 10

    def test_move_replaces_preview(self, canvas):
        """Test each move redraws the preview."""
        box = DrawBox(canvas)
        box.start(Vector(1, 1))
        box.move(Vector(6, 6))
        box.move(Vector(2, 2))
        assert special_cells(canvas) == {(1, 1), (2, 1), (1, 2), (2, 2)}

    def test_committed_only_on_end(self, canvas):
        """Test box commits on end."""
        box = DrawBox(canvas)
        box.start(Vector(0, 0))
        box.move(Vector(3, 2))
        assert all(value is None for row in canvas.grid for value in row)
        box.end(Vector(3, 2))
        assert canvas.draft == {}
        assert canvas.render() == "+--+\n|  |\n+--+"


class TestDrawLine:
    """Tests for the line mode."""

    def test_defaults_to_counter_clockwise(self, canvas):
        """Test default line orientation."""
        line = DrawLine(canvas)
        line.start(Vector(0, 0))
        line.move(Vector(3, 2))
        assert canvas.is_special(Vector(0, 2))
        assert not canvas.is_special(Vector(3, 0))

    def test_bends_away_from_vertical_line_at_start(self, canvas):
        """Test bend away from a vertical line at the anchor."""
        commit_cells(canvas, [(1, 0), (1, 1), (1, 2)])
        line = DrawLine(canvas)
        line.start(Vector(1, 1))
        line.move(Vector(4, 3))
        assert (4, 1) in canvas.draft
        assert canvas.is_special(Vector(4, 2))
        assert not canvas.is_special(Vector(1, 3))

    def test_bends_away_from_horizontal_line_at_end(self, canvas):
        """Test bend away from a horizontal line at the pointer."""
        commit_cells(canvas, [(x, 3) for x in range(7)])
        line = DrawLine(canvas)
        line.start(Vector(3, 0))
        line.move(Vector(5, 3))
        assert canvas.is_special(Vector(5, 0))
        assert canvas.is_special(Vector(5, 1))
        assert not canvas.is_special(Vector(3, 1))

    def test_end_commits(self, canvas):
        """Test line commits on end."""
        line = DrawLine(canvas)
        line.start(Vector(0, 0))
        line.move(Vector(2, 0))
        line.end(Vector(2, 0))
        assert canvas.grid[0][:3] == ["+", "+", "+"]


class TestDrawFreeform:
    """Tests for stamping and erasing."""

    def test_start_stamps_immediately(self, canvas):
        """Test stamping on press."""
        freeform = DrawFreeform(canvas, "O")
        freeform.start(Vector(1, 1))
        assert canvas.grid[1][1] == "O"
        assert canvas.draft == {}

    def test_move_stamps_each_cell(self, canvas):
        """Test stamping along a drag."""
        freeform = DrawFreeform(canvas, "#")
        freeform.start(Vector(1, 1))
        freeform.move(Vector(2, 1))
        freeform.move(Vector(3, 1))
        freeform.end(Vector(3, 1))
        assert canvas.render() == "###"

    def test_erase(self, canvas):
        """Test erasing a cell."""
        commit_cells(canvas, [(0, 0), (1, 0), (2, 0)])
        eraser = DrawFreeform(canvas, None)
        eraser.start(Vector(1, 0))
        eraser.end(Vector(1, 0))
        assert special_cells(canvas) == {(0, 0), (2, 0)}


class TestDrawMove:
    """Tests for dragging existing lines."""

    def test_isolated_point_has_no_ends(self, canvas):
        """Test dragging empty space."""
        mover = DrawMove(canvas)
        mover.start(Vector(5, 5))
        assert mover.ends == []
        mover.move(Vector(2, 2))
        assert special_cells(canvas) == set()

    def test_straight_run_from_its_end(self, canvas):
        """Test dragging the end of a straight run."""
        commit_cells(canvas, [(2, 5), (3, 5), (4, 5)])
        mover = DrawMove(canvas)
        mover.start(Vector(2, 5))
        assert mover.ends == [DrawEnd(Vector(4, 5), True)]

        mover.move(Vector(2, 8))
        assert set(canvas.draft) == {(2, 8), (3, 8), (4, 8), (4, 7), (4, 6), (4, 5)}

    def test_straight_run_from_its_middle(self, canvas):
        """Test dragging the middle of a straight run."""
        commit_cells(canvas, [(x, 2) for x in range(7)])
        mover = DrawMove(canvas)
        mover.start(Vector(3, 2))
        assert mover.ends == [DrawEnd(Vector(6, 2), True), DrawEnd(Vector(0, 2), True)]

    def test_vertical_run_is_not_clockwise(self, canvas):
        """Test vertical first hop orientation."""
        commit_cells(canvas, [(1, y) for y in range(1, 5)])
        mover = DrawMove(canvas)
        mover.start(Vector(1, 1))
        assert mover.ends == [DrawEnd(Vector(1, 4), False)]

    def test_follows_around_corner(self, canvas):
        """Test tracing past a corner."""
        commit_cells(canvas, [(1, 1), (2, 1), (3, 1), (4, 1), (4, 2), (4, 3), (4, 4)])
        mover = DrawMove(canvas)
        assert mover.follow_line(Vector(1, 1), Vector(1, 0)) == Vector(4, 1)

        mover.start(Vector(1, 1))
        assert mover.ends == [DrawEnd(Vector(4, 4), True)]

        mover.move(Vector(1, 4))
        assert set(canvas.draft) == {(1, 4), (2, 4), (3, 4), (4, 4)}

    def test_vertical_first_hop_keeps_orientation_past_corner(self, canvas):
        """Test corner ends keep the vertical first hop orientation."""
        commit_cells(canvas, [(1, 0), (1, 1), (1, 2), (1, 3), (2, 3), (3, 3)])
        mover = DrawMove(canvas)
        mover.start(Vector(1, 0))
        assert mover.ends == [DrawEnd(Vector(3, 3), False)]

        mover.move(Vector(6, 0))
        assert set(canvas.draft) == {(6, 0), (6, 1), (6, 2), (6, 3), (5, 3), (4, 3), (3, 3)}
        assert (3, 0) not in canvas.draft

    def test_fans_out_through_junction(self, canvas):
        """Test tracing every branch of a junction."""
        commit_cells(canvas, [(x, 2) for x in range(7)] + [(3, y) for y in range(5)])
        mover = DrawMove(canvas)
        mover.start(Vector(0, 2))
        assert {end.position for end in mover.ends} == {Vector(6, 2), Vector(3, 4), Vector(3, 0)}
        assert all(end.clockwise for end in mover.ends)

    def test_move_leaves_grid_untouched_until_end(self, canvas):
        """Test move only touches the draft until end."""
        commit_cells(canvas, [(2, 5), (3, 5), (4, 5)])
        before = [row[:] for row in canvas.grid]
        mover = DrawMove(canvas)
        mover.start(Vector(2, 5))
        mover.move(Vector(2, 8))
        mover.move(Vector(0, 0))
        assert canvas.grid == before

        mover.end(Vector(0, 0))
        assert mover.ends == []
        assert canvas.grid[0][0] == "+"
        assert canvas.grid[0][4] == "+"
