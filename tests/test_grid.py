import unittest

from grid import Grid
from history import play_move
from models import Direction, Piece, Shape


class GridConstructionTestCase(unittest.TestCase):
    def test_defaults_to_empty_pieces_facing_north(self) -> None:
        g = Grid(2, 3)
        self.assertEqual((g.rows, g.cols, g.size), (2, 3, 6))
        self.assertFalse(g.wrapping)
        for i, j in g.cells():
            self.assertEqual(g.piece(i, j), Piece(Shape.EMPTY, Direction.NORTH))

    def test_optional_sequences_are_row_major(self) -> None:
        shapes = [Shape.ENDPOINT, Shape.SEGMENT, Shape.CORNER, Shape.TEE]
        g = Grid(2, 2, True, shapes=shapes)
        self.assertTrue(g.wrapping)
        self.assertEqual(g.get_shape(1, 0), Shape.CORNER)
        self.assertEqual(g.get_orientation(1, 0), Direction.NORTH)

        h = Grid(2, 2, orientations=[0, 1, 2, 3])
        self.assertEqual(h.get_shape(1, 1), Shape.EMPTY)
        self.assertEqual(h.get_orientation(1, 1), Direction.WEST)

    def test_rejects_bad_sizes_and_values(self) -> None:
        with self.assertRaises(ValueError):
            Grid(0, 3)
        with self.assertRaises(ValueError):
            Grid(2, 2, shapes=[Shape.EMPTY] * 3)
        with self.assertRaises(ValueError):
            Grid(1, 2, shapes=[0, 9])
        with self.assertRaises(ValueError):
            Grid(1, 2, orientations=[0, 4])

    def test_out_of_range_access_raises(self) -> None:
        g = Grid(2, 3)
        for i, j in ((2, 0), (0, 3), (-1, 0)):
            with self.assertRaises(IndexError):
                g.get_shape(i, j)
        with self.assertRaises(IndexError):
            g.set_orientation(0, 5, Direction.EAST)
        with self.assertRaises(ValueError):
            g.set_shape(0, 0, 6)


class GridCopyEqualTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.g = Grid(
            2, 2, False,
            [Shape.CORNER, Shape.ENDPOINT, Shape.ENDPOINT, Shape.EMPTY],
            [Direction.EAST, Direction.WEST, Direction.NORTH, Direction.NORTH],
        )

    def test_copy_is_independent_and_has_fresh_history(self) -> None:
        play_move(self.g, 0, 0, 1)
        c = self.g.copy()
        self.assertTrue(c.equal(self.g))
        self.assertFalse(c.history.can_undo)
        c.set_orientation(0, 1, Direction.SOUTH)
        self.assertEqual(self.g.get_orientation(0, 1), Direction.WEST)

    def test_equal_optionally_ignores_orientation(self) -> None:
        other = self.g.copy()
        other.set_orientation(1, 0, Direction.SOUTH)
        self.assertFalse(self.g.equal(other))
        self.assertTrue(self.g.equal(other, ignore_orientation=True))
        self.assertNotEqual(self.g, other)

    def test_equal_compares_shape_size_and_wrapping(self) -> None:
        other = self.g.copy()
        other.set_shape(1, 1, Shape.CROSS)
        self.assertFalse(self.g.equal(other, ignore_orientation=True))

        wrapped = Grid(2, 2, True, self.g.shapes, self.g.orientations)
        self.assertFalse(self.g.equal(wrapped))
        self.assertFalse(self.g.equal(Grid(2, 3)))
        self.assertEqual(self.g, Grid(2, 2, False, self.g.shapes, self.g.orientations))

    def test_assign_from_overwrites_everything(self) -> None:
        target = Grid(2, 2)
        target.assign_from(self.g)
        self.assertTrue(target.equal(self.g))
        with self.assertRaises(ValueError):
            target.assign_from(Grid(3, 2))

    def test_non_empty_count(self) -> None:
        self.assertEqual(self.g.non_empty_count(), 3)


class DefaultSizeTestCase(unittest.TestCase):
    def test_empty_grid_uses_configured_size(self) -> None:
        import defaults

        orig = defaults.CFG.DEFAULT_SIZE
        self.addCleanup(setattr, defaults.CFG, "DEFAULT_SIZE", orig)
        defaults.CFG.DEFAULT_SIZE = 3
        g = defaults.empty_grid(wrapping=True)
        self.assertEqual((g.rows, g.cols, g.wrapping), (3, 3, True))
        self.assertEqual(g.non_empty_count(), 0)


if __name__ == "__main__":
    unittest.main()
