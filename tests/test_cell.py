import unittest

from labyrinth import CellColor, Direction, Maze, MazeCell, SequenceRandomSource


class MazeCellTests(unittest.TestCase):
    def setUp(self) -> None:
        self.maze = Maze(3, 4, seed=0)

    def test_neighbor_counts_by_position(self) -> None:
        for cell in self.maze:
            on_row_border = cell.row in (0, self.maze.rows - 1)
            on_col_border = cell.col in (0, self.maze.cols - 1)
            expected = 4 - int(on_row_border) - int(on_col_border)
            self.assertEqual(len(cell.get_neighbors()), expected, cell)

    def test_neighbors_follow_north_east_south_west_order(self) -> None:
        cell = self.maze.get_cell(1, 1)
        positions = [n.position for n in cell.get_neighbors()]
        self.assertEqual(positions, [(0, 1), (1, 2), (2, 1), (1, 0)])
        self.assertEqual(positions, [n.position for n in cell.get_neighbors()])

    def test_random_neighbor_uses_source(self) -> None:
        corner = self.maze.get_cell(0, 0)
        self.assertIs(corner.get_random_neighbor(SequenceRandomSource([1])), self.maze.get_cell(1, 0))
        self.assertIsNone(MazeCell(0, 0).get_random_neighbor(SequenceRandomSource([0])))

    def test_knock_down_wall_clears_both_sides(self) -> None:
        a = self.maze.get_cell(1, 1)
        b = self.maze.get_cell(1, 2)
        self.assertTrue(a.has_wall(b))
        self.assertTrue(b.has_wall(a))
        a.knock_down_wall(b)
        self.assertFalse(a.has_wall(b))
        self.assertFalse(b.has_wall(a))
        self.assertFalse(a.has_wall_on(Direction.EAST))
        self.assertFalse(b.has_wall_on(Direction.WEST))

    def test_knock_down_missing_wall_raises(self) -> None:
        a = self.maze.get_cell(0, 0)
        b = self.maze.get_cell(1, 0)
        b.knock_down_wall(a)
        with self.assertRaises(ValueError):
            a.knock_down_wall(b)

    def test_non_neighbor_raises(self) -> None:
        a = self.maze.get_cell(0, 0)
        far = self.maze.get_cell(2, 3)
        with self.assertRaises(ValueError):
            a.has_wall(far)
        with self.assertRaises(ValueError):
            a.knock_down_wall(far)

    def test_border_sides_are_walled(self) -> None:
        corner = self.maze.get_cell(0, 0)
        self.assertTrue(corner.has_wall_on(Direction.NORTH))
        self.assertTrue(corner.has_wall_on(Direction.WEST))
        self.assertIsNone(corner.neighbor(Direction.NORTH))

    def test_set_neighbors_only_once(self) -> None:
        with self.assertRaises(RuntimeError):
            self.maze.get_cell(0, 0).set_neighbors(None, None, None, None)

    def test_color_transitions(self) -> None:
        cell = MazeCell(0, 0)
        self.assertEqual(cell.color, CellColor.UNVISITED)
        self.assertFalse(cell.visited())
        cell.visit()
        cell.visit()
        self.assertEqual(cell.color, CellColor.VISITED)
        self.assertTrue(cell.visited())
        cell.examine()
        self.assertEqual(cell.color, CellColor.EXAMINED)
        self.assertTrue(cell.visited())
        with self.assertRaises(ValueError):
            cell.visit()
        cell.reset()
        self.assertEqual(cell.color, CellColor.UNVISITED)

    def test_examine_without_visit_is_allowed(self) -> None:
        cell = MazeCell(2, 2)
        cell.examine()
        self.assertEqual(cell.color, CellColor.EXAMINED)

    def test_direction_opposites(self) -> None:
        self.assertIs(Direction.NORTH.opposite, Direction.SOUTH)
        self.assertIs(Direction.EAST.opposite, Direction.WEST)
        self.assertIs(Direction.WEST.opposite, Direction.EAST)


if __name__ == "__main__":
    unittest.main()
