import random
import unittest

from toruslife import flat, life
from toruslife.life import Cell


class TestFlatBoard(unittest.TestCase):
    def test_given_board_with_torus_when_accessing_cells_then_indices_and_wraparound_correct(self):
        b = flat.board(3, 2, [(2, 1)])
        self.assertEqual(b.index(2, 1), 5)
        self.assertIs(b.at(-1, -1), Cell.ALIVE)  # wraps to (2, 1)
        self.assertIs(b.at(3, 2), Cell.DEAD)     # wraps to (0, 0)
        self.assertEqual(list(b.coords())[:4], [(0, 0), (1, 0), (2, 0), (0, 1)])

    def test_given_cell_when_listing_neighbors_then_eight_wrapped_cells(self):
        b = flat.board(4, 4, [(3, 3), (1, 1), (0, 2)])
        self.assertEqual(len(b.neighbors((0, 0))), 8)
        self.assertEqual(sum(1 for c in b.neighbors((0, 0)) if c is Cell.ALIVE), 2)

    def test_given_bad_dimensions_when_building_then_value_error(self):
        with self.assertRaises(ValueError):
            flat.board(2, 0)

    def test_given_blinker_when_stepping_then_period_two(self):
        b = flat.board(5, 5, [(1, 2), (2, 2), (3, 2)])
        once = flat.step(b)
        self.assertEqual(flat.alive_cells(once), [(2, 1), (2, 2), (2, 3)])
        self.assertEqual(flat.step(once), b)
        self.assertFalse(flat.gameover(once))
        self.assertTrue(flat.gameover(flat.step(flat.board(5, 5, [(0, 0)]))))


class TestZipperAgainstFlat(unittest.TestCase):
    def test_given_random_boards_when_stepping_both_then_same_cells(self):
        rng = random.Random(2024)
        for _ in range(12):
            width = rng.randint(3, 9)
            height = rng.randint(3, 9)
            cells = [(x, y) for y in range(height) for x in range(width) if rng.random() < 0.4]
            zb = life.board(width, height, cells)
            fb = flat.board(width, height, cells)
            for _ in range(6):
                zb = life.step(zb)
                fb = flat.step(fb)
                self.assertEqual(life.alive_cells(zb), flat.alive_cells(fb))
                self.assertEqual(life.population(zb), flat.population(fb))
                self.assertEqual(life.gameover(zb), flat.gameover(fb))
                self.assertEqual(zb.size, (width, height))


if __name__ == '__main__':
    unittest.main(verbosity=2)
