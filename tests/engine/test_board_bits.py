import unittest

from langton.board import Board
from langton.types import Color


class TestBoardBits(unittest.TestCase):
    def setUp(self):
        self.board = Board(side=1024)

    def offset_and_bitshift(self, pos):
        return self.board.offset(pos), self.board.bitshift(pos)

    def test_initial_board_all_white(self):
        self.assertEqual(len(self.board.export_bits()), 131072)
        self.assertTrue(all(b == 0xFF for b in self.board.export_bits()))
        self.assertEqual(self.board.get_color((512, 512)), Color.WHITE)
        self.assertEqual(self.board.count_black(), 0)

    def test_set_and_get(self):
        self.board.set_color((512, 512), Color.BLACK)
        self.assertEqual(self.board.get_color((512, 512)), Color.BLACK)
        self.board.set_color((512, 512), Color.WHITE)
        self.assertEqual(self.board.get_color((512, 512)), Color.WHITE)

    def test_inbound(self):
        self.assertFalse(self.board.inbound((0, 0)))
        self.assertTrue(self.board.inbound((1, 1)))
        self.assertTrue(self.board.inbound((1024, 1024)))
        self.assertFalse(self.board.inbound((1025, 1024)))
        self.assertFalse(self.board.inbound((1, 1025)))

    def test_known_offsets(self):
        self.assertEqual(self.offset_and_bitshift((1, 1)), (0, 7))
        self.assertEqual(self.offset_and_bitshift((2, 1)), (0, 6))
        self.assertEqual(self.offset_and_bitshift((1024, 1)), (127, 0))
        self.assertEqual(self.offset_and_bitshift((15, 3)), (257, 1))
        self.assertEqual(self.offset_and_bitshift((1, 1024)), (130944, 7))
        self.assertEqual(self.offset_and_bitshift((1024, 1024)), (131071, 0))

    def test_black_clears_expected_bit(self):
        self.board.set_color((15, 3), Color.BLACK)
        data = self.board.export_bits()
        self.assertEqual(data[257], 0xFF & ~(1 << 1))
        self.assertEqual(data[256], 0xFF)
        self.assertEqual(data[258], 0xFF)

    def test_export_is_a_copy(self):
        data = self.board.export_bits()
        self.assertIsInstance(data, bytes)
        self.board.set_color((1, 1), Color.BLACK)
        self.assertEqual(data[0], 0xFF)
        self.assertEqual(self.board.export_bits()[0], 0x7F)

    def test_out_of_bounds_access_raises(self):
        with self.assertRaises(IndexError):
            self.board.get_color((0, 1))
        with self.assertRaises(IndexError):
            self.board.set_color((1, 1025), Color.BLACK)

    def test_invalid_side(self):
        with self.assertRaises(ValueError):
            Board(side=12)
        with self.assertRaises(ValueError):
            Board(side=0)


class TestSmallBoardRoundTrip(unittest.TestCase):
    def test_each_cell_independent(self):
        board = Board(side=16)
        for y in range(1, 17):
            for x in range(1, 17):
                board.set_color((x, y), Color.BLACK)
                self.assertEqual(board.get_color((x, y)), Color.BLACK)
                self.assertEqual(board.count_black(), 1)
                board.set_color((x, y), Color.WHITE)
                self.assertEqual(board.get_color((x, y)), Color.WHITE)
        self.assertEqual(board.count_black(), 0)

    def test_to_array_orientation(self):
        board = Board(side=8)
        board.set_color((3, 5), Color.BLACK)
        grid = board.to_array()
        self.assertEqual(grid.shape, (8, 8))
        self.assertEqual(grid[4, 2], Color.BLACK)
        self.assertEqual(int(grid.sum()), 63)

    def test_center(self):
        self.assertEqual(Board(side=16).center(), (8, 8))


if __name__ == "__main__":
    unittest.main()
