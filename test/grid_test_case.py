from typing import List
import unittest

from belt_sandbox import stringifier
from belt_sandbox.coord import Coord
from belt_sandbox.grid import Grid
from belt_sandbox.tile import Belt


def fixture_lines(string_grid: str) -> List[str]:
    return [line.strip() for line in string_grid.strip().splitlines()]


class BaseGridTest(unittest.TestCase):
    grid: Grid

    def setUp(self):
        super().setUp()
        self.grid = Grid()

    def set_content(self, string_grid: str, origin: Coord[int] = Coord(0, 0)):
        stringifier.decode_into(self.grid, fixture_lines(string_grid), origin)

    def assert_content(self, string_grid: str, origin: Coord[int] = Coord(0, 0)):
        lines = fixture_lines(string_grid)
        size = Coord((len(lines[0]) - 1) // 2, len(lines) - 2)
        actual = stringifier.encode_grid(self.grid, origin, origin + size)
        self.assertEqual('\n'.join(lines), actual, '\n' + actual)

    def assert_belt(self, x: int, y: int, belt: Belt):
        self.assertEqual(belt, self.grid.get_belt(x, y))
