from typing import Iterator, Optional, Tuple

import numpy as np

from .coord import Coord
from .direction import Direction
from .tile import Belt

GRID_SIZE = 128

Neighbour = Tuple[Optional[Belt], Coord[int]]


class Grid:
    """
    Fixed size grid of belts.

    Cells outside of the grid are permanently empty: reading them gives None and writing to them does nothing, so
    neighbours can be probed at the edges without any bounds checking by the caller.
    """

    def __init__(self, width: int = GRID_SIZE, height: int = GRID_SIZE):
        assert width > 0 and height > 0
        self.width = width
        self.height = height
        self.tiles = np.full((height, width), None, dtype=object)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_belt(self, x: int, y: int) -> Optional[Belt]:
        if not self.in_bounds(x, y):
            return None
        return self.tiles[y, x]

    def set_belt(self, x: int, y: int, belt: Belt):
        if self.in_bounds(x, y):
            self.tiles[y, x] = belt

    def clear_tile(self, x: int, y: int):
        if self.in_bounds(x, y):
            self.tiles[y, x] = None

    def clear(self):
        self.tiles[:, :] = None

    def iterate_belts(self) -> Iterator[Tuple[Coord[int], Belt]]:
        for (y, x), belt in np.ndenumerate(self.tiles):
            if belt is not None:
                yield Coord(x, y), belt

    def __len__(self) -> int:
        return sum(1 for _ in self.iterate_belts())

    def _neighbour(self, x: int, y: int, direction: Direction) -> Neighbour:
        coord = Coord(x, y).step(direction)
        return self.get_belt(*coord), coord

    def belt_left_of(self, x: int, y: int, belt: Belt) -> Neighbour:
        return self._neighbour(x, y, belt.output_direction.rotate_anti_clockwise())

    def belt_right_of(self, x: int, y: int, belt: Belt) -> Neighbour:
        return self._neighbour(x, y, belt.output_direction.rotate_clockwise())

    def belt_in_front_of(self, x: int, y: int, belt: Belt) -> Neighbour:
        return self._neighbour(x, y, belt.output_direction)

    def belt_behind(self, x: int, y: int, belt: Belt) -> Neighbour:
        return self._neighbour(x, y, belt.input_direction)

    def calculate_belt_position(self, x: int, y: int, belt: Belt) -> Belt:
        """
        Works out the input direction a belt should take if placed at (x, y), leaving the grid untouched.

        A belt already feeding straight in from behind keeps the belt as given. Otherwise a single side neighbour
        pointing into the tile becomes the input, and when both sides (or neither) point in the input is left alone.
        """
        belt_behind, _ = self.belt_behind(x, y, belt)
        if belt_behind is not None and belt_behind.output_direction == belt.input_direction.flip():
            return belt

        left_belt, _ = self.belt_left_of(x, y, belt)
        right_belt, _ = self.belt_right_of(x, y, belt)

        left_facing_into = left_belt is not None and left_belt.output_direction == belt.output_direction.rotate_clockwise()
        right_facing_into = right_belt is not None and right_belt.output_direction == belt.output_direction.rotate_anti_clockwise()

        if left_facing_into and not right_facing_into:
            return belt.with_input(left_belt.output_direction.flip())
        elif right_facing_into and not left_facing_into:
            return belt.with_input(right_belt.output_direction.flip())

        return belt

    def place_belt(self, x: int, y: int, belt: Belt) -> Belt:
        belt = self.calculate_belt_position(x, y, belt)
        output_direction = belt.output_direction

        front_belt, front_coord = self.belt_in_front_of(x, y, belt)
        if front_belt is not None:
            new_front_belt = None

            if output_direction.is_perpendicular(front_belt.input_direction) and \
                    self.belt_behind(*front_coord, front_belt)[0] is None:
                # Claim from the side, unless the front belt points straight back at us
                if front_belt.output_direction != output_direction.flip():
                    new_front_belt = front_belt.with_input(output_direction.flip())
            elif output_direction.is_perpendicular(front_belt.output_direction):
                if front_belt.input_direction == output_direction:
                    new_front_belt = front_belt.with_input(front_belt.output_direction.flip())
            elif front_belt.output_direction == output_direction and \
                    front_belt.input_direction != front_belt.output_direction.flip():
                new_front_belt = front_belt.with_input(front_belt.output_direction.flip())

            if new_front_belt is not None:
                self.set_belt(*front_coord, new_front_belt)

        self.set_belt(x, y, belt)
        return belt
