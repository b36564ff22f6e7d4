from typing import Tuple
import enum


@enum.unique
class Direction(enum.Enum):
    # Declared in clockwise order, y grows northwards
    WEST = 0
    NORTH = 1
    EAST = 2
    SOUTH = 3

    def __init__(self, value: int):
        self.vec: Tuple[int, int] = [(-1, 0), (0, 1), (1, 0), (0, -1)][value]

    def add(self, rotation: int) -> 'Direction':
        assert isinstance(rotation, int)
        return Direction((self.value + rotation) % 4)

    def __index__(self):
        return self.value

    @property
    def dx(self):
        return self.vec[0]

    @property
    def dy(self):
        return self.vec[1]

    def rotate_clockwise(self) -> 'Direction':
        return self.add(1)

    def rotate_anti_clockwise(self) -> 'Direction':
        return self.add(-1)

    def flip(self) -> 'Direction':
        return self.add(2)

    @property
    def axis(self) -> 'Axis':
        return Axis(self.value % 2)

    def is_perpendicular(self, other: 'Direction') -> bool:
        return self.axis != other.axis


@enum.unique
class Axis(enum.Enum):
    HORIZONTAL = 0
    VERTICAL = 1

    def __index__(self):
        return self.value

    @property
    def directions(self) -> Tuple[Direction, Direction]:
        return Direction(self.value), Direction(self.value + 2)
