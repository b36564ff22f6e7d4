from dataclasses import dataclass
import enum

from .direction import Direction


class InvalidBeltError(RuntimeError):
    pass


@enum.unique
class Turn(enum.Enum):
    LEFT = 1
    FORWARD = 2
    RIGHT = 3


@dataclass(frozen=True)
class Belt:
    input_direction: Direction = Direction.WEST
    output_direction: Direction = Direction.EAST

    def turn(self) -> Turn:
        direction = self.input_direction
        for turn in Turn:
            direction = direction.rotate_clockwise()
            if direction == self.output_direction:
                return turn

        raise InvalidBeltError(f'Cannot input and output from same side ({self.input_direction}, {self.output_direction})')

    def rotate_clockwise(self) -> 'Belt':
        return type(self)(self.input_direction.rotate_clockwise(), self.output_direction.rotate_clockwise())

    def with_input(self, input_direction: Direction) -> 'Belt':
        return type(self)(input_direction, self.output_direction)
