import unittest

from belt_sandbox.direction import Direction
from belt_sandbox.tile import Belt, InvalidBeltError, Turn


class TestBelt(unittest.TestCase):
    def test_default_belt(self):
        belt = Belt()
        self.assertEqual(Direction.WEST, belt.input_direction)
        self.assertEqual(Direction.EAST, belt.output_direction)
        self.assertEqual(Turn.FORWARD, belt.turn())

    def test_turn(self):
        self.assertEqual(Turn.LEFT, Belt(Direction.WEST, Direction.NORTH).turn())
        self.assertEqual(Turn.RIGHT, Belt(Direction.WEST, Direction.SOUTH).turn())
        self.assertEqual(Turn.FORWARD, Belt(Direction.SOUTH, Direction.NORTH).turn())
        self.assertEqual(Turn.RIGHT, Belt(Direction.SOUTH, Direction.EAST).turn())
        self.assertEqual(Turn.LEFT, Belt(Direction.EAST, Direction.SOUTH).turn())

    def test_turn_matches_rotation_count(self):
        for input_direction in Direction:
            for turn in Turn:
                output_direction = input_direction.add(turn.value)
                self.assertEqual(turn, Belt(input_direction, output_direction).turn())

    def test_invalid_turn(self):
        for direction in Direction:
            with self.assertRaises(InvalidBeltError):
                Belt(direction, direction).turn()

    def test_invalid_turn_is_runtime_error(self):
        with self.assertRaises(RuntimeError):
            Belt(Direction.NORTH, Direction.NORTH).turn()

    def test_rotate_clockwise(self):
        belt = Belt()
        self.assertEqual(Belt(Direction.NORTH, Direction.SOUTH), belt.rotate_clockwise())

        rotated = belt
        for _ in range(4):
            rotated = rotated.rotate_clockwise()
            self.assertEqual(belt.turn(), rotated.turn())
        self.assertEqual(belt, rotated)

    def test_with_input(self):
        belt = Belt().with_input(Direction.SOUTH)
        self.assertEqual(Belt(Direction.SOUTH, Direction.EAST), belt)

    def test_value_semantics(self):
        self.assertEqual(Belt(Direction.WEST, Direction.EAST), Belt())
        self.assertEqual(hash(Belt(Direction.WEST, Direction.EAST)), hash(Belt()))
        self.assertNotEqual(Belt(), Belt(Direction.EAST, Direction.WEST))
