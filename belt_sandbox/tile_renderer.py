from dataclasses import dataclass
from typing import Protocol

from .coord import Coord
from .direction import Direction
from .grid import Grid
from .tile import Belt, Turn

PREVIEW_ALPHA = 0.4

# Sprites are drawn with the belt entering from the bottom edge
ATLAS_INDEX = {
    Turn.LEFT: 0,
    Turn.FORWARD: 2,
    Turn.RIGHT: 3,
}

INPUT_ANGLE = {
    Direction.WEST: 90.0,
    Direction.NORTH: 180.0,
    Direction.EAST: 270.0,
    Direction.SOUTH: 0.0,
}


@dataclass(frozen=True)
class BeltSprite:
    atlas_index: int
    angle: float

    @staticmethod
    def for_belt(belt: Belt) -> 'BeltSprite':
        return BeltSprite(ATLAS_INDEX[belt.turn()], INPUT_ANGLE[belt.input_direction])


class SpriteSheet(Protocol):
    def draw(self, centre: Coord[float], size: float, sprite: BeltSprite, alpha: float):
        ...

    def delete(self):
        ...


@dataclass(frozen=True)
class BeltRenderer:
    sprites: SpriteSheet
    tile_size: float

    def render(self, belt: Belt, coord: Coord[int], alpha: float = 1.0):
        centre = (coord + 0.5) * self.tile_size
        self.sprites.draw(centre, self.tile_size, BeltSprite.for_belt(belt), alpha)

    def render_grid(self, grid: Grid) -> int:
        count = 0
        for coord, belt in grid.iterate_belts():
            self.render(belt, coord)
            count += 1
        return count

    def render_preview(self, grid: Grid, cell: Coord[int], belt: Belt) -> Belt:
        belt = grid.calculate_belt_position(cell.x, cell.y, belt)
        self.render(belt, cell, PREVIEW_ALPHA)
        return belt
