from typing import List, Optional

import numpy as np

from .coord import Coord
from .direction import Direction
from .grid import Grid
from .tile import Belt

MAPPING = {
    None: ' ',
    Belt(Direction.WEST, Direction.EAST): '→',
    Belt(Direction.SOUTH, Direction.NORTH): '↑',
    Belt(Direction.EAST, Direction.WEST): '←',
    Belt(Direction.NORTH, Direction.SOUTH): '↓',

    Belt(Direction.WEST, Direction.NORTH): 'h',  # '⬏',
    Belt(Direction.SOUTH, Direction.WEST): 't',  # '↰',
    Belt(Direction.EAST, Direction.SOUTH): 'H',  # '⬐',
    Belt(Direction.NORTH, Direction.EAST): 'T',  # '↳',

    Belt(Direction.WEST, Direction.SOUTH): 'f',  # '⬎',
    Belt(Direction.NORTH, Direction.WEST): 'g',  # '↲',
    Belt(Direction.EAST, Direction.NORTH): 'F',  # '⬑',
    Belt(Direction.SOUTH, Direction.EAST): 'G',  # '↱',
}

INV_MAPPING = dict((val, key) for key, val in MAPPING.items())

END_STOP = '┘'

encode_tile = np.vectorize(lambda tile: MAPPING.get(tile, 'U'), otypes=['<U1'])


def decode_char(character: str) -> Optional[Belt]:
    return INV_MAPPING[character]


def encode(tiles: np.ndarray) -> str:
    # Rows are given top (north) first
    assert len(tiles.shape) == 2 and tiles.size > 0

    char_grid = np.full((tiles.shape[0] + 2, 2 * tiles.shape[1] + 1), ' ', dtype='<U1')
    char_grid[1:-1, 1:-1:2] = encode_tile(tiles)

    char_grid[0, :] = char_grid[-1, :] = '─'
    char_grid[:, 0] = char_grid[:, -1] = '│'
    char_grid[0, 0] = '┌'
    char_grid[-1, 0] = '└'
    char_grid[0, -1] = '┐'
    char_grid[-1, -1] = END_STOP

    return '\n'.join(''.join(row) for row in char_grid)


def decode(input_lines: List[str]) -> np.ndarray:
    tiles = np.full((len(input_lines) - 2, len(input_lines[0]) // 2), None, dtype=object)

    for row, line in enumerate(input_lines[1:-1]):
        for col, character in enumerate(line[1:-1]):
            if col % 2 != 0:
                if character != ' ':
                    raise RuntimeError('Unexpected non empty column')
                continue
            tiles[row, col // 2] = decode_char(character)
    return tiles


def occupied_bounds(grid: Grid):
    coords = [coord for coord, _ in grid.iterate_belts()]
    if len(coords) == 0:
        return Coord(0, 0), Coord(1, 1)

    lower = Coord(min(x for x, _ in coords), min(y for _, y in coords))
    upper = Coord(max(x for x, _ in coords), max(y for _, y in coords)) + 1
    return lower, upper


def encode_grid(grid: Grid, lower: Optional[Coord[int]] = None, upper: Optional[Coord[int]] = None) -> str:
    if lower is None or upper is None:
        lower, upper = occupied_bounds(grid)

    tiles = np.full((upper.y - lower.y, upper.x - lower.x), None, dtype=object)
    for row, y in enumerate(reversed(range(lower.y, upper.y))):
        for col, x in enumerate(range(lower.x, upper.x)):
            tiles[row, col] = grid.get_belt(x, y)
    return encode(tiles)


def decode_into(grid: Grid, input_lines: List[str], origin: Coord[int] = Coord(0, 0)):
    tiles = decode(input_lines)
    height = tiles.shape[0]
    for (row, col), belt in np.ndenumerate(tiles):
        if belt is not None:
            grid.set_belt(origin.x + col, origin.y + height - 1 - row, belt)
