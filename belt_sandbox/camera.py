from typing import Tuple

from .coord import Coord


class Camera:
    def __init__(self, position: Coord[float] = Coord(0.0, 0.0), zoom: float = 1.0):
        assert zoom > 0
        self.position = position
        self.zoom = zoom

    def move_horizontal(self, amount: float):
        self.position = self.position + Coord(amount, 0.0)

    def move_vertical(self, amount: float):
        self.position = self.position + Coord(0.0, amount)

    def apply_scroll(self, scroll_delta: float):
        if scroll_delta < 0:
            self.zoom /= 1 + -scroll_delta / 10
        else:
            self.zoom *= 1 + scroll_delta / 10

    def screen_to_world(self, screen_coord: Coord[float], window_size: Coord[int]) -> Coord[float]:
        # Screen y points down, world y points up
        offset = Coord(screen_coord.x - window_size.x / 2, window_size.y / 2 - screen_coord.y)
        return self.position + offset / self.zoom

    def screen_to_cell(self, screen_coord: Coord[float], window_size: Coord[int], tile_size: float) -> Coord[int]:
        return (self.screen_to_world(screen_coord, window_size) / tile_size).floor()

    def ortho_bounds(self, window_size: Coord[int]) -> Tuple[float, float, float, float]:
        half_extent = Coord(window_size.x, window_size.y) / (2 * self.zoom)
        lower = self.position - half_extent
        upper = self.position + half_extent
        return lower.x, upper.x, lower.y, upper.y
