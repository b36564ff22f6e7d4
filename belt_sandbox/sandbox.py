from typing import Optional

import pygame

from . import stringifier
from .camera import Camera
from .coord import Coord
from .grid import Grid
from .input_state import KeyboardState, MouseState
from .tile import Belt

TILE_SIZE = 32
PAN_SPEED = 10.0


class Sandbox:
    """Application state threaded through each update tick: the grid, the camera and the belt in hand."""

    def __init__(self, grid: Optional[Grid] = None, camera: Optional[Camera] = None, tile_size: float = TILE_SIZE):
        self.grid = grid if grid is not None else Grid()
        self.camera = camera if camera is not None else Camera()
        self.tile_size = tile_size

        self.belt_in_hand = Belt()
        self.is_placing = True
        self.debug_grid = True
        self.show_fps = False
        self.cursor_cell: Optional[Coord[int]] = None

    @property
    def mode(self) -> str:
        return 'placing' if self.is_placing else 'viewing'

    def update(self, keyboard: KeyboardState, mouse: MouseState, window_size: Coord[int]):
        if keyboard.was_pressed(pygame.K_g):
            self.debug_grid = not self.debug_grid

        if keyboard.was_pressed(pygame.K_f):
            self.show_fps = not self.show_fps

        if self.is_placing and keyboard.was_pressed(pygame.K_r):
            self.belt_in_hand = self.belt_in_hand.rotate_clockwise()

        if keyboard.was_pressed(pygame.K_SPACE):
            self.is_placing = not self.is_placing

        if keyboard.was_pressed(pygame.K_e):
            print(stringifier.encode_grid(self.grid))

        pan = PAN_SPEED / self.camera.zoom
        if keyboard.is_pressed(pygame.K_w):
            self.camera.move_vertical(pan)
        elif keyboard.is_pressed(pygame.K_s):
            self.camera.move_vertical(-pan)

        if keyboard.is_pressed(pygame.K_d):
            self.camera.move_horizontal(pan)
        elif keyboard.is_pressed(pygame.K_a):
            self.camera.move_horizontal(-pan)

        self.camera.apply_scroll(mouse.scroll_delta)

        cell = self.camera.screen_to_cell(mouse.position, window_size, self.tile_size)
        self.cursor_cell = cell if self.grid.in_bounds(*cell) else None

        if self.is_placing and self.cursor_cell is not None:
            if mouse.is_pressed(pygame.BUTTON_LEFT):
                self.grid.place_belt(cell.x, cell.y, self.belt_in_hand)

            if mouse.is_pressed(pygame.BUTTON_RIGHT):
                self.grid.clear_tile(cell.x, cell.y)
