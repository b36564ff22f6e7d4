import argparse
import time

import pygame
from OpenGL.GL import *
from OpenGL.GLU import *
from pygame.locals import *

from . import tilemaps
from .camera import Camera
from .coord import Coord
from .input_state import KeyboardState, MouseState
from .sandbox import TILE_SIZE, Sandbox
from .tile_renderer import BeltRenderer

TITLE = 'Belt Sandbox'
UPDATES_PER_SECOND = 60


def draw(sandbox: Sandbox, renderer: BeltRenderer, window_size: Coord[int]):
    glClearColor(0.3, 0.3, 0.6, 1.0)
    glClear(GL_COLOR_BUFFER_BIT)

    glMatrixMode(GL_PROJECTION)
    glLoadIdentity()
    gluOrtho2D(*sandbox.camera.ortho_bounds(window_size))
    glMatrixMode(GL_MODELVIEW)
    glLoadIdentity()

    renderer.render_grid(sandbox.grid)

    if sandbox.is_placing and sandbox.cursor_cell is not None:
        renderer.render_preview(sandbox.grid, sandbox.cursor_cell, sandbox.belt_in_hand)

    if sandbox.debug_grid:
        glLineWidth(1)
        tilemaps.render_grid(sandbox.grid.width, sandbox.tile_size)


def main():
    parser = argparse.ArgumentParser(description='Interactive sandbox for placing conveyor belts on a grid')
    parser.add_argument('--cell-size', type=int, default=TILE_SIZE, help='Size of the grid cells (world units)')
    parser.add_argument('--texture', type=str, help='Belt texture atlas (2x2 entries: left turn, unused, forward, right turn)')
    parser.add_argument('--zoom', type=float, default=2.0, help='Initial zoom level')
    parser.add_argument('--width', type=int, default=1280, help='Initial window width (pixels)')
    parser.add_argument('--height', type=int, default=720, help='Initial window height (pixels)')
    parser.add_argument('--hide-grid', action='store_true', help='Starts with the debug grid lines hidden')
    parser.add_argument('--show-fps', action='store_true', help='Prints the render time of every frame')
    args = parser.parse_args()

    if args.cell_size <= 0:
        raise RuntimeError('Cell size must be greater than 0')
    if args.zoom <= 0:
        raise RuntimeError('Zoom must be greater than 0')

    sandbox = Sandbox(camera=Camera(Coord(300.0, 300.0), args.zoom), tile_size=args.cell_size)
    sandbox.debug_grid = not args.hide_grid
    sandbox.show_fps = args.show_fps

    keyboard = KeyboardState()
    mouse = MouseState()

    pygame.display.init()
    window_size = Coord(args.width, args.height)
    pygame.display.set_mode(window_size, OPENGL | DOUBLEBUF | RESIZABLE)

    try:
        glEnable(GL_BLEND)
        glBlendFunc(GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA)

        sprites = tilemaps.load_belt_tilemap(args.texture)
        renderer = BeltRenderer(sprites, sandbox.tile_size)

        clock = pygame.time.Clock()

        running = True
        while running:
            for event in pygame.event.get():
                keyboard.process_event(event)
                mouse.process_event(event)

                if event.type == QUIT:
                    running = False
                elif event.type == KEYDOWN and event.key == K_ESCAPE:
                    running = False
                elif event.type == VIDEORESIZE:
                    window_size = Coord(event.w, event.h)
                    glViewport(0, 0, *window_size)

            sandbox.update(keyboard, mouse, window_size)

            start = time.perf_counter()
            draw(sandbox, renderer, window_size)
            if sandbox.show_fps:
                print('Render time: {:.3f}ms'.format((time.perf_counter() - start) * 1000))

            pygame.display.set_caption('{} - {}: {:.2f}'.format(TITLE, sandbox.mode, clock.get_fps()))
            pygame.display.flip()

            keyboard.clear_momentary_state()
            mouse.clear_momentary_state()
            clock.tick(UPDATES_PER_SECOND)

        sprites.delete()
    finally:
        pygame.quit()


if __name__ == '__main__':
    main()
