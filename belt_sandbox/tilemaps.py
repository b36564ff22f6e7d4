import os
from os import path
from typing import Optional, Tuple

from OpenGL.GL import *
from PIL import Image

from .coord import Coord
from .tile_renderer import BeltSprite, SpriteSheet

ASSETS_DIR = path.join(os.getenv('XDG_DATA_HOME', path.expanduser('~/.local/share')), 'belt-sandbox/assets')
BELT_TEXTURE = 'belt-1.png'
BELT_ATLAS_SIZE = 2


def get_texture_size(texture: int) -> Tuple[int, int]:
    glBindTexture(GL_TEXTURE_2D, texture)
    width = glGetTexLevelParameteriv(GL_TEXTURE_2D, 0, GL_TEXTURE_WIDTH)
    height = glGetTexLevelParameteriv(GL_TEXTURE_2D, 0, GL_TEXTURE_HEIGHT)

    return width, height


def gen_texture_2d():
    texture = int(glGenTextures(1))
    glBindTexture(GL_TEXTURE_2D, texture)
    glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_WRAP_S, GL_CLAMP_TO_EDGE)
    glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_WRAP_T, GL_CLAMP_TO_EDGE)
    glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MAG_FILTER, GL_NEAREST)
    glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MIN_FILTER, GL_NEAREST)
    return texture


def load_image(filename: str, texture: Optional[int] = None) -> int:
    if texture is None:
        texture = gen_texture_2d()

    img = Image.open(filename)
    img = img.transpose(Image.Transpose.FLIP_TOP_BOTTOM).convert('RGBA')
    data = img.tobytes()

    glBindTexture(GL_TEXTURE_2D, texture)
    glTexImage2D(GL_TEXTURE_2D, 0, GL_RGBA, *img.size, 0, GL_RGBA, GL_UNSIGNED_BYTE, data)
    return texture


class Tilemap:
    def __init__(self, texture: int, atlas_size: int):
        self.texture = texture
        self.atlas_size = atlas_size
        self.texture_size = get_texture_size(texture)

        assert self.texture_size[0] % atlas_size == 0
        assert self.texture_size[1] % atlas_size == 0

    def draw(self, centre: Coord[float], size: float, sprite: BeltSprite, alpha: float):
        glPushMatrix()
        glTranslatef(centre.x, centre.y, 0)
        glRotatef(-sprite.angle, 0, 0, 1)
        glScalef(size, size, 1)
        glTranslatef(-0.5, -0.5, 0)

        x = sprite.atlas_index % self.atlas_size
        y = self.atlas_size - sprite.atlas_index // self.atlas_size - 1

        min_u, max_u = x / self.atlas_size, (x + 1) / self.atlas_size
        min_v, max_v = y / self.atlas_size, (y + 1) / self.atlas_size

        glColor4f(1, 1, 1, alpha)
        glBindTexture(GL_TEXTURE_2D, self.texture)
        glEnable(GL_TEXTURE_2D)

        glBegin(GL_QUADS)

        glTexCoord2f(min_u, min_v)
        glVertex2f(0, 0)

        glTexCoord2f(min_u, max_v)
        glVertex2f(0, 1)

        glTexCoord2f(max_u, max_v)
        glVertex2f(1, 1)

        glTexCoord2f(max_u, min_v)
        glVertex2f(1, 0)

        glEnd()

        glDisable(GL_TEXTURE_2D)
        glBindTexture(GL_TEXTURE_2D, 0)
        glPopMatrix()

    def delete(self):
        glDeleteTextures(1, [self.texture])


# Exit point of the arrow for each atlas entry, with the belt entering from the bottom edge
ARROW_EXITS = {
    0: (0.0, 0.5),
    2: (0.5, 1.0),
    3: (1.0, 0.5),
}


class ArrowTilemap:
    def draw(self, centre: Coord[float], size: float, sprite: BeltSprite, alpha: float):
        exit_x, exit_y = ARROW_EXITS[sprite.atlas_index]

        glPushMatrix()
        glTranslatef(centre.x, centre.y, 0)
        glRotatef(-sprite.angle, 0, 0, 1)
        glScalef(size, size, 1)
        glTranslatef(-0.5, -0.5, 0)

        glColor4f(1, 1, 0.2, alpha)
        glBegin(GL_LINE_STRIP)
        glVertex2f(0.5, 0.1)
        glVertex2f(0.5, 0.5)
        glVertex2f(0.1 + 0.8 * exit_x, 0.1 + 0.8 * exit_y)
        glEnd()

        glPointSize(6)
        glBegin(GL_POINTS)
        glVertex2f(0.1 + 0.8 * exit_x, 0.1 + 0.8 * exit_y)
        glEnd()

        glPopMatrix()

    def delete(self):
        pass


def load_belt_tilemap(filename: Optional[str] = None) -> SpriteSheet:
    if filename is None:
        filename = path.join(ASSETS_DIR, BELT_TEXTURE)

    if not path.exists(filename):
        print(f'Belt texture not found ({filename}): drawing belts as arrows')
        return ArrowTilemap()

    return Tilemap(load_image(filename), BELT_ATLAS_SIZE)


def render_grid(cells: int, tile_size: float):
    extent = cells * tile_size

    glColor3f(0, 0, 0)
    glBegin(GL_LINES)

    for i in range(cells + 1):
        glVertex2f(i * tile_size, 0)
        glVertex2f(i * tile_size, extent)

        glVertex2f(0, i * tile_size)
        glVertex2f(extent, i * tile_size)

    glEnd()
