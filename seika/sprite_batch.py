"""Vertex data for batched sprites and glyph quads for text."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Sequence

import numpy as np

from seika.texture import Texture

MAX_SPRITE_COUNT = 2000
VERTS_STRIDE = 10
NUMBER_OF_VERTICES = 6

# Which quad corners take the minimum texture coordinate, for a
# non-negative model determinant.
_S_MIN = np.array([True, False, True, True, False, False])
_T_MIN = np.array([False, True, True, False, False, True])


@dataclass(frozen=True)
class Rect2:
    """A rectangle with its top-left corner and size."""

    x: float
    y: float
    w: float
    h: float


@dataclass(frozen=True)
class Size2D:
    """A width and a height."""

    w: float
    h: float


@dataclass(frozen=True)
class Color:
    """An RGBA colour with components in 0..1."""

    r: float
    g: float
    b: float
    a: float = 1.0


@dataclass(frozen=True)
class TextureCoordinates:
    """Texture-space bounds of the area a sprite samples."""

    s_min: float
    s_max: float
    t_min: float
    t_max: float


@dataclass(frozen=True)
class FontCharacter:
    """Metrics of one rendered glyph; ``advance`` is in 1/64 pixels."""

    texture_id: int
    size: tuple[float, float]
    bearing: tuple[float, float]
    advance: int


def texture_coordinates(
    texture: Texture, source_rect: Rect2, flip_h: bool, flip_v: bool
) -> TextureCoordinates:
    """Texture coordinates for drawing ``source_rect`` out of ``texture``."""
    f32 = np.float32
    s_min, s_max, t_min, t_max = f32(0.0), f32(1.0), f32(0.0), f32(1.0)
    if texture.width != int(source_rect.w) or texture.height != int(source_rect.h):
        half = f32(0.5)
        width, height = f32(texture.width), f32(texture.height)
        x, y = f32(source_rect.x), f32(source_rect.y)
        w, h = f32(source_rect.w), f32(source_rect.h)
        with np.errstate(divide="ignore", invalid="ignore"):
            s_min = (x + half) / width
            s_max = (x + w - half) / width
            t_min = (y + half) / height
            t_max = (y + h - half) / height
    if flip_h:
        s_min, s_max = s_max, s_min
    if flip_v:
        t_min, t_max = t_max, t_min
    return TextureCoordinates(float(s_min), float(s_max), float(t_min), float(t_max))


def sprite_vertices(items: Iterable[Any]) -> tuple[np.ndarray, np.ndarray]:
    """Build the vertex buffer and model matrices for one batch of sprites.

    Each item provides ``texture``, ``source_rect``, ``dest_size``, ``color``,
    ``flip_h``, ``flip_v`` and ``model`` (a 4x4 matrix stored column by column).
    Every sprite in the batch is sampled from the first item's texture.

    Returns an array of shape ``(count * 6, 10)`` holding, per vertex, the
    sprite id, quad position (2), texture coordinates (2), colour (4) and the
    nearest-neighbour flag, and an array of shape ``(count, 4, 4)`` with each
    model matrix scaled by its destination size.
    """
    items = list(items)
    count = len(items)
    if count > MAX_SPRITE_COUNT:
        raise ValueError(f"a batch holds at most {MAX_SPRITE_COUNT} sprites, got {count}")
    vertices = np.zeros((count * NUMBER_OF_VERTICES, VERTS_STRIDE), dtype=np.float32)
    models = np.zeros((count, 4, 4), dtype=np.float32)
    if count == 0:
        return vertices, models

    texture = items[0].texture
    nearest = float(texture.apply_nearest_neighbor)
    for index, item in enumerate(items):
        model = np.array(item.model, dtype=np.float32).reshape(4, 4)
        model[0] *= np.float32(item.dest_size.w)
        model[1] *= np.float32(item.dest_size.h)
        models[index] = model

        if np.linalg.det(model) >= 0.0:
            is_s_min, is_t_min = _S_MIN, _T_MIN
        else:
            is_s_min, is_t_min = _T_MIN, _S_MIN

        coords = texture_coordinates(texture, item.source_rect, item.flip_h, item.flip_v)
        block = vertices[index * NUMBER_OF_VERTICES:(index + 1) * NUMBER_OF_VERTICES]
        block[:, 0] = index
        block[:, 1] = np.where(is_s_min, 0.0, 1.0)
        block[:, 2] = np.where(is_t_min, 0.0, 1.0)
        block[:, 3] = np.where(is_s_min, coords.s_min, coords.s_max)
        block[:, 4] = np.where(is_t_min, coords.t_min, coords.t_max)
        block[:, 5:9] = (item.color.r, item.color.g, item.color.b, item.color.a)
        block[:, 9] = nearest
    return vertices, models


def glyph_quads(
    characters: Sequence[FontCharacter], text: str, x: float, y: float, scale: float
) -> list[tuple[int, np.ndarray]]:
    """Lay out ``text`` as one ``(texture_id, 6x4 vertices)`` quad per character.

    Each vertex is ``(x, y, s, t)``; y is negated to suit a flipped projection.
    """
    quads: list[tuple[int, np.ndarray]] = []
    for char in text:
        code = ord(char)
        if code >= len(characters):
            raise ValueError(f"no glyph for character {char!r}")
        ch = characters[code]
        x_pos = x + ch.bearing[0] * scale
        y_pos = -y - (ch.size[1] - ch.bearing[1]) * scale
        w = ch.size[0] * scale
        h = ch.size[1] * scale
        verts = np.array(
            [
                [x_pos, y_pos + h, 0.0, 0.0],
                [x_pos, y_pos, 0.0, 1.0],
                [x_pos + w, y_pos, 1.0, 1.0],
                [x_pos, y_pos + h, 0.0, 0.0],
                [x_pos + w, y_pos, 1.0, 1.0],
                [x_pos + w, y_pos + h, 1.0, 0.0],
            ],
            dtype=np.float32,
        )
        quads.append((ch.texture_id, verts))
        x += (ch.advance >> 6) * scale
    return quads