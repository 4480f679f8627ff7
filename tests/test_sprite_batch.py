from dataclasses import dataclass, field

import numpy as np
import pytest

from seika.sprite_batch import (
    MAX_SPRITE_COUNT,
    Color,
    FontCharacter,
    Rect2,
    Size2D,
    glyph_quads,
    sprite_vertices,
    texture_coordinates,
)
from seika.texture import Texture


@dataclass
class _Item:
    texture: Texture
    source_rect: Rect2
    dest_size: Size2D
    color: Color = Color(0.25, 0.5, 0.75, 1.0)
    flip_h: bool = False
    flip_v: bool = False
    model: np.ndarray = field(default_factory=lambda: np.identity(4, dtype=np.float32))


def _texture(size=16, nearest=True):
    return Texture(width=size, height=size, nr_channels=4, apply_nearest_neighbor=nearest)


def test_full_texture_coordinates():
    coords = texture_coordinates(_texture(), Rect2(0, 0, 16, 16), False, False)
    assert (coords.s_min, coords.s_max, coords.t_min, coords.t_max) == (0.0, 1.0, 0.0, 1.0)


def test_sub_rect_coordinates_are_inset():
    coords = texture_coordinates(_texture(), Rect2(0, 0, 8, 8), False, False)
    assert coords.s_min == pytest.approx(0.03125)
    assert 0.0 < coords.s_min < coords.s_max < 1.0
    assert 0.0 < coords.t_min < coords.t_max < 1.0


def test_flip_swaps_coordinates():
    texture = _texture()
    rect = Rect2(4, 2, 8, 6)
    plain = texture_coordinates(texture, rect, False, False)
    flipped = texture_coordinates(texture, rect, True, True)
    assert (flipped.s_min, flipped.s_max) == (plain.s_max, plain.s_min)
    assert (flipped.t_min, flipped.t_max) == (plain.t_max, plain.t_min)


def test_empty_batch():
    vertices, models = sprite_vertices([])
    assert vertices.shape == (0, 10)
    assert models.shape == (0, 4, 4)


def test_single_sprite_vertices():
    item = _Item(_texture(), Rect2(0, 0, 16, 16), Size2D(2, 3))
    vertices, models = sprite_vertices([item])
    assert vertices.shape == (6, 10)
    assert np.all(vertices[:, 0] == 0)
    assert np.array_equal(vertices[:, 3], vertices[:, 1])
    assert np.array_equal(vertices[:, 4], vertices[:, 2])
    assert np.allclose(vertices[:, 5:9], [0.25, 0.5, 0.75, 1.0])
    assert np.all(vertices[:, 9] == 1.0)
    assert models[0][0][0] == 2
    assert models[0][1][1] == 3
    assert models[0][3][3] == 1


def test_model_input_not_modified():
    item = _Item(_texture(), Rect2(0, 0, 16, 16), Size2D(5, 5))
    sprite_vertices([item])
    assert np.array_equal(item.model, np.identity(4))


def test_negative_determinant_swaps_corner_pattern():
    texture = _texture()
    positive = _Item(texture, Rect2(0, 0, 16, 16), Size2D(1, 1))
    negative = _Item(texture, Rect2(0, 0, 16, 16), Size2D(-1, 1))
    pos_vertices, _ = sprite_vertices([positive])
    neg_vertices, _ = sprite_vertices([negative])
    assert np.array_equal(neg_vertices[:, 1], pos_vertices[:, 2])
    assert np.array_equal(neg_vertices[:, 2], pos_vertices[:, 1])


def test_batch_ids_and_first_texture_flag():
    first = _Item(_texture(nearest=False), Rect2(0, 0, 16, 16), Size2D(1, 1))
    second = _Item(_texture(nearest=True), Rect2(0, 0, 16, 16), Size2D(1, 1))
    vertices, models = sprite_vertices([first, second])
    assert vertices.shape == (12, 10)
    assert np.all(vertices[:6, 0] == 0)
    assert np.all(vertices[6:, 0] == 1)
    assert np.all(vertices[:, 9] == 0.0)
    assert models.shape == (2, 4, 4)


def test_too_many_sprites():
    item = _Item(_texture(), Rect2(0, 0, 16, 16), Size2D(1, 1))
    with pytest.raises(ValueError):
        sprite_vertices([item] * (MAX_SPRITE_COUNT + 1))


def _characters():
    glyph = FontCharacter(texture_id=7, size=(10.0, 12.0), bearing=(1.0, 12.0), advance=5 * 64)
    return [glyph] * 128


def test_glyph_quads_layout():
    characters = _characters()
    quads = glyph_quads(characters, "AB", 20.0, 30.0, 2.0)
    assert len(quads) == 2
    assert [texture_id for texture_id, _ in quads] == [7, 7]
    first, second = quads[0][1], quads[1][1]
    assert first.shape == (6, 4)
    assert second[0][0] - first[0][0] == pytest.approx(5 * 2.0)
    assert first[2][0] - first[0][0] == pytest.approx(10.0 * 2.0)
    assert first[0][1] - first[1][1] == pytest.approx(12.0 * 2.0)
    assert first[0][0] == pytest.approx(20.0 + 1.0 * 2.0)


def test_glyph_quads_empty_text():
    assert glyph_quads(_characters(), "", 0.0, 0.0, 1.0) == []


def test_glyph_quads_rejects_non_ascii():
    with pytest.raises(ValueError):
        glyph_quads(_characters(), "é", 0.0, 0.0, 1.0)