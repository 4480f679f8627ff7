"""Draw queue that orders sprites and text by z index and batches sprites by texture."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np

from seika.shader import ShaderInstance
from seika.sprite_batch import Color, Rect2, Size2D
from seika.texture import Texture

MAX_Z_INDEX = 200
LAYER_SPRITE_MAX = 1024
LAYER_FONT_MAX = 100
LAYER_TEXTURE_MAX = 64


class RenderBatchFullError(RuntimeError):
    """Raised when a render layer cannot take another draw call."""


@dataclass
class SpriteBatchItem:
    """One queued sprite draw; ``model`` is a 4x4 float32 matrix."""

    texture: Texture
    source_rect: Rect2
    dest_size: Size2D
    color: Color
    flip_h: bool
    flip_v: bool
    model: np.ndarray
    shader_instance: ShaderInstance | None = None


@dataclass(frozen=True)
class FontBatchItem:
    """One queued text draw."""

    font: Any
    text: str
    x: float
    y: float
    scale: float
    color: Color


@dataclass
class _RenderLayer:
    sprite_batches: list[list[SpriteBatchItem]] = field(default_factory=list)
    fonts: list[FontBatchItem] = field(default_factory=list)


def z_index_to_layer(z_index: int) -> int:
    """Map a z index, centred on zero, to a layer slot in ``0..MAX_Z_INDEX - 1``."""
    return max(0, min(z_index + MAX_Z_INDEX // 2, MAX_Z_INDEX - 1))


class RenderQueue:
    """Collects draw calls for one frame and hands them out in draw order.

    Sprites on a layer are grouped into batches that share both texture and
    shader instance (by identity); batches keep the order in which they first
    appeared. Within a layer sprites are drawn before text.
    """

    def __init__(self) -> None:
        self._layers: dict[int, _RenderLayer] = {}

    def queue_sprite(
        self,
        texture: Texture,
        source_rect: Rect2,
        dest_size: Size2D,
        color: Color,
        flip_h: bool,
        flip_v: bool,
        model: Any,
        z_index: int,
        shader_instance: ShaderInstance | None = None,
    ) -> SpriteBatchItem:
        """Queue a sprite draw and return the stored item."""
        if texture is None:
            raise ValueError("cannot queue a sprite draw without a texture")
        matrix = np.array(model, dtype=np.float32)
        if matrix.size != 16:
            raise ValueError(f"model must be a 4x4 matrix, got shape {matrix.shape}")
        matrix = matrix.reshape(4, 4)

        layer_index = z_index_to_layer(z_index)
        layer = self._layers.get(layer_index) or _RenderLayer()
        batch = next(
            (
                b
                for b in layer.sprite_batches
                if b[0].texture is texture and b[0].shader_instance is shader_instance
            ),
            None,
        )
        if batch is None:
            if len(layer.sprite_batches) >= LAYER_TEXTURE_MAX:
                raise RenderBatchFullError(
                    f"layer {layer_index} already holds {LAYER_TEXTURE_MAX} texture batches"
                )
            batch = []
            layer.sprite_batches.append(batch)
        if len(batch) + 1 >= LAYER_SPRITE_MAX:
            raise RenderBatchFullError(
                f"exceeded {LAYER_SPRITE_MAX} sprites in one batch on layer {layer_index}"
            )
        item = SpriteBatchItem(
            texture=texture,
            source_rect=source_rect,
            dest_size=dest_size,
            color=color,
            flip_h=flip_h,
            flip_v=flip_v,
            model=matrix,
            shader_instance=shader_instance,
        )
        batch.append(item)
        self._layers[layer_index] = layer
        return item

    def queue_font(
        self,
        font: Any,
        text: str,
        x: float,
        y: float,
        scale: float,
        color: Color,
        z_index: int,
    ) -> FontBatchItem:
        """Queue a text draw and return the stored item."""
        if font is None:
            raise ValueError("cannot queue a text draw without a font")
        layer_index = z_index_to_layer(z_index)
        layer = self._layers.get(layer_index) or _RenderLayer()
        if len(layer.fonts) >= LAYER_FONT_MAX:
            raise RenderBatchFullError(
                f"layer {layer_index} already holds {LAYER_FONT_MAX} text draws"
            )
        item = FontBatchItem(font=font, text=text, x=x, y=y, scale=scale, color=color)
        layer.fonts.append(item)
        self._layers[layer_index] = layer
        return item

    def active_layers(self) -> list[int]:
        """Layer slots holding queued draws, lowest first."""
        return sorted(self._layers)

    def flush(
        self,
    ) -> list[tuple[int, list[list[SpriteBatchItem]], list[FontBatchItem]]]:
        """Return ``(layer, sprite_batches, font_items)`` per active layer, then empty the queue."""
        result = [
            (index, self._layers[index].sprite_batches, self._layers[index].fonts)
            for index in self.active_layers()
        ]
        self._layers = {}
        return result