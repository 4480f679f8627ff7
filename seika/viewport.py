"""Viewport placement of the game resolution inside a window."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

_DEFAULT_WIDTH = 800
_DEFAULT_HEIGHT = 600


@dataclass(frozen=True)
class ViewportData:
    """Position and size of the drawable area inside the window."""

    x: int
    y: int
    width: int
    height: int


def _half_toward_zero(value: int) -> int:
    return int(value / 2) if value < 0 else value // 2


class Viewport:
    """Computes where the rendered frame sits in a window of a given size."""

    def __init__(
        self,
        resolution_width: int = _DEFAULT_WIDTH,
        resolution_height: int = _DEFAULT_HEIGHT,
        maintain_aspect_ratio: bool = False,
    ) -> None:
        if resolution_width <= 0 or resolution_height <= 0:
            raise ValueError(
                f"resolution must be positive, got {resolution_width}x{resolution_height}"
            )
        self.resolution_width = resolution_width
        self.resolution_height = resolution_height
        self.maintain_aspect_ratio = maintain_aspect_ratio
        self._cached = ViewportData(0, 0, _DEFAULT_WIDTH, _DEFAULT_HEIGHT)

    def generate(self, window_width: int, window_height: int) -> ViewportData:
        """Compute the viewport for a window, cache it and return it."""
        if window_width < 0 or window_height < 0:
            raise ValueError(
                f"window size must not be negative, got {window_width}x{window_height}"
            )
        framebuffer_width = window_width
        framebuffer_height = window_height

        f32 = np.float32
        with np.errstate(divide="ignore", invalid="ignore"):
            game_aspect = f32(self.resolution_width) / f32(self.resolution_height)
            window_aspect = f32(window_width) / f32(window_height)

        if self.maintain_aspect_ratio and game_aspect != window_aspect:
            framebuffer_height = int(f32(window_width) / game_aspect)
            if framebuffer_height > window_height:
                framebuffer_height = window_height
                framebuffer_width = int(f32(window_height) * game_aspect)

        data = ViewportData(
            x=_half_toward_zero(window_width - framebuffer_width),
            y=_half_toward_zero(window_height - framebuffer_height),
            width=framebuffer_width,
            height=framebuffer_height,
        )
        self._cached = data
        return data

    def cached(self) -> ViewportData:
        """The viewport computed by the latest :meth:`generate` call."""
        return self._cached