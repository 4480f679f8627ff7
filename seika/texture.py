"""Texture descriptions: size, pixel data, format and wrap configuration."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class WrapMode(enum.IntEnum):
    """Texture coordinate wrap modes, using the OpenGL enum values."""

    REPEAT = 0x2901
    CLAMP_TO_BORDER = 0x812D


class ImageFormat(enum.IntEnum):
    """Pixel formats, using the OpenGL enum values."""

    RED = 0x1903
    RGB = 0x1907
    RGBA = 0x1908


_WRAP_NAMES = {
    "clamp_to_border": WrapMode.CLAMP_TO_BORDER,
    "repeat": WrapMode.REPEAT,
}

_NAMES_BY_WRAP = {mode: name for name, mode in _WRAP_NAMES.items()}

_CHANNEL_FORMATS = {
    1: ImageFormat.RED,
    3: ImageFormat.RGB,
    4: ImageFormat.RGBA,
}


@dataclass
class Texture:
    """An image together with the settings used to sample it."""

    id: int = 0
    data: bytes = b""
    width: int = 0
    height: int = 0
    nr_channels: int = 0
    internal_format: int = ImageFormat.RGBA
    image_format: int = ImageFormat.RGBA
    wrap_s: int = WrapMode.CLAMP_TO_BORDER
    wrap_t: int = WrapMode.CLAMP_TO_BORDER
    apply_nearest_neighbor: bool = True
    file_name: str | None = None

    def wrap_s_name(self) -> str:
        """Name of the horizontal wrap mode: ``"repeat"`` or ``"clamp_to_border"``."""
        return _wrap_name(self.wrap_s)

    def wrap_t_name(self) -> str:
        """Name of the vertical wrap mode: ``"repeat"`` or ``"clamp_to_border"``."""
        return _wrap_name(self.wrap_t)


def _wrap_name(wrap: int) -> str:
    """Anything other than repeat is reported as clamp to border."""
    return _NAMES_BY_WRAP.get(wrap, _NAMES_BY_WRAP[WrapMode.CLAMP_TO_BORDER])


def wrap_from_string(wrap: str) -> WrapMode:
    """Map a wrap mode name to its value; unknown names mean clamp to border."""
    return _WRAP_NAMES.get(wrap, WrapMode.CLAMP_TO_BORDER)


def image_format_for_channels(channels: int) -> ImageFormat:
    """Pixel format for a channel count; counts other than 1, 3 and 4 keep RGBA."""
    return _CHANNEL_FORMATS.get(channels, ImageFormat.RGBA)


def create_solid_colored_texture(width: int, height: int, color_value: int) -> Texture:
    """A four-channel texture whose every byte is ``color_value``."""
    if width < 0 or height < 0:
        raise ValueError(f"texture size must not be negative, got {width}x{height}")
    if not 0 <= color_value <= 0xFF:
        raise ValueError(f"color value must fit in a byte, got {color_value}")
    channels = 4
    return Texture(
        data=bytes([color_value]) * (width * height * channels),
        width=width,
        height=height,
        nr_channels=channels,
        image_format=image_format_for_channels(channels),
    )