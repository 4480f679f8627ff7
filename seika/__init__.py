"""Bookkeeping for a 2D game renderer: strings, threads, shaders, viewports, textures and draw queues."""

__version__ = "0.1.0"

__all__ = [
    "strings",
    "thread_pool",
    "shader",
    "shader_cache",
    "viewport",
    "texture",
    "sprite_batch",
    "renderer",
]