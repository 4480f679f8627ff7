# seika

Building blocks for a small 2D game renderer, in plain Python with numpy.
The package does the bookkeeping around the graphics calls: it works out
viewports, texture coordinates, vertex data and draw order, and it tracks
shader parameters. It never makes those graphics calls itself.

## Modules

- `seika.strings` has string helpers: `bool_to_string`, `to_lower`,
  `to_lower_and_underscore_whitespace`, `string_to_bytes`,
  `string_from_memory`, `trim`, `trim_by_size`, `trim_and_replace`,
  `remove_char` and `project_archive_name`. The last of these swaps the final
  extension for `.zip`, so `"game.pck"` becomes `"game.zip"`.
- `seika.thread_pool` has `ThreadPool`, a fixed number of worker threads that
  run `func(arg)` jobs in FIFO order.
  - `add_work(func, arg)` queues a job.
  - `wait()` blocks until the queue is empty and no job is running.
  - `destroy()` drops pending jobs and stops the workers.
  - As a context manager, the pool waits for its jobs and then destroys
    itself on exit.

  The module also has `processor_count()` and `ms_to_timespec(ms)`. The
  latter returns an absolute `(seconds, nanoseconds)` deadline.
- `seika.shader` has `ShaderInstance`, which wraps a shader object together
  with typed uniform parameters. The types are listed in `ShaderParamType`:
  `BOOL`, `INT`, `FLOAT`, `FLOAT2`, `FLOAT3` and `FLOAT4`.
  - `create_param`, `update_param` and `get_param` check the parameter's type.
    On a mismatch, on a missing name or on an unusable value they raise
    `ShaderParamError`.
  - An update sets a dirty flag. `take_dirty_params()` returns every
    parameter when that flag is set and then clears it.

  The module also defines `ShaderInstanceType`.
- `seika.shader_cache` has `ShaderCache`, a table of up to 100 shader
  instances (`MAX_INSTANCES`).
  - Ids are handed out and recycled first-in, first-out.
  - `ShaderCacheFullError` is raised when all ids are in use.
  - `get_instance_checked` returns `None` for `INVALID_ID`.
- `seika.viewport` has `Viewport`. Its `generate(window_width, window_height)`
  returns a `ViewportData(x, y, width, height)` that centres the frame in the
  window. When asked, it letterboxes the frame to keep the resolution's
  aspect ratio. `cached()` returns the result of the latest `generate` call.
- `seika.texture` has `Texture`, `WrapMode`, `ImageFormat`,
  `wrap_from_string`, `image_format_for_channels` and
  `create_solid_colored_texture`.
- `seika.sprite_batch` has the value types `Rect2`, `Size2D`, `Color`,
  `TextureCoordinates` and `FontCharacter`, and three functions:
  - `texture_coordinates` computes the coordinates for a source rectangle,
    with horizontal and vertical flips.
  - `sprite_vertices` builds a float32 vertex buffer of shape
    `(count * 6, 10)` and the scaled model matrices for one batch.
  - `glyph_quads` lays out text as one textured quad per character.
- `seika.renderer` has `RenderQueue`.
  - `queue_sprite` and `queue_font` place draws on layers chosen by z index,
    through `z_index_to_layer`.
  - Sprites that share a texture and a shader instance are grouped into one
    batch.
  - `flush()` returns `(layer, sprite_batches, font_items)` for each active
    layer, lowest layer first, and empties the queue.
  - `RenderBatchFullError` is raised when a layer is full.

## What it does not do

- It does not open a window, create a graphics context or upload anything to
  a GPU.
- It does not compile shaders, parse shader files, decode image files or load
  fonts.
- Shader objects, font objects and texture ids are values that you supply;
  the package only stores them.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from seika.thread_pool import ThreadPool
from seika.viewport import Viewport

results = []
with ThreadPool(4) as pool:
    for n in range(10):
        pool.add_work(results.append, n)
print(sorted(results))  # [0, 1, ..., 9]

viewport = Viewport(800, 600, maintain_aspect_ratio=True)
print(viewport.generate(1920, 1080))
# ViewportData(x=240, y=0, width=1440, height=1080)
```