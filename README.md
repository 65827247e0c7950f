# rendercore

Building blocks for a small real-time 3D renderer that work on plain data
and NumPy arrays, so the results can be handed to whatever graphics API you
use.

## Installation

```
pip install rendercore
```

To run the test suite:

```
pip install "rendercore[test]"
pytest
```

## Modules

- `rendercore.objloader`: `parse_obj` (a string or an iterable of lines)
  and `load_obj` (a file path) read triangulated Wavefront OBJ data with
  `v/vt/vn` faces into an `ObjMesh`. Its `vertices`, `uvs` and `normals`
  are float32 arrays with one row per triangle corner; the V texture
  coordinate is negated. Only the first three groups of a face are used.
  Malformed numbers, faces that are not `v/vt/vn`, and out-of-range
  indices raise `ObjFormatError`.
- `rendercore.vboindexer`: merges repeated vertices into an indexed mesh
  with `uint16` indices.
  - `index_vbo` merges vertices whose position, UV and normal match exactly.
  - `index_vbo_slow` merges vertices whose components all differ by less
    than 0.01 (`is_near`), using the linear search `find_similar_vertex`.
  - `index_vbo_tbn` merges like `index_vbo_slow` and sums the tangents and
    bitangents of merged vertices, returning an `IndexedTBNMesh`.
  More than 65536 unique vertices, or inputs of mismatched length or shape,
  raise `ValueError`.
- `rendercore.tangentspace`: `compute_tangent_basis(vertices, uvs, normals)`
  returns `(tangents, bitangents)` with one row per vertex. Tangents are
  orthogonalised against the normal, normalised, and flipped to match
  handedness.
- `rendercore.texture`:
  - `parse_bmp` / `load_bmp` read uncompressed 24-bit BMP files into a
    `BmpImage` (`width`, `height`, `data_offset`, raw BGR `pixels`). Pixel
    bytes are taken directly after the 54-byte header; a missing image size
    is computed as `width * height * 3`, and short data is zero-padded.
  - `parse_dds` / `load_dds` read DXT1, DXT3 and DXT5 DDS files into a
    `DdsImage` with its OpenGL compressed format constant, block size,
    component count and a list of `MipLevel` entries holding each level's
    size and compressed bytes.
  - Unsupported or truncated data raises `TextureError`.
- `rendercore.text2d`: `build_text_mesh(text, x, y, size)` lays out two
  triangles per byte of text (strings are UTF-8 encoded) and returns a
  `TextMesh` of screen-space vertices and UVs into a 16x16 glyph atlas.
  `glyph_uv` gives the top-left atlas coordinate of one character.
- `rendercore.shader`: `read_shader_source` loads GLSL text, prefixing
  every line with a newline, and raises `ShaderSourceError` if the file
  cannot be opened. `read_shader_pair` reads a vertex and a fragment
  shader; a missing fragment file gives an empty string.
- `rendercore.camera`: `perspective(fovy, aspect, near, far)` (field of
  view in degrees) and `look_at(eye, center, up)` build 4x4 matrices for
  column vectors. `FlyCamera` turns with cursor offsets from
  `cursor_center` and moves with the `Key` values passed to
  `update(cursor_x, cursor_y, delta_time, pressed)`, which returns
  `(view, projection)`.
- `rendercore.picking`: `screen_pos_to_world_ray` unprojects a pixel
  (counted from the bottom-left) to a world-space `(origin, direction)`
  ray starting on the near plane. `ray_obb_intersection` returns the
  distance to an oriented bounding box, or `None` on a miss.
- `rendercore.picking_colors`: `pick_id_to_color` and `color_to_pick_id`
  convert between 24-bit object ids and `(red, green, blue)` bytes;
  `describe_pick` returns `"background"` for white and `"mesh <id>"`
  otherwise.

## Example

```python
import numpy as np

from rendercore.objloader import parse_obj
from rendercore.vboindexer import index_vbo
from rendercore.camera import FlyCamera, Key
from rendercore.picking import screen_pos_to_world_ray, ray_obb_intersection

mesh = parse_obj("""
v 0 0 0
v 1 0 0
v 0 1 0
vt 0 0
vt 1 0
vt 0 1
vn 0 0 1
f 1/1/1 2/2/1 3/3/1
""")
indexed = index_vbo(mesh.vertices, mesh.uvs, mesh.normals)
print(indexed.indices)  # [0 1 2]

camera = FlyCamera()
view, projection = camera.update(512, 384, 0.016, {Key.UP})

origin, direction = screen_pos_to_world_ray(512, 384, 1024, 768, view, projection)
hit = ray_obb_intersection(origin, direction, (-1, -1, -1), (1, 1, 1), np.eye(4))
print("hit at", hit)
```

## What it does not do

The package opens no window, reads no keyboard or mouse, and talks to no
GPU: it does not compile or link shaders, upload buffers or textures, or
draw anything. It prepares the data those steps need; driving a window,
input and the graphics API is left to the caller. DDS mipmaps are returned
as compressed bytes and are not decoded to pixels.