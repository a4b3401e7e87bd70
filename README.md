# rayforge

Building blocks for a small CPU ray caster: 3D points, rays and hit
records, ray/triangle and ray/box intersection, axis-aligned bounds,
4x4 column-major matrices with projection and view helpers, RGBA colors
with 32-bit packing, pixel buffers, and a few supporting containers
(bit flags, fixed-size arrays, structure-of-arrays, index lists and
quadtree keys). Vectors are numpy arrays.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Overview

| Module | Contents |
| --- | --- |
| `rayforge.point3` | `Point3`: arithmetic with points and vectors, tolerant equality, `min`/`max` |
| `rayforge.ray` | `Ray` (unit direction, `t_min`/`t_max`, callable for points along it), `Intersection` (false when `actor` is None) |
| `rayforge.triangle` | `normal`, `center`, `interpolate`, `intersect` (returns `(barycentric, t)` or None) |
| `rayforge.bounds3` | `Bounds3`: union with `+`, `inflate`, `inflate_scale`, `inflate_bounds`, `transform`, `contains`, `overlap`, slab `intersect` |
| `rayforge.matrix4` | `Matrix4` (`identity`, `zero`, `diagonal`, `from_rotation`, `inverse`, `transform*`, `ortho`, `frustum`, `perspective`, `look_at`), `trs`, `normal_matrix` |
| `rayforge.color` | `Color`, `pack_rgba`, `pack_color`, `unpack_color` |
| `rayforge.image` | `Pixel`, `ImageBuffer`, `roundup_image_width` |
| `rayforge.flags` | `Flags`: 32-bit set of flags |
| `rayforge.array` | `Array`: sequence of fixed length |
| `rayforge.soa` | `SoA`: parallel arrays sharing one length |
| `rayforge.index_list` | `IndexList`: integers, newest first |
| `rayforge.index2` | `Index2`: immutable integer pair |
| `rayforge.quadtree` | `QuadtreeKey`, `Direction`, `neighbor_code`, `neighbor_child_code` |

## Example

Cast a ray at a triangle and store a pixel for the hit:

```python
from rayforge.color import Color
from rayforge.image import ImageBuffer, Pixel
from rayforge.point3 import Point3
from rayforge.ray import Ray
from rayforge import triangle

ray = Ray(Point3(0.25, 0.25, 5), Point3(0, 0, -1))
hit = triangle.intersect(ray, Point3(0, 0, 0), Point3(1, 0, 0), Point3(0, 1, 0))

image = ImageBuffer(4, 4)
if hit is not None:
    barycentric, t = hit
    image[0, 0] = Pixel.from_color(Color(0.7, 0.5, 0.1))
```

`ImageBuffer` also accepts a `Color` directly on assignment and converts
it to a `Pixel`.

Boxes are tested the same way:

```python
from rayforge.bounds3 import Bounds3

box = Bounds3(Point3(-1, -1, -1), Point3(1, 1, 1))
span = box.intersect(ray)  # (t_min, t_max) or None
```

Transforms use 4x4 matrices built from columns:

```python
from rayforge.matrix4 import Matrix4

view = Matrix4.look_at(Point3(10, 2, 12), Point3(0, 0, 0), Point3(0, 1, 0))
projection = Matrix4.perspective(60.0, 16 / 9, 0.1, 100.0)
clip = projection * view
```

## What it does not do

rayforge is a library of parts only. It has no scene, camera, lights,
shading or render loop, no window or on-screen display, no mesh loading,
and no command to run. Image buffers live in memory; nothing here writes
them to a file.