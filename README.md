# raywave

Pure-Python building blocks for a physically based ray tracer. The package
has no dependencies outside the standard library.

## What it contains

- **`raywave.pcg32`** provides `PCG32`, a PCG32 generator. Use `seed(initstate, initseq)`
  to seed it. `next_uint()` returns a 32-bit value. `next_uint(bound)` returns
  an unbiased value in `[0, bound)`. `next_float()` and `next_double()`
  return values in `[0, 1)`. `advance(delta)` jumps ahead, and a negative
  `delta` goes back. `shuffle(items)` permutes a sequence in place.
  `distance(other)` counts the steps between two generators on the same
  stream, and `a - b` does the same.
- **`raywave.samplers`** holds the abstract `Sampler` class, with `seed`,
  `next`, `next_2d` and `clone`, and two samplers built on it:
  - `Independent` draws independent uniform numbers from `PCG32`. When it is
    seeded for a pixel, the generator is seeded with `fnv1a(x, y, sample_index, seed)`.
  - `Halton` returns `radical_inverse(sample_index, base)`. The base starts
    at 2 and goes up by one for each number drawn. When it is seeded for a
    pixel, a random offset chosen for that pixel is added modulo 1.

  If you give no seed, both samplers use 420. When the environment variable
  `reference` is set, they use 1337.
- **`raywave.geometry`** holds the following:
  - `Vector`, a frozen 3-vector that is also used for points, with
    `dot`, `cross`, `length`, `normalized`, component min and max, and
    elementwise min and max.
  - `Matrix3`, with products by vectors and by matrices, `determinant` and
    `transpose`.
  - `Color`, a linear RGB color.
  - `Bounds`, an axis-aligned box, with `empty`, `extend`, `diagonal` and
    `center`.
  - `Ray`, with `at(t)`.
  - The surface records `SurfaceEvent`, `Intersection` and `AreaSample`.
  - The abstract `Shape` base class.
- **`raywave.rectangle`** provides `Rectangle`. It spans `(-1, -1, 0)` to
  `(1, 1, 0)`.
- **`raywave.sphere`** provides `Sphere`, a unit sphere around the origin.
- **`raywave.textures`** provides the following:
  - `Image`, a grid of colors read with `get(x, y)`.
  - `ConstantTexture`.
  - `CheckerboardTexture`.
  - `ImageTexture`. It can clamp or repeat at the borders (`BorderMode`) and
    filter with nearest or bilinear lookup (`FilterMode`). It flips `v` so
    that `v` points up in the image. The result is scaled by `exposure`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from raywave.geometry import Intersection, Ray, Vector
from raywave.rectangle import Rectangle
from raywave.samplers import Independent

rectangle = Rectangle()
sampler = Independent()
ray = Ray(Vector(-1, 0, -1), Vector(1, 0, 1).normalized())
its = Intersection()

if rectangle.intersect(ray, its, sampler):
    print(its.t)  # about 1.4142 (the square root of 2)
```

Shapes use a closest-hit convention. `intersect` updates the `Intersection`
only if it finds a hit closer than `its.t`, and it returns whether it did.
Rectangles and spheres also support area sampling through
`sample_area(rng)`.

## What it does not do

raywave has only the pieces listed above. It has no:

- acceleration structure;
- grouping of many shapes;
- triangle meshes or mesh file loading;
- cameras, integrators, lights or materials;
- scene file parser or rendering command;
- image file reading or writing.

`Image` holds pixels you supply in memory.