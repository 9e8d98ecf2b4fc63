# pgekit

Building blocks for a game loop, written in plain Python with no
dependencies outside the standard library.

- `pgekit.mathlib`: scalar helpers such as `fabs`, `ceil`, `floor`,
  `trunc`, `round_nearest` (ties to even), `atan2`, `sincos`, `fmod`
  (quotient truncated towards zero), `pow2`, `deg_to_rad`, `rad_to_deg`,
  and a shared random generator driven by `srand`, `rand_float` and
  `rand_int`.
- `pgekit.vector`: an immutable 3D vector `Vec3` (`+`, `-`, `scale`,
  `dot`, `length`, `normalized`, `angle`, `rotate_z`) and a rectangle
  `Rect2` (`clear`, `set_radius`, `encapsulate`, `contains`,
  `intersects`).
- `pgekit.timer`: a frame `Timer` with `update`, `peek_delta_time`,
  `total_time`, `pause` and `unpause`. It reads a monotonic clock by
  default; any function returning seconds can be passed as `clock`.
- `pgekit.obj`: a Wavefront OBJ/MTL reader (`parse_obj`, `load_obj`,
  `parse_materials`, `load_materials`) that flattens the first three
  corners of each face into an `ObjModel`, a list of `Vertex` objects
  tagged with a `VertexFormat`. Normals are taken from the normalised
  vertex position; when a material library is used, each vertex carries
  the ambient colour of the active material packed as `0xAABBGGRR`.
- `pgekit.particle`: a particle emitter `ParticleSystem` configured by a
  `ParticleSystemInfo`, holding up to `MAX_PARTICLES` live `Particle`s.

## Installing

```
pip install pgekit
```

## Examples

```python
from pgekit.vector import Vec3, Rect2

v = Vec3(3.0, 4.0, 0.0)
print(v.length())              # 5.0
print(v.normalized())          # Vec3(x=0.6, y=0.8, z=0.0)

box = Rect2()
box.encapsulate(0.0, 0.0)
box.encapsulate(10.0, 5.0)
print(box.contains(2.0, 2.0))  # True
print(box.contains(10.0, 5.0)) # False: the far edges are excluded
```

```python
from pgekit.timer import Timer

timer = Timer()
while running:
    timer.update()
    step(timer.delta_time)
```

```python
from pgekit.particle import ParticleSystem, ParticleSystemInfo

info = ParticleSystemInfo(
    emission=100,
    lifetime=-1.0,          # -1 fires until stopped
    particle_life_min=0.5,
    particle_life_max=1.0,
)
system = ParticleSystem(info)
system.fire_at(240.0, 136.0)
system.update(1 / 60)
print(system.num_particles_alive)
```

```python
from pgekit.obj import parse_obj

model = parse_obj(
    "v 0 0 0\n"
    "v 1 0 0\n"
    "v 0 1 0\n"
    "f 1 2 3\n"
)
print(model.format, model.num_vertices)  # VertexFormat.POSITION 3
```

`load_obj` reads a file and looks for any `mtllib` it names in the same
directory; `parse_obj` takes a `material_dir` argument for the same
purpose.

## What it does not do

pgekit only computes state. It does not open a window, draw anything,
load or save images, or play sound. A `ParticleSystem` keeps the sprite
rectangle and texture object given in its `ParticleSystemInfo`, but
drawing the particles is left to the caller.

## Running the tests

```
pip install pgekit[test]
pytest
```