# practicum

A set of small, self-contained Python modules, each doing one job. Nothing
outside the standard library is needed.

## Modules

| Module | What it provides |
| --- | --- |
| `practicum.vector3` | `Vector`, `Triangle`, `Ray`, `Sphere`, `Intersection`; the functions `dot`, `cross`, `length`, `distance` |
| `practicum.scene` | `read_scene` and `read_materials` for Wavefront-style `.obj` / `.mtl` files, giving a `Scene` of `Object`, `SphereObject`, `Light` and `Material` |
| `practicum.word_count` | `different_words_count`: how many distinct words, ignoring case |
| `practicum.swap_sort` | `swap` and `sort3`, returning tuples |
| `practicum.war` | `simulate_war_game`, `Winner`, `GameResult` |
| `practicum.sort_students` | `Student`, `SortType`, `sort_students` |
| `practicum.stack` | `Stack` of integers |
| `practicum.tryhard` | `Try` and `try_run`: keep a call's result or the error it raised |
| `practicum.strict_iterator` | `StrictIterator` and `make_strict`: a cursor that cannot leave its sequence |
| `practicum.random_tools` | `Mt19937`, `UniformIntDistribution`, `UniformRealDistribution`, `RandomGenerator`, `Timer`, `get_file_dir` |

## Installation

```
pip install .
```

With the test requirements:

```
pip install ".[test]"
pytest
```

## Usage

### Vectors and shapes

`Vector` is a mutable three-component vector supporting `+`, `-`, multiplication
and division by a number, indexing and iteration. `normalize()` scales it in
place to unit length.

```python
from practicum.vector3 import Vector, Triangle, dot, distance

v = Vector(3, 4, 0)
v.length()                                   # 5.0
dot(Vector(1, 0, 0), Vector(0, 1, 0))        # 0.0
distance(Vector(0, 0, 0), Vector(3, 4, 0))   # 5.0

t = Triangle(Vector(0, 0, 0), Vector(4, 0, 0), Vector(0, 4, 0))
t.area()                                     # 8.0
```

`Ray`, `Sphere` and `Intersection` are frozen dataclasses holding
`origin`/`direction`, `center`/`radius` and `position`/`normal`/`distance`.

### Scenes

```python
from practicum.scene import read_scene

scene = read_scene("box/cube.obj")
for obj in scene.objects:
    print(obj.polygon[0], obj.normal_at(0), obj.material.name if obj.material else None)
for sphere_object in scene.sphere_objects:
    print(sphere_object.sphere.center, sphere_object.sphere.radius)
for light in scene.lights:
    print(light.position, light.intensity)
```

Lines with fewer than two tokens, or whose first token is `#`, are skipped.
Scene files understand:

* `mtllib <file>` – load materials from a file next to the scene file
* `usemtl <name>` – material for the following faces and spheres
* `v`, `vt`, `vn` – positions, texture coordinates and normals
* `f` – a face of `v`, `v/vt`, `v//vn` or `v/vt/vn` entries, 1-based or negative
  (counted from the end); a polygon is split into a fan of triangles
* `S x y z r` – a sphere
* `P x y z r g b` – a point light with its intensity

Material files understand `newmtl`, `Ka`, `Kd`, `Ks`, `Ke`, `Ns`, `Ni` and `al`.
Numbers that cannot be read are taken as `0.0`.

### Small utilities

```python
from practicum.word_count import different_words_count
from practicum.swap_sort import sort3
from practicum.stack import Stack

different_words_count("hello Hello WORLD w,orld wOrld")   # 4
sort3(3, 1, 2)                                            # (1, 2, 3)

s = Stack()
s.push(1)
s.top()      # 1
s.pop()      # True
s.pop()      # False, the stack was empty
```

Sorting students in place:

```python
from practicum.sort_students import Student, SortType, sort_students

students = [Student("Ivan", "Ivanov", 31, 12, 2000), Student("Ray", "William", 12, 1, 2000)]
sort_students(students, SortType.BY_DATE)
```

Playing War (the higher card takes both, except that 0 beats 11; a game running
past a million turns has no winner):

```python
from practicum.war import simulate_war_game, Winner

result = simulate_war_game([2, 4, 6, 8, 10, 0], [1, 3, 5, 7, 9, 11])
assert result.winner is Winner.FIRST and result.turn == 6
```

### Capturing errors

```python
from practicum.tryhard import Try, try_run

result = try_run(int, "not a number")
result.is_failed()    # True
result.throw()        # raises the captured ValueError

Try(5).value()        # 5
Try().value()         # RuntimeError("Object is empty")
```

`Try.failure(error)` builds a failed `Try`; a payload that is not an exception
is wrapped so it can still be raised. A `Try` refuses to be copied.

### Strict cursor

```python
from practicum.strict_iterator import make_strict

it = make_strict([10, 20], 0)
it.get()          # 10
it.advance().get()  # 20
it.advance()      # now at the end
it.get()          # IndexError: Dereferencing end of sequence
```

### Reproducible random data

`Mt19937` is the 32-bit Mersenne Twister. `RandomGenerator` builds test data
on top of it with the uniform distributions:

```python
from practicum.random_tools import RandomGenerator, Timer

gen = RandomGenerator(42)
gen.gen_string(10)                 # ten letters from 'a' to 'z'
gen.gen_int(1, 6)
gen.gen_integral_list(5, -10, 10)
gen.gen_real_list(3, 0.0, 1.0)
gen.gen_permutation(5)

timer = Timer()
timer.times()                      # Times(wall_time=..., cpu_time=...)
```

`get_file_dir(path)` returns the directory of an existing file given by an
absolute path and raises `ValueError` otherwise.

## What this package does not do

The geometry module only describes vectors, triangles, rays and spheres; it
does not compute where a ray hits a shape, nor reflection or refraction. The
scene reader loads a scene but nothing renders it, and there is no reading or
writing of images. There is no command-line program.