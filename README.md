# minirt

A compact ray tracer in pure Python with no runtime dependencies. It has
two commands:

- `minirt` reads a scene from a `.rt` file (ambient lighting, a camera, a
  light, and any number of spheres, planes and cylinders), traces one ray
  per pixel and writes the result as a binary PPM (P6) image.
- `minirt-demo` renders a fixed scene of four spheres with diffuse and
  specular lighting, shadows, reflection and refraction.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Rendering a scene file

```
minirt scene.rt
```

The image is written next to the scene file with the extension changed to
`.ppm` (here `scene.ppm`). Its size is 1024×768 unless the environment
variables `MINIRT_WIDTH` and `MINIRT_HEIGHT` give other positive integers.

Errors are written to standard error, starting with the line `Error`, and
the command exits with status 1. This happens when:

- the process environment is empty;
- not exactly one argument is given;
- the file name does not end in `.rt`;
- the file cannot be opened or is not valid UTF-8 text;
- a line is malformed, a value is out of range, or `A`, `C` or `L` appears
  more than once;
- ambient lighting, camera or light is missing;
- the image cannot be written, or a size variable is not a positive integer.

## Scene files

Each non-blank line starts with an identifier followed by fields separated
by whitespace. Vectors and colours are comma-separated without spaces.

| Identifier | Fields                                                                        |
|------------|-------------------------------------------------------------------------------|
| `A`        | ratio (0–1), colour `R,G,B`                                                   |
| `C`        | view point `x,y,z`, orientation `x,y,z`, field of view (0–180)                |
| `L`        | position `x,y,z`, brightness (0–1), colour `R,G,B`                            |
| `sp`       | centre `x,y,z`, diameter, colour `R,G,B`                                      |
| `pl`       | point `x,y,z`, normal `x,y,z` (each in −1–1), colour `R,G,B`                  |
| `cy`       | centre `x,y,z`, axis `x,y,z` (each in −1–1), diameter, height, colour `R,G,B` |

Colour channels are integers from 0 to 255. Extra fields at the end of a
line are an error.

Example:

```
A 0.2 255,255,255
C -50,0,20 0,0,1 70
L -40,0,30 0.7 255,255,255
pl 0,0,0 0,1.0,0 255,0,225
sp 0,0,20 20 255,0,0
cy 50.0,0.0,20.6 0,0,1.0 14.2 21.42 10,0,255
```

## The demonstration scene

```
minirt-demo [--scene classic|normed] [--width N] [--height N] [--output FILE]
```

`classic` (the default) shows ivory, glass, red rubber and mirror spheres
lit by three point lights over a sky-blue background. `normed` replaces the
first three materials with a flat grey one and uses a grey background. The
image is 1024×768 and is written to `out.ppm` unless told otherwise.

## What the scene-file renderer does not do

- It does not open a window; the only output is the PPM file.
- It does not shade: a ray that hits a shape takes the colour carried by the
  hit, which is black, and a ray that hits nothing is sky blue. The image is
  therefore a black silhouette of the scene. The colours, ambient ratio and
  light brightness in the file are parsed and kept but not used for drawing.
- The field of view is passed to the tangent exactly as written in the file;
  it is not converted from degrees.
- Cylinders are treated as infinitely long; their height is not used.
- A scene holds one light only. Cones are not supported.

Lighting does exist as library functions (`minirt.raytrace.light_intensities`
and `minirt.raytrace.shade`), and the demonstration renderer shades fully.

## Using the library

```python
from minirt.parser import load_scene
from minirt.raytrace import trace_rays
from minirt.image import encode_packed_ppm, write_ppm

scene = load_scene("scene.rt")
pixels = trace_rays(scene, 320, 240)
write_ppm("out.ppm", encode_packed_ppm(pixels, 320, 240))
```

Modules:

- `minirt.vector` — `Vec`, an immutable 3-component vector with `+`, `-`,
  unary `-`, scalar `*`, `scale`, `dot`, `norm`, `normalized` and `cross`;
  also `find_distance` and `scalar_product` for `(x, y, z)` sequences.
- `minirt.shapes` — `Material`, `Hit`, and the shapes `Sphere`, `Plane` and
  `Cylinder`, each with `intersect(orig, direction)` returning a `Hit` or
  `None`.
- `minirt.scene` — `ObjectType`, `Camera`, `Light`, `Ambient` and `Scene`
  (`add` places an item, raising `SceneError` on a repeated parameter;
  `is_complete` checks that ambient lighting, camera and light are set).
- `minirt.parser` — `parse_float`, `parse_color` (returns `0xRRGGBB`),
  `parse_vector`, `parse_line`, `parse_scene`, `check_arguments` and
  `load_scene`.
- `minirt.raytrace` — `reflect`, `refract`, `scene_intersect`,
  `light_intensities`, `shade`, `cast_ray`, `camera_ray`, `vec_to_color`
  and `trace_rays`.
- `minirt.image` — `encode_ppm` for floating-point colours (scaled down when
  brighter than 1), `encode_packed_ppm` for `0xRRGGBB` pixels, and
  `write_ppm`.
- `minirt.debug` — `format_vec`, `format_object` and `format_scene` give a
  readable text dump of a parsed scene.
- `minirt.demo` — `DemoMaterial`, `DemoSphere`, `DemoScene`,
  `demo_materials`, `classic_scene`, `normed_scene` and `render`.
- `minirt.sorting` — `heap_sort(values, ascending=True)`.
- `minirt.errors` — `MiniRTError` and its subclasses `EnvironError`,
  `UsageError`, `FilenameError`, `FilePermissionError` and `SceneError`;
  `str()` of each gives the message shown to the user.