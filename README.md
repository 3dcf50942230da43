# raytracer

Building blocks for a ray tracer, in plain Python with no third-party
dependencies:

- `raytracer.yml`, `raytracer.yml_parser`, `raytracer.yml_node`: a reader
  for a small indentation-based YML format that builds a tree of nodes.
- `raytracer.logger`: levelled logging to the console, to a timestamped log
  file and to `latest.log`.
- `raytracer.image`: an RGB pixel buffer (`Image`) and its plain-text PPM
  form (`Ppm`).
- `raytracer.lights` and `raytracer.scene_values`: ambient, directional and
  point lights, and the helpers that read colors and vectors out of scene
  nodes.
- `raytracer.common` and `raytracer.errors`: program modes, library types,
  exit codes, byte-order helpers and the exception classes.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## Reading a scene

```python
from raytracer.yml import Yml

scene = Yml(
    "camera:\n"
    "  resolution:\n"
    "    width: 1920\n"
    "    height: 1080\n"
    "  fov: 72.0\n",
    is_raw_content=True,
)

width = scene["camera"]["resolution"]["width"].as_type(int)   # 1920
fov = scene["camera"]["fov"].as_type(float)                   # 72.0
height = scene.get_node("camera.resolution.height")           # a Node, or None
```

Pass a path instead of text to read a file: `Yml("scene.yml")`. A file that
cannot be opened raises `YmlFileError`. The number of spaces per nesting level
is given by `nesting_level` and defaults to 2.

Each line is `name: value` or `name:`. Blank lines and lines starting with
`#` are skipped, and a name that starts with `- ` marks a list item. A node
detects its `NodeType` from its value, and `Node.as_type` accepts `str`,
`int`, `float` or `bool`. Asking for a type that the value does not hold
raises `InvalidNodeType`. Asking for any other type raises `UnknownNodeType`.
A missing name raises `KeyError`, and a bad index raises `IndexError`.
`Yml.dump()` and `Node.dump()` print the tree; both accept an optional `file`.

## Images

```python
from raytracer.image import Ppm

img = Ppm(4, 2)
img.set_at(0, 0, (1.0, 0.0, 0.0))
text = img.render()      # "P3\n4 2\n1023\n1024 0 0\n..."
img.save("out")          # writes out.ppm
```

Pixels start black. An out-of-range coordinate raises
`raytracer.errors.OutOfBounds`. `img += other` adds another image, or a list
of colors of the same size, pixel by pixel.

## Lights

```python
from raytracer.lights import Ambient, Directional, PointLight

lamp = PointLight((1.0, 1.0, 1.0), (0.0, 5.0, 0.0), intensity=10.0)
sample = lamp.sample((0.0, 0.0, 0.0))
sample.color, sample.direction, sample.distance
```

A point light fades with the square of the distance, and that squared distance
is never taken below 0.01. A directional light returns its negated direction
and an infinite distance. An ambient light returns only a color, and its
`is_ambient()` is true.

`light_from_yml(node, lights)` builds a light from a node named `ambient`,
`directional` or `points`. For `points` it appends one `PointLight` per child
to `lights`. In scene nodes a color is written `color: "#RRGGBB"`, and a
vector is given as `x`, `y` and `z` entries, with missing entries read as
zero.

## Logging

```python
from raytracer import logger

logger.init("Raytracer", ["raytracer", "scene.yml"], logger.Level.DEBUG)
logger.info("Render started.")
logger.shutdown()
```

`init` creates the log directory (`logs` by default, or set `log_dir`). It
writes a header block to `<project>-<timestamp>.log` and to `latest.log`.
Messages below the minimum level are dropped. `ERROR` and higher go to
standard error, and everything else goes to standard output. If the logger has
not been initialised, `get_instance()` and the level functions raise
`RuntimeError`.

## What this package does not do

This package does not trace rays. It has no camera, no shapes, no materials,
no renderer and no preview window. It installs no command. The network
exceptions in `raytracer.errors` are defined, but the package has no cluster
server or client that raises them.

## Running the tests

```
pytest
```