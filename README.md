# renderkit

renderkit holds the parts of a small real-time 3D engine that do not depend on a
graphics API:

- **Vector and matrix math**: `Vector2`, `Vector3`, `Vector4` and `Color` in
  `renderkit.vector`, `Matrix4x4` in `renderkit.matrix` and `Quaternion` in
  `renderkit.quaternion`. Matrices use the row-vector convention, so a point is
  transformed as `v * M`.
- **Transform builders** in `renderkit.transforms`. These cover translation,
  scale, rotation about X/Y/Z or about an arbitrary axis, affine, perspective,
  orthographic and viewport matrices, and rotation from one direction to another.
- **Collision shapes** in `renderkit.shapes`: `Sphere`, `Line`, `Ray`,
  `Segment`, `Plane`, `Triangle`, `AABB`, `OBB` and `Vector2Int`.
- **Scene management** in `renderkit.scenes`: `BaseScene`, `TitleScene`,
  `SceneFactory` and `SceneManager`. A requested scene change takes effect on
  the next update.
- **Serial input**: `SerialReader` in `renderkit.serial_port` reads raw text from
  a serial port at 9600 baud, 8N1.
- **Renderer bookkeeping**:
  - `DescriptorHeap` in `renderkit.descriptors` allocates descriptor slots and
    records the views written into them.
  - `TextureManager` in `renderkit.textures` reads DDS and PNG headers, caches
    loaded textures by path and gives each one a descriptor slot.
  - `PipelineRegistry`, `BlendMode` and `blend_description` in
    `renderkit.pipeline` look up pipeline states and root signatures by kind and
    blend mode.
  - `WindowSettings` in `renderkit.window` describes the window's client area
    (1280 x 720 by default).

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Math

```python
import math

from renderkit.vector import Vector3
from renderkit.matrix import Matrix4x4
from renderkit.quaternion import Quaternion
from renderkit.transforms import make_affine_matrix, make_translate_matrix, transform

point = Vector3(1.0, 2.0, 3.0)
moved = transform(point, make_translate_matrix(Vector3(10.0, 0.0, 0.0)))
# moved == Vector3(11.0, 2.0, 3.0)

world = make_affine_matrix(
    Vector3(1.0, 1.0, 1.0),   # scale
    Vector3(0.0, 0.0, 0.0),   # rotation in radians around X, Y and Z
    Vector3(0.0, 5.0, 0.0),   # translation
)
back = world * world.inverse()  # close to Matrix4x4.identity()

spin = Quaternion.from_axis_angle(Vector3(0.0, 1.0, 0.0), math.pi / 2)
turned = spin.rotate_vector(Vector3(1.0, 0.0, 0.0))
halfway = Quaternion.identity().slerp(spin, 0.5)
```

Vectors support `+`, `-`, unary `-`, `*` by a scalar and `/` by a scalar
(dividing by zero raises `ZeroDivisionError`). They also provide `length()`,
`normalized()`, `dot()`, `cross()` and `lerp()`. The zero vector normalizes to
itself. `Matrix4x4.inverse()` raises `ValueError` for a singular matrix, and
`transform()` raises `ValueError` when the homogeneous w comes out as zero.

`make_affine_matrix` takes its rotation either as Euler angles in a `Vector3`
or as a `Quaternion`.

## Scenes

A `SceneFactory` maps scene names to scene classes; `"TITLE"` is registered for
`TitleScene` from the start. `SceneManager.change_scene` queues the named scene.
The next call to `update()` finalizes the current scene, initializes the new
one, and then updates it.

```python
from renderkit.scenes import BaseScene, SceneFactory, SceneManager

class GameplayScene(BaseScene):
    next_scene = "TITLE"

factory = SceneFactory()
factory.register("GAMEPLAY", GameplayScene)

manager = SceneManager()
manager.initialize(factory)
manager.change_scene("TITLE")
manager.update()
manager.draw()
manager.finalize()
```

`BaseScene.change_scene()` asks the owning manager to switch to the scene named
by the class attribute `next_scene`; `TitleScene` leads on to `"GAMEPLAY"`.

## Reading from a serial port

```python
from renderkit.serial_port import SerialReader

with SerialReader("COM3") as reader:
    text = reader.read()
```

`read()` returns up to 256 bytes decoded as Latin-1, or an empty string when a
read fails. Opening a port that does not exist raises `SerialPortError`.

## Textures and descriptors

```python
from renderkit.descriptors import DescriptorHeap
from renderkit.textures import TextureManager

heap = DescriptorHeap()
textures = TextureManager(heap)
handle = textures.load("./Resources/uvChecker.png")
index = textures.srv_index(handle)
info = textures.metadata(handle)
```

Slot 0 of a `DescriptorHeap` is reserved, so the first texture gets slot 1.
Loading the same path twice returns the same handle without using another slot.

## What this package does not do

renderkit does not draw anything, open a window or run a game loop, and it
installs no command. It has no gameplay scene of its own and does not parse
sensor readings: `SerialReader` hands back the raw text, and what to make of it
is left to the caller.