# gameframe

This package holds the building blocks of a game that decide what goes on
screen and how things move. It computes matrices, vertices, constant-buffer
bytes and input state. You pass the results to a renderer of your choice.

## Modules

- `gameframe.xmath` provides 4×4 matrices on numpy. They are left-handed and
  use row vectors, so a point is transformed as `v @ m` and the translation
  sits in the last row. The functions are `identity`, `translation`,
  `scaling`, `rotation_x`, `rotation_y`, `rotation_z`, `perspective_fov_lh`,
  `orthographic_off_center_lh` and `normalize`. The projection functions
  raise `ValueError` when the planes or the aspect ratio are degenerate.
- `gameframe.camera.Camera(window_width, window_height, rng=None)` has four
  properties: `eye`, `target`, `up` and `aspect_ratio`. Setting any of them
  marks the matrices dirty, and `update()` rebuilds `view_matrix`,
  `projection_matrix` and `view_projection_matrix` when needed. It also keeps
  `billboard_matrix` and `billboard_y_matrix` up to date.
  - The projection uses a 60° field of view, with near and far planes at
    0.1 and 1000.
  - `move_eye_vector` moves the eye only. `move_vector` moves both the eye
    and the target.
  - `shake_camera` shakes the target around a point while `shake_timer` is
    positive. Once the timer runs out, it sets the target back to
    `(0, 2.7, 0)`.
  - `move_camera(input, move_power)` flies the camera with the arrow keys and
    W/S.
- `gameframe.object3d.Object3d(position, model=None)` holds `scale`,
  `rotation` (in degrees) and `position`.
  - `update(camera)` builds the world matrix, which includes the camera's
    billboard matrix when `is_billboard` is set.
  - `pack()` returns 144 bytes of little-endian float32 data, in this order:
    the view-projection matrix, the world matrix and the camera position.
- `gameframe.sprite_common.SpriteCommon(window_width, window_height)` holds
  the screen-space orthographic projection and 512 texture slots.
  - `load_texture(tex_number, filename)` decodes an image with Pillow into
    an RGBA `Texture`.
  - `texture(tex_number)` returns the texture in a slot, or None when the
    slot is empty.
- `gameframe.sprite.Sprite` is a textured quad. It takes its size from its
  texture and supports an anchor point, X and Y flipping, rotation, alpha and
  a texture sub-rectangle (`set_texture_rect`).
  - `vertices()` returns four `VertexPosUv` corners in triangle-strip order:
    left-bottom, left-top, right-bottom, right-top.
  - `update()` rebuilds `mat_world` and `constant_matrix`.
- `gameframe.input.Input` keeps this frame's and the previous frame's keys
  and game pad state (`PadState`). Call `update(keys, pad)` once per frame,
  then query it with these methods:
  - `push_key`, `trigger_key`, `away_key` and `push_move_key`
  - `check_pad`, `push_button` and `push_keep_button`
  - `tilt_left_stick` and `tilt_right_stick`, whose threshold is ±500 on a
    -1000..1000 axis

  The key codes are in `Key`, the pad buttons in `Button` and the stick
  directions in `Stick`.
- `gameframe.collision` has two tests:
  - `sphere_to_sphere` reports true overlap; spheres that only touch do not
    count.
  - `box_to_box` is an X/Z overlap test that only runs when the second box
    is less than 10 units ahead along Z.
- `gameframe.audio` parses WAVE data and keeps loaded sounds:
  - `parse_wave(data)` reads RIFF/WAVE bytes, skipping an optional `JUNK`
    chunk, into `SoundData`, which holds a `WaveFormat` and the sample
    bytes. Malformed data raises `WaveFormatError`.
  - `SoundLibrary(directory_path)` loads files by name. For each sound it
    tracks whether it is playing, whether it loops, and its volume.
- `gameframe.scene` defines the `BaseScene` and `AbstractSceneFactory`
  abstract classes, plus `RegistrySceneFactory`, which creates scenes from a
  mapping of names to constructors.
  - `SceneManager.change_scene(name)` queues a scene. The next `update()`
    finalizes the old scene and initializes the new one.
  - `shutdown()` finalizes the current scene.

## Installing

```
pip install .
```

To install the test dependencies and run the tests:

```
pip install .[test]
pytest
```

## Examples

```python
from gameframe.camera import Camera
from gameframe.object3d import Object3d
from gameframe.collision import sphere_to_sphere

camera = Camera(1280, 720)
camera.move_vector((0.0, 0.0, -10.0))
camera.update()

ship = Object3d(position=(0.0, 0.0, 5.0))
ship.update(camera)
constant_buffer = ship.pack()  # 144 bytes

print(sphere_to_sphere((0, 0, 0), 1.0, (1.5, 0, 0), 1.0))  # True
```

Input is fed one frame at a time:

```python
from gameframe.input import Input, Key

keys = Input()
keys.update(keys=[Key.W])
print(keys.trigger_key(Key.W))  # True
keys.update(keys=[Key.W])
print(keys.trigger_key(Key.W), keys.push_key(Key.W))  # False True
```

Scenes are created by name and switched between frames:

```python
from gameframe.scene import BaseScene, RegistrySceneFactory, SceneManager

class Title(BaseScene):
    def initialize(self): ...
    def finalize(self): ...
    def update(self): ...
    def draw(self): ...

manager = SceneManager(RegistrySceneFactory({"TITLE": Title}))
manager.change_scene("TITLE")
manager.update()
manager.draw()
```

## What it does not do

- It opens no window and does no drawing. Matrices, vertices and packed bytes
  are handed to your own renderer.
- It plays no sound. `SoundLibrary` parses the files and records play, loop
  and volume state only.
- It does not read keyboards or game pads itself. You pass the pressed keys
  and a `PadState` to `Input.update`.
- It has no 3D model file loader, no level file reader, no bitmap-font text
  layout and no main game loop or command. `Object3d.model` is any object
  you choose to attach.