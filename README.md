# shadowdemo

A small OpenGL program that sets up a shadow-map depth pass and a first-person fly-through camera, along with the camera, matrix and shader helpers it is built from.

## Installing

```
pip install .
```

The package needs `numpy` and `pyglet`. Running the window also needs a graphics driver with an OpenGL version that pyglet supports.

## Running

```
shadowdemo [--shader-dir DIR]
```

The command opens a 1920×1080 window titled "Hello World". It creates a 1024×1024 depth texture, attaches it to its own framebuffer, and prints a message to standard error if the framebuffer is not complete. It then loads the depth shader from `simpleDepthShader.vts` and `simpleDepthShader.frs` in the shader directory. That directory is `Shaders` in the working directory unless `--shader-dir` names another one. If a shader file cannot be read, or the program fails to compile or link, the error is printed to standard error and the command exits with status 1.

On each frame it binds the depth framebuffer, clears it, and sets the `u_LightSpaceMatrix` uniform of the depth shader to the light's projection-view matrix. It then returns to the window framebuffer, clears it, and binds the depth texture.

The cursor is captured by the window. Controls:

| Input        | Action                                   |
|--------------|------------------------------------------|
| W / S        | move forward / backward                  |
| A / D        | strafe left / right                      |
| E / Q        | move up / down                           |
| Left Shift   | hold to move at double speed             |
| Mouse        | look around (pitch limited to ±89°)      |
| Scroll wheel | change the camera's zoom, kept in 1–45   |
| Escape       | quit                                     |

## Using the pieces

The camera and the matrix helpers work without a window or a GL context:

```python
from shadowdemo.camera import Camera, CameraMovement
from shadowdemo.transforms import look_at, normalize, ortho

camera = Camera(position=(0.0, 0.0, 3.0))
camera.process_keyboard(CameraMovement.FORWARD, 0.016)
camera.process_mouse_movement(10.0, -5.0, True)
camera.process_mouse_scroll(2.0)
view = camera.view_matrix()

projection = ortho(-10.0, 10.0, -10.0, 10.0, 1.0, 7.5)
light_view = look_at((-2.0, 4.0, -1.0), (0.0, 0.0, 0.0), (0.0, 1.0, 0.0))
light_space = projection @ light_view
```

- `shadowdemo.transforms`: `normalize`, `look_at` and `ortho` return numpy arrays. The matrices are 4×4 and act on column vectors. `normalize` of a zero vector and `ortho` with a zero-sized volume raise `ValueError`.
- `shadowdemo.camera`: `Camera` holds a position, a yaw and a pitch in degrees, and the derived `front`, `right` and `up` vectors. `Camera.from_scalars` builds one from separate coordinates. `CameraMovement` lists the keyboard actions. `MOVE_FAST` and `SLOW_DOWN` switch the movement speed between 5.0 and 2.5 units per second.
- `shadowdemo.shader`: `Shader(vertex_path, fragment_path, geometry_path=None)` compiles and links a program. It needs a current OpenGL context and can be used as a context manager that deletes the program on exit. It has `set_bool`, `set_int`, `set_float`, `set_vec2`, `set_vec3` (one vector or three numbers), `set_vec4`, `set_matrix3` and `set_matrix4`. Uniforms that the program does not have are ignored. `read_source` and `Shader` raise `ShaderError` on unreadable files or failed compilation or linking.
- `shadowdemo.app`: `light_space_matrix()` returns the light's orthographic projection times its view matrix. `MouseLook` turns absolute cursor positions into camera turns. `main()` is the command above.

## What it does not do

The window draws no geometry. Both passes only clear their buffers and set up state, so no scene and no shadows appear on screen. The camera's zoom is tracked but not used by any projection. The package ships no shader files, so the depth shader must be supplied in the shader directory.

## Tests

```
pip install .[test]
pytest
```