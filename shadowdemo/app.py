"""Windowed shadow-mapping demo: a depth pass from the light, then the scene pass."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from pathlib import Path

import numpy as np

from .camera import Camera, CameraMovement
from .shader import Shader, ShaderError
from .transforms import look_at, ortho

SCREEN_WIDTH, SCREEN_HEIGHT = 1920, 1080
SHADOW_WIDTH, SHADOW_HEIGHT = 1024, 1024

NEAR_PLANE, FAR_PLANE = 1.0, 7.5
LIGHT_POSITION = (-2.0, 4.0, -1.0)


@dataclass
class MouseLook:
    """Turns absolute cursor positions into camera turns."""

    camera: Camera
    last_x: float = SCREEN_WIDTH / 2.0
    last_y: float = SCREEN_HEIGHT / 2.0
    first_mouse: bool = field(default=True)

    def move(self, xpos: float, ypos: float) -> tuple[float, float]:
        """Feed a cursor position (y grows downwards); return the applied offsets."""
        if self.first_mouse:
            self.last_x, self.last_y = xpos, ypos
            self.first_mouse = False
        xoffset = xpos - self.last_x
        yoffset = self.last_y - ypos
        self.last_x, self.last_y = xpos, ypos
        self.camera.process_mouse_movement(xoffset, yoffset)
        return xoffset, yoffset


def light_space_matrix() -> np.ndarray:
    """Projection-view matrix of the directional light used for the depth pass."""
    projection = ortho(-10.0, 10.0, -10.0, 10.0, NEAR_PLANE, FAR_PLANE)
    view = look_at(LIGHT_POSITION, (0.0, 0.0, 0.0), (0.0, 1.0, 0.0))
    return projection @ view


def _process_input(camera: Camera, keys, key, delta_time: float) -> None:
    if keys[key.LSHIFT]:
        camera.process_keyboard(CameraMovement.MOVE_FAST, delta_time)
    else:
        camera.process_keyboard(CameraMovement.SLOW_DOWN, delta_time)
    bindings = (
        (key.W, CameraMovement.FORWARD),
        (key.S, CameraMovement.BACKWARD),
        (key.A, CameraMovement.LEFT),
        (key.D, CameraMovement.RIGHT),
        (key.E, CameraMovement.UP),
        (key.Q, CameraMovement.DOWN),
    )
    for symbol, movement in bindings:
        if keys[symbol]:
            camera.process_keyboard(movement, delta_time)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="shadowdemo", description="Shadow-mapping demo window.")
    parser.add_argument("--shader-dir", type=Path, default=Path("Shaders"),
                        help="directory holding simpleDepthShader.vts/.frs")
    args = parser.parse_args(argv)

    import pyglet
    from pyglet import gl
    from pyglet.image.buffer import Framebuffer
    from pyglet.window import key

    window = pyglet.window.Window(SCREEN_WIDTH, SCREEN_HEIGHT, "Hello World")

    depth_map = pyglet.image.Texture.create(
        SHADOW_WIDTH, SHADOW_HEIGHT,
        internalformat=gl.GL_DEPTH_COMPONENT,
        min_filter=gl.GL_NEAREST, mag_filter=gl.GL_NEAREST,
        fmt=gl.GL_DEPTH_COMPONENT, blank_data=False,
    )
    gl.glBindTexture(depth_map.target, depth_map.id)
    gl.glTexParameteri(depth_map.target, gl.GL_TEXTURE_WRAP_S, gl.GL_REPEAT)
    gl.glTexParameteri(depth_map.target, gl.GL_TEXTURE_WRAP_T, gl.GL_REPEAT)

    depth_fbo = Framebuffer()
    depth_fbo.attach_texture(depth_map, attachment=gl.GL_DEPTH_ATTACHMENT)
    depth_fbo.bind()
    gl.glDrawBuffer(gl.GL_NONE)
    gl.glReadBuffer(gl.GL_NONE)
    if not depth_fbo.is_complete:
        print("ERROR::FRAMEBUFFER:: Framebuffer is not complete!", file=sys.stderr)
    depth_fbo.unbind()

    try:
        depth_shader = Shader(args.shader_dir / "simpleDepthShader.vts",
                              args.shader_dir / "simpleDepthShader.frs")
    except ShaderError as exc:
        print(exc, file=sys.stderr)
        window.close()
        return 1

    camera = Camera(position=(0.0, 0.0, 3.0))
    look = MouseLook(camera)
    cursor = [look.last_x, look.last_y]

    keys = key.KeyStateHandler()
    window.push_handlers(keys)
    window.set_exclusive_mouse(True)

    def track_mouse(dx, dy):
        # pyglet reports y growing upwards; the look handler expects downwards.
        cursor[0] += dx
        cursor[1] -= dy
        look.move(cursor[0], cursor[1])

    @window.event
    def on_mouse_motion(x, y, dx, dy):
        track_mouse(dx, dy)

    @window.event
    def on_mouse_drag(x, y, dx, dy, buttons, modifiers):
        track_mouse(dx, dy)

    @window.event
    def on_mouse_scroll(x, y, scroll_x, scroll_y):
        camera.process_mouse_scroll(scroll_y)

    @window.event
    def on_draw():
        depth_fbo.bind()
        gl.glViewport(0, 0, SHADOW_WIDTH, SHADOW_HEIGHT)
        gl.glClear(gl.GL_DEPTH_BUFFER_BIT)
        depth_shader.use()
        depth_shader.set_matrix4("u_LightSpaceMatrix", light_space_matrix())
        depth_fbo.unbind()

        width, height = window.get_framebuffer_size()
        gl.glViewport(0, 0, width, height)
        gl.glClear(gl.GL_COLOR_BUFFER_BIT | gl.GL_DEPTH_BUFFER_BIT)
        gl.glBindTexture(gl.GL_TEXTURE_2D, depth_map.id)

    def update(delta_time):
        if keys[key.ESCAPE]:
            window.close()
            pyglet.app.exit()
            return
        _process_input(camera, keys, key, delta_time)

    pyglet.clock.schedule(update)
    try:
        pyglet.app.run()
    finally:
        pyglet.clock.unschedule(update)
        depth_shader.delete()
    return 0


if __name__ == "__main__":
    sys.exit(main())