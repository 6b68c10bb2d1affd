from contextlib import contextmanager

import arcade
from imgui_bundle import imgui
from imgui_bundle.python_backends.opengl_backend_programmable import ProgrammablePipelineRenderer as OpenGL3Backend

class ImGuiService:
    """
    Draw-only imgui context bound to one arcade window.

    Loading screens take no input, so a frame is just: sync size and timing,
    build widgets inside `frame()`, render on exit.
    """

    def __init__(self, window: arcade.Window):
        self.window = window
        self.window.switch_to()

        self._context = imgui.create_context()
        self._renderer = OpenGL3Backend()
        self.delta_time = 1.0 / 60.0

    @contextmanager
    def frame(self):
        imgui.set_current_context(self._context)
        io = imgui.get_io()
        io.delta_time = self.delta_time

        width, height = self.window.get_size()
        ratio = self.window.get_pixel_ratio()
        io.display_size = imgui.ImVec2(float(width), float(height))
        io.display_framebuffer_scale = imgui.ImVec2(ratio, ratio)

        imgui.new_frame()
        try:
            yield
        finally:
            imgui.render()
            self._renderer.render(imgui.get_draw_data())
            # imgui leaves the scissor test on; arcade's clear() would only hit the last clip rect
            self.window.ctx.scissor = None
