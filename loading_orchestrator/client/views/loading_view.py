import arcade
from imgui_bundle import imgui
from typing import Any, Optional
from loading_orchestrator.client.loading_state import LoadingScreenState
from loading_orchestrator.client.services.imgui_service import ImGuiService
from loading_orchestrator.shared.config import LoadingScreenSettings

# RGBA in 0..1
PANEL_BG = (0.08, 0.09, 0.10, 0.85)
BAR_TRACK = (0.16, 0.18, 0.21, 0.60)
BAR_FILL = (0.26, 0.59, 0.85, 1.00)
TEXT_DIM = (0.60, 0.60, 0.60, 1.00)
ERROR_RED = (0.80, 0.20, 0.20, 1.00)

PANEL_FLAGS = (imgui.WindowFlags_.no_title_bar |
               imgui.WindowFlags_.no_resize |
               imgui.WindowFlags_.no_move |
               imgui.WindowFlags_.no_saved_settings)

class LoadingScreenView(arcade.View):
    """
    Ready-made loading screen: a centered panel with a title, a progress bar
    and the current status line.

    Implements:
        The 'LoadingScreen' Protocol, so the orchestrator forwards progress here.

    The view never drives any work itself. Whatever is shown comes from
    `update_loading_state` / `show_error` calls made by the orchestrator and
    its hooks.
    """

    def __init__(self,
                 settings: Optional[LoadingScreenSettings] = None,
                 state: Optional[LoadingScreenState] = None,
                 window: Optional[arcade.Window] = None):
        super().__init__(window)
        self.settings = settings or LoadingScreenSettings()
        self.state = state or LoadingScreenState()

        # Created on first show; needs a live GL context.
        self.imgui: Optional[ImGuiService] = None

    def update_loading_state(self, progress: float, status: Any):
        self.state.update_loading_state(progress, status)

    def show_error(self, error: BaseException):
        self.state.show_error(error)

    def on_show_view(self):
        self.window.background_color = (10, 10, 10, 255)
        if self.imgui is None:
            self.imgui = ImGuiService(self.window)

    def on_update(self, delta_time: float):
        if self.imgui:
            self.imgui.delta_time = delta_time

    def on_draw(self):
        self.clear()
        if not self.imgui:
            return

        with self.imgui.frame():
            self._draw_panel()

    def _draw_panel(self):
        settings = self.settings
        screen_w, screen_h = self.window.get_size()

        imgui.set_next_window_pos(((screen_w - settings.width) / 2, (screen_h - settings.height) / 2))
        imgui.set_next_window_size((settings.width, settings.height))

        imgui.push_style_color(imgui.Col_.window_bg, PANEL_BG)
        imgui.push_style_color(imgui.Col_.frame_bg, BAR_TRACK)
        imgui.push_style_color(imgui.Col_.plot_histogram, BAR_FILL)
        imgui.push_style_var(imgui.StyleVar_.window_rounding, 8.0)

        visible, _ = imgui.begin("Loader", None, PANEL_FLAGS)
        if visible:
            self._centered_text(settings.title)
            imgui.separator()

            # Clamped for drawing only; the state keeps the reported value.
            fraction = min(max(self.state.progress, 0.0), 1.0)
            imgui.progress_bar(fraction, (-1.0, 20.0), self.state.percent_text)

            self._centered_text(self.state.status_text, TEXT_DIM)
            if self.state.error_text:
                self._centered_text(self.state.error_text, ERROR_RED)
        imgui.end()

        imgui.pop_style_var()
        imgui.pop_style_color(3)

    @staticmethod
    def _centered_text(text: str, color: Optional[tuple] = None):
        text_w = imgui.calc_text_size(text).x
        imgui.set_cursor_pos_x(max(0.0, (imgui.get_window_width() - text_w) / 2))
        if color:
            imgui.text_colored(color, text)
        else:
            imgui.text(text)
