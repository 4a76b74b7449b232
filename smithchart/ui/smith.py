# smithchart/ui/smith.py
import dataclasses
from typing import Optional, Tuple

import dearpygui.dearpygui as dpg
import numpy as np

from smithchart.core.chart import ChartFrame, compose_chart
from smithchart.core.options import ChartOptions
from smithchart.render.mpl_sink import MatplotlibSink
from smithchart.ui.example import draw_example_overlay
from smithchart.utils.logging_config import get_logger

logger = get_logger(__name__)

# ---------- Constants ----------
CHART_SIZE, SIZE_PCT = 800, 98
TOGGLES = [("show_rx", "Impedance grid"), ("show_gb", "Admittance grid"),
           ("draw_ring", "Outer rings"), ("show_labels", "Labels"), ("show_strings", "Titles")]

# ---------- Rendering ----------
def render_chart(size: int, options: ChartOptions, smooth: bool = True) -> Tuple[np.ndarray, ChartFrame]:
    """Compose the chart with the example overlay and rasterize it to RGBA floats for a texture."""
    with MatplotlibSink(size, size) as sink:
        frame = compose_chart(sink, size / 2.0, size / 2.0, size / 2.0 * SIZE_PCT / 100.0, options)
        draw_example_overlay(sink, frame, options, smooth)
        pixels = sink.to_rgba_array()
    return (pixels.astype(np.float32) / 255.0).ravel(), frame

class SmithViewer:
    """DearPyGui window showing a rendered chart, with a Γ read-out under the mouse."""

    def __init__(self, options: Optional[ChartOptions] = None, size: int = CHART_SIZE) -> None:
        self.options = options or ChartOptions()
        self.size = size
        self.frame: Optional[ChartFrame] = None
        self.smooth = True

    def redraw(self) -> None:
        texture, self.frame = render_chart(self.size, self.options, self.smooth)
        dpg.set_value("smith_texture", texture)
        logger.info("Rendered chart (RX=%s, GB=%s, rings=%s)",
                    self.options.show_rx, self.options.show_gb, self.options.draw_ring)

    def toggle(self, sender, value, field_name) -> None:
        self.options = dataclasses.replace(self.options, **{field_name: value})
        self.redraw()

    def toggle_smooth(self, sender, value) -> None:
        self.smooth = value
        self.redraw()

    def update_tooltip(self) -> None:
        if self.frame is None or not dpg.is_item_hovered("smith_drawlist"):
            return
        x, y = dpg.get_drawing_mouse_pos()
        uv = self.frame.to_gamma(x, y)
        sign = "+" if uv.V >= 0 else "-"
        dpg.set_value("hover_info", f"Γ = {uv.U:.3f} {sign} j{abs(uv.V):.3f}  |Γ| = {np.hypot(*uv):.3f}")

    def run(self) -> None:
        dpg.create_context()
        with dpg.texture_registry():
            dpg.add_dynamic_texture(self.size, self.size, np.zeros(self.size * self.size * 4, dtype=np.float32),
                                    tag="smith_texture")

        # ---------- UI ----------
        with dpg.window(label="Smith Chart", tag="smith_window"):
            with dpg.group(horizontal=True):
                for field_name, label in TOGGLES:
                    dpg.add_checkbox(label=label, default_value=getattr(self.options, field_name),
                                     callback=self.toggle, user_data=field_name)
                dpg.add_checkbox(label="Smooth curve", default_value=self.smooth, callback=self.toggle_smooth)
            dpg.add_text("", tag="hover_info")
            with dpg.drawlist(width=self.size, height=self.size, tag="smith_drawlist"):
                dpg.draw_image("smith_texture", (0, 0), (self.size, self.size))

        with dpg.handler_registry():
            dpg.add_mouse_move_handler(callback=lambda _: self.update_tooltip())

        self.redraw()

        # ---------- App Lifecycle ----------
        dpg.set_primary_window("smith_window", True)
        dpg.create_viewport(title='Smith Chart', width=self.size + 40, height=self.size + 100)
        dpg.setup_dearpygui()
        dpg.show_viewport()
        dpg.start_dearpygui()
        dpg.destroy_context()
