"""
Interactive window: draws the scene with matplotlib and feeds pointer input
to the InteractionController once per animation tick.

The axes are set up in window pixels (origin top-left, y down) so the
controller and the geometry helpers never see a matplotlib coordinate.
"""

import logging
import sys
import time
from typing import Any, Optional

import matplotlib.pyplot as plt
from matplotlib.animation import FuncAnimation
from matplotlib.backend_bases import MouseButton
from matplotlib.backend_tools import Cursors
from matplotlib.patches import Rectangle

from massspring.config import (
    DEFAULT_LAYOUT,
    DEFAULT_PARAMETERS,
    ConfigurationError,
    Layout,
    PhysicalParameters,
    validate_scene,
)
from massspring.core.controller import FrameOutput, Highlight, InteractionController
from massspring.physics.oscillator import DampedOscillator
from massspring.view.geometry import ground_line, object_rect, spring_vertices

logger = logging.getLogger(__name__)

TITLE = "Mass on Spring - Simulation"
INSTRUCTIONS = "Drag the Object. Release to start the Simulation."

BACKGROUND = "black"
GRAY = "#828282"
MAROON = "#be2137"
LIGHT_GRAY = "#c8c8c8"
DARK_GRAY = "#505050"
DARK_GREEN = "#00752c"
LIME = "#009e2f"

MASS_COLORS = {
    Highlight.NORMAL: GRAY,
    Highlight.HIGHLIGHTED: MAROON,
}


class SpringWindow:
    """
    Rendering and input collaborator for one InteractionController.

    Pointer events only update the latest input sample; the controller
    advances exclusively from the animation timer, one frame per tick.
    """

    def __init__(
        self,
        controller: InteractionController,
        layout: Optional[Layout] = None,
        dpi: int = 100,
    ) -> None:
        self.controller = controller
        self.layout = layout or controller.layout
        self._pointer = (-1.0, -1.0)
        self._button_down = False
        self._last_tick: Optional[float] = None
        self._animation: Optional[FuncAnimation] = None
        self._fps = 0.0

        lay = self.layout
        self.fig = plt.figure(figsize=(lay.width / dpi, lay.height / dpi), dpi=dpi, facecolor=BACKGROUND)
        if self.fig.canvas.manager is not None:
            self.fig.canvas.manager.set_window_title(TITLE)
        self.ax = self.fig.add_axes([0.0, 0.0, 1.0, 1.0])
        self.ax.set_facecolor(BACKGROUND)
        self.ax.set_xlim(0, lay.width)
        self.ax.set_ylim(lay.height, 0)
        self.ax.set_axis_off()

        # Text sizes are given in pixels by the layout; matplotlib wants points
        fontsize = lay.font_size * 72.0 / dpi
        self.ax.text(lay.width / 2, lay.height * 0.1, TITLE, color=DARK_GREEN,
                     fontsize=fontsize, ha="center", va="top")
        self.ax.text(lay.width / 2, lay.height * 0.15, INSTRUCTIONS, color=DARK_GRAY,
                     fontsize=fontsize, ha="center", va="top")
        self.fps_text = self.ax.text(10, 10, "", color=LIME, fontsize=fontsize, ha="left", va="top")
        self.status_text = self.ax.text(3, lay.height, "", color=DARK_GRAY,
                                        fontsize=fontsize, ha="left", va="bottom")

        ground = ground_line(lay)
        self.ax.plot(ground[:, 0], ground[:, 1], color=LIGHT_GRAY, linewidth=lay.spring_thick)
        spring = spring_vertices(controller.position, lay)
        (self.spring_line,) = self.ax.plot(spring[:, 0], spring[:, 1], color=LIGHT_GRAY,
                                           linewidth=lay.spring_thick)
        rect = object_rect(controller.position, lay)
        self.mass_patch = Rectangle((rect.x, rect.y), rect.width, rect.height, color=GRAY)
        self.ax.add_patch(self.mass_patch)

        self.fig.canvas.mpl_connect("motion_notify_event", self._on_motion)
        self.fig.canvas.mpl_connect("button_press_event", self._on_press)
        self.fig.canvas.mpl_connect("button_release_event", self._on_release)

    # --- input ---

    def _on_motion(self, event: Any) -> None:
        if event.inaxes is self.ax and event.xdata is not None:
            self._pointer = (float(event.xdata), float(event.ydata))
        elif event.x is not None and event.y is not None:
            # No xdata outside the axes: map the canvas pixel to window coordinates
            x, y = self.ax.transData.inverted().transform((event.x, event.y))
            self._pointer = (float(x), float(y))

    def _on_press(self, event: Any) -> None:
        if event.button == MouseButton.LEFT:
            self._button_down = True
            self._on_motion(event)

    def _on_release(self, event: Any) -> None:
        if event.button == MouseButton.LEFT:
            self._button_down = False

    # --- frame ---

    def advance(self, dt: float) -> FrameOutput:
        """Run one controller frame with the latest input sample and redraw the artists."""
        out = self.controller.step(self._pointer, self._button_down, dt)
        self.render(out)
        if dt > 0:
            self._fps = 1.0 / dt
        self.fps_text.set_text(f"{self._fps:.0f} FPS")
        return out

    def render(self, out: FrameOutput) -> None:
        lay = self.layout
        rect = object_rect(out.position, lay)
        self.mass_patch.set_xy((rect.x, rect.y))
        self.mass_patch.set_color(MASS_COLORS[out.highlight])
        spring = spring_vertices(out.position, lay)
        self.spring_line.set_data(spring[:, 0], spring[:, 1])
        self.status_text.set_text(f"Current State: {out.mode.value}")
        self.fig.canvas.set_cursor(Cursors.HAND if out.pointer_cursor else Cursors.POINTER)

    def _on_tick(self, _frame: int) -> Any:
        now = time.perf_counter()
        dt = 0.0 if self._last_tick is None else now - self._last_tick
        self._last_tick = now
        self.advance(dt)
        return self.mass_patch, self.spring_line, self.status_text, self.fps_text

    def start(self) -> FuncAnimation:
        """Attach the frame timer at the layout's target FPS."""
        self._last_tick = None
        self._animation = FuncAnimation(
            self.fig,
            self._on_tick,
            interval=1000.0 / self.layout.target_fps,
            blit=False,
            cache_frame_data=False,
        )
        return self._animation


def main(params: Optional[PhysicalParameters] = None, layout: Optional[Layout] = None) -> int:
    """
    Launch the interactive window. The command line takes no arguments; params
    and layout exist for embedding and default to the module constants.

    This is the startup guard: an inconsistent scene is reported and the
    process exits with status 1 before any window is created.
    """
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    params = params or DEFAULT_PARAMETERS
    layout = layout or DEFAULT_LAYOUT
    try:
        validate_scene(params, layout)
    except ConfigurationError as exc:
        logger.error(f"Invalid configuration: {exc}")
        return 1

    controller = InteractionController(model=DampedOscillator(params), layout=layout)
    window = SpringWindow(controller, layout=layout)
    window.start()
    logger.info("Window open; close it to exit.")
    plt.show()
    return 0


if __name__ == "__main__":
    sys.exit(main())
