"""2D real-time renderer using matplotlib."""

import time
from typing import Callable, List, Optional, Sequence, Tuple

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.backend_bases import MouseButton
from matplotlib.figure import Figure
from matplotlib.patches import Circle

from stellar_sim.physics import constants
from stellar_sim.physics.body import Body
from stellar_sim.render.base import Renderer

# Mouse button -> spawn kind
CLICK_BINDINGS = {
    MouseButton.LEFT: "satellite",
    MouseButton.RIGHT: "anchor",
}


class Renderer2D(Renderer):
    """2D window that draws bodies as circles and follows a center point.

    Left click requests a planet, right click a star, at the clicked world
    coordinates. Requests are handed to `on_spawn(kind, position)`; the
    renderer never touches the body lists itself.
    """

    def __init__(
        self,
        view_size: Tuple[float, float] = (constants.WINDOW_WIDTH, constants.WINDOW_HEIGHT),
        fps: float = constants.FRAMERATE_LIMIT,
        dpi: int = 100,
        on_spawn: Optional[Callable] = None,
        title: str = "Gravity Simulation",
    ):
        """Initialize 2D renderer.

        Args:
            view_size: Visible world width and height
            fps: Frame rate limit
            dpi: Dots per inch (figure size is view_size / dpi inches)
            on_spawn: Callback receiving (kind, (x, y)) for each click
            title: Window title
        """
        if fps <= 0:
            raise ValueError(f"fps must be positive, got {fps}")
        self.view_size = (float(view_size[0]), float(view_size[1]))
        self.dpi = dpi
        self.on_spawn = on_spawn
        self.title = title

        self.fig: Optional[Figure] = None
        self.ax = None
        self.anchor_patches: List[Circle] = []
        self.satellite_patches: List[Circle] = []
        self.initialized = False
        self._click_cid = None

        # Frame rate limiting
        self.target_fps = float(fps)
        self.frame_time = 1.0 / self.target_fps
        self.last_render_time = 0.0

    def _initialize(self, center: np.ndarray):
        """Create the window if not already done."""
        if self.initialized:
            return
        figsize = (self.view_size[0] / self.dpi, self.view_size[1] / self.dpi)
        self.fig, self.ax = plt.subplots(figsize=figsize, dpi=self.dpi)
        self.fig.patch.set_facecolor(constants.BACKGROUND_COLOR)
        self.ax.set_facecolor(constants.BACKGROUND_COLOR)
        self.ax.set_aspect('equal')
        self.ax.set_xticks([])
        self.ax.set_yticks([])
        if self.fig.canvas.manager is not None:
            self.fig.canvas.manager.set_window_title(self.title)
        self._set_view(center)

        self._click_cid = self.fig.canvas.mpl_connect('button_press_event', self._on_click)

        # Show the window (non-blocking)
        plt.show(block=False)
        self.initialized = True

    def _set_view(self, center: np.ndarray):
        """Center the view on `center` keeping the current view size."""
        half_w, half_h = self.view_size[0] / 2, self.view_size[1] / 2
        cx, cy = float(center[0]), float(center[1])
        self.ax.set_xlim(cx - half_w, cx + half_w)
        self.ax.set_ylim(cy - half_h, cy + half_h)

    def _on_click(self, event):
        """Translate a mouse press into a spawn request."""
        if self.on_spawn is None or event.inaxes is not self.ax:
            return
        if event.xdata is None or event.ydata is None:
            return
        kind = CLICK_BINDINGS.get(event.button)
        if kind is None:
            return
        self.on_spawn(kind, (float(event.xdata), float(event.ydata)))

    def _sync_patches(self, patches: List[Circle], bodies: Sequence[Body]):
        """Add circles for new bodies and move existing ones."""
        for body in bodies[len(patches):]:
            circle = Circle(tuple(body.position), body.radius, color=body.color)
            self.ax.add_patch(circle)
            patches.append(circle)
        for circle, body in zip(patches, bodies):
            circle.center = (float(body.position[0]), float(body.position[1]))

    def is_open(self) -> bool:
        """Check if the figure window is still open."""
        if self.fig is None:
            return not self.initialized
        if not plt.fignum_exists(self.fig.number):
            self.fig = None
            self.ax = None
            return False
        return True

    def render(self, anchors: Sequence[Body], satellites: Sequence[Body], center: np.ndarray):
        """Draw one frame and wait out the rest of the frame budget."""
        if self.initialized and not self.is_open():
            return

        self._initialize(center)
        self._sync_patches(self.satellite_patches, satellites)
        self._sync_patches(self.anchor_patches, anchors)
        self._set_view(center)
        self.fig.canvas.draw_idle()

        # Frame rate limiting: sleep (inside the GUI loop) for what is left of the frame
        elapsed = time.perf_counter() - self.last_render_time
        plt.pause(max(self.frame_time - elapsed, 0.001))
        self.last_render_time = time.perf_counter()

    def clear(self):
        """Remove all drawn bodies."""
        for circle in self.anchor_patches + self.satellite_patches:
            circle.remove()
        self.anchor_patches = []
        self.satellite_patches = []

    def close(self):
        """Close the renderer."""
        if self.fig is not None:
            if self._click_cid is not None:
                self.fig.canvas.mpl_disconnect(self._click_cid)
            plt.close(self.fig)
            self.fig = None
            self.ax = None
        self._click_cid = None
        self.anchor_patches = []
        self.satellite_patches = []
