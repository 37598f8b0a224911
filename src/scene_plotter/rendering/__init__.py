"""Scene rendering."""

from scene_plotter.rendering.bounds import compute_bounds
from scene_plotter.rendering.frame_renderer import FrameRenderer, leeway_direction, trail_segments
from scene_plotter.rendering.matplotlib_canvas import MatplotlibCanvas
from scene_plotter.rendering.palette import ColorPalette

__all__ = [
    "ColorPalette",
    "FrameRenderer",
    "MatplotlibCanvas",
    "compute_bounds",
    "leeway_direction",
    "trail_segments",
]
