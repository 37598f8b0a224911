"""Render timed motion sequences, obstacles and leeway into SVG animation frames."""

from scene_plotter.config import RenderConfig
from scene_plotter.data import (
    HeadingWithVelocity,
    Point,
    Pose,
    PoseWithVelocity,
    Scene,
    SceneBounds,
    StampedPoses,
)
from scene_plotter.errors import (
    DecodeError,
    ObjectCountMismatchError,
    RenderError,
    SceneInvariantError,
    ScenePlotterError,
    UnsupportedObjectCountError,
    UsageError,
)
from scene_plotter.formats import load_scene
from scene_plotter.rendering import ColorPalette, FrameRenderer, compute_bounds

__all__ = [
    "ColorPalette",
    "DecodeError",
    "FrameRenderer",
    "HeadingWithVelocity",
    "ObjectCountMismatchError",
    "Point",
    "Pose",
    "PoseWithVelocity",
    "RenderConfig",
    "RenderError",
    "Scene",
    "SceneBounds",
    "SceneInvariantError",
    "ScenePlotterError",
    "StampedPoses",
    "UnsupportedObjectCountError",
    "UsageError",
    "compute_bounds",
    "load_scene",
]
