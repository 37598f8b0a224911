"""Interfaces for scene decoding and drawing."""

from scene_plotter.interfaces.canvas import Canvas
from scene_plotter.interfaces.decoder import SceneDecoder

__all__ = [
    "Canvas",
    "SceneDecoder",
]
