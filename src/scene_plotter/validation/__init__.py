"""Validation of scenes before rendering."""

from scene_plotter.validation.scene import validate_scene

__all__ = ["validate_scene"]
