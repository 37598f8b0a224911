"""Utility functions."""

from scene_plotter.utils.config import load_yaml, merge_configs
from scene_plotter.utils.logging import (
    FrameIndexFilter,
    get_frame_index,
    set_frame_index,
    setup_logging,
)

__all__ = [
    "FrameIndexFilter",
    "get_frame_index",
    "load_yaml",
    "merge_configs",
    "set_frame_index",
    "setup_logging",
]
