"""Scene bounds calculation."""

import logging

import numpy as np

from scene_plotter.data import Scene, SceneBounds
from scene_plotter.formats.numbers import format_number

logger = logging.getLogger(__name__)


def compute_bounds(scene: Scene) -> SceneBounds:
    """Compute the box around every object position at every timestamp.

    Obstacles are not taken into account. The box is seeded from the first
    pose of the first motion sequence, or from the origin when that sequence
    is missing or empty, and then widened over all poses. No padding is
    applied here.

    Args:
        scene: シーン

    Returns:
        SceneBounds: 全フレームで共通の範囲
    """
    arrays = [sequence.to_array() for sequence in scene.motion_sequences]
    if not (scene.motion_sequences and scene.motion_sequences[0].poses):
        # 最初のシーケンスが空なら原点から広げる
        arrays.append(np.zeros((1, 2)))
    positions = np.concatenate(arrays, axis=0)

    min_x, min_y = positions.min(axis=0)
    max_x, max_y = positions.max(axis=0)
    bounds = SceneBounds(
        min_x=float(min_x),
        min_y=float(min_y),
        max_x=float(max_x),
        max_y=float(max_y),
    )
    logger.info(
        f"Scene bounds [{format_number(bounds.min_x)}, {format_number(bounds.min_y)}, "
        f"{format_number(bounds.max_x)}, {format_number(bounds.max_y)}]"
    )
    return bounds
