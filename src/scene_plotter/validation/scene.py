"""Scene invariant validation."""

from typing import TYPE_CHECKING

from scene_plotter.data import Scene
from scene_plotter.errors import ObjectCountMismatchError, UnsupportedObjectCountError

if TYPE_CHECKING:
    from scene_plotter.rendering.palette import ColorPalette


def validate_scene(scene: Scene, palette: "ColorPalette") -> None:
    """Check that the scene can be rendered with trails.

    Trails are drawn by object index, so every motion sequence must list the
    same number of objects, and each object needs its own palette row.

    Args:
        scene: 検証するシーン
        palette: 描画に使うパレット

    Raises:
        ObjectCountMismatchError: 物体数がモーションシーケンス間で異なる場合
        UnsupportedObjectCountError: 物体数がパレットの色数を超える場合
    """
    expected = scene.object_count

    for index, sequence in enumerate(scene.motion_sequences):
        if len(sequence.poses) != expected:
            raise ObjectCountMismatchError(index, expected, len(sequence.poses))

    if expected > palette.capacity:
        raise UnsupportedObjectCountError(expected, palette.capacity)
