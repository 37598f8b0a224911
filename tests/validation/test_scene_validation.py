"""Tests for scene invariant validation."""

import pytest

from scene_plotter.data import Scene
from scene_plotter.errors import (
    ObjectCountMismatchError,
    SceneInvariantError,
    UnsupportedObjectCountError,
)
from scene_plotter.rendering import ColorPalette
from scene_plotter.validation import validate_scene


def test_valid_scene(scene_builder) -> None:
    """Test that a consistent scene passes."""
    scene = scene_builder([[(0.0, 0.0), (1.0, 1.0)], [(0.1, 0.0), (1.1, 1.0)]])

    validate_scene(scene, ColorPalette.default())


def test_empty_scene_is_valid() -> None:
    validate_scene(Scene(), ColorPalette.default())


def test_four_objects_supported(scene_builder) -> None:
    """パレットの上限ちょうどは許可."""
    scene = scene_builder([[(float(i), 0.0) for i in range(4)]])

    validate_scene(scene, ColorPalette.default())


def test_five_objects_rejected(scene_builder) -> None:
    """Five objects exceed the default palette."""
    scene = scene_builder([[(float(i), 0.0) for i in range(5)]])

    with pytest.raises(UnsupportedObjectCountError) as excinfo:
        validate_scene(scene, ColorPalette.default())

    assert excinfo.value.object_count == 5
    assert excinfo.value.capacity == 4
    assert "at most 4" in str(excinfo.value)


def test_object_count_mismatch(scene_builder) -> None:
    """物体数がフレーム間で異なる場合はエラー."""
    scene = scene_builder([[(0.0, 0.0), (1.0, 0.0)], [(0.0, 0.0), (1.0, 0.0)], [(0.0, 0.0)]])

    with pytest.raises(ObjectCountMismatchError) as excinfo:
        validate_scene(scene, ColorPalette.default())

    assert isinstance(excinfo.value, SceneInvariantError)
    assert excinfo.value.frame_index == 2
    assert excinfo.value.expected == 2
    assert excinfo.value.actual == 1
