"""Shared fixtures for scene_plotter tests."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import pytest

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
from scene_plotter.interfaces.canvas import Canvas
from scene_plotter.utils.logging import set_frame_index


@dataclass
class DrawCall:
    """One recorded canvas call."""

    kind: str
    args: dict[str, Any] = field(default_factory=dict)


class RecordingCanvas(Canvas):
    """Canvas double that records calls instead of drawing."""

    def __init__(self, fail_on_save: bool = False):
        self.calls: list[DrawCall] = []
        self.viewport: SceneBounds | None = None
        self.saved_to: Path | None = None
        self.fail_on_save = fail_on_save

    def draw_polygon(self, points, face_color, edge_color, line_width) -> None:
        self.calls.append(
            DrawCall(
                "polygon",
                {
                    "points": list(points),
                    "face_color": face_color,
                    "edge_color": edge_color,
                    "line_width": line_width,
                },
            )
        )

    def draw_arrow(self, start, end, color, line_width, style="-", scale=20.0) -> None:
        self.calls.append(
            DrawCall(
                "arrow",
                {
                    "start": start,
                    "end": end,
                    "color": color,
                    "line_width": line_width,
                    "style": style,
                },
            )
        )

    def draw_circle(self, center, radius, edge_color, line_width, face_color="none") -> None:
        self.calls.append(
            DrawCall(
                "circle",
                {
                    "center": center,
                    "radius": radius,
                    "edge_color": edge_color,
                    "face_color": face_color,
                },
            )
        )

    def draw_text(
        self,
        position,
        text,
        color="black",
        font_size=16.0,
        align_horizontal="left",
        align_vertical="center",
    ) -> None:
        self.calls.append(DrawCall("text", {"position": position, "text": text}))

    def set_viewport(self, bounds, equal_axes=True, show_axes=True) -> None:
        self.viewport = bounds
        self.calls.append(DrawCall("viewport", {"bounds": bounds, "equal_axes": equal_axes}))

    def save(self, path: Path) -> None:
        if self.fail_on_save:
            raise PermissionError(13, "Permission denied", str(path))
        self.saved_to = path
        path.write_text("<svg/>")

    def of_kind(self, kind: str) -> list[DrawCall]:
        return [c for c in self.calls if c.kind == kind]

    def texts(self) -> list[str]:
        return [c.args["text"] for c in self.of_kind("text")]


class RecordingCanvasFactory:
    """Creates RecordingCanvas instances and keeps them for inspection."""

    def __init__(self, fail_at_frame: int | None = None):
        self.canvases: list[RecordingCanvas] = []
        self.fail_at_frame = fail_at_frame

    def __call__(self, config: RenderConfig) -> RecordingCanvas:
        fail = self.fail_at_frame is not None and len(self.canvases) == self.fail_at_frame
        canvas = RecordingCanvas(fail_on_save=fail)
        self.canvases.append(canvas)
        return canvas


def make_pose(x: float, y: float, heading: float = 0.0, velocity: float = 0.0) -> PoseWithVelocity:
    return PoseWithVelocity(pose=Pose(position=Point(x, y), heading=heading), velocity=velocity)


def make_scene(
    tracks: list[list[tuple[float, float]]],
    obstacles: list[list[tuple[float, float]]] | None = None,
    leeway: tuple[float, float] | None = None,
    timestamps: list[float] | None = None,
) -> Scene:
    """Build a scene from per-frame object positions.

    Args:
        tracks: tracks[frame][object] = (x, y)
        obstacles: Polygons as lists of (x, y)
        leeway: (heading, velocity)
        timestamps: One per frame (defaults to the frame index)
    """
    if timestamps is None:
        timestamps = [float(i) for i in range(len(tracks))]
    return Scene(
        motion_sequences=tuple(
            StampedPoses(timestamp=t, poses=tuple(make_pose(x, y) for x, y in frame))
            for t, frame in zip(timestamps, tracks, strict=True)
        ),
        obstacles=tuple(tuple(Point(x, y) for x, y in polygon) for polygon in obstacles or []),
        leeway=HeadingWithVelocity(*leeway) if leeway is not None else None,
    )


@pytest.fixture
def recording_factory() -> RecordingCanvasFactory:
    """Canvas factory recording every frame's draw calls."""
    return RecordingCanvasFactory()


@pytest.fixture
def two_object_scene() -> Scene:
    """Two objects moving right over six frames, with one obstacle and leeway."""
    tracks = [[(float(i), 0.0), (float(i), 2.0)] for i in range(6)]
    return make_scene(
        tracks,
        obstacles=[[(0.0, 0.5), (1.0, 0.5), (1.0, 1.5)]],
        leeway=(90.0, 10.0),
        timestamps=[0.0, 0.5, 1.0, 1.5, 2.0, 2.5],
    )


@pytest.fixture
def example_csv() -> str:
    return "SP;0.0;1.0;2.0;90.0;0.5\nSP;1.0;1.5;2.0;90.0;0.5\n"


@pytest.fixture
def scene_builder():
    """Return the make_scene helper."""
    return make_scene


@pytest.fixture
def failing_factory() -> RecordingCanvasFactory:
    """Canvas factory whose third canvas (frame 2) fails to save."""
    return RecordingCanvasFactory(fail_at_frame=2)


@pytest.fixture
def restore_root_logger():
    """Undo setup_logging() changes to the root logger after the test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
    set_frame_index(None)
