"""Scene data structures."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Point:
    """平面上の座標."""

    x: float  # X座標
    y: float  # Y座標


@dataclass(frozen=True)
class Pose:
    """位置と向き.

    heading is measured in degrees, 0 along +y and increasing clockwise toward +x.
    """

    position: Point
    heading: float  # 方位 [deg]


@dataclass(frozen=True)
class PoseWithVelocity:
    """ある時刻における移動物体の状態."""

    pose: Pose
    velocity: float  # 速度 [kts]


@dataclass(frozen=True)
class StampedPoses:
    """One simulation time slice.

    Attributes:
        timestamp: タイムスタンプ [min]
        poses: 物体ごとの状態. The index identifies the same object in every slice.
    """

    timestamp: float
    poses: tuple[PoseWithVelocity, ...] = ()

    @property
    def positions(self) -> list[Point]:
        """Positions of all objects in this slice, in object order."""
        return [p.pose.position for p in self.poses]

    def to_array(self) -> np.ndarray:
        """位置を (N, 2) のnumpy配列に変換."""
        if not self.poses:
            return np.empty((0, 2))
        return np.array([(p.pose.position.x, p.pose.position.y) for p in self.poses], dtype=float)


@dataclass(frozen=True)
class HeadingWithVelocity:
    """シーン全体に作用するリーウェイ(風・潮流)."""

    heading: float  # 方位 [deg]
    velocity: float  # 速度 [kts]


@dataclass(frozen=True)
class Scene:
    """描画対象のシーン全体.

    Attributes:
        motion_sequences: Time slices ordered by non-decreasing timestamp.
            The position in this tuple is the frame index.
        obstacles: Closed polygons, drawn identically in every frame.
        leeway: Optional ambient drift shown as a dial in every frame.
    """

    motion_sequences: tuple[StampedPoses, ...] = ()
    obstacles: tuple[tuple[Point, ...], ...] = ()
    leeway: HeadingWithVelocity | None = None

    @property
    def frame_count(self) -> int:
        """Number of frames this scene renders to."""
        return len(self.motion_sequences)

    @property
    def object_count(self) -> int:
        """Number of objects in the first time slice (0 for an empty scene)."""
        if not self.motion_sequences:
            return 0
        return len(self.motion_sequences[0].poses)


@dataclass(frozen=True)
class SceneBounds:
    """Axis-aligned box around every object position of a scene."""

    min_x: float = 0.0
    min_y: float = 0.0
    max_x: float = 0.0
    max_y: float = 0.0

    def padded(self, padding: float) -> SceneBounds:
        """Return a copy grown by ``padding`` on every side."""
        return SceneBounds(
            min_x=self.min_x - padding,
            min_y=self.min_y - padding,
            max_x=self.max_x + padding,
            max_y=self.max_y + padding,
        )

    def contains(self, point: Point) -> bool:
        return self.min_x <= point.x <= self.max_x and self.min_y <= point.y <= self.max_y


@dataclass(frozen=True)
class TrailSegment:
    """One trail edge of an object between two consecutive frames.

    Attributes:
        object_index: 物体のインデックス
        start_frame: 始点のフレーム (終点は start_frame + 1)
        age: Recency of the segment relative to the rendered frame, 1..trail_steps
        start: 始点
        end: 終点
    """

    object_index: int
    start_frame: int
    age: int
    start: Point
    end: Point
