"""Scene data structures."""

from scene_plotter.data.scene import (
    HeadingWithVelocity,
    Point,
    Pose,
    PoseWithVelocity,
    Scene,
    SceneBounds,
    StampedPoses,
    TrailSegment,
)

__all__ = [
    "HeadingWithVelocity",
    "Point",
    "Pose",
    "PoseWithVelocity",
    "Scene",
    "SceneBounds",
    "StampedPoses",
    "TrailSegment",
]
