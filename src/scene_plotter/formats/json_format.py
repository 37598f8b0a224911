"""JSON scene format.

Document layout::

    {
      "motion_sequences": [
        {"timestamp": 0.0,
         "poses": [{"pose": {"position": {"x": 1.0, "y": 2.0}, "heading": 90.0}, "velocity": 0.5}]}
      ],
      "leeway": {"heading": 45.0, "velocity": 10.0},
      "obstacles": [[{"x": 0.0, "y": 0.0}, {"x": 1.0, "y": 0.0}, {"x": 1.0, "y": 1.0}]]
    }

All top-level keys are optional. A missing, ``null`` or empty ``leeway`` means no leeway.
"""

import json
from typing import Annotated, Any

from pydantic import (
    AllowInfNan,
    BaseModel,
    ConfigDict,
    Field,
    Strict,
    StrictInt,
    ValidationError,
)

from scene_plotter.data import (
    HeadingWithVelocity,
    Point,
    Pose,
    PoseWithVelocity,
    Scene,
    StampedPoses,
)
from scene_plotter.errors import DecodeError

# bool と NaN・無限大は数値として扱わない
Number = Annotated[float, Strict(), AllowInfNan(False)] | StrictInt


class _Document(BaseModel):
    model_config = ConfigDict(extra="ignore", allow_inf_nan=False)


class PointDocument(_Document):
    x: Number
    y: Number


class PoseDocument(_Document):
    position: PointDocument
    heading: Number


class PoseWithVelocityDocument(_Document):
    pose: PoseDocument
    velocity: Number


class StampedPosesDocument(_Document):
    timestamp: Number
    poses: list[PoseWithVelocityDocument] = Field(default_factory=list)


class LeewayDocument(_Document):
    heading: Number
    velocity: Number


class SceneDocument(_Document):
    """Validated shape of a JSON scene file."""

    motion_sequences: list[StampedPosesDocument] | None = None
    leeway: LeewayDocument | None = None
    obstacles: list[list[PointDocument]] | None = None

    def to_scene(self) -> Scene:
        motion_sequences = tuple(
            StampedPoses(
                timestamp=float(seq.timestamp),
                poses=tuple(
                    PoseWithVelocity(
                        pose=Pose(
                            position=Point(float(p.pose.position.x), float(p.pose.position.y)),
                            heading=float(p.pose.heading),
                        ),
                        velocity=float(p.velocity),
                    )
                    for p in seq.poses
                ),
            )
            for seq in self.motion_sequences or []
        )
        obstacles = tuple(
            tuple(Point(float(pt.x), float(pt.y)) for pt in obstacle)
            for obstacle in self.obstacles or []
        )
        leeway = None
        if self.leeway is not None:
            leeway = HeadingWithVelocity(
                heading=float(self.leeway.heading), velocity=float(self.leeway.velocity)
            )
        return Scene(motion_sequences=motion_sequences, obstacles=obstacles, leeway=leeway)


def parse_scene_json(text: str, source: str | None = None) -> Scene:
    """Decode a scene from JSON text.

    Args:
        text: File contents
        source: Name used in error messages (usually the file path)

    Returns:
        Decoded scene

    Raises:
        DecodeError: Invalid JSON, a required nested field is missing or a value is not numeric
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DecodeError(f"Invalid JSON: {exc.msg}", source=source, line=exc.lineno) from exc

    if not isinstance(data, dict):
        raise DecodeError("Root of a JSON scene must be an object", source=source)

    # 空の leeway オブジェクトは「なし」として扱う
    if data.get("leeway") == {}:
        data = {**data, "leeway": None}

    try:
        document = SceneDocument.model_validate(data)
    except ValidationError as exc:
        first = exc.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        msg = f"{first['msg']} at '{location}' ({exc.error_count()} error(s))"
        raise DecodeError(msg, source=source) from exc

    return document.to_scene()


def scene_to_dict(scene: Scene) -> dict[str, Any]:
    """Convert a scene to the JSON document structure."""
    data: dict[str, Any] = {
        "motion_sequences": [
            {
                "timestamp": seq.timestamp,
                "poses": [
                    {
                        "pose": {
                            "position": {"x": p.pose.position.x, "y": p.pose.position.y},
                            "heading": p.pose.heading,
                        },
                        "velocity": p.velocity,
                    }
                    for p in seq.poses
                ],
            }
            for seq in scene.motion_sequences
        ],
        "obstacles": [[{"x": pt.x, "y": pt.y} for pt in obstacle] for obstacle in scene.obstacles],
    }
    if scene.leeway is not None:
        data["leeway"] = {"heading": scene.leeway.heading, "velocity": scene.leeway.velocity}
    return data


def dump_scene_json(scene: Scene) -> str:
    """Encode a scene as JSON text."""
    return json.dumps(scene_to_dict(scene), indent=2) + "\n"
