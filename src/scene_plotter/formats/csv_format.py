"""Semicolon-delimited scene format.

Each line is one record whose first field is a tag:

    SP;<timestamp>;<x>;<y>;<heading>;<velocity>[;<x>;<y>;<heading>;<velocity>...]
    LW;<heading>;<velocity>
    OBS;<x>;<y>[;<x>;<y>...]

Groups whose first field is empty (e.g. a trailing ``;``) are skipped.
Lines with any other tag are ignored.
"""

import logging

from scene_plotter.data import (
    HeadingWithVelocity,
    Point,
    Pose,
    PoseWithVelocity,
    Scene,
    StampedPoses,
)
from scene_plotter.errors import DecodeError
from scene_plotter.formats.numbers import format_number, parse_number

logger = logging.getLogger(__name__)

SEPARATOR = ";"
TAG_STAMPED_POSES = "SP"
TAG_LEEWAY = "LW"
TAG_OBSTACLE = "OBS"

POSE_GROUP_SIZE = 4
POINT_GROUP_SIZE = 2


def _field(elements: list[str], index: int, line_no: int, source: str | None) -> float:
    try:
        return parse_number(elements[index])
    except IndexError as exc:
        msg = f"Record '{elements[0]}' is missing field {index}"
        raise DecodeError(msg, source=source, line=line_no) from exc
    except ValueError as exc:
        msg = f"Invalid numeric value {elements[index]!r} in field {index}"
        raise DecodeError(msg, source=source, line=line_no) from exc


def _parse_poses(elements: list[str], line_no: int, source: str | None) -> list[PoseWithVelocity]:
    poses = []
    for i in range(2, len(elements), POSE_GROUP_SIZE):
        if not elements[i]:
            continue
        x = _field(elements, i, line_no, source)
        y = _field(elements, i + 1, line_no, source)
        heading = _field(elements, i + 2, line_no, source)
        velocity = _field(elements, i + 3, line_no, source)
        pose = Pose(position=Point(x, y), heading=heading)
        poses.append(PoseWithVelocity(pose=pose, velocity=velocity))
    return poses


def _parse_points(elements: list[str], line_no: int, source: str | None) -> list[Point]:
    points = []
    for i in range(1, len(elements), POINT_GROUP_SIZE):
        if not elements[i]:
            continue
        x = _field(elements, i, line_no, source)
        y = _field(elements, i + 1, line_no, source)
        points.append(Point(x, y))
    return points


def parse_scene_csv(text: str, source: str | None = None) -> Scene:
    """Decode a scene from delimited text.

    Args:
        text: File contents
        source: Name used in error messages (usually the file path)

    Returns:
        Decoded scene

    Raises:
        DecodeError: A numeric field is malformed or a record is truncated
    """
    motion_sequences: list[StampedPoses] = []
    obstacles: list[tuple[Point, ...]] = []
    leeway: HeadingWithVelocity | None = None

    for line_no, line in enumerate(text.split("\n"), start=1):
        elements = line.rstrip("\r").split(SEPARATOR)
        tag = elements[0]

        if tag == TAG_STAMPED_POSES:
            timestamp = _field(elements, 1, line_no, source)
            poses = _parse_poses(elements, line_no, source)
            motion_sequences.append(StampedPoses(timestamp=timestamp, poses=tuple(poses)))
        elif tag == TAG_LEEWAY:
            leeway = HeadingWithVelocity(
                heading=_field(elements, 1, line_no, source),
                velocity=_field(elements, 2, line_no, source),
            )
        elif tag == TAG_OBSTACLE:
            obstacles.append(tuple(_parse_points(elements, line_no, source)))
        elif tag.strip():
            logger.debug(f"Ignoring record with unknown tag '{tag}' on line {line_no}")

    return Scene(
        motion_sequences=tuple(motion_sequences),
        obstacles=tuple(obstacles),
        leeway=leeway,
    )


def dump_scene_csv(scene: Scene) -> str:
    """Encode a scene as delimited text (SP records, then LW, then OBS)."""
    lines = []
    for sequence in scene.motion_sequences:
        fields = [TAG_STAMPED_POSES, format_number(sequence.timestamp)]
        for p in sequence.poses:
            fields += [
                format_number(p.pose.position.x),
                format_number(p.pose.position.y),
                format_number(p.pose.heading),
                format_number(p.velocity),
            ]
        lines.append(SEPARATOR.join(fields))

    if scene.leeway is not None:
        lines.append(
            SEPARATOR.join(
                [
                    TAG_LEEWAY,
                    format_number(scene.leeway.heading),
                    format_number(scene.leeway.velocity),
                ]
            )
        )

    for obstacle in scene.obstacles:
        fields = [TAG_OBSTACLE]
        for point in obstacle:
            fields += [format_number(point.x), format_number(point.y)]
        lines.append(SEPARATOR.join(fields))

    return "".join(f"{line}\n" for line in lines)
