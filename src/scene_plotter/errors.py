"""Exception types raised by scene_plotter."""

from pathlib import Path


class ScenePlotterError(Exception):
    """Base class for all scene_plotter errors."""


class UsageError(ScenePlotterError):
    """Command line was used incorrectly (e.g. no input file)."""


class DecodeError(ScenePlotterError):
    """Input file could not be turned into a Scene."""

    def __init__(self, message: str, source: str | Path | None = None, line: int | None = None):
        self.source = source
        self.line = line
        location = ""
        if source is not None:
            location = f"{source}"
            if line is not None:
                location += f":{line}"
            location += ": "
        elif line is not None:
            location = f"line {line}: "
        super().__init__(f"{location}{message}")


class SceneInvariantError(ScenePlotterError):
    """Scene violates an assumption the renderer relies on."""


class ObjectCountMismatchError(SceneInvariantError):
    """Motion sequences disagree on the number of objects."""

    def __init__(self, frame_index: int, expected: int, actual: int):
        self.frame_index = frame_index
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Motion sequence {frame_index} has {actual} objects, "
            f"but motion sequence 0 has {expected}"
        )


class UnsupportedObjectCountError(SceneInvariantError):
    """Scene has more objects than the palette has colors for."""

    def __init__(self, object_count: int, capacity: int):
        self.object_count = object_count
        self.capacity = capacity
        super().__init__(
            f"Scene has {object_count} objects but the color palette supports at most {capacity}"
        )


class RenderError(ScenePlotterError):
    """Writing a frame failed. Frames written before it stay on disk."""

    def __init__(self, frame_index: int, path: str | Path, reason: str = ""):
        self.frame_index = frame_index
        self.path = Path(path)
        msg = f"Failed to write frame {frame_index} to {self.path}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


__all__ = [
    "DecodeError",
    "ObjectCountMismatchError",
    "RenderError",
    "SceneInvariantError",
    "ScenePlotterError",
    "UnsupportedObjectCountError",
    "UsageError",
]
