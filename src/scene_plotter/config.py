"""Configuration models for the frame renderer."""

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from scene_plotter.utils.config import load_yaml, merge_configs

DEFAULT_PALETTE: list[list[str]] = [
    ["#00ff00", "#33ff33", "#88ff88", "#aaffaa", "#eeffee"],  # green
    ["#ff0000", "#ff3333", "#ff8888", "#ffaaaa", "#ffeeee"],  # red
    ["#0000ff", "#3333ff", "#8888ff", "#aaaaff", "#eeeeff"],  # blue
    ["#ffff00", "#ffff33", "#ffff88", "#ffffaa", "#ffffee"],  # yellow
]


class StrictConfig(BaseModel):
    """Base configuration with strict validation (extra fields are forbidden)."""

    model_config = ConfigDict(extra="forbid")


class TimestampPlateConfig(StrictConfig):
    """Placement of the timestamp plate, in scene units relative to (min_x, min_y)."""

    offset_x: float = Field(16.2, description="Plate X offset from min_x")
    offset_y: float = Field(0.0, description="Plate Y offset from min_y")
    text_offset: float = Field(0.2, description="Text X offset inside the plate")
    padding: float = Field(0.1, description="Plate padding")
    width: float = Field(4.0, description="Plate width")
    height: float = Field(1.0, description="Plate height")
    face_color: str = Field("#ffffff", description="Plate fill color")


class LeewayPlateConfig(StrictConfig):
    """Placement of the leeway dial, in scene units relative to (min_x, min_y)."""

    offset_x: float = Field(1.0, description="Dial center X offset from min_x")
    offset_y: float = Field(1.0, description="Dial center Y offset from min_y")
    dial_radius: float = Field(0.6, gt=0.0, description="Dial radius and arrow length")
    text_offset: float = Field(0.3, description="Gap between dial and velocity text")
    padding: float = Field(0.1, description="Plate padding")
    width: float = Field(4.0, description="Plate width")
    face_color: str = Field("#eeeeee", description="Plate fill color")
    arrow_scale: float = Field(20.0, gt=0.0, description="Arrow head size")


class RenderConfig(StrictConfig):
    """Complete frame renderer configuration."""

    trail_steps: int = Field(4, ge=0, description="Number of past steps drawn as a trail")
    marker_radius: float = Field(0.1, gt=0.0, description="Radius of current-position markers")
    viewport_padding: float = Field(0.2, ge=0.0, description="Padding around scene bounds")
    figure_size_points: float = Field(800.0, gt=0.0, description="Figure width and height")
    show_axes: bool = Field(True, description="Draw axes around the viewport")
    font_size: float = Field(16.0, gt=0.0, description="Annotation font size")

    output_dir: str = Field(".", description="Directory the frames are written to")
    filename_template: str = Field("result{index}.svg", description="Frame file name")

    obstacle_face_color: str = Field("#444444", description="Obstacle fill color")
    obstacle_edge_color: str = Field("black", description="Obstacle outline color")
    obstacle_line_width: float = Field(3.0, ge=0.0, description="Obstacle outline width")
    trail_line_width: float = Field(2.0, ge=0.0, description="Trail and marker line width")
    plate_line_width: float = Field(0.5, ge=0.0, description="Annotation plate outline width")

    palette: list[list[str]] = Field(
        default_factory=lambda: [list(row) for row in DEFAULT_PALETTE],
        description="Per-object shades, index 0 is the current-position color",
    )

    timestamp_plate: TimestampPlateConfig = Field(default_factory=TimestampPlateConfig)
    leeway_plate: LeewayPlateConfig = Field(default_factory=LeewayPlateConfig)

    @field_validator("filename_template")
    @classmethod
    def _check_template(cls, value: str) -> str:
        try:
            first, second = value.format(index=0), value.format(index=1)
        except (IndexError, KeyError, ValueError) as e:
            raise ValueError(f"Invalid filename_template '{value}': {e}") from e
        if first == second:
            raise ValueError("filename_template must contain an '{index}' field")
        return value

    @model_validator(mode="after")
    def _check_palette_depth(self) -> "RenderConfig":
        for row in self.palette:
            if len(row) < self.trail_steps + 1:
                raise ValueError(
                    f"Each palette row needs {self.trail_steps + 1} shades "
                    f"for trail_steps={self.trail_steps}, got {len(row)}"
                )
        return self

    def frame_filename(self, index: int) -> str:
        return self.filename_template.format(index=index)

    @classmethod
    def from_yaml(cls, path: str | Path, overrides: dict[str, Any] | None = None) -> "RenderConfig":
        """Load configuration from YAML file.

        Args:
            path: Path to YAML file
            overrides: Values taking precedence over the file contents

        Returns:
            RenderConfig instance
        """
        data = load_yaml(path)
        if overrides:
            data = merge_configs(data, overrides)
        return cls(**data)
