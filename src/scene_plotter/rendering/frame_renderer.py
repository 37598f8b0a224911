"""Frame renderer: turns a scene into one SVG file per timestamp."""

import logging
import math
from collections.abc import Callable
from pathlib import Path

from scene_plotter.config import RenderConfig
from scene_plotter.data import HeadingWithVelocity, Point, Scene, SceneBounds, TrailSegment
from scene_plotter.errors import RenderError
from scene_plotter.formats.numbers import format_number
from scene_plotter.interfaces.canvas import Canvas
from scene_plotter.rendering.bounds import compute_bounds
from scene_plotter.rendering.matplotlib_canvas import MatplotlibCanvas
from scene_plotter.rendering.palette import ColorPalette
from scene_plotter.utils.logging import set_frame_index
from scene_plotter.validation import validate_scene

logger = logging.getLogger(__name__)

CanvasFactory = Callable[[RenderConfig], Canvas]


def default_canvas_factory(config: RenderConfig) -> Canvas:
    return MatplotlibCanvas(figure_size_points=config.figure_size_points)


def trail_segments(scene: Scene, frame_index: int, trail_steps: int) -> list[TrailSegment]:
    """List the trail edges visible in ``frame_index``.

    Every object gets one segment per past frame ``s`` with
    ``max(0, frame_index - trail_steps) <= s < frame_index``, running from its
    position at ``s`` to its position at ``s + 1``.

    Args:
        scene: シーン
        frame_index: 描画するフレーム番号
        trail_steps: 軌跡として描く過去ステップ数

    Returns:
        Segments ordered oldest first, then by object index
    """
    segments = []
    first = max(0, frame_index - trail_steps)
    for start_frame in range(first, frame_index):
        start_poses = scene.motion_sequences[start_frame].poses
        end_poses = scene.motion_sequences[start_frame + 1].poses
        for object_index, (start, end) in enumerate(zip(start_poses, end_poses, strict=True)):
            segments.append(
                TrailSegment(
                    object_index=object_index,
                    start_frame=start_frame,
                    age=frame_index - start_frame,
                    start=start.pose.position,
                    end=end.pose.position,
                )
            )
    return segments


def leeway_direction(leeway: HeadingWithVelocity, length: float) -> tuple[float, float]:
    """Offset of the leeway arrow tip from the dial center.

    Compass convention: 0 deg points along +y and the heading turns clockwise
    toward +x, hence sin for x and cos for y.
    """
    heading = math.radians(leeway.heading)
    return length * math.sin(heading), length * math.cos(heading)


class FrameRenderer:
    """Draw obstacles, trails, markers and annotation plates for every frame.

    Camera, obstacles and plates are identical in every frame so the files
    can be played back in sequence as an animation.
    """

    def __init__(
        self,
        config: RenderConfig | None = None,
        palette: ColorPalette | None = None,
        canvas_factory: CanvasFactory | None = None,
    ):
        """Initialize renderer.

        Args:
            config: Render configuration (defaults if None)
            palette: Per-object colors. Built from ``config.palette`` if None.
            canvas_factory: Creates one canvas per frame (matplotlib SVG if None)

        Raises:
            ValueError: The palette has fewer shades than trail_steps + 1
        """
        self.config = config if config is not None else RenderConfig()
        self.palette = palette if palette is not None else ColorPalette(self.config.palette)
        self.canvas_factory = canvas_factory or default_canvas_factory

        if self.config.trail_steps > self.palette.depth - 1:
            raise ValueError(
                f"trail_steps={self.config.trail_steps} needs {self.config.trail_steps + 1} shades "
                f"per object, palette has {self.palette.depth}"
            )

    def render(self, scene: Scene, output_dir: str | Path | None = None) -> list[Path]:
        """Render every frame of ``scene``.

        Args:
            scene: 描画するシーン (read only)
            output_dir: Directory for the frames (``config.output_dir`` if None)

        Returns:
            Paths of the written frames, in frame order

        Raises:
            SceneInvariantError: The scene cannot be drawn with the palette
            RenderError: A frame could not be written. Earlier frames stay on disk.
        """
        validate_scene(scene, self.palette)
        bounds = compute_bounds(scene)

        directory = Path(output_dir if output_dir is not None else self.config.output_dir)
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise RenderError(0, directory, exc.strerror or str(exc)) from exc

        written: list[Path] = []
        try:
            for frame_index in range(scene.frame_count):
                set_frame_index(frame_index)
                written.append(self.render_frame(scene, bounds, frame_index, directory))
        finally:
            set_frame_index(None)

        logger.info(f"Wrote {len(written)} frame(s) to {directory}")
        return written

    def render_frame(
        self, scene: Scene, bounds: SceneBounds, frame_index: int, directory: Path
    ) -> Path:
        canvas = self.canvas_factory(self.config)
        self.draw_frame(canvas, scene, bounds, frame_index)

        path = directory / self.config.frame_filename(frame_index)
        logger.info(f"Writing file {path.name}...")
        try:
            canvas.save(path)
        except OSError as exc:
            raise RenderError(frame_index, path, exc.strerror or str(exc)) from exc
        return path

    def draw_frame(
        self, canvas: Canvas, scene: Scene, bounds: SceneBounds, frame_index: int
    ) -> None:
        """Draw one frame onto ``canvas`` (bottom layer first)."""
        self._draw_obstacles(canvas, scene)
        self._draw_trails(canvas, scene, frame_index)
        self._draw_markers(canvas, scene, frame_index)
        self._draw_timestamp(canvas, scene.motion_sequences[frame_index].timestamp, bounds)
        if scene.leeway is not None:
            self._draw_leeway(canvas, scene.leeway, bounds)
        canvas.set_viewport(
            bounds.padded(self.config.viewport_padding),
            equal_axes=True,
            show_axes=self.config.show_axes,
        )

    def _draw_obstacles(self, canvas: Canvas, scene: Scene) -> None:
        for obstacle in scene.obstacles:
            if not obstacle:
                continue
            canvas.draw_polygon(
                list(obstacle),
                face_color=self.config.obstacle_face_color,
                edge_color=self.config.obstacle_edge_color,
                line_width=self.config.obstacle_line_width,
            )

    def _draw_trails(self, canvas: Canvas, scene: Scene, frame_index: int) -> None:
        for segment in trail_segments(scene, frame_index, self.config.trail_steps):
            canvas.draw_arrow(
                segment.start,
                segment.end,
                color=self.palette.shade(segment.object_index, segment.age),
                line_width=self.config.trail_line_width,
                style="-",
            )

    def _draw_markers(self, canvas: Canvas, scene: Scene, frame_index: int) -> None:
        for object_index, position in enumerate(scene.motion_sequences[frame_index].positions):
            canvas.draw_circle(
                position,
                self.config.marker_radius,
                edge_color=self.palette.current(object_index),
                line_width=self.config.trail_line_width,
            )

    def _draw_timestamp(self, canvas: Canvas, timestamp: float, bounds: SceneBounds) -> None:
        plate = self.config.timestamp_plate
        left = bounds.min_x + plate.offset_x - plate.padding
        bottom = bounds.min_y + plate.offset_y - plate.padding
        top = bounds.min_y + plate.offset_y + plate.padding + plate.height
        canvas.draw_polygon(
            [
                Point(left, bottom),
                Point(left + plate.width, bottom),
                Point(left + plate.width, top),
                Point(left, top),
            ],
            face_color=plate.face_color,
            edge_color="black",
            line_width=self.config.plate_line_width,
        )
        text_position = Point(
            bounds.min_x + plate.offset_x + plate.text_offset,
            bounds.min_y + plate.offset_y + plate.height / 2.0,
        )
        canvas.draw_text(
            text_position,
            f"t = {format_number(timestamp)} min",
            font_size=self.config.font_size,
        )

    def _draw_leeway(
        self, canvas: Canvas, leeway: HeadingWithVelocity, bounds: SceneBounds
    ) -> None:
        plate = self.config.leeway_plate
        radius = plate.dial_radius
        center = Point(bounds.min_x + plate.offset_x, bounds.min_y + plate.offset_y)
        left = center.x - radius - plate.padding
        bottom = center.y - radius - plate.padding
        top = center.y + radius + plate.padding
        canvas.draw_polygon(
            [
                Point(left, bottom),
                Point(left + plate.width, bottom),
                Point(left + plate.width, top),
                Point(left, top),
            ],
            face_color=plate.face_color,
            edge_color="black",
            line_width=self.config.plate_line_width,
        )

        dx, dy = leeway_direction(leeway, radius)
        canvas.draw_arrow(
            center,
            Point(center.x + dx, center.y + dy),
            color="black",
            line_width=self.config.plate_line_width,
            style="->",
            scale=plate.arrow_scale,
        )
        canvas.draw_text(
            Point(center.x + radius + plate.text_offset, center.y),
            f"{format_number(leeway.velocity)} kts",
            font_size=self.config.font_size,
        )
        canvas.draw_circle(
            center, radius, edge_color="black", line_width=self.config.trail_line_width
        )
