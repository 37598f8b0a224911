"""Canvas implementation on top of matplotlib, writing SVG files."""

from pathlib import Path

from matplotlib import rc_context
from matplotlib.figure import Figure
from matplotlib.patches import Circle, FancyArrowPatch, Polygon

from scene_plotter.data import Point, SceneBounds
from scene_plotter.interfaces.canvas import Canvas, HorizontalAlignment, VerticalAlignment

POINTS_PER_INCH = 72.0

# テキストを <text> 要素として出力し, 同じ入力から同じファイルを生成する
SVG_RC_PARAMS = {
    "svg.fonttype": "none",
    "svg.hashsalt": "scene-plotter",
}


class MatplotlibCanvas(Canvas):
    """One matplotlib figure per frame.

    The figure is created without pyplot so no global figure state is kept
    between frames.
    """

    def __init__(self, figure_size_points: float = 800.0):
        size = figure_size_points / POINTS_PER_INCH
        self.figure = Figure(figsize=(size, size))
        self.axes = self.figure.add_subplot(1, 1, 1)
        self._zorder = 0

    def _next_zorder(self) -> int:
        # 呼び出し順に重ねる
        self._zorder += 1
        return self._zorder

    def draw_polygon(
        self,
        points: list[Point],
        face_color: str,
        edge_color: str,
        line_width: float,
    ) -> None:
        polygon = Polygon(
            [(p.x, p.y) for p in points],
            closed=True,
            facecolor=face_color,
            edgecolor=edge_color,
            linewidth=line_width,
            zorder=self._next_zorder(),
        )
        self.axes.add_patch(polygon)

    def draw_arrow(
        self,
        start: Point,
        end: Point,
        color: str,
        line_width: float,
        style: str = "-",
        scale: float = 20.0,
    ) -> None:
        arrow = FancyArrowPatch(
            posA=(start.x, start.y),
            posB=(end.x, end.y),
            arrowstyle=style,
            mutation_scale=scale,
            color=color,
            linewidth=line_width,
            shrinkA=0.0,
            shrinkB=0.0,
            zorder=self._next_zorder(),
        )
        self.axes.add_patch(arrow)

    def draw_circle(
        self,
        center: Point,
        radius: float,
        edge_color: str,
        line_width: float,
        face_color: str = "none",
    ) -> None:
        circle = Circle(
            (center.x, center.y),
            radius,
            facecolor=face_color,
            edgecolor=edge_color,
            linewidth=line_width,
            zorder=self._next_zorder(),
        )
        self.axes.add_patch(circle)

    def draw_text(
        self,
        position: Point,
        text: str,
        color: str = "black",
        font_size: float = 16.0,
        align_horizontal: HorizontalAlignment = "left",
        align_vertical: VerticalAlignment = "center",
    ) -> None:
        self.axes.text(
            position.x,
            position.y,
            text,
            color=color,
            fontsize=font_size,
            horizontalalignment=align_horizontal,
            verticalalignment=align_vertical,
            rotation=0.0,
            zorder=self._next_zorder(),
        )

    def set_viewport(
        self, bounds: SceneBounds, equal_axes: bool = True, show_axes: bool = True
    ) -> None:
        self.axes.set_xlim(bounds.min_x, bounds.max_x)
        self.axes.set_ylim(bounds.min_y, bounds.max_y)
        if equal_axes:
            self.axes.set_aspect("equal", adjustable="box")
        if not show_axes:
            self.axes.set_axis_off()

    def save(self, path: Path) -> None:
        with rc_context(SVG_RC_PARAMS), open(path, "wb") as f:
            self.figure.savefig(f, format="svg", metadata={"Date": None})
