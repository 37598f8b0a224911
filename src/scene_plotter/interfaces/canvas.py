"""Drawing canvas interface."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Literal

from scene_plotter.data import Point, SceneBounds

HorizontalAlignment = Literal["left", "center", "right"]
VerticalAlignment = Literal["top", "center", "bottom", "baseline"]


class Canvas(ABC):
    """1フレーム分の描画先.

    Calls are layered in order: later calls are drawn on top of earlier ones.
    """

    @abstractmethod
    def draw_polygon(
        self,
        points: list[Point],
        face_color: str,
        edge_color: str,
        line_width: float,
    ) -> None:
        """閉じた多角形を描画 (最後の点は最初の点と結ばれる)."""

    @abstractmethod
    def draw_arrow(
        self,
        start: Point,
        end: Point,
        color: str,
        line_width: float,
        style: str = "-",
        scale: float = 20.0,
    ) -> None:
        """start から end への線分を描画.

        Args:
            start: 始点
            end: 終点
            color: 線の色
            line_width: 線幅
            style: 矢印スタイル ("-" は矢じりなし, "->" は矢じりあり)
            scale: 矢じりの大きさ
        """

    @abstractmethod
    def draw_circle(
        self,
        center: Point,
        radius: float,
        edge_color: str,
        line_width: float,
        face_color: str = "none",
    ) -> None:
        """円を描画."""

    @abstractmethod
    def draw_text(
        self,
        position: Point,
        text: str,
        color: str = "black",
        font_size: float = 16.0,
        align_horizontal: HorizontalAlignment = "left",
        align_vertical: VerticalAlignment = "center",
    ) -> None:
        """テキストを描画."""

    @abstractmethod
    def set_viewport(
        self, bounds: SceneBounds, equal_axes: bool = True, show_axes: bool = True
    ) -> None:
        """表示範囲を設定."""

    @abstractmethod
    def save(self, path: Path) -> None:
        """描画結果をファイルに書き出す.

        Raises:
            OSError: 書き込みに失敗した場合
        """
