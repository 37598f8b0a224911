"""Scene decoder interface."""

from abc import ABC, abstractmethod
from pathlib import Path

from scene_plotter.data import Scene
from scene_plotter.errors import DecodeError


class SceneDecoder(ABC):
    """シーンファイル形式の抽象基底クラス."""

    #: 形式名 ("csv", "json")
    name: str = ""
    #: この形式の標準拡張子
    suffix: str = ""

    @abstractmethod
    def decode(self, text: str, source: str | None = None) -> Scene:
        """テキストからシーンを復元.

        Args:
            text: ファイルの内容
            source: エラーメッセージに使う名前

        Returns:
            Scene: 復元したシーン

        Raises:
            DecodeError: 形式が不正な場合
        """

    @abstractmethod
    def encode(self, scene: Scene) -> str:
        """シーンをテキストに変換.

        Args:
            scene: 変換するシーン

        Returns:
            str: この形式のテキスト
        """

    def load(self, path: str | Path) -> Scene:
        """Read ``path`` as UTF-8 and decode it."""
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            msg = f"Could not read file: {exc.strerror or exc}"
            raise DecodeError(msg, source=str(path)) from exc
        except UnicodeDecodeError as exc:
            raise DecodeError(f"File is not valid UTF-8: {exc.reason}", source=str(path)) from exc
        return self.decode(text, source=str(path))

    def save(self, scene: Scene, path: str | Path) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(self.encode(scene))
