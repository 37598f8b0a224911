import logging
import sys

# 現在描画中のフレーム番号 (描画中でなければ None)
_current_frame_index: int | None = None

LOG_FORMAT = "[%(asctime)s][%(levelname)s][%(short_name)s][frame %(frame)s] %(message)s"
DATE_FORMAT = "%H:%M:%S"


def set_frame_index(index: int | None) -> None:
    """描画中のフレーム番号を更新します。描画終了時は None を渡します。"""
    global _current_frame_index
    _current_frame_index = index


def get_frame_index() -> int | None:
    return _current_frame_index


class FrameIndexFilter(logging.Filter):
    """ログレコードにフレーム番号と短縮ロガー名を付与するフィルター。"""

    def filter(self, record: logging.LogRecord) -> bool:
        record.frame = "-" if _current_frame_index is None else str(_current_frame_index)

        # 例: scene_plotter.rendering.frame_renderer -> frame_renderer
        if "." in record.name:
            record.short_name = record.name.split(".")[-1]
        else:
            record.short_name = record.name

        return True


def setup_logging(level: str | int = "INFO") -> logging.Handler:
    """ルートロガーにフレーム番号付きのハンドラーを設定します。

    Args:
        level: ログレベル名 ("DEBUG", "INFO", ...) または数値

    Returns:
        追加したハンドラー

    Raises:
        ValueError: 不明なログレベル名の場合
    """
    if isinstance(level, str):
        level_value = logging.getLevelName(level.upper())
        if not isinstance(level_value, int):
            raise ValueError(f"Unknown log level: {level}")
        level = level_value

    handler = logging.StreamHandler(sys.stderr)
    handler.addFilter(FrameIndexFilter())
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    root = logging.getLogger()
    # 再設定時は以前のハンドラーを外す
    for existing in list(root.handlers):
        if any(isinstance(f, FrameIndexFilter) for f in existing.filters):
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level)
    return handler
