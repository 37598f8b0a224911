"""Configuration file utilities."""

from pathlib import Path
from typing import Any

import yaml


def load_yaml(file_path: str | Path) -> dict[str, Any]:
    """YAMLファイルを読み込む.

    Args:
        file_path: YAMLファイルのパス

    Returns:
        読み込んだ設定辞書

    Raises:
        FileNotFoundError: ファイルが存在しない場合
        yaml.YAMLError: YAMLのパースエラー
        ValueError: トップレベルがマッピングでない場合
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"Config file not found: {file_path}")

    with open(file_path, encoding="utf-8") as f:
        config = yaml.safe_load(f)

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ValueError(f"Config file must contain a mapping: {file_path}")
    return config


def merge_configs(
    base_config: dict[str, Any],
    override_config: dict[str, Any],
) -> dict[str, Any]:
    """設定を再帰的にマージ.

    Args:
        base_config: ベース設定
        override_config: 上書き設定

    Returns:
        マージされた設定

    Example:
        >>> merge_configs({"leeway_plate": {"offset_x": 1.0, "offset_y": 1.0}},
        ...               {"leeway_plate": {"offset_y": 2.0}})
        {'leeway_plate': {'offset_x': 1.0, 'offset_y': 2.0}}
    """
    merged = base_config.copy()

    for key, value in override_config.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = merge_configs(merged[key], value)
        else:
            merged[key] = value

    return merged


__all__ = [
    "load_yaml",
    "merge_configs",
]
