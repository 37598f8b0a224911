"""Tests for the scene-plotter command line."""

import logging

import pytest

from scene_plotter.cli import EXIT_FAILURE, EXIT_OK, EXIT_USAGE, main, select_input
from scene_plotter.errors import UsageError
from scene_plotter.formats import load_scene

# main() installs a stderr handler on the root logger
pytestmark = pytest.mark.usefixtures("restore_root_logger")


@pytest.fixture
def csv_file(tmp_path, example_csv):
    path = tmp_path / "scene.csv"
    path.write_text(example_csv, encoding="utf-8")
    return path


def test_no_input_is_usage_error(tmp_path, caplog) -> None:
    """入力ファイルなしは使い方エラー."""
    with caplog.at_level(logging.ERROR):
        assert main(["-o", str(tmp_path)]) == EXIT_USAGE

    assert "No input file" in caplog.text
    assert list(tmp_path.iterdir()) == []


def test_render_csv(csv_file, tmp_path, caplog) -> None:
    out_dir = tmp_path / "out"

    with caplog.at_level(logging.INFO):
        status = main(["--csv-file", str(csv_file), "--output-dir", str(out_dir)])

    assert status == EXIT_OK
    assert sorted(p.name for p in out_dir.iterdir()) == ["result0.svg", "result1.svg"]
    assert "Done!" in caplog.text


def test_render_json(csv_file, tmp_path) -> None:
    json_path = tmp_path / "scene.json"
    convert_args = ["-c", str(csv_file), "-o", str(tmp_path / "a"), "--convert-to", str(json_path)]
    assert main(convert_args) == EXIT_OK

    assert main(["-j", str(json_path), "-o", str(tmp_path / "b")]) == EXIT_OK
    assert (tmp_path / "b" / "result1.svg").exists()


def test_convert_to_writes_scene(csv_file, tmp_path) -> None:
    json_path = tmp_path / "converted" / "scene.json"

    out_dir = tmp_path / "out"

    status = main(["-c", str(csv_file), "-o", str(out_dir), "--convert-to", str(json_path)])

    assert status == EXIT_OK
    assert load_scene(json_path, "json") == load_scene(csv_file, "csv")


def test_convert_to_unknown_suffix(csv_file, tmp_path) -> None:
    target = tmp_path / "scene.txt"

    status = main(["-c", str(csv_file), "-o", str(tmp_path), "--convert-to", str(target)])

    assert status == EXIT_FAILURE
    assert not target.exists()


def test_csv_preferred_over_json(csv_file, tmp_path, caplog) -> None:
    """両方指定された場合はCSVを使う."""
    missing_json = tmp_path / "missing.json"

    with caplog.at_level(logging.WARNING):
        status = main(["-c", str(csv_file), "-j", str(missing_json), "-o", str(tmp_path / "out")])

    assert status == EXIT_OK
    assert "using CSV file" in caplog.text


def test_malformed_input(tmp_path, caplog) -> None:
    path = tmp_path / "bad.csv"
    path.write_text("SP;0;1;x;0;0\n", encoding="utf-8")

    with caplog.at_level(logging.ERROR):
        status = main(["-c", str(path), "-o", str(tmp_path / "out")])

    assert status == EXIT_FAILURE
    assert "Decoding failed" in caplog.text
    assert "bad.csv:1" in caplog.text


@pytest.mark.parametrize(
    ("name", "content"),
    [
        ("nan.csv", "SP;0;nan;0;0;0\nSP;1;1;0;0;0\n"),
        ("inf.json", '{"motion_sequences": [{"timestamp": Infinity, "poses": []}]}'),
    ],
)
def test_non_finite_input_is_decode_error(tmp_path, caplog, name: str, content: str) -> None:
    """NaN や無限大を含む入力はデコード段階で失敗し, フレームを書かない."""
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    out_dir = tmp_path / "out"
    option = "-c" if name.endswith(".csv") else "-j"

    with caplog.at_level(logging.ERROR):
        status = main([option, str(path), "-o", str(out_dir)])

    assert status == EXIT_FAILURE
    assert "Decoding failed" in caplog.text
    assert "Scene validation failed" not in caplog.text
    assert not out_dir.exists()


def test_missing_input_file(tmp_path) -> None:
    assert main(["-j", str(tmp_path / "missing.json"), "-o", str(tmp_path)]) == EXIT_FAILURE


def test_too_many_objects(tmp_path, caplog) -> None:
    path = tmp_path / "crowded.csv"
    path.write_text("SP;0" + ";1;1;0;0" * 5 + "\n", encoding="utf-8")
    out_dir = tmp_path / "out"

    with caplog.at_level(logging.ERROR):
        status = main(["-c", str(path), "-o", str(out_dir)])

    assert status == EXIT_FAILURE
    assert "at most 4" in caplog.text
    assert not out_dir.exists()


def test_config_file(csv_file, tmp_path) -> None:
    config_path = tmp_path / "render.yaml"
    config_path.write_text(
        f"output_dir: {tmp_path / 'frames'}\nfilename_template: frame{{index}}.svg\n",
        encoding="utf-8",
    )

    assert main(["-c", str(csv_file), "--config", str(config_path)]) == EXIT_OK
    assert (tmp_path / "frames" / "frame0.svg").exists()


def test_invalid_config_file(csv_file, tmp_path, caplog) -> None:
    config_path = tmp_path / "render.yaml"
    config_path.write_text("unknown_option: 1\n", encoding="utf-8")

    with caplog.at_level(logging.ERROR):
        status = main(["-c", str(csv_file), "-o", str(tmp_path), "--config", str(config_path)])

    assert status == EXIT_FAILURE
    assert "Configuration failed" in caplog.text


def test_ragged_palette_is_configuration_error(csv_file, tmp_path, caplog) -> None:
    """Palette rows of different lengths are reported before decoding."""
    config_path = tmp_path / "render.yaml"
    config_path.write_text(
        "palette:\n  - [a, b, c, d, e]\n  - [a, b, c, d, e, f]\n",
        encoding="utf-8",
    )
    out_dir = tmp_path / "out"

    with caplog.at_level(logging.ERROR):
        status = main(["-c", str(csv_file), "-o", str(out_dir), "--config", str(config_path)])

    assert status == EXIT_FAILURE
    assert "Configuration failed" in caplog.text
    assert "Palette row 1" in caplog.text
    assert "Scene validation failed" not in caplog.text
    assert not out_dir.exists()


class TestSelectInput:
    """Tests for select_input."""

    def test_csv(self) -> None:
        fmt, path = select_input("a.csv", "")

        assert fmt == "csv"
        assert path.name == "a.csv"

    def test_json(self) -> None:
        assert select_input("", "a.json")[0] == "json"

    def test_neither(self) -> None:
        with pytest.raises(UsageError):
            select_input("", "")
