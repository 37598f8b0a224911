"""Scene file formats."""

from pathlib import Path

from scene_plotter.data import Scene
from scene_plotter.formats.csv_format import dump_scene_csv, parse_scene_csv
from scene_plotter.formats.json_format import dump_scene_json, parse_scene_json
from scene_plotter.formats.numbers import format_number
from scene_plotter.interfaces.decoder import SceneDecoder


class CsvSceneDecoder(SceneDecoder):
    """Semicolon-delimited SP/LW/OBS records."""

    name = "csv"
    suffix = ".csv"

    def decode(self, text: str, source: str | None = None) -> Scene:
        return parse_scene_csv(text, source=source)

    def encode(self, scene: Scene) -> str:
        return dump_scene_csv(scene)


class JsonSceneDecoder(SceneDecoder):
    """JSON document with motion_sequences, leeway and obstacles."""

    name = "json"
    suffix = ".json"

    def decode(self, text: str, source: str | None = None) -> Scene:
        return parse_scene_json(text, source=source)

    def encode(self, scene: Scene) -> str:
        return dump_scene_json(scene)


_DECODERS: dict[str, type[SceneDecoder]] = {
    CsvSceneDecoder.name: CsvSceneDecoder,
    JsonSceneDecoder.name: JsonSceneDecoder,
}


def get_decoder(fmt: str) -> SceneDecoder:
    """Return the decoder registered under ``fmt`` ("csv" or "json").

    Raises:
        ValueError: Unknown format name
    """
    try:
        return _DECODERS[fmt.lower()]()
    except KeyError:
        raise ValueError(f"Unknown scene format '{fmt}'. Available: {sorted(_DECODERS)}") from None


def decoder_for_path(path: str | Path) -> SceneDecoder:
    """Pick a decoder from the file suffix."""
    suffix = Path(path).suffix.lower()
    for decoder_cls in _DECODERS.values():
        if decoder_cls.suffix == suffix:
            return decoder_cls()
    raise ValueError(f"Cannot infer scene format from suffix '{suffix}' of {path}")


def load_scene(path: str | Path, fmt: str) -> Scene:
    """Read and decode a scene file with the named format."""
    return get_decoder(fmt).load(path)


__all__ = [
    "CsvSceneDecoder",
    "JsonSceneDecoder",
    "decoder_for_path",
    "dump_scene_csv",
    "dump_scene_json",
    "format_number",
    "get_decoder",
    "load_scene",
    "parse_scene_csv",
    "parse_scene_json",
]
