#!/usr/bin/env python3
"""Render a scene file into one SVG frame per timestamp."""

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from scene_plotter.config import RenderConfig
from scene_plotter.data import Scene
from scene_plotter.errors import (
    DecodeError,
    RenderError,
    SceneInvariantError,
    UsageError,
)
from scene_plotter.formats import decoder_for_path, get_decoder
from scene_plotter.rendering import FrameRenderer
from scene_plotter.utils.logging import setup_logging

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scene-plotter",
        description="Visualization of multiple timed sequences",
    )
    parser.add_argument("-c", "--csv-file", type=str, default="", help="Data file in CSV format")
    parser.add_argument("-j", "--json-file", type=str, default="", help="Data file in JSON format")
    parser.add_argument(
        "-o",
        "--output-dir",
        type=str,
        default=None,
        help="Directory the frames are written to (default: config output_dir or '.')",
    )
    parser.add_argument("--config", type=str, default=None, help="Render configuration YAML file")
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    parser.add_argument(
        "--convert-to",
        type=str,
        default=None,
        help="Also write the decoded scene to this path (.csv or .json)",
    )
    return parser


def select_input(csv_file: str, json_file: str) -> tuple[str, Path]:
    """Pick the decoder and input file from the command-line options.

    The CSV file wins when both are given.

    Raises:
        UsageError: Neither option was given
    """
    if not csv_file and not json_file:
        raise UsageError("No input file! Use --csv-file or --json-file.")
    if csv_file and json_file:
        logger.warning(f"Both --csv-file and --json-file given, using CSV file {csv_file}")
    if csv_file:
        return "csv", Path(csv_file)
    return "json", Path(json_file)


def load_config(config_path: str | None, output_dir: str | None) -> RenderConfig:
    overrides = {"output_dir": output_dir} if output_dir is not None else {}
    if config_path is None:
        return RenderConfig(**overrides)
    logger.info(f"Loading configuration from {config_path}...")
    return RenderConfig.from_yaml(config_path, overrides=overrides)


def convert_scene(scene: Scene, path: str) -> None:
    decoder = decoder_for_path(path)
    logger.info(f"Writing {decoder.name.upper()} file {path}...")
    decoder.save(scene, path)


def run(args: argparse.Namespace) -> int:
    """Run the decode -> render pipeline and return the exit status."""
    try:
        fmt, input_path = select_input(args.csv_file, args.json_file)
    except UsageError as e:
        logger.error(str(e))
        return EXIT_USAGE

    try:
        config = load_config(args.config, args.output_dir)
        renderer = FrameRenderer(config)
    except (OSError, ValueError, ValidationError) as e:
        logger.error(f"Configuration failed: {e}")
        return EXIT_FAILURE

    logger.info(f"Parsing {fmt.upper()} file {input_path}...")
    try:
        scene = get_decoder(fmt).load(input_path)
    except DecodeError as e:
        logger.error(f"Decoding failed: {e}")
        return EXIT_FAILURE

    if args.convert_to:
        try:
            convert_scene(scene, args.convert_to)
        except (OSError, ValueError) as e:
            logger.error(f"Conversion failed: {e}")
            return EXIT_FAILURE

    logger.info("Plotting scene...")
    try:
        renderer.render(scene)
    except SceneInvariantError as e:
        logger.error(f"Scene validation failed: {e}")
        return EXIT_FAILURE
    except RenderError as e:
        logger.error(f"Rendering failed: {e}")
        return EXIT_FAILURE

    logger.info("Done!")
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    """Entry point of the ``scene-plotter`` command."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
