"""Command-line entry point: convert one SRT file to ASS."""

import argparse
import logging
import sys
from pathlib import Path

from srt2ass.config import Config
from srt2ass.converter import SRTToASSConverter
from srt2ass.upload import UploadHandler, ass_filename
from srt2ass.util.fs_util import FSUtil

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="srt2ass",
        description="Convert a SubRip (.srt) subtitle file to Advanced SubStation Alpha (.ass).",
    )
    parser.add_argument("input", type=Path, help="SRT file to convert")
    parser.add_argument("-o", "--output", type=Path, default=None, help="Output .ass path (default: next to the input)")
    parser.add_argument("--config", type=Path, default=None, help="Path to config.yaml (default: built-in settings)")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Override the configured log level",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the converter on one file.

    Returns:
        Exit code: 0 on success, 1 on any failure.
    """
    args = build_parser().parse_args(argv)

    try:
        config = Config(args.config)
    except (FileNotFoundError, KeyError, ValueError) as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    logging_config = config.get_logging_config()
    logging.basicConfig(
        level=args.log_level or logging_config.level,
        format=logging_config.format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    input_path: Path = args.input
    try:
        data = FSUtil.read_binary_file(input_path)
    except (FileNotFoundError, ValueError) as e:
        logger.error("Cannot read input: %s", e)
        return 1

    handler = UploadHandler(
        config=config.get_upload_config(),
        converter=SRTToASSConverter(config.get_converter_config()),
    )
    response = handler.handle(input_path.name, data)
    if not response.success or response.content is None:
        logger.error("Conversion failed for %s: %s", input_path.name, response.error)
        return 1

    output_path = args.output or input_path.with_name(ass_filename(input_path.name, config.get_upload_config().allowed_extension))
    try:
        FSUtil.write_text_file(output_path, response.content, create_parents=True)
    except OSError as e:
        logger.error("Cannot write output %s: %s", output_path, e)
        return 1

    print(f"✓ {input_path.name} -> {output_path} ({response.subtitle_count} subtitles)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
