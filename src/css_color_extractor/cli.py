# src/css_color_extractor/cli.py
import argparse
import logging
import os
import sys
from dataclasses import replace

from .extraction.color.constants import COLOR_FORMAT_ALIASES, COLOR_FORMATS, SORT_MODES


def _read_input(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8") as f:
        return f.read()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="css-color-extractor",
        description="Extract the colors used in a CSS file, one per line.",
    )
    parser.add_argument("input", help="CSS file to read ('-' for stdin)")
    parser.add_argument(
        "-g", "--without-grey", action="store_true", default=None, dest="without_grey",
        help="Omit greys (black and white are kept)",
    )
    parser.add_argument(
        "-m", "--without-monochrome", action="store_true", default=None,
        dest="without_monochrome", help="Omit black, white and greys",
    )
    parser.add_argument(
        "-a", "--all-colors", action="store_true", default=None, dest="all_colors",
        help="Keep every occurrence instead of unique colors",
    )
    parser.add_argument(
        "-f", "--format",
        choices=[*COLOR_FORMATS, *COLOR_FORMAT_ALIASES],
        dest="color_format",
        help="Output color format (default: as written in the CSS)",
    )
    parser.add_argument("-s", "--sort", choices=SORT_MODES, help="Sort colors by hue or frequency")
    parser.add_argument(
        "--config",
        help="JSON options file (default: $CSS_COLOR_EXTRACTOR_CONFIG)",
    )
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")
    return parser


def main(argv=None):
    """CLI: read a stylesheet and print its colors, one per line."""
    from .extraction.general.utils import env_config_path, log
    from .extraction.orchestrator import extract_from_stylesheet, load_options
    from .extraction.types import Options

    args = build_parser().parse_args(argv)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
        os.environ.setdefault(log.ENV_VAR, "all")
        log.reload_topics()

    try:
        config_path = args.config or env_config_path()
        options = load_options(config_path) if config_path else Options()
        overrides = {
            field: getattr(args, field)
            for field in ("without_grey", "without_monochrome", "all_colors", "color_format", "sort")
            if getattr(args, field) is not None
        }
        options = replace(options, **overrides)

        colors = extract_from_stylesheet(_read_input(args.input), options)
    except Exception as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        sys.exit(1)

    for color in colors:
        print(color)


if __name__ == "__main__":
    main()
