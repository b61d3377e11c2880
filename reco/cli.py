"""Command line interface for reco."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import (
    DEFAULT_ACTIONS,
    DEFAULT_OUTPUT,
    DEFAULT_PATTERNS,
    Configuration,
    DuplicateStrategy,
)
from .errors import RecoError
from .logger import configure_logging, get_logger, level_for_verbosity
from .organizer import Organizer

DESCRIPTION = """\
reco is a tool to organize recovered photos super easy.
reco only moves files to a directory. It does not copy nor modify files.
reco can decode jpeg/png/bmp files to apply size filters."""

EPILOG = """\
example:
  reco -r=false -d ./unorganizedPhotos --month"""

MISSING_DIR_HINT = (
    "-d or --dir flag is required, reco will now run in dry mode! "
    "Run `reco -h` for help.\nType in desired directory:"
)

_TRUE = {"1", "t", "true", "y", "yes", "on"}
_FALSE = {"0", "f", "false", "n", "no", "off"}


def _str_to_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise argparse.ArgumentTypeError(f"invalid boolean value: {value!r}")


def _add_flag(parser: argparse.ArgumentParser, *names: str, dest: str, default: bool, help: str) -> None:
    """Boolean option that also accepts ``--name=false`` / ``-n=false``."""

    parser.add_argument(
        *names,
        dest=dest,
        nargs="?",
        const=True,
        default=default,
        type=_str_to_bool,
        metavar="BOOL",
        help=f"{help} (default: {str(default).lower()})",
    )


def _expand_short_flags(parser: argparse.ArgumentParser, argv: list[str]) -> list[str]:
    """Split grouped boolean short flags, so ``-km`` reads as ``-k -m``."""

    letters = {
        option[1]
        for action in parser._actions
        if action.type is _str_to_bool
        for option in action.option_strings
        if len(option) == 2
    }
    expanded: list[str] = []
    for index, arg in enumerate(argv):
        if arg == "--":
            expanded.extend(argv[index:])
            break
        if len(arg) > 2 and arg[0] == "-" and arg[1] != "-" and set(arg[1:]) <= letters:
            expanded.extend(f"-{letter}" for letter in arg[1:])
        else:
            expanded.append(arg)
    return expanded


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(_expand_short_flags(parser, sys.argv[1:] if argv is None else argv))

    interactive = args.dir is None
    source = args.dir
    if interactive:
        source = _prompt_directory()

    config = Configuration(
        dir=Path(source) if source else None,
        output=args.output,
        ext=args.ext,
        recursive=args.recursive,
        actions=args.actions,
        dry=args.dry or interactive,
        noerrstop=args.noerrstop,
        keepfolder=args.keepfolder,
        year=args.year,
        month=args.month,
        dimension_min=args.dimension_min,
        size=args.size,
        size_min=args.size_min,
        verbose=args.verbose,
        duplicates=DuplicateStrategy(args.duplicates),
        interactive=interactive,
    )
    level = level_for_verbosity(config.verbose)
    logger = get_logger("cli")
    try:
        configure_logging(args.logfile, level=level)
    except OSError as exc:
        configure_logging(level=level)
        logger.critical("could not open log file %s: %s", args.logfile, exc)
        return 1

    try:
        Organizer(config).run()
    except RecoError as exc:
        logger.critical("%s", exc)
        return 1
    except KeyboardInterrupt:
        logger.critical("interrupted")
        return 130

    if config.interactive:
        logger.info("Press enter to end reco.")
        _wait_for_enter()
    logger.info("finished reco")
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="reco",
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-d", "--dir", help="Directory in which to search for files")
    parser.add_argument(
        "-o", "--output", type=Path, default=Path(DEFAULT_OUTPUT),
        help=f"Directory in which to organize files to (default: {DEFAULT_OUTPUT})",
    )
    parser.add_argument(
        "-t", "--ext", default=DEFAULT_PATTERNS,
        help=f"Matching shell file pattern. Separate patterns with commas (default: {DEFAULT_PATTERNS})",
    )
    _add_flag(parser, "-r", "--recursive", dest="recursive", default=True, help="Search for files in subdirectories")
    parser.add_argument(
        "--actions", type=Path, default=Path(DEFAULT_ACTIONS),
        help='File to write actions performed for a wet run. CSV format: "Previous location","New location"'
        f" (default: {DEFAULT_ACTIONS})",
    )
    parser.add_argument(
        "-V", "--verbose", type=int, choices=range(1, 5), default=2, metavar="LEVEL",
        help="Log level. The higher, the more verbose. Errors:1, Info:2, Print:3, Debug:4 (default: 2)",
    )
    _add_flag(parser, "--dry", dest="dry", default=False, help="Dry run: report placements without moving files")
    _add_flag(parser, "--noerrstop", dest="noerrstop", default=False, help="Do not interrupt file moving due to non-fatal errors")
    _add_flag(
        parser, "-k", "--keepfolder", dest="keepfolder", default=False,
        help="Keep base folder name of file when moving file. Avoids duplicate names such as '/2011/2011/a.jpg'",
    )
    _add_flag(parser, "-y", "--year", dest="year", default=True, help="Organize files by year (year directory)")
    _add_flag(parser, "-m", "--month", dest="month", default=False, help="Organize files by month (month directory)")
    parser.add_argument(
        "--dimensionMin", dest="dimension_min", type=int, default=300,
        help="Minimum width and height of images in pixels (default: 300)",
    )
    parser.add_argument("--size", dest="size", type=int, default=0, help="Minimum filesize in MB (default: 0)")
    parser.add_argument(
        "--sizeMin", dest="size_min", type=int, default=100000,
        help="Minimum number of pixels in an image to be processed. Divide by a million to get megapixels (default: 100000)",
    )
    parser.add_argument(
        "--duplicates", choices=[strategy.value for strategy in DuplicateStrategy], default=DuplicateStrategy.ERROR.value,
        help="What to do when the destination file already exists (default: error)",
    )
    parser.add_argument("--logfile", type=Path, help="Also write log lines to this rotating log file")
    return parser


def _prompt_directory() -> str | None:
    print(MISSING_DIR_HINT, end="", flush=True)
    try:
        answer = input().strip()
    except EOFError:
        return None
    return answer or None


def _wait_for_enter() -> None:
    try:
        input()
    except EOFError:
        pass


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
