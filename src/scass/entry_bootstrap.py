import argparse
from typing import List, Optional

from scass.version import __version__
from scass.core.settings import settings


def _non_negative_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}")
    if n < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0: {value!r}")
    return n


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scass",
        description="Scan a directory tree for risky markers and write a Markdown digest.",
    )
    parser.add_argument(
        "-w", "--words", default="",
        help="Comma-separated list of words/strings to search for, or a file containing words "
             "(one per line). Defaults to a built-in list of risk markers.")
    parser.add_argument(
        "-d", "--directory", default=settings.DEFAULT_DIRECTORY,
        help="Directory to start the search in.")
    parser.add_argument(
        "-t", "--types", default="",
        help="Comma-separated list of file extensions to limit the search to (e.g. .py,.ts,.json).")
    parser.add_argument(
        "-c", "--case-sensitive", action="store_true",
        help="Enable case-sensitive search.")
    parser.add_argument(
        "-r", "--regex", action="store_true",
        help="Interpret search words/strings as regular expressions.")
    parser.add_argument(
        "-o", "--output", default=settings.DEFAULT_OUTPUT_FILE,
        help="Output file to write the results.")
    parser.add_argument(
        "-n", "--context", type=_non_negative_int, default=0,
        help="Number of context lines to include before and after each match.")
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log every scanned file and match to stderr.")
    parser.add_argument(
        "--json-logs", action="store_true", default=None,
        help="Emit diagnostics as JSON lines.")
    parser.add_argument("--version", action="version", version=f"scass {__version__}")
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)
