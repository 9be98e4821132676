import argparse
import sys
from typing import List, Optional

from scass.core.errors import ScassError
from scass.core.logging_utils import LogContext
from scass.core.models import SearchOptions
from scass.core.patterns import compile_patterns
from scass.core.search.coordinator import ScanCoordinator
from scass.core.search.report_writer import render_report
from scass.core.terms import parse_file_types, resolve_terms
from scass.core.utils.logging import configure_logging, get_logger
from scass.entry_bootstrap import parse_args

logger = get_logger("scass.main")


def _bootstrap_runtime(ns: argparse.Namespace) -> None:
    configure_logging(level="DEBUG" if ns.verbose else None, json_logs=ns.json_logs)


def build_search_options(ns: argparse.Namespace) -> SearchOptions:
    return SearchOptions(
        words=tuple(resolve_terms(ns.words)),
        directory=ns.directory,
        file_types=tuple(parse_file_types(ns.types)),
        case_sensitive=ns.case_sensitive,
        use_regex=ns.regex,
        output_file=ns.output,
        context_lines=ns.context,
    )


def run_search(options: SearchOptions, log=None) -> dict:
    """
    Scan ``options.directory`` and write the report. Returns the scan summary;
    raises ScassError subclasses for fatal failures.
    """
    log = log or logger
    log.info(
        "search configured",
        terms=list(options.words),
        file_types=list(options.file_types),
        context_lines=options.context_lines,
    )
    patterns = compile_patterns(options.words, options.case_sensitive, options.use_regex, logger=log)
    if not patterns:
        log.warning("no valid search patterns; the report will be empty")

    coordinator = ScanCoordinator(logger=log)
    # The report is created while the walk runs; keep it out of its own results.
    channel = coordinator.run(
        options.directory,
        options.file_types,
        patterns,
        options.context_lines,
        exclude_paths=[options.output_file],
    )
    try:
        written = render_report(channel, options.output_file, options.directory, logger=log)
    except BaseException:
        # Release producers blocked on a channel nobody will drain.
        channel.abort()
        raise
    summary = coordinator.join()
    summary["matches_written"] = written
    summary["output"] = options.output_file
    return summary


def main(argv: Optional[List[str]] = None) -> int:
    ns = parse_args(argv)
    _bootstrap_runtime(ns)
    try:
        options = build_search_options(ns)
        with LogContext(logger, "search run", root=options.directory, output=options.output_file):
            summary = run_search(options)
    except ScassError as e:
        print(f"[scass] {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("[scass] interrupted", file=sys.stderr)
        return 130
    logger.info("search summary", **summary)
    return 0
