import os
from typing import Iterable, List, TextIO

from scass.core.constants import (
    CONTEXT_LINE_PREFIX,
    LINE_NUMBER_WIDTH,
    MATCHED_LINE_PREFIX,
)
from scass.core.errors import OutputSinkError
from scass.core.models import Match
from scass.core.utils.logging import get_logger
from scass.core.utils.path import PathUtils


def format_match(match: Match, root_dir: str) -> str:
    """
    Render one match as a Markdown section:

        ### [src/a.py (Line 3)](src/a.py)
        ```py
                2: previous line
        >>      3: matched line
        ```
    """
    rel_path = PathUtils.to_relative(match.path, root_dir)
    display_text = f"{rel_path} (Line {match.line_number})"
    out: List[str] = [f"### [{display_text}]({rel_path})\n"]
    out.append(f"```{PathUtils.language_id(match.path)}\n")
    # Numbers come from the real window start rather than line - len(context)//2,
    # which mislabels windows clipped at the end of the file.
    for line_number, text in match.numbered_context():
        prefix = MATCHED_LINE_PREFIX if line_number == match.line_number else CONTEXT_LINE_PREFIX
        out.append(f"{prefix}{line_number:>{LINE_NUMBER_WIDTH}}: {text}\n")
    out.append("```\n\n")
    return "".join(out)


class ReportWriter:
    """Single consumer that appends one section per match to an open text sink."""

    def __init__(self, sink: TextIO, root_dir: str, logger=None):
        self.sink = sink
        # A single-file root is reported relative to its directory.
        self.root_dir = os.path.dirname(root_dir) if os.path.isfile(root_dir) else root_dir
        self.logger = logger or get_logger("scass.report_writer")
        self.written = 0

    def write_match(self, match: Match) -> None:
        self.sink.write(format_match(match, self.root_dir))
        self.written += 1

    def render(self, matches: Iterable[Match]) -> int:
        """Drain ``matches`` until it ends; returns the number of sections written."""
        for match in matches:
            self.write_match(match)
        self.sink.flush()
        return self.written


def render_report(matches: Iterable[Match], output_path: str, root_dir: str, logger=None) -> int:
    """
    Create ``output_path`` and render every match into it. Any I/O failure,
    on open or mid-write, raises OutputSinkError; a partial report is left on disk.
    """
    logger = logger or get_logger("scass.report_writer")
    try:
        sink = open(output_path, "w", encoding="utf-8", newline="")
    except OSError as e:
        raise OutputSinkError(output_path, e) from e
    try:
        with sink:
            writer = ReportWriter(sink, root_dir, logger=logger)
            written = writer.render(matches)
    except OSError as e:
        raise OutputSinkError(output_path, e) from e
    logger.debug("report written", path=output_path, matches=written)
    return written
