from typing import Callable, Iterator, List, Sequence

from scass.core.errors import ChannelClosedError
from scass.core.models import Match
from scass.core.patterns import Pattern, first_match
from scass.core.utils.logging import get_logger


def _read_text_best_effort(path: str) -> str:
    with open(path, "rb") as f:
        raw = f.read()
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        # Preserve byte fidelity for non-UTF-8 text files.
        return raw.decode("latin-1")


def split_lines(text: str) -> List[str]:
    """
    Split on '\\n' only, dropping one trailing '\\r' per line. A final newline
    does not start another line, so an empty file has no lines at all.
    There is no line-length limit.
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def context_bounds(index: int, width: int, line_count: int) -> tuple[int, int]:
    """Half-open 0-based slice of the context window around line ``index``."""
    return max(0, index - width), min(line_count, index + width + 1)


class FileScanner:
    """
    Scans one file at a time for the first matching pattern on each line.

    Holds only read-only state, so a single instance is shared by every worker.
    """

    def __init__(self, patterns: Sequence[Pattern], context_lines: int = 0, logger=None):
        if context_lines < 0:
            raise ValueError("context_lines must be >= 0")
        self.patterns = tuple(patterns)
        self.context_lines = context_lines
        self.logger = logger or get_logger("scass.scanner")

    def iter_matches(self, path: str, lines: Sequence[str]) -> Iterator[Match]:
        for i, line in enumerate(lines):
            if first_match(self.patterns, line) is None:
                continue
            start, end = context_bounds(i, self.context_lines, len(lines))
            yield Match(
                path=path,
                line_number=i + 1,
                line=line,
                context=tuple(lines[start:end]),
                context_start=start + 1,
            )

    def scan(self, path: str, emit: Callable[[Match], None]) -> int:
        """
        Push every match of ``path`` to ``emit`` in line order and return the
        number of matches delivered. Read failures are logged, never raised.
        """
        self.logger.debug("scanning file", path=path)
        try:
            lines = split_lines(_read_text_best_effort(path))
        except OSError as e:
            self.logger.warning("file read failed", path=path, error=str(e))
            return 0

        delivered = 0
        for match in self.iter_matches(path, lines):
            self.logger.debug("match found", path=path, line=match.line_number, text=match.line)
            try:
                emit(match)
            except ChannelClosedError:
                self.logger.debug("result channel closed; scan stopped", path=path)
                break
            delivered += 1
        return delivered
