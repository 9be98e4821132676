import re
from dataclasses import dataclass
from typing import Iterable, List, Optional

from scass.core.utils.logging import get_logger


@dataclass(frozen=True)
class Pattern:
    """A compiled search term. Matching is a substring/regex search over one line."""
    term: str
    regex: re.Pattern
    case_sensitive: bool
    literal: bool

    @property
    def expression(self) -> str:
        return self.regex.pattern

    def matches(self, line: str) -> bool:
        return self.regex.search(line) is not None


def compile_pattern(term: str, case_sensitive: bool, as_regex: bool) -> Pattern:
    """Compile one term; raises re.error for a malformed regex."""
    expression = term if as_regex else re.escape(term)
    flags = 0 if case_sensitive else re.IGNORECASE
    return Pattern(
        term=term,
        regex=re.compile(expression, flags),
        case_sensitive=case_sensitive,
        literal=not as_regex,
    )


def compile_patterns(
        terms: Iterable[str],
        case_sensitive: bool,
        as_regex: bool,
        logger=None) -> List[Pattern]:
    logger = logger or get_logger("scass.patterns")
    patterns: List[Pattern] = []
    for term in terms:
        try:
            pattern = compile_pattern(term, case_sensitive, as_regex)
        except re.error as e:
            logger.warning("invalid pattern", term=term, error=str(e))
            continue
        logger.info("compiled pattern", expression=pattern.expression,
                    case_sensitive=case_sensitive)
        patterns.append(pattern)
    return patterns


def first_match(patterns: Iterable[Pattern], line: str) -> Optional[Pattern]:
    for pattern in patterns:
        if pattern.matches(line):
            return pattern
    return None
