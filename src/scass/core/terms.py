import os
from typing import List, Optional

from scass.core.constants import DEFAULT_SEARCH_TERMS
from scass.core.errors import TermSourceError


def read_words_from_file(path: str) -> List[str]:
    """One term per line; blank lines are skipped, other lines kept verbatim."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            return [line.rstrip("\r\n") for line in f if line.rstrip("\r\n")]
    except (OSError, UnicodeDecodeError) as e:
        raise TermSourceError(path, e) from e


def split_list(raw: Optional[str]) -> List[str]:
    if not raw:
        return []
    return [item.strip() for item in raw.split(",") if item.strip()]


def resolve_terms(raw: Optional[str]) -> List[str]:
    """
    Turn the raw -w value into search terms:

    - nothing given       -> the built-in default terms
    - contains a comma    -> comma-separated list
    - an existing file    -> one term per line
    - anything else       -> a single literal term
    """
    if not raw:
        return list(DEFAULT_SEARCH_TERMS)
    if "," in raw:
        return split_list(raw)
    if os.path.isfile(raw):
        return read_words_from_file(raw)
    return [raw]


def parse_file_types(raw: Optional[str]) -> List[str]:
    """Extension allow-list from the raw -t value; entries keep their leading dot."""
    return split_list(raw)
