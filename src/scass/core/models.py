from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field

from scass.core.constants import DEFAULT_OUTPUT_FILE


class SearchOptions(BaseModel):
    model_config = ConfigDict(frozen=True)
    words: Tuple[str, ...]
    directory: str = "."
    file_types: Tuple[str, ...] = ()
    case_sensitive: bool = False
    use_regex: bool = False
    output_file: str = DEFAULT_OUTPUT_FILE
    context_lines: int = Field(default=0, ge=0)


class Match(BaseModel):
    """One matching line of one file, with the window of lines around it."""
    model_config = ConfigDict(frozen=True)
    path: str
    line_number: int = Field(ge=1)
    line: str
    context: Tuple[str, ...] = ()
    context_start: int = Field(default=1, ge=1)

    def numbered_context(self):
        """Yield ``(line_number, text)`` for every context line."""
        for offset, text in enumerate(self.context):
            yield self.context_start + offset, text
