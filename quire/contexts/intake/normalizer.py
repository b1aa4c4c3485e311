"""
Line normalization for plain-text resumes.

Text arrives from file extraction or an AI rewrite step, so it carries
non-breaking spaces, mixed dash glyphs, and ragged whitespace. Everything is
normalized once here, before any classification rule sees it.
"""

import re
from dataclasses import dataclass
from typing import List

NBSP = "\u00a0"
EN_DASH = "\u2013"

_DASHES = re.compile("[\u2013\u2014]")


@dataclass(frozen=True)
class RawLine:
    """A single normalized line and its position in the source text."""

    index: int
    text: str

    @property
    def is_blank(self) -> bool:
        return not self.text


def normalize_line(text: str) -> str:
    """
    Normalize one line of resume text.

    - NBSP becomes a regular space
    - en and em dashes become a single en dash
    - leading/trailing whitespace is trimmed

    Examples:
        >>> normalize_line("\\u00a0Acme \\u2014 2020 ")
        'Acme \\u2013 2020'
    """
    return _DASHES.sub(EN_DASH, text.replace(NBSP, " ")).strip()


def split_lines(text: str) -> List[str]:
    """Split on newlines, treating CRLF and CR as LF. Empty input is one blank line."""
    return text.replace("\r\n", "\n").replace("\r", "\n").split("\n")


def to_raw_lines(text: str) -> List[RawLine]:
    """Normalize every line of `text` into an indexed RawLine."""
    return [RawLine(index=i, text=normalize_line(line)) for i, line in enumerate(split_lines(text))]
