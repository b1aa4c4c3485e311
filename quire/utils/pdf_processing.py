"""
PDF processing utilities for reading rendered documents back.

Main class:
    PDFDocument: Parsed PDF with per-page text lines, fonts, and horizontal rules.

Helper functions:
    page_count: Quick page count without full extraction.
    normalize_for_matching: Text normalization for fuzzy matching.
    cluster_by_y_tolerance: Y-coordinate clustering for line detection.
"""

from dataclasses import dataclass, field
from io import BytesIO
from pathlib import Path
from typing import BinaryIO, Dict, List, Optional, Union

import pdfplumber
from PyPDF2 import PdfReader

PDFSource = Union[str, Path, bytes]


def _open_stream(source: PDFSource) -> Union[str, BinaryIO]:
    """Return something both pdfplumber and PyPDF2 accept."""
    if isinstance(source, (bytes, bytearray)):
        return BytesIO(source)
    return str(source)


def page_count(source: PDFSource) -> Optional[int]:
    """Get page count from PDF, or None if unreadable."""
    try:
        reader = PdfReader(_open_stream(source))
        return len(reader.pages)
    except Exception:
        return None


def normalize_for_matching(text: str) -> str:
    """Keep only lowercase alphanumeric characters for fuzzy text matching."""
    return "".join(c for c in text.lower() if c.isalnum())


def cluster_by_y_tolerance(chars: List, tolerance: float = 3.0) -> List[List]:
    """
    Group characters into lines by Y-coordinate proximity.

    Handles baseline shifts between bold/regular text that would otherwise split lines.
    """
    if not chars:
        return []

    sorted_chars = sorted(chars, key=lambda c: c["top"])

    lines = []
    current_line = [sorted_chars[0]]
    current_y = sorted_chars[0]["top"]

    for char in sorted_chars[1:]:
        if abs(char["top"] - current_y) <= tolerance:
            current_line.append(char)
        else:
            lines.append(current_line)
            current_line = [char]
            current_y = char["top"]

    if current_line:
        lines.append(current_line)

    return lines


@dataclass
class PDFLine:
    """One visual line of text with its horizontal extent and fonts."""

    text: str
    x0: float
    x1: float
    top: float
    fontnames: List[str] = field(default_factory=list)

    @property
    def center(self) -> float:
        return (self.x0 + self.x1) / 2

    def uses_font(self, fragment: str) -> bool:
        """True if any character on the line was set in a font containing `fragment`."""
        return any(fragment in name for name in self.fontnames)


@dataclass
class PDFPage:
    """Text lines and horizontal rules of a single page (top-down coordinates)."""

    number: int
    width: float
    height: float
    lines: List[PDFLine] = field(default_factory=list)
    rules: List[Dict[str, float]] = field(default_factory=list)


class PDFDocument:
    """
    Parsed PDF with line-level text extraction.

    Page data is lazily loaded and cached on first access.

    Args:
        source: Path to a PDF file or the PDF bytes themselves
        y_tolerance: Max Y-distance (points) to group characters as same line.

    Example:
        >>> pdf = PDFDocument(pdf_bytes)
        >>> for line in pdf.pages[0].lines:
        ...     print(line.text)
    """

    def __init__(self, source: PDFSource, y_tolerance: float = 3.0):
        if isinstance(source, (str, Path)) and not Path(source).exists():
            raise FileNotFoundError(f"PDF not found: {source}")

        self.source = source
        self.y_tolerance = y_tolerance
        self._pages_cache: Optional[List[PDFPage]] = None

    @property
    def page_count(self) -> int:
        return page_count(self.source) or 0

    @property
    def pages(self) -> List[PDFPage]:
        if self._pages_cache is None:
            self._pages_cache = self._extract_pages()
        return self._pages_cache

    def _extract_pages(self) -> List[PDFPage]:
        pages = []
        with pdfplumber.open(_open_stream(self.source)) as pdf:
            for number, page in enumerate(pdf.pages, start=1):
                rules = [
                    {"x0": ln["x0"], "x1": ln["x1"], "top": ln["top"]}
                    for ln in page.lines
                    if abs(ln["top"] - ln["bottom"]) < 0.5
                ]
                pages.append(
                    PDFPage(
                        number=number,
                        width=float(page.width),
                        height=float(page.height),
                        lines=self._chars_to_lines(page.chars),
                        rules=rules,
                    )
                )
        return pages

    def _chars_to_lines(self, chars: List) -> List[PDFLine]:
        """Convert character list to text lines with Y-clustering."""
        lines = []
        for char_objs in cluster_by_y_tolerance(chars, tolerance=self.y_tolerance):
            char_objs.sort(key=lambda c: c["x0"])
            visible = [c for c in char_objs if c["text"].strip()]
            if not visible:
                continue
            lines.append(
                PDFLine(
                    text="".join(c["text"] for c in char_objs).strip(),
                    x0=min(c["x0"] for c in visible),
                    x1=max(c["x1"] for c in visible),
                    top=min(c["top"] for c in visible),
                    fontnames=sorted({c.get("fontname", "") for c in visible}),
                )
            )
        return lines

    def text_lines(self) -> List[str]:
        """All text lines in reading order, across pages."""
        return [line.text for page in self.pages for line in page.lines]

    def find_line(self, text: str) -> Optional[PDFLine]:
        """First line whose normalized text contains `text` (normalized)."""
        needle = normalize_for_matching(text)
        for page in self.pages:
            for line in page.lines:
                if needle in normalize_for_matching(line.text):
                    return line
        return None
