"""
Rendered document validation.

Reads a generated PDF back with pdfplumber and checks it against the layout
blocks it was drawn from: every non-spacer block's display text must appear,
in order, and resume content must come before appended job description text.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from quire.contexts.intake.splitter import Segment
from quire.contexts.layout.engine import LayoutBlock
from quire.contexts.rendering.logger import log_validation_result
from quire.utils.pdf_processing import PDFDocument, PDFSource, normalize_for_matching


@dataclass
class ValidationResult:
    """
    Result of document validation.

    Attributes:
        is_valid: Whether the document passes all validation checks
        page_count: Number of pages in the PDF (None if unreadable)
        missing: Display text of blocks not found in reading order
        issues: Human-readable summary of every failed check
    """

    is_valid: bool
    page_count: Optional[int] = None
    missing: List[str] = field(default_factory=list)
    issues: List[str] = field(default_factory=list)


Span = Tuple[int, int]


def _locate_blocks(haystack: str, blocks: Sequence[LayoutBlock]) -> List[Optional[Span]]:
    """
    Span of each block's text in the flattened document, searched in order.

    Returns None for blocks that cannot be found after the previous match.
    """
    spans: List[Optional[Span]] = []
    cursor = 0
    for block in blocks:
        needle = normalize_for_matching(block.text)
        if not needle:
            # Punctuation-only lines have nothing to match on
            spans.append((cursor, cursor))
            continue
        found = haystack.find(needle, cursor)
        if found == -1:
            spans.append(None)
            continue
        cursor = found + len(needle)
        spans.append((found, cursor))
    return spans


def _merge_spans(spans: Sequence[Span]) -> List[Span]:
    """Join spans that touch, so text running across adjacent lines counts as covered."""
    merged: List[Span] = []
    for lo, hi in sorted(spans):
        if merged and lo <= merged[-1][1]:
            merged[-1] = (merged[-1][0], max(hi, merged[-1][1]))
        else:
            merged.append((lo, hi))
    return merged


def _stray_occurrence(
    haystack: str, needle: str, covered: Sequence[Span], limit: int
) -> Optional[int]:
    """
    First position before `limit` where `needle` occurs outside every covered span.

    Text that merely repeats inside a resume line is not an occurrence.
    """
    start = haystack.find(needle)
    while start != -1 and start < limit:
        end = start + len(needle)
        if not any(lo <= start and end <= hi for lo, hi in covered):
            return start
        start = haystack.find(needle, start + 1)
    return None


def validate_document(pdf: PDFSource, blocks: Sequence[LayoutBlock]) -> ValidationResult:
    """
    Validate a rendered PDF against its layout blocks.

    Args:
        pdf: Path to the PDF or its bytes
        blocks: The blocks the PDF was rendered from

    Returns:
        ValidationResult with missing block text and issues

    Example:
        >>> result = validate_document(pdf_bytes, prepare_blocks(text, stylesheet))
        >>> result.is_valid
        True
    """
    document = PDFDocument(pdf)
    page_total = document.page_count or None
    issues: List[str] = []

    if page_total is None:
        issues.append("PDF could not be read")
        result = ValidationResult(is_valid=False, issues=issues)
        log_validation_result(result)
        return result

    haystack = normalize_for_matching("".join(document.text_lines()))
    content_blocks = [block for block in blocks if not block.is_spacer]
    spans = _locate_blocks(haystack, content_blocks)

    missing = [block.text for block, span in zip(content_blocks, spans) if span is None]
    if missing:
        issues.append(f"{len(missing)} of {len(content_blocks)} lines not found in reading order")

    resume_spans = [
        span
        for block, span in zip(content_blocks, spans)
        if span is not None and span[1] > span[0] and block.segment is Segment.RESUME
    ]
    trailing_needle = next(
        (
            normalize_for_matching(block.text)
            for block in content_blocks
            if block.segment is Segment.TRAILING and normalize_for_matching(block.text)
        ),
        None,
    )
    if resume_spans and trailing_needle:
        resume_end = max(hi for _, hi in resume_spans)
        if _stray_occurrence(
            haystack, trailing_needle, _merge_spans(resume_spans), resume_end
        ) is not None:
            issues.append("Job description text appears before the end of the resume")

    result = ValidationResult(
        is_valid=not issues,
        page_count=page_total,
        missing=missing,
        issues=issues,
    )
    log_validation_result(result)
    return result
