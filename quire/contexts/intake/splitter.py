"""
Separation of resume content from appended job description text.

Tailoring workflows often paste the target job description under the resume.
That text still has to appear in the document, but always after the resume.
The split is one-directional: once a trigger phrase is seen, that line and
everything after it is trailing content.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Sequence, Tuple

from quire.contexts.intake.logger import log_split_result
from quire.contexts.intake.patterns import TRIGGER_KEYWORDS
from quire.contexts.intake.roles import ClassifiedLine


class Segment(str, Enum):
    RESUME = "resume"
    TRAILING = "trailing"


@dataclass(frozen=True)
class ContentBlock:
    """An ordered run of classified lines from one segment."""

    segment: Segment
    lines: Tuple[ClassifiedLine, ...] = ()

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self) -> Iterator[ClassifiedLine]:
        return iter(self.lines)


@dataclass(frozen=True)
class SplitContent:
    """Resume lines and trailing (job description) lines."""

    resume: ContentBlock
    trailing: ContentBlock
    trigger: Optional[str] = None

    def blocks(self) -> Tuple[ContentBlock, ContentBlock]:
        """Both blocks in render order: resume first."""
        return (self.resume, self.trailing)

    def ordered(self) -> Iterator[Tuple[Segment, ClassifiedLine]]:
        """Yield (segment, line) pairs with every resume line before any trailing line."""
        for block in self.blocks():
            for line in block:
                yield block.segment, line


def find_trigger(text: str, triggers: Sequence[str] = TRIGGER_KEYWORDS) -> Optional[str]:
    """Return the first trigger phrase contained in `text` (case-insensitive), or None."""
    lowered = text.lower()
    for trigger in triggers:
        if trigger.lower() in lowered:
            return trigger
    return None


def split_content(
    lines: Sequence[ClassifiedLine], triggers: Sequence[str] = TRIGGER_KEYWORDS
) -> SplitContent:
    """
    Partition classified lines into resume and trailing sequences.

    Args:
        lines: Classified lines in document order
        triggers: Phrases that mark the start of job description text

    Returns:
        SplitContent whose trailing block starts at the first trigger line
        (empty if no trigger occurs)

    Example:
        >>> split = split_content(classify_lines(to_raw_lines(text)))
        >>> [line.text for line in split.trailing][:1]
        ['Job Description']
    """
    split_at = len(lines)
    trigger = None
    for position, line in enumerate(lines):
        trigger = find_trigger(line.text, triggers)
        if trigger is not None:
            split_at = position
            break

    resume = ContentBlock(Segment.RESUME, tuple(lines[:split_at]))
    trailing = ContentBlock(Segment.TRAILING, tuple(lines[split_at:]))

    trigger_index = lines[split_at].index if trigger is not None else None
    log_split_result(len(resume), len(trailing), trigger, trigger_index)
    return SplitContent(resume=resume, trailing=trailing, trigger=trigger)
