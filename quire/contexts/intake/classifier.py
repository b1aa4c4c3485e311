"""
Line classification for plain-text resumes.

Each normalized line is assigned exactly one LineRole by walking a fixed,
priority-ordered rule table; the first rule that matches wins. Several rules
overlap on purpose (a known section title is also an all-caps heading, a skill
category also ends with a colon), so the order of RULES is part of the contract.

A rule only sees the line, its index, and its immediate neighbors. There is no
state carried from one line to the next.
"""

from collections import Counter
from dataclasses import dataclass
from typing import Callable, List, Sequence, Tuple

from quire.contexts.intake.logger import log_classification_summary
from quire.contexts.intake.normalizer import RawLine
from quire.contexts.intake.patterns import (
    ContactPatterns,
    EntryPatterns,
    HeaderTitlePatterns,
    HeadingPatterns,
    NamePatterns,
    has_contact_details,
    is_company_date_line,
    is_header_job_title,
    is_job_title,
    is_section_title,
)
from quire.contexts.intake.roles import (
    Body,
    Bullet,
    ClassifiedLine,
    CompanyDateLine,
    ContactInfo,
    HeaderJobTitle,
    Heading,
    JobTitle,
    LineRole,
    Name,
    SectionHeader,
    SkillCategory,
    Spacer,
    SpacerSize,
)


@dataclass(frozen=True)
class LineContext:
    """Everything a rule is allowed to look at."""

    text: str
    index: int
    prev: str = ""
    next: str = ""


@dataclass(frozen=True)
class Rule:
    name: str
    matches: Callable[[LineContext], bool]
    build: Callable[[LineContext], LineRole]


# =============================================================================
# RULE PREDICATES
# =============================================================================


def _spacer_size(ctx: LineContext) -> SpacerSize:
    if ctx.prev and ctx.next:
        if is_section_title(ctx.next) or is_job_title(ctx.next):
            return SpacerSize.MEDIUM
        return SpacerSize.SMALL
    # No visual gap at the edges of the document
    return SpacerSize.NONE


def _looks_like_name(ctx: LineContext) -> bool:
    if ctx.index > NamePatterns.MAX_INDEX:
        return False
    tokens = ctx.text.split()
    if not NamePatterns.MIN_TOKENS <= len(tokens) <= NamePatterns.MAX_TOKENS:
        return False
    if not all(NamePatterns.NAME_TOKEN.match(token) for token in tokens):
        return False
    # "Senior Software Engineer" is made of name-shaped tokens too
    return not is_header_job_title(ctx.text)


def _looks_like_header_title(ctx: LineContext) -> bool:
    return ctx.index <= HeaderTitlePatterns.MAX_INDEX and is_header_job_title(ctx.text)


def _looks_like_contact(ctx: LineContext) -> bool:
    return ctx.index <= ContactPatterns.MAX_INDEX and has_contact_details(ctx.text)


def _looks_like_skill_category(ctx: LineContext) -> bool:
    return (
        EntryPatterns.SKILL_CATEGORY.match(ctx.text) is not None
        and len(ctx.text) < EntryPatterns.SKILL_CATEGORY_MAX_LENGTH
    )


def _split_bullet(ctx: LineContext) -> Bullet:
    match = EntryPatterns.BULLET.match(ctx.text)
    return Bullet(marker=match.group(1), content=match.group(2).strip())


def _looks_like_heading(ctx: LineContext) -> bool:
    text = ctx.text
    is_all_caps = (
        text == text.upper()
        and HeadingPatterns.MIN_CAPS_LENGTH <= len(text) < HeadingPatterns.MAX_CAPS_LENGTH
    )
    is_caps_pattern = (
        HeadingPatterns.CAPS_HEADING.match(text) is not None
        and len(text) < HeadingPatterns.MAX_LENGTH
    )
    ends_with_colon = text.endswith(":") and len(text) < HeadingPatterns.MAX_LENGTH
    return is_all_caps or is_caps_pattern or ends_with_colon


# Priority order. Do not reorder without checking the overlap tests.
RULES: Tuple[Rule, ...] = (
    Rule("blank", lambda ctx: not ctx.text, lambda ctx: Spacer(size=_spacer_size(ctx))),
    Rule("name", _looks_like_name, lambda ctx: Name()),
    Rule("header_job_title", _looks_like_header_title, lambda ctx: HeaderJobTitle()),
    Rule("contact_info", _looks_like_contact, lambda ctx: ContactInfo()),
    Rule("section_header", lambda ctx: is_section_title(ctx.text), lambda ctx: SectionHeader()),
    Rule("skill_category", _looks_like_skill_category, lambda ctx: SkillCategory()),
    Rule("job_title", lambda ctx: is_job_title(ctx.text), lambda ctx: JobTitle()),
    Rule(
        "company_date_line",
        lambda ctx: is_company_date_line(ctx.text),
        lambda ctx: CompanyDateLine(),
    ),
    Rule("bullet", lambda ctx: EntryPatterns.BULLET.match(ctx.text) is not None, _split_bullet),
    Rule("heading", _looks_like_heading, lambda ctx: Heading()),
    Rule("body", lambda ctx: True, lambda ctx: Body()),
)


# =============================================================================
# PUBLIC API
# =============================================================================


def match_rule(ctx: LineContext) -> Rule:
    """Return the first rule in RULES that accepts the line."""
    for rule in RULES:
        if rule.matches(ctx):
            return rule
    raise AssertionError("body rule accepts every line")  # unreachable


def classify(text: str, index: int, prev_line: str = "", next_line: str = "") -> LineRole:
    """
    Classify one normalized line.

    Args:
        text: The normalized line
        index: Position of the line in the document (0-based)
        prev_line: The previous normalized line ("" at the start of the document)
        next_line: The next normalized line ("" at the end of the document)

    Returns:
        The LineRole built by the first matching rule

    Example:
        >>> classify("• Built scalable services", index=12)
        Bullet(marker='•', content='Built scalable services')
    """
    ctx = LineContext(
        text=text.strip(), index=index, prev=prev_line.strip(), next=next_line.strip()
    )
    return match_rule(ctx).build(ctx)


def classify_lines(lines: Sequence[RawLine]) -> List[ClassifiedLine]:
    """Classify every line using its document index and immediate neighbors."""
    classified = []
    for position, line in enumerate(lines):
        prev_line = lines[position - 1].text if position > 0 else ""
        next_line = lines[position + 1].text if position + 1 < len(lines) else ""
        role = classify(line.text, line.index, prev_line, next_line)
        classified.append(ClassifiedLine(line=line, role=role))

    log_classification_summary(Counter(c.kind.value for c in classified))
    return classified
