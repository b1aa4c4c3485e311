"""
Reusable patterns and vocabularies for resume line classification.

Pattern classes follow the convention from the templating context:
- Dataclasses with frozen=True for immutability
- Class-level constants for patterns
- Helper functions that use these patterns

Patterns are matched against normalized lines (see normalizer.normalize_line).
"""

import re
from dataclasses import dataclass

# =============================================================================
# VOCABULARIES
# =============================================================================

# Exact (uppercased) section titles. Substrings do not count: "EXPERIENCED" is not a section.
SECTION_TITLES = frozenset(
    {
        "SUMMARY",
        "SKILLS",
        "EXPERIENCE",
        "EDUCATION",
        "OBJECTIVE",
        "PROJECTS",
        "CERTIFICATIONS",
        "AWARDS",
        "PUBLICATIONS",
        "LANGUAGES",
        "INTERESTS",
        "REFERENCES",
    }
)

BULLET_MARKERS = "•▪▫‣⁃◦-*"

# Phrases marking the start of appended job description text (matched lowercased)
TRIGGER_KEYWORDS = (
    "job description",
    "position:",
    "role:",
    "company:",
    "key responsibilities",
    "requirements:",
)


# =============================================================================
# HEADER BLOCK PATTERNS
# =============================================================================


@dataclass(frozen=True)
class NamePatterns:
    """
    Patterns for the candidate's name at the top of the document.

    A name is 2-4 tokens made only of letters, periods, apostrophes and hyphens
    ("Mary-Jane O'Neil", "J. R. Smith").
    """

    NAME_TOKEN: re.Pattern = re.compile(r"^[A-Za-z.'-]+$")
    MIN_TOKENS: int = 2
    MAX_TOKENS: int = 4
    MAX_INDEX: int = 3


@dataclass(frozen=True)
class HeaderTitlePatterns:
    """
    Patterns for the professional title shown under the name.

    These aren't meant to be exhaustive; they cover the titles seen in
    tailored software resumes.
    """

    SENIORITY_DISCIPLINE_ROLE: re.Pattern = re.compile(
        r"\b(Senior|Lead|Principal|Staff)\s+"
        r"(Software|Full\s*Stack|Frontend|Backend|DevOps|Data|Machine\s*Learning|AI|ML)\s+"
        r"(Engineer|Developer|Architect|Scientist)\b",
        re.IGNORECASE,
    )

    DISCIPLINE_ROLE: re.Pattern = re.compile(
        r"\b(Software|Full\s*Stack|Frontend|Backend|DevOps|Data|Machine\s*Learning|AI|ML)\s+"
        r"(Engineer|Developer|Architect|Scientist)\b",
        re.IGNORECASE,
    )

    MANAGER: re.Pattern = re.compile(
        r"\b(Project|Product|Program|Engineering)\s+Manager\b", re.IGNORECASE
    )

    SPECIALIST: re.Pattern = re.compile(
        r"\b(UI|UX|Web|Mobile|Cloud|Security|Database|System|Network)\s+"
        r"(Developer|Engineer|Designer|Administrator|Architect)\b",
        re.IGNORECASE,
    )

    MAX_INDEX: int = 5


HEADER_TITLE_PATTERNS = [
    HeaderTitlePatterns.SENIORITY_DISCIPLINE_ROLE,
    HeaderTitlePatterns.DISCIPLINE_ROLE,
    HeaderTitlePatterns.MANAGER,
    HeaderTitlePatterns.SPECIALIST,
]


@dataclass(frozen=True)
class ContactPatterns:
    """
    Patterns for the contact line(s) in the header block.

    Supports:
    - Email addresses (any "@")
    - Phone numbers with at least 10 digits, separators allowed between digits
    - LinkedIn / GitHub profile URLs
    - City, ST (two-letter state code) - e.g., "Philadelphia, PA"
    - 5-digit ZIP codes
    """

    EMAIL: re.Pattern = re.compile(r"@")
    PHONE: re.Pattern = re.compile(r"(?:\d[\s().+-]*){10,}")
    PROFILE_URL: re.Pattern = re.compile(r"linkedin\.com|github\.com", re.IGNORECASE)
    CITY_STATE_ABBREV: re.Pattern = re.compile(r"[A-Z][a-z]+,\s*[A-Z]{2}\b")
    ZIP_CODE: re.Pattern = re.compile(r"\b\d{5}\b")

    # Pipes and commas are rewritten to " • " on display
    SEPARATOR: re.Pattern = re.compile(r"\s*[|,]\s*")

    MAX_INDEX: int = 8


CONTACT_PATTERNS = [
    ContactPatterns.EMAIL,
    ContactPatterns.PHONE,
    ContactPatterns.PROFILE_URL,
    ContactPatterns.CITY_STATE_ABBREV,
    ContactPatterns.ZIP_CODE,
]


# =============================================================================
# BODY STRUCTURE PATTERNS
# =============================================================================


@dataclass(frozen=True)
class EntryPatterns:
    """
    Patterns for job entries and inline headings in the resume body.
    """

    # "Technical Skills:" on a line of its own
    SKILL_CATEGORY: re.Pattern = re.compile(r"^[A-Z][A-Za-z\s]+:\s*$")
    SKILL_CATEGORY_MAX_LENGTH: int = 60

    # Whole-line job title, e.g. "Senior Full Stack Developer"
    JOB_TITLE: re.Pattern = re.compile(
        r"^(Senior\s+)?(Full\s*Stack|Frontend|Back\s*end|Backend|Software|Application)\s+"
        r"(Developer|Engineer)$",
        re.IGNORECASE,
    )

    # "Cognizant • Feb 2023 – Nov 2024 • Philadelphia, PA"
    COMPANY_MONTH_YEAR: re.Pattern = re.compile(
        r"^[A-Za-z0-9&().,\-/\s]+(\s*[•·]\s*|\s+-\s+)[A-Za-z]{3}\s+\d{4}"
    )
    # "ViroIntl - 2018 – 2023"
    COMPANY_YEAR: re.Pattern = re.compile(r"^[A-Za-z0-9&().,\-/\s]+(\s*[•·]\s*|\s+-\s+)\d{4}")

    BULLET: re.Pattern = re.compile(rf"^([{re.escape(BULLET_MARKERS)}])\s+(.*)$")


@dataclass(frozen=True)
class HeadingPatterns:
    """
    Fallback patterns for structural lines that are not known section titles.
    """

    CAPS_HEADING: re.Pattern = re.compile(r"^[A-Z][A-Z\s]+[A-Z]$")
    MIN_CAPS_LENGTH: int = 3
    MAX_CAPS_LENGTH: int = 49
    MAX_LENGTH: int = 50


# =============================================================================
# HELPERS
# =============================================================================


def is_section_title(line: str) -> bool:
    """True if the line is exactly one of the known section titles (any case)."""
    return line.upper() in SECTION_TITLES


def is_header_job_title(line: str) -> bool:
    """True if the line contains a recognizable professional title."""
    return any(pattern.search(line) for pattern in HEADER_TITLE_PATTERNS)


def is_job_title(line: str) -> bool:
    """True if the whole line is a job title."""
    return EntryPatterns.JOB_TITLE.match(line) is not None


def has_contact_details(line: str) -> bool:
    """True if any contact pattern occurs in the line."""
    return any(pattern.search(line) for pattern in CONTACT_PATTERNS)


def is_company_date_line(line: str) -> bool:
    """True if the line reads as 'Company <sep> Mon YYYY ...' or 'Company <sep> YYYY ...'."""
    return bool(
        EntryPatterns.COMPANY_MONTH_YEAR.match(line) or EntryPatterns.COMPANY_YEAR.match(line)
    )


def prettify_contact(line: str) -> str:
    """
    Rewrite pipe and comma separators as bullets for display.

    Lines that already use bullets are left alone. Commas are separators too,
    so "Austin, TX" becomes "Austin • TX".

    Examples:
        >>> prettify_contact("john@x.com | (555) 123-4567 | Austin, TX")
        'john@x.com • (555) 123-4567 • Austin • TX'
    """
    if "•" in line:
        return line
    return ContactPatterns.SEPARATOR.sub(" • ", line)
