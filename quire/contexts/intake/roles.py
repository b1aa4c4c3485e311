"""
Line roles assigned by the classifier.

LineRole is a tagged variant: one frozen dataclass per role, each carrying a
class-level `kind` tag. Roles that need data (Spacer size, Bullet marker and
content) carry it as fields; the rest are empty markers.
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from quire.contexts.intake.normalizer import RawLine


class RoleKind(str, Enum):
    """Tag for each LineRole variant."""

    SPACER = "spacer"
    NAME = "name"
    CONTACT_INFO = "contact_info"
    HEADER_JOB_TITLE = "header_job_title"
    SECTION_HEADER = "section_header"
    SKILL_CATEGORY = "skill_category"
    JOB_TITLE = "job_title"
    COMPANY_DATE_LINE = "company_date_line"
    BULLET = "bullet"
    HEADING = "heading"
    BODY = "body"


class SpacerSize(str, Enum):
    """Vertical gap produced by a blank line."""

    NONE = "none"
    SMALL = "small"
    MEDIUM = "medium"


@dataclass(frozen=True)
class LineRole:
    """Base of the role variants."""

    kind: ClassVar[RoleKind]

    @property
    def style_key(self) -> str:
        """Key used to look up typography in the stylesheet."""
        return self.kind.value


@dataclass(frozen=True)
class Spacer(LineRole):
    kind: ClassVar[RoleKind] = RoleKind.SPACER
    size: SpacerSize = SpacerSize.NONE

    @property
    def style_key(self) -> str:
        return f"spacer_{self.size.value}"


@dataclass(frozen=True)
class Name(LineRole):
    kind: ClassVar[RoleKind] = RoleKind.NAME


@dataclass(frozen=True)
class ContactInfo(LineRole):
    kind: ClassVar[RoleKind] = RoleKind.CONTACT_INFO


@dataclass(frozen=True)
class HeaderJobTitle(LineRole):
    kind: ClassVar[RoleKind] = RoleKind.HEADER_JOB_TITLE


@dataclass(frozen=True)
class SectionHeader(LineRole):
    kind: ClassVar[RoleKind] = RoleKind.SECTION_HEADER


@dataclass(frozen=True)
class SkillCategory(LineRole):
    kind: ClassVar[RoleKind] = RoleKind.SKILL_CATEGORY


@dataclass(frozen=True)
class JobTitle(LineRole):
    kind: ClassVar[RoleKind] = RoleKind.JOB_TITLE


@dataclass(frozen=True)
class CompanyDateLine(LineRole):
    kind: ClassVar[RoleKind] = RoleKind.COMPANY_DATE_LINE


@dataclass(frozen=True)
class Bullet(LineRole):
    kind: ClassVar[RoleKind] = RoleKind.BULLET
    marker: str = "•"
    content: str = ""


@dataclass(frozen=True)
class Heading(LineRole):
    kind: ClassVar[RoleKind] = RoleKind.HEADING


@dataclass(frozen=True)
class Body(LineRole):
    kind: ClassVar[RoleKind] = RoleKind.BODY


@dataclass(frozen=True)
class ClassifiedLine:
    """A normalized line together with the role the classifier gave it."""

    line: RawLine
    role: LineRole

    @property
    def index(self) -> int:
        return self.line.index

    @property
    def text(self) -> str:
        return self.line.text

    @property
    def kind(self) -> RoleKind:
        return self.role.kind
