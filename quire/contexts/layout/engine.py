"""
Layout Engine

Turns split, classified content into a flat list of LayoutBlocks: display text,
typography and an estimated height for every input line. The same blocks drive
every renderer through the Sink interface.

Pagination is a single rule applied before each block:

    current_y + block.height > page_height - margin_bottom  ->  page break

A block that fits is placed whole. A block placed on an empty page never
causes a break; if it is taller than the page, the sink continues its
wrapped lines on the following pages.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from reportlab.lib.utils import simpleSplit

from quire.contexts.intake.patterns import prettify_contact
from quire.contexts.intake.roles import ClassifiedLine, LineRole, RoleKind
from quire.contexts.intake.splitter import Segment, SplitContent
from quire.contexts.layout.sink import Sink
from quire.contexts.layout.stylesheet import BlockStyle, PageSetup, StyleSheet

# Markers the standard PDF fonts can encode; other glyphs are drawn as "•"
DRAWABLE_MARKERS = "•-*"
FALLBACK_MARKER = "•"


@dataclass(frozen=True)
class LayoutBlock:
    """
    One input line, ready to draw.

    Attributes:
        line: The classified source line
        segment: Resume or trailing (job description) content
        text: Display payload (bullet content for bullets, "" for spacers)
        marker: Drawn bullet glyph, None for non-bullets
        style: Typography for the line's role
        height: Estimated vertical extent in points, margins included
    """

    line: ClassifiedLine
    segment: Segment
    text: str
    marker: Optional[str]
    style: BlockStyle
    height: float

    @property
    def role(self) -> LineRole:
        return self.line.role

    @property
    def kind(self) -> RoleKind:
        return self.line.kind

    @property
    def source_text(self) -> str:
        """The normalized input line this block came from."""
        return self.line.text

    @property
    def is_spacer(self) -> bool:
        return self.kind is RoleKind.SPACER


@dataclass
class PageState:
    """
    Cursor for renderers that place blocks themselves.

    current_y is measured from the top edge of the page.
    """

    page_height: float
    margin_top: float
    margin_bottom: float
    current_y: Optional[float] = None
    page_index: int = 0

    def __post_init__(self):
        if self.current_y is None:
            self.current_y = self.margin_top

    @classmethod
    def for_page(cls, page: PageSetup) -> "PageState":
        return cls(
            page_height=page.height,
            margin_top=page.margin_top,
            margin_bottom=page.margin_bottom,
        )

    @property
    def bottom_limit(self) -> float:
        return self.page_height - self.margin_bottom

    @property
    def is_empty(self) -> bool:
        return self.current_y <= self.margin_top

    def overflows(self, height: float) -> bool:
        return self.current_y + height > self.bottom_limit

    def needs_break(self, height: float) -> bool:
        """True if a block of this height must move to a new page."""
        return self.overflows(height) and not self.is_empty

    def advance(self, height: float) -> None:
        self.current_y += height

    def break_page(self) -> None:
        self.current_y = self.margin_top
        self.page_index += 1


# =============================================================================
# BLOCK CONSTRUCTION
# =============================================================================


def display_text(classified: ClassifiedLine, style: BlockStyle) -> str:
    """Text as it should appear on the page."""
    role = classified.role
    if role.kind is RoleKind.SPACER:
        return ""
    if role.kind is RoleKind.BULLET:
        text = role.content
    elif role.kind is RoleKind.CONTACT_INFO:
        text = prettify_contact(classified.text)
    else:
        text = classified.text
    return text.upper() if style.uppercase else text


def display_marker(marker: str) -> str:
    return marker if marker in DRAWABLE_MARKERS else FALLBACK_MARKER


def wrap_text(text: str, role: LineRole, style: BlockStyle, stylesheet: StyleSheet) -> List[str]:
    """Split text into the lines a renderer will draw at this role's width."""
    if not text:
        return [""]
    lines = simpleSplit(
        text, stylesheet.font_name(style), style.font_size, stylesheet.text_width(role)
    )
    return lines or [""]


def estimate_height(
    text: str, role: LineRole, style: BlockStyle, stylesheet: StyleSheet
) -> float:
    """
    Estimated vertical extent of a block in points.

    margin_before + wrapped_lines * leading + margin_after, plus the rule and
    its gap for roles drawn with an underline. Spacers use their fixed height.
    """
    if role.kind is RoleKind.SPACER:
        return stylesheet.spacer_height(role.size)

    height = style.margin_before
    height += len(wrap_text(text, role, style, stylesheet)) * style.leading
    height += style.margin_after
    if style.rule:
        height += style.rule_gap + style.rule_width
    return height


def build_block(classified: ClassifiedLine, segment: Segment, stylesheet: StyleSheet) -> LayoutBlock:
    style = stylesheet.style_for(classified.role)
    text = display_text(classified, style)
    marker = None
    if classified.kind is RoleKind.BULLET:
        marker = display_marker(classified.role.marker)
    return LayoutBlock(
        line=classified,
        segment=segment,
        text=text,
        marker=marker,
        style=style,
        height=estimate_height(text, classified.role, style, stylesheet),
    )


def layout_blocks(content: SplitContent, stylesheet: StyleSheet) -> List[LayoutBlock]:
    """
    One LayoutBlock per classified line, resume lines first.

    Example:
        >>> blocks = layout_blocks(split_content(classified), build_stylesheet())
        >>> len(blocks) == len(classified)
        True
    """
    return [build_block(line, segment, stylesheet) for segment, line in content.ordered()]


# =============================================================================
# PAGINATION
# =============================================================================


def paginate(blocks: Sequence[LayoutBlock], page: PageSetup) -> List[List[LayoutBlock]]:
    """Group blocks into pages using the pagination rule."""
    state = PageState.for_page(page)
    pages: List[List[LayoutBlock]] = [[]]
    for block in blocks:
        if state.needs_break(block.height):
            state.break_page()
            pages.append([])
        pages[-1].append(block)
        state.advance(block.height)
    return pages


def emit_block(block: LayoutBlock, sink: Sink) -> None:
    if block.is_spacer:
        sink.emit_spacer(block.height)
    elif block.kind is RoleKind.BULLET:
        sink.emit_bullet(block.marker, block.text, block.style, block.height)
    else:
        sink.emit_text(block.role, block.text, block.style, block.height)
        if block.style.rule:
            sink.emit_rule(block.style)


def emit_blocks(blocks: Sequence[LayoutBlock], sink: Sink) -> bytes:
    """
    Drive a sink with every block and return the finished document.

    Page breaks are only issued to sinks that paginate manually; other sinks
    get the blocks as one continuous flow.
    """
    for block in blocks:
        if sink.manual_pagination and sink.state.needs_break(block.height):
            sink.page_break()
        emit_block(block, sink)
    return sink.finish()


@dataclass
class PageSummary:
    """Block count and used height of one paginated page."""

    number: int
    blocks: int
    used_height: float = 0.0
    kinds: List[str] = field(default_factory=list)


def summarize_pages(pages: Sequence[Sequence[LayoutBlock]]) -> List[PageSummary]:
    """Describe paginated output for logging."""
    return [
        PageSummary(
            number=number,
            blocks=len(page),
            used_height=sum(block.height for block in page),
            kinds=[block.kind.value for block in page],
        )
        for number, page in enumerate(pages, start=1)
    ]
