"""
Declarative backend: reportlab platypus.

Blocks become flowables in a story (Paragraph, HRFlowable, Spacer) and
a BaseDocTemplate with a single unpadded frame lays them out and breaks pages.
Height estimates from the layout engine are advisory here; platypus measures
the flowables itself.
"""

from io import BytesIO
from typing import List, Optional
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER, TA_LEFT
from reportlab.lib.styles import ParagraphStyle
from reportlab.platypus import (
    BaseDocTemplate,
    Flowable,
    Frame,
    HRFlowable,
    PageBreak,
    PageTemplate,
    Paragraph,
    Spacer,
)

from quire.contexts.intake.roles import LineRole
from quire.contexts.layout.sink import Sink
from quire.contexts.layout.stylesheet import BlockStyle, StyleSheet


class DeclarativeSink(Sink):
    """Collects a platypus story and builds it on finish()."""

    manual_pagination = False

    def __init__(self, stylesheet: StyleSheet, title: str = ""):
        self.stylesheet = stylesheet
        self.title = title
        self.story: List[Flowable] = []

    def paragraph_style(
        self, name: str, style: BlockStyle, space_after: Optional[float] = None
    ) -> ParagraphStyle:
        return ParagraphStyle(
            name=name,
            fontName=self.stylesheet.font_name(style),
            fontSize=style.font_size,
            leading=style.leading,
            alignment=TA_CENTER if style.centered else TA_LEFT,
            spaceBefore=style.margin_before,
            spaceAfter=style.margin_after if space_after is None else space_after,
        )

    def emit_text(self, role: LineRole, text: str, style: BlockStyle, height: float) -> None:
        # The rule flowable carries the trailing margin for underlined roles
        space_after = 0 if style.rule else None
        self.story.append(
            Paragraph(escape(text), self.paragraph_style(role.style_key, style, space_after))
        )

    def emit_bullet(self, marker: str, text: str, style: BlockStyle, height: float) -> None:
        # Hanging indent with the marker in the gutter, so long bullets split across pages
        indent = self.stylesheet.marker_width + self.stylesheet.marker_gap
        bullet_style = self.paragraph_style("bullet", style)
        bullet_style.leftIndent = indent
        bullet_style.bulletIndent = 0
        bullet_style.bulletFontName = bullet_style.fontName
        bullet_style.bulletFontSize = style.font_size
        self.story.append(Paragraph(escape(text), bullet_style, bulletText=marker))

    def emit_rule(self, style: BlockStyle) -> None:
        self.story.append(
            HRFlowable(
                width="100%",
                thickness=style.rule_width,
                color=colors.black,
                spaceBefore=style.rule_gap,
                spaceAfter=style.margin_after,
            )
        )

    def emit_spacer(self, height: float) -> None:
        self.story.append(Spacer(1, height))

    def page_break(self) -> None:
        self.story.append(PageBreak())

    def finish(self) -> bytes:
        page = self.stylesheet.page
        buffer = BytesIO()
        # Zero padding keeps the frame exactly as wide as the stylesheet content width
        frame = Frame(
            page.margin_left,
            page.margin_bottom,
            page.content_width,
            page.height - page.margin_top - page.margin_bottom,
            leftPadding=0,
            rightPadding=0,
            topPadding=0,
            bottomPadding=0,
        )
        doc = BaseDocTemplate(
            buffer,
            pagesize=(page.width, page.height),
            topMargin=page.margin_top,
            bottomMargin=page.margin_bottom,
            leftMargin=page.margin_left,
            rightMargin=page.margin_right,
            title=self.title,
            creator="quire",
        )
        doc.addPageTemplates([PageTemplate(id="resume", frames=[frame])])
        # An empty story still produces a single blank page
        doc.build(self.story or [Spacer(1, 0)])
        return buffer.getvalue()
