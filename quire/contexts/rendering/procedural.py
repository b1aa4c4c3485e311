"""
Procedural backend: reportlab pdfgen canvas.

Every block is drawn at an absolute position. The sink keeps a top-down cursor
(PageState) that moves down as lines are drawn, and the layout engine asks it
for page breaks before each block. A block taller than the remaining page
continues on the next one line by line.
"""

from io import BytesIO
from typing import List, Optional

from reportlab.pdfbase.pdfmetrics import getAscent
from reportlab.pdfgen import canvas

from quire.contexts.intake.roles import Bullet, LineRole
from quire.contexts.layout.engine import PageState, wrap_text
from quire.contexts.layout.sink import Sink
from quire.contexts.layout.stylesheet import BlockStyle, StyleSheet


class ProceduralSink(Sink):
    """Draws blocks directly on a canvas with explicit pagination."""

    manual_pagination = True

    def __init__(self, stylesheet: StyleSheet, title: str = ""):
        self.stylesheet = stylesheet
        self.page = stylesheet.page
        self.state = PageState.for_page(stylesheet.page)
        self.buffer = BytesIO()
        self.canvas = canvas.Canvas(self.buffer, pagesize=(self.page.width, self.page.height))
        self.canvas.setTitle(title)
        self.canvas.setCreator("quire")
        # Bottom of the most recent text block, where an underline rule hangs from
        self._text_bottom = self.state.current_y

    def _pdf_y(self, top_down_y: float) -> float:
        return self.page.height - top_down_y

    def _flow_lines(
        self, lines: List[str], x: float, style: BlockStyle, marker: Optional[str] = None
    ) -> None:
        """
        Draw wrapped lines down from the cursor and leave the cursor below the block.

        A line that would cross the bottom margin goes to the top of a new page, so
        blocks taller than a page continue where they left off. The marker is drawn
        beside the first line only.
        """
        font_name = self.stylesheet.font_name(style)
        ascent = getAscent(font_name, style.font_size)
        self.canvas.setFont(font_name, style.font_size)

        y = self.state.current_y + style.margin_before
        for i, line in enumerate(lines):
            if i and y + style.leading > self.state.bottom_limit:
                self.page_break()
                self.canvas.setFont(font_name, style.font_size)
                y = self.state.current_y
            baseline = self._pdf_y(y + ascent)
            if marker is not None and i == 0:
                self.canvas.drawString(self.page.margin_left, baseline, marker)
            if style.centered:
                self.canvas.drawCentredString(self.page.width / 2, baseline, line)
            else:
                self.canvas.drawString(x, baseline, line)
            y += style.leading

        self._text_bottom = y
        self.state.current_y = y + style.margin_after
        if style.rule:
            self.state.current_y += style.rule_gap + style.rule_width

    def emit_text(self, role: LineRole, text: str, style: BlockStyle, height: float) -> None:
        lines = wrap_text(text, role, style, self.stylesheet)
        self._flow_lines(lines, self.page.margin_left, style)

    def emit_bullet(self, marker: str, text: str, style: BlockStyle, height: float) -> None:
        lines = wrap_text(text, Bullet(marker=marker, content=text), style, self.stylesheet)
        content_x = self.page.margin_left + self.stylesheet.marker_width + self.stylesheet.marker_gap
        self._flow_lines(lines, content_x, style, marker=marker)

    def emit_rule(self, style: BlockStyle) -> None:
        y = self._pdf_y(self._text_bottom + style.rule_gap + style.rule_width / 2)
        self.canvas.setLineWidth(style.rule_width)
        self.canvas.line(self.page.margin_left, y, self.page.width - self.page.margin_right, y)

    def emit_spacer(self, height: float) -> None:
        self.state.advance(height)

    def page_break(self) -> None:
        self.canvas.showPage()
        self.state.break_page()
        self._text_bottom = self.state.current_y

    def finish(self) -> bytes:
        self.canvas.showPage()
        self.canvas.save()
        return self.buffer.getvalue()
