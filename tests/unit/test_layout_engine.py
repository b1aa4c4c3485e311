"""Unit tests for layout blocks, height estimates and pagination."""

from dataclasses import replace

import pytest

from quire.contexts.intake.classifier import classify_lines
from quire.contexts.intake.normalizer import to_raw_lines
from quire.contexts.intake.roles import RoleKind
from quire.contexts.intake.splitter import Segment, split_content
from quire.contexts.layout.engine import (
    PageState,
    layout_blocks,
    paginate,
    summarize_pages,
)
from quire.contexts.layout.stylesheet import build_stylesheet

SAMPLE_RESUME = """John Smith
john@x.com | (555) 123-4567 | Philadelphia, PA

SUMMARY
Engineer who ships.

EXPERIENCE
Senior Software Engineer
Acme Corp • Jan 2020 – Mar 2023
• Led a team of 5
▪ Cut build times in half

Job Description
We are hiring a builder.
"""


@pytest.fixture
def stylesheet():
    return build_stylesheet()


def _blocks(text, stylesheet):
    return layout_blocks(split_content(classify_lines(to_raw_lines(text))), stylesheet)


@pytest.mark.unit
def test_one_block_per_input_line(stylesheet):
    blocks = _blocks(SAMPLE_RESUME, stylesheet)
    assert len(blocks) == len(to_raw_lines(SAMPLE_RESUME))


@pytest.mark.unit
def test_lossless_content(stylesheet):
    blocks = _blocks(SAMPLE_RESUME, stylesheet)
    expected = [line.text for line in to_raw_lines(SAMPLE_RESUME) if not line.is_blank]

    assert [block.source_text for block in blocks if not block.is_spacer] == expected


@pytest.mark.unit
def test_resume_blocks_before_trailing_blocks(stylesheet):
    segments = [block.segment for block in _blocks(SAMPLE_RESUME, stylesheet)]
    first_trailing = segments.index(Segment.TRAILING)

    assert all(segment is Segment.TRAILING for segment in segments[first_trailing:])
    assert _blocks(SAMPLE_RESUME, stylesheet)[first_trailing].source_text == "Job Description"


@pytest.mark.unit
def test_display_text(stylesheet):
    blocks = {block.source_text: block for block in _blocks(SAMPLE_RESUME, stylesheet)}

    assert blocks["John Smith"].text == "JOHN SMITH"
    assert blocks["john@x.com | (555) 123-4567 | Philadelphia, PA"].text == (
        "john@x.com • (555) 123-4567 • Philadelphia • PA"
    )
    assert blocks["• Led a team of 5"].text == "Led a team of 5"
    assert blocks["• Led a team of 5"].marker == "•"


@pytest.mark.unit
def test_undrawable_marker_falls_back_to_bullet(stylesheet):
    block = _blocks(SAMPLE_RESUME, stylesheet)[10]

    assert block.role.marker == "▪"
    assert block.marker == "•"
    assert block.text == "Cut build times in half"


@pytest.mark.unit
def test_contact_line_with_bullets_is_left_alone(stylesheet):
    text = "Jane Doe\njane@x.com • 555-123-4567 | Remote"
    assert _blocks(text, stylesheet)[1].text == "jane@x.com • 555-123-4567 | Remote"


class TestHeightEstimates:
    """height = margin_before + lines * leading + margin_after (+ rule gap and width)"""

    @pytest.mark.unit
    def test_single_line_body(self, stylesheet):
        block = _blocks("\n" * 12 + "Engineer who ships.", stylesheet)[-1]

        assert block.kind is RoleKind.BODY
        assert block.height == pytest.approx(0 + 11 + 4)

    @pytest.mark.unit
    def test_section_header_includes_rule(self, stylesheet):
        block = _blocks("\n" * 12 + "EXPERIENCE", stylesheet)[-1]
        assert block.height == pytest.approx(16 + 11 * 1.4 + 8 + 3 + 1)

    @pytest.mark.unit
    def test_bullet(self, stylesheet):
        block = _blocks("\n" * 12 + "• Led a team of 5", stylesheet)[-1]
        assert block.height == pytest.approx(11 + 2)

    @pytest.mark.unit
    def test_spacers(self, stylesheet):
        blocks = _blocks("A line.\n\nB line.\n\nEXPERIENCE\n", stylesheet)
        spacers = [block.height for block in blocks if block.is_spacer]

        assert spacers == [2, 6, 0]

    @pytest.mark.unit
    def test_wrapped_lines_add_leading(self, stylesheet):
        long_line = "Delivered reliable services for many customers " * 8
        block = _blocks("\n" * 12 + long_line.strip(), stylesheet)[-1]
        wrapped = (block.height - 4) / 11

        assert wrapped >= 3
        assert wrapped == int(wrapped)


class TestPageState:
    @pytest.mark.unit
    def test_starts_at_top_margin(self, stylesheet):
        state = PageState.for_page(stylesheet.page)

        assert state.current_y == 36
        assert state.page_index == 0
        assert state.is_empty

    @pytest.mark.unit
    def test_overflow_rule(self, stylesheet):
        state = PageState.for_page(stylesheet.page)
        room = stylesheet.page.height - 36 - 36

        assert not state.overflows(room - 0.01)
        assert state.overflows(room + 0.1)

    @pytest.mark.unit
    def test_empty_page_never_breaks(self, stylesheet):
        state = PageState.for_page(stylesheet.page)
        assert not state.needs_break(10_000)

    @pytest.mark.unit
    def test_break_resets_cursor(self, stylesheet):
        state = PageState.for_page(stylesheet.page)
        state.advance(500)

        assert state.needs_break(400)
        state.break_page()

        assert state.current_y == 36
        assert state.page_index == 1


class TestPaginate:
    @pytest.mark.unit
    def test_breaks_between_blocks(self, stylesheet):
        text = "\n".join(f"Line number {n}." for n in range(60))
        pages = paginate(_blocks(text, stylesheet), stylesheet.page)

        # 15pt per body line; 769.9pt of usable height fits 51
        assert [len(page) for page in pages] == [51, 9]

    @pytest.mark.unit
    def test_pages_preserve_order(self, stylesheet):
        text = "\n".join(f"Line number {n}." for n in range(120))
        blocks = _blocks(text, stylesheet)
        pages = paginate(blocks, stylesheet.page)

        assert [block for page in pages for block in page] == blocks

    @pytest.mark.unit
    def test_oversized_block_starts_a_fresh_page(self, stylesheet):
        first, second = _blocks("First.\nSecond.", stylesheet)
        huge = replace(first, height=10_000)
        pages = paginate([second, huge, first], stylesheet.page)

        assert pages == [[second], [huge], [first]]

    @pytest.mark.unit
    def test_empty_input_is_one_page(self, stylesheet):
        pages = paginate(_blocks("", stylesheet), stylesheet.page)

        assert len(pages) == 1
        assert pages[0][0].is_spacer

    @pytest.mark.unit
    def test_page_summaries(self, stylesheet):
        text = "\n".join(f"Line number {n}." for n in range(60))
        summaries = summarize_pages(paginate(_blocks(text, stylesheet), stylesheet.page))

        assert [s.number for s in summaries] == [1, 2]
        assert summaries[1].used_height == pytest.approx(9 * 15)
