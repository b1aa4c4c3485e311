"""
Integration tests for read-back validation of rendered PDFs.
"""

import pytest

from quire.contexts.intake.splitter import Segment
from quire.contexts.layout.stylesheet import build_stylesheet
from quire.contexts.rendering.renderer import prepare_blocks, render_blocks, render_document
from quire.contexts.rendering.validator import validate_document

BACKENDS = ["declarative", "procedural"]

ORDERING_ISSUE = "Job description text appears before the end of the resume"

SHARED_WORDS = "\n".join(
    [
        "JOHN SMITH",
        "john@x.com",
        "EXPERIENCE",
        "Met requirements of clients",
        "Built things",
        "Requirements:",
        "- Python",
    ]
)


@pytest.mark.integration
@pytest.mark.parametrize("backend", BACKENDS)
def test_resume_words_repeated_in_job_description_are_not_misordering(backend):
    stylesheet = build_stylesheet()
    blocks = prepare_blocks(SHARED_WORDS, stylesheet)
    assert [block.line.text for block in blocks if block.segment is Segment.TRAILING][0] == "Requirements:"

    result = validate_document(render_document(SHARED_WORDS, backend, stylesheet), blocks)

    assert result.is_valid, result.issues


@pytest.mark.integration
@pytest.mark.parametrize("backend", BACKENDS)
def test_job_description_drawn_first_is_reported(backend):
    stylesheet = build_stylesheet()
    blocks = prepare_blocks("Built data pipelines for 40 teams.\nJob Description\nBeta text.", stylesheet)
    assert [block.segment for block in blocks] == [Segment.RESUME, Segment.TRAILING, Segment.TRAILING]

    data = render_blocks(blocks[1:] + blocks[:1], backend, stylesheet)
    result = validate_document(data, blocks)

    assert not result.is_valid
    assert ORDERING_ISSUE in result.issues


@pytest.mark.integration
def test_unreadable_pdf_is_invalid():
    result = validate_document(b"not a pdf", prepare_blocks("Built things", build_stylesheet()))

    assert not result.is_valid
    assert result.page_count is None
    assert result.issues == ["PDF could not be read"]
