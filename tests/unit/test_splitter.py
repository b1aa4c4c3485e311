"""Unit tests for separating resume content from appended job description text."""

import pytest

from quire.contexts.intake.classifier import classify_lines
from quire.contexts.intake.normalizer import to_raw_lines
from quire.contexts.intake.splitter import Segment, find_trigger, split_content


def _split(text):
    return split_content(classify_lines(to_raw_lines(text)))


@pytest.mark.unit
@pytest.mark.parametrize(
    "line, expected",
    [
        ("Job Description", "job description"),
        ("POSITION: Staff Engineer", "position:"),
        ("Key Responsibilities include", "key responsibilities"),
        ("Requirements: 5+ years", "requirements:"),
        ("Led the role migration", None),
    ],
)
def test_find_trigger(line, expected):
    assert find_trigger(line) == expected


@pytest.mark.unit
def test_no_trigger_keeps_everything_in_resume():
    split = _split("JOHN SMITH\nEXPERIENCE\n• Built things")

    assert len(split.resume) == 3
    assert len(split.trailing) == 0
    assert split.trigger is None


@pytest.mark.unit
def test_trigger_line_and_everything_after_is_trailing():
    text = "\n".join(
        [
            "JOHN SMITH",
            "EXPERIENCE",
            "• Built things",
            "Job Description",
            "We need a builder.",
            "EDUCATION",
        ]
    )
    split = _split(text)

    assert [line.text for line in split.resume] == ["JOHN SMITH", "EXPERIENCE", "• Built things"]
    assert [line.text for line in split.trailing] == [
        "Job Description",
        "We need a builder.",
        "EDUCATION",
    ]
    assert split.trigger == "job description"
    assert split.trailing.segment is Segment.TRAILING


@pytest.mark.unit
def test_split_is_one_directional():
    """Resume-looking lines after the trigger stay in the trailing segment."""
    split = _split("Summary line\nRole: Backend Engineer\nSKILLS\n• Python")

    assert [line.text for line in split.resume] == ["Summary line"]
    assert [line.text for line in split.trailing][-2:] == ["SKILLS", "• Python"]


@pytest.mark.unit
def test_ordered_yields_resume_before_trailing():
    split = _split("A line\nCompany: Acme\nAnother line")
    segments = [segment for segment, _ in split.ordered()]

    assert segments == [Segment.RESUME, Segment.TRAILING, Segment.TRAILING]


@pytest.mark.unit
def test_trigger_on_first_line_makes_everything_trailing():
    split = _split("Job description\nBuild things")

    assert len(split.resume) == 0
    assert len(split.trailing) == 2


@pytest.mark.unit
def test_custom_triggers():
    classified = classify_lines(to_raw_lines("Resume text\n--- appended ---\nMore"))
    split = split_content(classified, triggers=("--- appended",))

    assert [line.text for line in split.trailing] == ["--- appended ---", "More"]
