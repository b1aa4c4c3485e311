"""Unit tests for logging session setup."""

import pytest
from loguru import logger

from quire.utils import logger as session_logger
from quire.utils.logger import session_dir, setup_logger


@pytest.fixture
def fixed_clock(monkeypatch):
    monkeypatch.setattr(session_logger, "now", lambda: "20251114_123456")


@pytest.mark.unit
def test_session_dir_is_named_by_context_and_time(tmp_path, fixed_clock):
    assert session_dir(tmp_path, "render") == tmp_path / "render_20251114_123456"


@pytest.mark.unit
def test_session_dir_never_reuses_a_directory(tmp_path, fixed_clock):
    first = session_dir(tmp_path, "render")
    first.mkdir()
    second = session_dir(tmp_path, "render")
    second.mkdir()

    assert second.name == "render_20251114_123456_1"
    assert session_dir(tmp_path, "render").name == "render_20251114_123456_2"


@pytest.mark.unit
def test_setup_logger_writes_provenance_and_messages(tmp_path):
    log_file = setup_logger("render", tmp_path / "session", extra_provenance={"Backend": "procedural"})
    logger.debug("[render] drawing")
    logger.remove()

    content = log_file.read_text()
    assert log_file == tmp_path / "session" / "render.log"
    assert "Session" in content and ": render" in content
    assert "Backend" in content and ": procedural" in content
    assert "[render] drawing" in content
