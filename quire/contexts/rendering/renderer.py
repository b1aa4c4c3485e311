"""
Resume Rendering Module

Turns resume text into PDF bytes:

    text -> normalized lines -> classified lines -> resume/trailing split
         -> layout blocks -> Sink backend -> PDF bytes

Two interchangeable backends consume the same layout blocks:
- declarative: reportlab platypus story, library-managed pagination
- procedural: reportlab canvas, explicit top-down cursor and page breaks
"""

import os
import time
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional, Sequence, Union

from dotenv import load_dotenv

from quire.contexts.intake.classifier import classify_lines
from quire.contexts.intake.normalizer import to_raw_lines
from quire.contexts.intake.roles import RoleKind
from quire.contexts.intake.splitter import split_content
from quire.contexts.layout.engine import (
    LayoutBlock,
    emit_blocks,
    layout_blocks,
    paginate,
    summarize_pages,
)
from quire.contexts.layout.sink import Sink
from quire.contexts.layout.stylesheet import StyleSheet, build_stylesheet
from quire.contexts.rendering.declarative import DeclarativeSink
from quire.contexts.rendering.exceptions import DocumentGenerationError
from quire.contexts.rendering.logger import (
    _log_debug,
    _log_info,
    log_pagination,
    log_render_result,
    log_render_start,
    setup_rendering_logger,
)
from quire.contexts.rendering.procedural import ProceduralSink
from quire.contexts.rendering.validator import ValidationResult, validate_document
from quire.utils.pdf_processing import page_count
from quire.utils.logger import session_dir
from quire.utils.timestamp import timestamped_filename, today

load_dotenv()

LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))
RESULTS_PATH = Path(os.getenv("RESULTS_PATH", "outs/results"))


class Backend(str, Enum):
    DECLARATIVE = "declarative"
    PROCEDURAL = "procedural"


DEFAULT_BACKEND = os.getenv("QUIRE_BACKEND", Backend.DECLARATIVE.value)


@dataclass
class RenderResult:
    """
    Result of rendering a resume file.

    Attributes:
        success: Whether a PDF was produced
        backend: Backend used
        pdf_path: Path to generated PDF (None if failed)
        page_count: Number of pages in generated PDF (None if not available)
        block_count: Number of layout blocks drawn
        errors: Error messages (empty on success)
        validation: Read-back validation of the PDF (None if skipped or failed)
    """

    success: bool
    backend: str
    pdf_path: Optional[Path] = None
    page_count: Optional[int] = None
    block_count: int = 0
    errors: List[str] = field(default_factory=list)
    validation: Optional[ValidationResult] = None


def resolve_backend(backend: Union[str, Backend]) -> Backend:
    """
    Raises:
        ValueError: If the backend name is unknown
    """
    try:
        return Backend(backend)
    except ValueError:
        available = [b.value for b in Backend]
        raise ValueError(f"Unknown backend '{backend}'. Available backends: {available}") from None


def make_sink(backend: Backend, stylesheet: StyleSheet, title: str = "") -> Sink:
    if backend is Backend.PROCEDURAL:
        return ProceduralSink(stylesheet, title=title)
    return DeclarativeSink(stylesheet, title=title)


def prepare_blocks(text: str, stylesheet: StyleSheet) -> List[LayoutBlock]:
    """
    Run the pure pipeline: normalize, classify, split and lay out.

    Every input line yields exactly one block; resume blocks come first.
    """
    classified = classify_lines(to_raw_lines(text))
    return layout_blocks(split_content(classified), stylesheet)


def document_title(blocks: Sequence[LayoutBlock]) -> str:
    """PDF title metadata: the candidate's name if one was found."""
    for block in blocks:
        if block.kind is RoleKind.NAME:
            return block.source_text
    return ""


def render_blocks(
    blocks: Sequence[LayoutBlock],
    backend: Union[str, Backend] = DEFAULT_BACKEND,
    stylesheet: Optional[StyleSheet] = None,
) -> bytes:
    """
    Draw prepared blocks with a backend.

    Raises:
        ValueError: If the backend name is unknown
        DocumentGenerationError: If the PDF library fails
    """
    backend = resolve_backend(backend)
    if stylesheet is None:
        stylesheet = build_stylesheet()

    if backend is Backend.PROCEDURAL:
        log_pagination(summarize_pages(paginate(blocks, stylesheet.page)))

    sink = make_sink(backend, stylesheet, title=document_title(blocks))
    try:
        return emit_blocks(blocks, sink)
    except Exception as e:
        raise DocumentGenerationError(
            "Failed to generate PDF document", backend=backend.value, original_error=e
        ) from e


def render_document(
    text: str,
    backend: Union[str, Backend] = DEFAULT_BACKEND,
    stylesheet: Optional[StyleSheet] = None,
) -> bytes:
    """
    Render resume text to PDF bytes.

    Args:
        text: Resume text, optionally followed by a pasted job description
        backend: "declarative" or "procedural"
        stylesheet: Typography and page setup (default: build_stylesheet())

    Returns:
        Complete PDF document bytes

    Raises:
        ValueError: If the backend name is unknown
        DocumentGenerationError: If the PDF library fails; no partial output is returned

    Example:
        >>> pdf_bytes = render_document(resume_text, backend="procedural")
        >>> pdf_bytes[:5]
        b'%PDF-'
    """
    resolve_backend(backend)
    if stylesheet is None:
        stylesheet = build_stylesheet()
    return render_blocks(prepare_blocks(text, stylesheet), backend, stylesheet)


def render_resume(
    input_path: Path,
    output_dir: Optional[Path] = None,
    backend: Union[str, Backend] = DEFAULT_BACKEND,
    presets: Sequence[str] = (),
    verbose: bool = False,
    validate: bool = True,
    overwrite: bool = True,
) -> RenderResult:
    """
    Render a resume text file with logging and organized output management.

    Orchestration function that wraps render_blocks() with a timestamped log
    session and file output.

    On success:
        - Writes PDF to output_dir (default: outs/results/YYYY-MM-DD/)
        - Creates symlink in log directory pointing to PDF
        - Reads the PDF back and validates it (unless validate=False)

    On failure:
        - Writes no PDF; the error is reported in RenderResult.errors

    Args:
        input_path: Path to the resume .txt file
        output_dir: Directory for the PDF (default: dated results directory)
        backend: "declarative" or "procedural"
        presets: Style preset names applied in order (e.g., ["page_letter"])
        verbose: Echo debug logs to the console and report every error
        validate: Validate the rendered PDF against its layout blocks
        overwrite: Replace an existing <stem>.pdf; otherwise write a timestamped filename

    Returns:
        RenderResult with success status and output details

    Raises:
        ValueError: If the input file is missing, or the backend or a preset is unknown
    """
    input_path = Path(input_path).resolve()
    if not input_path.exists():
        raise ValueError(f"Input file not found: {input_path}")

    backend = resolve_backend(backend)
    stylesheet = build_stylesheet(presets)
    resume_name = input_path.stem

    log_dir = session_dir(LOGS_PATH, "render")
    setup_rendering_logger(log_dir, backend.value, console_level="DEBUG" if verbose else None)
    log_render_start(resume_name, input_path, backend.value, presets)

    start_time = time.time()
    text = input_path.read_text(encoding="utf-8")
    blocks = prepare_blocks(text, stylesheet)

    try:
        pdf_bytes = render_blocks(blocks, backend, stylesheet)
    except DocumentGenerationError as e:
        result = RenderResult(
            success=False, backend=backend.value, block_count=len(blocks), errors=[str(e)]
        )
        log_render_result(resume_name, result, time.time() - start_time, verbose=verbose)
        return result

    results_dir = Path(output_dir).resolve() if output_dir else RESULTS_PATH / today()
    results_dir.mkdir(parents=True, exist_ok=True)
    final_pdf = results_dir / f"{resume_name}.pdf"
    if final_pdf.exists() and not overwrite:
        final_pdf = results_dir / timestamped_filename(resume_name, "pdf")
    final_pdf.write_bytes(pdf_bytes)
    _log_info(f"PDF saved to: {final_pdf}")

    # Create symlink in log directory pointing to final PDF
    pdf_symlink = log_dir / final_pdf.name
    if not pdf_symlink.exists():
        pdf_symlink.symlink_to(final_pdf.resolve())

    result = RenderResult(
        success=True,
        backend=backend.value,
        pdf_path=final_pdf,
        page_count=page_count(pdf_bytes),
        block_count=len(blocks),
    )

    if validate:
        result.validation = validate_document(pdf_bytes, blocks)
    else:
        _log_debug("Skipping output validation (validate=False)")

    log_render_result(resume_name, result, time.time() - start_time, verbose=verbose)
    return result
