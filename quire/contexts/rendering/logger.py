"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path
from typing import Optional, Sequence

from loguru import logger

from quire.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(log_dir: Path, backend: str, console_level: Optional[str] = None) -> Path:
    """
    Setup logger for rendering context.

    Configures loguru with provenance tracking and the backend in use.

    Args:
        log_dir: Directory for this rendering session
        backend: Backend name recorded in the provenance header
        console_level: Minimum level shown on stdout (default: QUIRE_LOG_LEVEL or INFO)

    Returns:
        Path to log file

    Example:
        from quire.contexts.rendering.logger import setup_rendering_logger

        log_file = setup_rendering_logger(log_dir, backend="declarative")
    """
    return _setup_logger(
        context_name="render",
        log_dir=log_dir,
        extra_provenance={"Backend": backend},
        console_level=console_level,
    )


# Wrapper functions with automatic [render] prefix


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [render] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_render_start(resume_name: str, input_file: Path, backend: str, presets: Sequence[str]) -> None:
    """Log start of rendering with context."""
    _log_info(f"Starting render: {resume_name} ({backend})")
    _log_debug(f"  Source: {input_file}")
    if presets:
        _log_debug(f"  Presets: {', '.join(presets)}")


def log_render_result(
    resume_name: str,
    result,  # RenderResult
    elapsed_time: float,
    verbose: bool = False,
) -> None:
    """
    Log render result with diagnostics.

    Args:
        resume_name: Resume identifier
        result: RenderResult from render_resume()
        elapsed_time: Time taken to render
        verbose: Show every error instead of the first few
    """
    if result.success:
        _log_success(f"{resume_name}: {result.page_count} page(s) ({elapsed_time:.2f}s)")
        if result.pdf_path:
            _log_debug(f"  PDF: {result.pdf_path}")
        return

    _log_error("Rendering failed.")
    _log_error(f"{resume_name}: {len(result.errors)} errors ({elapsed_time:.2f}s)")
    error_limit = len(result.errors) if verbose else 3
    for i, err in enumerate(result.errors[:error_limit], 1):
        # Use opt(raw=True) so multi-line error messages keep their formatting
        logger.opt(raw=True).error(f"  Error {i}: {err}\n")
    if len(result.errors) > error_limit:
        _log_error(f"  ... and {len(result.errors) - error_limit} more errors")


def log_pagination(page_summaries) -> None:
    """Log the estimated pagination (List[PageSummary])."""
    _log_debug(f"Estimated {len(page_summaries)} page(s)")
    for summary in page_summaries:
        _log_debug(
            f"  Page {summary.number}: {summary.blocks} blocks, {summary.used_height:.1f}pt"
        )


def log_validation_result(result) -> None:  # ValidationResult
    """Log output validation outcome."""
    if result.is_valid:
        _log_success(f"Validation passed ({result.page_count} page(s))")
        return

    _log_warning(f"Validation found {len(result.issues)} issue(s)")
    for issue in result.issues:
        _log_warning(f"  {issue}")
    for text in result.missing[:5]:
        _log_debug(f"  Missing: {text}")
    if len(result.missing) > 5:
        _log_debug(f"  ... and {len(result.missing) - 5} more missing lines")
