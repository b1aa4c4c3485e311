"""
Intake context logger.

Provides logging interface for intake context with automatic [intake] prefix.
All intake modules should import from this module, not from utils.logger directly.
"""

from typing import Mapping, Optional

from loguru import logger

CONTEXT_PREFIX = "[intake]"


# Wrapper functions with automatic [intake] prefix


def _log_info(message: str) -> None:
    """Log info message with [intake] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [intake] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level intake-specific logging helpers


def log_classification_summary(role_counts: Mapping[str, int]) -> None:
    """Log how many lines landed in each role."""
    total = sum(role_counts.values())
    _log_debug(f"Classified {total} lines")
    for role, count in sorted(role_counts.items()):
        _log_debug(f"  {role}: {count}")


def log_split_result(
    resume_count: int, trailing_count: int, trigger: Optional[str], trigger_index: Optional[int]
) -> None:
    """Log where the resume ends and appended job description text begins."""
    if trigger is None:
        _log_debug(f"No job description trigger found; {resume_count} resume lines")
        return
    _log_info(f"Job description text starts at line {trigger_index} (trigger: '{trigger}')")
    _log_debug(f"  resume lines: {resume_count}, trailing lines: {trailing_count}")
