"""Timestamp formatting utilities."""

import re
from datetime import datetime
from typing import Optional


def now(moment: Optional[datetime] = None) -> str:
    """Compact local timestamp for directory names, e.g. '20251113_184540'."""
    return (moment or datetime.now()).strftime("%Y%m%d_%H%M%S")


def now_exact(moment: Optional[datetime] = None) -> str:
    """ISO 8601 timestamp with microseconds."""
    return (moment or datetime.now()).isoformat()


def today(moment: Optional[datetime] = None) -> str:
    """Date stamp for dated output directories, e.g. '2025-11-13'."""
    return (moment or datetime.now()).strftime("%Y-%m-%d")


def timestamped_filename(base_name: str, extension: str, moment: Optional[datetime] = None) -> str:
    """
    Build a filename that will not collide with earlier renders of the same resume.

    Colons and dots in the ISO timestamp are replaced so the result is safe on
    every filesystem.

    Examples:
        timestamped_filename("resume", "pdf", datetime(2025, 11, 13, 18, 45, 40, 572549))
        # "resume_2025-11-13T18-45-40-572549.pdf"
    """
    stamp = re.sub(r"[:.]", "-", now_exact(moment))
    return f"{base_name}_{stamp}.{extension.lstrip('.')}"
