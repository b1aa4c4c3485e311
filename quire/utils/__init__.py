"""
Shared utilities for QUIRE.

Common functionality used across contexts:
- Logger setup with provenance
- Timestamps and output filenames
- PDF inspection
"""

from quire.utils.timestamp import now, now_exact, today

__all__ = ["now", "now_exact", "today"]
