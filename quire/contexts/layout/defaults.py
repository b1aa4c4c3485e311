"""
Default values for the QUIRE stylesheet.

Provides the base configuration that style presets are merged onto.
All lengths are in PDF points (1/72 inch).
"""

from copy import deepcopy
from typing import Any, Dict

DEFAULT_PAGE = {
    "size": "A4",
    "margin_top": 36,
    "margin_bottom": 36,
    "margin_left": 40,
    "margin_right": 40,
}

DEFAULT_FONT = {
    "family": "Helvetica",
}

# Two-column bullet rows: fixed marker column, then a gap, then content
DEFAULT_BULLET = {
    "marker_width": 10,
    "gap": 6,
}

# Blank line gaps by SpacerSize
DEFAULT_SPACERS = {
    "none": 0,
    "small": 2,
    "medium": 6,
}

# Typography by role. Keys match RoleKind values.
DEFAULT_ROLE_STYLES = {
    "name": {
        "font_size": 22,
        "bold": True,
        "align": "center",
        "margin_after": 8,
        "uppercase": True,
    },
    "header_job_title": {
        "font_size": 12,
        "align": "center",
        "margin_after": 8,
    },
    "contact_info": {
        "font_size": 10,
        "align": "center",
        "margin_after": 10,
    },
    "section_header": {
        "font_size": 11,
        "bold": True,
        "margin_before": 16,
        "margin_after": 8,
        "line_height": 1.4,
        "uppercase": True,
        "rule": True,
        "rule_width": 1,
        "rule_gap": 3,
    },
    "skill_category": {
        "font_size": 11,
        "bold": True,
        "margin_before": 4,
        "margin_after": 2,
    },
    "job_title": {
        "font_size": 12,
        "bold": True,
        "margin_before": 6,
        "margin_after": 3,
    },
    "company_date_line": {
        "font_size": 11,
        "italic": True,
        "margin_before": 2,
        "margin_after": 4,
    },
    "bullet": {
        "font_size": 11,
        "margin_after": 2,
    },
    "heading": {
        "font_size": 12,
        "bold": True,
        "margin_before": 10,
        "margin_after": 5,
        "uppercase": True,
    },
    "body": {
        "font_size": 11,
        "margin_after": 4,
    },
}


def get_default_config() -> Dict[str, Any]:
    """
    Get the complete default stylesheet configuration.

    Returns a fresh nested dict each call so callers can merge presets onto it
    without touching the module-level defaults.
    """
    return {
        "page": deepcopy(DEFAULT_PAGE),
        "font": deepcopy(DEFAULT_FONT),
        "bullet": deepcopy(DEFAULT_BULLET),
        "spacers": deepcopy(DEFAULT_SPACERS),
        "roles": deepcopy(DEFAULT_ROLE_STYLES),
    }
