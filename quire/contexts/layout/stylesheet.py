"""
Stylesheet and Style Preset Resolution

The stylesheet maps every line role to fixed typography (font size, weight,
alignment, margins, decorations) and holds the page geometry. It is built from
the defaults in defaults.py with named presets merged on top.

Presets are composable and can override each other:

Examples:
    # Letter paper with tighter spacing
    >>> build_stylesheet(["page_letter", "spacing_compact"])

    # Serif body font
    >>> build_stylesheet(["font_times"])
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Sequence

from dotenv import load_dotenv
from omegaconf import OmegaConf
from reportlab.lib.pagesizes import A4, LEGAL, LETTER

from quire.contexts.intake.roles import LineRole, RoleKind, SpacerSize
from quire.contexts.layout.defaults import get_default_config

load_dotenv()
STYLE_PRESETS_PATH = Path(
    os.getenv(
        "STYLE_PRESETS_PATH",
        Path(__file__).resolve().parents[2] / "configs" / "style_presets.yaml",
    )
)

PAGE_SIZES = {
    "A4": A4,
    "LETTER": LETTER,
    "LEGAL": LEGAL,
}

# Standard PDF font families and their (bold, italic) variants
FONT_VARIANTS = {
    "Helvetica": {
        (False, False): "Helvetica",
        (True, False): "Helvetica-Bold",
        (False, True): "Helvetica-Oblique",
        (True, True): "Helvetica-BoldOblique",
    },
    "Times-Roman": {
        (False, False): "Times-Roman",
        (True, False): "Times-Bold",
        (False, True): "Times-Italic",
        (True, True): "Times-BoldItalic",
    },
    "Courier": {
        (False, False): "Courier",
        (True, False): "Courier-Bold",
        (False, True): "Courier-Oblique",
        (True, True): "Courier-BoldOblique",
    },
}


@dataclass(frozen=True)
class BlockStyle:
    """
    Typography for one role.

    Attributes:
        font_size: Font size in points
        bold, italic: Font variant
        align: "left" or "center"
        margin_before, margin_after: Vertical space around the block
        line_height: Leading as a multiple of font_size
        uppercase: Display text is uppercased
        rule: Draw a horizontal rule under the text
        rule_width: Stroke width of the rule
        rule_gap: Space between the text and the rule
    """

    font_size: float = 11
    bold: bool = False
    italic: bool = False
    align: str = "left"
    margin_before: float = 0
    margin_after: float = 0
    line_height: float = 1.0
    uppercase: bool = False
    rule: bool = False
    rule_width: float = 0
    rule_gap: float = 0

    @property
    def leading(self) -> float:
        return self.font_size * self.line_height

    @property
    def centered(self) -> bool:
        return self.align == "center"


@dataclass(frozen=True)
class PageSetup:
    """Page geometry in points."""

    width: float
    height: float
    margin_top: float
    margin_bottom: float
    margin_left: float
    margin_right: float

    @property
    def content_width(self) -> float:
        return self.width - self.margin_left - self.margin_right

    @property
    def bottom_limit(self) -> float:
        """Lowest y (measured from the top) that content may reach."""
        return self.height - self.margin_bottom


@dataclass(frozen=True)
class StyleSheet:
    page: PageSetup
    font_family: str = "Helvetica"
    roles: Mapping[str, BlockStyle] = field(default_factory=dict)
    spacers: Mapping[str, float] = field(default_factory=dict)
    marker_width: float = 10
    marker_gap: float = 6

    def style_for(self, role: LineRole) -> BlockStyle:
        """Typography for a role; spacers get an empty style."""
        if role.kind is RoleKind.SPACER:
            return BlockStyle()
        return self.roles[role.kind.value]

    def spacer_height(self, size: SpacerSize) -> float:
        return float(self.spacers[size.value])

    def font_name(self, style: BlockStyle) -> str:
        return FONT_VARIANTS[self.font_family][(style.bold, style.italic)]

    @property
    def bullet_text_width(self) -> float:
        """Width of the content column in a bullet row."""
        return self.page.content_width - self.marker_width - self.marker_gap

    def text_width(self, role: LineRole) -> float:
        """Width available to a role's wrapped text."""
        if role.kind is RoleKind.BULLET:
            return self.bullet_text_width
        return self.page.content_width

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> "StyleSheet":
        """
        Build a stylesheet from a (merged) configuration dict.

        Raises:
            ValueError: If the page size or font family is unknown
        """
        page_config = config["page"]
        size_name = str(page_config["size"]).upper()
        if size_name not in PAGE_SIZES:
            raise ValueError(f"Unknown page size '{size_name}'. Available: {list(PAGE_SIZES)}")
        width, height = PAGE_SIZES[size_name]

        family = config["font"]["family"]
        if family not in FONT_VARIANTS:
            raise ValueError(f"Unknown font family '{family}'. Available: {list(FONT_VARIANTS)}")

        missing = [kind.value for kind in RoleKind if kind is not RoleKind.SPACER and kind.value not in config["roles"]]
        if missing:
            raise ValueError(f"Stylesheet config is missing role styles: {missing}")

        return cls(
            page=PageSetup(
                width=width,
                height=height,
                margin_top=float(page_config["margin_top"]),
                margin_bottom=float(page_config["margin_bottom"]),
                margin_left=float(page_config["margin_left"]),
                margin_right=float(page_config["margin_right"]),
            ),
            font_family=family,
            roles={name: BlockStyle(**values) for name, values in config["roles"].items()},
            spacers={name: float(value) for name, value in config["spacers"].items()},
            marker_width=float(config["bullet"]["marker_width"]),
            marker_gap=float(config["bullet"]["gap"]),
        )


def load_style_presets(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load style_presets.yaml and flatten to single-level dict.

    Collapses nested structure: spacing.compact -> spacing_compact

    Args:
        config_path: Optional path to config file (defaults to STYLE_PRESETS_PATH)

    Returns:
        Flattened dict mapping preset names to partial stylesheet configs
        Example: {"spacing_compact": {...}, "page_letter": {...}}
    """
    if config_path is None:
        config_path = STYLE_PRESETS_PATH

    nested = OmegaConf.to_container(OmegaConf.load(config_path), resolve=True)

    flattened = {}
    for category, presets in nested.items():
        for name, preset in presets.items():
            flattened[f"{category}_{name}"] = preset

    return flattened


def apply_presets(
    config: Dict[str, Any],
    preset_names: Sequence[str],
    config_path: Optional[Path] = None,
) -> Dict[str, Any]:
    """
    Merge named presets onto a stylesheet configuration.

    Presets are applied in order, with later presets overriding earlier ones.
    Nested keys are merged, so a preset only needs the values it changes.

    Raises:
        ValueError: If a preset is not found
    """
    if not preset_names:
        return config

    presets_dict = load_style_presets(config_path)

    merged = OmegaConf.create(config)
    for preset_name in preset_names:
        if preset_name not in presets_dict:
            available = list(presets_dict.keys())
            raise ValueError(f"Preset '{preset_name}' not found. Available presets: {available}")
        merged = OmegaConf.merge(merged, presets_dict[preset_name])

    return OmegaConf.to_container(merged, resolve=True)


def build_stylesheet(
    presets: Sequence[str] = (),
    overrides: Optional[Mapping[str, Any]] = None,
    config_path: Optional[Path] = None,
) -> StyleSheet:
    """
    Build a stylesheet from the defaults, named presets, and explicit overrides.

    Args:
        presets: Preset names (e.g., ["page_letter", "spacing_compact"])
        overrides: Partial config merged last (e.g., {"roles": {"name": {"font_size": 24}}})
        config_path: Optional path to style_presets.yaml

    Returns:
        Frozen StyleSheet
    """
    config = apply_presets(get_default_config(), presets, config_path)
    if overrides:
        config = OmegaConf.to_container(
            OmegaConf.merge(OmegaConf.create(config), OmegaConf.create(dict(overrides))),
            resolve=True,
        )
    return StyleSheet.from_config(config)
