"""Unit tests for the stylesheet and style preset resolution."""

import pytest
from reportlab.lib.pagesizes import A4, LETTER

from quire.contexts.intake.roles import (
    Body,
    Bullet,
    CompanyDateLine,
    Name,
    SectionHeader,
    Spacer,
    SpacerSize,
)
from quire.contexts.layout.defaults import DEFAULT_ROLE_STYLES, get_default_config
from quire.contexts.layout.stylesheet import (
    BlockStyle,
    apply_presets,
    build_stylesheet,
    load_style_presets,
)


class TestDefaultStylesheet:
    """Defaults match the house style."""

    @pytest.mark.unit
    def test_page_geometry(self):
        sheet = build_stylesheet()

        assert (sheet.page.width, sheet.page.height) == A4
        assert sheet.page.margin_top == 36
        assert sheet.page.margin_bottom == 36
        assert sheet.page.margin_left == 40
        assert sheet.page.content_width == A4[0] - 80

    @pytest.mark.unit
    def test_name_style(self):
        style = build_stylesheet().style_for(Name())

        assert style.font_size == 22
        assert style.bold
        assert style.centered
        assert style.uppercase
        assert style.margin_after == 8

    @pytest.mark.unit
    def test_section_header_has_rule(self):
        style = build_stylesheet().style_for(SectionHeader())

        assert style.rule
        assert style.rule_width == 1
        assert style.rule_gap == 3
        assert style.margin_before == 16
        assert style.leading == pytest.approx(11 * 1.4)

    @pytest.mark.unit
    def test_every_role_has_a_style(self):
        sheet = build_stylesheet()
        assert set(sheet.roles) == set(DEFAULT_ROLE_STYLES)

    @pytest.mark.unit
    def test_spacer_has_empty_style_and_fixed_heights(self):
        sheet = build_stylesheet()

        assert sheet.style_for(Spacer(size=SpacerSize.SMALL)) == BlockStyle()
        assert sheet.spacer_height(SpacerSize.NONE) == 0
        assert sheet.spacer_height(SpacerSize.SMALL) == 2
        assert sheet.spacer_height(SpacerSize.MEDIUM) == 6

    @pytest.mark.unit
    def test_font_variants(self):
        sheet = build_stylesheet()

        assert sheet.font_name(sheet.style_for(Name())) == "Helvetica-Bold"
        assert sheet.font_name(sheet.style_for(CompanyDateLine())) == "Helvetica-Oblique"
        assert sheet.font_name(sheet.style_for(Body())) == "Helvetica"

    @pytest.mark.unit
    def test_bullet_text_width(self):
        sheet = build_stylesheet()

        assert sheet.text_width(Bullet()) == sheet.page.content_width - 10 - 6
        assert sheet.text_width(Body()) == sheet.page.content_width


class TestStylePresets:
    """Presets are loaded from YAML, flattened, and merged in order."""

    @pytest.mark.unit
    def test_presets_are_flattened(self):
        presets = load_style_presets()

        assert {"page_a4", "page_letter", "spacing_compact", "font_times"} <= set(presets)

    @pytest.mark.unit
    def test_page_preset(self):
        sheet = build_stylesheet(["page_letter"])
        assert (sheet.page.width, sheet.page.height) == LETTER

    @pytest.mark.unit
    def test_later_preset_wins(self):
        sheet = build_stylesheet(["font_times", "font_courier"])
        assert sheet.font_family == "Courier"

    @pytest.mark.unit
    def test_partial_override_keeps_other_fields(self):
        sheet = build_stylesheet(["spacing_compact"])
        style = sheet.style_for(SectionHeader())

        assert style.margin_before == 10
        assert style.bold
        assert style.rule
        assert sheet.spacer_height(SpacerSize.SMALL) == 1

    @pytest.mark.unit
    def test_unknown_preset(self):
        with pytest.raises(ValueError, match="Available presets"):
            build_stylesheet(["spacing_enormous"])

    @pytest.mark.unit
    def test_no_presets_returns_config_unchanged(self):
        config = get_default_config()
        assert apply_presets(config, []) is config

    @pytest.mark.unit
    def test_custom_preset_file(self, tmp_path):
        preset_file = tmp_path / "presets.yaml"
        preset_file.write_text("brand:\n  big_name:\n    roles:\n      name:\n        font_size: 30\n")

        sheet = build_stylesheet(["brand_big_name"], config_path=preset_file)

        assert sheet.style_for(Name()).font_size == 30
        assert sheet.style_for(Name()).bold

    @pytest.mark.unit
    def test_explicit_overrides_apply_last(self):
        sheet = build_stylesheet(
            ["font_times"], overrides={"roles": {"body": {"font_size": 9}}}
        )

        assert sheet.font_family == "Times-Roman"
        assert sheet.style_for(Body()).font_size == 9
        assert sheet.font_name(sheet.style_for(Name())) == "Times-Bold"

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "overrides, message",
        [
            ({"page": {"size": "TABLOID"}}, "Unknown page size"),
            ({"font": {"family": "Comic Sans"}}, "Unknown font family"),
        ],
    )
    def test_invalid_overrides(self, overrides, message):
        with pytest.raises(ValueError, match=message):
            build_stylesheet(overrides=overrides)


@pytest.mark.unit
def test_default_config_is_a_fresh_copy():
    first = get_default_config()
    first["roles"]["name"]["font_size"] = 99

    assert get_default_config()["roles"]["name"]["font_size"] == 22
