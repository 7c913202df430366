"""Tests for page geometry configuration."""

import pytest

from config.page_config import DEFAULT_PAGE_CONFIG, PageConfig


class TestDerivedGeometry:
    def test_default_is_a4_portrait(self):
        assert DEFAULT_PAGE_CONFIG.page_width_mm == 210
        assert DEFAULT_PAGE_CONFIG.page_height_mm == 297

    def test_usable_height_subtracts_margins_header_and_footer(self, page_config):
        assert page_config.usable_height_mm == pytest.approx(249.0)
        assert page_config.content_width_mm == pytest.approx(186.0)

    def test_band_positions(self, page_config):
        assert page_config.content_top_mm == pytest.approx(26.0)
        assert page_config.footer_top_mm == pytest.approx(275.0)
        # usable area ends exactly where the footer band starts
        assert page_config.content_top_mm + page_config.usable_height_mm == pytest.approx(
            page_config.footer_top_mm
        )

    def test_config_is_immutable(self, page_config):
        with pytest.raises(AttributeError):
            page_config.margin_mm = 5


class TestValidation:
    @pytest.mark.parametrize(
        "field", ["margin_mm", "header_height_mm", "footer_height_mm", "section_gap_mm"]
    )
    def test_negative_lengths_rejected(self, field):
        with pytest.raises(ValueError, match=field):
            PageConfig(**{field: -1})

    def test_zero_gap_allowed(self):
        assert PageConfig(section_gap_mm=0).section_gap_mm == 0

    def test_render_scale_must_be_positive(self):
        with pytest.raises(ValueError, match="render_scale"):
            PageConfig(render_scale=0)

    def test_margins_wider_than_page_rejected(self):
        with pytest.raises(ValueError, match="content width"):
            PageConfig(margin_mm=105)

    def test_no_usable_height_rejected(self):
        with pytest.raises(ValueError, match="usable height"):
            PageConfig(page_height_mm=60, margin_mm=12, header_height_mm=14, footer_height_mm=22)


class TestFromMapping:
    def test_empty_overrides_give_defaults(self):
        assert PageConfig.from_mapping({}) == PageConfig()
        assert PageConfig.from_mapping(None) == PageConfig()

    def test_overrides_are_applied_as_floats(self):
        config = PageConfig.from_mapping({"margin_mm": "15", "section_gap_mm": 6})

        assert config.margin_mm == 15.0
        assert config.section_gap_mm == 6.0
        assert config.header_height_mm == PageConfig().header_height_mm

    def test_unknown_keys_are_ignored(self, caplog):
        with caplog.at_level("WARNING"):
            config = PageConfig.from_mapping({"orientation": "landscape", "margin_mm": 10})

        assert config.margin_mm == 10.0
        assert "orientation" in caplog.text

    def test_invalid_override_still_validated(self):
        with pytest.raises(ValueError):
            PageConfig.from_mapping({"render_scale": -2})


class TestNonFiniteValues:
    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    @pytest.mark.parametrize(
        "field", ["page_width_mm", "page_height_mm", "margin_mm", "section_gap_mm", "render_scale"]
    )
    def test_non_finite_values_rejected(self, field, value):
        with pytest.raises(ValueError, match="finite"):
            PageConfig(**{field: value})

    @pytest.mark.parametrize("text", ["nan", "inf", "-inf"])
    def test_non_finite_overrides_rejected(self, text):
        with pytest.raises(ValueError, match="finite"):
            PageConfig.from_mapping({"page_height_mm": text})


class TestMalformedOverrides:
    @pytest.mark.parametrize("value", [None, [1, 2], {"mm": 3}, "wide"])
    def test_non_numeric_value_names_the_key(self, value):
        with pytest.raises(ValueError, match="margin_mm"):
            PageConfig.from_mapping({"margin_mm": value})

    @pytest.mark.parametrize("overrides", [["margin_mm", 10], "margin_mm=10", 12])
    def test_non_mapping_overrides_rejected(self, overrides):
        with pytest.raises(ValueError, match="mapping"):
            PageConfig.from_mapping(overrides)
