import pytest

from brand_colors.colors import hex_to_hsl, relative_luminance
from brand_colors.contrast import contrast_ratio
from brand_colors.enforcement import adjust_for_contrast, enforce_contrast, validate_mapping
from brand_colors.mapping import BrandColorMapping, default_mapping


def test_passing_color_is_only_normalized():
    assert adjust_for_contrast("#000", "#FFFFFF", 4.5) == "#000000"


def test_gray_on_white_is_darkened_just_enough():
    adjusted = adjust_for_contrast("#CCCCCC", "#FFFFFF", 4.5)
    ratio = contrast_ratio(adjusted, "#FFFFFF")
    assert 4.5 <= ratio < 4.8
    assert relative_luminance(adjusted) < relative_luminance("#CCCCCC")


def test_gray_on_dark_background_is_lightened():
    adjusted = adjust_for_contrast("#333333", "#111111", 4.5)
    assert contrast_ratio(adjusted, "#111111") >= 4.5
    assert relative_luminance(adjusted) > relative_luminance("#333333")


def test_adjustment_preserves_hue():
    original = hex_to_hsl("#E94560")
    adjusted = adjust_for_contrast("#E94560", "#FFFFFF", 4.5)
    assert contrast_ratio(adjusted, "#FFFFFF") >= 4.5
    shifted = hex_to_hsl(adjusted)
    diff = abs(shifted.hue - original.hue)
    assert min(diff, 360 - diff) < 3
    assert shifted.lightness < original.lightness


def test_unreachable_floor_returns_pole():
    assert adjust_for_contrast("#777777", "#777777", 10) == "#000000"


def test_enforce_contrast_mutates_and_keeps_background():
    mapping = BrandColorMapping(
        background="#FFFFFF",
        text="#EEEEEE",
        primary="#FFEE00",
        accent="#F0F0F0",
        surface="#000000",
        surfaces=["#F5F5F5", "#FAFAFA"],
    )
    result = enforce_contrast(mapping)
    assert result is mapping
    assert mapping.background == "#FFFFFF"
    assert mapping.surfaces == ["#F5F5F5", "#FAFAFA"]
    assert mapping.surface == "#F5F5F5"
    assert validate_mapping(mapping).meets_requirements


def test_validate_default_mapping():
    validation = validate_mapping(default_mapping())
    assert validation.passes_aa
    assert validation.meets_requirements
    assert validation.text_background == pytest.approx(contrast_ratio("#171717", "#FFFFFF"))


def test_validate_reports_failures():
    mapping = BrandColorMapping(
        background="#FFFFFF",
        text="#EEEEEE",
        primary="#000000",
        accent="#000000",
        surface="#FFFFFF",
    )
    validation = validate_mapping(mapping)
    assert validation.passes_aa is False
    assert validation.meets_requirements is False
    assert validation.primary_background == pytest.approx(21.0)
