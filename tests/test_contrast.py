import random

import pytest

from brand_colors.colors import hex_to_hsl, hsl_to_hex
from brand_colors.contrast import check_contrast, contrast_ratio


def test_contrast_ratio_black_on_white():
    assert contrast_ratio("#000000", "#FFFFFF") == pytest.approx(21.0)


def test_contrast_ratio_is_symmetric_and_bounded():
    forward = contrast_ratio("#E94560", "#0F3460")
    assert forward == pytest.approx(contrast_ratio("#0F3460", "#E94560"))
    assert 1.0 <= forward <= 21.0


def test_contrast_ratio_identical_colors():
    assert contrast_ratio("#336699", "#336699") == pytest.approx(1.0)


def test_check_contrast_black_on_white_is_aaa():
    result = check_contrast("#000000", "#FFFFFF")
    assert result.ratio == 21.0
    assert result.aa and result.aaa
    assert result.level == "AAA"


def test_check_contrast_normal_text_aa_only():
    result = check_contrast("#767676", "#FFFFFF")
    assert result.ratio == pytest.approx(4.54, abs=0.01)
    assert result.aa is True
    assert result.aaa is False
    assert result.level == "AA"


def test_check_contrast_large_text_thresholds():
    normal = check_contrast("#949494", "#FFFFFF", font_size=16)
    large = check_contrast("#949494", "#FFFFFF", font_size=24)
    assert normal.level == "fail"
    assert large.level == "AA"
    assert large.ratio == normal.ratio


@pytest.mark.parametrize(
    "color", ["#000000", "#FFFFFF", "#808080", "#E94560", "#0F3460", "#ABC", "#7F00FF", "#FFF5E1"]
)
def test_hsl_round_trip_keeps_contrast(color):
    assert contrast_ratio(color, hsl_to_hex(*hex_to_hsl(color))) < 1.1


def test_hsl_round_trip_over_hex_grid():
    for value in range(0, 0x1000000, 997):
        color = f"#{value:06X}"
        assert contrast_ratio(color, hsl_to_hex(*hex_to_hsl(color))) < 1.1, color


def test_contrast_ratio_symmetry_over_random_pairs():
    rng = random.Random(20240501)
    for _ in range(500):
        first = f"#{rng.randrange(0x1000000):06X}"
        second = f"#{rng.randrange(0x1000000):06X}"
        ratio = contrast_ratio(first, second)
        assert ratio == pytest.approx(contrast_ratio(second, first))
        assert 1.0 <= ratio <= 21.0 + 1e-9
