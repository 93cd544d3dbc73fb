import warnings

import numpy as np
import pytest

from chromaramp.conversions import rgb_to_hsv, hex_to_rgb, rgb_to_hex, is_hex_color
from chromaramp.colors import ColorRGB
from chromaramp.exceptions import InvalidAnchorError, InvalidConfigurationError
from chromaramp.palette import (
    PaletteGenerator,
    GenerationConfig,
    InterpolationMode,
    EdgeAnchorWarning,
    Palette,
)
from chromaramp.samples import BRAND_PALETTE_AXES, BRAND_RGB, BRAND_HEX

ANCHOR_COLORS = [
    BRAND_RGB,
    (255, 0, 0),
    (30, 200, 90),
    (120, 40, 180),
    (240, 200, 60),
    (20, 60, 90),
]


def hsv_of(code):
    return rgb_to_hsv(*hex_to_rgb(code))


def hue_tolerance(code):
    # each channel is off by at most 0.5 after rounding; the hue error shrinks with chroma
    r, g, b = hex_to_rgb(code)
    chroma = max(r, g, b) - min(r, g, b)
    return 120 / (chroma - 2)


def hue_distance(a, b):
    d = abs(a - b) % 360
    return min(d, 360 - d)


def test_make_gradient_returns_nine_hex_codes(generator, brand_config):
    codes = generator.make_gradient(BRAND_RGB, 4, brand_config)

    assert isinstance(codes, list)
    assert len(codes) == 9
    for code in codes:
        assert len(code) == 7
        assert code.startswith("#")
        assert code == code.lower()
        assert is_hex_color(code)


def test_brand_scenario(generator, brand_config):
    palette = generator.generate(BRAND_RGB, 4, brand_config)

    anchor = hex_to_rgb(palette[4])
    assert all(abs(a - b) <= 1 for a, b in zip(anchor, BRAND_RGB))
    assert palette.anchor_hex == palette[4]

    assert palette.saturations == BRAND_PALETTE_AXES["saturations"]
    assert palette.values == BRAND_PALETTE_AXES["values"]

    _, s0, v0 = hsv_of(palette[0])
    _, s8, v8 = hsv_of(palette[8])
    assert s0 == pytest.approx(8, abs=1)
    assert v0 == pytest.approx(95, abs=1)
    assert s8 == pytest.approx(98, abs=1)
    assert v8 == pytest.approx(20, abs=1)


def test_brand_anchor_matches_at_every_inner_index(generator, brand_config):
    for k in range(1, 8):
        anchor = hex_to_rgb(generator.make_gradient(BRAND_RGB, k, brand_config)[k])
        assert all(abs(a - b) <= 1 for a, b in zip(anchor, BRAND_RGB))


def test_anchor_fidelity_sweep(generator):
    # s and v are pinned as whole percents before converting back
    for rgb in ANCHOR_COLORS:
        for k in range(1, 8):
            anchor = hex_to_rgb(generator.make_gradient(rgb, k)[k])
            assert all(abs(a - b) <= 3 for a, b in zip(anchor, rgb))


def test_pure_color_anchor_is_exact(generator):
    assert generator.make_gradient((255, 0, 0), 3)[3] == "#ff0000"


def test_hue_preserved(generator):
    for rgb in ANCHOR_COLORS:
        hue, _, _ = rgb_to_hsv(*rgb)
        for k in range(1, 8):
            palette = generator.generate(rgb, k)
            assert palette.hue == hue
            for code in palette:
                h, _, _ = hsv_of(code)
                assert hue_distance(h, hue) <= hue_tolerance(code)


def test_saturation_linear_and_monotonic_with_power_100(generator):
    config = GenerationConfig.from_curve_power(100)
    for rgb in ANCHOR_COLORS:
        for k in range(1, 8):
            saturations = list(generator.generate(rgb, k, config).saturations)
            left, right = saturations[:k + 1], saturations[k:]
            assert left == sorted(left) or left == sorted(left, reverse=True)
            assert right == sorted(right) or right == sorted(right, reverse=True)


def test_value_linear_with_power_100(generator):
    palette = generator.generate((0, 0, 140), 4, GenerationConfig.from_curve_power(100))
    # v = 54.9 -> 55
    assert list(palette.values) == [95, 85, 75, 65, 55, 46, 37, 28, 20]


@pytest.mark.parametrize("power", [0, 50, 100, 200, 300])
def test_endpoints_stable(generator, power):
    config = GenerationConfig.from_curve_power(power)
    for rgb in ANCHOR_COLORS:
        for k in range(1, 8):
            palette = generator.generate(rgb, k, config)
            assert palette.saturations[0] == 8
            assert palette.saturations[8] == 98
            assert palette.values[0] == 95
            assert palette.values[8] == 20


def test_no_state_carries_between_calls(generator):
    first = generator.make_gradient(BRAND_RGB, 4)
    generator.make_gradient((255, 0, 0), 0)
    generator.make_gradient((10, 10, 10), 8)
    assert generator.make_gradient(BRAND_RGB, 4) == first


def test_idempotent(generator, brand_config):
    assert generator.make_gradient(BRAND_RGB, 3, brand_config) == generator.make_gradient(BRAND_RGB, 3, brand_config)


@pytest.mark.parametrize("anchor", [-1, 9, 4.0, True, "4", None])
def test_invalid_anchor(generator, anchor):
    with pytest.raises(InvalidAnchorError):
        generator.make_gradient(BRAND_RGB, anchor)


def test_numpy_integer_anchor(generator):
    assert generator.make_gradient(BRAND_RGB, np.int64(4)) == generator.make_gradient(BRAND_RGB, 4)


@pytest.mark.parametrize("anchor", [0, 8])
def test_edge_anchor_warns_and_fills(generator, anchor):
    with pytest.warns(EdgeAnchorWarning):
        palette = generator.generate(BRAND_RGB, anchor)

    assert len(palette) == 9
    assert all(s > 0 for s in palette.saturations)
    assert all(v > 0 for v in palette.values)
    assert palette.saturations[anchor] == 67
    assert palette.values[anchor] == 89
    other = 8 - anchor
    assert palette.saturations[other] == (98 if other == 8 else 8)
    assert palette.values[other] == (20 if other == 8 else 95)


def test_inner_anchor_does_not_warn(generator):
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        generator.make_gradient(BRAND_RGB, 1)


def test_accepts_color_instance(generator):
    assert generator.make_gradient(ColorRGB.from_hex(BRAND_HEX), 4) == generator.make_gradient(BRAND_RGB, 4)


def test_legacy_setters(generator):
    generator.set_power2(100)
    assert generator.config.value_exponent == 1.0
    assert generator.make_gradient(BRAND_RGB, 4) == generator.make_gradient(
        BRAND_RGB, 4, GenerationConfig(value_exponent=1.0)
    )

    before = generator.make_gradient(BRAND_RGB, 4)
    generator.set_power1(150)
    assert generator.config.saturation_exponent == 1.5
    # saturation axis stays linear
    assert generator.make_gradient(BRAND_RGB, 4) == before


def test_legacy_setter_rejects_negative(generator):
    with pytest.raises(InvalidConfigurationError):
        generator.set_power2(-10)
    assert generator.config.value_exponent == 2.0


def test_explicit_config_leaves_stored_config(generator):
    generator.make_gradient(BRAND_RGB, 4, GenerationConfig(value_exponent=3.0))
    assert generator.config == GenerationConfig()


def test_symmetric_mode_changes_right_side_only(generator, brand_config):
    legacy = generator.generate(BRAND_RGB, 4, brand_config)
    symmetric = generator.generate(
        BRAND_RGB, 4, GenerationConfig(value_exponent=2.0, interpolation=InterpolationMode.SYMMETRIC)
    )

    assert symmetric.values[:5] == legacy.values[:5]
    assert symmetric.values[5:8] != legacy.values[5:8]
    assert symmetric.values[8] == legacy.values[8] == 20
    assert symmetric.saturations == legacy.saturations


def test_palette_views(generator, brand_config):
    palette = generator.generate(BRAND_RGB, 4, brand_config)

    assert isinstance(palette, Palette)
    assert list(palette) == list(palette.hex_codes)
    assert palette.hsv()[0] == (palette.hue, 8, 95)

    rgb = palette.rgb()
    assert [rgb_to_hex(*c) for c in rgb] == list(palette.hex_codes)

    array = palette.to_array()
    assert array.shape == (9, 3)
    assert np.array_equal(array, np.array(rgb))
    assert palette.config == brand_config
