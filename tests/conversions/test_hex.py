import pytest

from chromaramp.conversions import rgb_to_hex, hex_to_rgb, parse_hex, is_hex_color
from chromaramp.exceptions import HexParseError
from chromaramp.samples import samples_hex_rgb, invalid_hex


def test_rgb_to_hex_lowercase_padded():
    assert rgb_to_hex(74, 144, 226) == "#4a90e2"
    assert rgb_to_hex(0, 0, 0) == "#000000"
    assert rgb_to_hex(10, 11, 12) == "#0a0b0c"
    assert rgb_to_hex(255, 255, 255) == "#ffffff"


def test_rgb_to_hex_rounds_and_clamps():
    assert rgb_to_hex(9.5, 10.49, 254.6) == "#0a0aff"
    assert rgb_to_hex(-3, 300, 128) == "#00ff80"


def test_hex_to_rgb_samples():
    for text, expected in samples_hex_rgb.items():
        assert hex_to_rgb(text) == expected
        assert parse_hex(text) == expected
        assert is_hex_color(text)


def test_hex_to_rgb_falls_back_to_black():
    for text in invalid_hex:
        assert hex_to_rgb(text) == (0, 0, 0)
        assert not is_hex_color(text)


def test_hex_to_rgb_non_string_falls_back_to_black():
    assert hex_to_rgb(None) == (0, 0, 0)  # type: ignore[arg-type]
    assert hex_to_rgb(0x4A90E2) == (0, 0, 0)  # type: ignore[arg-type]


@pytest.mark.parametrize("text", invalid_hex)
def test_parse_hex_raises(text):
    with pytest.raises(HexParseError) as exc_info:
        parse_hex(text)
    assert exc_info.value.text == text


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        parse_hex("#zzzzzz")


def test_hex_round_trip():
    for r, g, b in [(0, 0, 0), (1, 2, 3), (74, 144, 226), (255, 128, 0), (255, 255, 255)]:
        assert hex_to_rgb(rgb_to_hex(r, g, b)) == (r, g, b)
