import numpy as np
import pytest

from chromaramp.conversions import convert, np_convert, FormatType


def test_convert_rgb_int_to_hsv_percentage():
    h, s, v = convert((74, 144, 226), "rgb", "hsv", FormatType.INT, FormatType.PERCENTAGE)
    assert h == pytest.approx(212.368, abs=1e-3)
    assert s == pytest.approx(67.2566, abs=1e-3)
    assert v == pytest.approx(88.6275, abs=1e-3)


def test_convert_hsv_percentage_to_rgb_int():
    assert convert((0.0, 100.0, 100.0), "hsv", "rgb", FormatType.PERCENTAGE, FormatType.INT) == (255, 0, 0)


def test_convert_rgb_int_to_float():
    r, g, b = convert((255, 0, 51), "rgb", "rgb", FormatType.INT, FormatType.FLOAT)
    assert (r, g, b) == pytest.approx((1.0, 0.0, 0.2))


def test_convert_hsv_int_scales_to_255():
    assert convert((255, 0, 0), "rgb", "hsv", FormatType.INT, FormatType.INT) == (0, 255, 255)


def test_convert_is_case_insensitive():
    assert convert((255, 0, 0), "RGB", "HSV", "int", "percentage") == convert(
        (255, 0, 0), "rgb", "hsv", FormatType.INT, FormatType.PERCENTAGE
    )


def test_convert_same_space_is_identity():
    color = (1, 2, 3)
    assert convert(color, "rgb", "rgb") is color


def test_convert_unknown_space():
    with pytest.raises(ValueError):
        convert((1, 2, 3), "hsl", "rgb")  # type: ignore[arg-type]


def test_convert_wrong_channel_count():
    with pytest.raises(ValueError):
        convert((1, 2), "rgb", "hsv")


def test_np_convert_array():
    rgb = np.array([[255, 0, 0], [0, 255, 0], [0, 0, 255]])
    hsv = np_convert(rgb, "rgb", "hsv", FormatType.INT, FormatType.PERCENTAGE)
    assert np.allclose(hsv[:, 0], [0, 120, 240])
    assert np.allclose(hsv[:, 1:], 100)

    back = np_convert(hsv, "hsv", "rgb", FormatType.PERCENTAGE, FormatType.INT)
    assert np.array_equal(back, rgb)
