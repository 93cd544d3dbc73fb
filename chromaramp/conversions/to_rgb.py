import numpy as np
from numpy import ndarray as NDArray
from typing import Tuple

from boundednumbers.functions import clamp

from ..types.format_type import max_non_hue, FormatType, HUE_360
from ..utils.num_utils import round_half_up, np_round_half_up

_RGB_MAX = max_non_hue[FormatType.INT]
_PERCENT = max_non_hue[FormatType.PERCENTAGE]


def hsv_to_unit_rgb(h: float, s: float, v: float) -> Tuple[float, float, float]:
    """
    Sector-based HSV to RGB.

    Input:
        h in degrees, wrapped into [0, 360)
        s, v ∈ [0, 1]

    Output:
        r, g, b ∈ [0, 1]
    """
    h = (h % HUE_360) / HUE_360

    c = v * s
    x = c * (1 - abs(((h * 6) % 2) - 1))
    m = v - c

    if h < 1 / 6:
        r, g, b = c, x, 0.0
    elif h < 2 / 6:
        r, g, b = x, c, 0.0
    elif h < 3 / 6:
        r, g, b = 0.0, c, x
    elif h < 4 / 6:
        r, g, b = 0.0, x, c
    elif h < 5 / 6:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x

    return r + m, g + m, b + m


def hsv_to_rgb(h: float, s: float, v: float) -> Tuple[int, int, int]:
    """
    HSV with percentage saturation/value to integer RGB (0-255).

    Saturation and value are clamped to [0, 100] first; channels are
    rounded half-up.
    """
    s = clamp(s, 0.0, _PERCENT) / _PERCENT
    v = clamp(v, 0.0, _PERCENT) / _PERCENT
    r, g, b = hsv_to_unit_rgb(h, s, v)
    return (
        round_half_up(r * _RGB_MAX),
        round_half_up(g * _RGB_MAX),
        round_half_up(b * _RGB_MAX),
    )


def np_hsv_to_unit_rgb(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """
    Vectorized hsv_to_unit_rgb.

    Returns:
        rgb: array of shape (..., 3) in [0, 1]
    """
    h = np.asarray(h, dtype=float)
    s = np.asarray(s, dtype=float)
    v = np.asarray(v, dtype=float)

    out_shape = np.broadcast(h, s, v).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    v = np.broadcast_to(v, out_shape)

    h = (h % HUE_360) / HUE_360

    c = v * s
    x = c * (1 - np.abs(((h * 6) % 2) - 1))
    m = v - c
    zero = np.zeros_like(c)

    sectors = [h < 1 / 6, h < 2 / 6, h < 3 / 6, h < 4 / 6, h < 5 / 6]
    r = np.select(sectors, [c, x, zero, zero, x], default=c)
    g = np.select(sectors, [x, c, c, x, zero], default=zero)
    b = np.select(sectors, [zero, zero, x, c, c], default=x)

    return np.stack([r + m, g + m, b + m], axis=-1)


def np_hsv_to_rgb(hsv: NDArray) -> NDArray:
    """Vectorized hsv_to_rgb on an (..., 3) array with s and v in percent."""
    hsv = np.asarray(hsv, dtype=float)
    s = np.clip(hsv[..., 1], 0.0, _PERCENT) / _PERCENT
    v = np.clip(hsv[..., 2], 0.0, _PERCENT) / _PERCENT
    rgb = np_hsv_to_unit_rgb(hsv[..., 0], s, v)
    return np_round_half_up(rgb * _RGB_MAX)
