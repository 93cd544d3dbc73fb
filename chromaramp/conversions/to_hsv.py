import numpy as np
from numpy import ndarray as NDArray
from typing import Tuple

from ..types.format_type import max_non_hue, FormatType, HUE_360

_RGB_MAX = max_non_hue[FormatType.INT]
_PERCENT = max_non_hue[FormatType.PERCENTAGE]


def unit_rgb_to_hsv(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Standard six-branch RGB to HSV on unit-interval channels.

    Input:
        r, g, b ∈ [0, 1]

    Output:
        h ∈ [0, 360), 0 for greys
        s ∈ [0, 1]
        v ∈ [0, 1]
    """
    mx = max(r, g, b)
    mn = min(r, g, b)
    diff = mx - mn

    h = 0.0
    s = 0.0 if mx == 0 else diff / mx
    v = mx

    if diff != 0:
        # Ties resolve in r, g, b order
        if mx == r:
            h = ((g - b) / diff + (6 if g < b else 0)) / 6
        elif mx == g:
            h = ((b - r) / diff + 2) / 6
        else:
            h = ((r - g) / diff + 4) / 6

    return h * HUE_360, s, v


def rgb_to_hsv(r: int, g: int, b: int) -> Tuple[float, float, float]:
    """
    Integer RGB (0-255) to HSV with saturation and value as percentages.

    >>> rgb_to_hsv(255, 0, 0)
    (0.0, 100.0, 100.0)
    """
    h, s, v = unit_rgb_to_hsv(r / _RGB_MAX, g / _RGB_MAX, b / _RGB_MAX)
    return h, s * _PERCENT, v * _PERCENT


def np_unit_rgb_to_hsv(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized unit_rgb_to_hsv.

    Args:
        r, g, b: array-like or scalar, [0,1]

    Returns:
        hsv: array of shape (..., 3): (hue [0,360), saturation [0,1], value [0,1])
    """
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    mx = np.maximum.reduce([r, g, b])
    mn = np.minimum.reduce([r, g, b])
    diff = mx - mn

    grey = diff == 0
    safe_diff = np.where(grey, 1.0, diff)

    h = np.select(
        [mx == r, mx == g],
        [
            ((g - b) / safe_diff + np.where(g < b, 6, 0)) / 6,
            ((b - r) / safe_diff + 2) / 6,
        ],
        default=((r - g) / safe_diff + 4) / 6,
    )
    h = np.where(grey, 0.0, h)

    s = np.zeros_like(mx)
    mask = mx > 0
    s[mask] = diff[mask] / mx[mask]

    return np.stack([h * HUE_360, s, mx], axis=-1)


def np_rgb_to_hsv(rgb: NDArray) -> NDArray:
    """Vectorized rgb_to_hsv on an (..., 3) integer array; s and v in percent."""
    rgb = np.asarray(rgb, dtype=float) / _RGB_MAX
    hsv = np_unit_rgb_to_hsv(rgb[..., 0], rgb[..., 1], rgb[..., 2])
    hsv[..., 1:] *= _PERCENT
    return hsv
