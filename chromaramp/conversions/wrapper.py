import numpy as np
from typing import Callable, cast

from ..types.format_type import FormatType, max_non_hue
from ..types.color_types import ColorElement, element_to_array, ColorSpace
from ..utils.num_utils import np_round_half_up

from .to_rgb import np_hsv_to_unit_rgb
from .to_hsv import np_unit_rgb_to_hsv

CONVERT_NUMPY: dict[tuple[str, str], Callable[[np.ndarray, np.ndarray, np.ndarray], np.ndarray]] = {
    ("rgb", "hsv"): np_unit_rgb_to_hsv,
    ("hsv", "rgb"): np_hsv_to_unit_rgb,
}


def normalize(color: np.ndarray, space: str, fmt: FormatType) -> np.ndarray:
    maxval = max_non_hue[fmt]

    if space == "rgb":
        return color / maxval

    if space == "hsv":
        h = color[..., 0]
        s = color[..., 1] / maxval
        v = color[..., 2] / maxval
        return np.stack([h, s, v], axis=-1)

    raise ValueError(f"Unknown space: {space}")


def scale(color: np.ndarray, space: str, fmt: FormatType) -> np.ndarray:
    maxval = max_non_hue[fmt]

    if space == "rgb":
        scaled = color * maxval
        return np_round_half_up(scaled) if fmt == FormatType.INT else scaled

    if space == "hsv":
        h = color[..., 0]
        s = color[..., 1] * maxval
        v = color[..., 2] * maxval

        if fmt == FormatType.INT:
            return np_round_half_up(np.stack([h, s, v], axis=-1))

        return np.stack([h, s, v], axis=-1)

    raise ValueError(f"Unknown space: {space}")


def _convert_core(
    color: np.ndarray,
    from_space: str,
    to_space: str,
    input_fmt: FormatType,
    output_fmt: FormatType,
) -> np.ndarray:
    if color.shape[-1] != 3:
        raise ValueError(f"Expected 3 channels, got shape {color.shape}")

    # normalize → convert → scale
    base_norm = normalize(color, from_space, input_fmt)

    if from_space == to_space:
        converted = base_norm
    else:
        converted = CONVERT_NUMPY[(from_space, to_space)](
            base_norm[..., 0],
            base_norm[..., 1],
            base_norm[..., 2],
        )

    return scale(converted, to_space, output_fmt)


def convert(
    color: ColorElement,
    from_space: ColorSpace,
    to_space: ColorSpace,
    input_type: FormatType = FormatType.INT,
    output_type: FormatType = FormatType.INT,
) -> ColorElement:
    """
    Convert a single color between rgb and hsv in any FormatType.

    >>> convert((255, 0, 0), "rgb", "hsv", FormatType.INT, FormatType.PERCENTAGE)
    (0.0, 100.0, 100.0)
    """
    if from_space.lower() == to_space.lower() and input_type == output_type:
        return color  # No conversion needed
    color_array = element_to_array(color)
    result = _convert_core(
        color_array,
        from_space.lower(),
        to_space.lower(),
        FormatType(input_type),
        FormatType(output_type),
    )
    return tuple(v.item() for v in result.flat) if result.ndim == 1 else cast(ColorElement, result)


def np_convert(
    color: np.ndarray,
    from_space: ColorSpace,
    to_space: ColorSpace,
    input_type: FormatType = FormatType.INT,
    output_type: FormatType = FormatType.INT,
) -> np.ndarray:
    """Vectorized convert over an (..., 3) array."""
    if from_space.lower() == to_space.lower() and input_type == output_type:
        return color  # No conversion needed
    return _convert_core(
        np.asarray(color, dtype=float),
        from_space.lower(),
        to_space.lower(),
        FormatType(input_type),
        FormatType(output_type),
    )
