from .format_type import FormatType, max_non_hue, HUE_360
from .color_types import (
    RGBTuple,
    HSVTuple,
    HexColor,
    ColorSpace,
    ColorElement,
    element_to_array,
)
from .palette_types import (
    PALETTE_SIZE,
    LAST_INDEX,
    LEFT_X,
    RIGHT_X,
    LEFT_Y,
    RIGHT_Y,
    CURVE_POWER_MIN,
    CURVE_POWER_MAX,
    CURVE_POWER_SCALE,
)

__all__ = [
    "FormatType", "max_non_hue", "HUE_360",
    "RGBTuple", "HSVTuple", "HexColor", "ColorSpace", "ColorElement",
    "element_to_array",
    "PALETTE_SIZE", "LAST_INDEX",
    "LEFT_X", "RIGHT_X", "LEFT_Y", "RIGHT_Y",
    "CURVE_POWER_MIN", "CURVE_POWER_MAX", "CURVE_POWER_SCALE",
]
